"""Tests for seed sources."""

import json

import pytest

from flashword.config import Config
from flashword.services import (
    CSVSeedSource,
    JSONSeedSource,
    SeedDataError,
    VocabularyStore,
    load_seed,
    seed_source_for,
)


def write_json(path, payload):
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return str(path)


def test_bundled_seed_has_ten_words():
    folders = load_seed()

    assert len(folders) == 1
    assert folders[0].id == 1
    assert folders[0].name == "Default Folder"
    assert len(folders[0].modules) == 1
    module = folders[0].modules[0]
    assert module.id == 1
    assert module.name == "Basic Vocabulary"
    assert [w.id for w in module.words] == list(range(1, 11))


def test_flat_word_list_uses_configured_names(tmp_path):
    path = write_json(tmp_path / "seed.json", {"words": [
        {"id": 3, "word": "gate", "translation": "cổng"},
    ]})
    config = Config(DEFAULT_FOLDER_NAME="Mặc định", DEFAULT_MODULE_NAME="Cơ bản")

    folders = load_seed(path, config)

    assert folders[0].name == "Mặc định"
    assert folders[0].modules[0].name == "Cơ bản"
    assert folders[0].modules[0].words[0].example == ""


def test_full_tree_json(tmp_path):
    path = write_json(tmp_path / "tree.json", {"folders": [
        {"id": 2, "name": "Travel", "modules": [
            {"id": 5, "name": "Airport", "words": [
                {"id": 9, "word": "gate", "translation": "cổng", "example": "Go to gate 4."},
            ]},
            {"id": 6, "name": "Hotel"},
        ]},
        {"id": 4, "name": "Food"},
    ]})

    store = VocabularyStore(load_seed(path))

    assert [f.name for f in store.get_all_folders()] == ["Travel", "Food"]
    assert [m.id for m in store.get_all_modules()] == [5, 6]
    assert store.get_word_by_id(9).example == "Go to gate 4."
    assert store.create_folder("New").id == 5
    assert store.create_module(4, "New").id == 7
    assert store.add_word_to_module(6, {"word": "room", "translation": "phòng"}).id == 10


@pytest.mark.parametrize("payload", [
    {"words": [{"id": 1, "word": "a", "translation": "b"}, {"id": 1, "word": "c", "translation": "d"}]},
    {"words": [{"id": 0, "word": "a", "translation": "b"}]},
    {"words": [{"id": "x", "word": "a", "translation": "b"}]},
    {"words": [{"id": 1.5, "word": "a", "translation": "b"}]},
    {"words": [{"id": 1, "translation": "b"}]},
    {"folders": [{"id": 1, "modules": [{"id": 1}]}, {"id": 1}]},
    {"folders": [{"name": "no id"}]},
    {"nothing": []},
    [1, 2, 3],
    {"folders": ["x"]},
    {"folders": [5]},
    {"folders": None},
    {"folders": {"id": 1}},
    {"folders": [{"id": 1, "modules": None}]},
    {"folders": [{"id": 1, "modules": ["x"]}]},
    {"folders": [{"id": 1, "modules": [{"id": 1, "words": "abc"}]}]},
    {"words": None},
    {"words": ["x"]},
])
def test_invalid_json_seed(tmp_path, payload):
    path = write_json(tmp_path / "bad.json", payload)

    with pytest.raises(SeedDataError):
        load_seed(path)


def test_unparseable_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SeedDataError):
        JSONSeedSource(str(path)).load()


def test_missing_file(tmp_path):
    with pytest.raises(SeedDataError):
        load_seed(str(tmp_path / "missing.json"))


def test_csv_seed(tmp_path):
    path = tmp_path / "seed.csv"
    path.write_text(
        "id|word|translation|example\n"
        "1|gate|cổng|Go to gate 4.\n"
        "2|ticket|vé|\n",
        encoding="utf-8",
    )

    folders = CSVSeedSource(str(path)).load()
    words = folders[0].modules[0].words

    assert [(w.id, w.word, w.translation, w.example) for w in words] == [
        (1, "gate", "cổng", "Go to gate 4."),
        (2, "ticket", "vé", ""),
    ]


def test_csv_seed_without_example_column(tmp_path):
    path = tmp_path / "seed.csv"
    path.write_text("id|word|translation\n7|gate|cổng\n", encoding="utf-8")

    words = load_seed(str(path))[0].modules[0].words

    assert words[0].id == 7
    assert words[0].example == ""


def test_csv_seed_missing_columns(tmp_path):
    path = tmp_path / "seed.csv"
    path.write_text("id|word\n1|gate\n", encoding="utf-8")

    with pytest.raises(SeedDataError):
        load_seed(str(path))


def test_seed_source_for_picks_by_suffix(tmp_path):
    assert isinstance(seed_source_for(str(tmp_path / "a.json")), JSONSeedSource)
    assert isinstance(seed_source_for(str(tmp_path / "a.CSV")), CSVSeedSource)

    with pytest.raises(SeedDataError):
        seed_source_for(str(tmp_path / "a.xml"))
