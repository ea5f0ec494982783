"""Tests for the pandas statistics view."""

from flashword.services import get_statistics, words_frame
from flashword.services.statistics import FRAME_COLUMNS


def test_words_frame(store):
    df = words_frame(store)

    assert list(df.columns) == FRAME_COLUMNS
    assert len(df) == 10
    assert df["word_id"].tolist() == list(range(1, 11))
    assert set(df["module_name"]) == {"Basic Vocabulary"}


def test_words_frame_empty(empty_store):
    df = words_frame(empty_store)

    assert df.empty
    assert list(df.columns) == FRAME_COLUMNS


def test_get_statistics(store):
    folder = store.create_folder("Travel")
    airport = store.create_module(folder.id, "Airport")
    hotel = store.create_module(folder.id, "Hotel")
    store.add_word_to_module(airport.id, {"word": "gate", "translation": "cổng"})

    stats = get_statistics(store)

    assert stats["total_folders"] == 2
    assert stats["total_modules"] == 3
    assert stats["total_words"] == 11
    assert stats["has_example"] == 10
    assert stats["empty_modules"] == 1
    assert stats["words_per_module"] == {1: 10, airport.id: 1, hotel.id: 0}


def test_get_statistics_empty(empty_store):
    stats = get_statistics(empty_store)

    assert stats["total_words"] == 0
    assert stats["has_example"] == 0
    assert stats["words_per_module"] == {}
