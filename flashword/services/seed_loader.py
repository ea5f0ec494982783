"""
Seed sources - read-only loaders for the initial vocabulary tree.

Separates the static seed file format from the store, so the store itself
never touches the filesystem. Supports the bundled JSON resource and
pipe-separated CSV word lists.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

import pandas as pd

from ..config import Config, DEFAULT_SEED_FILE
from ..models import Folder, Module, Word
from ..utils.parsing import TextParser

logger = logging.getLogger(__name__)

DEFAULT_FOLDER_ID = 1
DEFAULT_MODULE_ID = 1

CSV_COLUMNS = ["id", "word", "translation", "example"]


class SeedDataError(Exception):
    """Raised when seed data cannot be read or violates the id invariants."""


def _parse_id(value: Any, kind: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise SeedDataError(f"Invalid {kind} id: {value!r}")
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise SeedDataError(f"Invalid {kind} id: {value!r}") from None
    if isinstance(value, float) and value != parsed:
        raise SeedDataError(f"Invalid {kind} id: {value!r}")
    if parsed <= 0:
        raise SeedDataError(f"{kind.capitalize()} id must be positive, got {parsed}")
    return parsed


def _check_record(record: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise SeedDataError(f"{kind.capitalize()} record must be an object, got {type(record).__name__}")
    return record


def _record_list(container: Mapping[str, Any], key: str) -> List[Any]:
    """A list under key; absent means empty, anything but a list is an error."""
    value = container.get(key, [])
    if not isinstance(value, list):
        raise SeedDataError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _word_from_record(record: Mapping[str, Any]) -> Word:
    record = _check_record(record, "word")
    for key in ("id", "word", "translation"):
        if key not in record:
            raise SeedDataError(f"Word record is missing '{key}': {dict(record)!r}")
    return Word(
        id=_parse_id(record["id"], "word"),
        word=TextParser.normalize_unicode(record["word"]),
        translation=TextParser.normalize_unicode(record["translation"]),
        example=TextParser.normalize_unicode(record.get("example")),
    )


def validate_seed(folders: Iterable[Folder]) -> List[Folder]:
    """
    Check that ids are positive integers, unique per entity kind across the
    whole tree.

    Args:
        folders: Seed folders

    Returns:
        The folders as a list

    Raises:
        SeedDataError: on a non-positive or duplicate id
    """
    folders = list(folders)
    seen: Dict[str, Set[int]] = {"folder": set(), "module": set(), "word": set()}

    def check(kind: str, entity_id: Any) -> None:
        if isinstance(entity_id, bool) or not isinstance(entity_id, int) or entity_id <= 0:
            raise SeedDataError(f"{kind.capitalize()} id must be a positive integer, got {entity_id!r}")
        if entity_id in seen[kind]:
            raise SeedDataError(f"Duplicate {kind} id {entity_id} in seed data")
        seen[kind].add(entity_id)

    for folder in folders:
        check("folder", folder.id)
        for module in folder.modules:
            check("module", module.id)
            for word in module.words:
                check("word", word.id)
    return folders


class BaseSeedSource(ABC):
    """
    Abstract base class for seed data sources.

    Implementations read a static resource and return the folder tree the
    store starts from. Flat word lists are wrapped into one default folder
    holding one default module.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        folder_name: str = Config.DEFAULT_FOLDER_NAME,
        module_name: str = Config.DEFAULT_MODULE_NAME,
    ):
        """
        Initialize seed source.

        Args:
            path: Path to the seed file
            folder_name: Name of the default folder for flat word lists
            module_name: Name of the default module for flat word lists
        """
        self.path = Path(path or DEFAULT_SEED_FILE)
        self.folder_name = folder_name
        self.module_name = module_name

    @abstractmethod
    def read(self) -> List[Folder]:
        """Read the raw tree from storage."""
        pass

    def load(self) -> List[Folder]:
        """
        Read and validate seed data.

        Returns:
            Folders ready to hand to VocabularyStore

        Raises:
            SeedDataError: if the file is missing, malformed or has duplicate ids
        """
        if not self.path.exists():
            raise SeedDataError(f"Seed file not found: {self.path}")

        folders = validate_seed(self.read())

        modules = sum(len(f.modules) for f in folders)
        words = sum(len(m.words) for f in folders for m in f.modules)
        logger.info(
            "Loaded seed %s: %d folders, %d modules, %d words",
            self.path.name, len(folders), modules, words,
        )
        return folders

    def wrap_words(self, words: List[Word]) -> List[Folder]:
        """Put a flat word list into the default folder/module."""
        module = Module(id=DEFAULT_MODULE_ID, name=self.module_name, words=words)
        return [Folder(id=DEFAULT_FOLDER_ID, name=self.folder_name, modules=[module])]


class JSONSeedSource(BaseSeedSource):
    """
    JSON seed source.

    Accepts either {"words": [...]} or a full tree
    {"folders": [{"id", "name", "modules": [{"id", "name", "words": [...]}]}]}.
    """

    def read(self) -> List[Folder]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise SeedDataError(f"Could not read seed file {self.path}: {e}") from e

        if not isinstance(payload, dict):
            raise SeedDataError("Seed JSON must be an object with 'words' or 'folders'")

        if "folders" in payload:
            return [self._folder_from_record(r) for r in _record_list(payload, "folders")]
        if "words" in payload:
            return self.wrap_words([_word_from_record(r) for r in _record_list(payload, "words")])
        raise SeedDataError("Seed JSON must contain 'words' or 'folders'")

    def _folder_from_record(self, record: Mapping[str, Any]) -> Folder:
        record = _check_record(record, "folder")
        if "id" not in record:
            raise SeedDataError(f"Folder record is missing 'id': {dict(record)!r}")
        return Folder(
            id=_parse_id(record["id"], "folder"),
            name=TextParser.normalize_unicode(record.get("name") or self.folder_name),
            modules=[self._module_from_record(m) for m in _record_list(record, "modules")],
        )

    def _module_from_record(self, record: Mapping[str, Any]) -> Module:
        record = _check_record(record, "module")
        if "id" not in record:
            raise SeedDataError(f"Module record is missing 'id': {dict(record)!r}")
        return Module(
            id=_parse_id(record["id"], "module"),
            name=TextParser.normalize_unicode(record.get("name") or self.module_name),
            words=[_word_from_record(w) for w in _record_list(record, "words")],
        )


class CSVSeedSource(BaseSeedSource):
    """
    CSV seed source.

    Pipe-separated word list with header id|word|translation|example,
    read with pandas. Always produces the default folder/module.
    """

    def read(self) -> List[Folder]:
        try:
            df = pd.read_csv(
                self.path,
                sep='|',
                encoding='utf-8-sig',
                dtype=str,
                keep_default_na=False,
                engine='python'
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as e:
            raise SeedDataError(f"Could not read seed file {self.path}: {e}") from e

        df.columns = df.columns.str.strip()
        missing = [c for c in CSV_COLUMNS[:3] if c not in df.columns]
        if missing:
            raise SeedDataError(f"Seed CSV is missing columns: {', '.join(missing)}")
        if "example" not in df.columns:
            df["example"] = ""

        words = [_word_from_record(row) for row in df[CSV_COLUMNS].to_dict("records")]
        return self.wrap_words(words)


def seed_source_for(path: Optional[str] = None, config: Optional[Config] = None) -> BaseSeedSource:
    """
    Pick a seed source by file suffix.

    Args:
        path: Seed file path (defaults to config.SEED_FILE)
        config: Configuration for default names

    Returns:
        JSONSeedSource or CSVSeedSource

    Raises:
        SeedDataError: for an unsupported suffix
    """
    config = config or Config()
    path = path or config.SEED_FILE
    suffix = Path(path).suffix.lower()

    sources = {".json": JSONSeedSource, ".csv": CSVSeedSource}
    if suffix not in sources:
        raise SeedDataError(f"Unsupported seed file type: {suffix or path}")

    return sources[suffix](
        path,
        folder_name=config.DEFAULT_FOLDER_NAME,
        module_name=config.DEFAULT_MODULE_NAME,
    )


def load_seed(path: Optional[str] = None, config: Optional[Config] = None) -> List[Folder]:
    """Load seed folders from a JSON or CSV file."""
    return seed_source_for(path, config).load()
