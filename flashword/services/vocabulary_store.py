"""
Vocabulary Store - in-memory owner of the Folder -> Module -> Word tree.

Single source of truth for every read and write made by the learning modes
and the folder management screens. All operations are synchronous and
total: unknown ids yield None (lookups, updates, creations under a parent)
or False (deletes), never an exception.
"""

import random
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..models import Folder, Module, Word, WordData
from ..utils.parsing import TextParser
from .seed_loader import load_seed, validate_seed

WordInput = Union[WordData, Mapping[str, Any]]


class VocabularyStore:
    """
    Store for folders, modules and words.

    Ordered lists keep display order; id-indexed dicts give constant-time
    lookup. Ids are allocated from three independent counters that start at
    the largest seed id of their kind and are never rewound, so an id is
    never reused within the lifetime of the store.

    Usage:
        store = VocabularyStore.from_seed()
        travel = store.create_folder("Travel")
        airport = store.create_module(travel.id, "Airport")
        store.add_word_to_module(airport.id, {"word": "gate", "translation": "cổng"})

    Returned Folder/Module/Word objects are the live entities. Lists returned
    by the query methods are fresh copies, so mutating them does not affect
    the store.
    """

    def __init__(
        self,
        folders: Optional[Iterable[Folder]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the store.

        Args:
            folders: Seed tree; the bundled seed file is loaded when None.
                Pass [] for an empty store.
            rng: Random source for sampling (seed it for reproducible quizzes)

        Raises:
            SeedDataError: if folders hold a non-positive or duplicate id
        """
        folders = load_seed() if folders is None else validate_seed(folders)

        self._rng = rng or random.Random()

        self._folders: List[Folder] = []
        self._folder_index: Dict[int, Folder] = {}
        self._module_index: Dict[int, Tuple[Module, int]] = {}
        self._word_index: Dict[int, Tuple[Word, int]] = {}

        for folder in folders:
            self._folders.append(folder)
            self._index_folder(folder)

        self._next_folder_id = max(self._folder_index, default=0)
        self._next_module_id = max(self._module_index, default=0)
        self._next_word_id = max(self._word_index, default=0)

    @classmethod
    def from_seed(
        cls,
        path: Optional[str] = None,
        config: Optional[Any] = None,
        rng: Optional[random.Random] = None,
    ) -> "VocabularyStore":
        """
        Factory method to create a store from a seed file.

        Args:
            path: JSON or CSV seed file (bundled vocabulary.json by default)
            config: Config supplying default folder/module names
            rng: Random source for sampling

        Returns:
            Populated VocabularyStore
        """
        return cls(load_seed(path, config), rng=rng)

    # ==================== Index helpers ====================

    def _index_folder(self, folder: Folder) -> None:
        self._folder_index[folder.id] = folder
        for module in folder.modules:
            self._index_module(module, folder.id)

    def _index_module(self, module: Module, folder_id: int) -> None:
        self._module_index[module.id] = (module, folder_id)
        for word in module.words:
            self._word_index[word.id] = (word, module.id)

    def _purge_module(self, module: Module) -> None:
        self._module_index.pop(module.id, None)
        for word in module.words:
            self._word_index.pop(word.id, None)

    def _allocate_folder_id(self) -> int:
        self._next_folder_id += 1
        return self._next_folder_id

    def _allocate_module_id(self) -> int:
        self._next_module_id += 1
        return self._next_module_id

    def _allocate_word_id(self) -> int:
        self._next_word_id += 1
        return self._next_word_id

    @property
    def folder_count(self) -> int:
        return len(self._folder_index)

    @property
    def module_count(self) -> int:
        return len(self._module_index)

    @property
    def word_count(self) -> int:
        return len(self._word_index)

    # ==================== Folders ====================

    def create_folder(self, name: str) -> Folder:
        """Create an empty folder. Names need not be unique."""
        folder = Folder(id=self._allocate_folder_id(), name=TextParser.normalize_unicode(name))
        self._folders.append(folder)
        self._folder_index[folder.id] = folder
        return folder

    def update_folder(self, folder_id: int, name: str) -> Optional[Folder]:
        """Rename a folder. Returns None if the id is unknown."""
        folder = self._folder_index.get(folder_id)
        if folder is None:
            return None
        folder.name = TextParser.normalize_unicode(name)
        return folder

    def delete_folder(self, folder_id: int) -> bool:
        """Delete a folder together with its modules and their words."""
        folder = self._folder_index.pop(folder_id, None)
        if folder is None:
            return False
        for module in folder.modules:
            self._purge_module(module)
        self._folders.remove(folder)
        return True

    def get_all_folders(self) -> List[Folder]:
        return list(self._folders)

    def get_folder_by_id(self, folder_id: int) -> Optional[Folder]:
        return self._folder_index.get(folder_id)

    # ==================== Modules ====================

    def create_module(self, folder_id: int, name: str) -> Optional[Module]:
        """
        Create an empty module inside a folder.

        Args:
            folder_id: Owning folder
            name: Module name

        Returns:
            The new module, or None if the folder does not exist
        """
        folder = self._folder_index.get(folder_id)
        if folder is None:
            return None
        module = Module(id=self._allocate_module_id(), name=TextParser.normalize_unicode(name))
        folder.modules.append(module)
        self._module_index[module.id] = (module, folder.id)
        return module

    def update_module(self, module_id: int, name: str) -> Optional[Module]:
        """Rename a module. Returns None if the id is unknown."""
        entry = self._module_index.get(module_id)
        if entry is None:
            return None
        module = entry[0]
        module.name = TextParser.normalize_unicode(name)
        return module

    def delete_module(self, module_id: int) -> bool:
        """Delete a module and its words."""
        entry = self._module_index.get(module_id)
        if entry is None:
            return False
        module, folder_id = entry
        self._folder_index[folder_id].modules.remove(module)
        self._purge_module(module)
        return True

    def get_all_modules(self) -> List[Module]:
        """Every module, in folder order then module order."""
        return [module for folder in self._folders for module in folder.modules]

    def get_module_by_id(self, module_id: int) -> Optional[Module]:
        entry = self._module_index.get(module_id)
        return entry[0] if entry else None

    def get_modules_by_folder_id(self, folder_id: int) -> List[Module]:
        folder = self._folder_index.get(folder_id)
        return list(folder.modules) if folder else []

    # ==================== Words ====================

    def add_word_to_module(self, module_id: int, data: WordInput) -> Optional[Word]:
        """
        Append a new word to a module.

        Args:
            module_id: Owning module
            data: WordData or mapping with word/translation/example

        Returns:
            The created word, or None if the module does not exist
        """
        entry = self._module_index.get(module_id)
        if entry is None:
            return None
        module = entry[0]
        content = WordData.coerce(data)
        word = Word(
            id=self._allocate_word_id(),
            word=TextParser.normalize_unicode(content.word),
            translation=TextParser.normalize_unicode(content.translation),
            example=TextParser.normalize_unicode(content.example),
        )
        module.words.append(word)
        self._word_index[word.id] = (word, module.id)
        return word

    def update_word_in_module(self, module_id: int, word_id: int, data: WordInput) -> Optional[Word]:
        """
        Replace a word's content in place.

        The id and the position inside the module are preserved.

        Returns:
            The updated word, or None if the module is unknown or the word
            does not belong to it
        """
        word = self._word_in_module(module_id, word_id)
        if word is None:
            return None
        content = WordData.coerce(data)
        word.word = TextParser.normalize_unicode(content.word)
        word.translation = TextParser.normalize_unicode(content.translation)
        word.example = TextParser.normalize_unicode(content.example)
        return word

    def delete_word_from_module(self, module_id: int, word_id: int) -> bool:
        word = self._word_in_module(module_id, word_id)
        if word is None:
            return False
        self._module_index[module_id][0].words.remove(word)
        del self._word_index[word_id]
        return True

    def _word_in_module(self, module_id: int, word_id: int) -> Optional[Word]:
        if module_id not in self._module_index:
            return None
        entry = self._word_index.get(word_id)
        if entry is None or entry[1] != module_id:
            return None
        return entry[0]

    def get_all_words(self) -> List[Word]:
        """Every word across every module and folder, in display order."""
        return [
            word
            for folder in self._folders
            for module in folder.modules
            for word in module.words
        ]

    def get_word_by_id(self, word_id: int) -> Optional[Word]:
        entry = self._word_index.get(word_id)
        return entry[0] if entry else None

    def get_words_by_module_id(self, module_id: int) -> List[Word]:
        entry = self._module_index.get(module_id)
        return list(entry[0].words) if entry else []

    def find_module_of_word(self, word_id: int) -> Optional[Module]:
        """Owning module of a word, or None."""
        entry = self._word_index.get(word_id)
        if entry is None:
            return None
        return self._module_index[entry[1]][0]

    def search_words(
        self,
        query: str,
        fields: Sequence[str] = ("word", "translation"),
    ) -> List[Word]:
        """
        Search words by text query.

        Args:
            query: Case-insensitive substring
            fields: Word attributes to search

        Returns:
            Matching words in display order; empty for an empty query
        """
        if TextParser.is_blank(query):
            return []
        needle = TextParser.normalize_unicode(query).strip().casefold()
        return [
            word
            for word in self.get_all_words()
            if any(needle in str(getattr(word, f, "")).casefold() for f in fields)
        ]

    # ==================== Random sampling ====================

    def _sample(self, pool: List[Word], count: int) -> List[Word]:
        if count <= 0:
            return []
        # random.shuffle is an in-place Fisher-Yates shuffle
        self._rng.shuffle(pool)
        return pool[:count]

    def get_random_words(self, count: int) -> List[Word]:
        """
        Draw distinct words uniformly at random, without replacement.

        Args:
            count: Number of words wanted

        Returns:
            count words, or every word if count exceeds the total
        """
        return self._sample(self.get_all_words(), count)

    def get_random_words_excluding(self, count: int, exclude_id: int) -> List[Word]:
        """Like get_random_words, but never returns the word with exclude_id."""
        pool = [word for word in self.get_all_words() if word.id != exclude_id]
        return self._sample(pool, count)
