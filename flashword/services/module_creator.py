"""Creates a module together with its initial words, validating user input."""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from ..models import Module, WordData
from ..utils.parsing import TextParser
from .vocabulary_store import VocabularyStore

logger = logging.getLogger(__name__)


class ModuleCreator:
    """
    Validating front door for building a module in one step.

    The store accepts any name or word; empty-name and empty-word checks
    live here, on the calling side.

    Usage:
        module, errors = ModuleCreator(store).create(folder.id, "Airport", [
            {"word": "gate", "translation": "cổng"},
        ])
    """

    def __init__(self, store: VocabularyStore):
        self.store = store

    def create(
        self,
        folder_id: int,
        name: str,
        entries: Iterable[Union[WordData, Mapping[str, Any]]],
    ) -> Tuple[Optional[Module], List[str]]:
        """
        Create a module and add every complete entry to it.

        Entries with a blank word or translation are skipped.

        Args:
            folder_id: Owning folder
            name: Module name
            entries: Word payloads in display order

        Returns:
            (module, []) on success, (None, errors) when rejected
        """
        errors: List[str] = []

        if TextParser.is_blank(name):
            errors.append("Module name is required")

        valid = [
            data for data in (WordData.coerce(e) for e in entries)
            if not TextParser.is_blank(data.word) and not TextParser.is_blank(data.translation)
        ]
        if not valid:
            errors.append("At least one word with a translation is required")

        if errors:
            logger.warning("Rejected module %r: %s", name, "; ".join(errors))
            return None, errors

        module = self.store.create_module(folder_id, name.strip())
        if module is None:
            logger.warning("Rejected module %r: folder %s not found", name, folder_id)
            return None, [f"Folder {folder_id} not found"]

        for data in valid:
            self.store.add_word_to_module(
                module.id,
                WordData(
                    word=data.word.strip(),
                    translation=data.translation.strip(),
                    example=data.example.strip(),
                ),
            )

        logger.info("Created module %r with %d words", module.name, len(valid))
        return module, []
