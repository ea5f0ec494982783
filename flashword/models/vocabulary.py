"""Data models for the vocabulary tree."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union


@dataclass
class WordData:
    """Content of a word without its identity."""

    word: str
    translation: str
    example: str = ""

    @classmethod
    def coerce(cls, data: Union["WordData", Mapping[str, Any]]) -> "WordData":
        """Accept either a WordData or a mapping with the same keys."""
        if isinstance(data, WordData):
            return data
        return cls(
            word=str(data.get("word", "") or ""),
            translation=str(data.get("translation", "") or ""),
            example=str(data.get("example", "") or ""),
        )


@dataclass
class Word:
    """Single vocabulary entry. Owned by exactly one module."""

    id: int
    word: str
    translation: str
    example: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "word": self.word,
            "translation": self.translation,
            "example": self.example,
        }


@dataclass
class Module:
    """Ordered group of words inside a folder."""

    id: int
    name: str
    words: List[Word] = field(default_factory=list)


@dataclass
class Folder:
    """Top-level container of modules."""

    id: int
    name: str
    modules: List[Module] = field(default_factory=list)
