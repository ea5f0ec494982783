"""Text parsing utilities for consistent text processing across the application."""

import unicodedata
from typing import Any


class TextParser:
    """
    Centralized text helpers.

    Every string that enters the vocabulary store goes through
    normalize_unicode so lookups and comparisons see one representation.
    """

    @classmethod
    def normalize_unicode(cls, text: Any) -> str:
        """
        Normalize text to NFC form for consistent Unicode handling.

        Vietnamese translations are a common case: "cổng" can arrive either
        as precomposed codepoints (NFC) or as base letters plus combining
        marks (NFD).

        Args:
            text: Input text

        Returns:
            NFC-normalized text, "" for None
        """
        if text is None:
            return ""
        return unicodedata.normalize('NFC', str(text))

    @classmethod
    def is_blank(cls, text: Any) -> bool:
        """True for None, empty or whitespace-only text."""
        return not text or not str(text).strip()
