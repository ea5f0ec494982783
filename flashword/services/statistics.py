"""Vocabulary statistics built on a flattened pandas view of the store."""

from typing import Any, Dict

import pandas as pd

from .vocabulary_store import VocabularyStore

FRAME_COLUMNS = [
    "folder_id", "folder_name", "module_id", "module_name",
    "word_id", "word", "translation", "example",
]


def words_frame(store: VocabularyStore) -> pd.DataFrame:
    """
    Flatten the store into one row per word.

    Args:
        store: Vocabulary store

    Returns:
        DataFrame with FRAME_COLUMNS, in display order
    """
    rows = [
        {
            "folder_id": folder.id,
            "folder_name": folder.name,
            "module_id": module.id,
            "module_name": module.name,
            "word_id": word.id,
            "word": word.word,
            "translation": word.translation,
            "example": word.example,
        }
        for folder in store.get_all_folders()
        for module in folder.modules
        for word in module.words
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def get_statistics(store: VocabularyStore) -> Dict[str, Any]:
    """
    Get vocabulary statistics.

    Returns:
        Dictionary with folder/module/word totals, how many words carry an
        example, how many modules are empty and word counts per module id
    """
    df = words_frame(store)
    modules = store.get_all_modules()

    per_module = {module.id: 0 for module in modules}
    if not df.empty:
        counts = df.groupby("module_id").size()
        per_module.update({int(k): int(v) for k, v in counts.items()})

    return {
        "total_folders": len(store.get_all_folders()),
        "total_modules": len(modules),
        "total_words": len(df),
        "has_example": int((df["example"].astype(str).str.strip() != "").sum()) if not df.empty else 0,
        "empty_modules": sum(1 for count in per_module.values() if count == 0),
        "words_per_module": per_module,
    }
