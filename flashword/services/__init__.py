"""Services layer for business logic separation."""

from .vocabulary_store import VocabularyStore
from .seed_loader import (
    BaseSeedSource,
    CSVSeedSource,
    JSONSeedSource,
    SeedDataError,
    load_seed,
    seed_source_for,
)
from .quiz_service import (
    MatchItem,
    MatchKind,
    MatchingRound,
    MultipleChoiceSession,
    QuizQuestion,
    QuizService,
)
from .module_creator import ModuleCreator
from .statistics import get_statistics, words_frame

__all__ = [
    "VocabularyStore",
    "BaseSeedSource",
    "CSVSeedSource",
    "JSONSeedSource",
    "SeedDataError",
    "load_seed",
    "seed_source_for",
    "MatchItem",
    "MatchKind",
    "MatchingRound",
    "MultipleChoiceSession",
    "QuizQuestion",
    "QuizService",
    "ModuleCreator",
    "get_statistics",
    "words_frame",
]
