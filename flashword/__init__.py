"""FlashWord - vocabulary folders, modules and quiz building"""

__version__ = "1.0.0"
__author__ = "FlashWord Team"

import random
from typing import Optional

from .config import Config
from .models import Folder, Module, Word, WordData
from .services import QuizService, VocabularyStore, load_seed


def create_store(
    config: Optional[Config] = None,
    rng: Optional[random.Random] = None,
) -> VocabularyStore:
    """
    Build the application's vocabulary store from configuration.

    Args:
        config: Configuration (read from the environment when None)
        rng: Random source to share with other consumers; a new one seeded
            from config.RANDOM_SEED when None

    Returns:
        VocabularyStore seeded from config.SEED_FILE
    """
    config = config or Config.from_env()
    rng = rng or random.Random(config.RANDOM_SEED)
    return VocabularyStore(load_seed(config.SEED_FILE, config), rng=rng)


__all__ = [
    'Config',
    'Folder',
    'Module',
    'QuizService',
    'VocabularyStore',
    'Word',
    'WordData',
    'create_store',
]
