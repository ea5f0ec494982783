import random

import pytest

from flashword.models import Folder, Module, Word
from flashword.services import VocabularyStore


@pytest.fixture
def seed_words():
    """Ten seed words with ids 1..10."""
    return [
        Word(id=i, word=f"word{i}", translation=f"translation{i}", example=f"example {i}")
        for i in range(1, 11)
    ]


@pytest.fixture
def seed_folders(seed_words):
    return [Folder(id=1, name="Default Folder", modules=[
        Module(id=1, name="Basic Vocabulary", words=seed_words),
    ])]


@pytest.fixture
def store(seed_folders):
    """Store over the ten-word seed with a fixed random source."""
    return VocabularyStore(seed_folders, rng=random.Random(1234))


@pytest.fixture
def empty_store():
    return VocabularyStore([], rng=random.Random(1234))
