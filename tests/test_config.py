"""Tests for configuration and logging setup."""

import logging
import random

from flashword import create_store
from flashword.config import Config, DEFAULT_SEED_FILE
from flashword.utils import TextParser, setup_logger


def test_defaults():
    config = Config.from_env({})

    assert config.SEED_FILE == DEFAULT_SEED_FILE
    assert config.MATCHING_PAIRS == 6
    assert config.CHOICE_OPTIONS == 3
    assert config.RANDOM_SEED is None
    assert config.LOG_LEVEL == "INFO"


def test_env_overrides():
    config = Config.from_env({
        "FLASHWORD_SEED_FILE": "/tmp/seed.csv",
        "FLASHWORD_DEFAULT_FOLDER_NAME": "Travel",
        "FLASHWORD_MATCHING_PAIRS": "4",
        "FLASHWORD_CHOICE_OPTIONS": "2",
        "FLASHWORD_RANDOM_SEED": "42",
        "FLASHWORD_LOG_LEVEL": "debug",
    })

    assert config.SEED_FILE == "/tmp/seed.csv"
    assert config.DEFAULT_FOLDER_NAME == "Travel"
    assert config.DEFAULT_MODULE_NAME == "Basic Vocabulary"
    assert config.MATCHING_PAIRS == 4
    assert config.CHOICE_OPTIONS == 2
    assert config.RANDOM_SEED == 42
    assert config.LOG_LEVEL == "DEBUG"


def test_bad_integers_fall_back():
    config = Config.from_env({
        "FLASHWORD_MATCHING_PAIRS": "many",
        "FLASHWORD_RANDOM_SEED": "abc",
    })

    assert config.MATCHING_PAIRS == 6
    assert config.RANDOM_SEED is None


def test_create_store_is_seeded_from_config():
    config = Config(RANDOM_SEED=5)

    first = create_store(config)
    second = create_store(config)

    assert len(first.get_all_words()) == 10
    assert [w.id for w in first.get_random_words(4)] == [w.id for w in second.get_random_words(4)]


def test_stores_are_independent():
    first = create_store(Config())
    second = create_store(Config())

    first.create_folder("Only here")

    assert len(first.get_all_folders()) == 2
    assert len(second.get_all_folders()) == 1


def test_setup_logger_is_idempotent():
    logger = setup_logger("flashword.test", "debug")
    setup_logger("flashword.test", logging.WARNING)

    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_text_parser():
    assert TextParser.normalize_unicode(None) == ""
    assert TextParser.normalize_unicode(0) == "0"
    assert TextParser.normalize_unicode("é") == "é"
    assert TextParser.is_blank(" \t")
    assert not TextParser.is_blank("a")


def test_create_store_uses_given_rng():
    """A caller-supplied generator drives the store's sampling."""
    rng = random.Random(3)
    store = create_store(Config(RANDOM_SEED=3), rng=rng)
    before = rng.getstate()

    store.get_random_words(3)

    assert rng.getstate() != before
