"""Global settings and configuration."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

# Load from project root
_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)

ENV_PREFIX = "FLASHWORD_"

# Package root (flashword/)
PACKAGE_DIR: Path = Path(__file__).parent.parent.resolve()
DEFAULT_SEED_FILE: str = str(PACKAGE_DIR / "data" / "vocabulary.json")


def _parse_int(value: Optional[str], default: Optional[int]) -> Optional[int]:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class Config:
    """Application-wide configuration."""

    # Seed data
    SEED_FILE: str = DEFAULT_SEED_FILE
    DEFAULT_FOLDER_NAME: str = "Default Folder"
    DEFAULT_MODULE_NAME: str = "Basic Vocabulary"

    # Quiz modes
    MATCHING_PAIRS: int = 6
    CHOICE_OPTIONS: int = 3  # incorrect options per question

    # None means an unseeded random.Random
    RANDOM_SEED: Optional[int] = None

    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build a Config from FLASHWORD_* environment variables.

        Unparseable integers fall back to their defaults.

        Args:
            environ: Mapping to read instead of os.environ (useful in tests)

        Returns:
            Config instance
        """
        env = os.environ if environ is None else environ

        def get(key: str) -> Optional[str]:
            value = env.get(ENV_PREFIX + key)
            if value is None or not value.strip():
                return None
            return value.strip()

        return cls(
            SEED_FILE=get("SEED_FILE") or cls.SEED_FILE,
            DEFAULT_FOLDER_NAME=get("DEFAULT_FOLDER_NAME") or cls.DEFAULT_FOLDER_NAME,
            DEFAULT_MODULE_NAME=get("DEFAULT_MODULE_NAME") or cls.DEFAULT_MODULE_NAME,
            MATCHING_PAIRS=_parse_int(get("MATCHING_PAIRS"), cls.MATCHING_PAIRS),
            CHOICE_OPTIONS=_parse_int(get("CHOICE_OPTIONS"), cls.CHOICE_OPTIONS),
            RANDOM_SEED=_parse_int(get("RANDOM_SEED"), None),
            LOG_LEVEL=(get("LOG_LEVEL") or cls.LOG_LEVEL).upper(),
        )
