"""Configuration module for FlashWord."""

from .settings import Config, DEFAULT_SEED_FILE

__all__ = [
    'Config',
    'DEFAULT_SEED_FILE',
]
