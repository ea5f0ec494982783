"""Data models for FlashWord."""

from .vocabulary import Folder, Module, Word, WordData

__all__ = [
    'Folder',
    'Module',
    'Word',
    'WordData',
]
