"""Pluggable Unicode-to-ASCII transliteration tables.

Backends with third-party dependencies register themselves when
:class:`TransliteratorRegistry` bootstraps, so a missing optional library
only removes that backend.
"""

from .base import Transliterator, TransliteratorInfo
from .builtin import AsciiOnlyTransliterator, MappingTransliterator
from .registry import DEFAULT_TRANSLITERATOR, TransliteratorRegistry

__all__ = [
    "AsciiOnlyTransliterator",
    "DEFAULT_TRANSLITERATOR",
    "MappingTransliterator",
    "Transliterator",
    "TransliteratorInfo",
    "TransliteratorRegistry",
]
