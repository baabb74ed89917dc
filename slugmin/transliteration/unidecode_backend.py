"""Transliteration backed by the Unidecode tables."""

from __future__ import annotations

from unidecode import UnidecodeError, unidecode

from .base import TransliteratorInfo
from .registry import TransliteratorRegistry


def _is_surrogate(char: str) -> bool:
    return 0xD800 <= ord(char) <= 0xDFFF


class UnidecodeTransliterator:
    """Look up single characters in Unidecode's replacement tables."""

    identifier = "unidecode"

    def info(self) -> TransliteratorInfo:
        return TransliteratorInfo(
            identifier=self.identifier,
            display_name="Unidecode",
            description="Context-free ASCII approximations from the Unidecode tables.",
        )

    def transliterate(self, char: str) -> str | None:
        # Unidecode warns on every lone surrogate; there is never an entry for one.
        if _is_surrogate(char):
            return None
        try:
            return unidecode(char, errors="strict")
        except UnidecodeError:
            return None


TransliteratorRegistry.register(UnidecodeTransliterator.identifier, UnidecodeTransliterator)
