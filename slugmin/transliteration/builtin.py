"""Table-free transliterators shipped with the package."""

from __future__ import annotations

from collections.abc import Mapping

from .base import Transliterator, TransliteratorInfo
from .registry import TransliteratorRegistry


class AsciiOnlyTransliterator:
    """Map nothing, so every non-ASCII character becomes a separator."""

    identifier = "ascii"

    def info(self) -> TransliteratorInfo:
        return TransliteratorInfo(
            identifier=self.identifier,
            display_name="ASCII only",
            description="Drops all non-ASCII characters to separators.",
        )

    def transliterate(self, char: str) -> str | None:
        return None


class MappingTransliterator:
    """Serve replacements from an explicit table, then defer to ``fallback``.

    Parameters
    ----------
    table:
        Mapping of single characters to ASCII replacements. An empty
        replacement suppresses the character entirely.
    fallback:
        Optional transliterator consulted for characters missing from ``table``.
    """

    identifier = "mapping"

    def __init__(
        self,
        table: Mapping[str, str] | None = None,
        *,
        fallback: Transliterator | None = None,
    ) -> None:
        self.table = dict(table or {})
        self.fallback = fallback

    def info(self) -> TransliteratorInfo:
        return TransliteratorInfo(
            identifier=self.identifier,
            display_name="Mapping",
            description=f"{len(self.table)} explicit overrides.",
        )

    def transliterate(self, char: str) -> str | None:
        if char in self.table:
            return self.table[char]
        if self.fallback is None:
            return None
        return self.fallback.transliterate(char)


TransliteratorRegistry.register(AsciiOnlyTransliterator.identifier, AsciiOnlyTransliterator)
