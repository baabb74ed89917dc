"""Interfaces for Unicode-to-ASCII transliteration tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True)
class TransliteratorInfo:
    """Metadata describing an available transliteration backend."""

    identifier: str
    display_name: str
    description: str


class Transliterator(Protocol):
    """Lookup from a single non-ASCII code point to ASCII text."""

    def info(self) -> TransliteratorInfo:
        """Return metadata describing the backend."""

    def transliterate(self, char: str) -> str | None:
        """Return the ASCII replacement for ``char``.

        ``None`` means the table has no entry; an empty string means the
        table deliberately maps the character to nothing.
        """
