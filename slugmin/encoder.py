"""Single-pass slug encoder with strict and lenient collapsing rules."""

from __future__ import annotations

import logging
from enum import Enum

from .transliteration.base import Transliterator
from .transliteration.registry import TransliteratorRegistry

logger = logging.getLogger(__name__)

_DASH = ord("-")
_SPACE = ord(" ")
_UNDERSCORE = ord("_")
_DOT = ord(".")
_CASE_SHIFT = ord("a") - ord("A")


class SlugMode(str, Enum):
    """Supported output alphabets."""

    STRICT = "strict"
    LENIENT = "lenient"


def _is_lower_or_digit(byte: int) -> bool:
    return 0x61 <= byte <= 0x7A or 0x30 <= byte <= 0x39


def _is_upper(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A


class StrictFilter:
    """Collapsing filter producing ``a-z``, ``0-9`` and single hyphens."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        # Starts set so separators never lead the output.
        self._prev_is_dash = True

    def push(self, byte: int) -> None:
        if _is_lower_or_digit(byte):
            self._prev_is_dash = False
            self._buffer.append(byte)
        elif _is_upper(byte):
            self._prev_is_dash = False
            self._buffer.append(byte + _CASE_SHIFT)
        elif not self._prev_is_dash:
            self._buffer.append(_DASH)
            self._prev_is_dash = True

    def finish(self) -> str:
        if self._buffer.endswith(b"-"):
            del self._buffer[-1]
        return self._buffer.decode("ascii")


class LenientFilter:
    """Collapsing filter that also keeps spaces, underscores and dots.

    Letters keep their case when ``preserve_case`` is set. Runs of spaces and
    underscores collapse to the first one seen, runs of dots to a single dot
    and every other byte to a single hyphen. Emitting any category clears the
    flags of the other two.
    """

    def __init__(self, *, preserve_case: bool = False) -> None:
        self._buffer = bytearray()
        self._preserve_case = preserve_case
        self._prev_is_dash = True
        self._prev_is_space = True
        self._prev_is_dot = False

    def _mark(self, *, dash: bool = False, space: bool = False, dot: bool = False) -> None:
        self._prev_is_dash = dash
        self._prev_is_space = space
        self._prev_is_dot = dot

    def push(self, byte: int) -> None:
        if _is_lower_or_digit(byte):
            self._mark()
            self._buffer.append(byte)
        elif _is_upper(byte):
            self._mark()
            self._buffer.append(byte if self._preserve_case else byte + _CASE_SHIFT)
        elif byte in (_SPACE, _UNDERSCORE):
            if not self._prev_is_space:
                self._buffer.append(byte)
                self._mark(space=True)
        elif byte == _DOT:
            if not self._prev_is_dot:
                self._buffer.append(byte)
                self._mark(dot=True)
        elif not self._prev_is_dash:
            self._buffer.append(_DASH)
            self._mark(dash=True)

    def finish(self) -> str:
        while self._buffer and self._buffer[-1] in (_DASH, _SPACE):
            del self._buffer[-1]
        return self._buffer.decode("ascii")


class SlugEncoder:
    """Encode text into a slug using an injectable transliteration table.

    The encoder itself is immutable; every call to :meth:`encode` builds a
    fresh filter, so one instance may be shared between threads.
    """

    def __init__(
        self,
        mode: SlugMode = SlugMode.STRICT,
        *,
        preserve_case: bool = False,
        transliterator: Transliterator | None = None,
    ) -> None:
        self.mode = SlugMode(mode)
        self.preserve_case = preserve_case
        if transliterator is None:
            transliterator = TransliteratorRegistry.default()
        self.transliterator = transliterator

    def _new_filter(self) -> StrictFilter | LenientFilter:
        if self.mode is SlugMode.STRICT:
            return StrictFilter()
        return LenientFilter(preserve_case=self.preserve_case)

    def encode(self, text: str) -> str:
        """Return the slug for ``text``. Never raises for string input."""
        sink = self._new_filter()
        for char in text:
            code_point = ord(char)
            if code_point < 0x80:
                sink.push(code_point)
                continue
            replacement = self._lookup(char)
            if replacement is None:
                sink.push(_DASH)
                continue
            for byte in replacement:
                sink.push(byte)
        return sink.finish()

    def _lookup(self, char: str) -> bytes | None:
        """Return the ASCII bytes for ``char`` or None when there is no usable mapping."""
        try:
            replacement = self.transliterator.transliterate(char)
        except Exception:
            logger.debug("Transliterator failed for U+%04X", ord(char), exc_info=True)
            return None
        if replacement is None:
            return None
        try:
            return replacement.encode("ascii")
        except (AttributeError, UnicodeEncodeError):
            logger.debug("Discarding non-ASCII replacement %r for U+%04X", replacement, ord(char))
            return None
