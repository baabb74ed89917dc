"""Public slug helpers built on the shared encoder."""

from __future__ import annotations

from .encoder import SlugEncoder, SlugMode


def slugify(text: str) -> str:
    """Convert any Unicode text to a lowercase ASCII slug.

    The result consists of ``a-z``, ``0-9`` and ``-``; it never holds two
    hyphens in a row and never starts or ends with one.

    >>> slugify("My Test String!!!1!1")
    'my-test-string-1-1'
    >>> slugify("Æúű--cool?")
    'aeuu-cool'
    """
    return SlugEncoder(SlugMode.STRICT).encode(text)


def slugify_normal(text: str, preserve_case: bool = False) -> str:
    """Convert text to a readable slug that keeps spaces, dots and underscores.

    Letters keep their case when ``preserve_case`` is true. Runs of
    whitespace-class characters, dots and other separators collapse to a
    single character, and the result never starts or ends with a hyphen or
    a space.

    >>> slugify_normal("You & Me")
    'you - me'
    >>> slugify_normal("roman.  txt", True)
    'roman. txt'
    """
    return SlugEncoder(SlugMode.LENIENT, preserve_case=preserve_case).encode(text)
