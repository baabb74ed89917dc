"""Registry for discovering transliteration backends."""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Callable, Dict

from .base import Transliterator, TransliteratorInfo

Factory = Callable[[], Transliterator]
logger = logging.getLogger(__name__)

DEFAULT_TRANSLITERATOR = "unidecode"


class TransliteratorRegistry:
    """Tracks available transliterator factories and loads them lazily."""

    _factories: Dict[str, Factory] = {}
    _bootstrap_complete: bool = False

    @classmethod
    def register(cls, name: str, factory: Factory) -> None:
        """Register a transliterator factory under the provided name."""
        cls._factories[name] = factory

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._factories.pop(name, None)

    @classmethod
    def ensure_bootstrapped(cls) -> None:
        if cls._bootstrap_complete:
            return
        modules = [
            "slugmin.transliteration.builtin",
            "slugmin.transliteration.unidecode_backend",
        ]
        for module_name in modules:
            try:
                import_module(module_name)
            except ImportError as exc:
                logger.debug("Transliterator module %s could not be imported: %s", module_name, exc)
        cls._bootstrap_complete = True

    @classmethod
    def list_infos(cls) -> list[TransliteratorInfo]:
        """Return metadata for all registered transliterators."""
        cls.ensure_bootstrapped()
        return [factory().info() for factory in cls._factories.values()]

    @classmethod
    def get(cls, name: str) -> Transliterator:
        cls.ensure_bootstrapped()
        try:
            factory = cls._factories[name]
        except KeyError as exc:
            available = ", ".join(sorted(cls._factories))
            raise KeyError(f"Unknown transliterator '{name}'. Available: {available}") from exc
        return factory()

    @classmethod
    def default(cls) -> Transliterator:
        return cls.get(DEFAULT_TRANSLITERATOR)
