"""Default slug settings kept in the user's configuration directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from .config import SlugConfig
from .encoder import SlugEncoder

logger = logging.getLogger(__name__)


class SettingsStore:
    """Resolve the effective :class:`SlugConfig` and build encoders from it.

    Settings come from, in order of precedence: explicit overrides, an
    explicit config file, then the user's settings file. A missing user
    settings file yields the defaults.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or default_settings_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SlugConfig:
        if not self._path.exists():
            logger.debug("No settings at %s; using defaults", self._path)
            return SlugConfig()
        return SlugConfig.load(self._path)

    def save(self, config: SlugConfig) -> None:
        config.save(self._path)

    def resolve(self, *, config_path: Path | None = None, **overrides: Any) -> SlugConfig:
        """Return the stored (or ``config_path``) settings with ``overrides`` applied.

        Overrides set to ``None`` are ignored. The merged settings are
        validated again, so ``preserve_case=True`` still switches to lenient.
        """
        base = SlugConfig.load(config_path) if config_path else self.load()
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return base
        return SlugConfig.model_validate({**base.model_dump(), **changes})

    def build_encoder(self, *, config_path: Path | None = None, **overrides: Any) -> SlugEncoder:
        """Shortcut for ``resolve(...).build_encoder()``."""
        return self.resolve(config_path=config_path, **overrides).build_encoder()


def default_settings_path() -> Path:
    if os.name == "nt":
        root = os.getenv("APPDATA") or str(Path.home() / "AppData" / "Roaming")
    else:
        root = os.getenv("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(root).expanduser() / "slugmin" / "settings.yaml"
