"""Convert Unicode text into predictable ASCII slugs."""

from .config import SlugConfig
from .encoder import SlugEncoder, SlugMode
from .settings_store import SettingsStore
from .text import slugify, slugify_normal

__all__ = [
    "SettingsStore",
    "SlugConfig",
    "SlugEncoder",
    "SlugMode",
    "slugify",
    "slugify_normal",
]
