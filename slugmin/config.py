"""Slug configuration models and persistence helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .encoder import SlugEncoder, SlugMode
from .transliteration import DEFAULT_TRANSLITERATOR, MappingTransliterator, TransliteratorRegistry


class SlugConfig(BaseModel):
    """Validates and stores slug generation settings."""

    mode: SlugMode = Field(
        default=SlugMode.STRICT,
        description="Output alphabet: strict (a-z0-9-) or lenient (adds case, space, dot, underscore).",
    )
    preserve_case: bool = Field(
        default=False,
        description="Keep letter case in lenient mode.",
    )
    transliterator: str = Field(
        default=DEFAULT_TRANSLITERATOR,
        description="Identifier of the registered transliteration backend.",
    )
    overrides: dict[str, str] = Field(
        default_factory=dict,
        description="Per-character replacements consulted before the transliterator.",
    )

    @field_validator("transliterator")
    @classmethod
    def _normalise_transliterator(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("Transliterator identifier must not be empty.")
        return name

    @field_validator("overrides")
    @classmethod
    def _validate_overrides(cls, value: dict[str, str]) -> dict[str, str]:
        for char, replacement in value.items():
            if len(char) != 1 or ord(char) < 0x80:
                raise ValueError(f"Override key {char!r} must be a single non-ASCII character.")
            if not replacement.isascii():
                raise ValueError(f"Override for {char!r} must be ASCII, got {replacement!r}.")
        return value

    @model_validator(mode="after")
    def _validate_case_preferences(self) -> SlugConfig:
        if self.preserve_case and self.mode != SlugMode.LENIENT:
            self.mode = SlugMode.LENIENT
        return self

    def build_encoder(self) -> SlugEncoder:
        """Return an encoder wired to the configured transliteration table."""
        transliterator = TransliteratorRegistry.get(self.transliterator)
        if self.overrides:
            transliterator = MappingTransliterator(self.overrides, fallback=transliterator)
        return SlugEncoder(
            self.mode,
            preserve_case=self.preserve_case,
            transliterator=transliterator,
        )

    def as_dict(self) -> dict[str, Any]:
        """Serialize the configuration to primitive Python types."""
        return self.model_dump(mode="json")

    @classmethod
    def load(cls, path: Path) -> SlugConfig:
        """Load configuration from a YAML or JSON file."""
        data = _read_config_file(path)
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid configuration file at {path}: {exc}") from exc

    def save(self, path: Path) -> None:
        """Persist configuration to a YAML or JSON file."""
        _write_config_file(path, self.as_dict())


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            return yaml.safe_load(text) or {}
        return json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ValueError(f"Invalid configuration file at {path}: {exc}") from exc


def _write_config_file(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in {".yaml", ".yml"}:
        yaml_text = yaml.safe_dump(
            data,
            allow_unicode=True,
            sort_keys=False,
        )
        path.write_text(yaml_text, encoding="utf-8")
    else:
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
