"""Tests for SlugConfig validation and persistence."""

from __future__ import annotations

import json

import pytest

from slugmin.config import SlugConfig
from slugmin.encoder import SlugMode
from slugmin.transliteration import MappingTransliterator
from slugmin.transliteration.unidecode_backend import UnidecodeTransliterator


def test_defaults_are_strict_unidecode():
    config = SlugConfig()
    assert config.mode is SlugMode.STRICT
    assert config.preserve_case is False
    assert config.transliterator == "unidecode"


def test_preserve_case_switches_to_lenient():
    config = SlugConfig(preserve_case=True)
    assert config.mode is SlugMode.LENIENT


def test_transliterator_is_trimmed():
    config = SlugConfig(transliterator="  ascii ")
    assert config.transliterator == "ascii"


def test_transliterator_requires_value():
    with pytest.raises(ValueError):
        SlugConfig(transliterator="   ")


@pytest.mark.parametrize("overrides", [{"a": "x"}, {"éé": "e"}, {"é": "è"}])
def test_overrides_are_validated(overrides):
    with pytest.raises(ValueError):
        SlugConfig(overrides=overrides)


def test_build_encoder_uses_configured_backend():
    encoder = SlugConfig(mode="lenient", preserve_case=True).build_encoder()
    assert isinstance(encoder.transliterator, UnidecodeTransliterator)
    assert encoder.encode("Crème Brûlée") == "Creme Brulee"


def test_build_encoder_layers_overrides():
    encoder = SlugConfig(overrides={"ü": "ue"}).build_encoder()
    assert isinstance(encoder.transliterator, MappingTransliterator)
    assert encoder.encode("Müller") == "mueller"
    assert encoder.encode("Bäcker") == "backer"


def test_build_encoder_with_ascii_backend():
    encoder = SlugConfig(transliterator="ascii").build_encoder()
    assert encoder.encode("Bäcker") == "b-cker"


def test_build_encoder_rejects_unknown_backend():
    with pytest.raises(KeyError):
        SlugConfig(transliterator="missing").build_encoder()


def test_load_and_save_round_trip(tmp_path):
    path = tmp_path / "config.yaml"
    original = SlugConfig(mode=SlugMode.LENIENT, overrides={"ø": "oe"})
    original.save(path)

    loaded = SlugConfig.load(path)
    assert loaded == original


def test_json_round_trip(tmp_path):
    path = tmp_path / "nested" / "config.json"
    SlugConfig(preserve_case=True).save(path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["mode"] == "lenient"
    assert SlugConfig.load(path).preserve_case is True


def test_load_rejects_invalid_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"mode": "fancy"}), encoding="utf-8")

    with pytest.raises(ValueError):
        SlugConfig.load(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SlugConfig.load(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    ("name", "content"),
    [("broken.yaml", "mode: [unclosed\n"), ("broken.json", '{"mode": ')],
)
def test_load_rejects_malformed_syntax(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match=name):
        SlugConfig.load(path)
