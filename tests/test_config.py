#!/usr/bin/env python3
"""
ALB2JSON SETTINGS SUITE
-----------------------
YAML loading, validation and flag overrides.
"""

import pytest

from alb2json.config import TranscodeSettings, load_settings, settings_from_mapping
from alb2json.core.errors import ConfigError


def test_defaults_without_a_file():
    settings = load_settings(None)
    assert settings == TranscodeSettings()
    assert settings.key_order == "schema"
    assert settings.input_errors == "replace"


def test_loads_yaml_file(tmp_path):
    path = tmp_path / "alb2json.yaml"
    path.write_text("key_order: sorted\ninput_errors: strict\nchunk_size: 4096\nlog_level: debug\n")

    settings = load_settings(str(path))
    assert settings.key_order == "sorted"
    assert settings.input_errors == "strict"
    assert settings.chunk_size == 4096
    assert settings.log_level == "debug"


def test_empty_file_means_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_settings(str(path)) == TranscodeSettings()


@pytest.mark.parametrize("content, message", [
    ("key_order: random\n", "key_order"),
    ("input_errors: ignore\n", "input_errors"),
    ("chunk_size: 0\n", "chunk_size"),
    ("chunk_size: true\n", "chunk_size"),
    ("log_level: LOUD\n", "log_level"),
    ("colour: blue\n", "unknown configuration option"),
    ("- just\n- a list\n", "mapping"),
    ("key_order: [unclosed\n", "invalid YAML"),
])
def test_invalid_files(tmp_path, content, message):
    path = tmp_path / "bad.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError, match=message):
        load_settings(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="unable to read config file"):
        load_settings(str(tmp_path / "nope.yaml"))


def test_override_ignores_unset_flags():
    base = settings_from_mapping({"key_order": "sorted"})
    assert base.override(key_order=None, log_level="INFO") == TranscodeSettings(
        key_order="sorted", log_level="INFO"
    )


def test_override_is_validated():
    with pytest.raises(ConfigError):
        TranscodeSettings().override(key_order="reverse")
