#!/usr/bin/env python3
"""
ALB2JSON SETTINGS
-----------------
Runtime options for a transcoding run. Loaded from an optional YAML file
and then overridden by command-line flags.

Example file:

    key_order: sorted      # schema | sorted
    input_errors: strict   # replace | strict
    chunk_size: 131072
    log_level: INFO

Author: alb2json Team
Date: 2026-10-19
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML, YAMLError

from alb2json.core.errors import ConfigError
from alb2json.transcode.encoder import KEY_ORDERS
from alb2json.transcode.pipeline import DEFAULT_CHUNK_SIZE, INPUT_ERROR_MODES

logger = logging.getLogger("alb2json.config")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class TranscodeSettings:
    key_order: str = "schema"           # JSON key order of each output object
    input_errors: str = "replace"       # How undecodable input bytes are handled
    chunk_size: int = DEFAULT_CHUNK_SIZE
    log_level: str = "WARNING"

    def validate(self) -> "TranscodeSettings":
        if self.key_order not in KEY_ORDERS:
            raise ConfigError(f"key_order must be one of {', '.join(KEY_ORDERS)}, got {self.key_order!r}")
        if self.input_errors not in INPUT_ERROR_MODES:
            raise ConfigError(
                f"input_errors must be one of {', '.join(INPUT_ERROR_MODES)}, got {self.input_errors!r}"
            )
        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, int) or self.chunk_size <= 0:
            raise ConfigError(f"chunk_size must be a positive integer, got {self.chunk_size!r}")
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        return self

    def override(self, **changes: Any) -> "TranscodeSettings":
        """Returns a copy with every non-None change applied."""
        applied = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **applied).validate()


def settings_from_mapping(data: Optional[Dict[str, Any]]) -> TranscodeSettings:
    if data is None:
        return TranscodeSettings()
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping of option names to values")

    known = {f.name for f in fields(TranscodeSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown configuration option(s): {', '.join(map(str, unknown))}")

    return TranscodeSettings(**data).validate()


def load_settings(path: Optional[str] = None) -> TranscodeSettings:
    """Reads settings from a YAML file; defaults when no path is given."""
    if not path:
        return TranscodeSettings()

    config_path = Path(path)
    try:
        raw_text = config_path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ConfigError(f"unable to read config file {config_path}: {e}") from e

    try:
        data = YAML(typ="safe").load(raw_text)
    except YAMLError as e:
        raise ConfigError(f"invalid YAML in {config_path}: {e}") from e

    logger.debug("loaded settings from %s", config_path)
    return settings_from_mapping(data)
