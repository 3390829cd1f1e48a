#!/usr/bin/env python3
"""
ALB2JSON FIELD ENCODER
----------------------
Maps an ordered list of raw fields onto the schema and serializes the
result as a single compact JSON object.

Rules:
  * '-' or '' in a schema position means "absent" and becomes null
    without ever reaching the converter.
  * Positions past the end of the schema are named 'unknown_<position>'
    and always kept as plain strings, absent markers included.

Author: alb2json Team
Date: 2026-10-19
"""

import json
import logging
from typing import Any, Dict, List, Sequence

from alb2json.core.errors import FieldConversionError, SerializationError
from alb2json.core.models import Field
from alb2json.transcode.unformat import ABSENT_MARKERS, unformat, unformat_string

logger = logging.getLogger("alb2json.encoder")

KEY_ORDERS = ("schema", "sorted")


class FieldEncoder:
    """Converts raw field lists into typed records for one fixed schema."""

    def __init__(self, fields: Sequence[Field], key_order: str = "schema"):
        if key_order not in KEY_ORDERS:
            raise ValueError(f"key_order must be one of {KEY_ORDERS}, got {key_order!r}")
        self.fields: List[Field] = list(fields)
        self.key_order = key_order

    def encode(self, values: Sequence[str]) -> Dict[str, Any]:
        """Builds the name -> typed value mapping for one line."""
        record: Dict[str, Any] = {}
        for index, raw in enumerate(values):
            if index >= len(self.fields):
                key = f"unknown_{index}"
                logger.debug("overflow field %s=%r", key, raw)
                record[key] = unformat_string(raw)
                continue

            spec = self.fields[index]
            if raw in ABSENT_MARKERS:
                record[spec.key] = None
                continue

            try:
                record[spec.key] = unformat(spec.kind, raw)
            except ValueError as e:
                raise FieldConversionError(spec.key, raw, e) from e
        return record

    def overflow_count(self, values: Sequence[str]) -> int:
        return max(0, len(values) - len(self.fields))

    def dumps(self, record: Dict[str, Any]) -> str:
        """Serializes a record to compact JSON (no trailing newline)."""
        try:
            return json.dumps(
                record,
                ensure_ascii=False,
                allow_nan=False,
                separators=(",", ":"),
                sort_keys=self.key_order == "sorted",
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(f"unable to encode output line: {e}") from e

    def encode_line(self, values: Sequence[str]) -> str:
        return self.dumps(self.encode(values))
