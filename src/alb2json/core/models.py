#!/usr/bin/env python3
"""
ALB2JSON CORE MODELS
--------------------
Defines the fundamental data structures shared by the lexer, the encoder
and the streaming pipeline.

Author: alb2json Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class FieldKind(Enum):
    """Closed set of conversions a schema position can request."""
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    HOST_PORT = "host_port"
    COMMA_LIST = "comma_list"
    HOST_PORT_LIST = "host_port_list"
    INTEGER_LIST = "integer_list"


@dataclass(frozen=True)
class Field:
    """
    One positional slot of a log line.

    The position of a Field inside the schema list decides which raw value
    it receives; the kind decides how that value is converted.
    """
    key: str                # Output JSON key (e.g. 'elb_status_code')
    kind: FieldKind = FieldKind.STRING


@dataclass
class LexState:
    """
    Mutable per-line state of the tokenizer.
    Reset after every completed line so no state leaks across lines.
    """
    quoting: bool = False        # Inside a "..." span
    escaping: bool = False       # Previous character was an unconsumed backslash
    current: List[str] = field(default_factory=list)  # Characters of the field being built
    fields: List[str] = field(default_factory=list)   # Completed fields of this line

    def has_content(self) -> bool:
        return bool(self.fields) or bool(self.current)


@dataclass
class TranscodeStats:
    """Counters collected over one pipeline run."""
    lines_read: int = 0          # Physical lines seen, blank ones included
    records_written: int = 0     # JSON objects emitted
    blank_lines: int = 0         # Lines skipped because they held no fields
    overflow_fields: int = 0     # Fields past the end of the schema
