#!/usr/bin/env python3
"""
ALB2JSON ERRORS
---------------
Every failure is fatal for the run. Each exception carries the context
needed to diagnose it: line number, field name and offending raw value.

Author: alb2json Team
Date: 2026-10-19
"""

from typing import Optional


class Alb2JsonError(Exception):
    """Base class for all transcoding failures."""

    def __init__(self, message: str, line_no: Optional[int] = None):
        self.message = message
        self.line_no = line_no
        super().__init__(self.__str__())

    def at_line(self, line_no: int) -> "Alb2JsonError":
        """Attaches a line number if the error was raised without one."""
        if self.line_no is None:
            self.line_no = line_no
            self.args = (self.__str__(),)
        return self

    def __str__(self) -> str:
        if self.line_no is not None:
            return f"line {self.line_no}: {self.message}"
        return self.message


class TokenizeError(Alb2JsonError):
    """A line could not be split into fields (unterminated quote)."""


class FieldConversionError(Alb2JsonError):
    """A raw field could not be converted to its schema kind."""

    def __init__(self, key: str, value: str, cause: Exception, line_no: Optional[int] = None):
        self.key = key
        self.value = value
        self.cause = cause
        super().__init__(
            f"error parsing field {key} with value {value!r}: {cause}", line_no
        )


class SerializationError(Alb2JsonError):
    """The converted record could not be encoded as JSON."""


class InputError(Alb2JsonError):
    """Reading or decoding the input stream failed."""


class OutputError(Alb2JsonError):
    """Writing the output stream failed."""


class ConfigError(Alb2JsonError):
    """The configuration file or a command-line override is invalid."""
