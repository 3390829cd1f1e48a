#!/usr/bin/env python3
"""
ALB2JSON LEXER - Quote-Aware Field Splitter
-------------------------------------------
Splits raw access-log text into ordered lists of string fields.

Grammar (shell-like, simplified):
  * unquoted spaces separate fields
  * "..." spans may contain spaces; the quotes themselves are dropped
  * a backslash makes the next character literal, whatever it is
  * a newline ends the line unless it is escaped

The lexer is fed text one chunk at a time so arbitrarily large inputs are
processed with memory bounded by the longest line.

Author: alb2json Team
Date: 2026-10-19
"""

import logging
from typing import Iterable, Iterator, List, Tuple

from alb2json.core.errors import TokenizeError
from alb2json.core.models import LexState

logger = logging.getLogger("alb2json.lexer")

Record = Tuple[int, List[str]]


class LogLexer:
    """
    Character-level state machine. Maintains quoting/escaping state for the
    line being built and yields (line_no, fields) for every completed line.
    """

    def __init__(self):
        self.state = LexState()
        self.line_no = 1

    def feed(self, chunk: str) -> Iterator[Record]:
        """Consumes a chunk of text, yielding each line it completes."""
        state = self.state
        for char in chunk:
            if state.escaping:
                state.escaping = False
                state.current.append(char)
                continue

            if char == "\n":
                record = self._complete_line()
                if record is not None:
                    yield record
                state = self.state
            elif char == "\\":
                state.escaping = True
            elif char == '"':
                state.quoting = not state.quoting
            elif char == " " and not state.quoting:
                state.fields.append("".join(state.current))
                state.current = []
            else:
                state.current.append(char)

    def finish(self) -> Iterator[Record]:
        """End of stream acts as an implicit newline."""
        if self.state.escaping:
            # The implicit newline is what the trailing backslash escapes
            self.state.escaping = False
            self.state.current.append("\n")
        if not (self.state.quoting or self.state.has_content()):
            return
        record = self._complete_line()
        if record is not None:
            yield record

    def tokenize(self, chunks: Iterable[str]) -> Iterator[Record]:
        """Runs the whole machine over an iterable of text chunks."""
        for chunk in chunks:
            yield from self.feed(chunk)
        yield from self.finish()

    def _complete_line(self):
        state = self.state
        line_no = self.line_no

        if state.quoting:
            raise TokenizeError("unterminated quoted field", line_no)

        record = None
        if state.has_content():
            state.fields.append("".join(state.current))
            record = (line_no, state.fields)
        else:
            logger.debug("line %d: blank, skipped", line_no)

        self.state = LexState()
        self.line_no += 1
        return record


def split_line(text: str) -> List[str]:
    """
    Tokenizes a single line in isolation.
    Returns an empty list for a blank line.
    """
    lexer = LogLexer()
    records = list(lexer.tokenize([text]))
    if not records:
        return []
    return records[0][1]
