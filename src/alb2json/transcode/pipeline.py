#!/usr/bin/env python3
"""
ALB2JSON TRANSCODE PIPELINE - The Stream Driver
-----------------------------------------------
Connects a binary input stream to a binary output stream:

  bytes -> incremental UTF-8 decode -> LogLexer -> FieldEncoder -> JSON line

Strictly one line in, one line out. Any failure stops the run; nothing is
skipped or retried.

Author: alb2json Team
Date: 2026-10-19
"""

import codecs
import logging
from typing import BinaryIO, Iterator, Optional

from alb2json.core.errors import Alb2JsonError, InputError, OutputError
from alb2json.core.models import TranscodeStats
from alb2json.transcode.encoder import FieldEncoder
from alb2json.transcode.lexer import LogLexer
from alb2json.transcode.schema import alb_log_spec

logger = logging.getLogger("alb2json.pipeline")

DEFAULT_CHUNK_SIZE = 64 * 1024
INPUT_ERROR_MODES = ("replace", "strict")


class TranscodePipeline:
    """
    Orchestrates one transcoding run. A fresh lexer is created per run, so
    the same pipeline can be reused and always produces identical output for
    identical input.
    """

    def __init__(self, encoder: Optional[FieldEncoder] = None,
                 chunk_size: int = DEFAULT_CHUNK_SIZE, input_errors: str = "replace"):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if input_errors not in INPUT_ERROR_MODES:
            raise ValueError(f"input_errors must be one of {INPUT_ERROR_MODES}, got {input_errors!r}")
        self.encoder = encoder or FieldEncoder(alb_log_spec())
        self.chunk_size = chunk_size
        self.input_errors = input_errors

    def _read_text(self, reader: BinaryIO) -> Iterator[str]:
        """Yields decoded text chunks until the stream is exhausted."""
        decoder = codecs.getincrementaldecoder("utf-8")(errors=self.input_errors)
        offset = 0
        while True:
            try:
                data = reader.read(self.chunk_size)
            except OSError as e:
                raise InputError(f"unable to read input at byte {offset}: {e}") from e
            final = not data
            buffered, _ = decoder.getstate()
            try:
                text = decoder.decode(data or b"", final=final)
            except UnicodeDecodeError as e:
                # Positions are relative to the bytes held back from the previous chunk plus this one
                pending = buffered + data
                valid = pending[:e.start].decode("utf-8")
                if valid:
                    # Lets the lexer advance to the line holding the bad byte
                    yield valid
                position = offset - len(buffered) + e.start
                raise InputError(f"invalid UTF-8 near byte {position}: {e.reason}") from e
            if text:
                yield text
            if final:
                return
            offset += len(data)

    def _write(self, writer: BinaryIO, payload: bytes, line_no: int):
        try:
            writer.write(payload)
        except (OSError, ValueError) as e:
            raise OutputError(f"unable to write complete output: {e}", line_no) from e

    def run(self, reader: BinaryIO, writer: BinaryIO) -> TranscodeStats:
        """Transcodes every line of reader onto writer."""
        stats = TranscodeStats()
        lexer = LogLexer()

        try:
            for line_no, values in lexer.tokenize(self._read_text(reader)):
                try:
                    line = self.encoder.encode_line(values)
                except Alb2JsonError as e:
                    e.at_line(line_no)
                    raise
                self._write(writer, line.encode("utf-8") + b"\n", line_no)
                stats.records_written += 1
                stats.overflow_fields += self.encoder.overflow_count(values)
        except InputError as e:
            e.at_line(lexer.line_no)
            raise

        stats.lines_read = lexer.line_no - 1
        stats.blank_lines = stats.lines_read - stats.records_written

        try:
            writer.flush()
        except (OSError, ValueError) as e:
            raise OutputError(f"unable to flush output: {e}") from e

        logger.info(
            "transcoded %d lines into %d records (%d blank, %d overflow fields)",
            stats.lines_read, stats.records_written, stats.blank_lines, stats.overflow_fields,
        )
        return stats
