#!/usr/bin/env python3
"""
ALB2JSON CLI - Stream Entry Point
---------------------------------
Reads load balancer access logs (stdin or a file) and writes one JSON
object per line (stdout or a file).

Orchestrates:
1. Settings (YAML config file + flag overrides)
2. Logging setup (rich, stderr)
3. Optional CPU profiling of the run
4. Error reporting and exit codes (0 success, 1 failure)

Author: alb2json Team
Date: 2026-10-19
"""

import argparse
import cProfile
import logging
import sys
from contextlib import ExitStack
from typing import BinaryIO, List, Optional

from rich.logging import RichHandler

from alb2json.cli.formatter import ReportFormatter, console
from alb2json.config import TranscodeSettings, load_settings
from alb2json.core.errors import Alb2JsonError, ConfigError, InputError, OutputError
from alb2json.transcode.encoder import KEY_ORDERS, FieldEncoder
from alb2json.transcode.pipeline import TranscodePipeline
from alb2json.transcode.schema import alb_log_spec

VERSION = "1.0.0"

logger = logging.getLogger("alb2json.cli")


class Alb2JsonCLI:
    """
    CLI wrapper that translates flags into a TranscodePipeline run.
    Streams can be injected so the whole command runs in-process.
    """

    def __init__(self, stdin: Optional[BinaryIO] = None, stdout: Optional[BinaryIO] = None,
                 formatter: Optional[ReportFormatter] = None):
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout.buffer
        self.formatter = formatter or ReportFormatter()
        self.parser = argparse.ArgumentParser(
            prog="alb2json",
            description="Transcode AWS Application Load Balancer access logs to newline-delimited JSON",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("--version", action="version", version=f"alb2json v{VERSION}")
        self.parser.add_argument("-i", "--input", default="-", help="Log file to read (default: stdin)")
        self.parser.add_argument("-o", "--output", default="-", help="File to write JSON lines to (default: stdout)")
        self.parser.add_argument("--config", help="YAML settings file")
        self.parser.add_argument("--key-order", choices=KEY_ORDERS, help="JSON key order (default: schema)")
        self.parser.add_argument("--strict-utf8", action="store_true",
                                 help="Fail on invalid UTF-8 instead of substituting U+FFFD")
        self.parser.add_argument("--profile-output", help="Write a CPU profile of the run to this file")
        self.parser.add_argument("--stats", action="store_true", help="Print a run report to stderr")
        self.parser.add_argument("-v", "--verbose", action="count", default=0,
                                 help="Increase log verbosity (-v info, -vv debug)")

    def _resolve_settings(self, args: argparse.Namespace) -> TranscodeSettings:
        settings = load_settings(args.config)
        level = None
        if args.verbose == 1:
            level = "INFO"
        elif args.verbose > 1:
            level = "DEBUG"
        return settings.override(
            key_order=args.key_order,
            input_errors="strict" if args.strict_utf8 else None,
            log_level=level,
        )

    def _setup_logging(self, level: str):
        logging.basicConfig(
            level=level.upper(),
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )

    def _open_streams(self, stack: ExitStack, args: argparse.Namespace):
        if args.input == "-":
            reader = self.stdin
        else:
            try:
                reader = stack.enter_context(open(args.input, "rb"))
            except OSError as e:
                raise InputError(f"unable to open input {args.input!r}: {e}") from e

        if args.output == "-":
            writer = self.stdout
        else:
            try:
                writer = stack.enter_context(open(args.output, "wb"))
            except OSError as e:
                raise OutputError(f"unable to open output {args.output!r}: {e}") from e
        return reader, writer

    def _transcode(self, args: argparse.Namespace, settings: TranscodeSettings):
        encoder = FieldEncoder(alb_log_spec(), key_order=settings.key_order)
        pipeline = TranscodePipeline(
            encoder, chunk_size=settings.chunk_size, input_errors=settings.input_errors
        )

        with ExitStack() as stack:
            reader, writer = self._open_streams(stack, args)

            profiler = None
            if args.profile_output:
                try:
                    open(args.profile_output, "wb").close()
                except OSError as e:
                    raise ConfigError(f"unable to create profiling file {args.profile_output!r}: {e}") from e
                profiler = cProfile.Profile()
                profiler.enable()

            try:
                stats = pipeline.run(reader, writer)
            finally:
                if profiler is not None:
                    profiler.disable()
                    profiler.dump_stats(args.profile_output)
                    logger.info("CPU profile written to %s", args.profile_output)

        if args.stats:
            self.formatter.print_stats(stats)
        return stats

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary entry point. Returns the process exit code."""
        args = self.parser.parse_args(argv)
        try:
            settings = self._resolve_settings(args)
            self._setup_logging(settings.log_level)
            self._transcode(args, settings)
        except Alb2JsonError as e:
            logger.debug("run aborted", exc_info=True)
            self.formatter.show_error(e)
            return 1
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(Alb2JsonCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
