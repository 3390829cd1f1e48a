# src/alb2json/cli/formatter.py
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.table import Table

from alb2json.core.errors import Alb2JsonError, FieldConversionError
from alb2json.core.models import TranscodeStats

# stdout carries the JSON stream, so every human-facing message goes to stderr
console = Console(stderr=True)


class ReportFormatter:
    """
    Renders run diagnostics: failure panels and the optional stats table.
    """

    def __init__(self, target: Console = console):
        self.console = target

    def show_error(self, error: Alb2JsonError):
        """Explains a fatal error with every piece of context it carries."""
        lines = [f"[bold red]{type(error).__name__}[/bold red]: {escape(error.message)}"]
        if error.line_no is not None:
            lines.append(f"Line:  [bold cyan]{error.line_no}[/bold cyan]")
        if isinstance(error, FieldConversionError):
            lines.append(f"Field: [white]{escape(error.key)}[/white]")
            lines.append(f"Value: [white]{escape(repr(error.value))}[/white]")

        self.console.print(Panel(
            "\n".join(lines),
            title="[bold white]Error transcoding ALB logs to JSON[/bold white]",
            border_style="red",
            expand=False,
        ))

    def print_stats(self, stats: TranscodeStats):
        table = Table(title="alb2json Run Report", show_header=True, header_style="bold magenta")
        table.add_column("Metric", style="cyan")
        table.add_column("Count", justify="right")

        table.add_row("Lines read", str(stats.lines_read))
        table.add_row("Records written", str(stats.records_written))
        table.add_row("Blank lines skipped", str(stats.blank_lines))
        table.add_row("Overflow fields", str(stats.overflow_fields))

        self.console.print(table)
