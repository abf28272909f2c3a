"""Plain-text rendering of a coverage summary and terminal output."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from jacoco_summary.models import CoverageSummary, MetricPair

BANNER_RULE = "=" * 27
BANNER_TITLE = "Coverage results"

# Width of the longest label ("Instructions")
_LABEL_WIDTH = 12

_HUNDREDTHS = Decimal("0.01")

err_console = Console(stderr=True)


def format_percentage(value: float) -> str:
    """Format *value* to two decimals, rounding halves up (``3.125`` -> ``3.13``)."""
    return str(Decimal(str(value)).quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))


def format_pair(pair: MetricPair) -> str:
    """Format one category line, e.g. ``Lines       : 30.97% (29,567 of 42,831 missed)``."""
    label = pair.category.label.ljust(_LABEL_WIDTH)
    return (
        f"{label}: {format_percentage(pair.coverage_percentage)}% "
        f"({pair.missed_text} of {pair.total_text} missed)"
    )


def render_summary(summary: CoverageSummary) -> str:
    """Return the complete summary text: banner, then one line per category."""
    lines = [BANNER_RULE, BANNER_TITLE, BANNER_RULE]
    lines.extend(format_pair(pair) for pair in summary)
    return "\n".join(lines)


class CLIReporter:
    """Terminal output for the summary command.

    The summary goes to stdout verbatim; diagnostics go to stderr through rich.
    """

    def __init__(self) -> None:
        """Initialize the CLI reporter."""
        self.console = err_console

    def print_summary(self, summary: CoverageSummary) -> None:
        """Render the whole summary, then write it in one go."""
        click.echo(render_summary(summary))

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)


# Singleton instance for easy import
reporter = CLIReporter()
