"""jacoco-summary CLI: print aggregate coverage from a JaCoCo HTML report."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from jacoco_summary import __version__
from jacoco_summary.config import ExtractorConfig, resolve_report_path
from jacoco_summary.extractor import ReportError, extract_summary
from jacoco_summary.reporter import reporter

logger = logging.getLogger(__name__)


@click.command()
@click.argument("report", required=False, type=click.Path(path_type=Path))
@click.version_option(version=__version__, prog_name="jacoco-summary")
def cli(report: Path | None) -> None:
    """Print coverage percentages from a JaCoCo HTML report.

    REPORT defaults to target/site/jacoco/index.html (Maven) or
    build/reports/jacoco/test/html/index.html (Gradle), whichever exists.
    """
    config = ExtractorConfig(report_path=resolve_report_path(Path.cwd(), report))
    try:
        summary = extract_summary(config)
    except ReportError as e:
        logger.debug("Extraction failed for %s", config.report_path, exc_info=True)
        reporter.print_error(str(e))
        raise click.Abort from e

    reporter.print_summary(summary)


if __name__ == "__main__":
    cli()
