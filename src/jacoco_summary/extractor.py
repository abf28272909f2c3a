"""Extract aggregate coverage from a JaCoCo HTML report.

The report's ``index.html`` ends its main table with a totals row::

    <tfoot>
      <tr>
        <td>Total</td>
        <td class="bar">126,863 of 183,008</td>
        <td class="ctr2">30%</td>
        <td class="bar">16,304 of 20,309</td>
        <td class="ctr2">19%</td>
        <td class="ctr1">13,424</td>
        <td class="ctr2">16,694</td>
        ...
      </tr>
    </tfoot>

Only that fragment is scanned, with a single cell pattern, and the cells are
mapped to categories by position.
"""

from __future__ import annotations

import logging
from itertools import islice
from pathlib import Path

from jacoco_summary.config import RATIO_SEPARATOR, ExtractorConfig, validate_config
from jacoco_summary.models import CATEGORY_ORDER, Category, CoverageSummary, MetricPair

logger = logging.getLogger(__name__)

_RATIO_TOKENS = 2


class ReportError(Exception):
    """Base exception for report extraction failures."""


class ReportNotFoundError(ReportError):
    """Raised when the report path is not an existing file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Report file doesn't exist at {path}")
        self.path = path


class ReadError(ReportError):
    """Raised when the report exists but cannot be read."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Error reading from report file {path}")
        self.path = path


class FragmentNotFoundError(ReportError):
    """Raised when the totals fragment markers are missing."""

    def __init__(self, marker: str) -> None:
        super().__init__(f"Marker {marker} not found in report")
        self.marker = marker


class MissingFieldError(ReportError):
    """Raised when the totals fragment has fewer cells than expected."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Match #{index} not found containing coverage information")
        self.index = index


class InvalidNumberError(ReportError):
    """Raised when a cell's text is not a count."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid number in coverage cell: {text!r}")
        self.text = text


class InvalidConfigError(ReportError):
    """Raised when an extraction config is inconsistent."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("Invalid extractor config: " + "; ".join(errors))
        self.errors = errors


def read_report(path: Path) -> str:
    """Return the report text with line breaks removed.

    Raises:
        ReportNotFoundError: If *path* is not a file.
        ReadError: If the file cannot be read.
    """
    if not path.is_file():
        raise ReportNotFoundError(path)
    try:
        with path.open(encoding="utf-8", errors="replace") as handle:
            return "".join(line.rstrip("\n") for line in handle)
    except OSError as e:
        raise ReadError(path) from e


def isolate_fragment(content: str, start_marker: str, end_marker: str) -> str:
    """Return *content* from *start_marker* up to, not including, *end_marker*."""
    start = content.find(start_marker)
    if start < 0:
        raise FragmentNotFoundError(start_marker)
    end = content.find(end_marker, start + len(start_marker))
    if end < 0:
        raise FragmentNotFoundError(end_marker)
    return content[start:end]


def extract_fields(fragment: str, config: ExtractorConfig) -> list[str]:
    """Return the text of the first ``config.num_fields`` cells in *fragment*."""
    matches = [
        match.group(1)
        for match in islice(config.cell_pattern.finditer(fragment), config.num_fields)
    ]
    logger.debug("Matched %d coverage cells", len(matches))
    if len(matches) < config.num_fields:
        raise MissingFieldError(len(matches))
    return matches


def parse_number(text: str) -> float:
    """Parse a count such as ``126,863``."""
    cleaned = text.replace(",", "").strip()
    try:
        return float(cleaned)
    except ValueError as e:
        raise InvalidNumberError(text) from e


def split_ratio(text: str) -> tuple[str, str]:
    """Split a ``<missed> of <total>`` cell into its two tokens."""
    parts = text.split(RATIO_SEPARATOR)
    if len(parts) != _RATIO_TOKENS:
        raise InvalidNumberError(text)
    return parts[0].strip(), parts[1].strip()


def build_pair(category: Category, missed_text: str, total_text: str) -> MetricPair:
    """Parse one category's tokens into a :class:`MetricPair`."""
    pair = MetricPair(
        category=category,
        missed_text=missed_text,
        total_text=total_text,
        missed=parse_number(missed_text),
        total=parse_number(total_text),
    )
    if pair.total == 0:
        logger.warning("No %s recorded in report, treating as fully covered", category.value)
    return pair


def build_summary(fields: list[str], config: ExtractorConfig) -> CoverageSummary:
    """Map the ordered cell texts onto the six coverage categories."""
    pairs: list[MetricPair] = []
    for category in CATEGORY_ORDER:
        ordinals = config.field_ordinals[category]
        if len(ordinals) == 1:
            missed_text, total_text = split_ratio(fields[ordinals[0]])
        else:
            missed_text, total_text = fields[ordinals[0]], fields[ordinals[1]]
        pairs.append(build_pair(category, missed_text, total_text))
    return CoverageSummary(pairs=tuple(pairs))


def extract_summary(report: str | Path | ExtractorConfig) -> CoverageSummary:
    """Read a JaCoCo HTML report and return its coverage summary.

    Args:
        report: Path to ``index.html``, or a full :class:`ExtractorConfig`.

    Returns:
        The six category pairs of the report's totals row.

    Raises:
        ReportError: If any stage of the extraction fails.
    """
    config = report if isinstance(report, ExtractorConfig) else ExtractorConfig(Path(report))
    errors = validate_config(config)
    if errors:
        raise InvalidConfigError(errors)
    logger.debug("Reading JaCoCo report %s", config.report_path)

    content = read_report(config.report_path)
    fragment = isolate_fragment(content, config.start_marker, config.end_marker)
    logger.debug("Totals fragment is %d characters", len(fragment))

    fields = extract_fields(fragment, config)
    return build_summary(fields, config)
