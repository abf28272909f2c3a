"""Extraction constants and report path configuration.

The layout of the JaCoCo HTML totals row is fixed, so everything except the
report path is compiled in here rather than read from the environment.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from jacoco_summary.models import CATEGORY_ORDER, Category

logger = logging.getLogger(__name__)

START_MARKER = "<tfoot>"
END_MARKER = "</tfoot>"

# One totals cell, e.g. <td class="ctr2">16,694</td>
CELL_PATTERN = re.compile(r'<td class="[^"]+">([0-9of,% ]+)</td>')

NUM_FIELDS = 12

RATIO_SEPARATOR = " of "

# Ordinals of the cells holding each category. A single ordinal is a
# "<missed> of <total>" cell; a pair is (missed, total). Ordinals 1 and 3
# are the report's own percentage columns and are never read.
FIELD_ORDINALS: dict[Category, tuple[int, ...]] = {
    Category.INSTRUCTIONS: (0,),
    Category.BRANCHES: (2,),
    Category.COMPLEXITY: (4, 5),
    Category.LINES: (6, 7),
    Category.METHODS: (8, 9),
    Category.CLASSES: (10, 11),
}

# HTML report locations (Maven: jacoco-maven-plugin; Gradle: jacocoTestReport)
DEFAULT_REPORT_PATHS = (
    "target/site/jacoco/index.html",
    "build/reports/jacoco/test/html/index.html",
)


def resolve_report_path(project_root: Path, explicit: str | Path | None = None) -> Path:
    """Return the report to read.

    An explicit path always wins. Otherwise the first conventional location
    that exists under *project_root* is used, falling back to the Maven
    location so that a missing report is reported by that name.
    """
    if explicit is not None:
        return Path(explicit)
    for candidate in DEFAULT_REPORT_PATHS:
        path = project_root / candidate
        if path.is_file():
            logger.debug("Found JaCoCo HTML report at %s", path)
            return path
    return project_root / DEFAULT_REPORT_PATHS[0]


@dataclass
class ExtractorConfig:
    """Settings for a single extraction run."""

    report_path: Path
    """HTML report to summarise."""

    start_marker: str = START_MARKER
    end_marker: str = END_MARKER
    cell_pattern: re.Pattern[str] = CELL_PATTERN
    num_fields: int = NUM_FIELDS
    field_ordinals: dict[Category, tuple[int, ...]] = field(
        default_factory=lambda: dict(FIELD_ORDINALS)
    )


def validate_config(config: ExtractorConfig) -> list[str]:
    """Validate the configuration and return a list of error messages.

    Returns an empty list if the configuration is valid.
    """
    errors: list[str] = []

    if not str(config.report_path):
        errors.append("report_path is required")
    if not config.start_marker or not config.end_marker:
        errors.append("start_marker and end_marker must not be empty")
    if config.cell_pattern.groups != 1:
        errors.append("cell_pattern must have exactly one capture group")
    if config.num_fields <= 0:
        errors.append("num_fields must be positive")

    if tuple(config.field_ordinals) != CATEGORY_ORDER:
        errors.append("field_ordinals must list every category in column order")
    for category, ordinals in config.field_ordinals.items():
        if len(ordinals) not in {1, 2}:
            errors.append(f"field_ordinals.{category.value} must hold one or two ordinals")
        if any(not 0 <= ordinal < config.num_fields for ordinal in ordinals):
            errors.append(
                f"field_ordinals.{category.value} must be within 0..{config.num_fields - 1}"
            )

    return errors
