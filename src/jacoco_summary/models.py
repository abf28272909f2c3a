"""Data models for an aggregate JaCoCo coverage summary."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class Category(Enum):
    """Coverage counters reported in the JaCoCo totals row, in column order."""

    INSTRUCTIONS = "instructions"
    BRANCHES = "branches"
    COMPLEXITY = "complexity"
    LINES = "lines"
    METHODS = "methods"
    CLASSES = "classes"

    @property
    def label(self) -> str:
        """Return the display label used in the text summary."""
        return self.value.capitalize()


CATEGORY_ORDER: tuple[Category, ...] = tuple(Category)


@dataclass(frozen=True)
class MetricPair:
    """Missed/total counts for one coverage category.

    The original cell text is kept alongside the parsed values so the
    summary can echo the report's own formatting (thousands separators
    included).
    """

    category: Category
    missed_text: str
    total_text: str
    missed: float
    total: float

    @property
    def covered(self) -> float:
        """Return the number of covered units."""
        return self.total - self.missed

    @property
    def coverage_percentage(self) -> float:
        """Return coverage as a percentage; an empty category counts as fully covered."""
        if self.total == 0:
            return 100.0
        return (self.covered / self.total) * 100.0


@dataclass(frozen=True)
class CoverageSummary:
    """The six category pairs of a report's totals row."""

    pairs: tuple[MetricPair, ...]

    def __post_init__(self) -> None:
        categories = tuple(pair.category for pair in self.pairs)
        if categories != CATEGORY_ORDER:
            expected = ", ".join(c.value for c in CATEGORY_ORDER)
            raise ValueError(
                f"Coverage summary requires exactly these categories in order: {expected}"
            )

    def __iter__(self) -> Iterator[MetricPair]:
        return iter(self.pairs)

    def get(self, category: Category) -> MetricPair:
        """Return the pair for *category*."""
        return self.pairs[CATEGORY_ORDER.index(category)]

    @property
    def percentages(self) -> dict[Category, float]:
        """Return the coverage percentage of every category, keyed by category."""
        return {pair.category: pair.coverage_percentage for pair in self.pairs}
