"""jacoco-summary: aggregate coverage figures from a JaCoCo HTML report."""

from __future__ import annotations

from jacoco_summary.extractor import (
    FragmentNotFoundError,
    InvalidConfigError,
    InvalidNumberError,
    MissingFieldError,
    ReadError,
    ReportError,
    ReportNotFoundError,
    extract_summary,
)
from jacoco_summary.models import Category, CoverageSummary, MetricPair
from jacoco_summary.reporter import render_summary

__version__ = "0.1.0"

__all__ = [
    "Category",
    "CoverageSummary",
    "FragmentNotFoundError",
    "InvalidConfigError",
    "InvalidNumberError",
    "MetricPair",
    "MissingFieldError",
    "ReadError",
    "ReportError",
    "ReportNotFoundError",
    "__version__",
    "extract_summary",
    "render_summary",
]
