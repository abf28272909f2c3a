"""Shared fixtures for jacoco-summary tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

# ── Sample report ────────────────────────────────────────────────

SAMPLE_CELLS = [
    ("bar", "126,863 of 183,008"),
    ("ctr2", "30%"),
    ("bar", "16,304 of 20,309"),
    ("ctr2", "19%"),
    ("ctr1", "13,424"),
    ("ctr2", "16,694"),
    ("ctr1", "29,567"),
    ("ctr2", "42,831"),
    ("ctr1", "4,103"),
    ("ctr2", "6,471"),
    ("ctr1", "103"),
    ("ctr2", "547"),
]

EXPECTED_SAMPLE = """\
===========================
Coverage results
===========================
Instructions: 30.68% (126,863 of 183,008 missed)
Branches    : 19.72% (16,304 of 20,309 missed)
Complexity  : 19.59% (13,424 of 16,694 missed)
Lines       : 30.97% (29,567 of 42,831 missed)
Methods     : 36.59% (4,103 of 6,471 missed)
Classes     : 81.17% (103 of 547 missed)"""

_HEAD = """\
<?xml version="1.0" encoding="UTF-8"?><!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" "http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">
<html xmlns="http://www.w3.org/1999/xhtml" lang="en">
<head><title>demo</title></head>
<body>
<table class="coverage" cellspacing="0" id="coveragetable">
<thead><tr><td class="sortable" id="a" onclick="toggleSort(this)">Element</td>
<td class="down sortable bar" id="b" onclick="toggleSort(this)">Missed Instructions</td></tr></thead>
"""

_TAIL = """\
<tbody><tr><td id="a0"><a href="com.example/index.html" class="el_package">com.example</a></td>
<td class="ctr2" id="c0">30%</td></tr></tbody>
</table>
</body>
</html>
"""


def build_tfoot(cells: list[tuple[str, str]]) -> str:
    """Return a ``<tfoot>`` block with one cell per line."""
    rows = "\n".join(f'    <td class="{css}">{text}</td>' for css, text in cells)
    return f"<tfoot>\n  <tr>\n    <td>Total</td>\n{rows}\n  </tr>\n</tfoot>\n"


def build_report(cells: list[tuple[str, str]] | None = None) -> str:
    """Return a JaCoCo-style ``index.html`` whose totals row holds *cells*."""
    return _HEAD + build_tfoot(SAMPLE_CELLS if cells is None else cells) + _TAIL


def write_report(root: Path, content: str, rel: str = "index.html") -> Path:
    """Write *content* to *rel* under *root* and return the path."""
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def sample_report(tmp_path: Path) -> Path:
    """A report containing the sample totals row."""
    return write_report(tmp_path, build_report())
