"""
Shared test fixtures for gustave-ingest tests.

All test inputs are synthetic: grids are built in memory with
``make_grid()`` and workbooks are written to ``tmp_path`` with openpyxl,
so no real input files are required.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

# Row labels as they appear in column 0 of a Gustave sheet (never read)
ROW_LABELS = [
    "Date",
    "Total patrimoine",
    "Livret A",
    "Livret Jeune",
    "Compte titres",
    "Perf CT (€)",
    "Perf CT (%)",
    "PEA",
    "Perf PEA (€)",
    "Perf PEA (%)",
    "Total investissement",
    "% investissement",
    "Total épargne",
    "% épargne",
]

# Serials for 01/06/2025 and 01/05/2025
JUNE_2025 = 45809
MAY_2025 = 45778

JUNE_METRICS = [
    "7 045,70 €", "5 389,75 €", "1 600,17 €", "52,80 €", "2,98 €", "0,48%",
    "X", "-", "-", "55,78 €", "0,79%", "6 989,92 €", "99,21%",
]
MAY_METRICS = [
    7039.76, 5389.75, 1600.17, 49.84, 0, 0,
    0, 0, 0, 49.84, 0.71, 6989.92, 99.29,
]


def make_grid(headers: list[Any], metric_columns: list[list[Any]]) -> list[list[Any]]:
    """Build a Gustave-shaped grid.

    Args:
        headers: Period header cells for columns 1..N.
        metric_columns: One list of 13 metric cells per period column.
    """
    grid: list[list[Any]] = [[ROW_LABELS[0], *headers]]
    for i in range(13):
        grid.append([ROW_LABELS[i + 1], *(col[i] for col in metric_columns)])
    return grid


def write_xlsx(path: Path, grid: list[list[Any]]) -> Path:
    """Write *grid* to the first sheet of a new workbook at *path*."""
    from openpyxl import Workbook

    wb = Workbook()
    ws = wb.active
    ws.title = "Patrimoine"
    for r, row in enumerate(grid, start=1):
        for c, value in enumerate(row, start=1):
            if value is not None:
                ws.cell(row=r, column=c, value=value)
    # A second sheet that must be ignored
    other = wb.create_sheet("Notes")
    other["A1"] = "ignored"
    wb.save(path)
    return path


@pytest.fixture()
def sample_grid() -> list[list[Any]]:
    """Two periods, newest first: June 2025 (text cells) then May 2025 (numbers)."""
    return make_grid([JUNE_2025, MAY_2025], [JUNE_METRICS, MAY_METRICS])


@pytest.fixture()
def sample_xlsx(tmp_path: Path, sample_grid) -> Path:
    return write_xlsx(tmp_path / "patrimoine.xlsx", sample_grid)


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (reads real workbooks written to tmp_path)",
    )
