"""
Cell model for gustave-ingest.

A worksheet cell arrives in one of exactly three shapes:

- ``Absent``: the cell is empty, or the row is shorter than the column
  being read (sheets are frequently jagged).
- ``Number``: a numeric value.  Date-typed cells are converted to the
  legacy spreadsheet serial (days since 1899-12-30) so that every date
  reaches the decoders in the same encoding.
- ``Text``: any string content, verbatim.

``RawGrid`` is a list of rows, each a list of cells.  Producers may hand
over plain Python / pandas values instead of ``Cell`` instances;
``to_cell()`` normalises them at read time, so a grid built by hand in a
test and a grid read from a workbook behave identically.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Sequence, Union

import numpy as np
import pandas as pd

# Day zero of the legacy (1900) spreadsheet date system, including the
# phantom 1900-02-29 inherited from Lotus 1-2-3.
_SERIAL_EPOCH = datetime(1899, 12, 30)


@dataclass(frozen=True)
class Absent:
    """An empty cell."""


@dataclass(frozen=True)
class Number:
    """A numeric cell."""
    value: float | int


@dataclass(frozen=True)
class Text:
    """A text cell."""
    value: str


Cell = Union[Absent, Number, Text]
RawGrid = Sequence[Sequence[Any]]

ABSENT = Absent()


def datetime_to_serial(value: datetime | date) -> float:
    """Convert a calendar date/datetime to a legacy spreadsheet serial."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is not None:
        value = value.replace(tzinfo=None)
    return (value - _SERIAL_EPOCH) / timedelta(days=1)


def to_cell(raw: Any) -> Cell:
    """Normalise a raw worksheet value into a ``Cell``.

    - ``None``, ``NaN`` and ``NaT`` become ``Absent``.
    - ints and floats (including numpy scalars) become ``Number``.
    - ``datetime`` / ``date`` / ``pandas.Timestamp`` become a ``Number``
      holding the legacy serial.
    - booleans become ``Number(1)`` / ``Number(0)``, so a ``FALSE``
      header is blank.
    - everything else becomes ``Text(str(raw))``.
    """
    if isinstance(raw, (Absent, Number, Text)):
        return raw
    if raw is None or raw is pd.NaT:
        return ABSENT
    if isinstance(raw, (bool, np.bool_)):
        return Number(int(raw))
    if isinstance(raw, (int, np.integer)):
        return Number(int(raw))
    if isinstance(raw, (float, np.floating)):
        if np.isnan(raw):
            return ABSENT
        return Number(float(raw))
    if isinstance(raw, (datetime, date)):
        return Number(datetime_to_serial(raw))
    if isinstance(raw, str):
        return Text(raw)
    return Text(str(raw))


def cell_at(grid: RawGrid, row: int, col: int) -> Cell:
    """Read ``grid[row][col]`` as a ``Cell``; out-of-range reads are ``Absent``."""
    if row >= len(grid):
        return ABSENT
    cells = grid[row]
    if col >= len(cells):
        return ABSENT
    return to_cell(cells[col])


def is_blank(cell: Cell) -> bool:
    """Whether a header cell carries no period label.

    Absent cells, whitespace-only text and a numeric ``0`` (which covers
    boolean ``FALSE``) are blank.
    """
    if isinstance(cell, Absent):
        return True
    if isinstance(cell, Number):
        return cell.value == 0
    return not cell.value.strip()
