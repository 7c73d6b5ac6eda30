"""
Amount decoding for gustave-ingest.

Gustave workbooks mix real numeric cells with French-formatted text:
- Space (or non-breaking space) as thousand separator (e.g., "1 234,56")
- Comma as decimal separator (e.g., "0,71")
- Trailing currency / percent symbols (e.g., "52,80€", "6,62%")
- Sentinels meaning "no value": "X" and "-"

Every one of these decodes to a plain number.  Anything that still does
not parse decodes to ``0``: one bad cell must never abort an import.
"""

from __future__ import annotations

import re

from gustave_ingest.cells import Absent, Cell, Number, Text, to_cell

SENTINELS = frozenset({"X", "-"})

_WHITESPACE = re.compile(r"\s+")
# Longest leading decimal literal, e.g. "12.5abc" -> "12.5"
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def clean_amount_text(text: str) -> str:
    """Normalise French amount text into a dot-decimal literal.

    Applies, in order:
    1. Drop all whitespace (including non-breaking / narrow spaces).
    2. Replace the first comma with a period.
    3. Drop the first euro sign.
    4. Drop the first percent sign.
    """
    cleaned = _WHITESPACE.sub("", text)
    cleaned = cleaned.replace(",", ".", 1)
    cleaned = cleaned.replace("€", "", 1)
    return cleaned.replace("%", "", 1)


def parse_leading_float(text: str) -> float | None:
    """Parse the longest numeric prefix of *text*, or ``None`` if there is none."""
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return None
    return float(match.group(0))


def decode_amount(value: Cell | object) -> float | int:
    """Decode an amount / percentage cell.

    - ``Absent`` and the sentinels ``"X"`` / ``"-"`` -> ``0``.
    - ``Number`` -> its value, unchanged.
    - ``Text`` -> cleaned with ``clean_amount_text()`` then parsed;
      unparsable text -> ``0``.

    Raw values (``None``, floats, strings) are accepted and normalised
    through ``to_cell()`` first.
    """
    cell = to_cell(value)
    if isinstance(cell, Absent):
        return 0
    if isinstance(cell, Number):
        return cell.value
    if isinstance(cell, Text):
        if cell.value in SENTINELS:
            return 0
        parsed = parse_leading_float(clean_amount_text(cell.value))
        return 0 if parsed is None else parsed
    raise TypeError(f"Unexpected cell type: {type(cell).__name__}")
