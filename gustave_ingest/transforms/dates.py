"""
Period header decoding for gustave-ingest.

Header cells in row 0 label each period column.  They arrive either as a
legacy spreadsheet date serial (the usual case, since sheets are read in
raw mode) or as free text typed by the user.

Serial conversion: serial ``25569`` is 1970-01-01 UTC, so the instant is
``round((serial - 25569) * 86_400_000)`` milliseconds after the Unix
epoch.  The calendar date of that instant in UTC is rendered ``DD/MM/YYYY``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from gustave_ingest.cells import Absent, Cell, Number, Text, to_cell

UNIX_EPOCH_SERIAL = 25569
_MS_PER_DAY = 86_400 * 1000
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def serial_to_datetime(serial: float) -> datetime:
    """Convert a legacy spreadsheet serial to an aware UTC datetime."""
    millis = round((serial - UNIX_EPOCH_SERIAL) * _MS_PER_DAY)
    return _UNIX_EPOCH + timedelta(milliseconds=millis)


def decode_date(value: Cell | object) -> str:
    """Decode a period header into a display string.

    - ``Absent`` -> ``""``.
    - ``Number`` -> ``DD/MM/YYYY`` of the serial's UTC calendar date
      (a serial outside the datetime range is stringified instead).
    - ``Text`` -> returned verbatim, with no reformatting.
    """
    cell = to_cell(value)
    if isinstance(cell, Absent):
        return ""
    if isinstance(cell, Number):
        try:
            return serial_to_datetime(cell.value).strftime("%d/%m/%Y")
        except OverflowError:
            # Outside the representable calendar range (or infinite)
            return str(cell.value)
    if isinstance(cell, Text):
        return cell.value
    raise TypeError(f"Unexpected cell type: {type(cell).__name__}")
