"""
Workbook reading for gustave-ingest.

Turns an ``.xlsx`` / ``.xls`` container into a ``RawGrid``: the first
sheet only, no header inference, one list of cells per row.

Date-typed cells come back from pandas as ``Timestamp`` objects; they are
converted to legacy spreadsheet serials here (see ``cells.to_cell``) so
the extractor only ever sees the raw numeric encoding, exactly as if the
sheet had been read in raw mode.

Engines:
- ``.xlsx`` -> openpyxl
- ``.xls``  -> xlrd
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, Union

import pandas as pd

from gustave_ingest.cells import Cell, to_cell
from gustave_ingest.exceptions import UnsupportedFileError, WorkbookReadError

logger = logging.getLogger(__name__)

ACCEPTED_EXTENSIONS = (".xlsx", ".xls")

_ENGINES = {".xlsx": "openpyxl", ".xls": "xlrd"}

WorkbookSource = Union[str, Path, bytes, bytearray, IO[bytes]]


def check_extension(name: str | Path) -> str:
    """Validate that *name* ends in an accepted spreadsheet extension.

    Returns:
        The lower-cased suffix (``".xlsx"`` or ``".xls"``).

    Raises:
        UnsupportedFileError: For any other suffix.
    """
    suffix = Path(str(name)).suffix.lower()
    if suffix not in ACCEPTED_EXTENSIONS:
        raise UnsupportedFileError(
            f"Unsupported file '{name}': expected an Excel workbook "
            f"({' or '.join(ACCEPTED_EXTENSIONS)})"
        )
    return suffix


def source_name(source: WorkbookSource, filename: str | None = None) -> str:
    """Best-effort display name for a workbook source (``""`` if anonymous)."""
    if filename:
        return filename
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", "") or ""


def read_grid(
    source: WorkbookSource,
    filename: str | None = None,
) -> list[list[Cell]]:
    """Read the first sheet of a workbook into a ``RawGrid``.

    Args:
        source: Path, raw bytes, or a binary file object.
        filename: Name used to pick the engine when *source* carries no
            path of its own (bytes, in-memory buffers).  Defaults to
            treating anonymous sources as ``.xlsx``.

    Returns:
        List of rows, each a list of ``Cell`` values.

    Raises:
        UnsupportedFileError: If the name carries an unsupported extension.
        WorkbookReadError: If the container cannot be decoded.
    """
    name = source_name(source, filename)
    suffix = check_extension(name) if name else ".xlsx"

    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    try:
        df = pd.read_excel(
            source,
            sheet_name=0,
            header=None,
            engine=_ENGINES[suffix],
        )
    except FileNotFoundError:
        raise
    except Exception as exc:
        raise WorkbookReadError(
            f"Failed to read workbook {name or '<bytes>'}: {exc}"
        ) from exc

    grid = [[to_cell(v) for v in row] for row in df.itertuples(index=False, name=None)]
    logger.info(
        "Read workbook %s: %d rows x %d columns",
        name or "<bytes>", len(df), len(df.columns),
    )
    return grid
