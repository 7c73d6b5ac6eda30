"""
Exporter for gustave-ingest.

Writes a Snapshot series to the output directory as a single table in the
configured format (CSV or Parquet).  One row per period, in chronological
order, with the camelCase column names used by the JSON store.

Output file naming convention:
  {table_name}.{format}  -- e.g., "snapshots.parquet", "snapshots.csv"

CSV is written with ``utf-8-sig`` encoding (BOM) so that accented labels
display correctly when the file is opened in Excel.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import pandas as pd

from gustave_ingest.exceptions import ExportError
from gustave_ingest.models import SNAPSHOT_COLUMNS, Snapshot

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def snapshots_to_frame(snapshots: list[Snapshot]) -> pd.DataFrame:
    """Tabulate a Snapshot series, one row per period.

    Columns follow Snapshot field order (``date`` first).  The explicit
    column list keeps the schema stable for an empty series.
    """
    rows = [s.model_dump(by_alias=True) for s in snapshots]
    return pd.DataFrame(rows, columns=list(SNAPSHOT_COLUMNS))


def _write_dataframe(
    df: pd.DataFrame,
    path: Path,
    output_format: str,
) -> None:
    """Write a single DataFrame to disk in the specified format.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_snapshots(
    snapshots: list[Snapshot],
    output_dir: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
    table_name: str = "snapshots",
) -> str:
    """Write a Snapshot series to ``{output_dir}/{table_name}.{format}``.

    The output directory is created recursively if it does not exist.

    Returns:
        The path of the written file.

    Raises:
        ExportError: If *output_format* is unsupported, or if the write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    df = snapshots_to_frame(snapshots)
    file_path = out / f"{table_name}.{output_format}"
    _write_dataframe(df, file_path, output_format)
    logger.info(
        "Exported %d snapshots -> %s",
        len(df),
        file_path,
    )
    return str(file_path)
