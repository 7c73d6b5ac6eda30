"""
gustave-ingest: Python library for ingesting Gustave net-worth workbooks.

Public API surface:

- ``read_snapshots(source, ...)`` -- pure read: validates the file
  extension, reads the first sheet, and returns the chronological
  ``Snapshot`` series.  Nothing is persisted.

- ``import_file(path, ...)`` -- import workflow.  Reads the workbook,
  replaces the stored series with the new one, and optionally exports it
  as a CSV/Parquet table.  Returns the series.

- ``load_saved(...)`` / ``reset(...)`` -- restore or clear the stored
  series.

- ``SheetExtractor`` -- the grid-level transform, for callers that
  already hold a decoded grid.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gustave_ingest.config import GustaveConfig, resolve_config
from gustave_ingest.demo import get_demo_data
from gustave_ingest.exceptions import (
    GustaveIngestError,
    InvalidFormatError,
    UnsupportedFileError,
    WorkbookReadError,
)
from gustave_ingest.export import export_snapshots
from gustave_ingest.layout_registry import Layout, get_layout
from gustave_ingest.models import Snapshot
from gustave_ingest.parsers.sheet import SheetExtractor
from gustave_ingest.store import SnapshotStore
from gustave_ingest.workbook import WorkbookSource, check_extension

__all__ = [
    "read_snapshots",
    "import_file",
    "load_saved",
    "reset",
    "get_demo_data",
    "Snapshot",
    "SheetExtractor",
    "GustaveIngestError",
    "InvalidFormatError",
    "UnsupportedFileError",
    "WorkbookReadError",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _resolve_layout(layout: Layout | str | None) -> Layout:
    if isinstance(layout, Layout):
        return layout
    if layout is None:
        return get_layout()
    return get_layout(layout)


def _store_for(config: GustaveConfig) -> SnapshotStore:
    return SnapshotStore(config.store.path)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read_snapshots(
    source: WorkbookSource,
    filename: str | None = None,
    layout: Layout | str | None = None,
) -> list[Snapshot]:
    """Read a workbook and return its chronological Snapshot series.

    Args:
        source: Path to an ``.xlsx`` / ``.xls`` file, its raw bytes, or a
            binary file object (e.g. an upload stream).
        filename: Original file name, for sources without a path of their
            own.  Its extension is validated and selects the engine.
        layout: A ``Layout`` or built-in layout name.  Defaults to
            ``patrimoine_monthly``.

    Returns:
        Snapshots ordered oldest first.

    Raises:
        UnsupportedFileError: If the file is not ``.xlsx`` / ``.xls``.
        WorkbookReadError: If the workbook cannot be decoded.
        InvalidFormatError: If the first sheet has too few rows.
    """
    extractor = SheetExtractor(_resolve_layout(layout))
    result = extractor.parse(source, filename=filename)
    return result.snapshots


def import_file(
    path: str | Path,
    config_path: str | Path | None = None,
) -> list[Snapshot]:
    """Import workflow: read, persist, and optionally export a workbook.

    Orchestration:
      1. ``check_extension()`` -- rejects non-Excel files up front.
      2. ``SheetExtractor.parse()`` -> ``ParseResult``.
      3. ``SnapshotStore.save()`` -- replaces the previous import.
      4. If ``output.export`` is set, ``export_snapshots()``.

    Nothing is persisted when any step before the save fails, so a bad
    file never clobbers the previously stored series.

    Args:
        path: Path to the workbook.
        config_path: Optional gustave.yaml; defaults apply when ``None``.

    Returns:
        The imported series, oldest first.

    Raises:
        UnsupportedFileError: If the file is not ``.xlsx`` / ``.xls``.
        WorkbookReadError: If the workbook cannot be decoded.
        InvalidFormatError: If the first sheet has too few rows.
        ExportError: If the optional export fails.
    """
    config = resolve_config(config_path)
    logger.info("import_file() -- path=%s, layout=%s", path, config.layout)

    check_extension(path)
    extractor = SheetExtractor(get_layout(config.layout))
    result = extractor.parse(path)

    _store_for(config).save(result.snapshots)

    if config.output.export:
        export_snapshots(
            result.snapshots,
            output_dir=config.output.output_dir,
            output_format=config.output.output_format,
            table_name=config.output.table_name,
        )

    return result.snapshots


def load_saved(config_path: str | Path | None = None) -> list[Snapshot]:
    """Return the stored series (``[]`` when nothing usable is stored)."""
    return _store_for(resolve_config(config_path)).load()


def reset(config_path: str | Path | None = None) -> None:
    """Clear the stored series."""
    _store_for(resolve_config(config_path)).clear()
