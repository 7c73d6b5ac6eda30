"""
Sheet extractor for Gustave net-worth workbooks.

Input structure (positional, see layouts/patrimoine_monthly.yaml):
  - Row 0: period headers, one per column, most recent period first.
    Headers are date serials (raw mode) or free text.
  - Column 0: row labels, never read.
  - Rows 1-13: one metric per row (total net worth, Livret A, ...).

Key transformation:
  Each period column becomes one Snapshot.  Columns are visited left to
  right and the accumulated list is reversed, so a newest-first sheet
  yields an oldest-first series.  Column order is an input contract and
  is not detected: an oldest-first sheet comes out newest-first.

Robustness policy:
  The only structural check is the minimum row count.  A blank header
  skips its column; a malformed metric cell decodes to 0.  Neither raises.
"""

from __future__ import annotations

import logging

from gustave_ingest.cells import RawGrid, cell_at, is_blank
from gustave_ingest.exceptions import InvalidFormatError
from gustave_ingest.layout_registry import Layout, get_layout
from gustave_ingest.models import Snapshot
from gustave_ingest.parsers.base import BaseParser, ParseResult
from gustave_ingest.workbook import WorkbookSource, read_grid, source_name

logger = logging.getLogger(__name__)


class SheetExtractor(BaseParser):
    """Extractor for fixed-row, period-per-column Gustave sheets.

    Stateless apart from its (read-only) layout, so one instance can be
    shared across calls and threads.
    """

    def __init__(self, layout: Layout | None = None) -> None:
        self.layout = layout or get_layout()

    def extract(self, grid: RawGrid) -> list[Snapshot]:
        snapshots, _skipped = self._extract(grid)
        return snapshots

    def parse(
        self,
        source: WorkbookSource,
        filename: str | None = None,
    ) -> ParseResult:
        grid = read_grid(source, filename=filename)
        snapshots, skipped = self._extract(grid)
        return ParseResult(
            snapshots=snapshots,
            skipped_columns=skipped,
            source_name=source_name(source, filename),
            format_name=self.layout.format_name,
        )

    def _extract(self, grid: RawGrid) -> tuple[list[Snapshot], list[int]]:
        layout = self.layout
        if len(grid) < layout.min_rows:
            raise InvalidFormatError(
                f"Invalid file format: layout '{layout.format_name}' expects at "
                f"least {layout.min_rows} rows, found {len(grid)}"
            )

        header = grid[layout.header_row]
        snapshots: list[Snapshot] = []
        skipped: list[int] = []

        for col in range(layout.first_period_col, len(header)):
            if is_blank(cell_at(grid, layout.header_row, col)):
                logger.debug("Skipping column %d: blank period header", col)
                skipped.append(col)
                continue

            values = {
                name: decoder(cell_at(grid, row, col))
                for row, name, decoder in layout.rows
            }
            snapshots.append(Snapshot(**values))

        # Sheets store the newest period first
        snapshots.reverse()

        logger.info(
            "Extracted %d snapshots (%d blank columns skipped)",
            len(snapshots), len(skipped),
        )
        return snapshots, skipped
