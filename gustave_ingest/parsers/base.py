"""
Base parser protocol / ABC for gustave-ingest.

All layout-specific extractors implement this interface. The contract is:
1. extract() takes an in-memory RawGrid and returns the Snapshot series.
2. parse() takes a workbook source, reads its first sheet, and returns a
   ParseResult wrapping the same series plus reading diagnostics.

Why an ABC:
- Keeps the pure grid transform (extract) separate from container I/O
  (parse), so the transform is testable without any workbook on disk.
- Makes it easy to add extractors for new layouts without touching the
  public API.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from gustave_ingest.cells import RawGrid
from gustave_ingest.models import Snapshot
from gustave_ingest.workbook import WorkbookSource


@dataclass
class ParseResult:
    """Standardized output from any parser.

    Attributes:
        snapshots: Decoded snapshots in chronological (ascending) order.
        skipped_columns: Column indices whose period header was blank.
        source_name: File name (or ``""`` for anonymous byte buffers).
        format_name: The layout format_name used for extraction.
    """
    snapshots: list[Snapshot]
    skipped_columns: list[int] = field(default_factory=list)
    source_name: str = ""
    format_name: str = ""


class BaseParser(ABC):
    """Abstract base class for Gustave workbook extractors."""

    @abstractmethod
    def extract(self, grid: RawGrid) -> list[Snapshot]:
        """Transform a RawGrid into a chronological Snapshot series.

        Raises:
            InvalidFormatError: If the grid is structurally unusable.
        """

    @abstractmethod
    def parse(
        self,
        source: WorkbookSource,
        filename: str | None = None,
    ) -> ParseResult:
        """Read a workbook and extract its Snapshot series.

        Raises:
            UnsupportedFileError: If the file extension is not accepted.
            WorkbookReadError: If the workbook cannot be decoded.
            InvalidFormatError: If the sheet is structurally unusable.
        """
