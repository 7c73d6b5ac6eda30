"""
Custom exception hierarchy for gustave-ingest.

Callers catch the specific subclass they can act on (e.g., tell the user
the file is not an Excel workbook vs. the workbook has the wrong shape)
without relying on generic ValueError/RuntimeError.

Cell-level decoding anomalies are never raised: a malformed cell decodes
to ``0`` (amounts) or ``""`` (absent dates).
"""


class GustaveIngestError(Exception):
    """Base exception for all gustave-ingest errors."""


class InvalidFormatError(GustaveIngestError):
    """Raised when a sheet has fewer rows than the layout requires.

    Fatal to the extraction call; no partial result is returned.
    """


class UnsupportedFileError(GustaveIngestError):
    """Raised when a file does not carry an accepted extension (.xlsx / .xls)."""


class WorkbookReadError(GustaveIngestError):
    """Raised when the spreadsheet container cannot be decoded.

    For example, a truncated download, a password-protected workbook, or a
    text file renamed to ``.xlsx``.  The underlying exception is chained.
    """


class LayoutNotFoundError(GustaveIngestError):
    """Raised when a requested layout name has no matching YAML definition."""


class ConfigValidationError(GustaveIngestError):
    """Raised when gustave.yaml is empty or fails validation."""


class ExportError(GustaveIngestError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """
