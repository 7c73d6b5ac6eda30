"""
Demo script: import a Gustave workbook via the public API.

Usage:
    python scripts/run_import.py inputs/patrimoine.xlsx            # import + store
    python scripts/run_import.py inputs/patrimoine.xlsx --config gustave.yaml
    python scripts/run_import.py --demo                            # show demo data
    python scripts/run_import.py --reset                           # clear stored data

Without a file argument, the currently stored series is shown.
"""

from __future__ import annotations

import argparse
import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_import")


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _log_series(snapshots) -> None:
    """Log one line per period, oldest first."""
    if not snapshots:
        log.info("  (no data)")
        return
    for s in snapshots:
        log.info(
            "  %-12s total=%12.2f  epargne=%12.2f  investissement=%12.2f",
            s.date, s.total_patrimoine, s.total_epargne, s.total_investissement,
        )


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    import gustave_ingest

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("file", nargs="?", help="Workbook to import (.xlsx / .xls)")
    parser.add_argument("--config", default=None, help="Path to gustave.yaml")
    parser.add_argument("--demo", action="store_true", help="Show the demo series")
    parser.add_argument("--reset", action="store_true", help="Clear stored data")
    args = parser.parse_args(argv)

    if args.reset:
        gustave_ingest.reset(args.config)
        log.info("Stored data cleared.")
        return 0

    if args.demo:
        log.info("Demo series:")
        _log_series(gustave_ingest.get_demo_data())
        return 0

    if args.file is None:
        log.info("Stored series:")
        _log_series(gustave_ingest.load_saved(args.config))
        return 0

    try:
        snapshots = gustave_ingest.import_file(args.file, config_path=args.config)
    except FileNotFoundError:
        log.error("File not found: %s", args.file)
        return 1
    except gustave_ingest.UnsupportedFileError:
        log.error("Please select an Excel file (.xlsx or .xls).")
        return 1
    except gustave_ingest.GustaveIngestError as exc:
        log.error(
            "Could not read %s. Make sure it follows the expected layout. (%s)",
            args.file, exc,
        )
        return 1

    log.info("Imported %d periods from %s:", len(snapshots), args.file)
    _log_series(snapshots)
    return 0


if __name__ == "__main__":
    sys.exit(main())
