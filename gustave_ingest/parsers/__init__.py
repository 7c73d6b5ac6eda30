"""
Parsers sub-package for gustave-ingest.

Contains layout-specific extractors that convert a worksheet grid into
the Snapshot series consumed by the presentation layer.

Design: Strategy Pattern
- base.py defines the BaseParser ABC (protocol) and ParseResult.
- sheet.py implements SheetExtractor for the fixed-row Gustave layout.

Each extractor receives a Layout from the layout registry, which provides
the positional row schema (no heuristic scanning).
"""
