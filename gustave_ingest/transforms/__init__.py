"""
Transforms sub-package for gustave-ingest.

Cell decoders applied by the extractor, one per semantic row type:
  - dates.py: period headers (date serials / free text) -> display string.
  - numbers.py: amounts and percentages (numbers / French text / sentinels)
    -> number, degrading to 0 on anything unparsable.

Each decoder works on a single cell and never raises on bad content, so
they are independently testable and safe to apply to messy sheets.
"""
