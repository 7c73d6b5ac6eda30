"""
Layout loader for gustave-ingest.

Loads layout YAML files from gustave_ingest/layouts/ and provides
structured access via Pydantic models. Each layout defines:
- format_name: unique identifier (e.g., "patrimoine_monthly")
- first_period_col: the first column holding a period (column 0 = labels)
- min_rows: the minimum row count a sheet must have to be accepted
- mapping: the positional schema, one ``{row, name, decoder}`` entry per
  Snapshot field.  The entry named ``date`` is the period header row.

Why YAML instead of hardcoded:
- The row -> field mapping is self-documenting and editable without
  touching the extraction logic.
- Each schema entry can be unit-tested in isolation via ``Layout.rows``.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Callable, Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from gustave_ingest.exceptions import LayoutNotFoundError
from gustave_ingest.models import SNAPSHOT_FIELDS
from gustave_ingest.transforms.dates import decode_date
from gustave_ingest.transforms.numbers import decode_amount

logger = logging.getLogger(__name__)

# Directory containing layout YAML files (sibling package)
_LAYOUTS_DIR = Path(__file__).parent / "layouts"

DEFAULT_LAYOUT = "patrimoine_monthly"

DECODERS: dict[str, Callable[[object], object]] = {
    "date": decode_date,
    "amount": decode_amount,
}


class FieldSpec(BaseModel):
    """One positional schema entry: which row feeds which Snapshot field."""
    row: int = Field(..., ge=0)
    name: str
    decoder: Literal["date", "amount"] = "amount"


class Layout(BaseModel):
    """A complete layout definition loaded from YAML."""
    format_name: str
    description: str = ""
    first_period_col: int = Field(1, ge=1)
    min_rows: int = Field(..., ge=1)
    mapping: list[FieldSpec]

    @model_validator(mode="after")
    def _check_fields(self) -> Layout:
        """Every Snapshot field mapped exactly once, rows unique, date is the header."""
        names = [f.name for f in self.mapping]
        unknown = set(names) - set(SNAPSHOT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown snapshot fields in layout: {sorted(unknown)}")
        missing = set(SNAPSHOT_FIELDS) - set(names)
        if missing:
            raise ValueError(f"Layout does not map snapshot fields: {sorted(missing)}")
        if len(names) != len(set(names)):
            raise ValueError("Each snapshot field may be mapped only once")

        rows = [f.row for f in self.mapping]
        if len(rows) != len(set(rows)):
            raise ValueError("Each row may feed only one snapshot field")

        for spec in self.mapping:
            expected = "date" if spec.name == "date" else "amount"
            if spec.decoder != expected:
                raise ValueError(
                    f"Field '{spec.name}' must use the '{expected}' decoder, "
                    f"got '{spec.decoder}'"
                )
        return self

    @property
    def header_row(self) -> int:
        """Row index of the period headers."""
        return next(f.row for f in self.mapping if f.name == "date")

    @property
    def rows(self) -> list[tuple[int, str, Callable[[object], object]]]:
        """The schema as ordered ``(row index, field name, decoder)`` tuples."""
        return [(f.row, f.name, DECODERS[f.decoder]) for f in self.mapping]


def load_layout(path: Path) -> Layout:
    """Load a single layout YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    return Layout.model_validate(raw)


def load_all_layouts(layouts_dir: Path | None = None) -> list[Layout]:
    """Load all layout YAML files in a directory.

    Files that fail to load or validate are skipped with a warning so a
    single broken layout does not disable the others.

    Args:
        layouts_dir: Directory to scan for .yaml files. Defaults to
            the built-in layouts/ directory.

    Returns:
        List of Layout objects, in file-name order.
    """
    layouts_dir = layouts_dir or _LAYOUTS_DIR
    layouts: list[Layout] = []
    for yaml_path in sorted(layouts_dir.glob("*.yaml")):
        try:
            layout = load_layout(yaml_path)
            layouts.append(layout)
            logger.debug("Loaded layout: %s from %s", layout.format_name, yaml_path)
        except Exception as e:
            logger.warning("Failed to load layout from %s: %s", yaml_path, e)
    logger.info("Loaded %d layouts", len(layouts))
    return layouts


@lru_cache(maxsize=None)
def _builtin_layouts() -> dict[str, Layout]:
    return {layout.format_name: layout for layout in load_all_layouts()}


def get_layout(name: str = DEFAULT_LAYOUT) -> Layout:
    """Return a built-in layout by name.

    Raises:
        LayoutNotFoundError: If no built-in layout has this ``format_name``.
    """
    layouts = _builtin_layouts()
    try:
        return layouts[name]
    except KeyError:
        raise LayoutNotFoundError(
            f"Unknown layout '{name}'. Available layouts: {sorted(layouts)}"
        ) from None
