"""
Configuration models and YAML I/O for gustave-ingest.

This module defines the Pydantic models that map 1:1 to gustave.yaml,
plus helper functions for loading, saving, and building the default config.

Key models:
- GustaveConfig: Top-level config (layout + store + output).
- StoreConfig: Where the latest import is persisted as JSON.
- OutputConfig: Optional tabular export (directory, format, toggle).

Key functions:
- load_config(path) -> GustaveConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- default_config() -> GustaveConfig: Built-in defaults (no file needed).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from gustave_ingest.exceptions import ConfigValidationError
from gustave_ingest.layout_registry import DEFAULT_LAYOUT

logger = logging.getLogger(__name__)


class StoreConfig(BaseModel):
    """Snapshot store settings."""

    path: str = Field(
        "gustave_data.json",
        description="JSON file holding the latest imported snapshot series",
    )


class OutputConfig(BaseModel):
    """Tabular export settings."""

    output_dir: str = Field("outputs/", description="Directory for exported tables")
    output_format: Literal["csv", "parquet"] = Field(
        "parquet", description="Export format"
    )
    export: bool = Field(
        False, description="If True, export the series after every import"
    )
    table_name: str = Field("snapshots", description="Exported file stem")


class GustaveConfig(BaseModel):
    """Top-level configuration for gustave-ingest.

    Maps 1:1 to gustave.yaml.
    """

    layout: str = Field(DEFAULT_LAYOUT, description="Built-in layout format_name")
    store: StoreConfig = Field(default_factory=StoreConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def default_config() -> GustaveConfig:
    """Config used when no gustave.yaml is given."""
    return GustaveConfig()


def load_config(path: str | Path) -> GustaveConfig:
    """Load and validate gustave.yaml into a GustaveConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return GustaveConfig.model_validate(raw)


def save_config(config: GustaveConfig, path: str | Path) -> None:
    """Serialize a GustaveConfig to YAML.

    Writes a human-readable YAML file with a header comment.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# gustave-ingest configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def resolve_config(config_path: str | Path | None) -> GustaveConfig:
    """Load *config_path* if given, else return the defaults."""
    if config_path is None:
        return default_config()
    return load_config(config_path)
