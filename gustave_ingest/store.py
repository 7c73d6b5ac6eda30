"""
Snapshot store for gustave-ingest.

Persists the most recent import as a camelCase JSON array, the same
payload the dashboard keeps under its ``gustave_data`` storage key.

Lifecycle:
- ``save()`` replaces the previous series wholesale (no merging).
- ``load()`` restores it; a missing file is an empty series, and so is a
  corrupt one (logged at ERROR) so the dashboard can still start.
- ``clear()`` implements "reset my data".
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from gustave_ingest.models import Snapshot

logger = logging.getLogger(__name__)

STORAGE_KEY = "gustave_data"

_SERIES = TypeAdapter(list[Snapshot])


class SnapshotStore:
    """JSON-file persistence for a Snapshot series.

    Attributes:
        path: Location of the JSON file.
    """

    def __init__(self, path: str | Path = f"{STORAGE_KEY}.json") -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"SnapshotStore(path={str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, snapshots: list[Snapshot]) -> None:
        """Write *snapshots*, replacing any previously stored series.

        The file is written to a temporary sibling then moved into place,
        so a crash mid-write never leaves a truncated store behind.
        """
        payload = _SERIES.dump_json(snapshots, by_alias=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info("Saved %d snapshots to %s", len(snapshots), self.path)

    def load(self) -> list[Snapshot]:
        """Read the stored series; ``[]`` if absent or unreadable."""
        if not self.exists():
            return []
        try:
            snapshots = _SERIES.validate_json(self.path.read_bytes())
        except ValidationError as exc:
            logger.error("Failed to parse saved data in %s: %s", self.path, exc)
            return []
        logger.info("Loaded %d snapshots from %s", len(snapshots), self.path)
        return snapshots

    def clear(self) -> None:
        """Delete the stored series (no-op if nothing is stored)."""
        self.path.unlink(missing_ok=True)
        logger.info("Cleared snapshot store %s", self.path)
