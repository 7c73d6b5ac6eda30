"""
Snapshot record for gustave-ingest.

One ``Snapshot`` is the decoded financial position for a single period
column.  Attributes are snake_case in Python; serialisation uses the
camelCase keys the presentation layer and the JSON store expect
(``totalPatrimoine``, ``livretA``, ...).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Snapshot(BaseModel):
    """An immutable financial snapshot for one period.

    ``date`` is the display label (``DD/MM/YYYY`` for serial headers,
    verbatim otherwise).  Every other field is a plain number: euros for
    amounts, percentage points for ``*_percent`` fields.  Fields are not
    cross-validated against each other.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    date: str
    total_patrimoine: float
    livret_a: float
    livret_jeune: float
    compte_titres: float
    perf_compte_titres_euro: float
    perf_compte_titres_percent: float
    pea: float
    perf_pea_euro: float
    perf_pea_percent: float
    total_investissement: float
    percent_investissement: float
    total_epargne: float
    percent_epargne: float


# Python attribute names, in declaration order
SNAPSHOT_FIELDS: tuple[str, ...] = tuple(Snapshot.model_fields)

# Serialised (camelCase) names, in declaration order
SNAPSHOT_COLUMNS: tuple[str, ...] = tuple(
    info.alias or name for name, info in Snapshot.model_fields.items()
)
