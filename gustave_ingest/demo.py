"""Built-in sample series shown before the user imports a workbook."""

from __future__ import annotations

from gustave_ingest.models import Snapshot

_DEMO_ROWS = [
    {
        "date": "01/06/2025",
        "totalPatrimoine": 7039.76,
        "livretA": 5389.75,
        "livretJeune": 1600.17,
        "compteTitres": 49.84,
        "perfCompteTitresEuro": 0,
        "perfCompteTitresPercent": 0,
        "pea": 0,
        "perfPeaEuro": 0,
        "perfPeaPercent": 0,
        "totalInvestissement": 49.84,
        "percentInvestissement": 0.71,
        "totalEpargne": 6989.92,
        "percentEpargne": 99.29,
    },
    {
        "date": "01/07/2025",
        "totalPatrimoine": 7045.70,
        "livretA": 5389.75,
        "livretJeune": 1600.17,
        "compteTitres": 52.80,
        "perfCompteTitresEuro": 2.98,
        "perfCompteTitresPercent": 0.48,
        "pea": 0,
        "perfPeaEuro": 0,
        "perfPeaPercent": 0,
        "totalInvestissement": 55.78,
        "percentInvestissement": 0.79,
        "totalEpargne": 6989.92,
        "percentEpargne": 99.21,
    },
    {
        "date": "01/01/2026",
        "totalPatrimoine": 7506.12,
        "livretA": 5389.75,
        "livretJeune": 1600.17,
        "compteTitres": 474.75,
        "perfCompteTitresEuro": 41.38,
        "perfCompteTitresPercent": 6.62,
        "pea": 0,
        "perfPeaEuro": 0,
        "perfPeaPercent": 0,
        "totalInvestissement": 516.20,
        "percentInvestissement": 6.88,
        "totalEpargne": 6989.92,
        "percentEpargne": 93.12,
    },
]


def get_demo_data() -> list[Snapshot]:
    """Return the three-period demo series, oldest first."""
    return [Snapshot.model_validate(row) for row in _DEMO_ROWS]
