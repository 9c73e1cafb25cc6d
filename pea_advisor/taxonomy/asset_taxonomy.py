"""
Asset taxonomy for catalog records.

  - ``AssetType``: instrument category (ETF or single stock).
  - ``AssetRisk``: coarse three-level risk tier driving the risk filter.
  - ``EsgRating``: ordered sustainability grade, ``AAA`` best.

``EsgRating.rank`` gives a sortable position (0 = best) so callers can compare
grades without relying on string ordering.

This module has NO imports from any other ``pea_advisor`` package.
"""

from enum import StrEnum


class AssetType(StrEnum):
    """Instrument category."""

    ETF = "ETF"
    STOCK = "Stock"


class AssetRisk(StrEnum):
    """Risk tier assigned to each catalog asset."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class EsgRating(StrEnum):
    """Sustainability grade, declared best to worst."""

    AAA = "AAA"
    AA = "AA"
    A = "A"
    BBB = "BBB"
    BB = "BB"
    B = "B"
    CCC = "CCC"
    CC = "CC"
    C = "C"

    @property
    def rank(self) -> int:
        """0 for ``AAA``, increasing as the grade worsens."""
        return list(EsgRating).index(self)


RISK_LABELS: dict[str, str] = {
    AssetRisk.LOW:    "Faible risque",
    AssetRisk.MEDIUM: "Risque modéré",
    AssetRisk.HIGH:   "Risque élevé",
}
