"""
Side-by-side asset comparator.

Selection rules
---------------
- At most ``max_assets`` (default 4) assets are selected at once.
- An asset is selected at most once (identity = ``asset_id``).
- Adding to a full selection, or re-adding a selected asset, is a no-op.
- The comparison table is shown only once at least two assets are selected.

``comparison_rows()`` lays the selected assets out field by field, in the
fixed order of ``COMPARISON_FIELDS``. Values are raw (no formatting).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from pea_advisor.models.asset import Asset
from pea_advisor.taxonomy.asset_taxonomy import EsgRating

DEFAULT_MAX_ASSETS = 4
MIN_ASSETS_TO_COMPARE = 2


class ComparisonSelection(BaseModel):
    """Ordered, bounded set of assets picked for comparison."""

    model_config = ConfigDict(frozen=True)

    assets: tuple[Asset, ...] = ()
    max_assets: int = Field(default=DEFAULT_MAX_ASSETS, ge=MIN_ASSETS_TO_COMPARE)

    @property
    def asset_ids(self) -> list[str]:
        return [a.asset_id for a in self.assets]

    @property
    def is_full(self) -> bool:
        return len(self.assets) >= self.max_assets

    def contains(self, asset_id: str) -> bool:
        return asset_id in self.asset_ids


def add(selection: ComparisonSelection, asset: Asset) -> ComparisonSelection:
    if selection.is_full or selection.contains(asset.asset_id):
        return selection
    return selection.model_copy(update={"assets": selection.assets + (asset,)})


def remove(selection: ComparisonSelection, asset_id: str) -> ComparisonSelection:
    return selection.model_copy(
        update={"assets": tuple(a for a in selection.assets if a.asset_id != asset_id)}
    )


def toggle(selection: ComparisonSelection, asset: Asset) -> ComparisonSelection:
    """Remove ``asset`` if selected, otherwise try to add it."""
    if selection.contains(asset.asset_id):
        return remove(selection, asset.asset_id)
    return add(selection, asset)


def is_ready(selection: ComparisonSelection) -> bool:
    return len(selection.assets) >= MIN_ASSETS_TO_COMPARE


def search_catalog(
    catalog:    Iterable[Asset],
    term:       str = "",
    asset_type: Optional[str] = None,
    min_esg:    Optional[str] = None,
) -> list[Asset]:
    """Filter the catalog for the comparator picker.

    Args:
        catalog:    Assets to search.
        term:       Case-insensitive substring of name or symbol; ``""`` matches all.
        asset_type: ``"ETF"``, ``"Stock"``, or ``None`` / ``"all"`` for every type.
        min_esg:    Worst acceptable ESG grade, e.g. ``"A"`` keeps AAA, AA and A.

    Returns:
        Matching assets in catalog order.

    Raises:
        ValueError: If ``min_esg`` is not a known grade.
    """
    needle = term.lower()
    max_rank = EsgRating(min_esg).rank if min_esg else None
    results: list[Asset] = []
    for asset in catalog:
        if needle and needle not in asset.name.lower() and needle not in asset.symbol.lower():
            continue
        if asset_type not in (None, "all") and asset.asset_type != asset_type:
            continue
        if max_rank is not None and asset.esg_rating.rank > max_rank:
            continue
        results.append(asset)
    return results


# ── Comparison table ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ComparisonField:
    key:    str
    label:  str
    getter: Callable[[Asset], Any]


COMPARISON_FIELDS: tuple[ComparisonField, ...] = (
    ComparisonField("pea_eligible",   "Éligibilité PEA",  lambda a: a.pea_eligible),
    ComparisonField("type",           "Type",             lambda a: a.asset_type.value),
    ComparisonField("price",          "Prix actuel",      lambda a: a.price),
    ComparisonField("performance_1y", "Performance 1 an", lambda a: a.performance_1y),
    ComparisonField("performance_5y", "Performance 5 ans", lambda a: a.performance_5y),
    ComparisonField("volatility",     "Volatilité",       lambda a: a.volatility),
    ComparisonField("dividend_yield", "Dividende",        lambda a: a.dividend_yield),
    ComparisonField("fees",           "Frais annuels",    lambda a: a.fees),
    ComparisonField("esg_rating",     "Notation ESG",     lambda a: a.esg_rating.value),
    ComparisonField("sector",         "Secteur",          lambda a: a.sector),
)


@dataclass(frozen=True)
class ComparisonRow:
    """One comparison criterion across the selected assets.

    Attributes:
        key:    Stable field key, e.g. ``"volatility"``.
        label:  Display label.
        values: One raw value per selected asset, in selection order.
    """

    key:    str
    label:  str
    values: tuple[Any, ...]


def comparison_rows(assets: Iterable[Asset]) -> list[ComparisonRow]:
    assets = list(assets)
    return [
        ComparisonRow(
            key=field.key,
            label=field.label,
            values=tuple(field.getter(a) for a in assets),
        )
        for field in COMPARISON_FIELDS
    ]
