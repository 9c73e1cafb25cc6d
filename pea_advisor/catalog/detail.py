"""
Asset detail view data: the asset plus a few facts derived from its price
history (first/last point, period return, price range). Presentation-free.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from pea_advisor.models.asset import Asset, PricePoint


@dataclass(frozen=True)
class AssetDetail:
    """Derived detail facts for one asset.

    Attributes:
        asset:             The catalog record.
        first_point:       Oldest history point, or ``None`` if no history.
        last_point:        Newest history point, or ``None`` if no history.
        period_return_pct: Percent change first → last; ``None`` with fewer
                           than two points or a zero first price.
        min_price:         Lowest historical price, or ``None``.
        max_price:         Highest historical price, or ``None``.
    """

    asset:             Asset
    first_point:       Optional[PricePoint]
    last_point:        Optional[PricePoint]
    period_return_pct: Optional[float]
    min_price:         Optional[float]
    max_price:         Optional[float]


def asset_detail(asset: Asset) -> AssetDetail:
    history = asset.historical_prices
    if not history:
        return AssetDetail(asset, None, None, None, None, None)

    first, last = history[0], history[-1]
    period_return: Optional[float] = None
    if len(history) >= 2 and first.price > 0:
        period_return = round((last.price - first.price) / first.price * 100.0, 2)

    prices = [p.price for p in history]
    return AssetDetail(
        asset=asset,
        first_point=first,
        last_point=last,
        period_return_pct=period_return,
        min_price=min(prices),
        max_price=max(prices),
    )


def find_asset(catalog: Iterable[Asset], asset_id: str) -> Optional[Asset]:
    """Return the asset with ``asset_id``, or ``None`` if absent."""
    for asset in catalog:
        if asset.asset_id == asset_id:
            return asset
    return None
