"""
Recommendation ranker: filters and scores a catalog for one profile, then
orders the result and truncates it.

Usage flow
----------
1. score_catalog(profile, catalog)
   -> list[ScoredAsset]  (candidates only, catalog order)

2. rank(scored, limit=6)
   -> list[ScoredAsset]  (score desc, catalog order on ties)

3. recommend(profile, catalog)
   -> list[Asset]        (1 + 2, assets only)

Ranking is stable: two assets with the same score keep their relative catalog
order. There is no fallback broadening: if no asset survives the filters the
result is empty.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Iterable, Optional

from pea_advisor.models.asset import Asset
from pea_advisor.models.profile import InvestorProfile
from pea_advisor.recommendations.scorer import (
    ScoreBreakdown,
    build_reasoning,
    is_candidate,
    score_asset,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 6

# Iterable, but their items are not catalog entries.
_NON_CATALOG_TYPES = (Asset, str, bytes, Mapping)


@dataclass(frozen=True)
class ScoredAsset:
    """An asset paired with its score for one recommendation call.

    Attributes:
        asset:      The catalog record.
        score:      Integer score (sum of matched rule points).
        breakdown:  Matched scoring rules.
        position:   Index of the asset in the input catalog (tie-break key).
    """

    asset:     Asset
    score:     int
    breakdown: ScoreBreakdown
    position:  int

    @property
    def reasoning(self) -> str:
        return build_reasoning(self.breakdown)


def _iter_entries(catalog: object) -> Optional[Iterator[object]]:
    """Iterator over catalog entries, or ``None`` if ``catalog`` is not a sequence of them."""
    if isinstance(catalog, _NON_CATALOG_TYPES):
        return None
    try:
        return iter(catalog)  # type: ignore[call-overload]
    except TypeError:
        return None


def score_catalog(
    profile: InvestorProfile,
    catalog: Optional[Iterable[Asset]],
) -> list[ScoredAsset]:
    """Filter ``catalog`` for ``profile`` and score every surviving asset.

    Entries that are not ``Asset`` instances are skipped with a warning. A
    catalog that is not a sequence of entries at all (a number, a string, a
    mapping, a lone ``Asset``) is logged and treated as empty.

    Args:
        profile: Completed investor profile.
        catalog: Ordered asset catalog; ``None`` is treated as empty.

    Returns:
        ScoredAsset list in catalog order (unsorted).
    """
    if not catalog:
        return []
    entries = _iter_entries(catalog)
    if entries is None:
        logger.warning(
            "Ignoring malformed catalog of type %s; expected a sequence of assets.",
            type(catalog).__name__,
        )
        return []

    scored: list[ScoredAsset] = []
    total = 0
    for position, asset in enumerate(entries):
        total += 1
        if not isinstance(asset, Asset):
            logger.warning(
                "Skipping malformed catalog entry at index %d (%s).",
                position, type(asset).__name__,
            )
            continue
        if not is_candidate(profile, asset):
            continue
        breakdown = score_asset(profile, asset)
        scored.append(
            ScoredAsset(
                asset=asset,
                score=breakdown.total,
                breakdown=breakdown,
                position=position,
            )
        )

    logger.debug(
        "Scored %d candidate(s) out of %d catalog entries for risk_level=%s.",
        len(scored), total, profile.risk_level,
    )
    return scored


def rank(scored: list[ScoredAsset], limit: int = DEFAULT_MAX_RESULTS) -> list[ScoredAsset]:
    """Order scored assets by score descending and keep the first ``limit``.

    Ties keep catalog order (``position`` ascending).

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}.")
    ordered = sorted(scored, key=lambda s: (-s.score, s.position))
    return ordered[:limit]


def recommend_scored(
    profile: Optional[InvestorProfile],
    catalog: Optional[Iterable[Asset]],
    limit:   int = DEFAULT_MAX_RESULTS,
) -> list[ScoredAsset]:
    """Filter, score and rank ``catalog`` for ``profile``.

    An absent profile yields no recommendations.
    """
    if profile is None:
        return []
    return rank(score_catalog(profile, catalog), limit=limit)


def recommend(
    profile: Optional[InvestorProfile],
    catalog: Optional[Iterable[Asset]],
    limit:   int = DEFAULT_MAX_RESULTS,
) -> list[Asset]:
    """Return at most ``limit`` recommended assets for ``profile``, best first."""
    return [s.asset for s in recommend_scored(profile, catalog, limit=limit)]
