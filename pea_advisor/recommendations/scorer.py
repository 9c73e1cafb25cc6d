"""
Recommendation scoring: filters the catalog for one investor profile and
scores each surviving asset against the profile's interests, experience and
horizon.

Filters (applied in order)
--------------------------
1. Eligibility : only ``pea_eligible`` assets are ever recommendable.
2. Risk        : keyed by ``profile.risk_level``

       conservative → asset risk in {low, medium}
       moderate     → asset risk == medium   (low is excluded too)
       aggressive   → no restriction
       anything else→ nothing passes

Scoring rules (integer, additive, independent)
----------------------------------------------
    +3  interest "Écologie & ESG"  and esg_rating == AAA
    +3  interest "Technologie"     and "tech" in sector (case-insensitive)
    +3  interest "Dividendes"      and dividend_yield > 3
    +2  interest "Europe"          and sector contains "Europe" or "France"
    +2  interest "International"   and sector contains "Mondial"
    +2  experience == beginner     and asset is an ETF
    +1  horizon == long            and performance_5y > 5
    +1  horizon == short           and volatility < 20

``SCORING_RULES`` is the single source of these point values. Sector matches
other than "tech" are case-sensitive.

All functions here are pure, with no I/O, no randomness.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pea_advisor.models.asset import Asset
from pea_advisor.models.profile import InvestorProfile
from pea_advisor.taxonomy.asset_taxonomy import AssetRisk, EsgRating
from pea_advisor.taxonomy.profile_taxonomy import (
    ExperienceLevel,
    Interest,
    InvestmentHorizon,
    RiskLevel,
)

# Risk level → allowed asset risk tiers.  None = no restriction.
_RISK_FILTERS: dict[str, frozenset[str] | None] = {
    RiskLevel.CONSERVATIVE: frozenset({AssetRisk.LOW, AssetRisk.MEDIUM}),
    RiskLevel.MODERATE:     frozenset({AssetRisk.MEDIUM}),
    RiskLevel.AGGRESSIVE:   None,
}

_HIGH_DIVIDEND_PCT   = 3.0
_LONG_HORIZON_5Y_PCT = 5.0
_LOW_VOLATILITY_PCT  = 20.0


@dataclass(frozen=True)
class ScoringRule:
    """One additive scoring rule.

    Attributes:
        slug:      Stable identifier, e.g. ``"esg_aaa"``.
        label:     Human-readable explanation used in reasoning text.
        points:    Integer contribution when the rule matches.
        predicate: ``(profile, asset) -> bool``.
    """

    slug:      str
    label:     str
    points:    int
    predicate: Callable[[InvestorProfile, Asset], bool]

    def matches(self, profile: InvestorProfile, asset: Asset) -> bool:
        return self.predicate(profile, asset)


def _esg_match(profile: InvestorProfile, asset: Asset) -> bool:
    return profile.has_interest(Interest.ESG) and asset.esg_rating == EsgRating.AAA


def _tech_match(profile: InvestorProfile, asset: Asset) -> bool:
    return profile.has_interest(Interest.TECHNOLOGY) and "tech" in asset.sector.lower()


def _dividend_match(profile: InvestorProfile, asset: Asset) -> bool:
    return (
        profile.has_interest(Interest.DIVIDENDS)
        and asset.dividend_yield > _HIGH_DIVIDEND_PCT
    )


def _europe_match(profile: InvestorProfile, asset: Asset) -> bool:
    return profile.has_interest(Interest.EUROPE) and (
        "Europe" in asset.sector or "France" in asset.sector
    )


def _international_match(profile: InvestorProfile, asset: Asset) -> bool:
    return profile.has_interest(Interest.INTERNATIONAL) and "Mondial" in asset.sector


def _beginner_etf_match(profile: InvestorProfile, asset: Asset) -> bool:
    return profile.experience == ExperienceLevel.BEGINNER and asset.is_etf


def _long_horizon_match(profile: InvestorProfile, asset: Asset) -> bool:
    return (
        profile.investment_horizon == InvestmentHorizon.LONG
        and asset.performance_5y > _LONG_HORIZON_5Y_PCT
    )


def _short_horizon_match(profile: InvestorProfile, asset: Asset) -> bool:
    return (
        profile.investment_horizon == InvestmentHorizon.SHORT
        and asset.volatility < _LOW_VOLATILITY_PCT
    )


SCORING_RULES: tuple[ScoringRule, ...] = (
    ScoringRule("esg_aaa",          "Notation ESG AAA, en phase avec votre intérêt écologie", 3, _esg_match),
    ScoringRule("technology",       "Secteur technologique",                                  3, _tech_match),
    ScoringRule("high_dividend",    "Rendement du dividende supérieur à 3 %",                 3, _dividend_match),
    ScoringRule("europe",           "Exposition Europe / France",                             2, _europe_match),
    ScoringRule("international",    "Exposition mondiale diversifiée",                        2, _international_match),
    ScoringRule("beginner_etf",     "ETF diversifié, adapté aux débutants",                   2, _beginner_etf_match),
    ScoringRule("long_horizon",     "Performance 5 ans supérieure à 5 % pour un horizon long", 1, _long_horizon_match),
    ScoringRule("short_horizon",    "Volatilité inférieure à 20 % pour un horizon court",      1, _short_horizon_match),
)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Rules matched by one asset for one profile.

    Attributes:
        matched: Matching rules, in ``SCORING_RULES`` order.
    """

    matched: tuple[ScoringRule, ...]

    @property
    def total(self) -> int:
        """Integer score: sum of matched rule points."""
        return sum(rule.points for rule in self.matched)

    @property
    def rule_slugs(self) -> list[str]:
        return [rule.slug for rule in self.matched]


# ── Filters ───────────────────────────────────────────────────────────────────

def is_pea_eligible(asset: Asset) -> bool:
    return asset.pea_eligible


def passes_risk_filter(profile: InvestorProfile, asset: Asset) -> bool:
    """Return True if ``asset.risk`` is acceptable for ``profile.risk_level``.

    An unknown risk level matches nothing.
    """
    if profile.risk_level not in _RISK_FILTERS:
        return False
    allowed = _RISK_FILTERS[profile.risk_level]
    return allowed is None or asset.risk in allowed


def is_candidate(profile: InvestorProfile, asset: Asset) -> bool:
    """Eligibility filter followed by the risk filter."""
    return is_pea_eligible(asset) and passes_risk_filter(profile, asset)


# ── Scoring ───────────────────────────────────────────────────────────────────

def score_asset(profile: InvestorProfile, asset: Asset) -> ScoreBreakdown:
    """Evaluate every scoring rule for one (profile, asset) pair.

    Filters are NOT applied here; callers filter first.
    """
    return ScoreBreakdown(
        matched=tuple(rule for rule in SCORING_RULES if rule.matches(profile, asset))
    )


def build_reasoning(breakdown: ScoreBreakdown) -> str:
    """Assemble a human-readable explanation from the matched rules.

    Returns:
        ``"; "``-joined rule labels, or a fallback sentence when nothing
        matched (the asset only passed the eligibility and risk filters).
    """
    reasons = [rule.label for rule in breakdown.matched]
    return "; ".join(reasons) or "Éligible PEA et compatible avec votre profil de risque"
