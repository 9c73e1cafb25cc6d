"""
ASCII terminal formatters for CLI commands.

All formatters accept in-memory records and return plain multi-line strings
suitable for ``typer.echo()``. No third-party dependencies.
"""

from __future__ import annotations

from typing import Any

from pea_advisor.catalog.detail import AssetDetail
from pea_advisor.comparison.comparator import ComparisonRow
from pea_advisor.models.asset import Asset
from pea_advisor.models.profile import InvestorProfile
from pea_advisor.recommendations.ranker import ScoredAsset
from pea_advisor.taxonomy.asset_taxonomy import RISK_LABELS
from pea_advisor.taxonomy.profile_taxonomy import HORIZON_LABELS, RISK_LEVEL_LABELS

DISCLAIMER = (
    "Ces recommandations ne constituent pas un conseil en investissement. "
    "Diversifiez toujours vos placements."
)


def _pct(value: float) -> str:
    return f"{value:+.1f}%"


def _stars(rating: int) -> str:
    return "*" * rating + "." * (5 - rating)


# ── Catalog ───────────────────────────────────────────────────────────────────


def format_catalog_table(assets: list[Asset]) -> str:
    """One row per asset: id, symbol, name, type, risk, PEA flag."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Asset Catalog ===")
    if not assets:
        lines.append("  (no assets match)")
        return "\n".join(lines)

    header = (
        f"  {'ID':<10}  {'Symbol':<8}  {'Name':<34}  {'Type':<5}  "
        f"{'Risk':<6}  {'PEA':>3}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for a in assets:
        lines.append(
            f"  {a.asset_id:<10}  {a.symbol:<8}  {a.name[:34]:<34}  "
            f"{a.asset_type.value:<5}  {a.risk.value:<6}  "
            f"{'yes' if a.pea_eligible else 'no':>3}"
        )
    return "\n".join(lines)


# ── Recommendations ───────────────────────────────────────────────────────────


def format_recommendations(ranked: list[ScoredAsset], profile: InvestorProfile) -> str:
    """Greeting, profile summary, ranked table and reasoning per asset::

        Rank  Symbol    Name                               Risk     Score    1Y
        -----------------------------------------------------------------------
           1  C40       CAC 40 UCITS ETF                   medium       6  +5.2%
              -> Rendement du dividende supérieur à 3 %; ETF diversifié, ...
    """
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== Recommandations pour {profile.name} ===")
    risk_label = RISK_LEVEL_LABELS.get(profile.risk_level, profile.risk_level)
    horizon_label = HORIZON_LABELS.get(profile.investment_horizon, profile.investment_horizon)
    lines.append(
        f"  Profil {risk_label} | {profile.monthly_budget:g} EUR/mois | "
        f"Horizon {horizon_label}"
    )

    if not ranked:
        lines.append("")
        lines.append("  (aucun actif ne correspond à ce profil)")
        return "\n".join(lines)

    lines.append("")
    header = (
        f"  {'Rank':>4}  {'Symbol':<8}  {'Name':<34}  {'Risk':<6}  "
        f"{'Score':>5}  {'1Y':>7}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for rank, sa in enumerate(ranked, start=1):
        a = sa.asset
        lines.append(
            f"  {rank:>4}  {a.symbol:<8}  {a.name[:34]:<34}  {a.risk.value:<6}  "
            f"{sa.score:>5}  {_pct(a.performance_1y):>7}"
        )
        lines.append(f"        -> {sa.reasoning}")

    lines.append("")
    lines.append(f"  {DISCLAIMER}")
    return "\n".join(lines)


# ── Detail ────────────────────────────────────────────────────────────────────


def format_asset_detail(detail: AssetDetail) -> str:
    a = detail.asset
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== {a.name} ({a.symbol}) ===")
    lines.append(f"  {a.description}")
    lines.append("")
    lines.append(f"  Type:            {a.asset_type.value}")
    lines.append(f"  Secteur:         {a.sector}")
    if a.provider:
        lines.append(f"  Émetteur:        {a.provider}")
    lines.append(f"  Éligible PEA:    {'oui' if a.pea_eligible else 'non'}")
    lines.append(f"  Risque:          {RISK_LABELS.get(a.risk, a.risk.value)}")
    lines.append(f"  Prix actuel:     {a.price:.2f} EUR")
    lines.append(f"  Performance 1an: {_pct(a.performance_1y)}")
    lines.append(f"  Performance 5ans:{_pct(a.performance_5y)}")
    lines.append(f"  Volatilité:      {a.volatility:.1f}%")
    lines.append(f"  Dividende:       {a.dividend_yield:.1f}%")
    lines.append(f"  Frais annuels:   {a.fees:.2f}%")
    lines.append(f"  Notation ESG:    {a.esg_rating.value}")
    lines.append(f"  Morningstar:     {_stars(a.morningstar_rating)}")

    lines.append("")
    if detail.first_point is None or detail.last_point is None:
        lines.append("  Historique:      (aucun)")
    else:
        lines.append(
            f"  Historique:      {detail.first_point.as_of} -> {detail.last_point.as_of} "
            f"({len(a.historical_prices)} points)"
        )
        lines.append(
            f"  Plage de prix:   {detail.min_price:.2f} - {detail.max_price:.2f} EUR"
        )
        if detail.period_return_pct is not None:
            lines.append(f"  Variation:       {_pct(detail.period_return_pct)}")
    return "\n".join(lines)


# ── Comparison ────────────────────────────────────────────────────────────────


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "oui" if value else "non"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_comparison(assets: list[Asset], rows: list[ComparisonRow]) -> str:
    """Criteria as rows, one column per asset (headed by symbol)."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Comparateur ===")
    col = 22
    header = f"  {'Critère':<18}" + "".join(f"  {a.symbol:>{col}}" for a in assets)
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for row in rows:
        cells = "".join(f"  {_cell(v)[:col]:>{col}}" for v in row.values)
        lines.append(f"  {row.label:<18}{cells}")
    return "\n".join(lines)
