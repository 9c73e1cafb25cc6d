"""
Investor profile taxonomy.

Closed vocabularies for every questionnaire answer that is picked from a
menu:
  - ``RiskLevel``        : how much volatility the investor accepts.
  - ``InvestmentHorizon``: how long the money stays invested.
  - ``ExperienceLevel``  : self-declared investing experience.
  - ``Interest``         : thematic interest tags (multi-select).
  - ``Goal``             : savings goal tags (multi-select).

Tag values are the exact French labels shown to the user. The scorer matches
them by literal string equality, so a value must never be reworded without
updating the scoring rules in ``pea_advisor.recommendations.scorer``.

This module has NO imports from any other ``pea_advisor`` package.
"""

from enum import StrEnum


class RiskLevel(StrEnum):
    """Investor risk appetite, chosen in questionnaire step 2."""

    CONSERVATIVE = "conservative"
    """Prudent: prefers safety even at the cost of lower gains."""

    MODERATE = "moderate"
    """Équilibré: accepts moderate risk for better returns."""

    AGGRESSIVE = "aggressive"
    """Audacieux: ready to take risks to maximise gains."""


class InvestmentHorizon(StrEnum):
    """How long the investor plans to stay invested."""

    SHORT = "short"
    """1-3 years."""

    MEDIUM = "medium"
    """3-8 years."""

    LONG = "long"
    """8+ years (retirement, long-term projects)."""


class ExperienceLevel(StrEnum):
    """Self-declared investing experience."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Interest(StrEnum):
    """Thematic interest tags offered in questionnaire step 4."""

    ESG = "Écologie & ESG"
    TECHNOLOGY = "Technologie"
    HEALTH = "Santé & Biotechs"
    REAL_ESTATE = "Immobilier"
    DIVIDENDS = "Dividendes"
    GROWTH = "Croissance"
    EUROPE = "Europe"
    INTERNATIONAL = "International"
    DEFENSIVE = "Secteurs défensifs"
    INNOVATION = "Innovation"


class Goal(StrEnum):
    """Savings goal tags offered in questionnaire step 5."""

    EMERGENCY_FUND = "Constituer une épargne de précaution"
    PROJECT = "Préparer un projet (achat immobilier, voyage...)"
    GROW_SAVINGS = "Faire fructifier mon épargne"
    RETIREMENT = "Préparer ma retraite"
    EXTRA_INCOME = "Générer des revenus complémentaires"
    LEARN = "Apprendre à investir"


# Display labels used by the CLI formatters
RISK_LEVEL_LABELS: dict[str, str] = {
    RiskLevel.CONSERVATIVE: "Prudent",
    RiskLevel.MODERATE:     "Équilibré",
    RiskLevel.AGGRESSIVE:   "Audacieux",
}

HORIZON_LABELS: dict[str, str] = {
    InvestmentHorizon.SHORT:  "1-3 ans",
    InvestmentHorizon.MEDIUM: "3-8 ans",
    InvestmentHorizon.LONG:   "8+ ans",
}
