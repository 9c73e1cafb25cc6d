"""
Shared pytest fixtures for the PEA Advisor test suite.

Provides:
  - ``catalog``: the bundled eight-asset sample catalog with a fixed
    ``as_of`` date and seed, so histories are reproducible.
  - ``sample_asset`` / ``sample_profile``: valid domain objects.
  - ``make_asset`` / ``make_profile``: factories accepting field overrides,
    for tests that need an asset or profile triggering exactly one rule.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

import pytest

from pea_advisor.catalog.sample import sample_catalog
from pea_advisor.models.asset import Asset
from pea_advisor.models.profile import InvestorProfile

AS_OF = date(2025, 6, 30)


def _neutral_asset_fields() -> dict[str, Any]:
    """Asset fields that match no scoring rule for a neutral profile."""
    return {
        "asset_id": "test001",
        "name": "Test Asset",
        "symbol": "TST",
        "asset_type": "Stock",
        "sector": "Industrie",
        "description": "Asset used in tests.",
        "pea_eligible": True,
        "price": 100.0,
        "performance_1y": 2.0,
        "performance_5y": 2.0,
        "volatility": 22.0,
        "dividend_yield": 1.0,
        "fees": 0.0,
        "esg_rating": "A",
        "morningstar_rating": 3,
        "risk": "medium",
    }


def _neutral_profile_fields() -> dict[str, Any]:
    """Profile fields that trigger no scoring rule on their own."""
    return {
        "name": "Camille",
        "age": 22,
        "risk_level": "aggressive",
        "investment_horizon": "medium",
        "monthly_budget": 100,
        "interests": (),
        "experience": "advanced",
        "goals": ("Préparer ma retraite",),
    }


@pytest.fixture
def make_asset() -> Callable[..., Asset]:
    """Factory: ``make_asset(sector="France", ...)`` → neutral asset with overrides."""
    def _make(**overrides: Any) -> Asset:
        return Asset(**{**_neutral_asset_fields(), **overrides})
    return _make


@pytest.fixture
def make_profile() -> Callable[..., InvestorProfile]:
    """Factory: ``make_profile(interests=("Europe",))`` → neutral profile with overrides."""
    def _make(**overrides: Any) -> InvestorProfile:
        return InvestorProfile(**{**_neutral_profile_fields(), **overrides})
    return _make


@pytest.fixture
def catalog() -> list[Asset]:
    """The bundled sample catalog, reproducible."""
    return sample_catalog(as_of=AS_OF, seed=42)


@pytest.fixture
def sample_asset(make_asset) -> Asset:
    """A valid ``Asset`` for testing."""
    return make_asset()


@pytest.fixture
def sample_profile() -> InvestorProfile:
    """A valid moderate beginner profile interested in dividends."""
    return InvestorProfile(
        name="Thomas",
        age=22,
        risk_level="moderate",
        investment_horizon="long",
        monthly_budget=100,
        interests=("Dividendes",),
        experience="beginner",
        goals=("Faire fructifier mon épargne",),
    )
