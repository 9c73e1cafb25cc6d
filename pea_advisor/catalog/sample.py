"""
Bundled sample catalog: eight PEA-candidate instruments (six PEA-eligible
ETFs/stocks, one high-risk clean energy ETF, and one non-eligible NASDAQ-100
technology ETF kept to show the eligibility filter at work).

Figures are illustrative, not live market data. Each asset receives a
36-month simulated history from ``generate_price_history``; the random
stream is seeded per asset id so a given ``(seed, as_of)`` always yields the
same catalog.
"""

from __future__ import annotations

import random
from datetime import date
from typing import Any

from pea_advisor.catalog.history import generate_price_history
from pea_advisor.models.asset import Asset

HISTORY_MONTHS = 36
DEFAULT_SEED = 42

# (record in catalog JSON shape, history start price)
_SAMPLE_RECORDS: list[tuple[dict[str, Any], float]] = [
    (
        {
            "id": "etf001",
            "name": "MSCI World UCITS ETF",
            "symbol": "CW8",
            "type": "ETF",
            "sector": "Mondial diversifié",
            "description": (
                "ETF répliquant l'indice MSCI World, exposant aux marchés développés "
                "mondiaux. Parfait pour une diversification internationale."
            ),
            "peaEligible": True,
            "price": 85.42,
            "performance1Y": 12.4,
            "performance5Y": 8.7,
            "volatility": 16.2,
            "dividendYield": 2.1,
            "fees": 0.20,
            "esgRating": "AA",
            "morningstarRating": 4,
            "provider": "iShares",
            "risk": "medium",
        },
        75.0,
    ),
    (
        {
            "id": "etf002",
            "name": "STOXX Europe 600 UCITS ETF",
            "symbol": "EXXT",
            "type": "ETF",
            "sector": "Europe diversifié",
            "description": (
                "ETF exposant aux 600 plus grandes entreprises européennes. Idéal pour "
                "investir dans l'économie européenne."
            ),
            "peaEligible": True,
            "price": 52.18,
            "performance1Y": 8.9,
            "performance5Y": 6.2,
            "volatility": 18.1,
            "dividendYield": 2.8,
            "fees": 0.07,
            "esgRating": "A",
            "morningstarRating": 5,
            "provider": "Xtrackers",
            "risk": "medium",
        },
        45.0,
    ),
    (
        {
            "id": "stock001",
            "name": "LVMH",
            "symbol": "MC.PA",
            "type": "Stock",
            "sector": "Luxe",
            "description": (
                "Leader mondial du luxe avec des marques iconiques comme Louis Vuitton, "
                "Moët & Chandon, et Hennessy."
            ),
            "peaEligible": True,
            "price": 678.90,
            "performance1Y": -8.5,
            "performance5Y": 12.3,
            "volatility": 25.4,
            "dividendYield": 2.4,
            "fees": 0,
            "esgRating": "B",
            "morningstarRating": 4,
            "risk": "high",
        },
        620.0,
    ),
    (
        {
            "id": "etf003",
            "name": "CAC 40 UCITS ETF",
            "symbol": "C40",
            "type": "ETF",
            "sector": "France",
            "description": (
                "ETF répliquant l'indice CAC 40, composé des 40 plus grandes "
                "capitalisations françaises."
            ),
            "peaEligible": True,
            "price": 64.75,
            "performance1Y": 5.2,
            "performance5Y": 4.8,
            "volatility": 20.3,
            "dividendYield": 3.2,
            "fees": 0.25,
            "esgRating": "A",
            "morningstarRating": 3,
            "provider": "Lyxor",
            "risk": "medium",
        },
        58.0,
    ),
    (
        {
            "id": "etf004",
            "name": "Global Clean Energy UCITS ETF",
            "symbol": "INRG",
            "type": "ETF",
            "sector": "Énergies renouvelables",
            "description": (
                "ETF investissant dans les entreprises mondiales du secteur des "
                "énergies propres et renouvelables."
            ),
            "peaEligible": True,
            "price": 12.84,
            "performance1Y": -15.2,
            "performance5Y": 1.4,
            "volatility": 32.1,
            "dividendYield": 0.8,
            "fees": 0.65,
            "esgRating": "AAA",
            "morningstarRating": 3,
            "provider": "iShares",
            "risk": "high",
        },
        18.0,
    ),
    (
        {
            "id": "stock002",
            "name": "Sanofi",
            "symbol": "SAN.PA",
            "type": "Stock",
            "sector": "Pharmaceutique",
            "description": (
                "Groupe pharmaceutique français, leader mondial dans la recherche et "
                "développement de médicaments."
            ),
            "peaEligible": True,
            "price": 94.32,
            "performance1Y": 6.8,
            "performance5Y": 3.2,
            "volatility": 18.7,
            "dividendYield": 3.8,
            "fees": 0,
            "esgRating": "A",
            "morningstarRating": 4,
            "risk": "medium",
        },
        85.0,
    ),
    (
        {
            "id": "etf005",
            "name": "NASDAQ 100 Technology UCITS ETF",
            "symbol": "NQSE",
            "type": "ETF",
            "sector": "Technologie",
            "description": (
                "ETF exposant aux 100 plus grandes entreprises technologiques du "
                "NASDAQ. Croissance élevée mais volatilité importante."
            ),
            "peaEligible": False,
            "price": 156.23,
            "performance1Y": 22.1,
            "performance5Y": 15.8,
            "volatility": 28.9,
            "dividendYield": 0.7,
            "fees": 0.48,
            "esgRating": "B",
            "morningstarRating": 4,
            "provider": "Invesco",
            "risk": "high",
        },
        125.0,
    ),
    (
        {
            "id": "stock003",
            "name": "TotalEnergies",
            "symbol": "TTE.PA",
            "type": "Stock",
            "sector": "Énergie",
            "description": (
                "Compagnie pétrolière et gazière française en transition vers les "
                "énergies renouvelables."
            ),
            "peaEligible": True,
            "price": 62.84,
            "performance1Y": 15.7,
            "performance5Y": -2.1,
            "volatility": 24.6,
            "dividendYield": 5.2,
            "fees": 0,
            "esgRating": "C",
            "morningstarRating": 3,
            "risk": "medium",
        },
        52.0,
    ),
]


def sample_catalog(as_of: date | None = None, seed: int = DEFAULT_SEED) -> list[Asset]:
    """Build the bundled sample catalog.

    Args:
        as_of: Date of the last history point. Defaults to today.
        seed:  Base seed for the simulated histories.

    Returns:
        Eight ``Asset`` records in fixed catalog order.
    """
    as_of = as_of or date.today()
    assets: list[Asset] = []
    for record, start_price in _SAMPLE_RECORDS:
        rng = random.Random(f"{seed}:{record['id']}")
        history = generate_price_history(
            start_price=start_price,
            volatility=record["volatility"],
            months=HISTORY_MONTHS,
            as_of=as_of,
            rng=rng,
        )
        assets.append(Asset.model_validate({**record, "historicalPrices": history}))
    return assets
