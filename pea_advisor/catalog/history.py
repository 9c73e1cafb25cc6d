"""
Simulated monthly price history for catalog assets.

The bundled catalog has no market data feed, so each asset gets a random-walk
history: one point per month, ``months + 1`` points ending on ``as_of``.

Per-step multiplicative variation::

    variation = (u - 0.5) * volatility * 0.1      u ~ Uniform[0, 1)
    price     = max(price * (1 + variation), 0.1)

Prices are rounded to cents. Pass a seeded ``random.Random`` for a
reproducible series.
"""

from __future__ import annotations

import calendar
import random
from datetime import date

from pea_advisor.models.asset import PricePoint

MIN_PRICE = 0.1


def months_before(as_of: date, months: int) -> date:
    """Return the date ``months`` calendar months before ``as_of``.

    The day is clamped to the length of the target month (31 March minus one
    month is 28/29 February), so consecutive offsets stay chronological.
    """
    total = as_of.year * 12 + (as_of.month - 1) - months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    day = min(as_of.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def generate_price_history(
    start_price: float,
    volatility:  float,
    months:      int,
    as_of:       date | None = None,
    rng:         random.Random | None = None,
) -> tuple[PricePoint, ...]:
    """Generate a chronologically ordered monthly random-walk price series.

    Args:
        start_price: Price before the first variation is applied.
        volatility:  Annualised volatility in percent (scales step size).
        months:      Number of months of history; ``months + 1`` points.
        as_of:       Date of the last point. Defaults to today.
        rng:         Random source. Defaults to a fresh unseeded generator.

    Returns:
        Tuple of ``PricePoint`` from oldest to ``as_of``.

    Raises:
        ValueError: If ``months`` is negative or ``start_price`` is not positive.
    """
    if months < 0:
        raise ValueError(f"months must be >= 0, got {months}.")
    if start_price <= 0:
        raise ValueError(f"start_price must be > 0, got {start_price}.")

    as_of = as_of or date.today()
    rng = rng or random.Random()

    points: list[PricePoint] = []
    price = start_price
    for offset in range(months, -1, -1):
        variation = (rng.random() - 0.5) * volatility * 0.1
        price = max(price * (1 + variation), MIN_PRICE)
        points.append(
            PricePoint(as_of=months_before(as_of, offset), price=round(price, 2))
        )
    return tuple(points)
