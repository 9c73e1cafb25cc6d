"""
Asset catalog models.

``Asset`` is an immutable catalog record for one PEA-candidate instrument
(ETF or stock). ``PricePoint`` is one (date, price) observation of its
simulated price history.

Field names are snake_case in Python; the camelCase names of the catalog JSON
shape (``peaEligible``, ``performance1Y``, ``historicalPrices`` …) are accepted
as aliases on input and produced by ``model_dump(by_alias=True)``.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pea_advisor.taxonomy.asset_taxonomy import AssetRisk, AssetType, EsgRating


class PricePoint(BaseModel):
    """One historical price observation.

    Attributes:
        as_of: Observation date (``date`` in JSON).
        price: Closing price in euros; never negative.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    as_of: date = Field(alias="date")
    price: float = Field(ge=0.0)


class Asset(BaseModel):
    """A PEA-candidate instrument from the static catalog.

    Attributes:
        asset_id: Stable catalog identifier, e.g. ``"etf001"``.
        name: Display name.
        symbol: Ticker symbol, e.g. ``"CW8"``.
        asset_type: ``ETF`` or ``Stock``.
        sector: Free-text sector label (French), e.g. ``"Europe diversifié"``.
        description: Short marketing description.
        pea_eligible: ``True`` if the asset may be held in a PEA wrapper.
        price: Current price in euros.
        performance_1y: 1-year return in percent (may be negative).
        performance_5y: Annualised 5-year return in percent (may be negative).
        volatility: Annualised volatility in percent.
        dividend_yield: Dividend yield in percent.
        fees: Annual fee (TER) in percent; 0 for single stocks.
        esg_rating: Sustainability grade on the closed ``AAA``..``C`` scale,
            ``AAA`` best. Off-scale grades (``"A+"``) are rejected.
        morningstar_rating: Star rating, integer 0–5.
        provider: ETF issuer; ``None`` for single stocks.
        risk: Coarse risk tier used by the recommendation risk filter.
        historical_prices: Chronologically ordered price history.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    asset_id: str = Field(alias="id")
    name: str
    symbol: str
    asset_type: AssetType = Field(alias="type")
    sector: str
    description: str = ""
    pea_eligible: bool = Field(alias="peaEligible")
    price: float = Field(ge=0.0)
    performance_1y: float = Field(alias="performance1Y")
    performance_5y: float = Field(alias="performance5Y")
    volatility: float = Field(ge=0.0)
    dividend_yield: float = Field(default=0.0, ge=0.0, alias="dividendYield")
    fees: float = Field(default=0.0, ge=0.0)
    esg_rating: EsgRating = Field(alias="esgRating")
    morningstar_rating: int = Field(ge=0, le=5, alias="morningstarRating")
    provider: Optional[str] = None
    risk: AssetRisk
    historical_prices: tuple[PricePoint, ...] = Field(
        default=(), alias="historicalPrices"
    )

    @field_validator("asset_id")
    @classmethod
    def validate_asset_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Asset id must be a non-empty string.")
        return v

    @field_validator("historical_prices")
    @classmethod
    def validate_chronological(
        cls, v: tuple[PricePoint, ...]
    ) -> tuple[PricePoint, ...]:
        for prev, cur in zip(v, v[1:]):
            if cur.as_of < prev.as_of:
                raise ValueError(
                    f"historicalPrices must be chronologically ordered: "
                    f"{cur.as_of} follows {prev.as_of}."
                )
        return v

    @property
    def is_etf(self) -> bool:
        return self.asset_type == AssetType.ETF
