"""
Investor profile model.

An ``InvestorProfile`` is built once, atomically, when the questionnaire's last
step completes (see ``pea_advisor.questionnaire.wizard.complete``) and is
immutable for the rest of the session.

Enumerated fields are stored as plain strings and are NOT rejected when out of
domain: the recommendation scorer treats an unknown risk level as "nothing
passes the risk filter" rather than raising. Use ``is_well_formed()`` to check
whether every answer belongs to its closed vocabulary.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pea_advisor.taxonomy.profile_taxonomy import (
    ExperienceLevel,
    Goal,
    Interest,
    InvestmentHorizon,
    RiskLevel,
)

_RISK_LEVELS  = frozenset(r.value for r in RiskLevel)
_HORIZONS     = frozenset(h.value for h in InvestmentHorizon)
_EXPERIENCES  = frozenset(e.value for e in ExperienceLevel)
_INTERESTS    = frozenset(i.value for i in Interest)
_GOALS        = frozenset(g.value for g in Goal)


class InvestorProfile(BaseModel):
    """Answers of one completed questionnaire session.

    Attributes:
        name: First name, used for greeting only.
        age: Age in years.
        risk_level: ``conservative`` | ``moderate`` | ``aggressive``.
        investment_horizon: ``short`` | ``medium`` | ``long``.
        monthly_budget: Monthly amount to invest, in euros.
        interests: Selected ``Interest`` tags, in selection order.
        experience: ``beginner`` | ``intermediate`` | ``advanced``.
        goals: Selected ``Goal`` tags, in selection order.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    age: int = Field(ge=0)
    risk_level: str = Field(alias="riskLevel")
    investment_horizon: str = Field(alias="investmentHorizon")
    monthly_budget: float = Field(ge=0.0, alias="monthlyBudget")
    interests: tuple[str, ...] = ()
    experience: str
    goals: tuple[str, ...] = ()

    def has_interest(self, tag: str) -> bool:
        return tag in self.interests

    def is_well_formed(self) -> bool:
        """True when every enumerated answer is inside its vocabulary."""
        return (
            self.risk_level in _RISK_LEVELS
            and self.investment_horizon in _HORIZONS
            and self.experience in _EXPERIENCES
            and all(i in _INTERESTS for i in self.interests)
            and all(g in _GOALS for g in self.goals)
        )
