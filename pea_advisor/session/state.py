"""
Session view-state container.

``SessionState`` is the single, immutable holder of everything a front-end
needs between user actions: the current page, the completed profile and the
asset opened in the detail view. Each user action maps to one transition
function that returns a new state; nothing mutates a state in place.

Page access rules
-----------------
    landing, questionnaire  → always reachable
    recommendations         → requires a completed profile
    comparator              → requires a completed profile
    detail                  → requires a selected asset
"""

from __future__ import annotations

from enum import StrEnum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from pea_advisor.errors import NavigationError
from pea_advisor.models.asset import Asset
from pea_advisor.models.profile import InvestorProfile
from pea_advisor.recommendations.ranker import DEFAULT_MAX_RESULTS, recommend


class Page(StrEnum):
    LANDING = "landing"
    QUESTIONNAIRE = "questionnaire"
    RECOMMENDATIONS = "recommendations"
    COMPARATOR = "comparator"
    DETAIL = "detail"


_PROFILE_PAGES = frozenset({Page.RECOMMENDATIONS, Page.COMPARATOR})


class SessionState(BaseModel):
    """Immutable per-session view state."""

    model_config = ConfigDict(frozen=True)

    page: Page = Page.LANDING
    profile: Optional[InvestorProfile] = None
    selected_asset: Optional[Asset] = None

    @property
    def has_profile(self) -> bool:
        return self.profile is not None


def _with(state: SessionState, **changes) -> SessionState:
    return state.model_copy(update=changes)


def navigate(state: SessionState, page: str) -> SessionState:
    """Move to ``page`` if the state allows it.

    Raises:
        NavigationError: Unknown page, or page prerequisites not met.
    """
    try:
        target = Page(page)
    except ValueError as exc:
        raise NavigationError(f"Unknown page '{page}'.") from exc

    if target in _PROFILE_PAGES and state.profile is None:
        raise NavigationError(f"Page '{target}' requires a completed profile.")
    if target == Page.DETAIL and state.selected_asset is None:
        raise NavigationError("Page 'detail' requires a selected asset.")
    return _with(state, page=target)


def start_questionnaire(state: SessionState) -> SessionState:
    return _with(state, page=Page.QUESTIONNAIRE)


def complete_questionnaire(state: SessionState, profile: InvestorProfile) -> SessionState:
    """Store the freshly built profile and show its recommendations."""
    return _with(state, profile=profile, page=Page.RECOMMENDATIONS)


def select_asset(state: SessionState, asset: Asset) -> SessionState:
    """Open ``asset`` in the detail view."""
    return _with(state, selected_asset=asset, page=Page.DETAIL)


def open_comparator(state: SessionState) -> SessionState:
    return navigate(state, Page.COMPARATOR)


def back_to_recommendations(state: SessionState) -> SessionState:
    return navigate(state, Page.RECOMMENDATIONS)


def current_recommendations(
    state:   SessionState,
    catalog: Iterable[Asset],
    limit:   int = DEFAULT_MAX_RESULTS,
) -> list[Asset]:
    """Recommendations for the session profile; empty without a profile."""
    if state.profile is None:
        return []
    return recommend(state.profile, catalog, limit=limit)
