"""
Tests for pea_advisor/session/state.py.

What we test
------------
  - Default state is the landing page with no profile.
  - Transitions return new states; the input is untouched.
  - Profile-gated pages raise NavigationError without a profile.
  - The detail page needs a selected asset.
  - Unknown page names raise NavigationError.
  - current_recommendations() is empty without a profile and matches
    recommend() with one.
"""

from __future__ import annotations

import pytest

from pea_advisor.errors import NavigationError
from pea_advisor.recommendations.ranker import recommend
from pea_advisor.session.state import (
    Page,
    SessionState,
    back_to_recommendations,
    complete_questionnaire,
    current_recommendations,
    navigate,
    open_comparator,
    select_asset,
    start_questionnaire,
)


class TestTransitions:
    def test_default_state(self):
        state = SessionState()
        assert state.page == Page.LANDING
        assert not state.has_profile
        assert state.selected_asset is None

    def test_start_questionnaire(self):
        assert start_questionnaire(SessionState()).page == Page.QUESTIONNAIRE

    def test_complete_questionnaire(self, sample_profile):
        state = complete_questionnaire(start_questionnaire(SessionState()), sample_profile)
        assert state.page == Page.RECOMMENDATIONS
        assert state.profile == sample_profile
        assert state.has_profile

    def test_transition_does_not_mutate(self, sample_profile):
        state = SessionState()
        complete_questionnaire(state, sample_profile)
        assert state.page == Page.LANDING
        assert state.profile is None

    def test_select_asset_opens_detail(self, sample_profile, catalog):
        state = complete_questionnaire(SessionState(), sample_profile)
        state = select_asset(state, catalog[0])
        assert state.page == Page.DETAIL
        assert state.selected_asset.asset_id == "etf001"

    def test_back_from_detail_keeps_profile(self, sample_profile, catalog):
        state = select_asset(complete_questionnaire(SessionState(), sample_profile), catalog[0])
        state = back_to_recommendations(state)
        assert state.page == Page.RECOMMENDATIONS
        assert state.profile == sample_profile

    def test_open_comparator(self, sample_profile):
        state = open_comparator(complete_questionnaire(SessionState(), sample_profile))
        assert state.page == Page.COMPARATOR


class TestNavigate:
    @pytest.mark.parametrize("page", ["landing", "questionnaire"])
    def test_open_pages_always_reachable(self, page):
        assert navigate(SessionState(), page).page == page

    @pytest.mark.parametrize("page", ["recommendations", "comparator"])
    def test_profile_pages_require_profile(self, page):
        with pytest.raises(NavigationError, match="profile"):
            navigate(SessionState(), page)

    def test_comparator_helper_requires_profile(self):
        with pytest.raises(NavigationError):
            open_comparator(SessionState())

    def test_detail_requires_selected_asset(self, sample_profile):
        state = complete_questionnaire(SessionState(), sample_profile)
        with pytest.raises(NavigationError, match="selected asset"):
            navigate(state, "detail")

    def test_unknown_page(self):
        with pytest.raises(NavigationError, match="Unknown page"):
            navigate(SessionState(), "settings")


class TestCurrentRecommendations:
    def test_empty_without_profile(self, catalog):
        assert current_recommendations(SessionState(), catalog) == []

    def test_matches_recommend(self, sample_profile, catalog):
        state = complete_questionnaire(SessionState(), sample_profile)
        assert current_recommendations(state, catalog) == recommend(sample_profile, catalog)

    def test_limit(self, sample_profile, catalog):
        state = complete_questionnaire(SessionState(), sample_profile)
        assert len(current_recommendations(state, catalog, limit=2)) == 2
