"""Tests for the InvestorProfile model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pea_advisor.models.profile import InvestorProfile


class TestInvestorProfile:
    def test_valid_construction(self, sample_profile):
        assert sample_profile.name == "Thomas"
        assert sample_profile.risk_level == "moderate"
        assert sample_profile.interests == ("Dividendes",)

    def test_accepts_camel_case_aliases(self):
        profile = InvestorProfile.model_validate({
            "name": "Léa",
            "age": 20,
            "riskLevel": "conservative",
            "investmentHorizon": "short",
            "monthlyBudget": 50,
            "interests": ["Europe"],
            "experience": "intermediate",
            "goals": [],
        })
        assert profile.risk_level == "conservative"
        assert profile.investment_horizon == "short"
        assert profile.monthly_budget == 50.0
        assert profile.interests == ("Europe",)

    def test_unknown_risk_level_is_accepted(self, make_profile):
        profile = make_profile(risk_level="yolo")
        assert profile.risk_level == "yolo"

    def test_negative_age_raises(self, make_profile):
        with pytest.raises(ValidationError):
            make_profile(age=-1)

    def test_negative_budget_raises(self, make_profile):
        with pytest.raises(ValidationError):
            make_profile(monthly_budget=-10)

    def test_has_interest(self, sample_profile):
        assert sample_profile.has_interest("Dividendes")
        assert not sample_profile.has_interest("Europe")

    def test_interests_keep_selection_order(self, make_profile):
        profile = make_profile(interests=("Europe", "Dividendes", "Technologie"))
        assert profile.interests == ("Europe", "Dividendes", "Technologie")

    def test_frozen(self, sample_profile):
        with pytest.raises(ValidationError):
            sample_profile.risk_level = "aggressive"


class TestIsWellFormed:
    def test_valid_profile(self, sample_profile):
        assert sample_profile.is_well_formed()

    @pytest.mark.parametrize("field, value", [
        ("risk_level", "reckless"),
        ("investment_horizon", "forever"),
        ("experience", "guru"),
        ("interests", ("Crypto",)),
        ("goals", ("Devenir riche",)),
    ])
    def test_out_of_vocabulary_answer(self, make_profile, field, value):
        assert not make_profile(**{field: value}).is_well_formed()
