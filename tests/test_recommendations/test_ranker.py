"""
Tests for pea_advisor/recommendations/ranker.py.

What we test
------------
score_catalog():
  - Keeps only PEA-eligible, risk-compatible assets, in catalog order.
  - Records the catalog position of each asset.
  - Empty / None catalog -> empty list.
  - Non-Asset entries are skipped, not raised.
  - A catalog that is not a sequence (int, str, mapping, lone Asset) -> empty.

rank():
  - Sorted by score descending.
  - Equal scores keep catalog order (stable).
  - Truncates to limit; limit=0 -> empty; negative limit raises.

recommend():
  - None profile -> empty list.
  - At most 6 results by default.
  - Eligibility / risk-filter invariants over the sample catalog.
  - Deterministic: identical inputs give identical order.
  - Moderate dividend beginner scenario on the sample catalog.
"""

from __future__ import annotations

import logging

import pytest

from pea_advisor.recommendations.ranker import (
    DEFAULT_MAX_RESULTS,
    rank,
    recommend,
    recommend_scored,
    score_catalog,
)
from pea_advisor.recommendations.scorer import is_candidate, score_asset

_ALL_RISK_LEVELS = ["conservative", "moderate", "aggressive"]


def _ids(assets) -> list[str]:
    return [a.asset_id for a in assets]


# ── score_catalog ─────────────────────────────────────────────────────────────

class TestScoreCatalog:
    def test_filters_and_keeps_catalog_order(self, catalog, sample_profile):
        scored = score_catalog(sample_profile, catalog)
        assert [s.asset.asset_id for s in scored] == [
            "etf001", "etf002", "etf003", "stock002", "stock003",
        ]

    def test_records_catalog_position(self, catalog, sample_profile):
        scored = score_catalog(sample_profile, catalog)
        for s in scored:
            assert catalog[s.position] is s.asset

    def test_empty_catalog(self, sample_profile):
        assert score_catalog(sample_profile, []) == []

    def test_none_catalog(self, sample_profile):
        assert score_catalog(sample_profile, None) == []

    @pytest.mark.parametrize("malformed", [42, 3.5, object(), "etf001", {"id": "etf001"}])
    def test_non_sequence_catalog_gives_empty(self, sample_profile, malformed):
        assert score_catalog(sample_profile, malformed) == []

    def test_lone_asset_is_not_a_catalog(self, sample_profile, make_asset):
        assert score_catalog(sample_profile, make_asset(risk="medium")) == []

    def test_non_sequence_catalog_logs_warning(self, sample_profile, caplog):
        with caplog.at_level(logging.WARNING, logger="pea_advisor.recommendations.ranker"):
            score_catalog(sample_profile, 42)
        assert "malformed catalog of type int" in caplog.text

    def test_malformed_entries_skipped(self, make_asset, sample_profile):
        good = make_asset(asset_id="ok", risk="medium")
        scored = score_catalog(sample_profile, [{"id": "raw"}, None, good])
        assert [s.asset.asset_id for s in scored] == ["ok"]
        assert scored[0].position == 2

    def test_accepts_generator(self, catalog, sample_profile):
        scored = score_catalog(sample_profile, (a for a in catalog))
        assert len(scored) == 5


# ── rank ──────────────────────────────────────────────────────────────────────

class TestRank:
    def test_sorted_by_score_desc(self, catalog, sample_profile):
        ranked = rank(score_catalog(sample_profile, catalog))
        scores = [s.score for s in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_catalog_order(self, make_asset, make_profile):
        profile = make_profile(experience="beginner")
        assets = [
            make_asset(asset_id="a", asset_type="Stock"),
            make_asset(asset_id="b", asset_type="ETF"),
            make_asset(asset_id="c", asset_type="Stock"),
            make_asset(asset_id="d", asset_type="ETF"),
        ]
        ranked = rank(score_catalog(profile, assets))
        assert [s.asset.asset_id for s in ranked] == ["b", "d", "a", "c"]

    def test_truncates_to_limit(self, make_asset, make_profile):
        assets = [make_asset(asset_id=f"a{i}") for i in range(10)]
        ranked = rank(score_catalog(make_profile(), assets), limit=3)
        assert [s.asset.asset_id for s in ranked] == ["a0", "a1", "a2"]

    def test_limit_zero(self, catalog, sample_profile):
        assert rank(score_catalog(sample_profile, catalog), limit=0) == []

    def test_negative_limit_raises(self):
        with pytest.raises(ValueError, match="limit"):
            rank([], limit=-1)


# ── recommend ─────────────────────────────────────────────────────────────────

class TestRecommend:
    def test_none_profile_gives_empty(self, catalog):
        assert recommend(None, catalog) == []

    def test_non_iterable_catalog_gives_empty(self, sample_profile):
        assert recommend(sample_profile, 42) == []

    def test_empty_catalog_gives_empty(self, sample_profile):
        assert recommend(sample_profile, []) == []

    def test_unknown_risk_level_gives_empty(self, catalog, make_profile):
        assert recommend(make_profile(risk_level="reckless"), catalog) == []

    def test_no_fallback_broadening(self, make_asset, make_profile):
        # moderate accepts medium only; a low/high-only catalog yields nothing
        assets = [make_asset(asset_id="l", risk="low"), make_asset(asset_id="h", risk="high")]
        assert recommend(make_profile(risk_level="moderate"), assets) == []

    def test_default_limit_is_six(self, make_asset, make_profile):
        assets = [make_asset(asset_id=f"a{i}") for i in range(10)]
        assert len(recommend(make_profile(), assets)) == DEFAULT_MAX_RESULTS == 6

    def test_aggressive_truncates_sample_catalog(self, catalog, make_profile):
        result = recommend(make_profile(interests=("Écologie & ESG",)), catalog)
        # INRG (AAA) first, then the remaining eligible assets in catalog order
        assert _ids(result) == [
            "etf004", "etf001", "etf002", "stock001", "etf003", "stock002",
        ]

    @pytest.mark.parametrize("risk_level", _ALL_RISK_LEVELS)
    def test_every_result_is_eligible(self, catalog, make_profile, risk_level):
        for asset in recommend(make_profile(risk_level=risk_level), catalog):
            assert asset.pea_eligible

    def test_moderate_results_are_medium(self, catalog, make_profile):
        result = recommend(make_profile(risk_level="moderate"), catalog)
        assert result
        assert all(a.risk == "medium" for a in result)

    def test_conservative_results_low_or_medium(self, catalog, make_profile):
        result = recommend(make_profile(risk_level="conservative"), catalog)
        assert result
        assert all(a.risk in ("low", "medium") for a in result)

    def test_aggressive_includes_high_risk(self, catalog, make_profile):
        result = recommend(make_profile(risk_level="aggressive"), catalog)
        assert any(a.risk == "high" for a in result)

    @pytest.mark.parametrize("risk_level", _ALL_RISK_LEVELS)
    def test_bounded_output(self, catalog, make_profile, risk_level):
        profile = make_profile(risk_level=risk_level)
        candidates = [a for a in catalog if is_candidate(profile, a)]
        assert len(recommend(profile, catalog)) <= min(6, len(candidates))

    @pytest.mark.parametrize("risk_level", _ALL_RISK_LEVELS)
    def test_adjacent_scores_monotonic(self, catalog, make_profile, risk_level):
        profile = make_profile(
            risk_level=risk_level,
            interests=("Europe", "Dividendes"),
            experience="beginner",
        )
        result = recommend(profile, catalog)
        scores = [score_asset(profile, a).total for a in result]
        for a, b in zip(scores, scores[1:]):
            assert a >= b

    def test_deterministic(self, catalog, sample_profile):
        first = recommend(sample_profile, catalog)
        second = recommend(sample_profile, catalog)
        assert _ids(first) == _ids(second)


class TestSampleScenario:
    """Moderate, Dividendes, beginner, long horizon against the sample catalog."""

    def test_only_medium_eligible_assets(self, catalog, sample_profile):
        ids = _ids(recommend(sample_profile, catalog))
        assert "etf005" not in ids      # NASDAQ-100: not PEA-eligible
        assert "stock001" not in ids    # LVMH: high risk
        assert "etf004" not in ids      # Clean energy: high risk

    def test_high_yield_etf_ranks_first(self, catalog, sample_profile):
        ranked = recommend_scored(sample_profile, catalog)
        # CAC 40: dividend 3.2 (+3) + beginner ETF (+2); 5Y 4.8 misses long horizon
        assert ranked[0].asset.asset_id == "etf003"
        assert ranked[0].score == 5

    def test_full_order(self, catalog, sample_profile):
        ranked = recommend_scored(sample_profile, catalog)
        assert [(s.asset.asset_id, s.score) for s in ranked] == [
            ("etf003", 5),
            ("etf001", 3),
            ("etf002", 3),
            ("stock002", 3),
            ("stock003", 3),
        ]

    def test_reasoning_mentions_dividend(self, catalog, sample_profile):
        top = recommend_scored(sample_profile, catalog)[0]
        assert "dividende" in top.reasoning.lower()
