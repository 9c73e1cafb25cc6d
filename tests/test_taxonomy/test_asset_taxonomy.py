"""Tests for the asset taxonomy."""

from __future__ import annotations

from pea_advisor.taxonomy.asset_taxonomy import RISK_LABELS, AssetRisk, AssetType, EsgRating


class TestAssetTypeEnum:
    def test_values(self):
        assert [t.value for t in AssetType] == ["ETF", "Stock"]


class TestAssetRiskEnum:
    def test_values(self):
        assert [r.value for r in AssetRisk] == ["low", "medium", "high"]

    def test_every_tier_has_label(self):
        for tier in AssetRisk:
            assert tier in RISK_LABELS


class TestEsgRatingEnum:
    def test_aaa_is_best(self):
        assert EsgRating.AAA.rank == 0

    def test_rank_increases_as_grade_worsens(self):
        ranks = [r.rank for r in EsgRating]
        assert ranks == sorted(ranks)
        assert EsgRating.C.rank == len(EsgRating) - 1

    def test_rank_orders_grades(self):
        assert EsgRating.AA.rank < EsgRating.BBB.rank < EsgRating.CCC.rank
