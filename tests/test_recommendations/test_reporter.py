"""
Tests for pea_advisor/recommendations/reporter.py.

What we test
------------
  - profile_slug() strips accents and punctuation, falls back to "profile".
  - CSV: header, one row per ranked asset in rank order, rules joined by "|".
  - JSON: schema version, profile echo (camelCase), recommendations list.
  - Output directory is created; filenames carry slug and run date.
  - An empty ranking still writes valid files.
"""

from __future__ import annotations

import csv
import json
from datetime import date

from pea_advisor.recommendations.ranker import recommend_scored
from pea_advisor.recommendations.reporter import (
    SCHEMA_VERSION,
    profile_slug,
    write_recommendation_csv,
    write_recommendation_json,
)

RUN_DATE = date(2025, 6, 30)


class TestProfileSlug:
    def test_plain_name(self, sample_profile):
        assert profile_slug(sample_profile) == "thomas"

    def test_accents_and_spaces(self, make_profile):
        assert profile_slug(make_profile(name="Léa Dupré-Martin")) == "lea-dupre-martin"

    def test_empty_falls_back(self, make_profile):
        assert profile_slug(make_profile(name="!!!")) == "profile"


class TestWriteRecommendationCsv:
    def test_rows_in_rank_order(self, tmp_path, catalog, sample_profile):
        ranked = recommend_scored(sample_profile, catalog)
        path = write_recommendation_csv(ranked, sample_profile, tmp_path / "out", run_date=RUN_DATE)

        assert path.name == "recommendations_thomas_2025-06-30.csv"
        with path.open(encoding="utf-8", newline="") as f:
            rows = list(csv.DictReader(f))

        assert [r["asset_id"] for r in rows] == [
            "etf003", "etf001", "etf002", "stock002", "stock003",
        ]
        assert rows[0]["rank"] == "1"
        assert rows[0]["score"] == "5"
        assert rows[0]["rules"] == "high_dividend|beginner_etf"
        assert rows[0]["type"] == "ETF"

    def test_header(self, tmp_path, sample_profile):
        path = write_recommendation_csv([], sample_profile, tmp_path, run_date=RUN_DATE)
        header = path.read_text(encoding="utf-8").splitlines()[0]
        assert header == "rank,asset_id,symbol,name,type,risk,score,rules,reasoning"


class TestWriteRecommendationJson:
    def test_payload(self, tmp_path, catalog, sample_profile):
        ranked = recommend_scored(sample_profile, catalog)
        path = write_recommendation_json(ranked, sample_profile, tmp_path, run_date=RUN_DATE)

        assert path.name == "recommendations_thomas_2025-06-30.json"
        payload = json.loads(path.read_text(encoding="utf-8"))
        assert payload["schema_version"] == SCHEMA_VERSION
        assert payload["generated_at"] == "2025-06-30"
        assert payload["profile"]["riskLevel"] == "moderate"
        assert payload["profile"]["interests"] == ["Dividendes"]

        recs = payload["recommendations"]
        assert [r["rank"] for r in recs] == [1, 2, 3, 4, 5]
        assert recs[0]["asset_id"] == "etf003"
        assert recs[0]["rules"] == ["high_dividend", "beginner_etf"]
        assert recs[0]["reasoning"]

    def test_empty_ranking(self, tmp_path, make_profile):
        profile = make_profile(risk_level="unknown")
        path = write_recommendation_json([], profile, tmp_path / "nested" / "dir", run_date=RUN_DATE)
        payload = json.loads(path.read_text(encoding="utf-8"))
        assert payload["recommendations"] == []
