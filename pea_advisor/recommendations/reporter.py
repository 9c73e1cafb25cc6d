"""
Recommendation report writer: JSON and CSV output for one recommendation run.

All functions write in-memory ``ScoredAsset`` lists to disk; no scoring
happens here.

Output files (written by ``pea-advisor recommend --output-dir``)
----------------------------------------------------------------
  data/outputs/recommendations/
    recommendations_{profile}_{date}.csv   -- ranked assets, one row each
    recommendations_{profile}_{date}.json  -- same data plus profile echo
"""

from __future__ import annotations

import csv
import json
import logging
import re
import unicodedata
from datetime import date
from pathlib import Path

from pea_advisor.models.profile import InvestorProfile
from pea_advisor.recommendations.ranker import ScoredAsset

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1.0.0"


def profile_slug(profile: InvestorProfile) -> str:
    """Filesystem-safe slug from the profile name (``"profile"`` if empty)."""
    ascii_name = (
        unicodedata.normalize("NFKD", profile.name)
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_name.lower()).strip("-")
    return slug or "profile"


def write_recommendation_csv(
    ranked: list[ScoredAsset],
    profile: InvestorProfile,
    output_dir: Path,
    run_date: date | None = None,
) -> Path:
    """Write ranked recommendations to a CSV file.

    Columns: rank, asset_id, symbol, name, type, risk, score, rules, reasoning.

    Args:
        ranked:     Output of ``recommend_scored()`` (already ordered).
        profile:    Profile the recommendations were computed for.
        output_dir: Directory to write the file (created if missing).
        run_date:   Date label for the filename. Defaults to today.

    Returns:
        Path to the written CSV file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / f"recommendations_{profile_slug(profile)}_{run_date}.csv"

    fieldnames = [
        "rank", "asset_id", "symbol", "name", "type", "risk",
        "score", "rules", "reasoning",
    ]

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for rank, sa in enumerate(ranked, start=1):
            writer.writerow(
                {
                    "rank":      rank,
                    "asset_id":  sa.asset.asset_id,
                    "symbol":    sa.asset.symbol,
                    "name":      sa.asset.name,
                    "type":      sa.asset.asset_type.value,
                    "risk":      sa.asset.risk.value,
                    "score":     sa.score,
                    "rules":     "|".join(sa.breakdown.rule_slugs),
                    "reasoning": sa.reasoning,
                }
            )

    logger.info("Recommendation CSV written: %s (%d rows)", csv_path, len(ranked))
    return csv_path


def write_recommendation_json(
    ranked: list[ScoredAsset],
    profile: InvestorProfile,
    output_dir: Path,
    run_date: date | None = None,
) -> Path:
    """Write ranked recommendations to a structured JSON file.

    Args:
        ranked:     Output of ``recommend_scored()`` (already ordered).
        profile:    Profile echoed into the payload for provenance.
        output_dir: Target directory.
        run_date:   Date label. Defaults to today.

    Returns:
        Path to the written JSON file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"recommendations_{profile_slug(profile)}_{run_date}.json"

    payload: dict = {
        "schema_version": SCHEMA_VERSION,
        "generated_at":   run_date.isoformat(),
        "profile":        profile.model_dump(mode="json", by_alias=True),
        "recommendations": [
            {
                "rank":           rank,
                "asset_id":       sa.asset.asset_id,
                "symbol":         sa.asset.symbol,
                "name":           sa.asset.name,
                "type":           sa.asset.asset_type.value,
                "sector":         sa.asset.sector,
                "risk":           sa.asset.risk.value,
                "price":          sa.asset.price,
                "performance_1y": sa.asset.performance_1y,
                "dividend_yield": sa.asset.dividend_yield,
                "fees":           sa.asset.fees,
                "esg_rating":     sa.asset.esg_rating.value,
                "score":          sa.score,
                "rules":          sa.breakdown.rule_slugs,
                "reasoning":      sa.reasoning,
            }
            for rank, sa in enumerate(ranked, start=1)
        ],
    }

    json_path.write_text(
        json.dumps(payload, indent=2, ensure_ascii=False, default=str),
        encoding="utf-8",
    )
    logger.info("Recommendation JSON written: %s", json_path)
    return json_path
