"""
Recommendation engine: filters the asset catalog for an investor profile and
ranks the survivors with an additive integer score.

Modules
-------
scorer   : ScoringRule + SCORING_RULES + ScoreBreakdown, eligibility and risk
           filters, score_asset() + build_reasoning(): pure functions.
ranker   : ScoredAsset dataclass + score_catalog() + rank() + recommend().
reporter : write_recommendation_csv() + write_recommendation_json(): file output.
"""
