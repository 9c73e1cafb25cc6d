"""
Closed vocabularies shared by models, questionnaire and scorer.

Modules
-------
profile_taxonomy : RiskLevel, InvestmentHorizon, ExperienceLevel, Interest, Goal.
asset_taxonomy   : AssetType, AssetRisk, EsgRating.
"""
