"""
Immutable domain records.

Modules
-------
asset   : Asset, PricePoint: catalog records.
profile : InvestorProfile: questionnaire outcome.
"""
