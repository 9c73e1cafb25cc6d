"""PEA Advisor: investor questionnaire, asset recommendations and comparator."""

__version__ = "0.3.0"
