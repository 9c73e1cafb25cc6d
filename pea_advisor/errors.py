"""Exceptions raised by pea_advisor.

The recommendation scorer itself never raises for bad profile values or
malformed catalogs; these cover file loading, the questionnaire wizard and
session navigation.
"""


class PeaAdvisorError(Exception):
    """Base class for all pea_advisor errors."""


class CatalogError(PeaAdvisorError):
    """An asset catalog file could not be read or failed validation."""


class ProfileError(PeaAdvisorError):
    """An investor profile file could not be read or failed validation."""


class IncompleteStepError(PeaAdvisorError):
    """A questionnaire step was left before its answers were complete."""

    def __init__(self, step: int, slug: str) -> None:
        super().__init__(f"Questionnaire step {step} ('{slug}') is incomplete.")
        self.step = step
        self.slug = slug


class NavigationError(PeaAdvisorError):
    """A session transition was requested from a state that does not allow it."""
