"""
Questionnaire wizard: the five-step flow that produces an ``InvestorProfile``.

Steps
-----
    0  basic_info    "Faisons connaissance"    name, age and experience set
    1  risk_profile  "Votre profil de risque"  risk level chosen
    2  budget        "Votre budget"            monthly budget and horizon set
    3  interests     "Vos préférences"         at least one interest
    4  goals         "Vos objectifs"           at least one goal

A ``QuestionnaireDraft`` holds the partial answers and the current step. It is
frozen: every operation below returns a new draft. The profile is built only
by ``complete()``, once every step predicate holds.

Input widgets and their validation messages belong to the front-end; this
module only owns the step order and the completion predicates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from pea_advisor.errors import IncompleteStepError
from pea_advisor.models.profile import InvestorProfile
from pea_advisor.taxonomy.profile_taxonomy import Goal, Interest

INTEREST_OPTIONS: tuple[str, ...] = tuple(i.value for i in Interest)
GOAL_OPTIONS: tuple[str, ...] = tuple(g.value for g in Goal)
BUDGET_PRESETS: tuple[int, ...] = (50, 100, 200, 500)

# Hints for the age input; not enforced.
AGE_MIN = 18
AGE_MAX = 25


class QuestionnaireDraft(BaseModel):
    """Partial questionnaire answers.

    Unanswered scalar fields are ``""`` (choices) or ``None`` (numbers).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    current_step: int = Field(default=0, ge=0)
    name: str = ""
    age: Optional[int] = None
    experience: str = ""
    risk_level: str = ""
    monthly_budget: Optional[float] = None
    investment_horizon: str = ""
    interests: tuple[str, ...] = ()
    goals: tuple[str, ...] = ()


@dataclass(frozen=True)
class WizardStep:
    """One questionnaire page and its completion predicate."""

    index:       int
    slug:        str
    title:       str
    is_complete: Callable[[QuestionnaireDraft], bool]


STEPS: tuple[WizardStep, ...] = (
    WizardStep(0, "basic_info",   "Faisons connaissance",
               lambda d: bool(d.name) and d.age is not None and bool(d.experience)),
    WizardStep(1, "risk_profile", "Votre profil de risque",
               lambda d: bool(d.risk_level)),
    WizardStep(2, "budget",       "Votre budget",
               lambda d: d.monthly_budget is not None and bool(d.investment_horizon)),
    WizardStep(3, "interests",    "Vos préférences",
               lambda d: len(d.interests) > 0),
    WizardStep(4, "goals",        "Vos objectifs",
               lambda d: len(d.goals) > 0),
)

LAST_STEP = len(STEPS) - 1


# ── Editing ───────────────────────────────────────────────────────────────────

def update(draft: QuestionnaireDraft, **fields: Any) -> QuestionnaireDraft:
    """Return a copy of ``draft`` with ``fields`` replaced (validated)."""
    return QuestionnaireDraft.model_validate({**draft.model_dump(), **fields})


def _toggle(values: tuple[str, ...], tag: str) -> tuple[str, ...]:
    if tag in values:
        return tuple(v for v in values if v != tag)
    return values + (tag,)


def toggle_interest(draft: QuestionnaireDraft, tag: str) -> QuestionnaireDraft:
    """Add ``tag`` to the interests if absent, remove it if present."""
    return update(draft, interests=_toggle(draft.interests, tag))


def toggle_goal(draft: QuestionnaireDraft, tag: str) -> QuestionnaireDraft:
    """Add ``tag`` to the goals if absent, remove it if present."""
    return update(draft, goals=_toggle(draft.goals, tag))


# ── Navigation ────────────────────────────────────────────────────────────────

def is_step_complete(draft: QuestionnaireDraft, step: int) -> bool:
    """Completion predicate for ``step``; unknown step indices are never complete."""
    if not 0 <= step <= LAST_STEP:
        return False
    return STEPS[step].is_complete(draft)


def next_step(draft: QuestionnaireDraft) -> QuestionnaireDraft:
    """Advance to the following step.

    Stays on the last step (use ``complete()`` there).

    Raises:
        IncompleteStepError: If the current step's answers are incomplete.
    """
    step = draft.current_step
    if not is_step_complete(draft, step):
        raise IncompleteStepError(step, _slug(step))
    if step >= LAST_STEP:
        return draft
    return update(draft, current_step=step + 1)


def previous_step(draft: QuestionnaireDraft) -> QuestionnaireDraft:
    """Go back one step; a no-op on the first step."""
    if draft.current_step == 0:
        return draft
    return update(draft, current_step=draft.current_step - 1)


def progress(draft: QuestionnaireDraft) -> int:
    """Percent of the questionnaire reached, counting the current step."""
    return round((draft.current_step + 1) / len(STEPS) * 100)


def complete(draft: QuestionnaireDraft) -> InvestorProfile:
    """Build the immutable profile from a fully answered draft.

    Age and monthly budget are truncated to whole numbers.

    Raises:
        IncompleteStepError: Naming the first step whose answers are incomplete.
    """
    for step in STEPS:
        if not step.is_complete(draft):
            raise IncompleteStepError(step.index, step.slug)

    return InvestorProfile(
        name=draft.name,
        age=int(draft.age),
        risk_level=draft.risk_level,
        investment_horizon=draft.investment_horizon,
        monthly_budget=int(draft.monthly_budget),
        interests=draft.interests,
        experience=draft.experience,
        goals=draft.goals,
    )


def _slug(step: int) -> str:
    return STEPS[step].slug if 0 <= step <= LAST_STEP else "unknown"
