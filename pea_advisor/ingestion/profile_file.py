"""
Investor profile file loader for the CLI.

Accepts ``.toml`` or ``.json`` (detected by extension) holding one mapping
with the profile fields, camelCase or snake_case::

    name = "Thomas"
    age = 22
    risk_level = "moderate"
    investment_horizon = "long"
    monthly_budget = 100
    interests = ["Dividendes", "Europe"]
    experience = "beginner"
    goals = ["Préparer ma retraite"]
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pea_advisor.errors import ProfileError
from pea_advisor.models.profile import InvestorProfile


def load_profile(path: Path) -> InvestorProfile:
    """Read and validate an investor profile file.

    Raises:
        ProfileError: If the file is missing, unparseable, has an unsupported
            extension, or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise ProfileError(f"Profile file not found: {path}")

    fmt = path.suffix.lower()
    try:
        if fmt == ".toml":
            with open(path, "rb") as f:
                raw: Any = tomllib.load(f)
        elif fmt == ".json":
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        else:
            raise ProfileError(
                f"Unsupported profile format '{fmt}'. Use .toml or .json."
            )
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, OSError) as exc:
        raise ProfileError(f"Could not parse profile {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ProfileError(f"Profile file {path} must contain a single mapping.")

    try:
        return InvestorProfile.model_validate(raw)
    except ValidationError as exc:
        raise ProfileError(f"Invalid profile in {path}:\n{exc}") from exc
