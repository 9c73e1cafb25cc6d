"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``     : committed static defaults
  2. ``config/local.toml``       : optional local overrides (gitignored)
  3. ``.env``                    : local overrides (gitignored)
  4. Environment variables       : ``PEA_ADVISOR_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

CLI commands receive an ``AppConfig`` instance, never raw dicts or
individual env var lookups scattered through the codebase.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class CatalogConfig(BaseModel):
    """Where the asset catalog comes from."""

    model_config = ConfigDict(frozen=True)

    file: str = ""          # empty → bundled sample catalog
    history_seed: int = 42  # seed for the simulated sample price history


class RecommendationConfig(BaseModel):
    """Recommendation scorer settings."""

    model_config = ConfigDict(frozen=True)

    max_results: int = 6

    @field_validator("max_results")
    @classmethod
    def validate_max_results(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"max_results must be >= 0, got {v}.")
        return v


class ComparisonConfig(BaseModel):
    """Comparator selection limits."""

    model_config = ConfigDict(frozen=True)

    max_assets: int = 4

    @field_validator("max_assets")
    @classmethod
    def validate_max_assets(cls, v: int) -> int:
        if v < 2:
            raise ValueError(f"max_assets must be >= 2 to compare anything, got {v}.")
        return v


class OutputConfig(BaseModel):
    """Filesystem location for exported recommendation reports."""

    model_config = ConfigDict(frozen=True)

    dir: str = "data/outputs/recommendations"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration, the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    catalog: CatalogConfig = CatalogConfig()
    recommendations: RecommendationConfig = RecommendationConfig()
    comparison: ComparisonConfig = ComparisonConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PACKAGE_DIR = Path(__file__).resolve().parent

# Environment variable → (section, key); section None = top level.
_ENV_OVERRIDES: dict[str, tuple[Optional[str], str]] = {
    "PEA_ADVISOR_CATALOG_FILE": ("catalog", "file"),
    "PEA_ADVISOR_LOG_LEVEL":    ("logging", "level"),
    "PEA_ADVISOR_DEBUG":        (None, "debug"),
}

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _project_root() -> Path:
    """Nearest ancestor of the package directory holding ``pyproject.toml``.

    Falls back to the package's parent directory (installed wheels ship no
    pyproject.toml).
    """
    for candidate in (_PACKAGE_DIR, *_PACKAGE_DIR.parents):
        if (candidate / "pyproject.toml").is_file():
            return candidate
    return _PACKAGE_DIR.parent


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``; when that default file is
            absent (e.g. an installed wheel) the built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _project_root()
    load_dotenv(dotenv_path=root / ".env", override=False)

    if config_path is not None:
        base_path = Path(config_path)
        if not base_path.is_file():
            raise FileNotFoundError(
                f"Config file not found: {base_path}\n"
                "Create it or omit --config to use config/default.toml."
            )
    else:
        base_path = root / "config" / "default.toml"

    raw = _read_toml(base_path) if base_path.is_file() else {}

    local_path = base_path.parent / "local.toml"
    if local_path.is_file():
        raw = _deep_merge(raw, _read_toml(local_path))

    return _build_app_config(_apply_env_overrides(raw))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated with ``override``; nested tables merge key by key."""
    merged = dict(base)
    for key, val in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(val, dict):
            merged[key] = _deep_merge(current, val)
        else:
            merged[key] = val
    return merged


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Overlay the ``PEA_ADVISOR_*`` variables listed in ``_ENV_OVERRIDES``.

    Empty variables are ignored.
    """
    for var, (section, key) in _ENV_OVERRIDES.items():
        value: Any = os.environ.get(var)
        if not value:
            continue
        if key == "debug":
            value = value.lower() in _TRUTHY
        target = raw if section is None else raw.setdefault(section, {})
        target[key] = value
    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Validate the merged TOML tables into an ``AppConfig``.

    ``debug`` may sit at top level (env override) or under ``[project]``.
    """
    project = raw.get("project", {})
    sections = {
        "catalog":         CatalogConfig,
        "recommendations": RecommendationConfig,
        "comparison":      ComparisonConfig,
        "output":          OutputConfig,
        "logging":         LoggingConfig,
    }
    return AppConfig(
        **{name: model(**raw.get(name, {})) for name, model in sections.items()},
        debug=raw.get("debug", project.get("debug", False)),
    )
