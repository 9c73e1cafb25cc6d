"""
PEA Advisor: CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load the catalog (bundled sample unless a JSON file is configured).
  4. Execute action (recommend, detail, compare, ...).
  5. Report result to stdout.

Install and run::

    pip install -e .
    pea-advisor --help
    pea-advisor validate-config
    pea-advisor catalog --type ETF
    pea-advisor catalog --min-esg AA
    pea-advisor questionnaire --save-profile profile.json
    pea-advisor recommend --profile profile.toml
    pea-advisor recommend --risk moderate --horizon long --experience beginner \\
        --interest Dividendes --output-dir data/outputs/recommendations
    pea-advisor detail etf001
    pea-advisor compare etf001 etf002 stock002
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from pea_advisor.taxonomy.profile_taxonomy import (
    ExperienceLevel,
    InvestmentHorizon,
    RiskLevel,
)

app = typer.Typer(
    name="pea-advisor",
    help="PEA investment advisor: profile-based ETF/stock recommendations.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pea_advisor.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from pea_advisor.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_catalog_or_exit(config, catalog_file: Optional[str] = None):
    """Return the configured catalog, exiting with code 1 on a bad file."""
    from pea_advisor.catalog.sample import sample_catalog
    from pea_advisor.errors import CatalogError
    from pea_advisor.ingestion.catalog_json import load_catalog

    path = catalog_file or config.catalog.file
    if not path:
        return sample_catalog(seed=config.catalog.history_seed)
    try:
        return load_catalog(Path(path))
    except CatalogError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)


def _prompt_choice(label: str, options: list[tuple[str, str]]) -> str:
    """Numbered single choice; returns the value of the chosen option."""
    typer.echo(f"{label}:")
    for number, (_, text) in enumerate(options, start=1):
        typer.echo(f"  {number}) {text}")
    while True:
        number = typer.prompt("Choix", type=int)
        if 1 <= number <= len(options):
            return options[number - 1][0]
        typer.echo(f"[!] Choose a number between 1 and {len(options)}.")


def _prompt_many(label: str, options: tuple[str, ...]) -> list[str]:
    """Numbered multiple choice ("1,4,5"); returns the chosen options, possibly none."""
    typer.echo(f"{label}:")
    for number, text in enumerate(options, start=1):
        typer.echo(f"  {number}) {text}")
    while True:
        raw = typer.prompt("Choix (ex. 1,3)", default="", show_default=False)
        try:
            numbers = [int(part) for part in raw.split(",") if part.strip()]
        except ValueError:
            numbers = None
        if numbers is not None and all(1 <= n <= len(options) for n in numbers):
            return [options[n - 1] for n in dict.fromkeys(numbers)]
        typer.echo(f"[!] Use numbers between 1 and {len(options)}, separated by commas.")


def _prompt_non_negative(label: str, type_: type, default=None):
    while True:
        value = typer.prompt(label, type=type_, default=default)
        if value >= 0:
            return value
        typer.echo("[!] Enter a positive number.")


def _ask_step(draft):
    """Prompt for the answers of the draft's current step."""
    from pea_advisor.questionnaire.wizard import (
        AGE_MAX,
        AGE_MIN,
        BUDGET_PRESETS,
        GOAL_OPTIONS,
        INTEREST_OPTIONS,
        STEPS,
        toggle_goal,
        toggle_interest,
        update,
    )
    from pea_advisor.taxonomy.profile_taxonomy import HORIZON_LABELS, RISK_LEVEL_LABELS

    slug = STEPS[draft.current_step].slug
    if slug == "basic_info":
        return update(
            draft,
            name=typer.prompt("Prénom").strip(),
            age=_prompt_non_negative(f"Âge (conseillé {AGE_MIN}-{AGE_MAX} ans)", int),
            experience=_prompt_choice(
                "Expérience", [(e.value, e.value) for e in ExperienceLevel]
            ),
        )
    if slug == "risk_profile":
        return update(draft, risk_level=_prompt_choice(
            "Niveau de risque",
            [(r.value, f"{r.value} ({RISK_LEVEL_LABELS[r]})") for r in RiskLevel],
        ))
    if slug == "budget":
        presets = ", ".join(str(p) for p in BUDGET_PRESETS)
        return update(
            draft,
            monthly_budget=_prompt_non_negative(
                f"Budget mensuel en euros (ex. {presets})", float, default=100.0
            ),
            investment_horizon=_prompt_choice(
                "Horizon",
                [(h.value, f"{h.value} ({HORIZON_LABELS[h]})") for h in InvestmentHorizon],
            ),
        )
    if slug == "interests":
        draft = update(draft, interests=())
        for tag in _prompt_many("Centres d'intérêt", INTEREST_OPTIONS):
            draft = toggle_interest(draft, tag)
        return draft
    draft = update(draft, goals=())
    for tag in _prompt_many("Objectifs", GOAL_OPTIONS):
        draft = toggle_goal(draft, tag)
    return draft


_CATALOG_OPTION_HELP = "Path to a catalog JSON file (default: config [catalog] file or bundled sample)."
_CONFIG_OPTION_HELP = "Path to TOML config file."


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Catalog file:     {config.catalog.file or '(bundled sample)'}")
    typer.echo(f"  Max results:      {config.recommendations.max_results}")
    typer.echo(f"  Compare up to:    {config.comparison.max_assets} assets")
    typer.echo(f"  Output dir:       {config.output.dir}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("catalog")
def catalog(
    search: str = typer.Option(
        "",
        "--search",
        "-s",
        help="Case-insensitive substring of asset name or symbol.",
    ),
    asset_type: Optional[str] = typer.Option(
        None,
        "--type",
        help="Restrict to 'ETF' or 'Stock'.",
    ),
    min_esg: Optional[str] = typer.Option(
        None,
        "--min-esg",
        help="Worst acceptable ESG grade, e.g. 'A' keeps AAA, AA and A.",
    ),
    catalog_file: Optional[str] = typer.Option(None, "--catalog", help=_CATALOG_OPTION_HELP),
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_OPTION_HELP),
) -> None:
    """List catalog assets, optionally filtered by name/symbol, type and ESG grade."""
    from pea_advisor.comparison.comparator import search_catalog
    from pea_advisor.reporting.formatters import format_catalog_table
    from pea_advisor.taxonomy.asset_taxonomy import EsgRating

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    if asset_type not in (None, "ETF", "Stock"):
        typer.echo(f"[ERROR] --type must be 'ETF' or 'Stock', got '{asset_type}'.", err=True)
        raise typer.Exit(code=1)
    if min_esg is not None and min_esg not in {g.value for g in EsgRating}:
        grades = ", ".join(EsgRating)
        typer.echo(f"[ERROR] --min-esg must be one of {grades}, got '{min_esg}'.", err=True)
        raise typer.Exit(code=1)

    assets = search_catalog(
        _load_catalog_or_exit(config, catalog_file),
        term=search,
        asset_type=asset_type,
        min_esg=min_esg,
    )
    typer.echo(format_catalog_table(assets))


@app.command("recommend")
def recommend_cmd(
    profile_file: Optional[str] = typer.Option(
        None,
        "--profile",
        "-p",
        help="Profile file (.toml or .json). Overrides the individual profile options.",
    ),
    name: str = typer.Option("Investisseur", "--name", help="Investor first name."),
    age: int = typer.Option(18, "--age", help="Investor age."),
    risk: Optional[RiskLevel] = typer.Option(None, "--risk", help="Risk level."),
    horizon: Optional[InvestmentHorizon] = typer.Option(
        None, "--horizon", help="Investment horizon."
    ),
    experience: Optional[ExperienceLevel] = typer.Option(
        None, "--experience", help="Investing experience."
    ),
    budget: float = typer.Option(100.0, "--budget", help="Monthly budget in euros."),
    interest: Optional[list[str]] = typer.Option(
        None, "--interest", "-i", help="Interest tag (repeatable), e.g. 'Dividendes'."
    ),
    goal: Optional[list[str]] = typer.Option(
        None, "--goal", "-g", help="Goal tag (repeatable)."
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", help="Max recommendations (default: config max_results)."
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Also write JSON + CSV reports to this directory.",
    ),
    catalog_file: Optional[str] = typer.Option(None, "--catalog", help=_CATALOG_OPTION_HELP),
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_OPTION_HELP),
) -> None:
    """Rank catalog assets for an investor profile.

    \b
    Pipeline:
      1. Keep PEA-eligible assets only.
      2. Apply the risk filter for the profile's risk level.
      3. Score each asset on interests, experience and horizon.
      4. Sort by score (catalog order on ties) and keep the top N.
    """
    from pydantic import ValidationError

    from pea_advisor.errors import ProfileError
    from pea_advisor.ingestion.profile_file import load_profile
    from pea_advisor.models.profile import InvestorProfile
    from pea_advisor.recommendations.ranker import recommend_scored
    from pea_advisor.recommendations.reporter import (
        write_recommendation_csv,
        write_recommendation_json,
    )
    from pea_advisor.reporting.formatters import format_recommendations

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    if profile_file:
        try:
            profile = load_profile(Path(profile_file))
        except ProfileError as exc:
            typer.echo(f"[ERROR] {exc}", err=True)
            raise typer.Exit(code=1)
    else:
        missing = [
            flag for flag, value in (
                ("--risk", risk), ("--horizon", horizon), ("--experience", experience),
            ) if value is None
        ]
        if missing:
            typer.echo(
                f"[ERROR] Missing {', '.join(missing)} (or pass --profile FILE).",
                err=True,
            )
            raise typer.Exit(code=1)
        try:
            profile = InvestorProfile(
                name=name,
                age=age,
                risk_level=risk.value,
                investment_horizon=horizon.value,
                monthly_budget=budget,
                interests=tuple(interest or ()),
                experience=experience.value,
                goals=tuple(goal or ()),
            )
        except ValidationError as exc:
            typer.echo(f"[ERROR] Invalid profile: {exc}", err=True)
            raise typer.Exit(code=1)

    max_results = config.recommendations.max_results if limit is None else limit
    if max_results < 0:
        typer.echo("[ERROR] --limit must be >= 0.", err=True)
        raise typer.Exit(code=1)

    assets = _load_catalog_or_exit(config, catalog_file)
    ranked = recommend_scored(profile, assets, limit=max_results)
    typer.echo(format_recommendations(ranked, profile))

    if output_dir:
        out = Path(output_dir)
        json_path = write_recommendation_json(ranked, profile, out)
        csv_path = write_recommendation_csv(ranked, profile, out)
        typer.echo("")
        typer.echo(f"  JSON: {json_path}")
        typer.echo(f"  CSV:  {csv_path}")


@app.command("questionnaire")
def questionnaire(
    save_profile: Optional[str] = typer.Option(
        None,
        "--save-profile",
        help="Write the completed profile to this JSON file (reusable with recommend --profile).",
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", help="Max recommendations (default: config max_results)."
    ),
    catalog_file: Optional[str] = typer.Option(None, "--catalog", help=_CATALOG_OPTION_HELP),
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_OPTION_HELP),
) -> None:
    """Answer the five-step questionnaire interactively, then show recommendations.

    \b
    Steps: basic info, risk profile, budget and horizon, interests, goals.
    A step left incomplete (e.g. no interest chosen) is asked again.
    """
    from pea_advisor.errors import IncompleteStepError
    from pea_advisor.questionnaire.wizard import (
        LAST_STEP,
        STEPS,
        QuestionnaireDraft,
        complete,
        next_step,
        progress,
    )
    from pea_advisor.recommendations.ranker import recommend_scored
    from pea_advisor.reporting.formatters import format_recommendations
    from pea_advisor.session.state import (
        SessionState,
        complete_questionnaire,
        start_questionnaire,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    max_results = config.recommendations.max_results if limit is None else limit
    if max_results < 0:
        typer.echo("[ERROR] --limit must be >= 0.", err=True)
        raise typer.Exit(code=1)

    assets = _load_catalog_or_exit(config, catalog_file)
    state = start_questionnaire(SessionState())
    draft = QuestionnaireDraft()
    while True:
        typer.echo(f"\n[{progress(draft)}%] {STEPS[draft.current_step].title}")
        draft = _ask_step(draft)
        try:
            if draft.current_step == LAST_STEP:
                profile = complete(draft)
                break
            draft = next_step(draft)
        except IncompleteStepError as exc:
            typer.echo(f"[!] {exc}")

    state = complete_questionnaire(state, profile)
    typer.echo("")
    typer.echo(format_recommendations(
        recommend_scored(state.profile, assets, limit=max_results), state.profile
    ))

    if save_profile:
        path = Path(save_profile)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            state.profile.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
        )
        typer.echo("")
        typer.echo(f"  Profile: {path}")


@app.command("detail")
def detail(
    asset_id: str = typer.Argument(..., help="Catalog asset id, e.g. etf001."),
    catalog_file: Optional[str] = typer.Option(None, "--catalog", help=_CATALOG_OPTION_HELP),
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_OPTION_HELP),
) -> None:
    """Show one asset's fields and price-history summary."""
    from pea_advisor.catalog.detail import asset_detail, find_asset
    from pea_advisor.reporting.formatters import format_asset_detail

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    asset = find_asset(_load_catalog_or_exit(config, catalog_file), asset_id)
    if asset is None:
        typer.echo(f"[ERROR] Unknown asset id '{asset_id}'.", err=True)
        raise typer.Exit(code=1)

    typer.echo(format_asset_detail(asset_detail(asset)))


@app.command("compare")
def compare(
    asset_ids: list[str] = typer.Argument(..., help="Two or more catalog asset ids."),
    catalog_file: Optional[str] = typer.Option(None, "--catalog", help=_CATALOG_OPTION_HELP),
    config_path: Optional[str] = typer.Option(None, "--config", help=_CONFIG_OPTION_HELP),
) -> None:
    """Compare assets field by field (2 to config max_assets, default 4)."""
    from pea_advisor.catalog.detail import find_asset
    from pea_advisor.comparison.comparator import (
        ComparisonSelection,
        add,
        comparison_rows,
        is_ready,
    )
    from pea_advisor.reporting.formatters import format_comparison

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    max_assets = config.comparison.max_assets
    if len(asset_ids) > max_assets:
        typer.echo(f"[ERROR] At most {max_assets} assets can be compared.", err=True)
        raise typer.Exit(code=1)

    assets = _load_catalog_or_exit(config, catalog_file)
    selection = ComparisonSelection(max_assets=max_assets)
    for asset_id in asset_ids:
        asset = find_asset(assets, asset_id)
        if asset is None:
            typer.echo(f"[ERROR] Unknown asset id '{asset_id}'.", err=True)
            raise typer.Exit(code=1)
        selection = add(selection, asset)

    if not is_ready(selection):
        typer.echo("[ERROR] Select at least two distinct assets to compare.", err=True)
        raise typer.Exit(code=1)

    chosen = list(selection.assets)
    typer.echo(format_comparison(chosen, comparison_rows(chosen)))


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
