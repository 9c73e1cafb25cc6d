"""
JSON loader for asset catalogs.

Format: a JSON array of asset objects in the catalog data shape::

    [
      {
        "id": "etf001", "name": "MSCI World UCITS ETF", "symbol": "CW8",
        "type": "ETF", "sector": "Mondial diversifié", "description": "...",
        "peaEligible": true, "price": 85.42, "performance1Y": 12.4,
        "performance5Y": 8.7, "volatility": 16.2, "dividendYield": 2.1,
        "fees": 0.2, "esgRating": "AA", "morningstarRating": 4,
        "provider": "iShares", "risk": "medium",
        "historicalPrices": [{"date": "2024-01-15", "price": 75.0}, ...]
      },
      ...
    ]

snake_case field names (``asset_id``, ``pea_eligible`` …) are accepted too.

Validation rules
----------------
- The top-level value must be an array.
- Duplicate asset ids are rejected.
- Every record must validate as an ``Asset``.
- ``esgRating`` must be one of the nine agency grades ``AAA`` .. ``C``. A
  modifier such as ``"A+"`` or a free-text grade is a validation error like
  any other, so it rejects the file. Grades are ranked for the ``--min-esg``
  filter and shown verbatim by the comparator; an off-scale value has no rank.

All records are validated before any are returned. If any record fails, a
single :class:`CatalogError` lists the first 5 failures.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pea_advisor.errors import CatalogError
from pea_advisor.models.asset import Asset

logger = logging.getLogger(__name__)

_MAX_REPORTED_ERRORS = 5


def load_catalog(path: Path) -> list[Asset]:
    """Load and validate an asset catalog JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Validated assets in file order.

    Raises:
        CatalogError: If the file is missing, unreadable, not an array, or
            contains duplicate ids or invalid records.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as exc:
        raise CatalogError(f"Catalog file not found: {path}") from exc
    except (json.JSONDecodeError, OSError) as exc:
        raise CatalogError(f"Catalog JSON parse error in {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise CatalogError(f"Catalog file {path} must contain a JSON array.")

    assets = parse_catalog_records(raw)
    logger.info("Loaded %d asset(s) from %s", len(assets), path)
    return assets


def parse_catalog_records(records: list[Any]) -> list[Asset]:
    """Validate a list of raw asset dicts.

    Raises:
        CatalogError: On duplicate ids or any invalid record.
    """
    assets: list[Asset] = []
    errors: list[tuple[int, str]] = []
    seen_ids: set[str] = set()

    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            errors.append((i, f"expected an object, got {type(rec).__name__}"))
            continue
        try:
            asset = Asset.model_validate(rec)
        except ValidationError as exc:
            errors.append((i, _summarise_validation_error(exc)))
            continue
        if asset.asset_id in seen_ids:
            errors.append((i, f"duplicate asset id '{asset.asset_id}'"))
            continue
        seen_ids.add(asset.asset_id)
        assets.append(asset)

    if errors:
        lines = [f"{len(errors)} catalog record(s) failed validation:"]
        for idx, msg in errors[:_MAX_REPORTED_ERRORS]:
            lines.append(f"  Record #{idx}: {msg}")
        if len(errors) > _MAX_REPORTED_ERRORS:
            lines.append(f"  ... and {len(errors) - _MAX_REPORTED_ERRORS} more.")
        raise CatalogError("\n".join(lines))

    return assets


def _summarise_validation_error(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
