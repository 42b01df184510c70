# folio/core/data/store.py
"""
Read-only loader for the site's static JSON data.

Layout (under data_dir/):
  - projects.json       {"projects": [...]}
  - experience.json     {"experiences": [...]}
  - achievements.json   {"achievements": [...], "leadership": [...], "volunteering": [...]}
  - publications.json   {"publications": [...], "patents": [...]}
  - opensource.json     {"contributions": [...]}

A missing file yields empty collections; a file that exists but cannot be
parsed is a startup error.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from folio.diagnostics import get_logger
from folio.schemas.models import Portfolio

_log = get_logger()

# file name -> Portfolio fields it provides
DATA_FILES: dict[str, tuple[str, ...]] = {
    "projects.json": ("projects",),
    "experience.json": ("experiences",),
    "achievements.json": ("achievements", "leadership", "volunteering"),
    "publications.json": ("publications", "patents"),
    "opensource.json": ("contributions",),
}


class PortfolioDataError(RuntimeError):
    """A data file exists but is not valid JSON or does not match the schema."""


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise PortfolioDataError(f"cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise PortfolioDataError(f"{path}: top-level value must be an object")
    return data


def load_portfolio(data_dir: Path) -> Portfolio:
    collections: dict[str, Any] = {}
    for filename, fields in DATA_FILES.items():
        path = data_dir / filename
        if not path.exists():
            _log.info("data file %s not found, treating as empty", path)
            continue
        data = _read_json(path)
        for field in fields:
            if field in data:
                collections[field] = data[field]

    try:
        return Portfolio.model_validate(collections)
    except ValidationError as e:
        raise PortfolioDataError(f"invalid portfolio data in {data_dir}: {e}") from e


__all__ = ["DATA_FILES", "PortfolioDataError", "load_portfolio"]
