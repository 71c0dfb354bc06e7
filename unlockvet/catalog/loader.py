"""Benefit catalog loader.

Reads the bundled JSON catalogs under data/benefits/: federal.json plus one
file per state under states/, named by lowercase state code (tx.json). Each
file has the shape {"benefits": [...]} and is validated into frozen Benefit
records. Malformed records raise pydantic.ValidationError at load time.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from unlockvet.schemas.benefits import Benefit

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
_BENEFITS_DIR = _DATA_DIR / "benefits"
_FEDERAL_PATH = _BENEFITS_DIR / "federal.json"
_STATES_DIR = _BENEFITS_DIR / "states"


def load_benefits_file(path: Path) -> list[Benefit]:
    """Load and validate one catalog file. A missing file gives an empty list."""
    if not path.exists():
        logger.warning("Benefit catalog file not found: %s", path)
        return []
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return [Benefit.model_validate(entry) for entry in data.get("benefits", [])]


def available_states() -> list[str]:
    """State codes with a bundled catalog, sorted."""
    if not _STATES_DIR.exists():
        return []
    return sorted(p.stem.upper() for p in _STATES_DIR.glob("*.json"))


def load_catalog(states: Sequence[str] | None = None) -> list[Benefit]:
    """Load the federal catalog followed by state catalogs.

    Args:
        states: State codes to include, in order. None loads every bundled
            state. Codes without a bundled file are skipped.

    Returns:
        Benefits in catalog order: federal first, then each state's file.
    """
    benefits = load_benefits_file(_FEDERAL_PATH)

    for code in available_states() if states is None else states:
        path = _STATES_DIR / f"{code.lower()}.json"
        if not path.exists():
            logger.warning("No bundled catalog for state %s", code)
            continue
        benefits.extend(load_benefits_file(path))

    logger.debug("Loaded %d benefits", len(benefits))
    return benefits


def get_benefit(benefit_id: str, benefits: Sequence[Benefit]) -> Benefit | None:
    """Find a benefit by id."""
    for benefit in benefits:
        if benefit.id == benefit_id:
            return benefit
    return None


def related_benefits(benefit: Benefit, benefits: Sequence[Benefit]) -> list[Benefit]:
    """Resolve a benefit's related ids against a catalog, skipping unknown ids."""
    by_id: dict[str, Benefit] = {}
    for b in benefits:
        by_id.setdefault(b.id, b)
    return [by_id[rid] for rid in benefit.related_benefits if rid in by_id]
