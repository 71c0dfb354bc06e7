"""Bundled benefit catalog: federal and per-state JSON data."""

from unlockvet.catalog.loader import (
    available_states,
    get_benefit,
    load_benefits_file,
    load_catalog,
    related_benefits,
)

__all__ = [
    "available_states",
    "get_benefit",
    "load_benefits_file",
    "load_catalog",
    "related_benefits",
]
