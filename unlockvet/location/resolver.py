"""Zip code → Location lookup.

The matching engine depends only on the LocationResolver protocol. The
bundled StaticLocationResolver reads data/zip_locations.json, a small sample
table; a resolver backed by a full zip code database can be passed in its
place without touching the matching logic.

An unknown zip code resolves to None. That is an expected outcome, not an
error.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from unlockvet.config import settings
from unlockvet.schemas.matching import Location

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
_ZIP_LOCATIONS_PATH = _DATA_DIR / "zip_locations.json"


class LocationResolver(Protocol):
    """Anything that can turn a zip code into a Location."""

    def resolve(self, zip_code: str) -> Location | None: ...


class StaticLocationResolver:
    """Resolver over a fixed in-memory table. Keys are matched exactly."""

    def __init__(self, locations: Mapping[str, Location]) -> None:
        self._locations = dict(locations)

    @classmethod
    def from_json(cls, path: Path) -> StaticLocationResolver:
        """Build a resolver from a {"zips": {zip: location}} JSON file.

        A missing file gives an empty table, so every lookup returns None.
        """
        if not path.exists():
            logger.warning("Zip location data not found at %s, all lookups will miss", path)
            return cls({})
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        locations = {
            zip_code: Location.model_validate({"zipCode": zip_code, **entry})
            for zip_code, entry in data.get("zips", {}).items()
        }
        return cls(locations)

    def __len__(self) -> int:
        return len(self._locations)

    def resolve(self, zip_code: str) -> Location | None:
        return self._locations.get(zip_code)


@lru_cache(maxsize=1)
def default_resolver() -> StaticLocationResolver:
    """The bundled resolver, or the one configured via ZIP_DATA_PATH (cached)."""
    path = Path(settings.catalog.zip_data_path) if settings.catalog.zip_data_path else _ZIP_LOCATIONS_PATH
    return StaticLocationResolver.from_json(path)


def lookup_zip_code(zip_code: str) -> Location | None:
    """Resolve a zip code with the default resolver."""
    return default_resolver().resolve(zip_code)
