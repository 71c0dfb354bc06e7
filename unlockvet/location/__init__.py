"""Zip code resolution and geographic filtering of catalog benefits."""

from unlockvet.location.filter import covers_location, get_benefits_for_location
from unlockvet.location.resolver import (
    LocationResolver,
    StaticLocationResolver,
    default_resolver,
    lookup_zip_code,
)

__all__ = [
    "covers_location",
    "get_benefits_for_location",
    "LocationResolver",
    "StaticLocationResolver",
    "default_resolver",
    "lookup_zip_code",
]
