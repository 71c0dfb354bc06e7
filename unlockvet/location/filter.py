"""Geographic filter: which catalog benefits apply at a zip code.

Federal benefits always apply. Any other benefit applies only when every
non-empty coverage dimension contains the location's value. Membership is
exact string equality.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from unlockvet.location.resolver import LocationResolver, default_resolver
from unlockvet.models.enums import BenefitLevel
from unlockvet.schemas.benefits import Benefit
from unlockvet.schemas.matching import Location

logger = logging.getLogger(__name__)


def covers_location(benefit: Benefit, location: Location, zip_code: str) -> bool:
    """Check a single benefit's coverage against a resolved location."""
    if benefit.level == BenefitLevel.FEDERAL:
        return True

    coverage = benefit.coverage

    if coverage.states and location.state_code not in coverage.states:
        return False
    if coverage.counties and location.county_fips not in coverage.counties:
        return False
    if coverage.cities and location.city_key not in coverage.cities:
        return False
    if coverage.zip_codes and zip_code not in coverage.zip_codes:
        return False

    return True


def get_benefits_for_location(
    zip_code: str,
    benefits: Sequence[Benefit],
    resolver: LocationResolver | None = None,
) -> list[Benefit]:
    """Return the benefits that apply at a zip code, in catalog order.

    If the zip code cannot be resolved, only federal benefits are returned:
    geographically scoped benefits are never shown without a known location.
    """
    if resolver is None:
        resolver = default_resolver()
    location = resolver.resolve(zip_code)

    if location is None:
        logger.debug("Zip %s not resolved, returning federal benefits only", zip_code)
        return [b for b in benefits if b.level == BenefitLevel.FEDERAL]

    selected = [b for b in benefits if covers_location(b, location, zip_code)]
    logger.debug(
        "Zip %s resolved to %s: %d of %d benefits in scope",
        zip_code, location.city_key, len(selected), len(benefits),
    )
    return selected
