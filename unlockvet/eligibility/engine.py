"""Eligibility engine. Matches a veteran profile against a benefit catalog.

Pure Python orchestrator. No I/O: the catalog is passed in, the zip code is
resolved through an injectable LocationResolver.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from unlockvet.eligibility.scoring import calculate_match
from unlockvet.location.filter import get_benefits_for_location
from unlockvet.location.resolver import LocationResolver
from unlockvet.schemas.benefits import Benefit
from unlockvet.schemas.matching import BenefitMatch, VeteranProfile

logger = logging.getLogger(__name__)


def match_benefits(
    profile: VeteranProfile,
    benefits: Sequence[Benefit],
    resolver: LocationResolver | None = None,
) -> list[BenefitMatch]:
    """Rank the benefits available at the profile's zip code.

    Returns matches sorted by descending score. The sort is stable, so
    equal scores keep their catalog order.
    """
    in_scope = get_benefits_for_location(profile.zip_code, benefits, resolver=resolver)
    matches = [calculate_match(profile, benefit) for benefit in in_scope]
    matches.sort(key=lambda m: m.match_score, reverse=True)

    logger.debug("Matched %d benefits for zip %s", len(matches), profile.zip_code)
    return matches
