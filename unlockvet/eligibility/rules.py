"""Per-requirement eligibility rules.

Each rule takes a VeteranProfile and a requirement's structured criteria and
returns a RequirementOutcome. Rules are evaluated as a ladder: the first
condition that applies decides the outcome, and anything the rule cannot
decide is INDETERMINATE. Missing profile data is never read as False or 0.
"""

from __future__ import annotations

from collections.abc import Callable

from unlockvet.models.enums import RequirementType, Verdict
from unlockvet.schemas.benefits import EligibilityRequirement, RequirementCriteria
from unlockvet.schemas.matching import RequirementOutcome, VeteranProfile

DAYS_PER_SERVICE_YEAR = 365  # approximation, not calendar-accurate

MET = RequirementOutcome(verdict=Verdict.MET)
NOT_MET = RequirementOutcome(verdict=Verdict.NOT_MET)
INDETERMINATE = RequirementOutcome(verdict=Verdict.INDETERMINATE)


def _decided(met: bool) -> RequirementOutcome:
    return MET if met else NOT_MET


# ── Disability ───────────────────────────────────────────────────────────


def check_disability(profile: VeteranProfile, criteria: RequirementCriteria) -> RequirementOutcome:
    """Minimum VA disability rating."""
    if profile.disability_rating is None:
        return INDETERMINATE
    if criteria.min_disability_rating is not None:
        return _decided(profile.disability_rating >= criteria.min_disability_rating)
    return INDETERMINATE


# ── Service ──────────────────────────────────────────────────────────────


def check_service(profile: VeteranProfile, criteria: RequirementCriteria) -> RequirementOutcome:
    """Discharge type, then minimum service length. An empty discharge status is unknown."""
    if criteria.discharge_types is not None and profile.discharge_status:
        return _decided(profile.discharge_status in criteria.discharge_types)
    if criteria.min_service_days is not None and profile.years_of_service is not None:
        service_days = profile.years_of_service * DAYS_PER_SERVICE_YEAR
        return _decided(service_days >= criteria.min_service_days)
    return INDETERMINATE


# ── Income ───────────────────────────────────────────────────────────────


def check_income(profile: VeteranProfile, criteria: RequirementCriteria) -> RequirementOutcome:
    """Income limits.

    There is no defined mapping from the coarse income_level bucket to a
    max_income threshold, so income requirements are never decided here.
    """
    return INDETERMINATE


# ── Family ───────────────────────────────────────────────────────────────


def check_family(profile: VeteranProfile, criteria: RequirementCriteria) -> RequirementOutcome:
    """Spouse requirement."""
    if criteria.requires_spouse:
        if profile.has_spouse is None:
            return INDETERMINATE
        return _decided(profile.has_spouse is True)
    return INDETERMINATE


# ── Rule registry ────────────────────────────────────────────────────────

# Requirement types without an entry (age, other) are always indeterminate.
RULE_CHECKS: dict[RequirementType, Callable[[VeteranProfile, RequirementCriteria], RequirementOutcome]] = {
    RequirementType.DISABILITY: check_disability,
    RequirementType.SERVICE: check_service,
    RequirementType.INCOME: check_income,
    RequirementType.FAMILY: check_family,
}


def check_requirement(profile: VeteranProfile, requirement: EligibilityRequirement) -> RequirementOutcome:
    """Decide whether a profile meets one requirement.

    A requirement without structured criteria can never be verified
    automatically.
    """
    if requirement.criteria is None:
        return INDETERMINATE
    check_fn = RULE_CHECKS.get(requirement.type)
    if check_fn is None:
        return INDETERMINATE
    return check_fn(profile, requirement.criteria)
