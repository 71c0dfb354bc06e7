"""Eligibility engine: rule-based matching of veteran profiles to benefits."""

from unlockvet.eligibility.engine import match_benefits
from unlockvet.eligibility.grouping import group_benefits_by_category
from unlockvet.eligibility.rules import check_requirement
from unlockvet.eligibility.scoring import calculate_match
from unlockvet.schemas.matching import BenefitMatch, RequirementOutcome, VeteranProfile

__all__ = [
    "match_benefits",
    "group_benefits_by_category",
    "check_requirement",
    "calculate_match",
    "BenefitMatch",
    "RequirementOutcome",
    "VeteranProfile",
]
