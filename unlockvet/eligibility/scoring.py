"""Match scorer. Aggregates requirement outcomes into a score and status.

Pure Python, deterministic.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from unlockvet.eligibility.rules import check_requirement
from unlockvet.models.enums import EligibilityStatus, Verdict
from unlockvet.schemas.benefits import Benefit
from unlockvet.schemas.matching import BenefitMatch, VeteranProfile

NO_REQUIREMENTS_SCORE = 50
LIKELY_THRESHOLD = 80
POSSIBLE_THRESHOLD = 50


def score_from_counts(met_count: int, total: int) -> int:
    """Percentage of requirements met, rounded half-up. 50 when there are none."""
    if total == 0:
        return NO_REQUIREMENTS_SCORE
    ratio = Decimal(met_count * 100) / Decimal(total)
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def status_for(score: int, missing_count: int, total: int) -> EligibilityStatus:
    """Classify a match.

    "Everything unresolved" wins over the numeric thresholds. With zero
    requirements 0 == 0, so a requirement-less benefit is UNKNOWN even though
    it scores 50.
    """
    if missing_count == total:
        return EligibilityStatus.UNKNOWN
    if score >= LIKELY_THRESHOLD:
        return EligibilityStatus.LIKELY
    if score >= POSSIBLE_THRESHOLD:
        return EligibilityStatus.POSSIBLE
    return EligibilityStatus.UNLIKELY


def calculate_match(profile: VeteranProfile, benefit: Benefit) -> BenefitMatch:
    """Score a profile against every requirement of one benefit.

    Met requirements go to matched_requirements, indeterminate ones to
    missing_info. Requirements determined not met count toward the total
    but appear in neither list.
    """
    requirements = benefit.eligibility.requirements
    matched: list[str] = []
    missing: list[str] = []

    for req in requirements:
        outcome = check_requirement(profile, req)
        if outcome.verdict == Verdict.MET:
            matched.append(req.description)
        elif outcome.verdict == Verdict.INDETERMINATE:
            missing.append(req.description)

    total = len(requirements)
    score = score_from_counts(len(matched), total)

    return BenefitMatch(
        benefit=benefit,
        match_score=score,
        eligibility_status=status_for(score, len(missing), total),
        matched_requirements=tuple(matched),
        missing_info=tuple(missing),
    )
