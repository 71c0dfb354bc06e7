"""Group ranked matches by benefit category for display."""

from __future__ import annotations

from collections.abc import Iterable

from unlockvet.schemas.matching import BenefitMatch


def group_benefits_by_category(matches: Iterable[BenefitMatch]) -> dict[str, list[BenefitMatch]]:
    """Partition matches by category.

    Categories appear in first-seen order and each group keeps the input
    order of its matches.
    """
    groups: dict[str, list[BenefitMatch]] = {}
    for match in matches:
        groups.setdefault(match.benefit.category.value, []).append(match)
    return groups
