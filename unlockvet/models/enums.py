"""Domain enums used across the catalog schemas and the matching engine.

All enums use the str mixin so they serialize to their plain JSON value and
compare equal to the catalog's string literals.
"""

from __future__ import annotations

from enum import Enum


class BenefitCategory(str, Enum):
    """What kind of help a benefit provides. Drives result grouping."""

    HEALTHCARE = "healthcare"
    DISABILITY = "disability"
    EDUCATION = "education"
    HOUSING = "housing"
    EMPLOYMENT = "employment"
    FINANCIAL = "financial"
    BURIAL = "burial"
    FAMILY = "family"


class BenefitLevel(str, Enum):
    """Who administers a benefit. Federal benefits skip coverage checks."""

    FEDERAL = "federal"
    STATE = "state"
    COUNTY = "county"
    CITY = "city"
    NONPROFIT = "nonprofit"


class ActionType(str, Enum):
    """How a veteran applies for a benefit."""

    ONLINE = "online"
    PHONE = "phone"
    IN_PERSON = "in-person"
    MAIL = "mail"


class RequirementType(str, Enum):
    """Eligibility clause type. Selects the rule that evaluates it."""

    SERVICE = "service"
    DISABILITY = "disability"
    INCOME = "income"
    AGE = "age"
    FAMILY = "family"
    OTHER = "other"


class IncomeLevel(str, Enum):
    """Coarse self-reported income bucket."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Verdict(str, Enum):
    """Three-valued outcome of a single requirement check."""

    MET = "met"
    NOT_MET = "not_met"
    INDETERMINATE = "indeterminate"  # not enough profile data to decide


class EligibilityStatus(str, Enum):
    """Aggregate classification of a benefit match."""

    LIKELY = "likely"
    POSSIBLE = "possible"
    UNLIKELY = "unlikely"
    UNKNOWN = "unknown"
