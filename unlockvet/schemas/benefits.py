"""Pydantic schemas for catalog records.

Benefits are owned by the catalog and are read-only for the engine: every
model here is frozen and collections are tuples. Field names are snake_case
with camelCase aliases so the bundled JSON keeps its original shape.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from unlockvet.models.enums import ActionType, BenefitCategory, BenefitLevel, RequirementType


class CatalogModel(BaseModel):
    """Base for immutable catalog records."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Geographic scope
# ---------------------------------------------------------------------------


class Coverage(CatalogModel):
    """Where a benefit applies.

    A missing or empty dimension means "no restriction at that granularity".
    """

    states: tuple[str, ...] | None = None       # state codes, e.g. "TX"
    counties: tuple[str, ...] | None = None     # county FIPS codes, e.g. "48453"
    cities: tuple[str, ...] | None = None       # "City, ST" keys, e.g. "Austin, TX"
    zip_codes: tuple[str, ...] | None = None    # hyper-local programs only


# ---------------------------------------------------------------------------
# Eligibility
# ---------------------------------------------------------------------------


class RequirementCriteria(CatalogModel):
    """Machine-checkable part of a requirement. All fields optional."""

    min_service_days: int | None = None
    discharge_types: tuple[str, ...] | None = None   # "honorable", "general", ...
    min_disability_rating: int | None = None
    max_income: Decimal | None = None
    min_age: int | None = None
    max_age: int | None = None
    requires_spouse: bool | None = None


class EligibilityRequirement(CatalogModel):
    """A single typed eligibility clause."""

    type: RequirementType
    description: str
    criteria: RequirementCriteria | None = None


class Eligibility(CatalogModel):
    """Who qualifies, in plain language plus ordered requirements."""

    summary: str
    requirements: tuple[EligibilityRequirement, ...] = ()


# ---------------------------------------------------------------------------
# Action and provenance
# ---------------------------------------------------------------------------


class BenefitAction(CatalogModel):
    """How to apply."""

    type: ActionType
    url: str | None = None
    phone: str | None = None
    address: str | None = None
    form_number: str | None = None   # e.g. "VA Form 21-526EZ"
    instructions: str


class BenefitSource(CatalogModel):
    """Official source and when it was last checked."""

    name: str
    url: str
    last_verified: date


class Benefit(CatalogModel):
    """A single catalog entry."""

    id: str
    name: str
    summary: str
    description: str
    category: BenefitCategory
    level: BenefitLevel
    coverage: Coverage = Field(default_factory=Coverage)
    eligibility: Eligibility
    action: BenefitAction
    source: BenefitSource
    tags: tuple[str, ...] = ()
    related_benefits: tuple[str, ...] = ()


class BenefitDetail(CatalogModel):
    """A benefit with its related benefits resolved against the catalog."""

    benefit: Benefit
    related: tuple[Benefit, ...] = ()
