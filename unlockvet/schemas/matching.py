"""Pydantic schemas for matching inputs and outputs.

A profile field left as None means "unknown", never zero or False.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from unlockvet.models.enums import EligibilityStatus, IncomeLevel, Verdict
from unlockvet.schemas.benefits import Benefit


class Location(BaseModel):
    """A zip code resolved to its city, county and state."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    zip_code: str
    city: str
    county: str                # e.g. "Travis County"
    county_fips: str           # e.g. "48453"
    state: str                 # e.g. "Texas"
    state_code: str            # e.g. "TX"

    @property
    def city_key(self) -> str:
        """Key used by Coverage.cities, e.g. "Austin, TX"."""
        return f"{self.city}, {self.state_code}"


class VeteranProfile(BaseModel):
    """Self-reported facts about a veteran. Only zip_code is required."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    # Location
    zip_code: str
    state: str | None = None
    county: str | None = None

    # Service
    service_eras: tuple[str, ...] | None = None    # "vietnam", "gulf", "post-911", ...
    branch_of_service: str | None = None
    discharge_status: str | None = None
    years_of_service: float | None = Field(default=None, ge=0)

    # Current situation
    disability_rating: float | None = Field(default=None, ge=0, le=100)
    income_level: IncomeLevel | None = None

    # Family
    has_spouse: bool | None = None
    has_dependents: bool | None = None
    is_survivor: bool | None = None    # spouse/child of a deceased veteran


class RequirementOutcome(BaseModel):
    """Result of checking one requirement against a profile."""

    model_config = ConfigDict(frozen=True)

    verdict: Verdict

    @property
    def met(self) -> bool | None:
        """True/False when decided, None when indeterminate."""
        if self.verdict == Verdict.INDETERMINATE:
            return None
        return self.verdict == Verdict.MET

    @property
    def needs_info(self) -> bool:
        return self.verdict == Verdict.INDETERMINATE


class BenefitMatch(BaseModel):
    """How well a profile matches one benefit. Regenerated per request."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    benefit: Benefit
    match_score: int = Field(ge=0, le=100)
    eligibility_status: EligibilityStatus
    matched_requirements: tuple[str, ...] = ()
    missing_info: tuple[str, ...] = ()
