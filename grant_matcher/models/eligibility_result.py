"""Eligibility check results and the aggregated verdict."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, model_validator


class RuleCategory(str, Enum):
    """Eligibility dimensions, declared in evaluation order."""

    ORGANIZATION_TYPE = "OrganizationType"
    ENTITY_ELIGIBILITY = "EntityEligibility"
    SIZE_STANDARD = "SizeStandard"
    CERTIFICATIONS = "Certifications"
    REGISTRATIONS = "Registrations"
    GEOGRAPHIC = "Geographic"
    DEBARMENT = "Debarment"
    FINANCIAL_CAPACITY = "FinancialCapacity"


class EligibilityCheckResult(BaseModel):
    """Outcome of a single eligibility dimension. Never mutated after creation."""

    category: RuleCategory = Field(..., description="Dimension that produced this result")
    eligible: bool = Field(..., description="Whether this dimension passes")
    reason: Optional[str] = Field(None, description="Why the dimension failed")
    warnings: tuple[str, ...] = Field(default=(), description="Soft issues that do not block")
    requirements: tuple[str, ...] = Field(default=(), description="Actionable remediation steps")
    advantages: tuple[str, ...] = Field(default=(), description="Favorable factors")
    info: tuple[str, ...] = Field(default=(), description="Informational notes")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def reason_when_ineligible(self) -> "EligibilityCheckResult":
        if not self.eligible and not self.reason:
            raise ValueError(f"{self.category.value}: reason is required when eligible is False")
        return self


class Blocker(BaseModel):
    """A failing check that prevents overall eligibility."""

    category: RuleCategory
    reason: str

    model_config = {"frozen": True}


class EligibilityVerdict(BaseModel):
    """Aggregate eligibility judgment for one (applicant, opportunity) pair.

    Derived output; the engine never persists it.
    """

    opportunity_id: Optional[str] = Field(None, description="Links to Opportunity.id")
    eligible: bool = Field(..., description="True iff every check is eligible")
    confidence: int = Field(..., ge=0, le=100, description="0-100 confidence in the verdict")
    checks: dict[RuleCategory, EligibilityCheckResult] = Field(
        ..., description="Per-category results in evaluation order"
    )
    warnings: tuple[str, ...] = Field(default=())
    requirements: tuple[str, ...] = Field(default=())
    advantages: tuple[str, ...] = Field(default=())
    blockers: tuple[Blocker, ...] = Field(default=())

    model_config = {"frozen": True}

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)
