"""ApplicantProfile - the organization or individual seeking funding."""

import math
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class OrganizationType(str, Enum):
    """Legal type of an applicant organization."""

    NONPROFIT = "nonprofit"
    FOR_PROFIT = "for_profit"
    GOVERNMENT = "government"
    INDIVIDUAL = "individual"


class DebarmentStatus(str, Enum):
    """Federal exclusion status."""

    CLEAR = "clear"
    DEBARRED = "debarred"


class CertificationFlags(BaseModel):
    """Ownership and size certifications held by the applicant."""

    minority_owned: bool = Field(default=False, description="Minority Business Enterprise (MBE)")
    woman_owned: bool = Field(default=False, description="Women-Owned Small Business (WOSB)")
    veteran_owned: bool = Field(default=False, description="Veteran-Owned Small Business (VOSB)")
    hubzone_certified: bool = Field(default=False, description="SBA HUBZone certification")
    small_business_certified: bool = Field(default=False, description="Certified small business")

    model_config = {"frozen": True}


class RegistrationFlags(BaseModel):
    """Federal registrations completed by the applicant."""

    sam_registration: bool = Field(default=False, description="Active SAM.gov registration")
    grants_gov_registration: bool = Field(default=False, description="Grants.gov account authorized")
    cage_code: bool = Field(default=False, description="Commercial and Government Entity code assigned")

    model_config = {"frozen": True}


class ApplicantProfile(BaseModel):
    """Fully-populated applicant record handed to the engine by the profile store.

    Immutable for the duration of an evaluation call.
    """

    organization_type: OrganizationType = Field(..., description="nonprofit, for_profit, government, individual")
    primary_naics: Optional[str] = Field(None, description="Industry classification (NAICS) code")

    # Size
    annual_revenue: Optional[float] = Field(None, description="Annual revenue in USD")
    employee_count: Optional[int] = Field(None, description="Number of employees")

    # Entity identifiers
    has_tax_id: bool = Field(default=False, description="EIN or SSN on file")
    has_uei: bool = Field(default=False, description="Unique Entity ID (UEI) on file")
    tax_exempt_status: bool = Field(default=False, description="501(c)(3) or equivalent")

    certifications: CertificationFlags = Field(default_factory=CertificationFlags)
    registrations: RegistrationFlags = Field(default_factory=RegistrationFlags)
    debarment_status: DebarmentStatus = Field(default=DebarmentStatus.CLEAR)

    # Location
    state: Optional[str] = Field(None, description="Two-letter state code")
    city: Optional[str] = Field(None, description="City name")

    single_audit_completed: bool = Field(default=False, description="Independent (Single) Audit already completed")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "organization_type": "for_profit",
                "primary_naics": "541511",
                "annual_revenue": 2000000.0,
                "employee_count": 40,
                "has_tax_id": True,
                "has_uei": True,
                "certifications": {"woman_owned": True},
                "registrations": {"sam_registration": True},
                "debarment_status": "clear",
                "state": "TX",
                "city": "Austin",
            }
        },
    }

    @field_validator("annual_revenue", "employee_count", "primary_naics", "state", "city", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Profile stores hand over empty strings for unset fields."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("annual_revenue", "employee_count")
    @classmethod
    def finite_non_negative(cls, v):
        """Numeric fields are a finite non-negative number or None."""
        if v is None:
            return v
        if not math.isfinite(v) or v < 0:
            raise ValueError(f"must be a finite non-negative number, got {v}")
        return v
