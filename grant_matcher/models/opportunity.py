"""Opportunity - normalized funding opportunity evaluated by the engine."""

import math
from datetime import date, datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from .applicant_profile import OrganizationType

NATIONWIDE = "nationwide"

# Funding sources that carry federal registration and debarment rules
FEDERAL_SOURCES = frozenset({"grants_gov", "sam_gov", "sbir_gov", "federal"})


class CompetitionLevel(str, Enum):
    """Competition hint from the upstream classifier."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    UNKNOWN = "unknown"


class Opportunity(BaseModel):
    """Funding opportunity record from the opportunity catalog.

    Immutable input to the engine.
    """

    # Core identifiers
    id: str = Field(..., description="Catalog identifier")
    title: str = Field(default="", description="Opportunity title")
    description: Optional[str] = Field(None, description="Opportunity description/abstract")
    agency: Optional[str] = Field(None, description="Issuing agency or sponsor")

    # Eligibility restrictions
    organization_types: tuple[OrganizationType, ...] = Field(
        default=(), description="Allowed organization types; empty means unrestricted"
    )
    small_business_only: bool = Field(default=False, description="Restricted to small businesses")
    minority_business: bool = Field(default=False, description="Requires MBE certification")
    woman_owned_business: bool = Field(default=False, description="Requires WOSB certification")
    veteran_owned_business: bool = Field(default=False, description="Requires VOSB certification")
    naics_code: Optional[str] = Field(None, description="Industry code used to pick a size standard")
    geography: tuple[str, ...] = Field(default=(), description="Region tokens, or 'nationwide'")

    # Financial
    amount_min: Optional[float] = Field(None, description="Minimum award amount")
    amount_max: Optional[float] = Field(None, description="Maximum award amount")

    # Dates
    deadline: Optional[date] = Field(None, description="Submission deadline; None means rolling")

    # Classification
    source: Optional[str] = Field(None, description="Funding source category: grants_gov, sam_gov, state, private, ...")
    cfda_number: Optional[str] = Field(None, description="Federal assistance listing (program) code")
    competition_level: CompetitionLevel = Field(default=CompetitionLevel.UNKNOWN)
    project_types: tuple[str, ...] = Field(default=(), description="Program-type tags")
    industry_focus: tuple[str, ...] = Field(default=(), description="Industry-focus tags")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "id": "SBIR-24-001",
                "title": "SBIR Phase I: AI for Supply Chains",
                "description": "Small business innovation research for logistics software",
                "agency": "National Science Foundation",
                "organization_types": ["for_profit"],
                "small_business_only": True,
                "naics_code": "541511",
                "geography": ["nationwide"],
                "amount_min": 50000.0,
                "amount_max": 300000.0,
                "deadline": "2026-03-18",
                "source": "grants_gov",
                "competition_level": "medium",
                "project_types": ["research", "technology"],
                "industry_focus": ["software"],
            }
        },
    }

    @field_validator("amount_min", "amount_max", "naics_code", "source", "cfda_number", "description", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("geography", mode="before")
    @classmethod
    def drop_blank_tokens(cls, v):
        """Blank geography entries carry no restriction."""
        if isinstance(v, (list, tuple)):
            return [token for token in v if not (isinstance(token, str) and not token.strip())]
        return v

    @field_validator("competition_level", mode="before")
    @classmethod
    def default_competition(cls, v):
        """Absent classifier output is treated as unknown."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return CompetitionLevel.UNKNOWN
        return v

    @field_validator("deadline", mode="before")
    @classmethod
    def deadline_to_date(cls, v):
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and "T" in v:
            return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("source")
    @classmethod
    def normalize_source(cls, v: Optional[str]) -> Optional[str]:
        """grants.gov, Grants-Gov and grants_gov all normalize to grants_gov."""
        if v is None:
            return v
        return v.strip().lower().replace(".", "_").replace("-", "_")

    @field_validator("amount_min", "amount_max")
    @classmethod
    def finite_non_negative(cls, v):
        if v is None:
            return v
        if not math.isfinite(v) or v < 0:
            raise ValueError(f"must be a finite non-negative number, got {v}")
        return v

    @model_validator(mode="after")
    def check_amount_range(self) -> "Opportunity":
        problem = self.amount_range_error()
        if problem:
            raise ValueError(problem)
        return self

    def amount_range_error(self) -> Optional[str]:
        """Describe an inverted award range, or None when the range is valid."""
        if self.amount_min is not None and self.amount_max is not None and self.amount_min > self.amount_max:
            return f"amount_min ({self.amount_min:,.0f}) exceeds amount_max ({self.amount_max:,.0f})"
        return None

    @property
    def is_federal(self) -> bool:
        """Federal-style: federal funding source or a federal program code is present."""
        return (self.source in FEDERAL_SOURCES) or bool(self.cfda_number)

    @property
    def is_nationwide(self) -> bool:
        return any(token.strip().lower() == NATIONWIDE for token in self.geography)

    @property
    def search_text(self) -> str:
        """Lowercased title + description used by the program heuristics."""
        return f"{self.title or ''} {self.description or ''}".lower()
