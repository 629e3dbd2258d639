"""Project - the applicant's current funding intent."""

import math
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Project(BaseModel):
    """What the applicant wants funded right now. Drives fit scoring only."""

    name: Optional[str] = Field(None, description="Project name")
    project_type: Optional[str] = Field(None, description="Declared project type, e.g. research, infrastructure")
    funding_needed: Optional[float] = Field(None, description="Funding needed in USD")
    industry: Optional[str] = Field(None, description="Declared industry")
    state: Optional[str] = Field(None, description="Two-letter state code where the work happens")

    model_config = {"frozen": True}

    @field_validator("funding_needed", "project_type", "industry", "state", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("funding_needed")
    @classmethod
    def finite_non_negative(cls, v):
        if v is None:
            return v
        if not math.isfinite(v) or v < 0:
            raise ValueError(f"must be a finite non-negative number, got {v}")
        return v
