"""ProfileGap - a profile field the applicant should complete."""

from pydantic import BaseModel, Field


class ProfileGap(BaseModel):
    """Missing profile information that weakens eligibility verdicts."""

    field: str = Field(..., description="ApplicantProfile attribute name")
    description: str = Field(..., description="What to provide")
    priority: str = Field(..., description="high or medium")
    reason: str = Field(..., description="Why it matters")

    model_config = {"frozen": True}
