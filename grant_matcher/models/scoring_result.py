"""FitScoreResult - relevance score for an (applicant-project, opportunity) pair."""

from typing import Optional
from pydantic import BaseModel, Field


class FitScoreResult(BaseModel):
    """Additive 0-100 suitability score with its contributing factors.

    Independent of eligibility: never disqualifies.
    """

    opportunity_id: Optional[str] = Field(None, description="Links to Opportunity.id")
    score: int = Field(..., ge=0, le=100, description="Clamped sum of signal points")
    breakdown: dict[str, int] = Field(..., description="Signal name -> capped points, in scoring order")
    reasons: tuple[str, ...] = Field(default=(), description="Human-readable contributing factors")
    recommendation: str = Field(..., description="APPLY_IMMEDIATELY, HIGHLY_RECOMMENDED, ... LOW_PRIORITY")
    days_until_deadline: Optional[int] = Field(None, description="Whole days to deadline; None for rolling")
    scoring_weights_version: str = Field(..., description="FitWeights.version used")

    model_config = {"frozen": True}
