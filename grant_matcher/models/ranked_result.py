"""Ranking options and ranked output."""

from typing import Optional
from pydantic import BaseModel, Field

from .eligibility_result import EligibilityVerdict
from .opportunity import Opportunity
from .scoring_result import FitScoreResult


class RankingOptions(BaseModel):
    """Caller controls for RankingPipeline.rank."""

    only_eligible: bool = Field(default=False, description="Drop ineligible opportunities")
    exclude_warnings: bool = Field(default=False, description="Drop opportunities with any warning")
    min_confidence: Optional[float] = Field(
        None, ge=0, le=100, description="Confidence floor; applies only with only_eligible"
    )
    page_size: Optional[int] = Field(None, ge=1, description="Truncate output to this many results")
    offset: int = Field(default=0, ge=0, description="Skip this many ranked results first")
    score_ineligible: bool = Field(default=True, description="Fit-score ineligible results too (close matches)")
    max_workers: Optional[int] = Field(None, ge=1, description="Worker threads for per-opportunity evaluation")

    model_config = {"frozen": True}


class RankedResult(BaseModel):
    """An opportunity decorated with its verdict and fit score."""

    opportunity: Opportunity
    verdict: EligibilityVerdict
    fit: Optional[FitScoreResult] = Field(None, description="None when ineligible and not scored")
    position: int = Field(..., ge=0, description="Index in the caller's input list")

    model_config = {"frozen": True}

    @property
    def eligible(self) -> bool:
        return self.verdict.eligible

    @property
    def score(self) -> int:
        return self.fit.score if self.fit else 0
