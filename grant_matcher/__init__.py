"""Eligibility and fit-scoring engine for funding opportunities.

Two entry points are exposed to host systems:

- check_eligibility(applicant, opportunity) -> EligibilityVerdict
- rank(applicant, project, opportunities, options) -> list[RankedResult]
"""

from .eligibility import check_eligibility, profile_completion_requirements
from .errors import GrantMatcherError, MalformedInputError
from .ranking import rank
from .scorer import score_opportunity

__all__ = [
    "check_eligibility",
    "profile_completion_requirements",
    "rank",
    "score_opportunity",
    "GrantMatcherError",
    "MalformedInputError",
]
