"""Shared Pydantic models - the contract between the engine and its callers."""

from .applicant_profile import (
    ApplicantProfile,
    CertificationFlags,
    DebarmentStatus,
    OrganizationType,
    RegistrationFlags,
)
from .opportunity import CompetitionLevel, FEDERAL_SOURCES, NATIONWIDE, Opportunity
from .project import Project
from .eligibility_result import Blocker, EligibilityCheckResult, EligibilityVerdict, RuleCategory
from .scoring_result import FitScoreResult
from .ranked_result import RankedResult, RankingOptions
from .profile_gap import ProfileGap

__all__ = [
    "ApplicantProfile",
    "CertificationFlags",
    "DebarmentStatus",
    "OrganizationType",
    "RegistrationFlags",
    "CompetitionLevel",
    "FEDERAL_SOURCES",
    "NATIONWIDE",
    "Opportunity",
    "Project",
    "Blocker",
    "EligibilityCheckResult",
    "EligibilityVerdict",
    "RuleCategory",
    "FitScoreResult",
    "RankedResult",
    "RankingOptions",
    "ProfileGap",
]
