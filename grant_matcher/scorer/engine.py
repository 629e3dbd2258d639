"""Rule-based fit scoring for (applicant, project, opportunity) triples.

Seven additive signals, each capped before summing; the sum is clamped to
0-100. The score is a relevance heuristic computed independently of the
eligibility verdict and never disqualifies an opportunity.
"""

from datetime import date, datetime, timezone
from typing import Any, Optional, Tuple

from ..models import (
    ApplicantProfile,
    CompetitionLevel,
    FitScoreResult,
    Opportunity,
    Project,
)
from ..validation import coerce_applicant, coerce_opportunity, coerce_project
from .weights import DEFAULT_WEIGHTS, FitWeights

# (points, reason); reason is None when the signal contributed nothing
Signal = Tuple[int, Optional[str]]


def score_opportunity(
    applicant: Any,
    project: Any,
    opportunity: Any,
    weights: FitWeights = DEFAULT_WEIGHTS,
    today: Optional[date] = None,
) -> FitScoreResult:
    """Score how well an opportunity suits the applicant's project.

    Signals:
    1. Program type: project type among the opportunity's program tags
    2. Certifications: shared minority/woman/veteran flags, small-business match
    3. Funding amount: project need against the award range
    4. Deadline: urgency bands, flat points for rolling deadlines
    5. Geography: nationwide or the project's state
    6. Industry: project industry among the opportunity's focus tags
    7. Competition: low and medium competition earn points

    Args:
        applicant: ApplicantProfile or mapping
        project: Project or mapping
        opportunity: Opportunity or mapping
        weights: Point configuration
        today: Reference date for deadline urgency (defaults to today, UTC)

    Returns:
        FitScoreResult with per-signal breakdown
    """

    applicant = coerce_applicant(applicant)
    project = coerce_project(project)
    opportunity = coerce_opportunity(opportunity)
    return compute_fit(applicant, project, opportunity, weights=weights, today=today)


def compute_fit(
    applicant: ApplicantProfile,
    project: Project,
    opportunity: Opportunity,
    weights: FitWeights = DEFAULT_WEIGHTS,
    today: Optional[date] = None,
) -> FitScoreResult:
    """Score already-validated models."""

    if today is None:
        today = datetime.now(timezone.utc).date()
    elif isinstance(today, datetime):
        today = today.date()

    days_until_deadline = (opportunity.deadline - today).days if opportunity.deadline else None

    signals = {
        "program_type": _score_program_type(project, opportunity, weights),
        "certifications": _score_certifications(applicant, opportunity, weights),
        "funding_amount": _score_funding_amount(project, opportunity, weights),
        "deadline": _score_deadline(days_until_deadline, weights),
        "geography": _score_geography(project, opportunity, weights),
        "industry": _score_industry(project, opportunity, weights),
        "competition": _score_competition(opportunity, weights),
    }

    breakdown = {name: points for name, (points, _) in signals.items()}
    reasons = tuple(reason for _, reason in signals.values() if reason)
    score = max(0, min(100, sum(breakdown.values())))

    return FitScoreResult(
        opportunity_id=opportunity.id,
        score=score,
        breakdown=breakdown,
        reasons=reasons,
        recommendation=_get_recommendation(score, days_until_deadline),
        days_until_deadline=days_until_deadline,
        scoring_weights_version=weights.version,
    )


def _normalized(values) -> set:
    return {v.strip().lower() for v in values if v and v.strip()}


def _score_program_type(project: Project, opportunity: Opportunity, weights: FitWeights) -> Signal:
    if project.project_type and project.project_type.strip().lower() in _normalized(opportunity.project_types):
        return weights.program_type_match, f"Program type matches {project.project_type}"
    return 0, None


def _score_certifications(applicant: ApplicantProfile, opportunity: Opportunity, weights: FitWeights) -> Signal:
    certs = applicant.certifications
    points = 0
    matched = []

    if opportunity.minority_business and certs.minority_owned:
        points += weights.certification_match
        matched.append("minority-owned")
    if opportunity.woman_owned_business and certs.woman_owned:
        points += weights.certification_match
        matched.append("woman-owned")
    if opportunity.veteran_owned_business and certs.veteran_owned:
        points += weights.certification_match
        matched.append("veteran-owned")
    if opportunity.small_business_only and certs.small_business_certified:
        points += weights.small_business_match
        matched.append("small business")

    if not matched:
        return 0, None
    return min(points, weights.certification_cap), f"Certification alignment: {', '.join(matched)}"


def _score_funding_amount(project: Project, opportunity: Opportunity, weights: FitWeights) -> Signal:
    need = project.funding_needed
    amount_min = opportunity.amount_min
    amount_max = opportunity.amount_max

    if need is None:
        return 0, None

    if amount_min is not None and amount_max is not None and amount_min <= need <= amount_max:
        return weights.funding_perfect_fit, f"Perfect fit: ${need:,.0f} within award range"
    if amount_max is not None and need <= amount_max:
        return weights.funding_covers_need, f"Award ceiling covers ${need:,.0f} need"
    if amount_min is not None and need >= amount_min:
        return weights.funding_partial, f"Partial funding possible for ${need:,.0f} need"
    return 0, None


def _score_deadline(days_until_deadline: Optional[int], weights: FitWeights) -> Signal:
    if days_until_deadline is None:
        return weights.deadline_rolling, "Rolling deadline"

    if days_until_deadline <= 0:
        return 0, None
    if days_until_deadline <= 14:
        return weights.deadline_within_14_days, f"Deadline in {days_until_deadline} days"
    if days_until_deadline <= 30:
        return weights.deadline_within_30_days, f"Deadline in {days_until_deadline} days"
    if days_until_deadline <= 90:
        return weights.deadline_within_90_days, f"Deadline in {days_until_deadline} days"
    return weights.deadline_beyond_90_days, f"Deadline in {days_until_deadline} days"


def _score_geography(project: Project, opportunity: Opportunity, weights: FitWeights) -> Signal:
    if opportunity.is_nationwide:
        return weights.geography_match, "Available nationwide"
    if project.state and project.state.strip().lower() in _normalized(opportunity.geography):
        return weights.geography_match, f"Available in {project.state}"
    return 0, None


def _score_industry(project: Project, opportunity: Opportunity, weights: FitWeights) -> Signal:
    if project.industry and project.industry.strip().lower() in _normalized(opportunity.industry_focus):
        return weights.industry_match, f"Industry focus includes {project.industry}"
    return 0, None


def _score_competition(opportunity: Opportunity, weights: FitWeights) -> Signal:
    if opportunity.competition_level == CompetitionLevel.LOW:
        return weights.competition_low, "Low competition"
    if opportunity.competition_level == CompetitionLevel.MEDIUM:
        return weights.competition_medium, "Medium competition"
    return 0, None


def _get_recommendation(score: int, days_until_deadline: Optional[int]) -> str:
    """Map a fit score and deadline proximity to an action label.

    Thresholds:
    - 80-100: HIGHLY_RECOMMENDED (APPLY_IMMEDIATELY if due within 7 days)
    - 60-79: GOOD_MATCH (CONSIDER_URGENT if due within 14 days)
    - 40-59: MODERATE_FIT
    - 0-39: LOW_PRIORITY
    """

    due_soon = days_until_deadline is not None and days_until_deadline > 0

    if score >= 80:
        if due_soon and days_until_deadline <= 7:
            return "APPLY_IMMEDIATELY"
        return "HIGHLY_RECOMMENDED"
    elif score >= 60:
        if due_soon and days_until_deadline <= 14:
            return "CONSIDER_URGENT"
        return "GOOD_MATCH"
    elif score >= 40:
        return "MODERATE_FIT"
    else:
        return "LOW_PRIORITY"
