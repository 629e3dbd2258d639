"""Eligibility entry point for (applicant, opportunity) pairs.

Runs every rule evaluator in EVALUATION_ORDER against validated inputs and
aggregates the results. Either a complete verdict is returned or
MalformedInputError is raised for the whole call.
"""

import logging
from typing import Any, Sequence

from ..models import ApplicantProfile, EligibilityVerdict, Opportunity
from ..validation import coerce_applicant, coerce_opportunity
from .aggregator import DEFAULT_WARNING_PENALTY, aggregate
from .rules import EVALUATION_ORDER, EligibilityEvaluator

logger = logging.getLogger(__name__)


def check_eligibility(
    applicant: Any,
    opportunity: Any,
    *,
    warning_penalty: int = DEFAULT_WARNING_PENALTY,
) -> EligibilityVerdict:
    """Assess whether an applicant may apply to an opportunity.

    Args:
        applicant: ApplicantProfile or mapping of its fields
        opportunity: Opportunity or mapping of its fields
        warning_penalty: Confidence points deducted when any check warns

    Returns:
        EligibilityVerdict with per-category checks, blockers and remediation

    Raises:
        MalformedInputError: If either input is missing or invalid
    """

    applicant = coerce_applicant(applicant)
    opportunity = coerce_opportunity(opportunity)
    return evaluate_eligibility(applicant, opportunity, warning_penalty=warning_penalty)


def evaluate_eligibility(
    applicant: ApplicantProfile,
    opportunity: Opportunity,
    *,
    evaluators: Sequence[EligibilityEvaluator] = EVALUATION_ORDER,
    warning_penalty: int = DEFAULT_WARNING_PENALTY,
) -> EligibilityVerdict:
    """Run evaluators over already-validated models."""

    results = []
    for evaluate in evaluators:
        result = evaluate(applicant, opportunity)
        logger.debug(
            "check_complete opportunity=%s category=%s eligible=%s warnings=%d",
            opportunity.id,
            result.category.value,
            result.eligible,
            len(result.warnings),
        )
        results.append(result)

    verdict = aggregate(results, warning_penalty=warning_penalty, opportunity_id=opportunity.id)

    logger.debug(
        "eligibility_checked opportunity=%s eligible=%s confidence=%d blockers=%d",
        opportunity.id,
        verdict.eligible,
        verdict.confidence,
        len(verdict.blockers),
    )
    return verdict
