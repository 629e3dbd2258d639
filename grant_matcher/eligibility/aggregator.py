"""Combine per-category check results into one eligibility verdict."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from ..errors import MalformedInputError
from ..models import Blocker, EligibilityCheckResult, EligibilityVerdict

# Flat deduction when any check carries warnings, regardless of how many.
# Callers' confidence thresholds are calibrated against this value.
DEFAULT_WARNING_PENALTY = 10


def calculate_confidence(
    results: Sequence[EligibilityCheckResult],
    warning_penalty: int = DEFAULT_WARNING_PENALTY,
) -> int:
    """Percentage of passing checks, rounded half-up, minus the warning penalty, floored at 0."""
    total = len(results)
    passed = sum(1 for result in results if result.eligible)

    confidence = (Decimal(100 * passed) / Decimal(total)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)

    if any(result.warnings for result in results):
        confidence -= warning_penalty

    return max(0, min(100, int(confidence)))


def aggregate(
    results: Sequence[EligibilityCheckResult],
    warning_penalty: int = DEFAULT_WARNING_PENALTY,
    opportunity_id: Optional[str] = None,
) -> EligibilityVerdict:
    """Build an EligibilityVerdict from check results given in evaluation order.

    Blockers, warnings, requirements and advantages keep that order; nothing
    is re-sorted by severity.

    Raises:
        MalformedInputError: If no results are given or a category repeats.
    """

    if not results:
        raise MalformedInputError("Cannot aggregate an empty list of eligibility checks")

    checks = {}
    for result in results:
        if result.category in checks:
            raise MalformedInputError(f"Duplicate eligibility check for {result.category.value}")
        checks[result.category] = result

    return EligibilityVerdict(
        opportunity_id=opportunity_id,
        eligible=all(result.eligible for result in results),
        confidence=calculate_confidence(results, warning_penalty),
        checks=checks,
        warnings=tuple(w for result in results for w in result.warnings),
        requirements=tuple(r for result in results for r in result.requirements),
        advantages=tuple(a for result in results for a in result.advantages),
        blockers=tuple(
            Blocker(category=result.category, reason=result.reason)
            for result in results
            if not result.eligible
        ),
    )
