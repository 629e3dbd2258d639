"""Tests for confidence arithmetic and verdict aggregation."""

import pytest

from grant_matcher.eligibility.aggregator import aggregate, calculate_confidence
from grant_matcher.errors import MalformedInputError
from grant_matcher.models import EligibilityCheckResult, RuleCategory

CATEGORIES = list(RuleCategory)


def _results(failing=(), warned=()):
    """One result per category; indexes in `failing` fail, indexes in `warned` carry a warning."""
    results = []
    for index, category in enumerate(CATEGORIES):
        eligible = index not in failing
        results.append(
            EligibilityCheckResult(
                category=category,
                eligible=eligible,
                reason=None if eligible else f"{category.value} failed",
                warnings=(f"{category.value} warning",) if index in warned else (),
                requirements=(f"{category.value} requirement",) if not eligible else (),
            )
        )
    return results


@pytest.mark.parametrize(
    "failing,warned,expected",
    [
        ((), (), 100),
        ((), (1,), 90),
        ((), (1, 4, 7), 90),  # flat penalty, not per warning
        ((0,), (), 88),  # 87.5 rounds half up
        ((0, 5), (), 75),
        ((0, 1, 2), (), 63),  # 62.5 rounds half up
        ((0, 1, 2), (4,), 53),
        (tuple(range(8)), (1,), 0),  # floored at zero
    ],
)
def test_calculate_confidence(failing, warned, expected):
    assert calculate_confidence(_results(failing, warned)) == expected


def test_custom_warning_penalty():
    assert calculate_confidence(_results(warned=(2,)), warning_penalty=25) == 75
    assert calculate_confidence(_results(warned=(2,)), warning_penalty=0) == 100


def test_aggregate_eligible_only_when_every_check_passes():
    assert aggregate(_results()).eligible is True
    assert aggregate(_results(failing=(6,))).eligible is False


def test_blockers_keep_evaluation_order():
    verdict = aggregate(_results(failing=(5, 0, 3)))

    assert [b.category for b in verdict.blockers] == [
        RuleCategory.ORGANIZATION_TYPE,
        RuleCategory.CERTIFICATIONS,
        RuleCategory.GEOGRAPHIC,
    ]
    assert verdict.blockers[0].reason == "OrganizationType failed"


def test_warnings_and_requirements_flattened_in_order():
    verdict = aggregate(_results(failing=(3,), warned=(7, 1)))

    assert verdict.warnings == ("EntityEligibility warning", "FinancialCapacity warning")
    assert verdict.requirements == ("Certifications requirement",)
    assert verdict.has_warnings is True


def test_opportunity_id_carried_through():
    assert aggregate(_results(), opportunity_id="OPP-9").opportunity_id == "OPP-9"


def test_empty_results_rejected():
    with pytest.raises(MalformedInputError):
        aggregate([])


def test_duplicate_category_rejected():
    results = _results()
    results.append(results[0])

    with pytest.raises(MalformedInputError):
        aggregate(results)


def test_ineligible_result_requires_reason():
    with pytest.raises(ValueError):
        EligibilityCheckResult(category=RuleCategory.DEBARMENT, eligible=False)
