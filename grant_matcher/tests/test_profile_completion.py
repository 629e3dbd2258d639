"""Tests for profile completion requirements."""

import pytest

from grant_matcher import profile_completion_requirements
from grant_matcher.errors import MalformedInputError


def test_complete_profile_has_no_gaps(software_applicant):
    assert profile_completion_requirements(software_applicant) == []


def test_bare_profile_lists_gaps_in_order():
    gaps = profile_completion_requirements({"organization_type": "for_profit"})

    assert [g.field for g in gaps] == [
        "has_tax_id",
        "has_uei",
        "primary_naics",
        "annual_revenue",
        "employee_count",
    ]
    assert [g.priority for g in gaps] == ["high", "high", "medium", "medium", "medium"]


def test_small_business_certification_only_when_intended(nonprofit_applicant):
    without = profile_completion_requirements(nonprofit_applicant)
    with_program = profile_completion_requirements(nonprofit_applicant, ["Small_Business"])

    assert "certifications.small_business_certified" not in [g.field for g in without]
    assert with_program[-1].field == "certifications.small_business_certified"
    assert with_program[-1].priority == "high"


def test_certified_small_business_not_asked_again(software_applicant):
    assert profile_completion_requirements(software_applicant, ["small_business"]) == []


def test_zero_revenue_is_not_a_gap():
    gaps = profile_completion_requirements(
        {"organization_type": "individual", "annual_revenue": 0, "employee_count": 0}
    )

    assert "annual_revenue" not in [g.field for g in gaps]
    assert "employee_count" not in [g.field for g in gaps]


def test_missing_applicant_rejected():
    with pytest.raises(MalformedInputError):
        profile_completion_requirements(None)
