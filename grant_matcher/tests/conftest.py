"""Pytest configuration and fixtures."""

import json
from datetime import date
from pathlib import Path

import pytest

from grant_matcher.models import ApplicantProfile, Opportunity, Project

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Fixed reference date for deadline arithmetic
TODAY = date(2026, 1, 15)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def test_opportunities():
    """Load eligibility test cases from fixtures."""
    with open(FIXTURES_DIR / "test_opportunities.json", "r") as f:
        return json.load(f)


@pytest.fixture
def software_applicant():
    """Small woman-owned software company in Austin, TX with every registration."""
    return ApplicantProfile(
        organization_type="for_profit",
        primary_naics="541511",
        annual_revenue=2_000_000,
        employee_count=40,
        has_tax_id=True,
        has_uei=True,
        certifications={"woman_owned": True, "small_business_certified": True},
        registrations={"sam_registration": True, "grants_gov_registration": True, "cage_code": True},
        state="TX",
        city="Austin",
    )


@pytest.fixture
def nonprofit_applicant():
    """Tax-exempt nonprofit in Boston, MA."""
    return ApplicantProfile(
        organization_type="nonprofit",
        annual_revenue=900_000,
        employee_count=12,
        has_tax_id=True,
        has_uei=True,
        tax_exempt_status=True,
        registrations={"sam_registration": True, "grants_gov_registration": True},
        state="MA",
        city="Boston",
    )


@pytest.fixture
def software_project():
    return Project(
        name="Logistics Optimizer",
        project_type="research",
        funding_needed=100_000,
        industry="Software",
        state="TX",
    )


@pytest.fixture
def open_opportunity():
    """Unrestricted, non-federal opportunity that every applicant passes cleanly."""
    return Opportunity(id="OPEN-001", title="Open Community Grant")
