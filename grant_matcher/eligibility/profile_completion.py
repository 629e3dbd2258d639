"""Profile fields an applicant should complete for reliable verdicts."""

from typing import Any, Iterable

from ..models import ProfileGap
from ..validation import coerce_applicant


def profile_completion_requirements(
    applicant: Any,
    intended_programs: Iterable[str] = (),
) -> list[ProfileGap]:
    """List missing profile information, highest-impact fields first.

    Args:
        applicant: ApplicantProfile or mapping of its fields
        intended_programs: Program kinds the applicant plans to pursue,
            e.g. 'small_business'

    Returns:
        ProfileGap entries in a fixed order (may be empty)
    """

    applicant = coerce_applicant(applicant)
    programs = {p.strip().lower() for p in intended_programs}
    gaps = []

    if not applicant.has_tax_id:
        gaps.append(ProfileGap(
            field="has_tax_id",
            description="Tax ID (EIN or SSN)",
            priority="high",
            reason="Required for all federal funding",
        ))

    if not applicant.has_uei:
        gaps.append(ProfileGap(
            field="has_uei",
            description="Unique Entity ID (UEI)",
            priority="high",
            reason="Required for federal grants and contracts",
        ))

    if not applicant.primary_naics:
        gaps.append(ProfileGap(
            field="primary_naics",
            description="Primary NAICS Code",
            priority="medium",
            reason="Determines size standards and program eligibility",
        ))

    if applicant.annual_revenue is None:
        gaps.append(ProfileGap(
            field="annual_revenue",
            description="Annual Revenue",
            priority="medium",
            reason="Required for size standard determination",
        ))

    if applicant.employee_count is None:
        gaps.append(ProfileGap(
            field="employee_count",
            description="Number of Employees",
            priority="medium",
            reason="Required for size standard determination",
        ))

    if "small_business" in programs and not applicant.certifications.small_business_certified:
        gaps.append(ProfileGap(
            field="certifications.small_business_certified",
            description="Small Business Certification",
            priority="high",
            reason="Required for small business programs",
        ))

    return gaps
