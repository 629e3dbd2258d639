"""Eligibility rule evaluators.

One pure function per eligibility dimension, each with the signature
(ApplicantProfile, Opportunity) -> EligibilityCheckResult. EVALUATION_ORDER
fixes the order checks run in, which is also the order blockers, warnings and
requirements are reported in.

Missing optional data never fails a check: it degrades to a warning or a
requirement.
"""

from typing import Callable

from ..models import (
    ApplicantProfile,
    DebarmentStatus,
    EligibilityCheckResult,
    Opportunity,
    OrganizationType,
    RuleCategory,
)
from . import size_standards
from .regions import region_for_state, region_includes

EligibilityEvaluator = Callable[[ApplicantProfile, Opportunity], EligibilityCheckResult]

SMALL_BUSINESS_PROGRAM_TERMS = (
    "sbir",
    "sttr",
    "sba",
    "small business",
    "disadvantaged business",
    "hubzone",
)

CAGE_CODE_TERMS = ("contract", "procurement", "dod", "defense")

# (opportunity flag, applicant certification, display name, short name)
CERTIFICATION_RULES = (
    ("minority_business", "minority_owned", "Minority Business Enterprise (MBE) certification", "MBE"),
    ("woman_owned_business", "woman_owned", "Women-Owned Small Business (WOSB) certification", "WOSB"),
    ("veteran_owned_business", "veteran_owned", "Veteran-Owned Small Business (VOSB) certification", "VOSB"),
)

AUDIT_THRESHOLD = 750_000


def is_small_business_program(opportunity: Opportunity) -> bool:
    """Detect SBIR/STTR/SBA/HUBZone/disadvantaged-business programs from title and description."""
    text = opportunity.search_text
    return any(term in text for term in SMALL_BUSINESS_PROGRAM_TERMS)


def is_hubzone_program(opportunity: Opportunity) -> bool:
    return "hubzone" in opportunity.search_text


def requires_cage_code(opportunity: Opportunity) -> bool:
    """Contract, procurement and defense opportunities need a CAGE code."""
    text = opportunity.search_text
    return any(term in text for term in CAGE_CODE_TERMS)


def check_organization_type(applicant: ApplicantProfile, opportunity: Opportunity) -> EligibilityCheckResult:
    """Fail when the applicant's legal type is not allowed to apply."""

    applicant_type = applicant.organization_type

    if opportunity.small_business_only and applicant_type != OrganizationType.FOR_PROFIT:
        return EligibilityCheckResult(
            category=RuleCategory.ORGANIZATION_TYPE,
            eligible=False,
            reason="This opportunity is restricted to small businesses (allowed: for_profit)",
            requirements=("Must be a for-profit business entity",),
        )

    allowed = opportunity.organization_types
    if allowed and applicant_type not in allowed:
        names = [t.value for t in allowed]
        return EligibilityCheckResult(
            category=RuleCategory.ORGANIZATION_TYPE,
            eligible=False,
            reason=f"This opportunity is restricted to: {', '.join(names)}",
            requirements=(f"Organization must be: {' OR '.join(names)}",),
        )

    return EligibilityCheckResult(
        category=RuleCategory.ORGANIZATION_TYPE,
        eligible=True,
        info=(f"Organization type {applicant_type.value} is eligible",),
    )


def check_entity_eligibility(applicant: ApplicantProfile, opportunity: Opportunity) -> EligibilityCheckResult:
    """Advisory only: legal-entity identifiers expected by federal programs."""

    warnings = []
    requirements = []

    if opportunity.is_federal:
        if not applicant.has_tax_id:
            warnings.append("Federal grants typically require a Tax ID (EIN or SSN)")
            requirements.append(
                "Obtain Tax Identification Number (EIN for organizations, SSN for individuals)"
            )
        if not applicant.has_uei:
            warnings.append("Federal awards require a Unique Entity ID (UEI)")
            requirements.append("Unique Entity ID (UEI) required (register in SAM.gov)")

    if applicant.organization_type == OrganizationType.NONPROFIT and not applicant.tax_exempt_status:
        warnings.append("501(c)(3) status may be required for some federal grants")

    return EligibilityCheckResult(
        category=RuleCategory.ENTITY_ELIGIBILITY,
        eligible=True,
        warnings=tuple(warnings),
        requirements=tuple(requirements),
    )


def check_size_standard(applicant: ApplicantProfile, opportunity: Opportunity) -> EligibilityCheckResult:
    """Compare applicant size to the SBA standard for its industry.

    Only applies to small-business programs. A missing revenue or headcount
    never blocks: it asks for manual verification instead.
    """

    if not opportunity.small_business_only and not is_small_business_program(opportunity):
        return EligibilityCheckResult(
            category=RuleCategory.SIZE_STANDARD,
            eligible=True,
            info=("Size standards do not apply to this opportunity",),
        )

    naics_code = applicant.primary_naics or opportunity.naics_code
    standard = size_standards.lookup(naics_code)
    threshold = size_standards.describe(standard)

    if standard.type == size_standards.REVENUE:
        current = applicant.annual_revenue
        field_label = "annual revenue"
    else:
        current = applicant.employee_count
        field_label = "employee count"

    if current is None:
        return EligibilityCheckResult(
            category=RuleCategory.SIZE_STANDARD,
            eligible=True,
            warnings=(
                f"Unable to verify small business size: {field_label} not provided "
                "- manual verification required",
            ),
            requirements=(f"Verify small business size standard ({threshold}) for NAICS {naics_code or 'default'}",),
        )

    if current >= standard.threshold:
        return EligibilityCheckResult(
            category=RuleCategory.SIZE_STANDARD,
            eligible=False,
            reason=f"Exceeds small business size standard ({standard.type}: {threshold})",
            requirements=(f"Must be below the size standard of {threshold}",),
        )

    return EligibilityCheckResult(
        category=RuleCategory.SIZE_STANDARD,
        eligible=True,
        info=(f"Qualifies as small business under {standard.type} standard ({threshold})",),
    )


def check_certifications(applicant: ApplicantProfile, opportunity: Opportunity) -> EligibilityCheckResult:
    """Fail when a certification the opportunity requires is missing."""

    certs = applicant.certifications
    missing = []
    advantages = []

    for opportunity_flag, applicant_flag, name, short_name in CERTIFICATION_RULES:
        required = getattr(opportunity, opportunity_flag)
        held = getattr(certs, applicant_flag)
        if required and not held:
            missing.append(name)
        elif held:
            advantages.append(f"{short_name} certification provides advantage")

    if is_hubzone_program(opportunity) and not certs.hubzone_certified:
        missing.append("HUBZone certification (if located in qualified area)")

    if missing:
        return EligibilityCheckResult(
            category=RuleCategory.CERTIFICATIONS,
            eligible=False,
            reason=f"Missing required certifications: {', '.join(missing)}",
            requirements=tuple(missing),
            advantages=tuple(advantages),
        )

    return EligibilityCheckResult(
        category=RuleCategory.CERTIFICATIONS,
        eligible=True,
        advantages=tuple(advantages),
    )


def check_registrations(applicant: ApplicantProfile, opportunity: Opportunity) -> EligibilityCheckResult:
    """Advisory only: SAM.gov, Grants.gov and CAGE registrations."""

    registrations = applicant.registrations
    missing = []
    requirements = []

    if opportunity.is_federal:
        if not registrations.sam_registration:
            missing.append("SAM.gov registration")
            requirements.append("Register in System for Award Management (SAM.gov)")
        if not registrations.grants_gov_registration:
            missing.append("Grants.gov registration")
            requirements.append("Create Grants.gov account and get authorized")

    if requires_cage_code(opportunity) and not registrations.cage_code:
        missing.append("CAGE Code")
        requirements.append("Obtain Commercial and Government Entity (CAGE) Code")

    return EligibilityCheckResult(
        category=RuleCategory.REGISTRATIONS,
        eligible=True,
        warnings=(f"Required registrations: {', '.join(missing)}",) if missing else (),
        requirements=tuple(requirements),
    )


def check_geographic(applicant: ApplicantProfile, opportunity: Opportunity) -> EligibilityCheckResult:
    """Match applicant state/city against the opportunity's geography."""

    if not opportunity.geography or opportunity.is_nationwide:
        return EligibilityCheckResult(category=RuleCategory.GEOGRAPHIC, eligible=True)

    state = (applicant.state or "").strip().lower()
    city = (applicant.city or "").strip().lower()
    locations = [loc.strip().lower() for loc in opportunity.geography]

    if state and state in locations:
        return EligibilityCheckResult(
            category=RuleCategory.GEOGRAPHIC,
            eligible=True,
            info=(f"Located in eligible state {applicant.state}",),
        )

    if city and any(city in loc for loc in locations):
        return EligibilityCheckResult(
            category=RuleCategory.GEOGRAPHIC,
            eligible=True,
            info=(f"Located in eligible city {applicant.city}",),
        )

    if any(region_includes(loc, applicant.state) for loc in locations):
        return EligibilityCheckResult(
            category=RuleCategory.GEOGRAPHIC,
            eligible=True,
            info=(f"Located in eligible region {region_for_state(applicant.state)}",),
        )

    allowed = list(opportunity.geography)
    return EligibilityCheckResult(
        category=RuleCategory.GEOGRAPHIC,
        eligible=False,
        reason=f"This opportunity is restricted to: {', '.join(allowed)}",
        requirements=(f"Must be located in: {' OR '.join(allowed)}",),
    )


def check_debarment(applicant: ApplicantProfile, opportunity: Opportunity) -> EligibilityCheckResult:
    """Debarred applicants cannot receive federal funding. Hard blocker."""

    if opportunity.is_federal and applicant.debarment_status == DebarmentStatus.DEBARRED:
        return EligibilityCheckResult(
            category=RuleCategory.DEBARMENT,
            eligible=False,
            reason="Organization is currently debarred from federal funding",
            requirements=("Resolve debarment status",),
        )

    return EligibilityCheckResult(category=RuleCategory.DEBARMENT, eligible=True)


def check_financial_capacity(applicant: ApplicantProfile, opportunity: Opportunity) -> EligibilityCheckResult:
    """Advisory only: award size relative to applicant revenue, and audit thresholds."""

    warnings = []
    requirements = []
    amount_min = opportunity.amount_min

    if amount_min:
        revenue = applicant.annual_revenue
        if revenue is None or amount_min > revenue * 0.5:
            warnings.append(
                f"Minimum award (${amount_min:,.0f}) may require demonstrated capacity"
            )
            requirements.append("Demonstrate financial capacity to manage the award")

        if amount_min > AUDIT_THRESHOLD and not applicant.single_audit_completed:
            requirements.append(
                f"Independent (Single) Audit may be required for awards over ${AUDIT_THRESHOLD:,}"
            )

    return EligibilityCheckResult(
        category=RuleCategory.FINANCIAL_CAPACITY,
        eligible=True,
        warnings=tuple(warnings),
        requirements=tuple(requirements),
    )


EVALUATION_ORDER: tuple[EligibilityEvaluator, ...] = (
    check_organization_type,
    check_entity_eligibility,
    check_size_standard,
    check_certifications,
    check_registrations,
    check_geographic,
    check_debarment,
    check_financial_capacity,
)
