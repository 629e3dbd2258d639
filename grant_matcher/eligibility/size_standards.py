"""SBA size standards by NAICS code.

Static table resolved exact code -> 3-digit prefix -> 2-digit prefix -> default.
Unknown or missing codes fall back to the default standard; lookup never fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

REVENUE = "revenue"
EMPLOYEES = "employees"


@dataclass(frozen=True)
class SizeStandard:
    """Small-business ceiling for an industry.

    Attributes:
        type: 'revenue' (annual USD) or 'employees' (headcount).
        threshold: A business at or above this value is not small.
    """

    type: str
    threshold: float


DEFAULT_STANDARD = SizeStandard(type=REVENUE, threshold=8_500_000)

_STANDARDS: Mapping[str, SizeStandard] = MappingProxyType({
    # Construction
    "236": SizeStandard(type=REVENUE, threshold=41_500_000),
    "237": SizeStandard(type=REVENUE, threshold=41_500_000),
    "238": SizeStandard(type=REVENUE, threshold=22_000_000),
    # Manufacturing
    "31": SizeStandard(type=EMPLOYEES, threshold=500),
    "32": SizeStandard(type=EMPLOYEES, threshold=500),
    "33": SizeStandard(type=EMPLOYEES, threshold=1500),
    # Professional services
    "54": SizeStandard(type=REVENUE, threshold=25_000_000),
    # Healthcare
    "62": SizeStandard(type=REVENUE, threshold=25_000_000),
    # Technology / software
    "518": SizeStandard(type=REVENUE, threshold=32_500_000),
    "541511": SizeStandard(type=REVENUE, threshold=32_500_000),  # Custom software
    "541512": SizeStandard(type=REVENUE, threshold=32_500_000),  # Computer systems design
})


def lookup(naics_code: Optional[str]) -> SizeStandard:
    """Return the size standard for a classification code."""
    code = (naics_code or "").strip()
    if not code:
        return DEFAULT_STANDARD

    if code in _STANDARDS:
        return _STANDARDS[code]

    for prefix in (code[:3], code[:2]):
        if prefix in _STANDARDS:
            return _STANDARDS[prefix]

    return DEFAULT_STANDARD


def describe(standard: SizeStandard) -> str:
    """Human-readable threshold, e.g. '$32.5M annual revenue' or '500 employees'."""
    if standard.type == REVENUE:
        return f"${standard.threshold / 1_000_000:.1f}M annual revenue"
    return f"{standard.threshold:,.0f} employees"


def list_codes() -> list[str]:
    """Return every code with an explicit standard."""
    return list(_STANDARDS.keys())
