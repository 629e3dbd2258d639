"""Tests for the NAICS size standard table."""

import pytest

from grant_matcher.eligibility import size_standards
from grant_matcher.eligibility.size_standards import DEFAULT_STANDARD, EMPLOYEES, REVENUE, describe, lookup


@pytest.mark.parametrize(
    "code,type_,threshold",
    [
        ("541511", REVENUE, 32_500_000),  # exact
        ("518210", REVENUE, 32_500_000),  # 3-digit prefix
        ("238220", REVENUE, 22_000_000),
        ("236115", REVENUE, 41_500_000),
        ("541330", REVENUE, 25_000_000),  # 2-digit prefix
        ("621111", REVENUE, 25_000_000),
        ("311811", EMPLOYEES, 500),
        ("336411", EMPLOYEES, 1500),
    ],
)
def test_lookup_resolution(code, type_, threshold):
    standard = lookup(code)

    assert standard.type == type_
    assert standard.threshold == threshold


@pytest.mark.parametrize("code", [None, "", "   ", "999999", "11"])
def test_unknown_codes_fall_back_to_default(code):
    assert lookup(code) == DEFAULT_STANDARD
    assert DEFAULT_STANDARD.threshold == 8_500_000


def test_exact_code_wins_over_prefix():
    """541511 has its own entry even though '54' maps to $25M."""
    assert lookup("541511").threshold != lookup("541990").threshold


def test_describe():
    assert describe(lookup("541511")) == "$32.5M annual revenue"
    assert describe(lookup("33")) == "1,500 employees"
    assert describe(DEFAULT_STANDARD) == "$8.5M annual revenue"


def test_table_is_read_only():
    assert "541511" in size_standards.list_codes()
    with pytest.raises(TypeError):
        size_standards._STANDARDS["999"] = DEFAULT_STANDARD
