"""Eligibility assessment: rule evaluators, aggregation and size standards."""

from .aggregator import DEFAULT_WARNING_PENALTY, aggregate, calculate_confidence
from .filter import check_eligibility, evaluate_eligibility
from .profile_completion import profile_completion_requirements
from .rules import EVALUATION_ORDER, EligibilityEvaluator
from .size_standards import SizeStandard, lookup as lookup_size_standard

__all__ = [
    "DEFAULT_WARNING_PENALTY",
    "aggregate",
    "calculate_confidence",
    "check_eligibility",
    "evaluate_eligibility",
    "profile_completion_requirements",
    "EVALUATION_ORDER",
    "EligibilityEvaluator",
    "SizeStandard",
    "lookup_size_standard",
]
