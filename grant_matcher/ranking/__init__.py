"""Ranking of opportunities by eligibility and fit."""

from .pipeline import rank
from .predicates import Predicate, amount_range, deadline_type, not_expired, program_tags

__all__ = [
    "rank",
    "Predicate",
    "amount_range",
    "deadline_type",
    "not_expired",
    "program_tags",
]
