"""Caller-side pre-filter predicates for RankingPipeline.

These are convenience factories; the pipeline treats every predicate as an
opaque Callable[[Opportunity], bool] and none of them is part of the
eligibility rule set.
"""

from datetime import date, datetime
from typing import Callable, Iterable, Optional

from ..models import Opportunity

Predicate = Callable[[Opportunity], bool]

ROLLING = "rolling"
FIXED = "fixed"


def amount_range(minimum: Optional[float] = None, maximum: Optional[float] = None) -> Predicate:
    """Keep opportunities whose award range overlaps [minimum, maximum].

    Opportunities that state no amounts at all are kept.
    """

    def _predicate(opportunity: Opportunity) -> bool:
        low = opportunity.amount_min
        high = opportunity.amount_max
        if low is None and high is None:
            return True
        if maximum is not None and low is not None and low > maximum:
            return False
        if minimum is not None and high is not None and high < minimum:
            return False
        return True

    return _predicate


def deadline_type(kind: str) -> Predicate:
    """Keep 'rolling' (no deadline) or 'fixed' (dated) opportunities."""

    kind = kind.strip().lower()
    if kind not in (ROLLING, FIXED):
        raise ValueError(f"deadline type must be '{ROLLING}' or '{FIXED}', got {kind!r}")

    def _predicate(opportunity: Opportunity) -> bool:
        if kind == ROLLING:
            return opportunity.deadline is None
        return opportunity.deadline is not None

    return _predicate


def program_tags(tags: Iterable[str]) -> Predicate:
    """Keep opportunities sharing at least one program-type tag (case-insensitive)."""

    wanted = {t.strip().lower() for t in tags if t and t.strip()}

    def _predicate(opportunity: Opportunity) -> bool:
        return any(tag.strip().lower() in wanted for tag in opportunity.project_types)

    return _predicate


def not_expired(today: date) -> Predicate:
    """Keep rolling opportunities and those whose deadline is today or later."""

    if isinstance(today, datetime):
        today = today.date()

    def _predicate(opportunity: Opportunity) -> bool:
        return opportunity.deadline is None or opportunity.deadline >= today

    return _predicate
