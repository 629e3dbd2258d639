"""Ranking pipeline: pre-filter, eligibility, filtering, fit scoring, stable sort.

Per-opportunity work (eligibility through scoring) is independent and may fan
out over a thread pool. Results are collected in input order before the
final stable sort, so ties resolve to input order however the workers finish.
"""

from __future__ import annotations

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime, timezone
from functools import partial
from typing import Any, Iterable, Optional, Sequence

from ..eligibility.aggregator import DEFAULT_WARNING_PENALTY
from ..eligibility.filter import evaluate_eligibility
from ..errors import MalformedInputError
from ..models import ApplicantProfile, Opportunity, Project, RankedResult, RankingOptions
from ..scorer.engine import compute_fit
from ..scorer.weights import DEFAULT_WEIGHTS, FitWeights
from ..validation import coerce_applicant, coerce_opportunity, coerce_options, coerce_project
from .predicates import Predicate

logger = logging.getLogger(__name__)

DROPPED_INELIGIBLE = "ineligible"
DROPPED_WARNINGS = "warnings"
DROPPED_CONFIDENCE = "low_confidence"


@dataclass(frozen=True)
class _Evaluation:
    """Outcome for one opportunity: a ranked result, or the reason it was dropped."""

    result: Optional[RankedResult]
    dropped: Optional[str] = None


def rank(
    applicant: Any,
    project: Any,
    opportunities: Iterable[Any],
    options: Optional[Any] = None,
    *,
    predicates: Sequence[Predicate] = (),
    today: Optional[date] = None,
    weights: Optional[FitWeights] = None,
    warning_penalty: int = DEFAULT_WARNING_PENALTY,
) -> list[RankedResult]:
    """Rank opportunities for an applicant's project.

    Steps, in order:
    1. Drop opportunities rejected by any caller predicate
    2. Evaluate eligibility
    3. only_eligible: drop ineligible
    4. exclude_warnings: drop any with warnings
    5. min_confidence: drop below threshold (only together with only_eligible)
    6. Fit-score survivors
    7. Stable sort: eligible first, then descending score, ties in input order
    8. Slice by offset / page_size

    Args:
        applicant: ApplicantProfile or mapping
        project: Project or mapping
        opportunities: Opportunity records or mappings
        options: RankingOptions or mapping (defaults apply when None)
        predicates: Opaque caller filters applied before evaluation
        today: Reference date for deadline urgency (defaults to today, UTC)
        weights: Fit-score point configuration
        warning_penalty: Confidence points deducted when any check warns

    Returns:
        Ranked results

    Raises:
        MalformedInputError: If any input is missing or invalid; nothing is
            evaluated in that case
    """

    applicant = coerce_applicant(applicant)
    project = coerce_project(project)
    options = coerce_options(options)
    if opportunities is None:
        raise MalformedInputError("opportunities is required")
    candidates = [coerce_opportunity(opportunity) for opportunity in opportunities]

    if today is None:
        today = datetime.now(timezone.utc).date()
    elif isinstance(today, datetime):
        today = today.date()
    weights = weights or DEFAULT_WEIGHTS

    survivors = [
        (position, opportunity)
        for position, opportunity in enumerate(candidates)
        if all(predicate(opportunity) for predicate in predicates)
    ]

    evaluate = partial(
        _evaluate_one,
        applicant,
        project,
        options=options,
        today=today,
        weights=weights,
        warning_penalty=warning_penalty,
    )

    workers = options.max_workers or 1
    if workers > 1 and len(survivors) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # map() yields in submission order regardless of completion order
            evaluations = list(pool.map(evaluate, survivors))
    else:
        evaluations = [evaluate(item) for item in survivors]

    kept = [e.result for e in evaluations if e.result is not None]
    ranked = sorted(kept, key=_sort_key)

    start = options.offset
    end = start + options.page_size if options.page_size else None
    page = ranked[start:end]

    drops = Counter(e.dropped for e in evaluations if e.dropped)
    logger.info(
        "rank_complete input=%d prefiltered=%d ineligible_dropped=%d warnings_dropped=%d "
        "confidence_dropped=%d ranked=%d returned=%d workers=%d",
        len(candidates),
        len(candidates) - len(survivors),
        drops[DROPPED_INELIGIBLE],
        drops[DROPPED_WARNINGS],
        drops[DROPPED_CONFIDENCE],
        len(ranked),
        len(page),
        workers,
    )
    return page


def _evaluate_one(
    applicant: ApplicantProfile,
    project: Project,
    item: tuple[int, Opportunity],
    *,
    options: RankingOptions,
    today: date,
    weights: FitWeights,
    warning_penalty: int,
) -> _Evaluation:
    position, opportunity = item
    verdict = evaluate_eligibility(applicant, opportunity, warning_penalty=warning_penalty)

    if options.only_eligible and not verdict.eligible:
        return _Evaluation(result=None, dropped=DROPPED_INELIGIBLE)

    if options.exclude_warnings and verdict.warnings:
        return _Evaluation(result=None, dropped=DROPPED_WARNINGS)

    if (
        options.only_eligible
        and options.min_confidence is not None
        and verdict.confidence < options.min_confidence
    ):
        return _Evaluation(result=None, dropped=DROPPED_CONFIDENCE)

    fit = None
    if verdict.eligible or options.score_ineligible:
        fit = compute_fit(applicant, project, opportunity, weights=weights, today=today)

    return _Evaluation(
        result=RankedResult(opportunity=opportunity, verdict=verdict, fit=fit, position=position)
    )


def _sort_key(result: RankedResult) -> tuple[bool, int]:
    return (not result.eligible, -result.score)
