"""Entry-point input validation.

Every public engine call passes its inputs through here before any evaluator
runs. Model instances and plain mappings are both accepted; anything that
cannot become a valid model raises MalformedInputError for the whole call.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import MalformedInputError
from .models import ApplicantProfile, Opportunity, Project, RankingOptions

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _coerce(model_cls: type[ModelT], value: Any, label: str) -> ModelT:
    if value is None:
        logger.warning("input_rejected input=%s error=missing", label)
        raise MalformedInputError(f"{label} is required")

    if isinstance(value, model_cls):
        return value

    if isinstance(value, Mapping):
        try:
            return model_cls.model_validate(dict(value))
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or label}: {err['msg']}" for err in exc.errors()
            )
            logger.warning("input_rejected input=%s error=%s", label, details)
            raise MalformedInputError(f"Invalid {label}: {details}") from exc

    raise MalformedInputError(
        f"{label} must be a {model_cls.__name__} or a mapping, got {type(value).__name__}"
    )


def coerce_applicant(value: Any) -> ApplicantProfile:
    return _coerce(ApplicantProfile, value, "applicant profile")


def coerce_opportunity(value: Any) -> Opportunity:
    opportunity = _coerce(Opportunity, value, "opportunity")
    # model_construct() skips validators, so re-check the range invariant here
    problem = opportunity.amount_range_error()
    if problem:
        logger.warning("input_rejected input=opportunity id=%s error=%s", opportunity.id, problem)
        raise MalformedInputError(f"Invalid opportunity {opportunity.id}: {problem}")
    return opportunity


def coerce_project(value: Any) -> Project:
    return _coerce(Project, value, "project")


def coerce_options(value: Optional[Any]) -> RankingOptions:
    if value is None:
        return RankingOptions()
    return _coerce(RankingOptions, value, "ranking options")
