"""Exceptions raised by the eligibility and fit-scoring engine."""


class GrantMatcherError(Exception):
    """Base class for engine errors."""


class MalformedInputError(GrantMatcherError, ValueError):
    """Raised at an entry point when an input record violates a structural invariant.

    No evaluator runs once this is raised; callers never receive a partial verdict.
    """
