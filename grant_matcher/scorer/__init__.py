"""Fit scoring engine for funding opportunities."""

from .engine import compute_fit, score_opportunity
from .weights import DEFAULT_WEIGHTS, FitWeights, load_weights, save_weights

__all__ = [
    "compute_fit",
    "score_opportunity",
    "DEFAULT_WEIGHTS",
    "FitWeights",
    "load_weights",
    "save_weights",
]
