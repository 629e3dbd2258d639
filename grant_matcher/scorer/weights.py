"""Fit-score point configuration.

Point values and caps for every fit signal are externalized so they can be
tuned without code changes. Files may be JSON or YAML.
"""

import json
import logging
import yaml
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


class FitWeights(BaseModel):
    """Points awarded per fit signal, and the cap applied to each signal."""

    # Program-type alignment
    program_type_match: int = 20

    # Certification alignment (summed, then capped)
    certification_match: int = 12
    small_business_match: int = 15
    certification_cap: int = 40

    # Funding-amount fit
    funding_perfect_fit: int = 20
    funding_covers_need: int = 12
    funding_partial: int = 8

    # Deadline urgency
    deadline_within_14_days: int = 20
    deadline_within_30_days: int = 15
    deadline_within_90_days: int = 10
    deadline_beyond_90_days: int = 5
    deadline_rolling: int = 8

    geography_match: int = 10
    industry_match: int = 15

    competition_low: int = 10
    competition_medium: int = 5

    version: str = "1.0"

    # Unknown signal names in a tuning file are an error
    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator(
        "program_type_match", "certification_match", "small_business_match", "certification_cap",
        "funding_perfect_fit", "funding_covers_need", "funding_partial",
        "deadline_within_14_days", "deadline_within_30_days", "deadline_within_90_days",
        "deadline_beyond_90_days", "deadline_rolling",
        "geography_match", "industry_match", "competition_low", "competition_medium",
    )
    @classmethod
    def points_range(cls, v: int) -> int:
        """Ensure point values are between 0 and 100."""
        if not 0 <= v <= 100:
            raise ValueError(f"Points must be between 0 and 100, got {v}")
        return v

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump()


DEFAULT_WEIGHTS = FitWeights()


def _weights_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"
    raise ValueError(f"Unsupported file format: {path.suffix or '(none)'}. Use .json, .yaml, or .yml")


def load_weights(filepath: Optional[str] = None) -> FitWeights:
    """Load fit weights from a tuning file, or return the defaults.

    Signals left out of the file keep their default points. An empty file
    means the defaults.

    Raises:
        FileNotFoundError: If filepath is given but doesn't exist
        ValueError: If the format is unsupported, the file does not hold a
            mapping, or a signal name or point value is invalid
    """

    if not filepath:
        return DEFAULT_WEIGHTS

    path = Path(filepath)
    if not path.is_file():
        raise FileNotFoundError(f"Weights file not found: {filepath}")

    fmt = _weights_format(path)
    text = path.read_text()
    if not text.strip():
        overrides = {}
    elif fmt == "json":
        overrides = json.loads(text)
    else:
        overrides = yaml.safe_load(text) or {}

    if not isinstance(overrides, dict):
        raise ValueError(f"Weights file {filepath} must hold a mapping of signal -> points")

    weights = FitWeights.model_validate(overrides)
    logger.info(
        "weights_loaded path=%s version=%s overrides=%d",
        filepath,
        weights.version,
        len(overrides),
    )
    return weights


def save_weights(weights: FitWeights, filepath: str) -> None:
    """Write weights in the format named by the file extension, signals in declaration order."""

    path = Path(filepath)
    data = weights.to_dict()

    if _weights_format(path) == "json":
        path.write_text(json.dumps(data, indent=2) + "\n")
    else:
        path.write_text(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
