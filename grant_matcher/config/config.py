"""Configuration management for the matching engine."""

from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings


class EngineConfig(BaseSettings):
    """Engine configuration from GRANT_MATCHER_* environment variables."""

    log_level: str = "INFO"
    max_workers: int = 1
    warning_penalty: int = 10
    weights_file: Optional[str] = None
    default_page_size: Optional[int] = None

    model_config = {"env_prefix": "GRANT_MATCHER_", "env_file": ".env", "case_sensitive": False, "extra": "ignore"}

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return level

    @field_validator("max_workers")
    @classmethod
    def positive_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_workers must be >= 1, got {v}")
        return v

    @field_validator("warning_penalty")
    @classmethod
    def penalty_range(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"warning_penalty must be between 0 and 100, got {v}")
        return v

    @field_validator("default_page_size")
    @classmethod
    def positive_page_size(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError(f"default_page_size must be >= 1, got {v}")
        return v


def validate_config() -> EngineConfig:
    """Load and validate configuration from environment.

    Raises ValueError naming every invalid GRANT_MATCHER_* variable
    (not just the first one).
    """
    try:
        return EngineConfig()
    except ValueError as exc:
        invalid = []
        errors = getattr(exc, "errors", None)
        if callable(errors):
            for err in errors():
                if err.get("loc"):
                    invalid.append(f"GRANT_MATCHER_{str(err['loc'][0]).upper()} ({err['msg']})")
        if invalid:
            raise ValueError(
                f"Invalid environment variable(s): {', '.join(invalid)}. "
                "Please fix them in your .env file or environment."
            ) from exc
        raise


def load_config() -> EngineConfig:
    """Load configuration from environment (startup entry point)."""
    return validate_config()
