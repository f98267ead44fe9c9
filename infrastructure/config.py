"""Configuration utilities for infrastructure layer."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationRanges:
    """Plausible input ranges accepted by the BMI form.

    Attributes:
        weight_min: Minimum weight in kg
        weight_max: Maximum weight in kg
        height_min: Minimum height in cm
        height_max: Maximum height in cm
        age_min: Minimum age in years
        age_max: Maximum age in years
    """

    weight_min: float = 10.0
    weight_max: float = 300.0
    height_min: float = 50.0
    height_max: float = 250.0
    age_min: int = 1
    age_max: int = 120


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def get_app_version() -> str:
    """
    Get application version.

    Returns:
        Version from APP_VERSION env var (Docker build ARG -> ENV),
        defaults to "0.0.0-dev"
    """
    return os.getenv("APP_VERSION", "0.0.0-dev")


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-cased LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """
    Get log renderer.

    Returns:
        "json" or "console" from LOG_FORMAT env var (default "console").
        Unknown values fall back to "console".
    """
    fmt = os.getenv("LOG_FORMAT", "console").lower()
    return fmt if fmt in ("console", "json") else "console"


def get_validation_ranges() -> ValidationRanges:
    """
    Get form validation ranges.

    Environment Variables:
        BMI_WEIGHT_MIN_KG / BMI_WEIGHT_MAX_KG (default 10 / 300)
        BMI_HEIGHT_MIN_CM / BMI_HEIGHT_MAX_CM (default 50 / 250)
        BMI_AGE_MIN / BMI_AGE_MAX (default 1 / 120)

    Returns:
        ValidationRanges built from environment overrides

    Raises:
        ValueError: If a variable is set but not numeric
    """
    defaults = ValidationRanges()
    return ValidationRanges(
        weight_min=_get_float("BMI_WEIGHT_MIN_KG", defaults.weight_min),
        weight_max=_get_float("BMI_WEIGHT_MAX_KG", defaults.weight_max),
        height_min=_get_float("BMI_HEIGHT_MIN_CM", defaults.height_min),
        height_max=_get_float("BMI_HEIGHT_MAX_CM", defaults.height_max),
        age_min=_get_int("BMI_AGE_MIN", defaults.age_min),
        age_max=_get_int("BMI_AGE_MAX", defaults.age_max),
    )
