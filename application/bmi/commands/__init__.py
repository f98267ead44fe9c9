"""BMI commands."""

from .calculate_bmi import (
    BmiFormInput,
    CalculateBmiCommand,
    CalculateBmiHandler,
    ProfileInputError,
    ProfileInputValidator,
)

__all__ = [
    "BmiFormInput",
    "CalculateBmiCommand",
    "CalculateBmiHandler",
    "ProfileInputError",
    "ProfileInputValidator",
]
