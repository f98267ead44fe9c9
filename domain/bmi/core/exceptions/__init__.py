"""Domain exceptions for BMI calculation."""

from .domain_errors import (
    BmiComputationError,
    BmiDomainError,
    InvalidProfileError,
)

__all__ = [
    "BmiDomainError",
    "InvalidProfileError",
    "BmiComputationError",
]
