"""Domain exceptions for BMI calculation."""

from typing import Optional


class BmiDomainError(Exception):
    """Base exception for BMI domain errors."""

    pass


class InvalidProfileError(BmiDomainError):
    """Raised when a profile has non-positive weight, height or age."""

    def __init__(self, profile: object):
        super().__init__(f"Invalid profile: {profile}")
        self.profile = profile


class BmiComputationError(BmiDomainError):
    """Raised when BMI cannot be computed to a finite value."""

    def __init__(
        self,
        message: str,
        weight: Optional[float] = None,
        height: Optional[float] = None,
    ):
        super().__init__(message)
        self.weight = weight
        self.height = height
