"""BMI domain: profile, classification and calculation."""

from .calculation.bmi_engine import BmiEngine
from .core.exceptions import (
    BmiComputationError,
    BmiDomainError,
    InvalidProfileError,
)
from .core.value_objects import (
    BMICategory,
    Gender,
    IdealWeightRange,
    Profile,
)

__all__ = [
    "BmiEngine",
    "BMICategory",
    "Gender",
    "IdealWeightRange",
    "Profile",
    "BmiDomainError",
    "BmiComputationError",
    "InvalidProfileError",
]
