"""Calculation services for BMI domain."""

from .bmi_engine import BmiEngine
from .rounding import round_half_up

__all__ = [
    "BmiEngine",
    "round_half_up",
]
