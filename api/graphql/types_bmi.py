"""GraphQL types for BMI domain.

These types expose the BMI result screen: value, category, health status,
ideal weight range, recommendation and color tones.
"""

from enum import Enum
from typing import List, Optional

import strawberry


__all__ = [
    # Enums
    "GenderEnum",
    "BMICategoryEnum",
    "ToneEnum",
    # Output types
    "IdealWeightRangeType",
    "ResultTonesType",
    "BmiResultType",
    "FieldErrorType",
    "BmiCalculationPayload",
    "BmiCategoryInfoType",
    # Input types
    "BmiFormInputType",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class GenderEnum(str, Enum):
    """Subject gender."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


@strawberry.enum
class BMICategoryEnum(str, Enum):
    """WHO-style BMI category."""

    UNDERWEIGHT = "underweight"  # BMI < 18.5
    NORMAL = "normal"  # 18.5 <= BMI < 25
    OVERWEIGHT = "overweight"  # 25 <= BMI < 30
    OBESE = "obese"  # BMI >= 30


@strawberry.enum
class ToneEnum(str, Enum):
    """Semantic color tone for result elements."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class IdealWeightRangeType:
    """Weight interval for BMI 18.5 - 24.9 at the given height."""

    min_weight: float  # kg
    max_weight: float  # kg


@strawberry.type
class ResultTonesType:
    """Color tones of the result screen."""

    category: ToneEnum  # BMI value and category label
    status: ToneEnum  # health status line
    card: ToneEnum  # result card tint


@strawberry.type
class BmiResultType:
    """Computed BMI result ready for display."""

    bmi: float  # 2 decimals
    display_bmi: str  # 1 decimal
    category: BMICategoryEnum
    category_label: str
    range_text: str
    is_healthy: bool
    status: str  # "Healthy" / "Needs Attention"
    ideal_weight_range: IdealWeightRangeType
    ideal_weight_text: str
    recommendation: str
    summary: str
    person_details: str
    tone: ResultTonesType


@strawberry.type
class FieldErrorType:
    """Validation error attached to a form field."""

    field: Optional[str]  # None for errors not tied to one field
    message: str


@strawberry.type
class BmiCalculationPayload:
    """Either a result or the list of input errors."""

    result: Optional[BmiResultType] = None
    errors: List[FieldErrorType] = strawberry.field(default_factory=list)

    @strawberry.field
    def success(self) -> bool:
        """True when a result was produced."""
        return self.result is not None


@strawberry.type
class BmiCategoryInfoType:
    """Classification table row."""

    category: BMICategoryEnum
    label: str
    range_text: str
    recommendation: str
    is_healthy: bool


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class BmiFormInputType:
    """Raw form values, as typed by the user."""

    weight: Optional[str] = None  # kg
    height: Optional[str] = None  # cm
    age: Optional[str] = None  # years
    gender: Optional[str] = None  # "Male" / "Female" / "Other"
