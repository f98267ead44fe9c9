"""BMICategory value object - WHO-style BMI classification."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from ..exceptions.domain_errors import BmiComputationError


class BMICategory(str, Enum):
    """BMI category, ordered by threshold.

    - UNDERWEIGHT: BMI < 18.5
    - NORMAL: 18.5 <= BMI < 25.0
    - OVERWEIGHT: 25.0 <= BMI < 30.0
    - OBESE: BMI >= 30.0

    Per-category data lives in CATEGORY_TABLE.
    """

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    @classmethod
    def from_bmi(cls, bmi: float) -> "BMICategory":
        """Classify a BMI value.

        Each upper bound is exclusive, so boundary values resolve to the
        higher tier (18.5 -> NORMAL, 25.0 -> OVERWEIGHT, 30.0 -> OBESE).

        Args:
            bmi: BMI value (already rounded by the caller)

        Returns:
            BMICategory: Matching category

        Raises:
            BmiComputationError: If bmi is NaN

        Example:
            >>> BMICategory.from_bmi(22.86)
            <BMICategory.NORMAL: 'normal'>
        """
        if math.isnan(bmi):
            raise BmiComputationError("Cannot classify BMI value NaN")

        for upper_bound, category in CATEGORY_THRESHOLDS:
            if bmi < upper_bound:
                return category
        return cls.OBESE

    @property
    def label(self) -> str:
        return CATEGORY_TABLE[self].label

    @property
    def range_text(self) -> str:
        return CATEGORY_TABLE[self].range_text

    @property
    def recommendation(self) -> str:
        return CATEGORY_TABLE[self].recommendation

    def is_healthy(self) -> bool:
        return CATEGORY_TABLE[self].healthy


@dataclass(frozen=True)
class CategoryInfo:
    """Display data attached to a BMI category.

    Attributes:
        label: Display name (e.g. "Normal Weight")
        range_text: Human-readable BMI interval
        recommendation: Fixed advice shown with the result
        healthy: True only for the normal range
    """

    label: str
    range_text: str
    recommendation: str
    healthy: bool


CATEGORY_TABLE: Dict[BMICategory, CategoryInfo] = {
    BMICategory.UNDERWEIGHT: CategoryInfo(
        label="Underweight",
        range_text="BMI < 18.5",
        recommendation=(
            "You may need to gain weight. "
            "Consult a healthcare professional for advice."
        ),
        healthy=False,
    ),
    BMICategory.NORMAL: CategoryInfo(
        label="Normal Weight",
        range_text="BMI 18.5 - 24.9",
        recommendation=(
            "Great! You have a healthy weight. "
            "Keep maintaining your lifestyle."
        ),
        healthy=True,
    ),
    BMICategory.OVERWEIGHT: CategoryInfo(
        label="Overweight",
        range_text="BMI 25 - 29.9",
        recommendation=(
            "You may need to lose some weight. "
            "Consider a balanced diet and regular exercise."
        ),
        healthy=False,
    ),
    BMICategory.OBESE: CategoryInfo(
        label="Obese",
        range_text="BMI ≥ 30",
        recommendation=(
            "You should consult a healthcare professional "
            "for a personalized health plan."
        ),
        healthy=False,
    ),
}

# Exclusive upper bounds; anything at or above the last one is OBESE
CATEGORY_THRESHOLDS: Tuple[Tuple[float, BMICategory], ...] = (
    (18.5, BMICategory.UNDERWEIGHT),
    (25.0, BMICategory.NORMAL),
    (30.0, BMICategory.OVERWEIGHT),
)
