"""BmiEngine - Body Mass Index calculation and classification."""

import math
from decimal import InvalidOperation

import structlog

from ..core.exceptions.domain_errors import BmiComputationError
from ..core.value_objects.bmi_category import BMICategory
from ..core.value_objects.ideal_weight_range import IdealWeightRange
from ..core.value_objects.profile import Profile
from .rounding import round_half_up

logger = structlog.get_logger(__name__)

# BMI bounds of the ideal weight range
IDEAL_BMI_MIN = 18.5
IDEAL_BMI_MAX = 24.9

BMI_DECIMALS = 2
WEIGHT_DECIMALS = 1


def _round(value: float, places: int, profile: Profile) -> float:
    try:
        return round_half_up(value, places)
    except InvalidOperation as e:
        logger.warning(
            "bmi.computation_rejected",
            reason="out_of_range_result",
            weight=profile.weight,
            height=profile.height,
        )
        raise BmiComputationError(
            f"Result {value!r} is too large to round for weight={profile.weight}, "
            f"height={profile.height}",
            weight=profile.weight,
            height=profile.height,
        ) from e


class BmiEngine:
    """Compute BMI, category and ideal weight range for a profile.

    Formula:
        BMI = weight(kg) / height(m)^2

    BMI is rounded to 2 decimals (half-up) before classification, so
    every consumer sees the same value. BMI and category are computed
    once, at construction; instances are effectively immutable and can
    be shared between threads.

    The engine does not validate weight or age (see Profile.is_valid),
    but refuses to produce a BMI for a non-positive or non-finite height.

    Example:
        >>> engine = BmiEngine(Profile(70.0, 175.0, 30, Gender.MALE))
        >>> engine.bmi()
        22.86
        >>> engine.category()
        <BMICategory.NORMAL: 'normal'>

    Raises:
        BmiComputationError: If height is not a positive finite number, or the
            result is not finite or too large to round
    """

    def __init__(self, profile: Profile):
        self._profile = profile
        self._bmi = self._compute_bmi(profile)
        self._category = BMICategory.from_bmi(self._bmi)

        logger.debug(
            "bmi.computed",
            bmi=self._bmi,
            category=self._category.value,
        )

    @staticmethod
    def _compute_bmi(profile: Profile) -> float:
        if not (math.isfinite(profile.height) and profile.height > 0):
            logger.warning(
                "bmi.computation_rejected",
                reason="invalid_height",
                height=profile.height,
            )
            raise BmiComputationError(
                f"Height must be a positive finite number to compute BMI, "
                f"got {profile.height}",
                weight=profile.weight,
                height=profile.height,
            )

        height_m = profile.height_m
        raw = profile.weight / (height_m * height_m)

        if not math.isfinite(raw):
            logger.warning(
                "bmi.computation_rejected",
                reason="non_finite_result",
                weight=profile.weight,
                height=profile.height,
            )
            raise BmiComputationError(
                f"BMI is not a finite number for weight={profile.weight}, "
                f"height={profile.height}",
                weight=profile.weight,
                height=profile.height,
            )

        return _round(raw, BMI_DECIMALS, profile)

    @property
    def profile(self) -> Profile:
        return self._profile

    def bmi(self) -> float:
        """BMI rounded to 2 decimals."""
        return self._bmi

    def category(self) -> BMICategory:
        """Category of the rounded BMI."""
        return self._category

    def is_healthy(self) -> bool:
        """True only when the category is NORMAL."""
        return self._category is BMICategory.NORMAL

    def ideal_weight_range(self) -> IdealWeightRange:
        """Calculate the weight range for BMI 18.5 - 24.9 at this height.

        Returns:
            IdealWeightRange: Bounds in kg, each rounded to 1 decimal
        """
        height_m = self._profile.height_m
        height_sq = height_m * height_m

        return IdealWeightRange(
            min_weight=_round(IDEAL_BMI_MIN * height_sq, WEIGHT_DECIMALS, self._profile),
            max_weight=_round(IDEAL_BMI_MAX * height_sq, WEIGHT_DECIMALS, self._profile),
        )

    def summary(self) -> str:
        """Multi-line text report of the result.

        Returns:
            str: BMI, category, status, ideal range and recommendation
        """
        status = "Healthy" if self.is_healthy() else "Needs Attention"
        lines = [
            f"BMI: {self._bmi}",
            f"Category: {self._category.label}",
            f"Status: {status}",
            f"Ideal Weight Range: {self.ideal_weight_range()}",
            "",
            "Recommendation:",
            self._category.recommendation,
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"BmiEngine(bmi={self._bmi}, category={self._category.value})"
