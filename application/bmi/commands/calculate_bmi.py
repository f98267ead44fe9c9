"""CalculateBmiCommand - validate form input and compute a BMI result."""

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field

from domain.bmi.calculation.bmi_engine import BmiEngine
from domain.bmi.core.exceptions.domain_errors import (
    BmiDomainError,
    InvalidProfileError,
)
from domain.bmi.core.value_objects.gender import Gender
from domain.bmi.core.value_objects.profile import Profile
from infrastructure.config import ValidationRanges

from ..result_view import BmiResultView, BmiResultViewBuilder

logger = structlog.get_logger(__name__)

# Placeholder shown by the gender dropdown before a choice is made
GENDER_PLACEHOLDER = "Select Gender"

MSG_EMPTY_WEIGHT = "Please enter your weight"
MSG_EMPTY_HEIGHT = "Please enter your height"
MSG_EMPTY_AGE = "Please enter your age"
MSG_SELECT_GENDER = "Please select your gender"
MSG_INVALID_NUMBER = "Please enter a valid number"


class ProfileInputError(BmiDomainError):
    """Raised when form input fails validation.

    Attributes:
        field_errors: Message per failing field (weight/height/age/gender)
    """

    def __init__(self, field_errors: Dict[str, str]):
        fields = ", ".join(sorted(field_errors))
        super().__init__(f"Invalid input for: {fields}")
        self.field_errors = dict(field_errors)


class BmiFormInput(BaseModel):
    """Raw values as typed in the BMI form.

    All fields are optional strings; presence and format are checked by
    ProfileInputValidator so every field error can be reported at once.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    weight: Optional[str] = Field(None, description="Weight in kg, e.g. '70'")
    height: Optional[str] = Field(None, description="Height in cm, e.g. '175'")
    age: Optional[str] = Field(None, description="Age in years, e.g. '30'")
    gender: Optional[str] = Field(None, description="'Male' / 'Female' / 'Other'")


def _parse_float(raw: str) -> Optional[float]:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


class ProfileInputValidator:
    """Turn raw form input into a valid Profile.

    Steps:
    1. Presence and number format of every field
    2. Plausible ranges (ValidationRanges)
    3. Gender parsing
    4. Profile.is_valid() as the final guard
    """

    def __init__(self, ranges: Optional[ValidationRanges] = None):
        self._ranges = ranges or ValidationRanges()

    @property
    def ranges(self) -> ValidationRanges:
        return self._ranges

    def validate(self, form: BmiFormInput) -> Profile:
        """
        Validate form input and build a Profile.

        Args:
            form: Raw form values

        Returns:
            Profile built from the parsed values

        Raises:
            ProfileInputError: If any field is missing, malformed or out
                of range (all failing fields are reported)
            InvalidProfileError: If the built profile is not valid
        """
        errors: Dict[str, str] = {}

        weight = self._required_float(form.weight, "weight", MSG_EMPTY_WEIGHT, errors)
        height = self._required_float(form.height, "height", MSG_EMPTY_HEIGHT, errors)

        age: Optional[int] = None
        if not form.age:
            errors["age"] = MSG_EMPTY_AGE
        else:
            age = _parse_int(form.age)
            if age is None:
                errors["age"] = MSG_INVALID_NUMBER

        if not form.gender or form.gender == GENDER_PLACEHOLDER:
            errors["gender"] = MSG_SELECT_GENDER

        if errors or weight is None or height is None or age is None:
            raise ProfileInputError(errors)

        self._check_ranges(weight, height, age)

        profile = Profile(
            weight=weight,
            height=height,
            age=age,
            gender=Gender.parse(form.gender),
        )

        if not profile.is_valid():
            raise InvalidProfileError(profile)

        return profile

    @staticmethod
    def _required_float(
        raw: Optional[str],
        field: str,
        empty_message: str,
        errors: Dict[str, str],
    ) -> Optional[float]:
        if not raw:
            errors[field] = empty_message
            return None
        value = _parse_float(raw)
        if value is None:
            errors[field] = MSG_INVALID_NUMBER
        return value

    def _check_ranges(self, weight: float, height: float, age: int) -> None:
        r = self._ranges
        errors: Dict[str, str] = {}

        checks: Tuple[Tuple[str, float, float, float, str], ...] = (
            ("weight", weight, r.weight_min, r.weight_max, "kg"),
            ("height", height, r.height_min, r.height_max, "cm"),
            ("age", age, r.age_min, r.age_max, "years"),
        )
        for field, value, low, high, unit in checks:
            if value < low or value > high:
                errors[field] = (
                    f"{field.capitalize()} must be between "
                    f"{low:g} and {high:g} {unit}"
                )

        if errors:
            raise ProfileInputError(errors)


@dataclass(frozen=True)
class CalculateBmiCommand:
    """Command to calculate BMI from form input.

    Attributes:
        form: Raw values entered by the user
    """

    form: BmiFormInput


class CalculateBmiHandler:
    """Handler for CalculateBmiCommand.

    Validates the form, runs the BMI engine and builds the result view.
    """

    def __init__(
        self,
        validator: ProfileInputValidator,
        view_builder: BmiResultViewBuilder,
    ):
        self._validator = validator
        self._view_builder = view_builder

    def handle(self, command: CalculateBmiCommand) -> BmiResultView:
        """
        Handle BMI calculation command.

        Args:
            command: CalculateBmiCommand with form input

        Returns:
            BmiResultView ready for display

        Raises:
            ProfileInputError: If form validation fails
            InvalidProfileError: If the profile is not valid
            BmiComputationError: If BMI cannot be computed
        """
        try:
            profile = self._validator.validate(command.form)
        except ProfileInputError as e:
            logger.info("bmi.input_rejected", fields=sorted(e.field_errors))
            raise

        engine = BmiEngine(profile)
        view = self._view_builder.build(engine)

        logger.info(
            "bmi.result_ready",
            bmi=view.bmi,
            category=view.category.value,
            healthy=view.is_healthy,
        )
        return view
