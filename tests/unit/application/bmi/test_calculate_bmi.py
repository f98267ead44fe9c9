"""Unit tests for CalculateBmiCommand, handler and input validation."""

from unittest.mock import Mock

import pytest

from application.bmi.commands.calculate_bmi import (
    BmiFormInput,
    CalculateBmiCommand,
    CalculateBmiHandler,
    ProfileInputError,
    ProfileInputValidator,
)
from application.bmi.result_view import BmiResultView, BmiResultViewBuilder
from domain.bmi.calculation.bmi_engine import BmiEngine
from domain.bmi.core.exceptions.domain_errors import InvalidProfileError
from domain.bmi.core.value_objects import BMICategory, Gender, Profile
from infrastructure.config import ValidationRanges


def make_form(
    weight="70", height="175", age="30", gender="Male"
) -> BmiFormInput:
    return BmiFormInput(weight=weight, height=height, age=age, gender=gender)


class TestProfileInputValidator:
    """Test form validation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.validator = ProfileInputValidator()

    def test_valid_input_builds_profile(self):
        """Test happy path."""
        profile = self.validator.validate(make_form(gender="female"))

        assert profile == Profile(
            weight=70.0, height=175.0, age=30, gender=Gender.FEMALE
        )

    def test_whitespace_is_stripped(self):
        profile = self.validator.validate(
            make_form(weight=" 70.5 ", height=" 175 ", age=" 30 ", gender=" Male ")
        )

        assert profile.weight == 70.5
        assert profile.height == 175.0
        assert profile.age == 30
        assert profile.gender is Gender.MALE

    def test_unknown_gender_maps_to_other(self):
        profile = self.validator.validate(make_form(gender="Prefer not to say"))

        assert profile.gender is Gender.OTHER

    def test_all_empty_reports_every_field(self):
        """Test that all missing fields are reported together."""
        with pytest.raises(ProfileInputError) as exc_info:
            self.validator.validate(BmiFormInput())

        assert exc_info.value.field_errors == {
            "weight": "Please enter your weight",
            "height": "Please enter your height",
            "age": "Please enter your age",
            "gender": "Please select your gender",
        }

    def test_gender_placeholder_is_rejected(self):
        with pytest.raises(ProfileInputError) as exc_info:
            self.validator.validate(make_form(gender="Select Gender"))

        assert exc_info.value.field_errors == {"gender": "Please select your gender"}

    @pytest.mark.parametrize(
        "field,value",
        [
            ("weight", "abc"),
            ("weight", "nan"),
            ("height", "1,75"),
            ("height", "inf"),
            ("age", "30.5"),
            ("age", "thirty"),
        ],
    )
    def test_malformed_numbers(self, field, value):
        """Test non-numeric input."""
        with pytest.raises(ProfileInputError) as exc_info:
            self.validator.validate(make_form(**{field: value}))

        assert exc_info.value.field_errors == {field: "Please enter a valid number"}

    @pytest.mark.parametrize(
        "field,value,message",
        [
            ("weight", "5", "Weight must be between 10 and 300 kg"),
            ("weight", "300.1", "Weight must be between 10 and 300 kg"),
            ("height", "49", "Height must be between 50 and 250 cm"),
            ("height", "300", "Height must be between 50 and 250 cm"),
            ("age", "0", "Age must be between 1 and 120 years"),
            ("age", "121", "Age must be between 1 and 120 years"),
        ],
    )
    def test_out_of_range(self, field, value, message):
        """Test plausibility ranges."""
        with pytest.raises(ProfileInputError) as exc_info:
            self.validator.validate(make_form(**{field: value}))

        assert exc_info.value.field_errors == {field: message}

    def test_range_bounds_are_inclusive(self):
        profile = self.validator.validate(
            make_form(weight="10", height="250", age="120")
        )

        assert (profile.weight, profile.height, profile.age) == (10.0, 250.0, 120)

    def test_range_check_runs_after_presence_check(self):
        """Test that missing fields are reported before range errors."""
        with pytest.raises(ProfileInputError) as exc_info:
            self.validator.validate(make_form(weight="5", age=""))

        assert exc_info.value.field_errors == {"age": "Please enter your age"}

    def test_multiple_range_errors(self):
        with pytest.raises(ProfileInputError) as exc_info:
            self.validator.validate(make_form(weight="5", height="20"))

        assert set(exc_info.value.field_errors) == {"weight", "height"}

    def test_custom_ranges(self):
        """Test that ranges come from configuration."""
        validator = ProfileInputValidator(
            ranges=ValidationRanges(weight_min=40.0, weight_max=200.0)
        )

        with pytest.raises(ProfileInputError) as exc_info:
            validator.validate(make_form(weight="35"))

        assert exc_info.value.field_errors == {
            "weight": "Weight must be between 40 and 200 kg"
        }

    def test_invalid_profile_is_rejected(self):
        """Test final Profile.is_valid() guard when ranges allow zero."""
        validator = ProfileInputValidator(
            ranges=ValidationRanges(weight_min=0.0, height_min=0.0, age_min=0)
        )

        with pytest.raises(InvalidProfileError) as exc_info:
            validator.validate(make_form(height="0"))

        assert exc_info.value.profile.height == 0.0

    def test_error_message_lists_fields(self):
        error = ProfileInputError({"weight": "x", "age": "y"})

        assert str(error) == "Invalid input for: age, weight"


class TestCalculateBmiHandler:
    """Test CalculateBmiHandler."""

    def setup_method(self):
        """Set up test fixtures."""
        self.handler = CalculateBmiHandler(
            validator=ProfileInputValidator(),
            view_builder=BmiResultViewBuilder(),
        )

    def test_handle_returns_result_view(self):
        """Test full calculation from form input."""
        view = self.handler.handle(CalculateBmiCommand(form=make_form()))

        assert isinstance(view, BmiResultView)
        assert view.bmi == 22.86
        assert view.category is BMICategory.NORMAL
        assert view.is_healthy is True

    def test_handle_propagates_input_errors(self):
        with pytest.raises(ProfileInputError):
            self.handler.handle(CalculateBmiCommand(form=make_form(weight="")))

    def test_handle_passes_engine_to_builder(self):
        """Test that the builder receives an engine for the parsed profile."""
        builder = Mock(spec=BmiResultViewBuilder)
        handler = CalculateBmiHandler(
            validator=ProfileInputValidator(),
            view_builder=builder,
        )
        builder.build.return_value = BmiResultViewBuilder().build(
            BmiEngine(Profile(weight=45.0, height=160.0, age=30, gender=Gender.MALE))
        )

        result = handler.handle(
            CalculateBmiCommand(form=make_form(weight="45", height="160"))
        )

        builder.build.assert_called_once()
        (engine,), _ = builder.build.call_args
        assert isinstance(engine, BmiEngine)
        assert engine.profile.weight == 45.0
        assert engine.bmi() == 17.58
        assert result is builder.build.return_value
