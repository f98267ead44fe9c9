"""Query resolvers for BMI domain.

- calculate: Validate form input and compute a BMI result
- categories: List the BMI classification table
- parseGender: Map free-form text to a gender
"""

from typing import List

import strawberry

from api.graphql.types_bmi import (
    BMICategoryEnum,
    BmiCalculationPayload,
    BmiCategoryInfoType,
    BmiFormInputType,
    BmiResultType,
    FieldErrorType,
    GenderEnum,
    IdealWeightRangeType,
    ResultTonesType,
    ToneEnum,
)
from application.bmi.commands.calculate_bmi import (
    BmiFormInput,
    CalculateBmiCommand,
    ProfileInputError,
)
from application.bmi.result_view import BmiResultView
from domain.bmi.core.exceptions.domain_errors import (
    BmiComputationError,
    InvalidProfileError,
)
from domain.bmi.core.value_objects.bmi_category import CATEGORY_TABLE
from domain.bmi.core.value_objects.gender import Gender


# ============================================
# HELPER FUNCTIONS
# ============================================


def map_result_view_to_graphql(view: BmiResultView) -> BmiResultType:
    """Map application BmiResultView to GraphQL BmiResultType."""
    return BmiResultType(
        bmi=view.bmi,
        display_bmi=view.display_bmi,
        category=BMICategoryEnum(view.category.value),
        category_label=view.category_label,
        range_text=view.range_text,
        is_healthy=view.is_healthy,
        status=view.status,
        ideal_weight_range=IdealWeightRangeType(
            min_weight=view.ideal_weight_range.min_weight,
            max_weight=view.ideal_weight_range.max_weight,
        ),
        ideal_weight_text=view.ideal_weight_text,
        recommendation=view.recommendation,
        summary=view.summary,
        person_details=view.person_details,
        tone=ResultTonesType(
            category=ToneEnum(view.category_tone.value),
            status=ToneEnum(view.status_tone.value),
            card=ToneEnum(view.card_tone.value),
        ),
    )


def map_input_to_form(input: BmiFormInputType) -> BmiFormInput:
    """Map GraphQL input to application BmiFormInput."""
    return BmiFormInput(
        weight=input.weight,
        height=input.height,
        age=input.age,
        gender=input.gender,
    )


# ============================================
# QUERY RESOLVERS
# ============================================


@strawberry.type
class BmiQueries:
    """GraphQL queries for BMI domain."""

    @strawberry.field
    def calculate(
        self,
        info: strawberry.types.Info,
        input: BmiFormInputType,
    ) -> BmiCalculationPayload:
        """Calculate BMI from raw form values.

        Validation failures are returned as `errors`, not raised.

        Example:
            query {
              bmi {
                calculate(input: {weight: "70", height: "175", age: "30",
                                  gender: "Male"}) {
                  success
                  result { bmi categoryLabel status idealWeightText }
                  errors { field message }
                }
              }
            }
        """
        handler = info.context.get("calculate_bmi_handler")

        if not handler:
            raise Exception("Missing calculate_bmi_handler in GraphQL context")

        command = CalculateBmiCommand(form=map_input_to_form(input))

        try:
            view = handler.handle(command)
        except ProfileInputError as e:
            return BmiCalculationPayload(
                errors=[
                    FieldErrorType(field=field, message=message)
                    for field, message in sorted(e.field_errors.items())
                ]
            )
        except InvalidProfileError as e:
            return BmiCalculationPayload(
                errors=[FieldErrorType(field=None, message=str(e))]
            )
        except BmiComputationError as e:
            return BmiCalculationPayload(
                errors=[FieldErrorType(field="height", message=str(e))]
            )

        return BmiCalculationPayload(result=map_result_view_to_graphql(view))

    @strawberry.field
    def categories(self) -> List[BmiCategoryInfoType]:
        """List BMI categories in threshold order."""
        return [
            BmiCategoryInfoType(
                category=BMICategoryEnum(category.value),
                label=info.label,
                range_text=info.range_text,
                recommendation=info.recommendation,
                is_healthy=info.healthy,
            )
            for category, info in CATEGORY_TABLE.items()
        ]

    @strawberry.field
    def parse_gender(self, value: str) -> GenderEnum:
        """Parse free-form gender text (case-insensitive, never fails)."""
        return GenderEnum(Gender.parse(value).value)
