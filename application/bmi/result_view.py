"""BmiResultView - presentation model of a BMI result."""

from dataclasses import dataclass
from enum import Enum

from domain.bmi.calculation.bmi_engine import BmiEngine
from domain.bmi.calculation.rounding import round_half_up
from domain.bmi.core.value_objects.bmi_category import BMICategory
from domain.bmi.core.value_objects.ideal_weight_range import IdealWeightRange
from domain.bmi.core.value_objects.profile import Profile


class Tone(str, Enum):
    """Semantic color tone; clients map tones to their own palette."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"


STATUS_HEALTHY = "Healthy"
STATUS_NEEDS_ATTENTION = "Needs Attention"

_CATEGORY_TONES = {
    BMICategory.UNDERWEIGHT: Tone.INFO,
    BMICategory.NORMAL: Tone.SUCCESS,
    BMICategory.OVERWEIGHT: Tone.WARNING,
    BMICategory.OBESE: Tone.DANGER,
}

_CARD_TONES = {
    BMICategory.UNDERWEIGHT: Tone.WARNING,
    BMICategory.NORMAL: Tone.SUCCESS,
    BMICategory.OVERWEIGHT: Tone.WARNING,
    BMICategory.OBESE: Tone.DANGER,
}


@dataclass(frozen=True)
class BmiResultView:
    """Everything a client needs to render the result screen.

    Attributes:
        bmi: BMI rounded to 2 decimals
        display_bmi: BMI formatted with 1 decimal for the headline
        category: BMI category
        category_label: Display name of the category
        range_text: BMI interval of the category
        is_healthy: True only for the normal category
        status: "Healthy" or "Needs Attention"
        ideal_weight_range: Ideal weight bounds in kg
        ideal_weight_text: Ideal weight bounds as text
        recommendation: Advice for the category
        summary: Full text report
        person_details: Entered data, one line per attribute
        category_tone: Tone for BMI value and category label
        status_tone: Tone for the health status
        card_tone: Tint of the result card
    """

    bmi: float
    display_bmi: str
    category: BMICategory
    category_label: str
    range_text: str
    is_healthy: bool
    status: str
    ideal_weight_range: IdealWeightRange
    ideal_weight_text: str
    recommendation: str
    summary: str
    person_details: str
    category_tone: Tone
    status_tone: Tone
    card_tone: Tone


def format_person_details(profile: Profile) -> str:
    """Render profile attributes as display lines."""
    return "\n".join(
        [
            f"Weight: {profile.weight:.1f} kg",
            f"Height: {profile.height:.1f} cm",
            f"Age: {profile.age} years",
            f"Gender: {profile.gender.label}",
        ]
    )


def status_tone_for(category: BMICategory) -> Tone:
    """Tone of the health status line.

    Healthy is SUCCESS, obese is DANGER, any other category is WARNING.
    """
    if category.is_healthy():
        return Tone.SUCCESS
    if category is BMICategory.OBESE:
        return Tone.DANGER
    return Tone.WARNING


class BmiResultViewBuilder:
    """Build BmiResultView from a computed BmiEngine."""

    def build(self, engine: BmiEngine) -> BmiResultView:
        category = engine.category()
        ideal_range = engine.ideal_weight_range()
        healthy = engine.is_healthy()

        return BmiResultView(
            bmi=engine.bmi(),
            display_bmi=f"{round_half_up(engine.bmi(), 1):.1f}",
            category=category,
            category_label=category.label,
            range_text=category.range_text,
            is_healthy=healthy,
            status=STATUS_HEALTHY if healthy else STATUS_NEEDS_ATTENTION,
            ideal_weight_range=ideal_range,
            ideal_weight_text=str(ideal_range),
            recommendation=category.recommendation,
            summary=engine.summary(),
            person_details=format_person_details(engine.profile),
            category_tone=_CATEGORY_TONES[category],
            status_tone=status_tone_for(category),
            card_tone=_CARD_TONES[category],
        )
