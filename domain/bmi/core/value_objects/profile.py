"""Profile value object - subject physical attributes."""

from dataclasses import dataclass

from .gender import Gender


@dataclass(frozen=True)
class Profile:
    """Physical attributes needed for BMI calculation.

    Immutable value object. Values are stored verbatim: construction
    never raises, validity is an explicit query so the caller decides
    whether to reject.

    Attributes:
        weight: Body weight in kilograms
        height: Height in centimeters
        age: Age in years
        gender: Subject gender
    """

    weight: float
    height: float
    age: int
    gender: Gender

    @property
    def height_m(self) -> float:
        """Height converted to meters."""
        return self.height / 100.0

    def is_valid(self) -> bool:
        """Check that weight, height and age are all positive.

        Clinical plausibility ranges are not checked here.

        Returns:
            bool: True if the profile can be used for BMI calculation
        """
        return self.weight > 0 and self.height > 0 and self.age > 0

    def __str__(self) -> str:
        return (
            f"Profile(weight={self.weight} kg, height={self.height} cm, "
            f"age={self.age}, gender={self.gender.label})"
        )
