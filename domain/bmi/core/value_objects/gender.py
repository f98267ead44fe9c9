"""Gender value object - subject gender with display label."""

from enum import Enum
from typing import Optional


class Gender(str, Enum):
    """Gender of the subject.

    Not used by the BMI formula itself; carried on the profile
    for display purposes.
    """

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Get human-readable label.

        Returns:
            str: Display label (e.g. "Male")
        """
        labels = {
            Gender.MALE: "Male",
            Gender.FEMALE: "Female",
            Gender.OTHER: "Other",
        }
        return labels[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> "Gender":
        """Parse free-form input into a Gender.

        Case-insensitive and total: anything that is not "male" or
        "female" maps to OTHER.

        Args:
            value: Raw input string (may be None or empty)

        Returns:
            Gender: Parsed gender

        Example:
            >>> Gender.parse("FEMALE")
            <Gender.FEMALE: 'female'>
            >>> Gender.parse("xyz")
            <Gender.OTHER: 'other'>
        """
        normalized = (value or "").strip().lower()
        if normalized == "male":
            return cls.MALE
        if normalized == "female":
            return cls.FEMALE
        return cls.OTHER
