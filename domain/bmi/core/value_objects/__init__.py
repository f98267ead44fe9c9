"""Value objects for BMI domain."""

from .bmi_category import CATEGORY_TABLE, BMICategory, CategoryInfo
from .gender import Gender
from .ideal_weight_range import IdealWeightRange
from .profile import Profile

__all__ = [
    "Gender",
    "Profile",
    "BMICategory",
    "CategoryInfo",
    "CATEGORY_TABLE",
    "IdealWeightRange",
]
