"""IdealWeightRange value object - healthy weight interval for a height."""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class IdealWeightRange:
    """Weight interval (kg) matching BMI 18.5 - 24.9 for a given height.

    Unpacks as a pair:
        >>> low, high = IdealWeightRange(min_weight=56.7, max_weight=76.3)

    Attributes:
        min_weight: Lower bound in kg (1 decimal)
        max_weight: Upper bound in kg (1 decimal)
    """

    min_weight: float
    max_weight: float

    def __iter__(self) -> Iterator[float]:
        yield self.min_weight
        yield self.max_weight

    def __str__(self) -> str:
        return f"{self.min_weight} - {self.max_weight} kg"
