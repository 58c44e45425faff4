"""Dog age to human age conversion."""

import math
from enum import Enum


class DogSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


def convert_dog_age_to_human_years(age: float, size: DogSize) -> int:
    """
    Converts a dog's age to human years based on its size.

    - Large dogs: 1st year is 12 human years, 2nd is 23 total, then +7 per year.
    - Small/Medium dogs: 1st year is 15 human years, 2nd is 24 total.
    - Small dogs: +4 per year after age 2.
    - Medium dogs: +5 per year after age 2.

    Ages of exactly 1 and 2 are special cases; any other age (fractional ones
    included) uses the per-year formula with a real-valued offset. The result
    is floored to whole years. Ages <= 0 give 0.
    """
    if age <= 0:
        return 0

    size = DogSize(size)

    if size is DogSize.LARGE:
        if age == 1:
            return 12
        if age == 2:
            return 23
        return math.floor(23 + (age - 2) * 7)

    if age == 1:
        return 15
    if age == 2:
        return 24

    if size is DogSize.SMALL:
        return math.floor(24 + (age - 2) * 4)

    # Medium is the fallback
    return math.floor(24 + (age - 2) * 5)
