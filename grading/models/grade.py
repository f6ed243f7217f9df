"""
Grade value models.

A raw grade field can hold a letter ("B+"), a percentage (85) or grade
points already on a scale (3.7). The data layer decides which one it is
once, when the record is read, and the engines only ever see one of the
three variants below.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..config import SCALE_4_0, SCALE_4_3, SCALE_PERCENTAGE


class GpaScale(Enum):
    """
    Grading scales a course or a user can be set to.

    FOUR_POINT: US 4.0 scale (A+ and A are both 4.0)
    FOUR_POINT_THREE: 4.3 scale (A+ is 4.3)
    PERCENTAGE: raw percentage, no conversion
    """
    FOUR_POINT = SCALE_4_0
    FOUR_POINT_THREE = SCALE_4_3
    PERCENTAGE = SCALE_PERCENTAGE


@dataclass(frozen=True)
class Letter:
    """A letter grade token such as "A-", "P" or "W"."""
    token: str


@dataclass(frozen=True)
class Percentage:
    """A grade on a 0-100 axis."""
    value: float


@dataclass(frozen=True)
class Points:
    """A grade already expressed as points on the owning course's scale."""
    value: float


Grade = Union[Letter, Percentage, Points]


def grade_value(grade: Grade):
    """Return the raw value behind a grade variant (the token or the number)."""
    if isinstance(grade, Letter):
        return grade.token
    return grade.value


@dataclass
class FinalGrade:
    """
    The grade a course reports after override reconciliation.

    grade is whatever should be displayed: the override value, the
    calculated letter, the direct grade, or "N/A".
    """
    grade: object
    grade_points: float
    is_overridden: bool
