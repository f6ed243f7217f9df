"""
Course Grade Engine.

This module computes a single course's grade: the weighted average of its
assignments, the points for a direct end-of-term grade, and the final
grade after a manual override is taken into account.
"""

import logging
from typing import Optional

from ..config import NO_GRADE
from ..models import (
    Course,
    FinalGrade,
    Grade,
    GpaScale,
    Letter,
    Percentage,
    Points,
    grade_value,
)
from .conversion import GradeConverter

logger = logging.getLogger(__name__)


class CourseGradeEngine:
    """
    Calculates and reconciles the grade of one course.

    ═══════════════════════════════════════════════════════════════════════════
    WHERE A COURSE GETS ITS GRADE
    ═══════════════════════════════════════════════════════════════════════════

    1. OVERRIDE:    the user typed a grade in by hand. Always wins.
    2. CALCULATED:  weighted average of the course's assignments.
    3. DIRECT:      a single end-of-term grade with no assignments.
    4. NOTHING:     "N/A", worth 0 points.

    Natural grades (2 and 3) are converted on the COURSE's own scale.
    Overrides are converted on the USER's scale, because that is the scale
    the override was entered against.

    ═══════════════════════════════════════════════════════════════════════════
    """

    def __init__(self, converter: Optional[GradeConverter] = None):
        self.converter = converter or GradeConverter()

    def calculate_weighted_grade(self, course: Course) -> Optional[float]:
        """
        Weighted average percentage of the course's assignments.

        Weights are normalized by the total weight present, so two
        assignments at 10% each still average to a 0-100 value.

        Returns:
            The unrounded percentage, or None if no assignment carries weight
        """
        total_weighted_grade = 0.0
        total_weight = 0.0

        for assignment in course.assignments:
            weight = assignment.weight or 0.0
            total_weighted_grade += self._assignment_percentage(assignment.grade) * weight
            total_weight += weight

        if total_weight <= 0:
            return None
        return total_weighted_grade / total_weight

    def _assignment_percentage(self, grade: Grade) -> float:
        if isinstance(grade, Letter):
            return self.converter.letter_to_percentage(grade.token)
        if isinstance(grade, (Percentage, Points)):
            return grade.value
        return 0.0

    def direct_grade_points(self, course: Course) -> float:
        """
        Points for the course's direct grade on the course's own scale.

        The grade variant was chosen when the record was read (see
        RecordParser.parse_direct_grade): values inside the scale's point
        range are already points, larger numbers are percentages, and
        anything non-numeric is a letter.
        """
        if course.grade is None:
            return 0.0
        return self.converter.grade_to_points(course.grade, course.gpa_scale)

    def recompute(self, course: Course) -> Course:
        """
        Refresh every derived grade field on the course.

        Runs each time a course is saved. Override fields are left alone.

        Derived fields after this call:
            calculated_grade / _points / _letter  - None if no weighted assignments
            grade_points  - calculated points, else direct-grade points, else 0.0
        """
        final_percentage = self.calculate_weighted_grade(course)

        if final_percentage is None:
            course.calculated_grade = None
            course.calculated_grade_points = None
            course.calculated_grade_letter = None
        else:
            course.calculated_grade = round(final_percentage, 1)
            course.calculated_grade_points = self.converter.percentage_to_points(
                final_percentage, course.gpa_scale
            )
            course.calculated_grade_letter = self.converter.points_to_letter(
                course.calculated_grade_points, course.gpa_scale
            )

        if course.calculated_grade_points is not None:
            course.grade_points = course.calculated_grade_points
        else:
            course.grade_points = self.direct_grade_points(course)

        logger.debug(
            "Recomputed %s: calculated=%s points=%s",
            course.name, course.calculated_grade, course.grade_points,
        )
        return course

    def get_final_grade(self, course: Course) -> FinalGrade:
        """
        Resolve the grade a course reports, in strict priority order.

        Returns:
            FinalGrade(grade, grade_points, is_overridden)
        """
        if course.grade_override is not None:
            return FinalGrade(
                grade=grade_value(course.grade_override),
                grade_points=course.grade_override_points,
                is_overridden=True,
            )

        if course.calculated_grade is not None:
            # Prefer the letter for display when there is one
            display = course.calculated_grade_letter or course.calculated_grade
            return FinalGrade(
                grade=display,
                grade_points=course.calculated_grade_points,
                is_overridden=False,
            )

        if course.grade is not None:
            return FinalGrade(
                grade=grade_value(course.grade),
                grade_points=course.grade_points,
                is_overridden=False,
            )

        return FinalGrade(grade=NO_GRADE, grade_points=0.0, is_overridden=False)

    def override_points(self, override: Grade, user_scale: GpaScale) -> float:
        """
        Points for an override value on the user's scale.

        Letters use the user's letter table, percentages the user's
        breakpoints, and Points pass through.
        """
        return self.converter.grade_to_points(override, user_scale)

    def set_override(self, course: Course, override: Grade, user_scale: GpaScale) -> Course:
        """Set a manual grade override and recompute the course."""
        course.grade_override = override
        course.grade_override_points = self.override_points(override, user_scale)
        logger.debug(
            "Override on %s: %s -> %s points (%s scale)",
            course.name, override, course.grade_override_points, user_scale.value,
        )
        return self.recompute(course)

    def revert_override(self, course: Course) -> Course:
        """
        Clear the override so the natural grade shows again.

        Safe to call on a course that has no override.
        """
        course.grade_override = None
        course.grade_override_points = None
        return self.recompute(course)
