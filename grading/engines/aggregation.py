"""
GPA Aggregation Engine.

This module combines course grades into overall, per-semester and
per-category GPAs.
"""

import logging
from typing import Optional

from ..config import EXCLUDED_GRADES
from ..models import Course, GPASummary, GpaScale, Letter
from .conversion import GradeConverter
from .course_grade import CourseGradeEngine

logger = logging.getLogger(__name__)


class GPAAggregationEngine:
    """
    Aggregates course grades into credit-weighted GPAs.

    TWO POLICIES:
    -------------
    There are two ways a GPA is computed, and they can legitimately disagree
    for a term that is still in progress.

    SUMMARY GPA (calculate_gpa, summary):
        Only courses marked completed, and never courses whose grade is
        W (withdrawn) or I (incomplete). Rounded to 2 decimals.

    DASHBOARD GPA (dashboard_gpa):
        Any course whose effective points are above 0, completed or not.
        Not rounded.

    SCALES:
    -------
    A course's natural points are on the course's scale; override points
    are on the user's scale. When a target scale is passed, natural points
    are rescaled from the course's scale and override points from
    user_scale (taken to be the target scale when not given). Without a
    target scale, points are summed as stored.
    """

    def __init__(self, course_engine: Optional[CourseGradeEngine] = None):
        self.course_engine = course_engine or CourseGradeEngine()
        self.converter: GradeConverter = self.course_engine.converter

    def counts_toward_gpa(self, course: Course) -> bool:
        """True if the course passes the summary filter (completed, not W/I)."""
        if not course.is_completed:
            return False
        if isinstance(course.grade, Letter) and course.grade.token in EXCLUDED_GRADES:
            return False
        return True

    def _course_points(self, course: Course, scale: Optional[GpaScale],
                       user_scale: Optional[GpaScale]) -> float:
        final = self.course_engine.get_final_grade(course)
        points = final.grade_points or 0.0
        if scale is None:
            return points
        if final.is_overridden:
            from_scale = user_scale or scale
        else:
            from_scale = course.gpa_scale
        return self.converter.convert_gpa(points, from_scale, scale)

    def calculate_gpa(self, courses: list, scale: Optional[GpaScale] = None,
                      user_scale: Optional[GpaScale] = None) -> float:
        """
        Credit-weighted GPA of the courses that pass the summary filter.

        Args:
            courses: List of Course objects
            scale: Scale to express the result on, or None to sum raw points
            user_scale: Scale the override points were entered on

        Returns:
            GPA rounded to 2 decimals, or 0.0 if no credits qualify
        """
        total_points = 0.0
        total_credits = 0.0

        for course in courses:
            if not self.counts_toward_gpa(course):
                continue
            total_points += self._course_points(course, scale, user_scale) * course.credits
            total_credits += course.credits

        if total_credits <= 0:
            return 0.0
        return round(total_points / total_credits, 2)

    def total_credits(self, courses: list) -> float:
        """Credits of the courses that pass the summary filter."""
        return sum(c.credits for c in courses if self.counts_toward_gpa(c))

    def semester_gpas(self, courses: list, scale: Optional[GpaScale] = None,
                      user_scale: Optional[GpaScale] = None) -> dict:
        """GPA per "{semester} {year}" key, in first-seen order."""
        groups = {}
        for course in courses:
            groups.setdefault(course.term, []).append(course)
        return {
            term: self.calculate_gpa(group, scale, user_scale) for term, group in groups.items()
        }

    def category_gpas(self, courses: list, scale: Optional[GpaScale] = None,
                      user_scale: Optional[GpaScale] = None) -> dict:
        """GPA per course category, in first-seen order."""
        groups = {}
        for course in courses:
            groups.setdefault(course.category, []).append(course)
        return {
            category: self.calculate_gpa(group, scale, user_scale)
            for category, group in groups.items()
        }

    def dashboard_gpa(self, courses: list) -> float:
        """
        GPA shown on the dashboard.

        Uses override points when a course is overridden and the cached
        grade_points otherwise, and counts every course whose points are
        above 0. Completion and W/I status are ignored.
        """
        total_points = 0.0
        total_credits = 0.0

        for course in courses:
            if course.is_overridden:
                points = course.grade_override_points or 0.0
            else:
                points = course.grade_points or 0.0

            if points > 0:
                total_points += points * course.credits
                total_credits += course.credits

        return total_points / total_credits if total_credits > 0 else 0.0

    def summary(self, courses: list, user_scale: Optional[GpaScale] = None,
                scale: Optional[GpaScale] = None) -> GPASummary:
        """
        Build the full GPA summary for a user's courses.

        Args:
            courses: List of Course objects
            user_scale: The user's preferred scale (overrides are stored on it)
            scale: Scale to report on; defaults to user_scale

        Returns:
            GPASummary with overall, semester and category GPAs on scale
        """
        scale = scale or user_scale
        result = GPASummary(
            overall_gpa=self.calculate_gpa(courses, scale, user_scale),
            semester_gpas=self.semester_gpas(courses, scale, user_scale),
            category_gpas=self.category_gpas(courses, scale, user_scale),
            total_credits=self.total_credits(courses),
            total_courses=len(courses),
            scale=scale,
            dashboard_gpa=self.dashboard_gpa(courses),
        )
        logger.debug(
            "Summary over %d courses: overall=%s credits=%s",
            result.total_courses, result.overall_gpa, result.total_credits,
        )
        return result
