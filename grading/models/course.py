"""
Course data models.

Contains the Course, Assignment and User dataclasses that represent a
student's gradebook, plus the AssignmentType enum.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

from ..config import DEFAULT_CATEGORY, DEFAULT_MAX_GRADE
from .grade import Grade, GpaScale


class AssignmentType(Enum):
    """Kinds of graded work a course can contain."""
    ASSIGNMENT = "Assignment"
    QUIZ = "Quiz"
    EXAM = "Exam"
    PROJECT = "Project"
    PARTICIPATION = "Participation"
    OTHER = "Other"


@dataclass
class Assignment:
    """
    A single graded item inside a course.

    Attributes:
        name: Assignment title
        grade: Percentage or Letter decided when the record was parsed
        weight: Percentage-point contribution to the course grade (0-100).
            Weights across a course do not have to sum to 100.
        type: AssignmentType
        max_grade: Denominator shown next to the grade
        due_date: Optional due date
        is_completed: Whether the student marked it done
    """
    name: str
    grade: Grade
    weight: float = 0.0
    type: AssignmentType = AssignmentType.ASSIGNMENT
    max_grade: float = DEFAULT_MAX_GRADE
    due_date: Optional[date] = None
    notes: str = ""
    is_completed: bool = False
    assignment_id: str = ""


@dataclass
class Course:
    """
    One course on a student's record.

    A course gets its natural grade from exactly one place: its weighted
    assignments, a direct end-of-term grade, or nothing at all. An override
    wins over whichever of those applies.

    Input fields (set by the user):
        name, code, credits, semester, year, category, gpa_scale,
        grade, assignments, is_completed

    Derived fields (written by CourseGradeEngine.recompute):
        calculated_grade          weighted percentage, 1 decimal
        calculated_grade_points   that percentage on gpa_scale
        calculated_grade_letter   display letter for the points
        grade_points              cached points used by the dashboard

    Override fields (written only by set_override / revert_override):
        grade_override, grade_override_points
    """
    name: str
    credits: float
    semester: str
    year: int
    code: str = ""
    category: str = DEFAULT_CATEGORY
    gpa_scale: GpaScale = GpaScale.FOUR_POINT
    grade: Optional[Grade] = None
    assignments: list = field(default_factory=list)  # List of Assignment objects
    is_completed: bool = False
    notes: str = ""
    target_grade: str = ""
    course_id: str = ""
    # Derived
    calculated_grade: Optional[float] = None
    calculated_grade_points: Optional[float] = None
    calculated_grade_letter: Optional[str] = None
    grade_points: float = 0.0
    # Override
    grade_override: Optional[Grade] = None
    grade_override_points: Optional[float] = None

    @property
    def term(self) -> str:
        """Semester grouping key, e.g. "Fall 2024"."""
        return f"{self.semester} {self.year}"

    @property
    def is_overridden(self) -> bool:
        return self.grade_override is not None


@dataclass
class User:
    """Owner of a set of courses and their preferred display scale."""
    name: str = ""
    email: str = ""
    gpa_scale: GpaScale = GpaScale.FOUR_POINT
