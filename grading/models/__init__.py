"""
Data models for the grade engine.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .grade import GpaScale, Letter, Percentage, Points, Grade, FinalGrade, grade_value
from .course import Assignment, AssignmentType, Course, User
from .summary import GPASummary, FinalExamPrediction

__all__ = [
    # Grade values
    "GpaScale",
    "Letter",
    "Percentage",
    "Points",
    "Grade",
    "FinalGrade",
    "grade_value",
    # Course models
    "Assignment",
    "AssignmentType",
    "Course",
    "User",
    # Aggregate results
    "GPASummary",
    "FinalExamPrediction",
]
