"""
Grade calculation engines.

This package contains all the engines that perform the core grade and
GPA math. None of them print or touch the filesystem.
"""

from .conversion import GradeConverter
from .course_grade import CourseGradeEngine
from .aggregation import GPAAggregationEngine
from .prediction import GradePredictionEngine

__all__ = [
    "GradeConverter",
    "CourseGradeEngine",
    "GPAAggregationEngine",
    "GradePredictionEngine",
]
