"""
Aggregate result data models.

Contains dataclasses returned by the aggregation and prediction engines.
"""

from dataclasses import dataclass, field
from typing import Optional

from .grade import GpaScale


@dataclass
class GPASummary:
    """
    GPA figures across a student's whole record.

    Only completed courses that were not withdrawn (W) or left incomplete (I)
    contribute to any of the GPA values or to total_credits. total_courses
    counts every course regardless.

    Example:
        overall_gpa: 3.43
        semester_gpas: {"Fall 2024": 3.7, "Spring 2025": 3.2}
        category_gpas: {"Major": 3.5, "General": 3.3}
        total_credits: 7.0
        total_courses: 3
    """
    overall_gpa: float
    semester_gpas: dict = field(default_factory=dict)
    category_gpas: dict = field(default_factory=dict)
    total_credits: float = 0.0
    total_courses: int = 0
    scale: Optional[GpaScale] = None      # Scale the figures are expressed on
    dashboard_gpa: float = 0.0            # Any course with points > 0, see GPAAggregationEngine


@dataclass
class FinalExamPrediction:
    """What a student needs on a final exam to reach a target grade."""
    course_name: str
    current_grade: float                  # Current weighted percentage
    final_weight: float                   # Final exam weight, percent of course
    target_grade: float                   # Desired course percentage
    required_score: float                 # Score needed on the final
    is_achievable: bool                   # False when required_score > 100
