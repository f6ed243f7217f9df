"""
Final exam prediction engine.

Answers the two questions students ask before a final: "what do I need on
the exam to get X?" and "what will my grade be if I score Y?".
"""

from typing import Optional

from ..models import Course, FinalExamPrediction


class GradePredictionEngine:
    """
    Projects a course grade forward over a final exam.

    The current grade is assumed to cover (100 - final_weight)% of the
    course and the final the remaining final_weight%.

    Example:
        current 85, final worth 30%, target 90
        → 85 × 0.70 = 59.5 already earned
        → (90 - 59.5) / 0.30 = 101.7 needed on the final
    """

    def _valid_weight(self, final_weight: float) -> bool:
        return 0 < final_weight <= 100

    def required_final_score(self, current_grade: float, final_weight: float,
                             target_grade: float) -> Optional[float]:
        """Score needed on the final to finish at target_grade, or None for a bad weight."""
        if not self._valid_weight(final_weight):
            return None
        current_contribution = current_grade * (100 - final_weight) / 100
        return round((target_grade - current_contribution) / (final_weight / 100), 1)

    def final_grade_with_exam(self, current_grade: float, final_weight: float,
                              exam_grade: float) -> Optional[float]:
        """Course percentage after scoring exam_grade on the final, or None for a bad weight."""
        if not self._valid_weight(final_weight):
            return None
        current_contribution = current_grade * (100 - final_weight) / 100
        exam_contribution = exam_grade * final_weight / 100
        return round(current_contribution + exam_contribution, 1)

    def predict(self, course: Course, final_weight: float,
                target_grade: float) -> Optional[FinalExamPrediction]:
        """
        Prediction for a course using its calculated weighted grade.

        Returns None if the course has no calculated grade yet or the
        weight is outside (0, 100].
        """
        if course.calculated_grade is None:
            return None

        required = self.required_final_score(course.calculated_grade, final_weight, target_grade)
        if required is None:
            return None

        return FinalExamPrediction(
            course_name=course.name,
            current_grade=course.calculated_grade,
            final_weight=final_weight,
            target_grade=target_grade,
            required_score=required,
            is_achievable=required <= 100,
        )
