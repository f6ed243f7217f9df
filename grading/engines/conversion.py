"""
Grade conversion engine.

This module turns letters and percentages into grade points on each of
the supported scales, and back into display letters.
"""

import logging

from ..config import (
    PERCENTAGE_BREAKPOINTS_4_0,
    PERCENTAGE_BREAKPOINTS_4_3,
    LETTER_POINTS_4_0,
    LETTER_POINTS_4_3,
    LETTER_POINTS_PERCENTAGE,
    ASSIGNMENT_LETTER_PERCENTAGE,
    LETTER_ORDER,
    SCALE_CEILINGS,
)
from ..models import GpaScale, Grade, Letter, Percentage, Points

logger = logging.getLogger(__name__)


class GradeConverter:
    """
    Converts grade values between letters, percentages and grade points.

    SCALES:
    -------
    - 4.0: 93+ is 4.0. A+ and A are both 4.0.
    - 4.3: 97+ is 4.3. Only A+ reaches 4.3; A stays at 4.0.
    - percentage: numbers pass through unchanged; letters map to their
      nominal percentage (A+ 97, A 93, ... D- 60, F 50).

    Every lookup is permissive: an unknown letter is worth 0 rather than
    an error, so a malformed record still produces a number.
    """

    _BREAKPOINTS = {
        GpaScale.FOUR_POINT: PERCENTAGE_BREAKPOINTS_4_0,
        GpaScale.FOUR_POINT_THREE: PERCENTAGE_BREAKPOINTS_4_3,
    }

    _LETTER_TABLES = {
        GpaScale.FOUR_POINT: LETTER_POINTS_4_0,
        GpaScale.FOUR_POINT_THREE: LETTER_POINTS_4_3,
        GpaScale.PERCENTAGE: LETTER_POINTS_PERCENTAGE,
    }

    def scale_ceiling(self, scale: GpaScale) -> float:
        """Highest value a grade can take on the scale (4.0, 4.3 or 100)."""
        return SCALE_CEILINGS[scale.value]

    def percentage_to_points(self, percentage: float, scale: GpaScale) -> float:
        """
        Map a 0-100 percentage onto a scale.

        Breakpoints are checked top-down with >=, so exactly 93 is a 4.0
        and 92.99 is a 3.7.
        """
        if scale == GpaScale.PERCENTAGE:
            return percentage

        for threshold, points in self._BREAKPOINTS[scale]:
            if percentage >= threshold:
                return points
        return 0.0

    def letter_to_points(self, letter: str, scale: GpaScale) -> float:
        """Look up a letter token in the scale's table. Unknown tokens are 0."""
        table = self._LETTER_TABLES[scale]
        if letter not in table:
            logger.debug("Unknown letter grade %r on %s scale, using 0", letter, scale.value)
            return 0.0
        return float(table[letter])

    def letter_to_percentage(self, letter: str) -> float:
        """
        Percentage an assignment letter grade contributes to a weighted average.

        This is not the percentage-scale course table: here F counts as 0.
        """
        return float(ASSIGNMENT_LETTER_PERCENTAGE.get(letter, 0))

    def grade_to_points(self, grade: Grade, scale: GpaScale) -> float:
        """Convert any grade variant to points on the given scale."""
        if isinstance(grade, Letter):
            return self.letter_to_points(grade.token, scale)
        if isinstance(grade, Percentage):
            return self.percentage_to_points(grade.value, scale)
        if isinstance(grade, Points):
            return grade.value
        return 0.0

    def points_to_letter(self, points: float, scale: GpaScale) -> str:
        """
        Turn points back into a display letter.

        The inverse of the letter tables: the best letter whose value does
        not exceed the points. On the percentage scale the letter
        percentages act as breakpoints (97 A+, 93 A, ... 60 D-).
        """
        points = round(points, 2)
        for threshold, letter in self._letter_thresholds(scale):
            if points >= threshold:
                return letter
        return "F"

    def _letter_thresholds(self, scale: GpaScale) -> list:
        if scale == GpaScale.PERCENTAGE:
            table = ASSIGNMENT_LETTER_PERCENTAGE
        else:
            table = self._LETTER_TABLES[scale]

        thresholds = []
        for i, letter in enumerate(LETTER_ORDER):
            below = LETTER_ORDER[i + 1] if i + 1 < len(LETTER_ORDER) else None
            # A+ on the 4.0 scale is worth no more than A
            if below is not None and table[letter] <= table[below]:
                continue
            thresholds.append((table[letter], letter))
        return thresholds

    def convert_gpa(self, value: float, from_scale: GpaScale, to_scale: GpaScale) -> float:
        """
        Rescale a GPA proportionally from one scale to another.

        Goes through the 4.0 scale: 4.3 → 4.0 is ×4.0/4.3, percentage → 4.0
        is ×4.0/100, and the reverse on the way out.
        """
        if from_scale == to_scale:
            return value

        four_point = value
        if from_scale == GpaScale.FOUR_POINT_THREE:
            four_point = value / 4.3 * 4.0
        elif from_scale == GpaScale.PERCENTAGE:
            four_point = value / 100 * 4.0

        if to_scale == GpaScale.FOUR_POINT_THREE:
            return four_point / 4.0 * 4.3
        if to_scale == GpaScale.PERCENTAGE:
            return four_point / 4.0 * 100
        return four_point

    def format_gpa(self, value: float, scale: GpaScale) -> str:
        """Format a GPA for display: "85.0%" or "3.43"."""
        if scale == GpaScale.PERCENTAGE:
            return f"{value:.1f}%"
        return f"{value:.2f}"
