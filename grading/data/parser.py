"""
Record parsing.

This module turns raw course records (the tracker's JSON account export)
into Course objects, and serializes them back.
"""

import logging
import math
import re
from datetime import date
from typing import Optional

from ..config import DEFAULT_CATEGORY, DEFAULT_MAX_GRADE
from ..engines import GradeConverter
from ..models import (
    Assignment,
    AssignmentType,
    Course,
    Grade,
    GpaScale,
    Letter,
    Percentage,
    Points,
    User,
    grade_value,
)

logger = logging.getLogger(__name__)

# A single capital letter with an optional +/- ("A", "B+", "C-")
LETTER_PATTERN = re.compile(r"^[A-Z][+-]?$")

# First four-digit run in a year field ("2024", "2024-25")
YEAR_PATTERN = re.compile(r"\d{4}")


class RecordParser:
    """
    Parses raw course records into Course objects.

    KEY RESPONSIBILITY: decide what a raw grade field means.

    A grade field in a record is either a number or a string, and the same
    field can mean different things. This is the only place that looks at
    the raw value; everything downstream gets a Letter, Percentage or
    Points.

    ASSIGNMENT GRADES:
        95        → Percentage(95)
        "B+"      → Letter("B+")
        "88.5"    → Percentage(88.5)
        "oops"    → Percentage(0)

    DIRECT COURSE GRADES (depends on the course's scale):
        3.7  on a 4.0 course  → Points(3.7)
        4.0  on a 4.0 course  → Points(4.0), never 4%
        85   on a 4.0 course  → Percentage(85)
        "B+"                  → Letter("B+")

    The direct-grade rule is a heuristic: a real percentage of 3 on a 4.0
    course is read as 3.0 points.
    """

    def __init__(self, converter: Optional[GradeConverter] = None):
        self.converter = converter or GradeConverter()

    def parse(self, export_data: dict) -> dict:
        """
        Parse a full account export.

        Args:
            export_data: {"user": {...}, "courses": [{...}, ...]}

        Returns:
            {
                "user": User,
                "courses": [Course, ...],
            }
        """
        user = self.parse_user(export_data.get("user", {}) or {})
        courses = [
            self.parse_course(raw, user.gpa_scale)
            for raw in export_data.get("courses", []) or []
        ]
        return {"user": user, "courses": courses}

    def parse_user(self, raw: dict) -> User:
        name = raw.get("name") or " ".join(
            part for part in (raw.get("firstName"), raw.get("lastName")) if part
        )
        return User(
            name=name,
            email=raw.get("email", ""),
            gpa_scale=self.parse_scale(raw.get("gpaScale")),
        )

    def parse_scale(self, raw) -> GpaScale:
        """Read a scale string. Missing or unknown values fall back to 4.0."""
        if raw is None:
            return GpaScale.FOUR_POINT
        try:
            return GpaScale(str(raw).strip())
        except ValueError:
            logger.warning("Unknown GPA scale %r, using 4.0", raw)
            return GpaScale.FOUR_POINT

    def parse_course(self, raw: dict, user_scale: GpaScale = GpaScale.FOUR_POINT) -> Course:
        """
        Parse a single course record.

        Cached derived fields from the record are carried over as-is; call
        CourseGradeEngine.recompute to refresh them. A stored override
        without stored points gets its points computed on user_scale.
        """
        scale = self.parse_scale(raw.get("gpaScale"))

        course = Course(
            name=raw.get("name", ""),
            credits=self._parse_credits(raw.get("credits")),
            semester=raw.get("semester", ""),
            year=self._parse_year(raw.get("year")),
            code=raw.get("code", "") or "",
            category=raw.get("category", DEFAULT_CATEGORY) or DEFAULT_CATEGORY,
            gpa_scale=scale,
            grade=self.parse_direct_grade(raw.get("grade"), scale),
            assignments=[self.parse_assignment(a) for a in raw.get("assignments", []) or []],
            is_completed=bool(raw.get("isCompleted", False)),
            notes=raw.get("notes", "") or "",
            target_grade=raw.get("targetGrade", "") or "",
            course_id=str(raw.get("_id", raw.get("id", "")) or ""),
            calculated_grade=self._as_number(raw.get("calculatedGrade")),
            calculated_grade_points=self._as_number(raw.get("calculatedGradePoints")),
            calculated_grade_letter=raw.get("calculatedGradeLetter"),
            grade_points=self._as_number(raw.get("gradePoints")) or 0.0,
        )

        override = self.parse_override(raw.get("gradeOverride"))
        if override is not None:
            course.grade_override = override
            points = self._as_number(raw.get("gradeOverridePoints"))
            if points is None:
                points = self.converter.grade_to_points(override, user_scale)
            course.grade_override_points = points

        return course

    def parse_assignment(self, raw: dict) -> Assignment:
        return Assignment(
            name=raw.get("name", ""),
            grade=self.parse_assignment_grade(raw.get("grade")),
            weight=self._as_number(raw.get("weight")) or 0.0,
            type=self._parse_assignment_type(raw.get("type")),
            max_grade=self._as_number(raw.get("maxGrade")) or DEFAULT_MAX_GRADE,
            due_date=self._parse_date(raw.get("dueDate")),
            notes=raw.get("notes", "") or "",
            is_completed=bool(raw.get("isCompleted", False)),
            assignment_id=str(raw.get("_id", raw.get("id", "")) or ""),
        )

    def parse_assignment_grade(self, raw) -> Grade:
        """Letter for a letter token, otherwise a Percentage (0 if unparseable)."""
        if isinstance(raw, str):
            token = raw.strip().upper()
            if LETTER_PATTERN.match(token):
                return Letter(token)
        value = self._as_number(raw)
        if value is None:
            logger.debug("Unparseable assignment grade %r, using 0", raw)
            return Percentage(0.0)
        return Percentage(value)

    def parse_direct_grade(self, raw, scale: GpaScale) -> Optional[Grade]:
        """
        Decide what a course's direct grade field holds.

        Numbers and numeric strings with 0 < value <= the scale's ceiling
        (4.0 or 4.3) are grade points. Other numbers are percentages. On
        the percentage scale every number is a percentage. Non-numeric
        strings are letters.
        """
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return None

        value = self._as_number(raw)
        if value is None:
            return Letter(str(raw).strip().upper())

        if scale != GpaScale.PERCENTAGE and 0 < value <= self.converter.scale_ceiling(scale):
            return Points(value)
        return Percentage(value)

    def parse_override(self, raw) -> Optional[Grade]:
        """Numbers and numeric strings are percentages; other strings are letters."""
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return None
        value = self._as_number(raw)
        if value is None:
            return Letter(str(raw).strip().upper())
        return Percentage(value)

    def _parse_credits(self, raw) -> float:
        value = self._as_number(raw)
        if value is None:
            if raw not in (None, ""):
                logger.warning("Unreadable credits %r, using 0", raw)
            return 0.0
        return value

    def _parse_year(self, raw) -> int:
        """Academic year as an int; "2024-25" reads as 2024, unreadable values as 0."""
        value = self._as_number(raw)
        if value is not None:
            return int(value)
        match = YEAR_PATTERN.search(str(raw or ""))
        if match:
            return int(match.group())
        if raw not in (None, ""):
            logger.warning("Unreadable year %r, using 0", raw)
        return 0

    def _parse_assignment_type(self, raw) -> AssignmentType:
        if raw is None:
            return AssignmentType.ASSIGNMENT
        try:
            return AssignmentType(raw)
        except ValueError:
            return AssignmentType.OTHER

    def _parse_date(self, raw) -> Optional[date]:
        if not raw:
            return None
        try:
            return date.fromisoformat(str(raw)[:10])
        except ValueError:
            logger.warning("Ignoring unreadable due date %r", raw)
            return None

    @staticmethod
    def _as_number(raw) -> Optional[float]:
        """Float value of a number or numeric string, else None."""
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, (int, float)):
            value = float(raw)
        elif isinstance(raw, str):
            try:
                value = float(raw.strip())
            except ValueError:
                return None
        else:
            return None
        return value if math.isfinite(value) else None

    # =========================================================================
    # SERIALIZATION
    # =========================================================================

    def to_record(self, course: Course) -> dict:
        """
        Serialize a course back to the export's camelCase record shape.

        Unset optional fields are left out.
        """
        record = {
            "name": course.name,
            "code": course.code,
            "credits": course.credits,
            "semester": course.semester,
            "year": course.year,
            "category": course.category,
            "gpaScale": course.gpa_scale.value,
            "isCompleted": course.is_completed,
            "assignments": [self._assignment_record(a) for a in course.assignments],
            "gradePoints": course.grade_points,
        }
        if course.course_id:
            record["_id"] = course.course_id

        optional = {
            "grade": grade_value(course.grade) if course.grade is not None else None,
            "calculatedGrade": course.calculated_grade,
            "calculatedGradePoints": course.calculated_grade_points,
            "calculatedGradeLetter": course.calculated_grade_letter,
            "gradeOverride": (
                grade_value(course.grade_override) if course.grade_override is not None else None
            ),
            "gradeOverridePoints": course.grade_override_points,
            "notes": course.notes or None,
            "targetGrade": course.target_grade or None,
        }
        record.update({k: v for k, v in optional.items() if v is not None})
        return record

    def _assignment_record(self, assignment: Assignment) -> dict:
        record = {
            "name": assignment.name,
            "type": assignment.type.value,
            "weight": assignment.weight,
            "grade": grade_value(assignment.grade),
            "maxGrade": assignment.max_grade,
            "isCompleted": assignment.is_completed,
        }
        if assignment.assignment_id:
            record["_id"] = assignment.assignment_id
        if assignment.due_date is not None:
            record["dueDate"] = assignment.due_date.isoformat()
        if assignment.notes:
            record["notes"] = assignment.notes
        return record
