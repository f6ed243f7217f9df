"""
GPA Tracker - Main Orchestrator.

This module contains the GPATracker class that connects the data layer
and the grade engines to the presentation layer.

NOTE: Don't run this file directly. Run from the repository root:
    python3 -m grading summary
"""

import logging
from typing import Optional

from .data import DataLoader, RecordParser
from .engines import (
    GradeConverter,
    CourseGradeEngine,
    GPAAggregationEngine,
    GradePredictionEngine,
)
from .models import Course, FinalExamPrediction, GPASummary, GpaScale
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class GPATracker:
    """
    Main interface for the grade engine.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Loads an account export and parses it into Course objects
    2. Recomputes every course, as saving a course would
    3. Calls the engines for summaries, overrides and predictions
    4. Passes the results to the display, and optionally writes them back

    TO CHANGE THE UI:
    -----------------
    Replace `self.display = TerminalDisplay()` with your custom display class.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        tracker = GPATracker()

        summary = tracker.run_summary("data/example_export.json")

        course = tracker.set_override("data/example_export.json", "Calculus I", "A-",
                                      write=True)
    """

    def __init__(self, loader: Optional[DataLoader] = None):
        self.loader = loader or DataLoader()
        self.converter = GradeConverter()
        self.parser = RecordParser(self.converter)
        self.course_engine = CourseGradeEngine(self.converter)
        self.aggregation_engine = GPAAggregationEngine(self.course_engine)
        self.prediction_engine = GradePredictionEngine()

        self.display = TerminalDisplay()

    def load(self, export_path=None) -> dict:
        """
        Load, parse and recompute an export.

        Returns:
            {"user": User, "courses": [Course, ...]}
        """
        export_data = self.loader.load_export(export_path)
        state = self.parser.parse(export_data)
        for course in state["courses"]:
            self.course_engine.recompute(course)
        logger.debug("Loaded %d courses for %s", len(state["courses"]), state["user"].name)
        return state

    def save(self, state: dict, export_path=None):
        """Write recomputed courses back into the export file."""
        export_data = dict(self.loader.load_export(export_path))
        export_data["courses"] = [self.parser.to_record(c) for c in state["courses"]]
        return self.loader.save_export(export_data, export_path)

    def find_course(self, courses: list, name: str) -> Optional[Course]:
        """Find a course by name or code, case-insensitively."""
        key = name.strip().lower()
        for course in courses:
            if course.name.lower() == key or (course.code and course.code.lower() == key):
                return course
        return None

    def run_summary(self, export_path=None, scale: Optional[GpaScale] = None) -> GPASummary:
        """
        Compute and display the GPA summary for an export.

        Args:
            export_path: Export file (default: the example export)
            scale: Display scale; defaults to the user's preferred scale

        Returns:
            GPASummary
        """
        state = self.load(export_path)
        user = state["user"]
        courses = state["courses"]
        scale = scale or user.gpa_scale

        summary = self.aggregation_engine.summary(courses, user.gpa_scale, scale)

        self.display.print_user_info(user)
        self.display.print_courses(
            [(c, self.course_engine.get_final_grade(c)) for c in courses]
        )
        self.display.print_summary(summary)
        return summary

    def show_course(self, export_path, name: str) -> Optional[Course]:
        """Display a single course. Returns None if it is not in the export."""
        state = self.load(export_path)
        course = self.find_course(state["courses"], name)
        if course is None:
            self.display.print_error(f"Course '{name}' not found")
            return None
        self.display.print_course_detail(course, self.course_engine.get_final_grade(course))
        return course

    def set_override(self, export_path, name: str, raw_value,
                     write: bool = False) -> Optional[Course]:
        """
        Override a course's grade, converting on the user's scale.

        Args:
            raw_value: Letter ("A-") or percentage (91 or "91")
            write: Save the result back to the export file
        """
        state = self.load(export_path)
        course = self.find_course(state["courses"], name)
        if course is None:
            self.display.print_error(f"Course '{name}' not found")
            return None

        override = self.parser.parse_override(raw_value)
        if override is None:
            self.display.print_error("Override value is required")
            return None

        self.course_engine.set_override(course, override, state["user"].gpa_scale)
        self.display.print_course_detail(course, self.course_engine.get_final_grade(course))
        if write:
            self.save(state, export_path)
        return course

    def revert_override(self, export_path, name: str, write: bool = False) -> Optional[Course]:
        """Clear a course's override so its natural grade applies again."""
        state = self.load(export_path)
        course = self.find_course(state["courses"], name)
        if course is None:
            self.display.print_error(f"Course '{name}' not found")
            return None

        self.course_engine.revert_override(course)
        self.display.print_course_detail(course, self.course_engine.get_final_grade(course))
        if write:
            self.save(state, export_path)
        return course

    def predict_final(self, export_path, name: str, final_weight: float,
                      target_grade: float) -> Optional[FinalExamPrediction]:
        """Display what the course's final exam needs to reach target_grade."""
        state = self.load(export_path)
        course = self.find_course(state["courses"], name)
        if course is None:
            self.display.print_error(f"Course '{name}' not found")
            return None

        prediction = self.prediction_engine.predict(course, final_weight, target_grade)
        if prediction is None:
            self.display.print_error(
                f"Cannot predict '{course.name}': it needs weighted assignments "
                f"and a final weight between 0 and 100"
            )
            return None
        self.display.print_prediction(prediction)
        return prediction
