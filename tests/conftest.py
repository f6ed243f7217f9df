import pytest

from grading.data import RecordParser
from grading.engines import (
    CourseGradeEngine,
    GPAAggregationEngine,
    GradeConverter,
    GradePredictionEngine,
)
from grading.models import Assignment, Course, GpaScale, Percentage


@pytest.fixture
def converter():
    return GradeConverter()


@pytest.fixture
def engine(converter):
    return CourseGradeEngine(converter)


@pytest.fixture
def aggregator(engine):
    return GPAAggregationEngine(engine)


@pytest.fixture
def predictor():
    return GradePredictionEngine()


@pytest.fixture
def parser(converter):
    return RecordParser(converter)


@pytest.fixture
def make_course(engine):
    """Build and recompute a course; keyword args override the defaults."""

    def _make(**kwargs):
        defaults = {
            "name": "Course",
            "credits": 3.0,
            "semester": "Fall",
            "year": 2024,
            "gpa_scale": GpaScale.FOUR_POINT,
            "is_completed": True,
        }
        defaults.update(kwargs)
        return engine.recompute(Course(**defaults))

    return _make


def weighted(*pairs):
    """Assignments from (weight, percentage) pairs."""
    return [
        Assignment(name=f"A{i}", grade=Percentage(grade), weight=weight)
        for i, (weight, grade) in enumerate(pairs)
    ]
