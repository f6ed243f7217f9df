import pytest

from .conftest import weighted


def test_required_final_score(predictor):
    assert predictor.required_final_score(85, 30, 90) == 101.7
    assert predictor.required_final_score(80, 50, 80) == 80.0
    assert predictor.required_final_score(95, 20, 80) == 20.0


@pytest.mark.parametrize("weight", [0, -10, 120])
def test_invalid_final_weight(predictor, weight):
    assert predictor.required_final_score(85, weight, 90) is None
    assert predictor.final_grade_with_exam(85, weight, 90) is None


def test_final_grade_with_exam(predictor):
    assert predictor.final_grade_with_exam(85, 30, 70) == 80.5
    assert predictor.final_grade_with_exam(85, 100, 70) == 70.0


def test_predict_for_course(predictor, make_course):
    course = make_course(name="Physics I", assignments=weighted((50, 90), (50, 80)))
    prediction = predictor.predict(course, final_weight=25, target_grade=90)

    assert prediction.course_name == "Physics I"
    assert prediction.current_grade == 85.0
    assert prediction.required_score == 105.0
    assert prediction.is_achievable is False


def test_predict_achievable(predictor, make_course):
    course = make_course(assignments=weighted((1, 85)))
    prediction = predictor.predict(course, final_weight=40, target_grade=80)

    assert prediction.required_score == 72.5
    assert prediction.is_achievable is True


def test_predict_needs_calculated_grade(predictor, make_course):
    assert predictor.predict(make_course(), final_weight=30, target_grade=90) is None
