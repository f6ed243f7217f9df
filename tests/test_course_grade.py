import pytest

from grading.models import Assignment, FinalGrade, GpaScale, Letter, Percentage, Points

from .conftest import weighted


def test_weighted_average_and_points(make_course):
    course = make_course(assignments=weighted((50, 90), (50, 70)))

    assert course.calculated_grade == 80.0
    assert course.calculated_grade_points == 2.7
    assert course.calculated_grade_letter == "B-"
    assert course.grade_points == 2.7


def test_weights_need_not_sum_to_100(engine, make_course):
    partial = make_course(assignments=weighted((10, 80), (10, 90)))
    assert engine.calculate_weighted_grade(partial) == pytest.approx(85.0)


def test_weight_rescaling_does_not_change_grade(engine, make_course):
    small = make_course(assignments=weighted((20, 80), (30, 90)))
    large = make_course(assignments=weighted((40, 80), (60, 90)))

    assert engine.calculate_weighted_grade(small) == pytest.approx(
        engine.calculate_weighted_grade(large)
    )
    assert small.calculated_grade == large.calculated_grade


def test_zero_weight_assignments_give_no_calculated_grade(engine, make_course):
    course = make_course(assignments=weighted((0, 95), (0, 85)))

    assert engine.calculate_weighted_grade(course) is None
    assert course.calculated_grade is None
    assert course.calculated_grade_points is None
    assert course.calculated_grade_letter is None


def test_letter_assignment_grades_use_nominal_percentage(make_course):
    course = make_course(assignments=[
        Assignment(name="Essay", grade=Letter("B"), weight=50),
        Assignment(name="Exam", grade=Percentage(93), weight=50),
    ])
    assert course.calculated_grade == 88.0


def test_failed_letter_assignment_counts_as_zero(make_course):
    course = make_course(assignments=[
        Assignment(name="Essay", grade=Letter("F"), weight=50),
        Assignment(name="Exam", grade=Percentage(100), weight=50),
    ])
    assert course.calculated_grade == 50.0


def test_calculated_grade_rounds_to_one_decimal(make_course):
    course = make_course(assignments=weighted((1, 90), (1, 90), (1, 91)))
    assert course.calculated_grade == 90.3


def test_calculated_points_on_course_scale(make_course):
    course = make_course(
        gpa_scale=GpaScale.FOUR_POINT_THREE,
        assignments=weighted((1, 98)),
    )
    assert course.calculated_grade_points == 4.3
    assert course.calculated_grade_letter == "A+"


def test_percentage_scale_keeps_calculated_percentage(make_course):
    course = make_course(gpa_scale=GpaScale.PERCENTAGE, assignments=weighted((1, 85)))

    assert course.calculated_grade_points == 85
    assert course.calculated_grade_letter == "B"


def test_direct_letter_grade_on_four_point_three(make_course):
    course = make_course(gpa_scale=GpaScale.FOUR_POINT_THREE, grade=Letter("B+"))
    assert course.grade_points == 3.3


def test_direct_percentage_on_percentage_scale(make_course):
    course = make_course(gpa_scale=GpaScale.PERCENTAGE, grade=Percentage(85))
    assert course.grade_points == 85


def test_direct_points_pass_through(make_course):
    course = make_course(grade=Points(3.7))
    assert course.grade_points == 3.7


def test_direct_percentage_on_four_point(make_course):
    course = make_course(grade=Percentage(85))
    assert course.grade_points == 3.0


def test_calculated_grade_beats_direct_grade(engine, make_course):
    course = make_course(grade=Letter("A"), assignments=weighted((1, 78)))

    assert course.grade_points == 2.3
    assert engine.get_final_grade(course) == FinalGrade("C+", 2.3, False)


def test_final_grade_falls_back_to_direct(engine, make_course):
    course = make_course(grade=Letter("B"))
    assert engine.get_final_grade(course) == FinalGrade("B", 3.0, False)


def test_empty_course_has_no_grade(engine, make_course):
    course = make_course()

    assert course.grade_points == 0.0
    assert engine.get_final_grade(course) == FinalGrade("N/A", 0.0, False)


def test_override_takes_priority(engine, make_course):
    course = make_course(assignments=weighted((50, 90), (50, 70)))
    engine.set_override(course, Letter("A"), GpaScale.FOUR_POINT)

    assert engine.get_final_grade(course) == FinalGrade("A", 4.0, True)
    # Natural fields are still recomputed underneath the override
    assert course.calculated_grade == 80.0


def test_override_converts_on_user_scale(engine, make_course):
    course = make_course(gpa_scale=GpaScale.FOUR_POINT)

    engine.set_override(course, Letter("A+"), GpaScale.FOUR_POINT_THREE)
    assert course.grade_override_points == 4.3

    engine.set_override(course, Percentage(91), GpaScale.FOUR_POINT)
    assert course.grade_override_points == 3.7

    engine.set_override(course, Percentage(91), GpaScale.PERCENTAGE)
    assert course.grade_override_points == 91


def test_revert_restores_natural_grade(engine, make_course):
    course = make_course(assignments=weighted((50, 90), (50, 70)))
    before = engine.get_final_grade(course)

    engine.set_override(course, Letter("A"), GpaScale.FOUR_POINT)
    engine.revert_override(course)

    assert engine.get_final_grade(course) == before
    assert course.grade_override is None
    assert course.grade_override_points is None


def test_revert_without_override_is_harmless(engine, make_course):
    course = make_course(grade=Letter("B"))
    engine.revert_override(course)
    engine.revert_override(course)

    assert engine.get_final_grade(course) == FinalGrade("B", 3.0, False)


def test_recompute_clears_stale_calculated_fields(engine, make_course):
    course = make_course(grade=Letter("B"), assignments=weighted((1, 95)))
    assert course.calculated_grade == 95.0

    course.assignments = []
    engine.recompute(course)

    assert course.calculated_grade is None
    assert course.grade_points == 3.0
