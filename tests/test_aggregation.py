import pytest

from grading.models import GpaScale, Letter, Points

from .conftest import weighted


def test_credit_weighted_gpa(aggregator, make_course):
    courses = [
        make_course(credits=3, grade=Points(4.0)),
        make_course(credits=4, grade=Points(3.0)),
    ]
    assert aggregator.calculate_gpa(courses) == 3.43


def test_withdrawn_and_incomplete_grades_are_excluded(aggregator, make_course):
    counted = make_course(credits=3, grade=Letter("A"))
    withdrawn = make_course(credits=4, grade=Letter("W"))
    incomplete = make_course(credits=4, grade=Letter("I"))

    courses = [counted, withdrawn, incomplete]

    assert aggregator.calculate_gpa(courses) == 4.0
    assert aggregator.total_credits(courses) == 3


def test_in_progress_courses_are_excluded(aggregator, make_course):
    done = make_course(credits=3, grade=Letter("B"))
    ongoing = make_course(credits=3, grade=Letter("F"), is_completed=False)

    assert aggregator.calculate_gpa([done, ongoing]) == 3.0


def test_no_qualifying_credits_is_zero(aggregator, make_course):
    assert aggregator.calculate_gpa([]) == 0.0
    assert aggregator.calculate_gpa([make_course(credits=0, grade=Letter("A"))]) == 0.0
    assert aggregator.calculate_gpa([make_course(is_completed=False, grade=Letter("A"))]) == 0.0


def test_override_points_feed_the_gpa(engine, aggregator, make_course):
    course = make_course(credits=3, grade=Letter("C"))
    engine.set_override(course, Letter("A-"), GpaScale.FOUR_POINT)

    assert aggregator.calculate_gpa([course]) == 3.7


def test_without_scale_points_are_summed_as_stored(aggregator, make_course):
    course = make_course(gpa_scale=GpaScale.FOUR_POINT_THREE, grade=Letter("A+"))
    assert aggregator.calculate_gpa([course]) == 4.3


def test_target_scale_rescales_natural_points(aggregator, make_course):
    courses = [
        make_course(credits=3, gpa_scale=GpaScale.FOUR_POINT_THREE, grade=Letter("A+")),
        make_course(credits=3, gpa_scale=GpaScale.FOUR_POINT, grade=Letter("B")),
    ]
    assert aggregator.calculate_gpa(courses, GpaScale.FOUR_POINT) == 3.5


def test_target_scale_leaves_override_points_alone(engine, aggregator, make_course):
    course = make_course(gpa_scale=GpaScale.FOUR_POINT_THREE, grade=Letter("C"))
    engine.set_override(course, Letter("A"), GpaScale.FOUR_POINT)

    assert aggregator.calculate_gpa([course], GpaScale.FOUR_POINT) == 4.0


def test_override_points_rescaled_from_user_scale(engine, aggregator, make_course):
    natural = make_course(credits=3, assignments=weighted((1, 95)))
    overridden = make_course(credits=3, assignments=weighted((1, 95)))
    engine.set_override(overridden, Letter("A"), GpaScale.FOUR_POINT)

    courses = [natural, overridden]
    assert aggregator.calculate_gpa(courses, GpaScale.PERCENTAGE, GpaScale.FOUR_POINT) == 100.0
    assert aggregator.semester_gpas(courses, GpaScale.PERCENTAGE, GpaScale.FOUR_POINT) == {
        "Fall 2024": 100.0
    }


def test_summary_on_another_scale_rescales_overrides(engine, aggregator, make_course):
    course = make_course(credits=3, category="Major", grade=Letter("C"))
    engine.set_override(course, Letter("B"), GpaScale.FOUR_POINT)

    summary = aggregator.summary([course], GpaScale.FOUR_POINT, GpaScale.PERCENTAGE)

    assert summary.scale == GpaScale.PERCENTAGE
    assert summary.overall_gpa == 75.0
    assert summary.category_gpas == {"Major": 75.0}


def test_percentage_course_on_four_point_summary(aggregator, make_course):
    course = make_course(gpa_scale=GpaScale.PERCENTAGE, assignments=weighted((1, 75)))
    assert aggregator.calculate_gpa([course], GpaScale.FOUR_POINT) == 3.0


def test_semester_gpas_group_by_term(aggregator, make_course):
    courses = [
        make_course(semester="Fall", year=2024, grade=Letter("A")),
        make_course(semester="Spring", year=2025, grade=Letter("B")),
        make_course(semester="Fall", year=2024, grade=Letter("C")),
    ]
    assert aggregator.semester_gpas(courses) == {"Fall 2024": 3.0, "Spring 2025": 3.0}
    assert list(aggregator.semester_gpas(courses)) == ["Fall 2024", "Spring 2025"]


def test_semester_with_only_withdrawals_is_zero(aggregator, make_course):
    courses = [make_course(semester="Summer", year=2025, grade=Letter("W"))]
    assert aggregator.semester_gpas(courses) == {"Summer 2025": 0.0}


def test_category_gpas(aggregator, make_course):
    courses = [
        make_course(category="Major", credits=4, grade=Letter("A")),
        make_course(category="Major", credits=4, grade=Letter("B")),
        make_course(category="General", credits=3, grade=Letter("B+")),
    ]
    assert aggregator.category_gpas(courses) == {"Major": 3.5, "General": 3.3}


def test_dashboard_counts_any_course_with_points(aggregator, make_course):
    courses = [
        make_course(credits=3, grade=Points(4.0)),
        make_course(credits=4, grade=Points(3.0), is_completed=False),
        make_course(credits=3, grade=Letter("W")),
        make_course(credits=2, is_completed=False),
    ]
    assert aggregator.dashboard_gpa(courses) == pytest.approx(24 / 7)
    # The summary policy only sees the first course
    assert aggregator.calculate_gpa(courses) == 4.0


def test_dashboard_uses_override_points(engine, aggregator, make_course):
    course = make_course(credits=3, grade=Letter("C"))
    engine.set_override(course, Letter("A"), GpaScale.FOUR_POINT)

    assert aggregator.dashboard_gpa([course]) == 4.0


def test_dashboard_with_nothing_graded_is_zero(aggregator, make_course):
    assert aggregator.dashboard_gpa([make_course(), make_course()]) == 0.0


def test_summary(aggregator, make_course):
    courses = [
        make_course(credits=3, category="Major", grade=Points(4.0)),
        make_course(credits=4, category="General", grade=Points(3.0)),
        make_course(credits=3, category="General", grade=Letter("W")),
    ]
    summary = aggregator.summary(courses, GpaScale.FOUR_POINT)

    assert summary.overall_gpa == 3.43
    assert summary.semester_gpas == {"Fall 2024": 3.43}
    assert summary.category_gpas == {"Major": 4.0, "General": 3.0}
    assert summary.total_credits == 7
    assert summary.total_courses == 3
    assert summary.scale == GpaScale.FOUR_POINT
