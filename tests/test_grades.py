"""Tests for the CGPA engine."""
from decimal import Decimal
from fractions import Fraction

import pytest

from collegeportal.config import DEFAULT_GRADE_POINTS
from collegeportal.engines import GradeEngine, coerce_credits
from collegeportal.models import CourseGrade, GradePointTable, GradeStatus


def row(credits, grade="", identifier=None, name="Subject") -> CourseGrade:
    return CourseGrade(identifier=identifier or id(object()), credits=credits, grade=grade, name=name)


def test_default_table_values() -> None:
    assert DEFAULT_GRADE_POINTS.grade_options() == [
        ("O", 10), ("A+", 9), ("A", 8), ("B+", 7), ("B", 6),
        ("C+", 5), ("C", 4), ("D+", 3), ("D", 2), ("W", 1),
    ]


def test_weighted_average(engine: GradeEngine) -> None:
    """(3*10 + 4*7) / 7 = 58/7 = 8.2857..."""
    assert engine.compute_gpa([row(3, "O"), row(4, "B+")]) == 8.29


def test_ungraded_rows_leave_numerator_and_denominator(engine: GradeEngine) -> None:
    assert engine.compute_gpa([row(3, "O"), row(4, "")]) == 10.0


def test_unrecognized_grades_are_treated_as_ungraded(engine: GradeEngine) -> None:
    rows = [row(3, "O"), row(4, "F"), row(2, "a+"), row(2, None)]
    assert engine.compute_gpa(rows) == 10.0
    assert engine.completion_percentage(rows) == 25


@pytest.mark.parametrize("credits", [0, "0", "", None, "abc", -3, float("nan"), float("inf"), True])
def test_rows_without_positive_credits_are_skipped(engine: GradeEngine, credits) -> None:
    assert engine.compute_gpa([row(2, "A"), row(credits, "O")]) == 8.0


def test_empty_input(engine: GradeEngine) -> None:
    assert engine.compute_gpa([]) == 0
    assert engine.completion_percentage([]) == 0
    assert engine.total_credits([]) == 0


def test_nothing_graded_gives_zero(engine: GradeEngine) -> None:
    assert engine.compute_gpa([row(3), row(4)]) == 0


def test_string_and_fractional_credits(engine: GradeEngine) -> None:
    """Form input arrives as strings; lab credits are often 1.5."""
    rows = [row("4", "A+"), row(" 1.5 ", "O")]
    # (36 + 15) / 5.5 = 9.2727...
    assert engine.compute_gpa(rows) == 9.27


def test_gpa_rounds_half_away_from_zero() -> None:
    """A GPA landing exactly on x.xx5 rounds up."""
    table = GradePointTable(name="test", points={"X": 8, "Y": 9})
    engine = GradeEngine(table)
    # (8*7 + 9*1) / 8 = 8.125
    assert engine.compute_gpa([row(7, "X"), row(1, "Y")]) == 8.13


def test_withdrawn_counts_as_one_point_and_as_completed(engine: GradeEngine) -> None:
    rows = [row(3, "W"), row(3, "")]
    assert engine.compute_gpa(rows) == 1.0
    assert engine.completion_percentage(rows) == 50


def test_completion_percentage_rounding(engine: GradeEngine) -> None:
    assert engine.completion_percentage([row(3, "O"), row(3), row(3)]) == 33
    assert engine.completion_percentage([row(3, "O"), row(3, "A"), row(3)]) == 67


def test_completion_percentage_rounds_half_up(engine: GradeEngine) -> None:
    """1 of 8 is 12.5%, shown as 13."""
    rows = [row(1, "O")] + [row(1) for _ in range(7)]
    assert engine.completion_percentage(rows) == 13


def test_completion_ignores_credits(engine: GradeEngine) -> None:
    """A graded row with no credits still counts as completed."""
    assert engine.completion_percentage([row("", "O"), row(3)]) == 50


def test_total_credits_counts_every_row(engine: GradeEngine, semester_rows) -> None:
    assert engine.total_credits(semester_rows) == 14


def test_total_credits_treats_junk_as_zero(engine: GradeEngine) -> None:
    assert engine.total_credits([row("3"), row(None), row("x"), row(1.5)]) == 4.5


def test_total_credits_does_not_validate_sign(engine: GradeEngine) -> None:
    assert engine.total_credits([row(3), row(-1)]) == 2


def test_total_credits_avoids_float_drift(engine: GradeEngine) -> None:
    assert engine.total_credits([row(0.1), row(0.2)]) == 0.3


def test_engine_does_not_mutate_rows(engine: GradeEngine, semester_rows) -> None:
    before = [(r.identifier, r.credits, r.grade) for r in semester_rows]
    engine.summarize(semester_rows)
    assert [(r.identifier, r.credits, r.grade) for r in semester_rows] == before


def test_custom_table_is_used() -> None:
    """A 4-point scale evaluated side by side with the default one."""
    four_point = GradePointTable(name="4-point", points={"A": 4, "B": 3, "C": 2})
    rows = [row(3, "A"), row(3, "B"), row(3, "O")]

    assert GradeEngine(four_point).compute_gpa(rows) == 3.5
    assert GradeEngine(four_point).completion_percentage(rows) == 67
    assert GradeEngine().compute_gpa(rows) == 8.0


def test_grade_status_and_has_grade(engine: GradeEngine) -> None:
    assert engine.grade_status(row(3, "A")) is GradeStatus.GRADED
    assert engine.grade_status(row(3, "")) is GradeStatus.UNGRADED
    assert engine.grade_status(row(3, "Z")) is GradeStatus.UNGRADED
    assert engine.has_grade(row(3, "B+"))


def test_is_valid_course(engine: GradeEngine) -> None:
    assert engine.is_valid_course(row(3, name="Compiler Design"))
    assert not engine.is_valid_course(row(3, name="  "))
    assert not engine.is_valid_course(row(0, name="Compiler Design"))
    assert not engine.is_valid_course(row("", name="Compiler Design"))


def test_summarize(engine: GradeEngine, semester_rows) -> None:
    summary = engine.summarize(semester_rows)

    # (4*9 + 4*10 + 3*7) / 11 = 97/11 = 8.818...
    assert summary.gpa == 8.82
    assert summary.completion_percentage == 75
    assert summary.total_credits == 14
    assert summary.graded_count == 3
    assert summary.total_count == 4
    assert not summary.is_complete


def test_summarize_accepts_generators(engine: GradeEngine) -> None:
    summary = engine.summarize(r for r in [row(3, "O"), row(4, "B+")])
    assert summary.gpa == 8.29
    assert summary.is_complete


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3, Decimal(3)),
        (1.5, Decimal("1.5")),
        (0.1, Decimal("0.1")),
        ("2", Decimal(2)),
        (" 4.0 ", Decimal("4.0")),
        (Fraction(3, 2), Decimal("1.5")),
        (Decimal("2.5"), Decimal("2.5")),
        ("", None),
        (None, None),
        (False, None),
        ("nan", None),
        ("Infinity", None),
        ([3], None),
    ],
)
def test_coerce_credits(value, expected) -> None:
    assert coerce_credits(value) == expected
