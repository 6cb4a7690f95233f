"""
CGPA computation engine.

This module turns a list of CourseGrade rows into a grade point average
and the progress figures shown next to it.
"""

import logging
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Optional, Sequence

from ..config import DEFAULT_GRADE_POINTS
from ..models import CourseGrade, GradePointTable, GradeStatus, GradeSummary

logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")
_WHOLE = Decimal("1")


def coerce_credits(value) -> Optional[Decimal]:
    """
    Read a credit value the way the calculator form supplies it.

    Numbers and numeric strings ("3", " 1.5 ") are accepted. Anything else,
    including booleans, blanks, NaN and infinities, gives None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        value = repr(value)
    elif isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    elif not isinstance(value, (int, Decimal)):
        try:
            value = repr(float(value))
        except (TypeError, ValueError):
            return None
    try:
        result = Decimal(value)
    except InvalidOperation:
        return None
    return result if result.is_finite() else None


class GradeEngine:
    """
    Computes CGPA and progress from CourseGrade rows.

    CGPA FORMULA:
    -------------
        sum(points[grade] * credits) / sum(credits)

    taken over rows that have a grade known to the table AND positive
    credits. Every other row is "not graded yet" and is skipped without
    complaint: an empty list, or a list with nothing graded, gives 0.

    ROUNDING:
    ---------
    Arithmetic is done in Decimal and rounded half away from zero: the GPA
    to 2 places, the completion percentage to a whole number. So 8.125
    shows as 8.13 and 12.5% as 13%.

    The engine never changes the rows it is given. Snapshot the list first
    if something else may be editing it during the call.
    """

    def __init__(self, table: GradePointTable = DEFAULT_GRADE_POINTS):
        self.table = table

    def has_grade(self, row: CourseGrade) -> bool:
        """True if the row carries a grade present in the table."""
        grade = getattr(row, "grade", None)
        return bool(grade) and grade in self.table

    def grade_status(self, row: CourseGrade) -> GradeStatus:
        return GradeStatus.GRADED if self.has_grade(row) else GradeStatus.UNGRADED

    def is_valid_course(self, row: CourseGrade) -> bool:
        """True if the row has a non-blank name and positive credits."""
        name = getattr(row, "name", "") or ""
        credits = coerce_credits(getattr(row, "credits", None))
        return bool(name.strip()) and credits is not None and credits > 0

    def compute_gpa(self, rows: Iterable[CourseGrade]) -> float:
        """
        Credit-weighted grade point average, rounded to 2 decimal places.

        Example:
            O with 3 credits, B+ with 4 credits
            (3*10 + 4*7) / (3 + 4) = 58/7 -> 8.29
        """
        points = Decimal(0)
        weight = Decimal(0)

        for row in rows:
            if not self.has_grade(row):
                continue
            credits = coerce_credits(row.credits)
            if credits is None or credits <= 0:
                logger.debug("Skipping %r: credits %r not positive", row.identifier, row.credits)
                continue
            points += self.table[row.grade] * credits
            weight += credits

        if weight == 0:
            return 0.0
        return float((points / weight).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))

    def graded_count(self, rows: Iterable[CourseGrade]) -> int:
        return sum(1 for row in rows if self.has_grade(row))

    def completion_percentage(self, rows: Sequence[CourseGrade]) -> int:
        """Share of rows with a recognized grade, as a whole percent (0-100)."""
        rows = list(rows)
        if not rows:
            return 0
        ratio = Decimal(100 * self.graded_count(rows)) / Decimal(len(rows))
        return int(ratio.quantize(_WHOLE, rounding=ROUND_HALF_UP))

    def total_credits(self, rows: Iterable[CourseGrade]) -> float:
        """
        Sum of all rows' credits, graded or not.

        Missing or non-numeric credits count as 0. No other validation is
        done here, so a negative value entered by the caller is summed too.
        """
        total = Decimal(0)
        for row in rows:
            credits = coerce_credits(getattr(row, "credits", None))
            if credits is not None:
                total += credits
        return float(total)

    def summarize(self, rows: Sequence[CourseGrade]) -> GradeSummary:
        """Run every calculation over one snapshot of rows."""
        rows = list(rows)
        return GradeSummary(
            gpa=self.compute_gpa(rows),
            completion_percentage=self.completion_percentage(rows),
            total_credits=self.total_credits(rows),
            graded_count=self.graded_count(rows),
            total_count=len(rows),
            rows=rows,
        )
