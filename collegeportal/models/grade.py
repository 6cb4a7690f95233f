"""
Grade data models.

Contains the CourseGrade row a student fills in, the GradePointTable that
maps letter grades to points, and the GradeSummary the engine returns.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class GradeStatus(Enum):
    """
    States of a CourseGrade's grade field.

    UNGRADED: No grade selected yet, or a value the table does not know
    GRADED: A grade present in the active GradePointTable
    """
    UNGRADED = "ungraded"
    GRADED = "graded"


@dataclass(frozen=True)
class GradePointTable:
    """
    Immutable letter grade -> grade point mapping.

    The table keeps insertion order, which is the order grades are offered
    in the selector. Pass a different table to GradeEngine to evaluate
    another institution's scale.
    """
    name: str
    points: Mapping[str, int]

    def __post_init__(self):
        object.__setattr__(self, "points", MappingProxyType(dict(self.points)))

    def __contains__(self, grade) -> bool:
        return isinstance(grade, str) and grade in self.points

    def __getitem__(self, grade: str) -> int:
        return self.points[grade]

    def __iter__(self):
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def get(self, grade, default=None):
        if grade in self:
            return self.points[grade]
        return default

    @property
    def grades(self) -> list:
        return list(self.points)

    def grade_options(self) -> list:
        """(grade, points) pairs in table order, e.g. [("O", 10), ("A+", 9), ...]."""
        return list(self.points.items())


@dataclass
class CourseGrade:
    """
    One subject row of a CGPA computation.

    Rows start ungraded and the caller assigns or clears the grade as the
    student picks one. The engine only reads rows.

    Attributes:
        identifier: Opaque row id (not used in arithmetic)
        credits: Credit weight; may arrive as a number or a form string
        grade: Letter grade, or "" while ungraded
        name: Subject name for display
        code: Subject code for display (e.g., "CS3501")
    """
    identifier: Any
    credits: Any
    grade: Optional[str] = ""
    name: str = ""
    code: str = ""

    @classmethod
    def empty(cls) -> "CourseGrade":
        """A blank, ungraded row with a fresh unique identifier."""
        return cls(identifier=uuid.uuid4().hex, credits="", grade="")

    def assign_grade(self, grade: str):
        self.grade = grade

    def clear_grade(self):
        self.grade = ""


@dataclass
class GradeSummary:
    """
    Everything the calculator page shows after "Calculate CGPA".

    Example:
        gpa: 8.29
        completion_percentage: 100
        total_credits: 7.0
        graded_count: 2
        total_count: 2
    """
    gpa: float
    completion_percentage: int
    total_credits: float
    graded_count: int
    total_count: int
    rows: list = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        """True once every row carries a recognized grade."""
        return self.total_count > 0 and self.graded_count == self.total_count
