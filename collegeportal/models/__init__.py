"""
Data models for the college portal core.

This package contains the dataclasses and enums shared by the codec, the
grade engine and the data layer.
"""

from .event import EventTag
from .grade import CourseGrade, GradePointTable, GradeStatus, GradeSummary

__all__ = [
    # Event models
    "EventTag",
    # Grade models
    "CourseGrade",
    "GradePointTable",
    "GradeStatus",
    "GradeSummary",
]
