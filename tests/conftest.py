"""Shared fixtures for the collegeportal tests."""
import json

import pytest

from collegeportal.engines import GradeEngine, HashtagCodec
from collegeportal.models import CourseGrade


@pytest.fixture
def codec() -> HashtagCodec:
    return HashtagCodec()


@pytest.fixture
def engine() -> GradeEngine:
    return GradeEngine()


@pytest.fixture
def semester_rows() -> list[CourseGrade]:
    """Three graded subjects and one still waiting for a grade."""
    return [
        CourseGrade(identifier="cs3501", credits=4, grade="A+", name="Compiler Design", code="CS3501"),
        CourseGrade(identifier="cs3591", credits=4, grade="O", name="Computer Networks", code="CS3591"),
        CourseGrade(identifier="cs3551", credits=3, grade="B+", name="Distributed Computing", code="CS3551"),
        CourseGrade(identifier="ccs335", credits=3, grade="", name="Cloud Computing", code="CCS335"),
    ]


@pytest.fixture
def data_dir(tmp_path):
    """A data directory holding one grade sheet and one announcements export."""
    sheet = {
        "subjects": [
            {"_id": "a1", "subject_name": "Compiler Design", "subject_code": "CS3501", "credits": 3, "grade": "O"},
            {"_id": "a2", "subject_name": "Computer Networks", "subject_code": "CS3591", "credits": 4, "grade": "B+"},
        ]
    }
    announcements = [
        {"title": "AI Innovate", "hashtag": "#Hackathons_AIInnovate_15-03-2025_17-03-2025"},
        {"title": "Cloud Workshop", "hashtag": "Workshops_Cloud_05-03-2025_05-03-2025"},
        {"title": "Broken", "hashtag": "#A_B_31-02-2025_01-03-2025"},
    ]
    (tmp_path / "semester.json").write_text(json.dumps(sheet), encoding="utf-8")
    (tmp_path / "announcements.json").write_text(json.dumps(announcements), encoding="utf-8")
    return tmp_path
