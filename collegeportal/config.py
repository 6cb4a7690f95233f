"""
Configuration constants for the college portal core.

This module contains the configuration values and constants used by the
hashtag codec, the grade engine and the data layer. Centralizing these
makes it easy to adjust behavior when the college changes its policies.
"""

import os
from pathlib import Path

from .models.grade import GradePointTable

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = Path(os.environ.get("COLLEGEPORTAL_DATA_DIR", BASE_DIR / "data"))


# =============================================================================
# BACKEND API
# =============================================================================

API_BASE_URL = os.environ.get("COLLEGEPORTAL_API_URL", "http://localhost:5000/api")
API_TOKEN = os.environ.get("COLLEGEPORTAL_API_TOKEN", "")
REQUEST_TIMEOUT = float(os.environ.get("COLLEGEPORTAL_TIMEOUT", "15"))

LOG_LEVEL = os.environ.get("COLLEGEPORTAL_LOG_LEVEL", "WARNING").upper()


# =============================================================================
# GRADE DEFINITIONS
# =============================================================================

# Letter grade -> grade point. W (withdrawn) keeps its single point; the
# engine does not treat it specially.
DEFAULT_GRADE_POINTS = GradePointTable(
    name="10-point scale",
    points={
        "O": 10,
        "A+": 9,
        "A": 8,
        "B+": 7,
        "B": 6,
        "C+": 5,
        "C": 4,
        "D+": 3,
        "D": 2,
        "W": 1,
    },
)

SEMESTERS = range(1, 9)


# =============================================================================
# EVENT HASHTAGS
# =============================================================================
# Format: #<category>_<name>_<DD-MM-YYYY>_<DD-MM-YYYY>
#   e.g. #Hackathons_AIInnovate_15-03-2025_17-03-2025

HASHTAG_PREFIX = "#"
HASHTAG_SEPARATOR = "_"
DATE_TOKEN_SEPARATOR = "-"

# Inclusive bounds for the year part of a date token
MIN_YEAR = 1900
MAX_YEAR = 2100

# Callers shorten announcement titles to this many characters before encoding
MAX_EVENT_NAME_LENGTH = 20

# Categories offered by the announcement form
EVENT_CATEGORIES = [
    "Events",
    "Hackathons",
    "Workshops",
    "Value-Added Courses",
    "Seminars",
    "Competitions",
    "Cultural",
    "Technical",
    "Sports",
    "Other",
]
