"""
College Portal Core
===================

The parsing and calculation core of the college portal: event hashtags on
announcements and the semester CGPA calculator.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────────┐  ┌──────────────────────────────────────────┐ │
│  │    HashtagCodec      │  │              GradeEngine                 │ │
│  │ (#type_name_d1_d2)   │  │  (grade points, CGPA, progress)         │ │
│  └──────────────────────┘  └──────────────────────────────────────────┘ │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────────────┐  ┌─────────────────────┐  │
│  │ DataLoader  │  │ GradeSheet/Announcement │  │   SubjectsClient    │  │
│  │  (files)    │  │  Parser (raw -> models) │  │   (backend API)     │  │
│  └─────────────┘  └─────────────────────────┘  └─────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│                         TerminalDisplay                                  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        CollegePortal                                     │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

collegeportal/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── errors.py            # FormatError, ValidationError, SubjectsFetchError
├── portal.py            # CollegePortal orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── event.py         # EventTag
│   └── grade.py         # CourseGrade, GradePointTable, GradeStatus, GradeSummary
│
├── engines/             # Pure logic
│   ├── dates.py         # parse_date_token, format_date_token
│   ├── hashtag.py       # HashtagCodec
│   └── grades.py        # GradeEngine
│
├── data/                # Loading, parsing and fetching
│   ├── loader.py        # DataLoader
│   ├── parser.py        # GradeSheetParser, AnnouncementParser
│   └── client.py        # SubjectsClient
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from datetime import date
    from collegeportal import HashtagCodec, EventTag, GradeEngine, CourseGrade

    codec = HashtagCodec()
    codec.encode(EventTag("Hackathons", "AIInnovate", date(2025, 3, 15), date(2025, 3, 17)))
    # '#Hackathons_AIInnovate_15-03-2025_17-03-2025'

    engine = GradeEngine()
    engine.compute_gpa([CourseGrade(1, 3, "O"), CourseGrade(2, 4, "B+")])
    # 8.29

Running from command line:

    python -m collegeportal

"""

# Version
__version__ = "1.0.0"

# Main exports
from .portal import CollegePortal
from .cli import main

# Model exports
from .models import (
    EventTag,
    CourseGrade,
    GradePointTable,
    GradeStatus,
    GradeSummary,
)

# Engine exports
from .engines import (
    HashtagCodec,
    GradeEngine,
    parse_date_token,
    format_date_token,
    normalize_event_name,
)

# Data exports
from .data import DataLoader, GradeSheetParser, AnnouncementParser, SubjectsClient

# UI exports
from .ui import TerminalDisplay

# Error exports
from .errors import PortalError, FormatError, ValidationError, SubjectsFetchError

# Configuration exports
from .config import DEFAULT_GRADE_POINTS, MAX_EVENT_NAME_LENGTH

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "CollegePortal",
    "main",
    # Models
    "EventTag",
    "CourseGrade",
    "GradePointTable",
    "GradeStatus",
    "GradeSummary",
    # Engines
    "HashtagCodec",
    "GradeEngine",
    "parse_date_token",
    "format_date_token",
    "normalize_event_name",
    # Data
    "DataLoader",
    "GradeSheetParser",
    "AnnouncementParser",
    "SubjectsClient",
    # UI
    "TerminalDisplay",
    # Errors
    "PortalError",
    "FormatError",
    "ValidationError",
    "SubjectsFetchError",
    # Config
    "DEFAULT_GRADE_POINTS",
    "MAX_EVENT_NAME_LENGTH",
]
