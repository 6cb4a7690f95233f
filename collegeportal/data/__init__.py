"""
Data loading, parsing and fetching module.

This package handles all file and network I/O and the conversion of raw
records into models.
"""

from .loader import DataLoader
from .parser import GradeSheetParser, AnnouncementParser
from .client import SubjectsClient, create_retry_session

__all__ = [
    "DataLoader",
    "GradeSheetParser",
    "AnnouncementParser",
    "SubjectsClient",
    "create_retry_session",
]
