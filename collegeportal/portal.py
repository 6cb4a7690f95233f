"""
College Portal - Main Orchestrator.

This module contains the CollegePortal class that connects the
algorithm layer to the presentation layer.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Union

from .config import DEFAULT_GRADE_POINTS
from .data import DataLoader, GradeSheetParser, AnnouncementParser, SubjectsClient
from .engines import GradeEngine, HashtagCodec
from .models import EventTag, GradePointTable, GradeSummary
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class CollegePortal:
    """
    Main interface for the portal's calculator and event tools.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Receives user input (grade sheet, announcement export, form fields)
    2. Calls the engines to get results (pure data)
    3. Passes that data to the presentation layer for display

    TO CHANGE THE UI:
    -----------------
    Pass a different display object with the same method signatures as
    TerminalDisplay.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        portal = CollegePortal()

        summary = portal.run_cgpa("semester_5.json")
        calendar = portal.run_calendar("announcements.json")
        hashtag = portal.make_hashtag("Hackathons", "AI Innovate",
                                      date(2025, 3, 15), date(2025, 3, 17))
    """

    def __init__(self, data_dir: Union[str, Path] = None,
                 table: GradePointTable = DEFAULT_GRADE_POINTS,
                 client: SubjectsClient = None, display=None):
        # Share one engine between the parser and the calculator
        self.loader = DataLoader(data_dir) if data_dir is not None else DataLoader()
        self.table = table
        self.grade_engine = GradeEngine(table)
        self.codec = HashtagCodec()
        self.sheet_parser = GradeSheetParser(self.grade_engine)
        self.announcement_parser = AnnouncementParser(self.codec)
        self._client = client
        self.display = display or TerminalDisplay()

    @property
    def client(self) -> SubjectsClient:
        # Built on first use so offline runs never need API settings
        if self._client is None:
            self._client = SubjectsClient(parser=self.sheet_parser)
        return self._client

    def load_rows(self, source) -> list:
        """CourseGrade rows from a grade sheet path, or a list passed through."""
        if isinstance(source, (str, Path)):
            records = self.loader.load_grade_sheet(source)
            rows = self.sheet_parser.parse(records)
            logger.info("Loaded %d subjects from %s", len(rows), source)
            return rows
        return list(source)

    def fetch_rows(self, batch_year: int, department: str, semester: int) -> list:
        return self.client.fetch_subjects(batch_year, department, semester)

    def summarize(self, rows) -> GradeSummary:
        return self.grade_engine.summarize(rows)

    def run_cgpa(self, source) -> GradeSummary:
        """
        Compute and display the GPA for a grade sheet.

        Args:
            source: Path to a grade sheet JSON file, or a list of CourseGrade rows

        Returns:
            GradeSummary with GPA, completion percentage and credit totals
        """
        summary = self.summarize(self.load_rows(source))
        self.display.print_subjects(summary, self.table)
        self.display.print_gpa(summary)
        return summary

    def run_calendar(self, source) -> dict:
        """
        Decode every announcement hashtag and display the event list.

        Args:
            source: Path to an announcements JSON file, or a list of records

        Returns:
            {"events": [EventTag, ...], "invalid": [...]} from AnnouncementParser
        """
        if isinstance(source, (str, Path)):
            records = self.loader.load_announcements(source)
        else:
            records = list(source)

        result = self.announcement_parser.parse(records)
        logger.info("Decoded %d events, skipped %d announcements",
                    len(result["events"]), len(result["invalid"]))
        self.display.print_calendar(result)
        return result

    def make_hashtag(self, category: str, title: str, start_date: date,
                     end_date: date) -> str:
        """Build a hashtag from announcement form fields (title gets shortened)."""
        tag = self.codec.build_tag(category, title, start_date, end_date)
        hashtag = self.codec.encode(tag)
        self.display.print_hashtag(hashtag, tag)
        return hashtag

    def check_hashtag(self, text: str) -> EventTag:
        """Decode one hashtag, raising FormatError if it is malformed."""
        tag = self.codec.decode(text)
        self.display.print_hashtag(self.codec.encode(tag), tag)
        return tag
