"""
Grade sheet and announcement parsing.

This module turns raw records (from files or the backend API) into the
CourseGrade and EventTag models the engines work with.
"""

import logging

from ..engines import GradeEngine, HashtagCodec
from ..errors import FormatError
from ..models import CourseGrade

logger = logging.getLogger(__name__)


class GradeSheetParser:
    """
    Converts raw subject records into CourseGrade rows.

    FIELD NAMES:
    The backend sends MongoDB-style records ("_id", "subject_name",
    "subject_code"); hand-written sheets tend to use "id", "name", "code".
    Both are accepted.

    DUPLICATE HANDLING:
    A subject can show up twice when a sheet is merged from several
    exports. The first occurrence wins, unless it is ungraded and a later
    one carries a recognized grade; then the graded one replaces it in
    place so row order is kept.
    """

    def __init__(self, engine: GradeEngine = None):
        self.engine = engine or GradeEngine()

    def parse(self, records: list) -> list:
        rows = []
        positions = {}  # identifier -> index in rows

        for record in records:
            row = self.parse_record(record)
            key = str(row.identifier)

            if key in positions:
                existing = rows[positions[key]]
                if not self.engine.has_grade(existing) and self.engine.has_grade(row):
                    rows[positions[key]] = row
                else:
                    logger.debug("Ignoring duplicate subject %s", key)
                continue

            positions[key] = len(rows)
            rows.append(row)

        return rows

    def parse_record(self, record: dict) -> CourseGrade:
        if not isinstance(record, dict):
            raise ValueError(f"Expected a subject record, got {type(record).__name__}")

        identifier = record.get("_id", record.get("id"))
        if identifier is None:
            # Fall back to the subject code so rows stay distinguishable
            identifier = record.get("subject_code") or record.get("code") or CourseGrade.empty().identifier

        grade = record.get("grade") or ""
        if not isinstance(grade, str):
            grade = str(grade)

        return CourseGrade(
            identifier=identifier,
            credits=record.get("credits", ""),
            grade=grade.strip(),
            name=record.get("subject_name", record.get("name", "")) or "",
            code=record.get("subject_code", record.get("code", "")) or "",
        )


class AnnouncementParser:
    """
    Extracts calendar events from announcement hashtags.

    Announcements whose hashtag does not decode are not fatal: they are
    logged and returned under "invalid" so the caller can flag them.
    """

    def __init__(self, codec: HashtagCodec = None):
        self.codec = codec or HashtagCodec()

    def parse(self, records: list) -> dict:
        """
        Returns:
            {
                "events": [EventTag, ...],             # sorted by start date, then name
                "invalid": [{"record": ..., "error": str}, ...],
            }
        """
        events = []
        invalid = []

        for record in records:
            hashtag = record.get("hashtag", "") if isinstance(record, dict) else record
            try:
                events.append(self.codec.decode(hashtag))
            except FormatError as e:
                logger.warning("Skipping announcement with bad hashtag %r: %s", hashtag, e)
                invalid.append({"record": record, "error": str(e)})

        events.sort(key=lambda tag: (tag.start_date, tag.name))
        return {"events": events, "invalid": invalid}
