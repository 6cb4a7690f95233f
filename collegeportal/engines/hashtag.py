"""
Event hashtag codec.

This module converts between EventTag records and the hashtag strings
stored on announcements.
"""

import re
from datetime import date, datetime

from ..config import (
    HASHTAG_PREFIX,
    HASHTAG_SEPARATOR,
    MAX_EVENT_NAME_LENGTH,
    MIN_YEAR,
    MAX_YEAR,
)
from ..errors import FormatError, ValidationError
from ..models import EventTag
from .dates import format_date_token, parse_date_token

_WHITESPACE = re.compile(r"\s+")


def normalize_event_name(title: str, max_length: int = MAX_EVENT_NAME_LENGTH) -> str:
    """
    Squash a human title into a hashtag name token.

    All whitespace is removed and the result is cut to max_length
    characters: "AI Innovate Hackathon 2025" -> "AIInnovateHackathon2".
    The codec never does this on its own; callers apply it before encode.
    """
    return _WHITESPACE.sub("", title or "")[:max_length]


class HashtagCodec:
    """
    Encodes and decodes event hashtags.

    WIRE FORMAT:
    ------------
        #<category>_<name>_<DD-MM-YYYY>_<DD-MM-YYYY>

    - The leading "#" is always written and optional when reading.
    - Category and name cannot contain "_" since it separates the fields.
    - Start date must not come after end date (same day is fine).

    Both directions are pure: decode either returns a complete EventTag or
    raises FormatError, and encode either returns the string or raises
    ValidationError.

    Usage:
        codec = HashtagCodec()
        tag = codec.decode("#Hackathons_AIInnovate_15-03-2025_17-03-2025")
        codec.encode(tag)  # "#Hackathons_AIInnovate_15-03-2025_17-03-2025"
    """

    def encode(self, tag: EventTag) -> str:
        """
        Render an EventTag as its canonical hashtag.

        Raises:
            ValidationError: If a field is missing, a token contains "_",
                a date is not a date in 1900-2100, or start is after end
        """
        if tag is None:
            raise ValidationError("All event fields are required")

        category = self._check_token("category", tag.category)
        name = self._check_token("name", tag.name)
        start = self._check_date("start_date", tag.start_date)
        end = self._check_date("end_date", tag.end_date)

        if start > end:
            raise ValidationError("Start date must be before or equal to end date")

        sep = HASHTAG_SEPARATOR
        return (
            f"{HASHTAG_PREFIX}{category}{sep}{name}"
            f"{sep}{format_date_token(start)}{sep}{format_date_token(end)}"
        )

    def decode(self, text: str) -> EventTag:
        """
        Parse a hashtag into an EventTag.

        Category and name are trimmed of surrounding whitespace.

        Raises:
            FormatError: On wrong segment count, empty category or name,
                bad date tokens, or a start date after the end date
        """
        if not text or not isinstance(text, str):
            raise FormatError("Hashtag must be a non-empty string")

        body = text[len(HASHTAG_PREFIX):] if text.startswith(HASHTAG_PREFIX) else text

        parts = body.split(HASHTAG_SEPARATOR)
        if len(parts) != 4:
            raise FormatError(
                "Hashtag must follow format: #type_eventName_startDate_endDate "
                f"(got {len(parts)} segments)"
            )

        category, name, start_token, end_token = parts

        if not category.strip():
            raise FormatError("Event type cannot be empty")
        if not name.strip():
            raise FormatError("Event name cannot be empty")

        start_date = parse_date_token(start_token)
        end_date = parse_date_token(end_token)

        if start_date > end_date:
            raise FormatError("Start date must be before or equal to end date")

        return EventTag(
            category=category.strip(),
            name=name.strip(),
            start_date=start_date,
            end_date=end_date,
        )

    def is_valid(self, text: str) -> bool:
        """True if text decodes cleanly."""
        try:
            self.decode(text)
        except FormatError:
            return False
        return True

    def build_tag(self, category: str, title: str, start_date: date,
                  end_date: date) -> EventTag:
        """
        Build an EventTag from announcement form fields.

        The title goes through normalize_event_name and the category has its
        whitespace removed. Dates are taken as given; encode validates them.
        """
        return EventTag(
            category=_WHITESPACE.sub("", category or ""),
            name=normalize_event_name(title),
            start_date=start_date,
            end_date=end_date,
        )

    @staticmethod
    def _check_token(field_name: str, value) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"Event {field_name} is required")
        if HASHTAG_SEPARATOR in value:
            raise ValidationError(
                f"Event {field_name} cannot contain {HASHTAG_SEPARATOR!r}: {value!r}"
            )
        if value != value.strip():
            raise ValidationError(
                f"Event {field_name} cannot start or end with whitespace: {value!r}"
            )
        return value

    @staticmethod
    def _check_date(field_name: str, value) -> date:
        if not isinstance(value, date):
            raise ValidationError(f"Event {field_name} must be a date")
        if isinstance(value, datetime):
            value = value.date()
        if not MIN_YEAR <= value.year <= MAX_YEAR:
            raise ValidationError(
                f"Event {field_name} year must be between {MIN_YEAR} and {MAX_YEAR}"
            )
        return value
