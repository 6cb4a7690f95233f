"""
Event tag data model.

Contains the EventTag dataclass that an announcement's hashtag encodes.
"""

from dataclasses import dataclass
from datetime import date


@dataclass
class EventTag:
    """
    A category-tagged, time-bounded event carried inside an announcement hashtag.

    EventTags are built by a caller right before encoding and rebuilt by the
    codec right after decoding; nothing in this package stores them.

    Example:
        #Hackathons_AIInnovate_15-03-2025_17-03-2025
        category: "Hackathons"
        name: "AIInnovate"
        start_date: date(2025, 3, 15)
        end_date: date(2025, 3, 17)

    Attributes:
        category: Announcement category token (no "_")
        name: Short event name token (no "_"), usually a squashed title
        start_date: First day of the event
        end_date: Last day of the event (may equal start_date)
    """
    category: str
    name: str
    start_date: date
    end_date: date

    @property
    def duration_days(self) -> int:
        """Number of calendar days the event spans, both ends included."""
        return (self.end_date - self.start_date).days + 1

    def covers(self, day: date) -> bool:
        """True if the event is running on the given day."""
        return self.start_date <= day <= self.end_date
