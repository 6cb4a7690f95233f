"""
Codec and calculation engines.

This package contains the pure logic of the portal: the event hashtag
codec, its date helpers and the CGPA engine. Nothing here does I/O.
"""

from .dates import parse_date_token, format_date_token
from .hashtag import HashtagCodec, normalize_event_name
from .grades import GradeEngine, coerce_credits

__all__ = [
    "parse_date_token",
    "format_date_token",
    "HashtagCodec",
    "normalize_event_name",
    "GradeEngine",
    "coerce_credits",
]
