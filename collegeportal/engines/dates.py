"""
Date token helpers shared by the hashtag codec.

Dates inside hashtags are written DD-MM-YYYY, day resolution only.
"""

import re
from datetime import date

from ..config import DATE_TOKEN_SEPARATOR, MIN_YEAR, MAX_YEAR
from ..errors import FormatError

_DIGITS = re.compile(r"^[0-9]+$")


def parse_date_token(token: str) -> date:
    """
    Parse a D-M-Y token (e.g., "05-03-2025") into a date.

    Leading zeros are optional on input. The token must split into exactly
    three numeric parts, each part must be in range (day 1-31, month 1-12,
    year 1900-2100), and the combination must exist on the calendar, so
    "31-04-2025" and "29-02-2023" are rejected.

    Raises:
        FormatError: If the token is malformed or names an impossible date
    """
    if not token or not isinstance(token, str):
        raise FormatError("Date must be a non-empty string")

    parts = token.split(DATE_TOKEN_SEPARATOR)
    if len(parts) != 3:
        raise FormatError(f"Date must be in format dd-mm-yyyy: {token!r}")

    parts = [p.strip() for p in parts]
    if not all(_DIGITS.match(p) for p in parts):
        raise FormatError(f"Date parts must be numeric: {token!r}")

    day, month, year = (int(p) for p in parts)

    if not 1 <= day <= 31:
        raise FormatError(f"Day must be between 1 and 31: {token!r}")
    if not 1 <= month <= 12:
        raise FormatError(f"Month must be between 1 and 12: {token!r}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise FormatError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}: {token!r}")

    try:
        return date(year, month, day)
    except ValueError as e:
        raise FormatError(f"Invalid date: {token!r}") from e


def format_date_token(value: date) -> str:
    """Render a date as DD-MM-YYYY, e.g. date(2025, 3, 5) -> "05-03-2025"."""
    if not isinstance(value, date):
        raise TypeError(f"Expected a date, got {type(value).__name__}")
    sep = DATE_TOKEN_SEPARATOR
    return f"{value.day:02d}{sep}{value.month:02d}{sep}{value.year:04d}"
