"""
Exception types raised by the portal core.

Both codec errors derive from ValueError so callers that only care about
"bad input" can catch that.
"""


class PortalError(Exception):
    """Base class for all errors raised by this package."""


class FormatError(PortalError, ValueError):
    """A hashtag or date token does not follow the expected grammar."""


class ValidationError(PortalError, ValueError):
    """An EventTag handed to the encoder is incomplete or inconsistent."""


class SubjectsFetchError(PortalError):
    """The subjects API could not be reached or returned an error."""
