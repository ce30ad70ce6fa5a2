"""
Failures raised while building the members listing.

Every failure maps to an HTTP 500 carrying ``str(exc)`` as the message, so the
messages below are part of the public API.
"""
from typing import Optional

CANNOT_CONNECT = "Failed to get members, cannot connect to omusp.jp"
NON_200_STATUS = "Failed to get members, omusp.jp returned non-200 status code"
CANNOT_PARSE = "Failed to get members, cannot parse HTML from omusp.jp"


class MemberScrapeError(Exception):
    """Base exception for all members listing failures."""

    message = "Failed to get members"

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message or self.message)


class UpstreamConnectionError(MemberScrapeError):
    """Raised when the upstream site cannot be reached at all."""

    message = CANNOT_CONNECT


class UpstreamStatusError(MemberScrapeError):
    """Raised when the upstream site answers with anything but 200."""

    message = NON_200_STATUS

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message)


class MarkupParseError(MemberScrapeError):
    """Raised when the upstream body cannot be parsed as HTML."""

    message = CANNOT_PARSE
