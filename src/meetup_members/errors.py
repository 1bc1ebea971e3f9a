# ABOUTME: Exception types raised while fetching and parsing the meetup page
# ABOUTME: Inner page errors are wrapped into MeetupMembersError before reaching callers

ERROR_PREFIX = "Error getting meetup members: "


class MeetupPageError(Exception):
    """Base exception for failures while retrieving or reading the meetup page."""

    pass


class PageFetchError(MeetupPageError):
    """Raised when the meetup page responds with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to fetch meetup page: {status_code} {reason}")


class NetworkError(MeetupPageError):
    """Raised when the request never produced a response (DNS, connect, timeout)."""

    pass


class ExtractionError(MeetupPageError):
    """Raised when the member count cannot be extracted from the page."""

    pass


class MemberCountNotFoundError(ExtractionError):
    """Raised when every extraction strategy came up empty."""

    def __init__(self, message: str = "Member count not found on the meetup page"):
        super().__init__(message)


class MeetupMembersError(Exception):
    """The single error type surfaced by the member count service.

    The message is always ``ERROR_PREFIX`` followed by the inner error's message,
    and the inner error is available as ``__cause__``.
    """

    @classmethod
    def wrap(cls, error: Exception) -> "MeetupMembersError":
        return cls(f"{ERROR_PREFIX}{error}")
