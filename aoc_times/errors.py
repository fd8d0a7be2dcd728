"""Error types raised while resolving, fetching and parsing a leaderboard."""

from typing import Optional


class LeaderboardError(Exception):
    """Base class for every fatal error of a leaderboard run."""


class UsageError(LeaderboardError):
    """
    Raised when the invocation does not resolve to a leaderboard id and
    view key.

    The message is meant to be shown to the user verbatim.
    """


class FetchFailure(LeaderboardError):
    """
    Raised when the leaderboard endpoint cannot be read.

    Attributes:
        status_code: HTTP status of the response (0 for transport errors)
        reason: Human-readable reason phrase or transport error text
    """

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"{status_code} {reason}".strip())
        self.status_code = status_code
        self.reason = reason


class ParseFailure(LeaderboardError):
    """
    Raised when the response body does not match the leaderboard shape.

    Attributes:
        field: Dotted path of the first offending field, if known
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
