"""Configuration for a leaderboard run: which leaderboard, and how to reach it."""

import os
import re
from typing import Mapping, Optional, Sequence
from urllib.parse import parse_qs, urlparse

from pydantic import BaseModel, Field, ValidationError, field_validator

from aoc_times.errors import UsageError


EVENT_YEAR = 2025
BASE_URL = "https://adventofcode.com"
USER_AGENT = "Depot Advent of Code Leaderboard (contact@depot.dev)"

ENV_LEADERBOARD_ID = "ADVENT_OF_CODE_LEADERBOARD_ID"
ENV_VIEW_KEY = "ADVENT_OF_CODE_VIEW_KEY"

_VIEW_PATH = re.compile(r"/leaderboard/private/view/(\d+)")

EXAMPLE_URL = f"{BASE_URL}/{EVENT_YEAR}/leaderboard/private/view/12345?view_key=abc123"

USAGE = f"""Usage:
  aoc-times <leaderboard-url>
  aoc-times <leaderboard-id> <view-key>

At most two values are accepted: a URL, or an id followed by a key.

Or set environment variables:
  {ENV_LEADERBOARD_ID}=12345
  {ENV_VIEW_KEY}=abc123

Find your URL at: {BASE_URL}/{EVENT_YEAR}/leaderboard/private"""


class LeaderboardConfig(BaseModel):
    """Identifies one private leaderboard and the request parameters."""

    leaderboard_id: str = Field(..., min_length=1, description="Numeric leaderboard id")
    view_key: str = Field(..., min_length=1, description="Read-only access token")
    year: int = Field(default=EVENT_YEAR, description="Event year in the request path")
    timeout: float = Field(default=30.0, gt=0.0, description="HTTP timeout in seconds")
    user_agent: str = Field(default=USER_AGENT)

    @field_validator("leaderboard_id", "view_key")
    @classmethod
    def strip_value(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @property
    def url(self) -> str:
        """JSON endpoint of the leaderboard, without the view key."""
        return (
            f"{BASE_URL}/{self.year}/leaderboard/private/view/"
            f"{self.leaderboard_id}.json"
        )

    def redacted_url(self) -> str:
        return f"{self.url}?view_key=***"

    class Config:
        extra = "forbid"


def parse_leaderboard_url(url: str) -> LeaderboardConfig:
    """
    Extract leaderboard id and view key from a leaderboard page URL.

    Args:
        url: e.g. https://adventofcode.com/2025/leaderboard/private/view/12345?view_key=abc123

    Raises:
        UsageError: If the URL lacks the numeric id or the view_key parameter
    """
    invalid = f"Invalid URL. Expected format:\n  {EXAMPLE_URL}"
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise UsageError(invalid) from e

    match = _VIEW_PATH.search(parsed.path)
    view_keys = parse_qs(parsed.query).get("view_key", [])

    if not match or not view_keys or not view_keys[0]:
        raise UsageError(invalid)

    return _build(match.group(1), view_keys[0])


def resolve_config(
    args: Sequence[str],
    environ: Optional[Mapping[str, str]] = None,
) -> LeaderboardConfig:
    """
    Resolve the leaderboard to fetch from positional values or the environment.

    Tried in order: a leaderboard URL, an id followed by a view key, then
    the ADVENT_OF_CODE_LEADERBOARD_ID / ADVENT_OF_CODE_VIEW_KEY variables.

    Args:
        args: Positional command-line values
        environ: Environment mapping (defaults to os.environ)

    Returns:
        LeaderboardConfig instance

    Raises:
        UsageError: If none of the forms yields an id and a key
    """
    if environ is None:
        environ = os.environ

    if args and "adventofcode.com" in args[0]:
        return parse_leaderboard_url(args[0])

    if len(args) >= 2 and args[0] and args[1]:
        return _build(args[0], args[1])

    leaderboard_id = environ.get(ENV_LEADERBOARD_ID, "")
    view_key = environ.get(ENV_VIEW_KEY, "")
    if not leaderboard_id or not view_key:
        raise UsageError(USAGE)

    return _build(leaderboard_id, view_key)


def _build(leaderboard_id: str, view_key: str) -> LeaderboardConfig:
    try:
        return LeaderboardConfig(leaderboard_id=leaderboard_id, view_key=view_key)
    except ValidationError as e:
        raise UsageError(f"{USAGE}\n\n{e.errors()[0]['msg']}") from e
