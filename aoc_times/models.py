"""
Typed models for the private leaderboard JSON document.

The upstream payload looks like::

    {
      "event": "2025",
      "num_days": 12,
      "members": {
        "12345": {
          "id": 12345,
          "name": "Ada",
          "stars": 3,
          "local_score": 40,
          "last_star_ts": 1764652000,
          "completion_day_level": {
            "1": {"1": {"get_star_ts": 1764565265}, "2": {"get_star_ts": 1764565330}}
          }
        }
      }
    }

It is validated here once, at the acquisition boundary, so the statistics
code never has to deal with missing keys.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from aoc_times.errors import ParseFailure


class StarCompletion(BaseModel):
    """When one star (one puzzle part) was earned."""

    get_star_ts: int = Field(..., description="Epoch seconds the star was earned")

    class Config:
        frozen = True
        extra = "ignore"


class DayCompletion(BaseModel):
    """Both parts of one day; a part is None until solved."""

    part1: Optional[StarCompletion] = Field(default=None, alias="1")
    part2: Optional[StarCompletion] = Field(default=None, alias="2")

    class Config:
        frozen = True
        extra = "ignore"
        populate_by_name = True


class Member(BaseModel):
    """One participant of the leaderboard."""

    id: int
    name: Optional[str] = None
    stars: int = Field(..., ge=0)
    local_score: int
    last_star_ts: int
    completion_day_level: Dict[int, DayCompletion] = Field(default_factory=dict)

    class Config:
        frozen = True
        extra = "ignore"

    @property
    def display_name(self) -> str:
        return self.name or f"Anonymous #{self.id}"


class LeaderboardSnapshot(BaseModel):
    """The complete leaderboard as of one fetch."""

    event: str
    num_days: int = Field(..., ge=0)
    members: Dict[str, Member]
    owner_id: Optional[int] = None
    day1_ts: Optional[int] = None

    class Config:
        frozen = True
        extra = "ignore"
        coerce_numbers_to_str = True

    def member_list(self) -> List[Member]:
        return list(self.members.values())


def parse_snapshot(payload: Any) -> LeaderboardSnapshot:
    """
    Validate a decoded JSON document into a LeaderboardSnapshot.

    Args:
        payload: Result of json.loads() on the response body

    Returns:
        LeaderboardSnapshot instance

    Raises:
        ParseFailure: If the document does not have the expected shape
    """
    if not isinstance(payload, dict):
        raise ParseFailure(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    try:
        return LeaderboardSnapshot.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ParseFailure(f"{field}: {first['msg']}", field=field) from e
