"""
Single-request client for the private leaderboard endpoint.

There is no retry and no caching: one GET either yields a snapshot or the
run fails.
"""

import json
import logging
from typing import Optional

import httpx

from aoc_times.config import LeaderboardConfig
from aoc_times.errors import FetchFailure, ParseFailure
from aoc_times.models import LeaderboardSnapshot, parse_snapshot

logger = logging.getLogger(__name__)


def fetch_leaderboard(
    config: LeaderboardConfig,
    client: Optional[httpx.Client] = None,
) -> LeaderboardSnapshot:
    """
    Fetch and validate one leaderboard snapshot.

    Args:
        config: Which leaderboard to read
        client: Optional pre-built httpx client (left open after the call)

    Returns:
        LeaderboardSnapshot instance

    Raises:
        FetchFailure: On a non-success status or a transport error
        ParseFailure: If the body is not a valid leaderboard document
    """
    logger.debug("GET %s", config.redacted_url())

    if client is None:
        with httpx.Client(timeout=config.timeout) as owned:
            response = _get(owned, config)
    else:
        response = _get(client, config)

    if not response.is_success:
        raise FetchFailure(response.status_code, response.reason_phrase)

    try:
        payload = response.json()
    except json.JSONDecodeError as e:
        raise ParseFailure(f"Response is not valid JSON: {e.msg}") from e

    snapshot = parse_snapshot(payload)
    logger.info(
        "Loaded leaderboard %s: %d members, %d days",
        snapshot.event, len(snapshot.members), snapshot.num_days,
    )
    return snapshot


def _get(client: httpx.Client, config: LeaderboardConfig) -> httpx.Response:
    try:
        return client.get(
            config.url,
            params={"view_key": config.view_key},
            headers={"User-Agent": config.user_agent},
        )
    except httpx.TransportError as e:
        raise FetchFailure(0, str(e) or type(e).__name__) from e
