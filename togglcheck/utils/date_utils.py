"""Date and time utility functions for togglCheck."""
import re
from datetime import datetime, timezone, timedelta
from typing import Optional

from ..errors import FormatError, ParseError

TIME_OF_DAY_RE = re.compile(r"T(\d\d):(\d\d):(\d\d)[+Z]", re.ASCII)


def seconds_of_day(timestamp: str) -> int:
    """Get the time of day of an ISO timestamp in seconds since midnight.

    Args:
        timestamp: ISO timestamp (e.g., "2018-06-13T12:12:12+00:00")

    Returns:
        Seconds since midnight

    Raises:
        FormatError: If the timestamp has no HH:MM:SS part followed by '+' or 'Z'
    """
    match = TIME_OF_DAY_RE.search(timestamp or "")
    if not match:
        raise FormatError(timestamp)
    h, m, s = (int(part) for part in match.groups())
    return h * 3600 + m * 60 + s

def time_diff(a: str, b: str) -> int:
    """Get the difference between the times of day of two timestamps.

    Only the HH:MM:SS part is compared; the date is ignored.

    Args:
        a: Earlier ISO timestamp
        b: Later ISO timestamp

    Returns:
        Seconds from a to b (negative if b is earlier in the day)
    """
    return seconds_of_day(b) - seconds_of_day(a)

def since_timestamp(seconds_ago: int, now: Optional[datetime] = None) -> str:
    """Format the UTC time `seconds_ago` seconds before now for the Toggl API.

    Args:
        seconds_ago: Number of seconds to go back
        now: Reference time (defaults to the current UTC time)

    Returns:
        ISO timestamp with trailing 'Z' (e.g., "2018-06-13T12:12:12Z")

    Raises:
        ParseError: If the resulting date is out of range
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    try:
        since = now - timedelta(seconds=seconds_ago)
    except OverflowError as e:
        raise ParseError(f"Duration of {seconds_ago} seconds reaches too far back: {e}") from e
    return since.strftime("%Y-%m-%dT%H:%M:%SZ")
