"""Parsing of human-readable durations like "7 days" or "1week"."""
import re

from ..errors import ParseError

# Seconds per unit, keyed by every accepted spelling
UNIT_SECONDS = {}
for _names, _seconds in (
    (("s", "sec", "secs", "second", "seconds"), 1),
    (("m", "min", "mins", "minute", "minutes"), 60),
    (("h", "hour", "hours"), 3600),
    (("d", "day", "days"), 86400),
    (("w", "week", "weeks"), 604800),
    (("mon", "month", "months"), 2678400),  # 31 days
    (("y", "year", "years"), 31536000),  # 365 days
):
    for _name in _names:
        UNIT_SECONDS[_name] = _seconds

DURATION_RE = re.compile(r"(\d*)(.*)", re.DOTALL | re.ASCII)


def parse_duration(text: str) -> int:
    """Parse a duration string into seconds.

    The string is an optional run of digits (the count, default 1) followed
    by an optional unit word (default seconds), e.g. "90", "7d", "1 week".

    Args:
        text: Duration string

    Returns:
        Duration in seconds

    Raises:
        ParseError: If the unit is unknown or the count cannot be converted
    """
    if text is None:
        raise ParseError("No duration given")

    digits, rest = DURATION_RE.fullmatch(text).groups()
    try:
        count = int(digits) if digits else 1
    except ValueError as e:
        raise ParseError(f"Count in duration is too long: {e}") from e
    tokens = rest.split()
    unit = tokens[0].lower() if tokens else "s"

    if unit not in UNIT_SECONDS:
        raise ParseError(f"Unknown time unit {unit!r} in duration {text!r}", token=unit)
    return count * UNIT_SECONDS[unit]
