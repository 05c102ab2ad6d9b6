"""Formatting utility functions for togglCheck."""

def format_seconds(seconds: int) -> str:
    """Format seconds as HH:MM:SS.

    Args:
        seconds: Number of seconds (can be negative)

    Returns:
        Formatted time string (with leading '-' if negative)
    """
    sign = "-" if seconds < 0 else ""
    h, m = divmod(abs(seconds), 3600)
    m, s = divmod(m, 60)
    return f"{sign}{h:02}:{m:02}:{s:02}"
