"""Utility modules for togglCheck."""

from .duration_utils import parse_duration
from .date_utils import time_diff, seconds_of_day, since_timestamp
from .format_utils import format_seconds
from .file_utils import write_csv, write_markdown

__all__ = [
    'parse_duration',
    'time_diff', 'seconds_of_day', 'since_timestamp',
    'format_seconds',
    'write_csv', 'write_markdown'
]
