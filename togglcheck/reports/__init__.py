"""Report modules for togglCheck."""

from .time_entry import TimeEntry
from .overlap_validator import OverlapWarning, ValidationReport, validate, check_entries

__all__ = ['TimeEntry', 'OverlapWarning', 'ValidationReport', 'validate', 'check_entries']
