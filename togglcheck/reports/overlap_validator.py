"""Overlap checking for chronologically sorted Toggl time entries."""
from typing import Any, Dict, Iterable, List, NamedTuple, Union

from tabulate import tabulate

from .time_entry import TimeEntry
from ..utils.date_utils import time_diff
from ..utils.format_utils import format_seconds

# The time entries endpoint returns at most this many entries per call
API_ENTRY_LIMIT = 1000
DEFAULT_ALLOWED_WINDOW = 60

TABLE_HEADERS = ["#", "Start", "Previous stop", "Overlap"]


class OverlapWarning(NamedTuple):
    """An entry starting before the stop time of an earlier entry."""
    start: str
    stop: str

    @property
    def overlap_sec(self) -> int:
        return time_diff(self.start, self.stop)

    def __str__(self) -> str:
        return f"Start time ({self.start}) is before stop time ({self.stop})."


def _as_entry(entry: Union[TimeEntry, Dict[str, Any]]) -> TimeEntry:
    return entry if isinstance(entry, TimeEntry) else TimeEntry(entry)

def validate(entries: Iterable[Union[TimeEntry, Dict[str, Any]]],
             allowed_window: int = DEFAULT_ALLOWED_WINDOW) -> List[OverlapWarning]:
    """Find entries that start before the latest stop time seen so far.

    Entries must already be sorted by start time. The most recent stop time
    (the frontier) is carried through the loop; running entries (no stop)
    are checked against it but never move it.

    Args:
        entries: Time entries sorted by start
        allowed_window: Tolerance in seconds; an overlap only warns when
            time_diff(start, frontier) is smaller than this

    Returns:
        Warnings in entry order

    Raises:
        FormatError: If a compared timestamp is malformed
    """
    warnings = []
    frontier = None
    for entry in map(_as_entry, entries):
        if frontier is not None and entry.start < frontier:
            if time_diff(entry.start, frontier) < allowed_window:
                warnings.append(OverlapWarning(entry.start, frontier))
        if not entry.is_running:
            frontier = entry.stop
    return warnings

def sort_entries(raw_entries: Iterable[Dict[str, Any]]) -> List[TimeEntry]:
    """Convert raw API entries to TimeEntry objects, sorted by start time."""
    return sorted((TimeEntry(e) for e in raw_entries), key=lambda e: e.start)


class ValidationReport:
    """Result of checking one batch of time entries."""

    table_headers = TABLE_HEADERS

    def __init__(self, warnings: List[OverlapWarning], entry_count: int):
        self.warnings = warnings
        self.entry_count = entry_count

    @property
    def limit_reached(self) -> bool:
        return self.entry_count >= API_ENTRY_LIMIT

    def lines(self) -> List[str]:
        """Get the report as printable lines.

        Returns:
            One line per warning, the entry count and, if the API limit was
            hit, a truncation warning
        """
        lines = [str(w) for w in self.warnings]
        lines.append(f"{self.entry_count} entries checked.")
        if self.limit_reached:
            lines.append(f"Warning: {self.entry_count} entries returned, "
                         f"the API limit of {API_ENTRY_LIMIT} may have truncated the results.")
        return lines

    def render(self) -> str:
        return "\n".join(self.lines())

    def table_rows(self) -> List[List[Any]]:
        return [[i, w.start, w.stop, format_seconds(w.overlap_sec)]
                for i, w in enumerate(self.warnings, start=1)]

    def to_markdown(self) -> str:
        """Render the report as a Markdown section with a table of overlaps.

        Returns:
            Markdown text
        """
        out = [f"### Overlaps ({len(self.warnings)} of {self.entry_count} entries)", ""]
        if self.warnings:
            out.append(tabulate(self.table_rows(), headers=TABLE_HEADERS, tablefmt="github"))
        else:
            out.append("No overlapping entries.")
        if self.limit_reached:
            out += ["", f"> The API limit of {API_ENTRY_LIMIT} entries may have truncated the results."]
        return "\n".join(out) + "\n"


def check_entries(raw_entries: Iterable[Dict[str, Any]],
                  allowed_window: int = DEFAULT_ALLOWED_WINDOW) -> ValidationReport:
    """Sort raw API entries by start time and check them for overlaps.

    Args:
        raw_entries: Entries as decoded from the API, in any order
        allowed_window: Tolerance in seconds

    Returns:
        ValidationReport for the whole batch
    """
    entries = sort_entries(raw_entries)
    return ValidationReport(validate(entries, allowed_window), len(entries))
