"""TimeEntry class for representing Toggl time entries."""
from typing import Optional, Dict, Any

from ..errors import FormatError


class TimeEntry:
    """Class representing a Toggl time entry.

    Only `start` and `stop` matter for overlap checking; everything else the
    API returns is kept untouched in `raw_data`.
    """

    __slots__ = ("raw_data", "start", "stop")

    def __init__(self, entry_data: Dict[str, Any]):
        """Initialize a TimeEntry.

        Args:
            entry_data: Raw entry data from the Toggl API

        Raises:
            FormatError: If the data is not an object with a string `start`
                or its `stop` is not a string
        """
        if not isinstance(entry_data, dict) or not isinstance(entry_data.get("start"), str):
            raise FormatError(entry_data, f"Time entry without a start time: {entry_data!r}")
        stop = entry_data.get("stop") or None
        if stop is not None and not isinstance(stop, str):
            raise FormatError(stop)
        object.__setattr__(self, "raw_data", entry_data)
        object.__setattr__(self, "start", entry_data["start"])
        object.__setattr__(self, "stop", stop)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"TimeEntry(start={self.start!r}, stop={self.stop!r})"

    @property
    def id(self) -> Optional[int]:
        return self.raw_data.get("id")

    @property
    def description(self) -> str:
        return self.raw_data.get("description") or "No description"

    @property
    def duration(self) -> Optional[int]:
        """Get the duration reported by the API, in seconds.

        Returns:
            Duration in seconds (negative while the entry is running), or None
        """
        return self.raw_data.get("duration")

    @property
    def is_running(self) -> bool:
        return self.stop is None
