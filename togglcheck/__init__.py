"""
togglCheck: A CLI tool for checking Toggl time entries for overlaps.

- Fetches time entries from the Toggl API
- Reports entries that start before the previous entry stopped
- Exports the report to CSV and Markdown
- Can be used as a CLI (via `python -m togglcheck` or `togglcheck` if installed as a package)
"""

__version__ = "0.1.0"
