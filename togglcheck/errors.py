"""Exception types raised by togglCheck."""
from typing import Optional


class TogglCheckError(Exception):
    """Base class for all togglCheck errors."""


class ParseError(TogglCheckError):
    """Raised when a duration string cannot be parsed."""

    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message)
        self.token = token


class FormatError(ParseError):
    """Raised when a timestamp does not carry a HH:MM:SS time of day."""

    def __init__(self, text, message: Optional[str] = None):
        super().__init__(message or f"Invalid timestamp: {text!r}")
        self.text = text


class TransportError(TogglCheckError):
    """Raised when the Toggl API request fails or returns a non-200 status."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ConfigError(TogglCheckError):
    """Raised when required configuration (the API token) is missing."""
