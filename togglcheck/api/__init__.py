"""Toggl API access for togglCheck."""

from .client import TogglClient

__all__ = ['TogglClient']
