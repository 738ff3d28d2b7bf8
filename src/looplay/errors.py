"""Exceptions raised by the playlist and caught by the CLI."""

from __future__ import annotations


class PlaylistError(Exception):
    """Base class for playlist failures."""


class AllocationError(PlaylistError):
    """Raised when a new song cannot be stored."""


class InvalidTitleError(PlaylistError, ValueError):
    """Raised when a title is empty after stripping whitespace."""
