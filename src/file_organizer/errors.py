"""Exceptions raised by the scan, plan, and move layers."""

from __future__ import annotations

from pathlib import Path


class OrganizerError(Exception):
    """Base exception for file-organizer failures."""


class FolderIOError(OrganizerError):
    """Raised when the filesystem rejects a read, mkdir, or move.

    Attributes:
        path: Path the failing operation was applied to.
        reason: Human-readable description of the failure.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason

    @classmethod
    def from_os_error(cls, path: Path, exc: OSError) -> "FolderIOError":
        """Build an error from an ``OSError``, preferring its strerror text."""
        reason = exc.strerror or str(exc) or type(exc).__name__
        return cls(path, reason)


__all__ = ["OrganizerError", "FolderIOError"]
