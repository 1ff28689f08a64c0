"""Directory enumeration and entry classification."""

from .discovery import DirectoryScanner
from .models import (
    FOLDER_NO_EXTENSION,
    REPORT_NO_EXTENSION,
    DirectoryEntry,
    EntryKind,
    MissingExtension,
    normalize_extension,
)

__all__ = [
    "DirectoryEntry",
    "DirectoryScanner",
    "EntryKind",
    "FOLDER_NO_EXTENSION",
    "MissingExtension",
    "REPORT_NO_EXTENSION",
    "normalize_extension",
]
