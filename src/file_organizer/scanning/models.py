"""Entry models produced by directory enumeration."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel


class MissingExtension(Enum):
    """Tag for files whose name carries no usable extension."""

    NO_EXTENSION = "no_ext"


# The report and the destination folder spell the same tag differently.
FOLDER_NO_EXTENSION = MissingExtension.NO_EXTENSION.value
REPORT_NO_EXTENSION = f"({MissingExtension.NO_EXTENSION.value})"


class EntryKind(str, Enum):
    """Classification of a directory entry."""

    FILE = "file"
    DIR = "dir"


def normalize_extension(name: str) -> Optional[str]:
    """Return the lower-cased extension of a file name, if it has one.

    The extension is the text after the last dot. Names without a dot, names
    whose only dot is the leading one (``.gitignore``), and names ending in a
    dot (``notes.``) have no extension.

    Args:
        name: Bare file name, without any directory component.

    Returns:
        Optional[str]: Extension without the dot, or ``None``.
    """

    stem, dot, suffix = name.rpartition(".")
    if not dot or not stem or not suffix:
        return None
    return suffix.lower()


class DirectoryEntry(BaseModel):
    """One immediate child of a scanned directory.

    Attributes:
        path: Path of the entry, joined onto the scanned folder as given.
        kind: Whether the entry is a regular file or a directory.
        extension: Normalized extension for files; always ``None`` for directories.
    """

    path: Path
    kind: EntryKind
    extension: Optional[str] = None

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_file(self) -> bool:
        return self.kind == EntryKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.DIR

    @property
    def report_label(self) -> str:
        """Extension key used in scan reports."""
        return self.extension if self.extension is not None else REPORT_NO_EXTENSION

    @property
    def folder_label(self) -> str:
        """Folder name used under the destination root."""
        return self.extension if self.extension is not None else FOLDER_NO_EXTENSION


__all__ = [
    "DirectoryEntry",
    "EntryKind",
    "FOLDER_NO_EXTENSION",
    "MissingExtension",
    "REPORT_NO_EXTENSION",
    "normalize_extension",
]
