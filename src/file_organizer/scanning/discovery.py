"""Directory enumeration."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from file_organizer.errors import FolderIOError

from .models import DirectoryEntry, EntryKind, normalize_extension

LOGGER = logging.getLogger(__name__)


class DirectoryScanner:
    """List and classify the immediate children of a directory."""

    def scan(self, root: Path) -> list[DirectoryEntry]:
        """Return the top-level entries of root, sorted by name.

        Symbolic links, sockets, FIFOs, and device nodes are skipped. Any metadata
        read failure aborts the scan; no partial listing is returned.

        Args:
            root: Directory to enumerate. Not recursed into.

        Returns:
            list[DirectoryEntry]: Classified entries.

        Raises:
            FolderIOError: If root is not a readable directory or an entry cannot
                be inspected.
        """

        entries: list[DirectoryEntry] = []
        try:
            with os.scandir(root) as iterator:
                for item in iterator:
                    entry = self._classify(root, item)
                    if entry is not None:
                        entries.append(entry)
        except OSError as exc:
            raise FolderIOError.from_os_error(root, exc) from exc

        entries.sort(key=lambda entry: entry.name)
        LOGGER.info("Scanned %s: %d entries", root, len(entries))
        return entries

    def _classify(self, root: Path, item: os.DirEntry[str]) -> DirectoryEntry | None:
        path = root / item.name
        try:
            mode = item.stat(follow_symlinks=False).st_mode
        except OSError as exc:
            raise FolderIOError.from_os_error(path, exc) from exc

        if stat.S_ISDIR(mode):
            return DirectoryEntry(path=path, kind=EntryKind.DIR)
        if stat.S_ISREG(mode):
            return DirectoryEntry(
                path=path,
                kind=EntryKind.FILE,
                extension=normalize_extension(item.name),
            )

        LOGGER.debug("Skipping %s: not a regular file or directory", path)
        return None


__all__ = ["DirectoryScanner"]
