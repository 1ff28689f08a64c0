"""Aggregate counts over a directory enumeration."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator

from pydantic import BaseModel, Field

from file_organizer.scanning.models import DirectoryEntry


class ScanReport(BaseModel):
    """Counts describing one scanned directory.

    Attributes:
        total_entries: Number of entries seen, files and directories combined.
        files: Number of regular files.
        dirs: Number of subdirectories.
        by_extension: File counts keyed by extension report label.
    """

    total_entries: int = 0
    files: int = 0
    dirs: int = 0
    by_extension: Dict[str, int] = Field(default_factory=dict)

    def sorted_extensions(self) -> Iterator[tuple[str, int]]:
        """Yield ``(label, count)`` pairs in ascending label order."""
        for label in sorted(self.by_extension):
            yield label, self.by_extension[label]


def build_report(entries: Iterable[DirectoryEntry]) -> ScanReport:
    """Fold enumerated entries into a ScanReport."""

    report = ScanReport()
    for entry in entries:
        report.total_entries += 1
        if entry.is_dir:
            report.dirs += 1
            continue
        report.files += 1
        label = entry.report_label
        report.by_extension[label] = report.by_extension.get(label, 0) + 1
    return report


__all__ = ["ScanReport", "build_report"]
