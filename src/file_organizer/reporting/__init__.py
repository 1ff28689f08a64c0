"""Scan reporting."""

from .report import ScanReport, build_report

__all__ = ["ScanReport", "build_report"]
