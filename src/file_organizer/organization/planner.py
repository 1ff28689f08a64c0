"""Planner for extension-based organization."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from file_organizer.scanning.models import DirectoryEntry

from .models import MoveOperation, MovePlan

LOGGER = logging.getLogger(__name__)

DEFAULT_DESTINATION_DIRNAME = "organized"


class OrganizePlanner:
    """Derive move plans that sort top-level files into extension folders."""

    def __init__(self, destination_dirname: str = DEFAULT_DESTINATION_DIRNAME) -> None:
        self.destination_dirname = destination_dirname

    def build_plan(self, root: Path, entries: Iterable[DirectoryEntry]) -> MovePlan:
        """Produce a move plan for the enumerated entries of root.

        Args:
            root: Directory the entries were enumerated from.
            entries: Entries returned by the directory scanner.

        Returns:
            MovePlan: One move per eligible file, in enumeration order. Empty when
            nothing qualifies.
        """

        destination_root = root / self.destination_dirname
        plan = MovePlan(root=root, destination_root=destination_root)

        for entry in entries:
            move_op = self._build_move(entry, destination_root)
            if move_op is not None:
                plan.moves.append(move_op)

        LOGGER.debug("Planned %d move(s) for %s", len(plan.moves), root)
        return plan

    def _build_move(
        self,
        entry: DirectoryEntry,
        destination_root: Path,
    ) -> MoveOperation | None:
        if entry.name == self.destination_dirname:
            return None
        if not entry.is_file:
            return None

        return MoveOperation(
            source=entry.path,
            destination=destination_root / entry.folder_label / entry.name,
        )


__all__ = ["DEFAULT_DESTINATION_DIRNAME", "OrganizePlanner"]
