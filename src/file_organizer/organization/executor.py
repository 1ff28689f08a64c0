"""Executor for move plans."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from file_organizer.errors import FolderIOError

from .models import MoveOperation, MovePlan

LOGGER = logging.getLogger(__name__)

MoveCallback = Callable[[MoveOperation], None]


class MoveExecutor:
    """Apply move plans to the filesystem without rollback."""

    def apply(
        self,
        plan: MovePlan,
        dry_run: bool = False,
        on_move: Optional[MoveCallback] = None,
    ) -> list[MoveOperation]:
        """Execute the moves of a plan in order.

        Moves completed before a failure stay in place.

        Args:
            plan: Plan computed by the planner.
            dry_run: When true, touch nothing, report each planned move through
                on_move, and return an empty list.
            on_move: Optional callback invoked after each completed (or, in a dry
                run, planned) move.

        Returns:
            list[MoveOperation]: Moves that were performed.

        Raises:
            FolderIOError: If a destination folder cannot be created or a move fails.
        """

        if dry_run:
            if on_move is not None:
                for move_op in plan.moves:
                    on_move(move_op)
            return []

        performed: list[MoveOperation] = []
        for move_op in plan.moves:
            self._move(move_op)
            performed.append(move_op)
            LOGGER.info("Moved %s -> %s", move_op.source, move_op.destination)
            if on_move is not None:
                on_move(move_op)
        return performed

    def _move(self, move_op: MoveOperation) -> None:
        destination_parent = move_op.destination.parent
        try:
            destination_parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FolderIOError.from_os_error(destination_parent, exc) from exc

        try:
            move_op.source.rename(move_op.destination)
        except OSError as exc:
            raise FolderIOError.from_os_error(move_op.source, exc) from exc


__all__ = ["MoveCallback", "MoveExecutor"]
