"""Move plan data models."""

from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import BaseModel, Field


class MoveOperation(BaseModel):
    """Represents moving one file into its extension folder.

    Attributes:
        source: Current path of the file.
        destination: Path the file is moved to.
    """

    source: Path
    destination: Path


class MovePlan(BaseModel):
    """Ordered moves computed for one directory.

    Attributes:
        root: Directory the plan was computed for.
        destination_root: Folder under root that receives the extension folders.
        moves: Moves in enumeration order.
    """

    root: Path
    destination_root: Path
    moves: List[MoveOperation] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.moves


__all__ = ["MoveOperation", "MovePlan"]
