"""Tests for move planning and execution."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from file_organizer.errors import FolderIOError
from file_organizer.organization import MoveExecutor, MoveOperation, MovePlan, OrganizePlanner
from file_organizer.scanning import DirectoryScanner


def _plan_for(root: Path) -> MovePlan:
    return OrganizePlanner().build_plan(root, DirectoryScanner().scan(root))


def test_plan_for_sample_folder(sample_folder: Path) -> None:
    plan = _plan_for(sample_folder)

    organized = sample_folder / "organized"
    assert plan.destination_root == organized
    assert [(op.source, op.destination) for op in plan.moves] == [
        (sample_folder / "a.txt", organized / "txt" / "a.txt"),
        (sample_folder / "b.TXT", organized / "txt" / "b.TXT"),
        (sample_folder / "c", organized / "no_ext" / "c"),
    ]


def test_plan_skips_entry_named_organized_even_when_a_file(tmp_path: Path) -> None:
    (tmp_path / "organized").write_text("not a folder yet", encoding="utf-8")
    (tmp_path / "keep.log").write_text("x", encoding="utf-8")

    plan = _plan_for(tmp_path)

    assert [op.source.name for op in plan.moves] == ["keep.log"]


def test_plan_is_empty_for_folder_without_files(tmp_path: Path) -> None:
    (tmp_path / "only-dir").mkdir()

    plan = _plan_for(tmp_path)

    assert plan.is_empty
    assert plan.moves == []


def test_custom_destination_dirname(tmp_path: Path) -> None:
    (tmp_path / "song.MP3").write_text("x", encoding="utf-8")

    plan = OrganizePlanner("sorted").build_plan(tmp_path, DirectoryScanner().scan(tmp_path))

    assert plan.moves[0].destination == tmp_path / "sorted" / "mp3" / "song.MP3"


def test_executor_moves_files(sample_folder: Path) -> None:
    plan = _plan_for(sample_folder)

    performed = MoveExecutor().apply(plan)

    assert performed == plan.moves
    organized = sample_folder / "organized"
    assert sorted(p.name for p in (organized / "txt").iterdir()) == ["a.txt", "b.TXT"]
    assert [p.name for p in (organized / "no_ext").iterdir()] == ["c"]
    assert (sample_folder / "sub" / "nested.md").exists()
    assert not (sample_folder / "a.txt").exists()


def test_executor_dry_run_touches_nothing(sample_folder: Path, snapshot_tree) -> None:
    before = snapshot_tree(sample_folder)

    performed = MoveExecutor().apply(_plan_for(sample_folder), dry_run=True)

    assert performed == []
    assert snapshot_tree(sample_folder) == before


def test_executor_dry_run_reports_planned_moves(sample_folder: Path) -> None:
    plan = _plan_for(sample_folder)
    seen: list[MoveOperation] = []

    performed = MoveExecutor().apply(plan, dry_run=True, on_move=seen.append)

    assert performed == []
    assert seen == plan.moves
    assert (sample_folder / "a.txt").exists()
    assert not (sample_folder / "organized").exists()


def test_second_run_plans_nothing(sample_folder: Path) -> None:
    MoveExecutor().apply(_plan_for(sample_folder))

    assert _plan_for(sample_folder).is_empty


def test_executor_reports_each_move(sample_folder: Path, caplog: pytest.LogCaptureFixture) -> None:
    seen: list[MoveOperation] = []
    caplog.set_level(logging.INFO, logger="file_organizer")

    MoveExecutor().apply(_plan_for(sample_folder), on_move=seen.append)

    assert [op.source.name for op in seen] == ["a.txt", "b.TXT", "c"]
    assert sum("Moved" in record.getMessage() for record in caplog.records) == 3


def test_executor_stops_at_first_failure(
    sample_folder: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    original_rename = Path.rename

    def _flaky_rename(self: Path, target):
        if self.name == "b.TXT":
            raise PermissionError(13, "Permission denied")
        return original_rename(self, target)

    monkeypatch.setattr(Path, "rename", _flaky_rename)

    with pytest.raises(FolderIOError) as excinfo:
        MoveExecutor().apply(_plan_for(sample_folder))

    assert excinfo.value.path == sample_folder / "b.TXT"
    assert excinfo.value.reason == "Permission denied"
    assert (sample_folder / "organized" / "txt" / "a.txt").exists()
    assert (sample_folder / "b.TXT").exists()
    assert (sample_folder / "c").exists()


def test_executor_reports_mkdir_failure(tmp_path: Path) -> None:
    source = tmp_path / "a.txt"
    source.write_text("x", encoding="utf-8")
    blocker = tmp_path / "organized"
    blocker.write_text("a file where a folder is needed", encoding="utf-8")
    plan = MovePlan(
        root=tmp_path,
        destination_root=blocker,
        moves=[MoveOperation(source=source, destination=blocker / "txt" / "a.txt")],
    )

    with pytest.raises(FolderIOError) as excinfo:
        MoveExecutor().apply(plan)

    assert excinfo.value.path == blocker / "txt"
    assert source.exists()
