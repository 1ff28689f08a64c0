"""Command line interface for file-organizer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from file_organizer.config import ConfigError, OrganizerConfig, resolve_with_precedence
from file_organizer.errors import FolderIOError
from file_organizer.organization import MoveExecutor, MoveOperation, MovePlan, OrganizePlanner
from file_organizer.reporting import ScanReport, build_report
from file_organizer.scanning import DirectoryScanner

# File names may contain ":name:" sequences; emoji substitution would alter them.
console = Console(emoji=False)
error_console = Console(stderr=True, emoji=False)

LOGGER = logging.getLogger(__name__)
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _configure_logging(level: str) -> None:
    """Route package log records to stderr through a rich handler.

    Args:
        level: Logging level name applied to the ``file_organizer`` logger.
    """

    package_logger = logging.getLogger("file_organizer")
    package_logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=error_console, show_path=False, rich_tracebacks=True)
        )


def _handle_cli_error(
    message: str,
    *,
    code: str,
    json_output: bool,
    details: Any | None = None,
    original: Exception | None = None,
) -> None:
    """Emit a standardized error and terminate the command with exit status 1.

    Args:
        message: Human-readable error message.
        code: Machine-readable error identifier.
        json_output: Indicates whether JSON mode is active.
        details: Optional structured details to include in the payload.
        original: Original exception for chaining when not using JSON.

    Raises:
        SystemExit: When emitting JSON output to terminate the command.
        click.ClickException: For non-JSON flows to surface the error.
    """

    if json_output:
        payload: dict[str, Any] = {"error": {"code": code, "message": message}}
        if details is not None:
            payload["error"]["details"] = details
        console.print_json(data=payload)
        raise SystemExit(1)

    raise click.ClickException(message) from original


def _error_details(exc: Exception) -> dict[str, str]:
    """Return the structured details attached to JSON error payloads.

    Args:
        exc: Exception that aborted the command.

    Returns:
        dict[str, str]: Exception type, plus path and reason for I/O failures.
    """

    details = {"exception": type(exc).__name__}
    if isinstance(exc, FolderIOError):
        details["path"] = str(exc.path)
        details["reason"] = exc.reason
    return details


def _format_move(move_op: MoveOperation) -> str:
    """Render a move as ``source -> destination`` with markup escaped."""
    return f"{escape(str(move_op.source))} -> {escape(str(move_op.destination))}"


def _render_report(folder: Path, report: ScanReport) -> None:
    """Print a scan report as text."""

    console.print(f"Folder: {escape(str(folder))}", soft_wrap=True)
    console.print(f"Total entries: {report.total_entries}")
    console.print(f"Files: {report.files}")
    console.print(f"Dirs: {report.dirs}")
    console.print()
    console.print("Files by extension:")

    if not report.by_extension:
        console.print("  (none)")
        return

    for label, count in report.sorted_extensions():
        console.print(f"  {count:>8}  {escape(label)}", soft_wrap=True)


def _plan_payload(plan: MovePlan, *, dry_run: bool, moved: int) -> dict[str, Any]:
    """Build the JSON payload describing a plan and how many moves ran.

    Args:
        plan: Plan computed for the target folder.
        dry_run: Whether the command ran in dry-run mode.
        moved: Number of moves actually performed.

    Returns:
        dict[str, Any]: Payload with context, counts, and the planned moves.
    """

    return {
        "context": {
            "root": str(plan.root),
            "destination_root": str(plan.destination_root),
            "dry_run": dry_run,
        },
        "counts": {"planned": len(plan.moves), "moved": moved},
        "plan": [move_op.model_dump(mode="json") for move_op in plan.moves],
    }


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="file-organizer")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity written to stderr.",
)
@click.option("-v", "--verbose", is_flag=True, help="Shorthand for --log-level DEBUG.")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, verbose: bool) -> None:
    """Scan a folder or organize its files into subfolders by extension."""

    if verbose:
        log_level = "DEBUG"
    try:
        config = resolve_with_precedence(
            defaults=OrganizerConfig(),
            cli_overrides={"logging.level": log_level},
        )
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    _configure_logging(config.logging.level)
    LOGGER.debug("Resolved configuration: %s", config.model_dump(mode="json"))
    ctx.obj = config


@cli.command()
@click.argument("folder", type=click.Path(path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Emit the report as JSON.")
@click.pass_obj
def scan(config: OrganizerConfig, folder: Path, json_output: bool) -> None:
    """Print a summary of the files in FOLDER.

    Args:
        config: Resolved settings for this invocation.
        folder: Directory to inspect; subdirectories are counted, not entered.
        json_output: When True, emit JSON instead of text.

    Raises:
        click.ClickException: If the folder cannot be read.
    """

    try:
        entries = DirectoryScanner().scan(folder)
        report = build_report(entries)

        if json_output:
            console.print_json(
                data={
                    "context": {"root": str(folder)},
                    "counts": {
                        "total_entries": report.total_entries,
                        "files": report.files,
                        "dirs": report.dirs,
                    },
                    "by_extension": dict(report.sorted_extensions()),
                }
            )
            return

        _render_report(folder, report)
    except FolderIOError as exc:
        _handle_cli_error(
            f"Failed to scan {exc.path}: {exc.reason}",
            code="io_error",
            json_output=json_output,
            details=_error_details(exc),
            original=exc,
        )


@cli.command()
@click.argument("folder", type=click.Path(path_type=Path))
@click.option("--dry-run", is_flag=True, help="Show what would happen without moving files.")
@click.option("--json", "json_output", is_flag=True, help="Emit the plan and results as JSON.")
@click.pass_obj
def organize(config: OrganizerConfig, folder: Path, dry_run: bool, json_output: bool) -> None:
    """Organize the files in FOLDER into subfolders by extension.

    Args:
        config: Resolved settings for this invocation.
        folder: Directory whose top-level files are moved.
        dry_run: If True, print the plan without touching the filesystem.
        json_output: When True, emit JSON instead of text.

    Raises:
        click.ClickException: If planning or a move fails.
    """

    try:
        entries = DirectoryScanner().scan(folder)
        planner = OrganizePlanner(config.organization.destination_dirname)
        plan = planner.build_plan(folder, entries)

        if plan.is_empty:
            if json_output:
                console.print_json(data=_plan_payload(plan, dry_run=dry_run, moved=0))
            else:
                console.print(f"No files to organize in {escape(str(folder))}", soft_wrap=True)
            return

        def _report_move(move_op: MoveOperation) -> None:
            if json_output:
                return
            prefix = "  " if dry_run else "Moved "
            console.print(f"{prefix}{_format_move(move_op)}", soft_wrap=True)

        if dry_run and not json_output:
            console.print("Dry run: planned moves")

        performed = MoveExecutor().apply(plan, dry_run=dry_run, on_move=_report_move)

        if json_output:
            console.print_json(
                data=_plan_payload(plan, dry_run=dry_run, moved=len(performed))
            )
            return

        if dry_run:
            console.print()
            console.print("Nothing was moved (dry-run).")
            return

        console.print()
        console.print(
            f"[green]Done. Files organized into {escape(str(plan.destination_root))}[/green]",
            soft_wrap=True,
        )
    except FolderIOError as exc:
        _handle_cli_error(
            f"Failed to organize {exc.path}: {exc.reason}",
            code="io_error",
            json_output=json_output,
            details=_error_details(exc),
            original=exc,
        )


def main() -> None:
    """Invoke the Click CLI as the console script entry point."""
    cli()


if __name__ == "__main__":
    main()
