"""Rich formatting helpers for the Gitlet CLI.

Provides functions that format engine results for terminal display.
Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes),
so the plain-text layout below is what scripts and tests see.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gitlet.models.merge import FileAction

if TYPE_CHECKING:
    from datetime import datetime

    from gitlet.models.commit import Commit
    from gitlet.models.merge import MergeResult, RebaseResult
    from gitlet.operations.history import StatusInfo

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def format_time(value: datetime) -> str:
    """Commit time in the local timezone."""
    return value.astimezone().strftime(TIME_FORMAT)


def format_commit(commit: Commit, console: Console) -> None:
    """One log entry: separator, id, time, message, blank line."""
    console.print("====")
    console.print(f"Commit [yellow]{commit.commit_id}[/yellow].")
    console.print(f"[dim]{format_time(commit.timestamp)}[/dim]")
    console.print(escape(commit.message), highlight=False)
    console.print()


def format_log(commits: list[Commit], console: Console) -> None:
    """Display commits in the given order."""
    for commit in commits:
        format_commit(commit, console)


def format_status(info: StatusInfo, console: Console) -> None:
    """Display branches, staged files and files marked for removal."""
    console.print("[bold]=== Branches ===[/bold]")
    for branch in info.branches:
        if branch.is_current:
            console.print(f"[green]*{escape(branch.name)}[/green]", highlight=False)
        else:
            console.print(escape(branch.name), highlight=False)
    console.print()

    console.print("[bold]=== Staged Files ===[/bold]")
    for name in info.staged:
        console.print(escape(name), highlight=False)
    console.print()

    console.print("[bold]=== Files Marked for Removal ===[/bold]")
    for name in info.removed:
        console.print(escape(name), highlight=False)


def format_ids(commit_ids: list[str], console: Console) -> None:
    for commit_id in commit_ids:
        console.print(commit_id, highlight=False)


def format_merge_result(result: MergeResult, console: Console) -> None:
    """Display the files a merge wrote."""
    if result.actions:
        table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
        table.add_column("Action", style="cyan")
        table.add_column("File")
        table.add_column("Written")
        for action in result.actions:
            style = "red" if action.action == FileAction.CONFLICT else "green"
            table.add_row(
                f"[{style}]{action.action.value}[/{style}]",
                escape(action.filename),
                escape(action.written_path or ""),
            )
        console.print(table)
    else:
        console.print("[dim]Nothing to merge.[/dim]")
    if result.has_conflicts:
        console.print("[yellow]Encountered a merge conflict.[/yellow]")


def format_rebase_result(result: RebaseResult, console: Console) -> None:
    if result.fast_forward:
        console.print(
            f"Fast-forwarded [green]{escape(result.branch)}[/green] to "
            f"[yellow]{result.new_head[:8]}[/yellow]"
        )
        return
    console.print(
        f"Rebased [green]{escape(result.branch)}[/green] onto "
        f"[green]{escape(result.target_branch)}[/green]: "
        f"{len(result.replayed_commits)} replayed, {len(result.skipped)} skipped "
        f"([yellow]{result.new_head[:8]}[/yellow])"
    )


def format_replay_prompt(commit: Commit, console: Console) -> None:
    """Show the commit an interactive rebase is about to replay."""
    console.print("Currently replaying:")
    format_commit(commit, console)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)


def format_fatal(message: str, console: Console) -> None:
    """Display an internal consistency failure."""
    console.print(f"[bold red]fatal:[/bold red] {escape(message)}", highlight=False, soft_wrap=True)
