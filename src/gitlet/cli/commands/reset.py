"""gitlet reset -- move the current branch to a commit."""

from __future__ import annotations

import click

from gitlet.cli import yes_option


@click.command()
@click.argument("commit_id")
@yes_option
@click.pass_context
def reset(ctx: click.Context, commit_id: str, yes: bool) -> None:
    """Point the current branch at COMMIT_ID and restore its files.

    COMMIT_ID can be a full id or a unique prefix (min 4 chars).
    """
    from gitlet.cli import _gitlet_session, confirm_dangerous

    with _gitlet_session(ctx) as (g, console):
        confirm_dangerous(yes)
        commit = g.reset(commit_id)
        console.print(f"HEAD is now at [yellow]{commit.short_id}[/yellow]", highlight=False)
