"""gitlet commit -- record the staged changes."""

from __future__ import annotations

import click
from rich.markup import escape


@click.command()
@click.argument("message", required=False, default="")
@click.pass_context
def commit(ctx: click.Context, message: str) -> None:
    """Commit the staging area with MESSAGE."""
    from gitlet.cli import _gitlet_session

    with _gitlet_session(ctx) as (g, console):
        info = g.commit(message)
        console.print(
            f"[[green]{escape(g.current_branch)}[/green] [yellow]{info.short_id}[/yellow]] "
            f"{escape(info.message)}",
            highlight=False,
        )
