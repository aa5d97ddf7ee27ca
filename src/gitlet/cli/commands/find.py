"""gitlet find -- look up commits by message."""

from __future__ import annotations

import click

from gitlet.cli.formatting import format_ids


@click.command()
@click.argument("message")
@click.pass_context
def find(ctx: click.Context, message: str) -> None:
    """Print the ids of all commits whose message is exactly MESSAGE."""
    from gitlet.cli import _gitlet_session

    with _gitlet_session(ctx) as (g, console):
        format_ids(g.find(message), console)
