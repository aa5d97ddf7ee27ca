"""gitlet rm -- mark a file for removal."""

from __future__ import annotations

import click


@click.command()
@click.argument("filename")
@click.pass_context
def rm(ctx: click.Context, filename: str) -> None:
    """Untrack FILENAME in the next commit. The working file is kept."""
    from gitlet.cli import _gitlet_session

    with _gitlet_session(ctx) as (g, _console):
        g.rm(filename)
