"""gitlet add -- stage a file for the next commit."""

from __future__ import annotations

import click


@click.command()
@click.argument("filename")
@click.pass_context
def add(ctx: click.Context, filename: str) -> None:
    """Stage FILENAME. It must differ from the version in the head commit."""
    from gitlet.cli import _gitlet_session

    with _gitlet_session(ctx) as (g, _console):
        g.add(filename)
