"""gitlet branch / rm-branch -- create and delete branches."""

from __future__ import annotations

import click


@click.command()
@click.argument("name")
@click.pass_context
def branch(ctx: click.Context, name: str) -> None:
    """Create branch NAME at the current head without switching to it."""
    from gitlet.cli import _gitlet_session

    with _gitlet_session(ctx) as (g, _console):
        g.branch(name)


@click.command("rm-branch")
@click.argument("name")
@click.pass_context
def rm_branch(ctx: click.Context, name: str) -> None:
    """Delete branch NAME. Its commits are kept."""
    from gitlet.cli import _gitlet_session

    with _gitlet_session(ctx) as (g, _console):
        g.rm_branch(name)
