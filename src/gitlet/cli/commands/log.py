"""gitlet log / global-log -- show commit history."""

from __future__ import annotations

import click

from gitlet.cli.formatting import format_log


@click.command()
@click.pass_context
def log(ctx: click.Context) -> None:
    """Show the current branch's history from head to the initial commit."""
    from gitlet.cli import _gitlet_session

    with _gitlet_session(ctx) as (g, console):
        format_log(g.log(), console)


@click.command("global-log")
@click.pass_context
def global_log(ctx: click.Context) -> None:
    """Show every commit ever made, oldest first."""
    from gitlet.cli import _gitlet_session

    with _gitlet_session(ctx) as (g, console):
        format_log(g.global_log(), console)
