"""gitlet status -- show branches and staging area."""

from __future__ import annotations

import click

from gitlet.cli.formatting import format_status


@click.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show branches, staged files and files marked for removal."""
    from gitlet.cli import _gitlet_session

    with _gitlet_session(ctx) as (g, console):
        format_status(g.status(), console)
