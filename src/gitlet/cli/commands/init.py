"""gitlet init -- create a repository in the working directory."""

from __future__ import annotations

import click

from gitlet.cli.formatting import get_console


@click.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Create an empty repository with an initial commit on master."""
    from gitlet.cli import _handle_errors
    from gitlet.gitlet import Gitlet

    console = get_console()
    with _handle_errors(console):
        with Gitlet.init(ctx.obj["root"]) as g:
            console.print(
                f"Initialized empty Gitlet repository in [cyan]{g.config.repo_path(g.root)}[/cyan]",
                highlight=False,
            )
