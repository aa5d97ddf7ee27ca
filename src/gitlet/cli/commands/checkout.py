"""gitlet checkout -- restore a file or switch branches."""

from __future__ import annotations

import click

from gitlet.cli import yes_option


@click.command()
@click.argument("target")
@click.argument("filename", required=False)
@yes_option
@click.pass_context
def checkout(ctx: click.Context, target: str, filename: str | None, yes: bool) -> None:
    """Checkout a branch or a file.

    \b
    gitlet checkout BRANCH           switch to BRANCH
    gitlet checkout FILE             restore FILE from the head commit
    gitlet checkout COMMIT FILE      restore FILE from COMMIT (id or prefix)

    A name that is both a branch and a file means the branch.
    """
    from gitlet.cli import _gitlet_session, confirm_dangerous

    with _gitlet_session(ctx) as (g, console):
        confirm_dangerous(yes)
        is_branch = filename is None and target in g.repository.branches
        g.checkout(target, filename)
        if is_branch:
            console.print(f"Switched to branch [green]{target}[/green]", highlight=False)
