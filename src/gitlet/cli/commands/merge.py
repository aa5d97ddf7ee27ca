"""gitlet merge -- merge a branch into the working directory."""

from __future__ import annotations

import click

from gitlet.cli import yes_option
from gitlet.cli.formatting import format_merge_result


@click.command()
@click.argument("branch_name")
@yes_option
@click.pass_context
def merge(ctx: click.Context, branch_name: str, yes: bool) -> None:
    """Merge BRANCH_NAME's changes into the working directory.

    Files changed on both sides since the split point are written next to
    the working copy as FILE.conflicted. No commit is made.
    """
    from gitlet.cli import _gitlet_session, confirm_dangerous

    with _gitlet_session(ctx) as (g, console):
        confirm_dangerous(yes)
        format_merge_result(g.merge(branch_name), console)
