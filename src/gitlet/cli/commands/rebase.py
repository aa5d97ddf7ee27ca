"""gitlet rebase / i-rebase -- replay the current branch onto another."""

from __future__ import annotations

import click

from gitlet.cli import yes_option
from gitlet.cli.formatting import format_rebase_result


@click.command()
@click.argument("branch_name")
@yes_option
@click.pass_context
def rebase(ctx: click.Context, branch_name: str, yes: bool) -> None:
    """Replay the current branch's commits on top of BRANCH_NAME."""
    from gitlet.cli import _gitlet_session, confirm_dangerous

    with _gitlet_session(ctx) as (g, console):
        confirm_dangerous(yes)
        format_rebase_result(g.rebase(branch_name), console)


@click.command("i-rebase")
@click.argument("branch_name")
@yes_option
@click.pass_context
def i_rebase(ctx: click.Context, branch_name: str, yes: bool) -> None:
    """Rebase interactively: continue, skip or reword each replayed commit."""
    from gitlet.cli import ClickPrompter, _gitlet_session, confirm_dangerous

    with _gitlet_session(ctx) as (g, console):
        confirm_dangerous(yes)
        result = g.rebase(branch_name, prompter=ClickPrompter(console))
        format_rebase_result(result, console)
