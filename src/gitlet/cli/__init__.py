"""Gitlet CLI -- terminal interface for the Gitlet version-control engine.

This module is NEVER imported from gitlet/__init__.py.
It is only loaded via the ``gitlet`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import click

from gitlet.cli.formatting import format_error, format_fatal, format_replay_prompt, get_console
from gitlet.exceptions import (
    EnvironmentFailure,
    InvariantViolation,
    OperationAbortedError,
    UserError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console

    from gitlet.gitlet import Gitlet
    from gitlet.models.commit import Commit

# Exit codes per error family
EXIT_USER_ERROR = 1
EXIT_ENVIRONMENT = 2
EXIT_FATAL = 3

DANGER_WARNING = (
    "Warning: The command you entered may alter the files in your working "
    "directory. Uncommitted changes may be lost. Are you sure you want to continue?"
)

CHOICE_PROMPT = (
    "Would you like to (c)ontinue, (s)kip this commit, or change this commit's (m)essage?"
)
MESSAGE_PROMPT = "Please enter a new message for this commit."


@click.group()
@click.option(
    "--root",
    default=".",
    envvar="GITLET_ROOT",
    type=click.Path(file_okay=False, path_type=Path),
    help="Working directory under version control.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(package_name="gitlet")
@click.pass_context
def cli(ctx: click.Context, root: Path, verbose: bool) -> None:
    """Gitlet: a local, single-user snapshot version-control system."""
    ctx.ensure_object(dict)
    ctx.obj["root"] = root
    ctx.obj["verbose"] = verbose

    logging.basicConfig(
        level=logging.WARNING, format="%(levelname)s:%(name)s:%(message)s"
    )
    logging.getLogger("gitlet").setLevel(logging.DEBUG if verbose else logging.WARNING)


@contextmanager
def _handle_errors(console: Console) -> Iterator[None]:
    """Format Gitlet exceptions as CLI errors and exit with the family's code."""
    try:
        yield
    except SystemExit:
        raise
    except UserError as e:
        format_error(str(e), console)
        raise SystemExit(EXIT_USER_ERROR) from None
    except EnvironmentFailure as e:
        format_error(str(e), console)
        raise SystemExit(EXIT_ENVIRONMENT) from None
    except InvariantViolation as e:
        format_fatal(str(e), console)
        raise SystemExit(EXIT_FATAL) from None


def _get_gitlet(ctx: click.Context) -> Gitlet:
    """Open the repository under the ``--root`` directory."""
    from gitlet.gitlet import Gitlet

    return Gitlet.open(ctx.obj["root"])


@contextmanager
def _gitlet_session(ctx: click.Context) -> Iterator[tuple[Gitlet, Console]]:
    """Context manager that opens a Gitlet, yields (gitlet, console), and handles cleanup.

    Ensures the repository is closed on exit and formats exceptions as CLI
    errors.
    """
    console = get_console()
    with _handle_errors(console):
        g = _get_gitlet(ctx)
        try:
            yield g, console
        finally:
            g.close()


def confirm_dangerous(yes: bool) -> None:
    """Ask before a command that may overwrite working files.

    Raises:
        OperationAbortedError: If the operator does not confirm.
    """
    if yes:
        return
    if not click.confirm(DANGER_WARNING, default=False):
        raise OperationAbortedError()


def yes_option(func):
    """``--yes`` flag skipping the dangerous-command confirmation."""
    return click.option(
        "-y", "--yes", is_flag=True, help="Do not ask for confirmation."
    )(func)


class ClickPrompter:
    """RebasePrompter reading interactive-rebase answers from the terminal."""

    def __init__(self, console: Console) -> None:
        self._console = console
        self._shown: str | None = None

    def prompt_choice(self, commit: Commit) -> str:
        if self._shown != commit.commit_id:
            format_replay_prompt(commit, self._console)
            self._shown = commit.commit_id
        return click.prompt(CHOICE_PROMPT, prompt_suffix="\n", show_default=False)

    def prompt_text(self, commit: Commit) -> str:
        return click.prompt(MESSAGE_PROMPT, prompt_suffix="\n")


# Register subcommands after cli group is defined
from gitlet.cli.commands.init import init  # noqa: E402
from gitlet.cli.commands.add import add  # noqa: E402
from gitlet.cli.commands.commit import commit  # noqa: E402
from gitlet.cli.commands.rm import rm  # noqa: E402
from gitlet.cli.commands.log import global_log, log  # noqa: E402
from gitlet.cli.commands.status import status  # noqa: E402
from gitlet.cli.commands.find import find  # noqa: E402
from gitlet.cli.commands.checkout import checkout  # noqa: E402
from gitlet.cli.commands.reset import reset  # noqa: E402
from gitlet.cli.commands.branch import branch, rm_branch  # noqa: E402
from gitlet.cli.commands.merge import merge  # noqa: E402
from gitlet.cli.commands.rebase import i_rebase, rebase  # noqa: E402

cli.add_command(init)
cli.add_command(add)
cli.add_command(commit)
cli.add_command(rm)
cli.add_command(log)
cli.add_command(global_log)
cli.add_command(status)
cli.add_command(find)
cli.add_command(checkout)
cli.add_command(reset)
cli.add_command(branch)
cli.add_command(rm_branch)
cli.add_command(merge)
cli.add_command(rebase)
cli.add_command(i_rebase)
