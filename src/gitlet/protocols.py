"""Protocols for pluggable Gitlet collaborators.

RebasePrompter collects interactive rebase decisions; Clock supplies
commit timestamps. Both are structural (runtime_checkable Protocols) so
tests can pass plain objects or lambdas.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gitlet.models.commit import Commit
    from gitlet.models.merge import RebaseDecision


Clock = Callable[[], datetime]
"""Zero-argument callable returning the timestamp for a new commit."""

Decider = Callable[["Commit"], "RebaseDecision"]
"""Maps an original commit to the operator's replay decision."""


def utc_now() -> datetime:
    """Default clock: timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


@runtime_checkable
class RebasePrompter(Protocol):
    """Interactive input for rebase.

    ``prompt_choice`` returns the raw answer for one commit; callers keep
    asking until it is one of ``continue``, ``skip`` or ``reword`` (or the
    single-letter forms ``c``, ``s``, ``m``). ``prompt_text`` returns the
    replacement message after a reword.
    """

    def prompt_choice(self, commit: Commit) -> str: ...

    def prompt_text(self, commit: Commit) -> str: ...
