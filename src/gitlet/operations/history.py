"""History operations: log, global log, find, and status."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gitlet.exceptions import MessageNotFoundError
from gitlet.operations.branch import list_branches
from gitlet.operations.dag import iter_ancestors

if TYPE_CHECKING:
    from gitlet.models.branch import BranchInfo
    from gitlet.models.commit import Commit
    from gitlet.models.repository import Repository


@dataclass(frozen=True)
class StatusInfo:
    """Repository status returned by Gitlet.status().

    Attributes:
        branch_name: Current branch name.
        head_id: Current head commit id, or None before the first commit.
        branches: Every branch, sorted by name, current one flagged.
        staged: Files staged for the next commit, sorted.
        removed: Files marked for removal, sorted.
    """

    branch_name: str
    head_id: str | None
    branches: list[BranchInfo] = field(default_factory=list)
    staged: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        head = self.head_id[:8] if self.head_id else "None"
        return (
            f"{self.branch_name} @ {head} | {len(self.staged)} staged | "
            f"{len(self.removed)} removed"
        )


def log(repo: Repository, branch_name: str | None = None) -> list[Commit]:
    """History of a branch (default: current) from head to the initial commit."""
    branch = repo.current if branch_name is None else repo.get_branch(branch_name)
    return list(iter_ancestors(repo, branch.head))


def global_log(repo: Repository) -> list[Commit]:
    """Every commit ever made, oldest first."""
    return sorted(repo.commits.values(), key=lambda c: (c.timestamp, c.commit_id))


def find(repo: Repository, message: str) -> list[str]:
    """Ids of all commits with exactly this message, sorted.

    Raises:
        MessageNotFoundError: If no commit has the message.
    """
    ids = repo.message_index.get(message)
    if not ids:
        raise MessageNotFoundError(message)
    return sorted(ids)


def status(repo: Repository) -> StatusInfo:
    """Branches and pending staging entries."""
    return StatusInfo(
        branch_name=repo.current_branch,
        head_id=repo.current.head,
        branches=list_branches(repo),
        staged=sorted(repo.staging.staged),
        removed=sorted(repo.staging.removed),
    )
