"""Repository aggregate root for Gitlet.

A Repository value holds the entire version-control state: the
append-only commit table, the branch table, the staging area, and a
message index derived from the commits. Operations receive it
explicitly; nothing in the engine keeps it as module state.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from gitlet.exceptions import BranchNotFoundError, CommitIdCollisionError, CommitNotFoundError
from gitlet.models.branch import Branch
from gitlet.models.commit import Commit
from gitlet.models.config import GitletConfig
from gitlet.models.staging import StagingArea


class Repository(BaseModel):
    """Commits, branches, staging area and message index."""

    commits: dict[str, Commit] = {}
    branches: dict[str, Branch] = {}
    current_branch: str
    staging: StagingArea = StagingArea()
    message_index: dict[str, set[str]] = {}

    @classmethod
    def initialize(cls, config: GitletConfig, timestamp: datetime) -> Repository:
        """Create a repository with the default branch and an empty initial commit."""
        repo = cls(
            current_branch=config.default_branch,
            branches={config.default_branch: Branch(name=config.default_branch)},
        )
        initial = Commit.create(config.initial_message, timestamp, parent=None)
        repo.add_commit(initial)
        repo.current.head = initial.commit_id
        return repo

    # ------------------------------------------------------------------
    # Commit table
    # ------------------------------------------------------------------

    def add_commit(self, commit: Commit) -> None:
        """Register a commit and index its message.

        Raises:
            CommitIdCollisionError: If the id is already registered.
        """
        if commit.commit_id in self.commits:
            raise CommitIdCollisionError(commit.commit_id)
        self.commits[commit.commit_id] = commit
        self.message_index.setdefault(commit.message, set()).add(commit.commit_id)

    def get_commit(self, commit_id: str) -> Commit:
        commit = self.commits.get(commit_id)
        if commit is None:
            raise CommitNotFoundError(commit_id)
        return commit

    def rebuild_message_index(self) -> None:
        self.message_index = {}
        for commit in self.commits.values():
            self.message_index.setdefault(commit.message, set()).add(commit.commit_id)

    # ------------------------------------------------------------------
    # Branch table
    # ------------------------------------------------------------------

    @property
    def current(self) -> Branch:
        return self.branches[self.current_branch]

    def get_branch(self, name: str) -> Branch:
        branch = self.branches.get(name)
        if branch is None:
            raise BranchNotFoundError(name)
        return branch

    def head_commit(self, branch_name: str | None = None) -> Commit | None:
        """Head commit of *branch_name* (default: the current branch)."""
        branch = self.current if branch_name is None else self.get_branch(branch_name)
        if branch.head is None:
            return None
        return self.get_commit(branch.head)
