"""History utilities for Gitlet -- split point computation and ancestor walks.

History is strictly single-parented, so every walk follows ``parent_id``
from a head back to the root commit, which always terminates it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from gitlet.exceptions import SplitPointNotFoundError

if TYPE_CHECKING:
    from gitlet.models.commit import Commit
    from gitlet.models.repository import Repository

logger = logging.getLogger(__name__)


def iter_ancestors(repo: Repository, commit_id: str | None) -> Iterator[Commit]:
    """Yield the commit and each of its ancestors, newest first."""
    seen: set[str] = set()
    current = commit_id
    while current is not None and current not in seen:
        seen.add(current)
        commit = repo.get_commit(current)
        yield commit
        current = commit.parent_id


def get_ancestor_ids(repo: Repository, commit_id: str | None) -> set[str]:
    """All ancestor ids of a commit, including itself."""
    return {c.commit_id for c in iter_ancestors(repo, commit_id)}


def find_split_point(repo: Repository, head_a: str, head_b: str) -> Commit:
    """Find the nearest common ancestor of two heads.

    Collects every id on A's chain, then walks B's chain and returns the
    first commit already seen. Calling it with the same head twice
    returns that head.

    Raises:
        SplitPointNotFoundError: If the chains share no commit.
    """
    ancestors_a = get_ancestor_ids(repo, head_a)
    for commit in iter_ancestors(repo, head_b):
        if commit.commit_id in ancestors_a:
            logger.debug(
                "Split point of %s and %s is %s",
                head_a[:8], head_b[:8], commit.short_id,
            )
            return commit
    raise SplitPointNotFoundError(head_a, head_b)


def find_branch_split_point(repo: Repository, branch_a: str, branch_b: str) -> Commit:
    """Split point of two branches' heads."""
    head_a = repo.get_branch(branch_a).head
    head_b = repo.get_branch(branch_b).head
    if head_a is None or head_b is None:
        raise SplitPointNotFoundError(head_a or "", head_b or "")
    return find_split_point(repo, head_a, head_b)


def commits_since(repo: Repository, head: str, split_point: str) -> list[Commit]:
    """Commits strictly after *split_point* up to *head*, newest first."""
    commits: list[Commit] = []
    for commit in iter_ancestors(repo, head):
        if commit.commit_id == split_point:
            return commits
        commits.append(commit)
    raise SplitPointNotFoundError(head, split_point)


def changed_files(commits: Iterable[Commit]) -> set[str]:
    """Union of files added or removed across *commits*."""
    names: set[str] = set()
    for commit in commits:
        names |= commit.changed_files
    return names

