"""Navigation operations for Gitlet -- reset and checkout.

These operations move branch heads or restore stored file versions into
the working directory. They never create commits.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gitlet.exceptions import (
    AmbiguousPrefixError,
    CommitNotFoundError,
    CurrentBranchError,
    FileNotInCommitError,
)

if TYPE_CHECKING:
    from gitlet.models.commit import Commit
    from gitlet.models.repository import Repository
    from gitlet.storage.snapshots import SnapshotStore
    from gitlet.storage.workdir import WorkingDirectory

logger = logging.getLogger(__name__)

_MIN_PREFIX = 4


def resolve_commit(repo: Repository, ref: str) -> Commit:
    """Resolve a full commit id or a unique id prefix (min 4 chars).

    Raises:
        CommitNotFoundError: If nothing matches.
        AmbiguousPrefixError: If a prefix matches several commits.
    """
    commit = repo.commits.get(ref)
    if commit is not None:
        return commit

    if len(ref) >= _MIN_PREFIX:
        matches = sorted(cid for cid in repo.commits if cid.startswith(ref))
        if len(matches) > 1:
            raise AmbiguousPrefixError(ref, matches)
        if matches:
            return repo.commits[matches[0]]

    raise CommitNotFoundError(ref)


def restore_files(
    commit: Commit,
    snapshots: SnapshotStore,
    workdir: WorkingDirectory,
) -> None:
    """Overwrite every manifest file of *commit* with its stored version."""
    for name, source in sorted(commit.manifest.items()):
        workdir.write(name, snapshots.retrieve(source, name))


def reset(
    repo: Repository,
    commit_id: str,
    snapshots: SnapshotStore,
    workdir: WorkingDirectory,
) -> Commit:
    """Point the current branch at *commit_id* and restore its files.

    Files absent from the commit's manifest are left untouched.

    Raises:
        CommitNotFoundError: If the commit does not exist.
    """
    commit = repo.get_commit(commit_id)
    branch = repo.current
    branch.head = commit.commit_id
    restore_files(commit, snapshots, workdir)
    logger.info("Reset %s to %s", branch.name, commit.short_id)
    return commit


def checkout_file(
    repo: Repository,
    filename: str,
    snapshots: SnapshotStore,
    workdir: WorkingDirectory,
    *,
    commit_id: str | None = None,
) -> Commit:
    """Restore one file from the head (default) or from a given commit.

    Raises:
        CommitNotFoundError: If *commit_id* does not resolve.
        FileNotInCommitError: If the commit does not track *filename*.
    """
    if commit_id is None:
        commit = repo.head_commit()
        missing_msg = (
            "File does not exist in the most recent commit, or no such branch exists."
        )
    else:
        commit = resolve_commit(repo, commit_id)
        missing_msg = "File does not exist in that commit."

    if commit is None or filename not in commit.manifest:
        raise FileNotInCommitError(filename, missing_msg)

    workdir.write(filename, snapshots.retrieve(commit.manifest[filename], filename))
    logger.debug("Checked out %s from %s", filename, commit.short_id)
    return commit


def checkout_branch(
    repo: Repository,
    branch_name: str,
    snapshots: SnapshotStore,
    workdir: WorkingDirectory,
) -> Commit | None:
    """Make *branch_name* current and restore its head's files.

    Raises:
        BranchNotFoundError: If the branch does not exist.
        CurrentBranchError: If it is already the current branch.
    """
    branch = repo.get_branch(branch_name)
    if branch_name == repo.current_branch:
        raise CurrentBranchError(branch_name)

    repo.current_branch = branch_name
    head = repo.head_commit()
    if head is not None:
        restore_files(head, snapshots, workdir)
    logger.info("Switched to branch %s", branch.name)
    return head
