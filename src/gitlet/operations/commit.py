"""Commit creation for Gitlet.

Turns the staging area into a new commit on the current branch and
stores the current working content of every added file.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from gitlet.exceptions import (
    EmptyMessageError,
    FileNotFoundInWorkdirError,
    NothingToCommitError,
)
from gitlet.models.commit import Commit

if TYPE_CHECKING:
    from gitlet.models.repository import Repository
    from gitlet.storage.snapshots import SnapshotStore
    from gitlet.storage.workdir import WorkingDirectory

logger = logging.getLogger(__name__)


def create_commit(
    repo: Repository,
    message: str,
    snapshots: SnapshotStore,
    workdir: WorkingDirectory,
    *,
    timestamp: datetime,
) -> Commit:
    """Commit the staging area to the current branch.

    The very first commit of a branch may be empty; every later commit
    needs at least one staged addition or removal. All preconditions are
    checked before the repository is touched.

    Args:
        repo: Repository to mutate.
        message: Commit message.
        snapshots: Store receiving copies of the added files.
        workdir: Working directory holding the files to copy.
        timestamp: Creation time (part of the commit id).

    Returns:
        The new Commit, now the head of the current branch.

    Raises:
        EmptyMessageError: If *message* is blank.
        NothingToCommitError: If nothing is staged and the branch has a head.
        FileNotFoundInWorkdirError: If a staged file vanished from disk.
        CommitIdCollisionError: If the new id is already taken; nothing is
            changed in that case.
    """
    if not message.strip():
        raise EmptyMessageError()

    branch = repo.current
    staging = repo.staging
    if staging.is_empty and branch.head is not None:
        raise NothingToCommitError()

    for name in sorted(staging.staged):
        if not workdir.exists(name):
            raise FileNotFoundInWorkdirError(name)

    parent = repo.get_commit(branch.head) if branch.head is not None else None
    commit = Commit.create(
        message,
        timestamp,
        parent,
        added_files=staging.staged,
        removed_files=staging.removed,
    )

    repo.add_commit(commit)
    branch.head = commit.commit_id
    staging.clear()
    snapshots.materialize(commit.commit_id, commit.added_files, workdir)

    logger.info(
        "Committed %s on %s (+%d -%d)",
        commit.short_id, branch.name, len(commit.added_files), len(commit.removed_files),
    )
    return commit
