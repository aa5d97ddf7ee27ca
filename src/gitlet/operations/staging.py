"""Staging operations for Gitlet -- add and rm."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gitlet.exceptions import (
    FileNotFoundInWorkdirError,
    FileNotModifiedError,
    NothingToRemoveError,
)

if TYPE_CHECKING:
    from gitlet.models.repository import Repository
    from gitlet.storage.snapshots import SnapshotStore
    from gitlet.storage.workdir import WorkingDirectory

logger = logging.getLogger(__name__)


def stage_file(
    repo: Repository,
    filename: str,
    snapshots: SnapshotStore,
    workdir: WorkingDirectory,
) -> None:
    """Stage a file for the next commit.

    The file must exist and differ, line by line, from the version
    tracked by the current head. A file not tracked at all always counts
    as modified.

    Raises:
        FileNotFoundInWorkdirError: If the file does not exist.
        FileNotModifiedError: If it matches the head's stored version.
    """
    if not workdir.exists(filename):
        raise FileNotFoundInWorkdirError(filename)

    head = repo.head_commit()
    source = head.manifest.get(filename) if head is not None else None
    if source is not None and not workdir.lines_differ(
        workdir.path(filename), snapshots.path_for(source, filename)
    ):
        raise FileNotModifiedError(filename)

    repo.staging.add(filename)
    logger.debug("Staged %s", filename)


def remove_file(repo: Repository, filename: str) -> None:
    """Mark a file for removal in the next commit.

    The working copy is left alone.

    Raises:
        NothingToRemoveError: If the file is neither tracked by the head
            nor staged.
    """
    head = repo.head_commit()
    tracked = head is not None and filename in head.manifest
    if not tracked and filename not in repo.staging.staged:
        raise NothingToRemoveError(filename)

    repo.staging.remove(filename)
    logger.debug("Marked %s for removal", filename)
