"""Merge operation for Gitlet.

Reconciles another branch into the working directory at whole-file
granularity. "Changed" below always means added or removed by some
commit strictly after the split point of the two branches.

For every file in the other branch head's manifest:

=================================================  ==========================
condition                                          action
=================================================  ==========================
absent from current head and changed on other      take other's version
changed on other only                              take other's version
changed on both                                    write ``<file>.conflicted``
changed on current only / on neither               keep working file
=================================================  ==========================

The merge creates no commit and moves no branch. Files deleted on the
other branch are not deleted from the working directory.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gitlet.exceptions import SelfMergeError
from gitlet.models.merge import FileAction, MergeAction, MergeResult
from gitlet.operations.dag import changed_files, commits_since, find_split_point

if TYPE_CHECKING:
    from gitlet.models.commit import Commit
    from gitlet.models.repository import Repository
    from gitlet.storage.snapshots import SnapshotStore
    from gitlet.storage.workdir import WorkingDirectory

logger = logging.getLogger(__name__)

DEFAULT_CONFLICT_SUFFIX = ".conflicted"


def classify_file(
    filename: str,
    current_head: Commit,
    these_changed: set[str],
    other_changed: set[str],
) -> FileAction:
    """Decide what happens to one file of the other branch's head."""
    changed_here = filename in these_changed
    changed_there = filename in other_changed
    if changed_there and (filename not in current_head.manifest or not changed_here):
        return FileAction.CHECKOUT
    if changed_here and changed_there:
        return FileAction.CONFLICT
    return FileAction.KEEP


def plan_merge(
    repo: Repository,
    other_branch: str,
) -> tuple[Commit, list[MergeAction]]:
    """Compute the split point and the non-trivial file actions of a merge.

    Returns:
        Tuple of (split_point, actions) where actions holds one entry per
        CHECKOUT or CONFLICT file, sorted by filename.

    Raises:
        BranchNotFoundError: If *other_branch* does not exist.
        SelfMergeError: If *other_branch* is the current branch.
    """
    other = repo.get_branch(other_branch)
    if other_branch == repo.current_branch:
        raise SelfMergeError(other_branch)

    current_head = repo.head_commit()
    other_head = repo.head_commit(other.name)
    split = find_split_point(repo, current_head.commit_id, other_head.commit_id)

    these_changed = changed_files(commits_since(repo, current_head.commit_id, split.commit_id))
    other_changed = changed_files(commits_since(repo, other_head.commit_id, split.commit_id))

    actions: list[MergeAction] = []
    for filename in sorted(other_head.manifest):
        action = classify_file(filename, current_head, these_changed, other_changed)
        logger.debug("merge %s: %s", filename, action.value)
        if action != FileAction.KEEP:
            actions.append(
                MergeAction(
                    filename=filename,
                    action=action,
                    source_commit=other_head.manifest[filename],
                )
            )
    return split, actions


def merge(
    repo: Repository,
    other_branch: str,
    snapshots: SnapshotStore,
    workdir: WorkingDirectory,
    *,
    conflict_suffix: str = DEFAULT_CONFLICT_SUFFIX,
) -> MergeResult:
    """Merge *other_branch* into the working directory of the current branch.

    Args:
        repo: Repository (read only).
        other_branch: Name of the branch to merge in.
        snapshots: Store holding the other branch's file versions.
        workdir: Working directory to update.
        conflict_suffix: Suffix for the file receiving the other version
            when both sides changed it.

    Returns:
        MergeResult listing every file taken over or conflicted.
    """
    split, actions = plan_merge(repo, other_branch)

    # Read everything first so a missing snapshot aborts before any write
    contents = {a.filename: snapshots.retrieve(a.source_commit, a.filename) for a in actions}

    written: list[MergeAction] = []
    for action in actions:
        if action.action == FileAction.CHECKOUT:
            target = action.filename
        else:
            target = action.filename + conflict_suffix
            logger.warning("Merge conflict in %s", action.filename)
        workdir.write(target, contents[action.filename])
        written.append(action.model_copy(update={"written_path": target}))

    result = MergeResult(
        current_branch=repo.current_branch,
        other_branch=other_branch,
        split_point=split.commit_id,
        actions=written,
    )
    logger.info(
        "Merged %s into %s: %d file(s) taken, %d conflict(s)",
        other_branch, repo.current_branch, len(result.checked_out), len(result.conflicts),
    )
    return result
