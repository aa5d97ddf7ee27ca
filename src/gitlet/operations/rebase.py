"""Rebase operations for Gitlet.

Replays the commits of the current branch since its split point with a
target branch on top of the target's head. Original commits are never
modified; every replayed commit is a new Commit with a fresh id.

Replayed manifests are built directly rather than through
``Commit.create``: each added file keeps pointing at the snapshot of the
ORIGINAL commit, so no file content is copied during a rebase.

Usage::

    plan = plan_rebase(repo, "master")
    replayed = replay_commits(repo, plan, decide, clock=utc_now)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gitlet.exceptions import AlreadyUpToDateError, CommitIdCollisionError, SelfRebaseError
from gitlet.hashing import compute_commit_id
from gitlet.models.commit import Commit
from gitlet.models.merge import RebaseAction, RebaseDecision, RebaseResult
from gitlet.operations.dag import changed_files, commits_since, find_split_point
from gitlet.operations.navigation import reset
from gitlet.protocols import utc_now

if TYPE_CHECKING:
    from gitlet.models.repository import Repository
    from gitlet.protocols import Clock, Decider, RebasePrompter
    from gitlet.storage.snapshots import SnapshotStore
    from gitlet.storage.workdir import WorkingDirectory

logger = logging.getLogger(__name__)

_CHOICES = {
    "continue": RebaseAction.CONTINUE,
    "c": RebaseAction.CONTINUE,
    "skip": RebaseAction.SKIP,
    "s": RebaseAction.SKIP,
    "reword": RebaseAction.REWORD,
    "m": RebaseAction.REWORD,
}


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------


@dataclass
class RebasePlan:
    """What a rebase will do, computed before anything is mutated.

    Attributes:
        branch: Name of the branch being rebased (the current branch).
        target_branch: Name of the branch rebased onto.
        split_point: Nearest common ancestor of both heads.
        target_head: Head commit of the target branch.
        fast_forward: True when the current head IS the split point.
        commits: Commits to replay, oldest first.
        these_changed: Files changed on the current branch since the split.
        other_changed: Files changed on the target branch since the split.
        propagate: Filename -> target-head manifest entry for files
            changed on the target only. Overlaid on every replayed commit.
    """

    branch: str
    target_branch: str
    split_point: Commit
    target_head: Commit
    fast_forward: bool = False
    commits: list[Commit] = field(default_factory=list)
    these_changed: set[str] = field(default_factory=set)
    other_changed: set[str] = field(default_factory=set)
    propagate: dict[str, str] = field(default_factory=dict)


def plan_rebase(repo: Repository, target: str) -> RebasePlan:
    """Compute the rebase plan of the current branch onto *target*.

    Raises:
        BranchNotFoundError: If *target* does not exist.
        SelfRebaseError: If *target* is the current branch.
        AlreadyUpToDateError: If the target head is already an ancestor
            of (or equal to) the current head.
    """
    repo.get_branch(target)
    if target == repo.current_branch:
        raise SelfRebaseError(target)

    current_head = repo.head_commit()
    target_head = repo.head_commit(target)
    split = find_split_point(repo, current_head.commit_id, target_head.commit_id)

    if split.commit_id == target_head.commit_id:
        raise AlreadyUpToDateError(target)

    plan = RebasePlan(
        branch=repo.current_branch,
        target_branch=target,
        split_point=split,
        target_head=target_head,
    )
    if split.commit_id == current_head.commit_id:
        plan.fast_forward = True
        return plan

    ours = commits_since(repo, current_head.commit_id, split.commit_id)
    theirs = commits_since(repo, target_head.commit_id, split.commit_id)
    plan.commits = list(reversed(ours))
    plan.these_changed = changed_files(ours)
    plan.other_changed = changed_files(theirs)
    plan.propagate = {
        name: source
        for name, source in target_head.manifest.items()
        if name in plan.other_changed and name not in plan.these_changed
    }
    logger.debug(
        "Rebase plan: %d commit(s) onto %s, propagating %s",
        len(plan.commits), target_head.short_id, sorted(plan.propagate),
    )
    return plan


# ---------------------------------------------------------------------------
# Replay
# ---------------------------------------------------------------------------


def _replay_one(
    original: Commit,
    parent: Commit,
    message: str,
    propagate: dict[str, str],
    clock: Clock,
) -> Commit:
    timestamp = clock()
    manifest = {
        name: source
        for name, source in parent.manifest.items()
        if name not in original.removed_files
    }
    manifest.update(propagate)
    for name in original.added_files:
        manifest[name] = original.manifest[name]
    return Commit(
        commit_id=compute_commit_id(parent.commit_id, timestamp, message),
        message=message,
        timestamp=timestamp,
        parent_id=parent.commit_id,
        manifest=manifest,
        added_files=original.added_files,
        removed_files=original.removed_files,
    )


def replay_commits(
    repo: Repository,
    plan: RebasePlan,
    decide: Decider,
    *,
    clock: Clock = utc_now,
) -> tuple[list[Commit], list[str]]:
    """Replay the planned commits onto the target head.

    Every decision is collected and every new commit built before any of
    them is registered, so a colliding id leaves the repository untouched.
    The current branch head then advances to the last replayed commit.

    When every commit is skipped the head lands on the target head. This
    differs from classic Gitlet, which leaves the branch on its old head
    and only resets the working files to it.

    Returns:
        Tuple of (replayed commits oldest first, skipped original ids).

    Raises:
        CommitIdCollisionError: If a replayed commit would reuse a stored id.
    """
    branch = repo.get_branch(plan.branch)
    previous = plan.target_head
    replayed: list[Commit] = []
    skipped: list[str] = []

    for original in plan.commits:
        decision = decide(original)
        if decision.action == RebaseAction.SKIP:
            skipped.append(original.commit_id)
            logger.debug("Skipped %s", original.short_id)
            continue

        message = original.message
        if decision.action == RebaseAction.REWORD:
            message = decision.message
        new_commit = _replay_one(original, previous, message, plan.propagate, clock)
        if new_commit.commit_id in repo.commits:
            raise CommitIdCollisionError(new_commit.commit_id)
        replayed.append(new_commit)
        previous = new_commit
        logger.debug("Replayed %s as %s", original.short_id, new_commit.short_id)

    for new_commit in replayed:
        repo.add_commit(new_commit)
    branch.head = previous.commit_id
    return replayed, skipped


def keep_all(commit: Commit) -> RebaseDecision:
    """Non-interactive decider: replay every commit unchanged."""
    return RebaseDecision.keep()


def interactive_decider(prompter: RebasePrompter) -> Decider:
    """Build a decider that asks *prompter* about each commit.

    Unrecognized answers are asked again until a valid choice arrives.
    """

    def decide(commit: Commit) -> RebaseDecision:
        while True:
            answer = prompter.prompt_choice(commit).strip().lower()
            action = _CHOICES.get(answer)
            if action is not None:
                break
            logger.debug("Ignoring rebase answer %r", answer)
        if action == RebaseAction.REWORD:
            return RebaseDecision.reword(prompter.prompt_text(commit))
        return RebaseDecision(action=action)

    return decide


# ---------------------------------------------------------------------------
# Rebase
# ---------------------------------------------------------------------------


def rebase(
    repo: Repository,
    target: str,
    snapshots: SnapshotStore,
    workdir: WorkingDirectory,
    *,
    decide: Decider | None = None,
    clock: Clock = utc_now,
) -> RebaseResult:
    """Rebase the current branch onto *target* and reset the working directory.

    A fast-forward moves the head to the target head without creating
    commits. Otherwise the range since the split point is replayed,
    consulting *decide* for each commit (default: keep all).

    Args:
        repo: Repository to mutate.
        target: Branch to rebase onto.
        snapshots: Store holding file versions for the final reset.
        workdir: Working directory reset to the new head.
        decide: Per-commit decision callback.
        clock: Timestamp source for replayed commits.

    Returns:
        RebaseResult describing the replay.
    """
    plan = plan_rebase(repo, target)

    if plan.fast_forward:
        replayed: list[Commit] = []
        skipped: list[str] = []
        repo.current.head = plan.target_head.commit_id
    else:
        replayed, skipped = replay_commits(repo, plan, decide or keep_all, clock=clock)

    new_head = reset(repo, repo.current.head, snapshots, workdir)

    logger.info(
        "Rebased %s onto %s: %d replayed, %d skipped%s",
        plan.branch, target, len(replayed), len(skipped),
        " (fast-forward)" if plan.fast_forward else "",
    )
    return RebaseResult(
        branch=plan.branch,
        target_branch=target,
        split_point=plan.split_point.commit_id,
        new_head=new_head.commit_id,
        fast_forward=plan.fast_forward,
        original_commits=plan.commits,
        replayed_commits=replayed,
        skipped=skipped,
    )
