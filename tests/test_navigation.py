"""Tests for commit resolution, checkout and reset."""

from __future__ import annotations

import pytest

from gitlet.exceptions import (
    AmbiguousPrefixError,
    BranchNotFoundError,
    CommitNotFoundError,
    CurrentBranchError,
    FileNotInCommitError,
)
from gitlet.models.commit import Commit
from gitlet.operations.navigation import resolve_commit
from tests.conftest import read, write


def commit_files(g, root, message, files):
    for name, text in files.items():
        write(root, name, text)
        g.add(name)
    return g.commit(message)


@pytest.fixture
def two_versions(g, root):
    v1 = commit_files(g, root, "v1", {"a.txt": "one\n"})
    v2 = commit_files(g, root, "v2", {"a.txt": "two\n", "b.txt": "b\n"})
    return v1, v2


# ---------------------------------------------------------------------------
# resolve_commit
# ---------------------------------------------------------------------------


class TestResolveCommit:
    def test_full_id(self, g, two_versions) -> None:
        v1, _ = two_versions
        assert g.resolve(v1.commit_id) == v1

    def test_unique_prefix(self, g, two_versions) -> None:
        v1, _ = two_versions
        assert g.resolve(v1.commit_id[:10]) == v1

    def test_short_prefix_rejected(self, g, two_versions) -> None:
        v1, _ = two_versions
        with pytest.raises(CommitNotFoundError):
            g.resolve(v1.commit_id[:3])

    def test_unknown(self, g) -> None:
        with pytest.raises(CommitNotFoundError, match="No commit with that id exists."):
            g.resolve("f" * 64)

    def test_ambiguous_prefix(self, repo, clock) -> None:
        base = repo.head_commit()
        for suffix in ("1", "2"):
            fake = Commit(
                commit_id="abcd" + suffix * 60,
                message="fake",
                timestamp=clock(),
                parent_id=base.commit_id,
            )
            repo.add_commit(fake)
        with pytest.raises(AmbiguousPrefixError) as exc_info:
            resolve_commit(repo, "abcd")
        assert len(exc_info.value.candidates) == 2
        assert resolve_commit(repo, "abcd1").commit_id == "abcd" + "1" * 60


# ---------------------------------------------------------------------------
# checkout
# ---------------------------------------------------------------------------


class TestCheckoutFile:
    def test_from_head(self, g, root, two_versions) -> None:
        write(root, "a.txt", "scribble\n")
        g.checkout("a.txt")
        assert read(root, "a.txt") == "two\n"

    def test_from_commit(self, g, root, two_versions) -> None:
        v1, _ = two_versions
        g.checkout(v1.commit_id, "a.txt")
        assert read(root, "a.txt") == "one\n"

    def test_from_commit_prefix(self, g, root, two_versions) -> None:
        v1, _ = two_versions
        g.checkout(v1.commit_id[:8], "a.txt")
        assert read(root, "a.txt") == "one\n"

    def test_does_not_stage_or_move_head(self, g, root, two_versions) -> None:
        v1, v2 = two_versions
        g.checkout(v1.commit_id, "a.txt")
        assert g.head == v2.commit_id
        assert g.status().staged == []

    def test_missing_in_head(self, g, two_versions) -> None:
        with pytest.raises(FileNotInCommitError, match="most recent commit, or no such branch"):
            g.checkout("zzz.txt")

    def test_missing_in_commit(self, g, two_versions) -> None:
        v1, _ = two_versions
        with pytest.raises(FileNotInCommitError, match="File does not exist in that commit."):
            g.checkout(v1.commit_id, "b.txt")

    def test_unknown_commit(self, g, two_versions) -> None:
        with pytest.raises(CommitNotFoundError):
            g.checkout("0" * 64, "a.txt")


class TestCheckoutBranch:
    def test_switch_restores_files(self, g, root, two_versions) -> None:
        g.branch("side")
        g.checkout("side")
        commit_files(g, root, "side", {"a.txt": "side\n"})
        g.checkout("master")
        assert g.current_branch == "master"
        assert read(root, "a.txt") == "two\n"

    def test_branch_wins_over_file(self, g, root, two_versions) -> None:
        write(root, "side", "a file named like a branch\n")
        g.branch("side")
        g.checkout("side")
        assert g.current_branch == "side"

    def test_current_branch(self, g) -> None:
        with pytest.raises(CurrentBranchError, match="No need to checkout the current branch."):
            g.checkout("master")

    def test_switch_persisted(self, g, root, two_versions) -> None:
        from gitlet import Gitlet

        g.branch("side")
        g.checkout("side")
        with Gitlet.open(root) as reopened:
            assert reopened.current_branch == "side"


# ---------------------------------------------------------------------------
# reset
# ---------------------------------------------------------------------------


class TestReset:
    def test_moves_head_and_restores(self, g, root, two_versions) -> None:
        v1, _ = two_versions
        g.reset(v1.commit_id)
        assert g.head == v1.commit_id
        assert read(root, "a.txt") == "one\n"

    def test_untracked_files_untouched(self, g, root, two_versions) -> None:
        v1, _ = two_versions
        g.reset(v1.commit_id)
        assert read(root, "b.txt") == "b\n"

    def test_prefix(self, g, two_versions) -> None:
        v1, _ = two_versions
        g.reset(v1.commit_id[:6])
        assert g.head == v1.commit_id

    def test_unknown(self, g, two_versions) -> None:
        _, v2 = two_versions
        with pytest.raises(CommitNotFoundError):
            g.reset("0" * 64)
        assert g.head == v2.commit_id

    def test_other_branch_commit(self, g, root, two_versions) -> None:
        g.branch("side")
        g.checkout("side")
        s = commit_files(g, root, "side", {"s.txt": "s\n"})
        g.checkout("master")
        g.reset(s.commit_id)
        assert g.head == s.commit_id
        assert g.repository.branches["side"].head == s.commit_id

    def test_branch_name_is_not_a_commit(self, g, two_versions) -> None:
        with pytest.raises(CommitNotFoundError):
            g.reset("master")


def test_unknown_branch_lookup(g) -> None:
    with pytest.raises(BranchNotFoundError):
        g.log("nope")
