"""Tests for commit creation and snapshot materialization."""

from __future__ import annotations

import pytest

from gitlet.exceptions import (
    CommitIdCollisionError,
    EmptyMessageError,
    FileNotFoundInWorkdirError,
    NothingToCommitError,
)
from gitlet.operations.branch import create_branch
from gitlet.operations.commit import create_commit
from gitlet.operations.staging import remove_file, stage_file
from tests.conftest import make_commit, write


class TestCreateCommit:
    def test_commit_advances_head(self, repo, snapshots, workdir, clock) -> None:
        root = repo.head_commit()
        c = make_commit(repo, snapshots, workdir, clock, "add a", {"a.txt": "A\n"})
        assert repo.current.head == c.commit_id
        assert c.parent_id == root.commit_id
        assert c.manifest == {"a.txt": c.commit_id}
        assert repo.staging.is_empty

    def test_snapshot_materialized(self, repo, snapshots, workdir, clock) -> None:
        c = make_commit(repo, snapshots, workdir, clock, "add a", {"a.txt": "A\n"})
        assert snapshots.retrieve(c.commit_id, "a.txt") == b"A\n"

    def test_snapshot_survives_workdir_edit(self, repo, snapshots, workdir, clock) -> None:
        c = make_commit(repo, snapshots, workdir, clock, "add a", {"a.txt": "A\n"})
        write(workdir.root, "a.txt", "changed\n")
        assert snapshots.retrieve(c.commit_id, "a.txt") == b"A\n"

    def test_nested_path(self, repo, snapshots, workdir, clock) -> None:
        c = make_commit(repo, snapshots, workdir, clock, "nested", {"dir/sub/a.txt": "A"})
        assert snapshots.has(c.commit_id, "dir/sub/a.txt")

    def test_inherited_files_not_copied(self, repo, snapshots, workdir, clock) -> None:
        c1 = make_commit(repo, snapshots, workdir, clock, "add a", {"a.txt": "A"})
        c2 = make_commit(repo, snapshots, workdir, clock, "add b", {"b.txt": "B"})
        assert c2.manifest == {"a.txt": c1.commit_id, "b.txt": c2.commit_id}
        assert not snapshots.has(c2.commit_id, "a.txt")

    def test_removal_commit(self, repo, snapshots, workdir, clock) -> None:
        make_commit(repo, snapshots, workdir, clock, "add", {"a.txt": "A", "b.txt": "B"})
        c = make_commit(repo, snapshots, workdir, clock, "drop a", removed=("a.txt",))
        assert set(c.manifest) == {"b.txt"}
        assert c.removed_files == frozenset({"a.txt"})
        assert not snapshots.commit_dir(c.commit_id).exists()

    def test_message_indexed(self, repo, snapshots, workdir, clock) -> None:
        c = make_commit(repo, snapshots, workdir, clock, "add a", {"a.txt": "A"})
        assert repo.message_index["add a"] == {c.commit_id}

    def test_empty_message(self, repo, snapshots, workdir, clock) -> None:
        write(workdir.root, "a.txt", "A")
        stage_file(repo, "a.txt", snapshots, workdir)
        with pytest.raises(EmptyMessageError, match="Please enter a commit message."):
            create_commit(repo, "  ", snapshots, workdir, timestamp=clock())
        assert repo.staging.staged == {"a.txt"}

    def test_nothing_staged(self, repo, snapshots, workdir, clock) -> None:
        head = repo.current.head
        with pytest.raises(NothingToCommitError, match="No changes added to the commit."):
            create_commit(repo, "msg", snapshots, workdir, timestamp=clock())
        assert repo.current.head == head
        assert len(repo.commits) == 1

    def test_staged_file_deleted(self, repo, snapshots, workdir, clock) -> None:
        write(workdir.root, "a.txt", "A")
        stage_file(repo, "a.txt", snapshots, workdir)
        (workdir.root / "a.txt").unlink()
        head = repo.current.head
        with pytest.raises(FileNotFoundInWorkdirError):
            create_commit(repo, "msg", snapshots, workdir, timestamp=clock())
        assert repo.current.head == head

    def test_modify_add_rm_then_commit_drops_file(
        self, repo, snapshots, workdir, clock
    ) -> None:
        make_commit(repo, snapshots, workdir, clock, "add", {"a.txt": "A\n", "b.txt": "B\n"})
        write(workdir.root, "a.txt", "edited\n")
        stage_file(repo, "a.txt", snapshots, workdir)
        remove_file(repo, "a.txt")
        assert repo.staging.staged == set()
        assert repo.staging.removed == {"a.txt"}

        c = create_commit(repo, "drop a", snapshots, workdir, timestamp=clock())

        assert "a.txt" not in c.manifest
        assert set(c.manifest) == {"b.txt"}
        assert repo.staging.is_empty
        assert workdir.read("a.txt") == b"edited\n"


class TestCommitIdCollision:
    def test_same_parent_time_and_message_rejected(
        self, repo, snapshots, workdir, clock
    ) -> None:
        when = clock()
        create_branch(repo, "feature")
        write(workdir.root, "a.txt", "master\n")
        stage_file(repo, "a.txt", snapshots, workdir)
        taken = create_commit(repo, "work", snapshots, workdir, timestamp=when)

        repo.current_branch = "feature"
        feature_head = repo.current.head
        write(workdir.root, "a.txt", "feature\n")
        write(workdir.root, "b.txt", "b\n")
        stage_file(repo, "a.txt", snapshots, workdir)
        stage_file(repo, "b.txt", snapshots, workdir)

        with pytest.raises(CommitIdCollisionError):
            create_commit(repo, "work", snapshots, workdir, timestamp=when)

        assert repo.current.head == feature_head
        assert repo.staging.staged == {"a.txt", "b.txt"}
        assert repo.commits[taken.commit_id] == taken
        assert set(taken.manifest) == {"a.txt"}
        assert snapshots.retrieve(taken.commit_id, "a.txt") == b"master\n"
        assert not snapshots.has(taken.commit_id, "b.txt")
