"""Tests for log, global-log, find and status."""

from __future__ import annotations

import pytest

from gitlet.exceptions import MessageNotFoundError
from tests.conftest import write


def commit_file(g, root, message, name, text):
    write(root, name, text)
    g.add(name)
    return g.commit(message)


class TestLog:
    def test_initial_only(self, g) -> None:
        entries = g.log()
        assert [c.message for c in entries] == ["initial commit"]

    def test_newest_first(self, g, root) -> None:
        commit_file(g, root, "one", "a.txt", "1")
        commit_file(g, root, "two", "a.txt", "2")
        assert [c.message for c in g.log()] == ["two", "one", "initial commit"]

    def test_follows_current_branch(self, g, root) -> None:
        g.branch("side")
        g.checkout("side")
        commit_file(g, root, "side work", "s.txt", "s")
        g.checkout("master")
        assert [c.message for c in g.log()] == ["initial commit"]
        assert [c.message for c in g.log("side")] == ["side work", "initial commit"]

    def test_after_reset(self, g, root) -> None:
        one = commit_file(g, root, "one", "a.txt", "1")
        commit_file(g, root, "two", "a.txt", "2")
        g.reset(one.commit_id)
        assert [c.message for c in g.log()] == ["one", "initial commit"]


class TestGlobalLog:
    def test_includes_unreachable(self, g, root) -> None:
        one = commit_file(g, root, "one", "a.txt", "1")
        commit_file(g, root, "two", "a.txt", "2")
        g.reset(one.commit_id)
        assert [c.message for c in g.global_log()] == ["initial commit", "one", "two"]

    def test_includes_all_branches(self, g, root) -> None:
        g.branch("side")
        g.checkout("side")
        commit_file(g, root, "side work", "s.txt", "s")
        g.checkout("master")
        assert "side work" in [c.message for c in g.global_log()]


class TestFind:
    def test_single(self, g, root) -> None:
        c = commit_file(g, root, "fix", "a.txt", "1")
        assert g.find("fix") == [c.commit_id]

    def test_several_sorted(self, g, root) -> None:
        a = commit_file(g, root, "same", "a.txt", "1")
        b = commit_file(g, root, "same", "a.txt", "2")
        assert g.find("same") == sorted([a.commit_id, b.commit_id])

    def test_exact_match_only(self, g, root) -> None:
        commit_file(g, root, "fix bug", "a.txt", "1")
        with pytest.raises(MessageNotFoundError, match="Found no commit with that message."):
            g.find("fix")


class TestStatus:
    def test_fresh(self, g) -> None:
        info = g.status()
        assert info.branch_name == "master"
        assert info.head_id == g.head
        assert info.staged == []
        assert info.removed == []

    def test_staging_listed_sorted(self, g, root) -> None:
        commit_file(g, root, "base", "tracked.txt", "t")
        write(root, "b.txt", "b")
        write(root, "a.txt", "a")
        g.add("b.txt")
        g.add("a.txt")
        g.rm("tracked.txt")
        info = g.status()
        assert info.staged == ["a.txt", "b.txt"]
        assert info.removed == ["tracked.txt"]

    def test_branches(self, g) -> None:
        g.branch("dev")
        info = g.status()
        assert [(b.name, b.is_current) for b in info.branches] == [
            ("dev", False),
            ("master", True),
        ]

    def test_str(self, g) -> None:
        assert str(g.status()).startswith("master @ ")
