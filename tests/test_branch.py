"""Tests for branch creation, deletion, listing and name validation."""

from __future__ import annotations

import pytest

from gitlet.exceptions import (
    BranchExistsError,
    BranchNotFoundError,
    CannotRemoveCurrentBranchError,
    InvalidBranchNameError,
)
from gitlet.operations.branch import validate_branch_name
from tests.conftest import write


class TestValidateBranchName:
    @pytest.mark.parametrize("name", ["feature", "fix/login", "v1.2", "a-b_c"])
    def test_valid(self, name: str) -> None:
        validate_branch_name(name)

    @pytest.mark.parametrize(
        "name",
        ["", "a..b", ".hidden", "trailing.", "-dash", "has space", "a~b", "a^b",
         "a:b", "a?b", "a*b", "a[b", "a\\b", "/lead", "trail/", "a//b"],
    )
    def test_invalid(self, name: str) -> None:
        with pytest.raises(InvalidBranchNameError):
            validate_branch_name(name)


class TestCreateBranch:
    def test_points_at_current_head(self, g) -> None:
        b = g.branch("feature")
        assert b.head == g.head
        assert g.current_branch == "master"

    def test_independent_heads(self, g, root) -> None:
        g.branch("feature")
        write(root, "a.txt", "a")
        g.add("a.txt")
        c = g.commit("on master")
        assert g.repository.branches["master"].head == c.commit_id
        assert g.repository.branches["feature"].head == c.parent_id

    def test_duplicate(self, g) -> None:
        g.branch("feature")
        with pytest.raises(BranchExistsError, match="A branch with that name already exists."):
            g.branch("feature")

    def test_duplicate_of_current(self, g) -> None:
        with pytest.raises(BranchExistsError):
            g.branch("master")

    def test_invalid_name(self, g) -> None:
        with pytest.raises(InvalidBranchNameError):
            g.branch("bad name")
        assert [b.name for b in g.list_branches()] == ["master"]


class TestDeleteBranch:
    def test_delete(self, g) -> None:
        g.branch("feature")
        head = g.repository.branches["feature"].head
        g.rm_branch("feature")
        assert "feature" not in g.repository.branches
        assert head in g.repository.commits

    def test_delete_current(self, g) -> None:
        with pytest.raises(CannotRemoveCurrentBranchError, match="Cannot remove the current branch."):
            g.rm_branch("master")

    def test_delete_unknown(self, g) -> None:
        with pytest.raises(BranchNotFoundError, match="A branch with that name does not exist."):
            g.rm_branch("nope")


class TestListBranches:
    def test_sorted_with_current_flag(self, g) -> None:
        g.branch("zeta")
        g.branch("alpha")
        infos = g.list_branches()
        assert [b.name for b in infos] == ["alpha", "master", "zeta"]
        assert [b.is_current for b in infos] == [False, True, False]
        assert all(b.commit_id == g.head for b in infos)
