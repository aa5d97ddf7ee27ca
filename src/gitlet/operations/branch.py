"""Branch CRUD operations for Gitlet.

Create, delete, list, and validate branches.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from gitlet.exceptions import (
    BranchExistsError,
    CannotRemoveCurrentBranchError,
    InvalidBranchNameError,
)
from gitlet.models.branch import Branch, BranchInfo

if TYPE_CHECKING:
    from gitlet.models.repository import Repository

logger = logging.getLogger(__name__)

# Characters forbidden in branch names (git-style)
_FORBIDDEN_CHARS = re.compile(r"[\s~^:?*\[\\]")


def validate_branch_name(name: str) -> None:
    """Validate a branch name against git-style naming rules.

    Raises InvalidBranchNameError on violation.
    """
    if not name:
        raise InvalidBranchNameError(name, "branch name cannot be empty")

    if ".." in name:
        raise InvalidBranchNameError(name, "branch name cannot contain '..'")

    if name.startswith(".") or name.endswith("."):
        raise InvalidBranchNameError(name, "branch name cannot start or end with '.'")

    if name.startswith("-"):
        raise InvalidBranchNameError(name, "branch name cannot start with '-'")

    if _FORBIDDEN_CHARS.search(name):
        raise InvalidBranchNameError(
            name, "branch name contains forbidden characters (whitespace, ~, ^, :, ?, *, [, \\)"
        )

    if name.startswith("/") or name.endswith("/") or "//" in name:
        raise InvalidBranchNameError(name, "branch name has invalid slash usage")


def create_branch(repo: Repository, name: str) -> Branch:
    """Create a branch at the current head. The current branch is unchanged.

    Raises:
        InvalidBranchNameError: If the name is invalid.
        BranchExistsError: If the name is taken.
    """
    validate_branch_name(name)
    if name in repo.branches:
        raise BranchExistsError(name)

    branch = Branch(name=name, head=repo.current.head)
    repo.branches[name] = branch
    logger.info("Created branch %s at %s", name, (branch.head or "")[:8])
    return branch


def delete_branch(repo: Repository, name: str) -> None:
    """Delete a branch pointer. Its commits stay in the commit table.

    Raises:
        BranchNotFoundError: If the branch does not exist.
        CannotRemoveCurrentBranchError: If it is the current branch.
    """
    repo.get_branch(name)
    if name == repo.current_branch:
        raise CannotRemoveCurrentBranchError(name)
    del repo.branches[name]
    logger.info("Deleted branch %s", name)


def list_branches(repo: Repository) -> list[BranchInfo]:
    """All branches sorted by name, with the current one flagged."""
    return [
        BranchInfo(
            name=b.name,
            commit_id=b.head,
            is_current=(b.name == repo.current_branch),
        )
        for b in sorted(repo.branches.values(), key=lambda b: b.name)
    ]
