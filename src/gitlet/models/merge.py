"""Merge and rebase domain models for Gitlet.

Defines the per-file merge actions, the merge result, the per-commit
rebase decision, and the rebase result.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, model_validator

from gitlet.models.commit import Commit


class FileAction(str, enum.Enum):
    """What the merge did to a working-directory file."""

    CHECKOUT = "checkout"
    CONFLICT = "conflict"
    KEEP = "keep"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class MergeAction(BaseModel):
    """A single file decision taken by the merge engine."""

    filename: str
    action: FileAction
    source_commit: str  # Commit holding the other branch's version
    written_path: Optional[str] = None  # File actually written, if any

    def __str__(self) -> str:
        return f"{self.action.value} {self.filename}"


class MergeResult(BaseModel):
    """Result of merging another branch into the working directory.

    The merge never creates a commit and never moves a branch head.
    """

    current_branch: str
    other_branch: str
    split_point: str
    actions: list[MergeAction] = []

    @property
    def conflicts(self) -> list[MergeAction]:
        return [a for a in self.actions if a.action == FileAction.CONFLICT]

    @property
    def checked_out(self) -> list[MergeAction]:
        return [a for a in self.actions if a.action == FileAction.CHECKOUT]

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)


class RebaseAction(str, enum.Enum):
    """Operator choices for each replayed commit."""

    CONTINUE = "continue"
    SKIP = "skip"
    REWORD = "reword"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class RebaseDecision(BaseModel):
    """Decision for one original commit during replay."""

    action: RebaseAction = RebaseAction.CONTINUE
    message: Optional[str] = None  # Replacement text, REWORD only

    @model_validator(mode="after")
    def _check_message(self) -> RebaseDecision:
        if self.action == RebaseAction.REWORD and self.message is None:
            raise ValueError("a reword decision needs a replacement message")
        return self

    @classmethod
    def keep(cls) -> RebaseDecision:
        return cls(action=RebaseAction.CONTINUE)

    @classmethod
    def skip(cls) -> RebaseDecision:
        return cls(action=RebaseAction.SKIP)

    @classmethod
    def reword(cls, message: str) -> RebaseDecision:
        return cls(action=RebaseAction.REWORD, message=message)


class RebaseResult(BaseModel):
    """Result of a rebase operation."""

    branch: str
    target_branch: str
    split_point: str
    new_head: str
    fast_forward: bool = False
    original_commits: list[Commit] = []  # Oldest first
    replayed_commits: list[Commit] = []  # Oldest first
    skipped: list[str] = []  # Original ids dropped by SKIP
