"""Staging area model for Gitlet."""

from __future__ import annotations

from pydantic import BaseModel


class StagingArea(BaseModel):
    """Pending additions and removals consumed by the next commit.

    A filename is never in both sets: staging a file unmarks it for
    removal, and marking it for removal unstages it.
    """

    staged: set[str] = set()
    removed: set[str] = set()

    @property
    def is_empty(self) -> bool:
        return not self.staged and not self.removed

    def add(self, filename: str) -> None:
        self.staged.add(filename)
        self.removed.discard(filename)

    def remove(self, filename: str) -> None:
        self.removed.add(filename)
        self.staged.discard(filename)

    def clear(self) -> None:
        self.staged.clear()
        self.removed.clear()
