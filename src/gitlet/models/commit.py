"""Commit domain model for Gitlet.

Commit is immutable once created. Its manifest maps every tracked
filename to the id of the commit whose snapshot directory holds that
file's current version.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from gitlet.hashing import compute_commit_id


def derive_manifest(
    parent_manifest: Mapping[str, str],
    commit_id: str,
    added_files: Iterable[str],
    removed_files: Iterable[str],
) -> dict[str, str]:
    """Parent manifest, plus added files pointing at *commit_id*, minus removed files."""
    manifest = dict(parent_manifest)
    for name in added_files:
        manifest[name] = commit_id
    for name in removed_files:
        manifest.pop(name, None)
    return manifest


class Commit(BaseModel):
    """An immutable snapshot record in the commit graph."""

    model_config = {"frozen": True}

    commit_id: str
    message: str
    timestamp: datetime
    parent_id: Optional[str] = None
    manifest: dict[str, str] = {}
    added_files: frozenset[str] = frozenset()
    removed_files: frozenset[str] = frozenset()

    @classmethod
    def create(
        cls,
        message: str,
        timestamp: datetime,
        parent: Commit | None,
        added_files: Iterable[str] = (),
        removed_files: Iterable[str] = (),
    ) -> Commit:
        """Build a commit whose id and manifest derive from *parent*."""
        added = frozenset(added_files)
        removed = frozenset(removed_files)
        parent_id = parent.commit_id if parent is not None else None
        commit_id = compute_commit_id(parent_id, timestamp, message)
        manifest = derive_manifest(
            parent.manifest if parent is not None else {},
            commit_id,
            added,
            removed,
        )
        return cls(
            commit_id=commit_id,
            message=message,
            timestamp=timestamp,
            parent_id=parent_id,
            manifest=manifest,
            added_files=added,
            removed_files=removed,
        )

    @property
    def changed_files(self) -> frozenset[str]:
        """Names added or removed by this commit relative to its parent."""
        return self.added_files | self.removed_files

    @property
    def short_id(self) -> str:
        return self.commit_id[:8]

    def __str__(self) -> str:
        msg = self.message
        if len(msg) > 60:
            msg = msg[:57] + "..."
        return f"{self.short_id} {msg}"

    def __repr__(self) -> str:
        return (
            f"Commit({self.short_id} files={len(self.manifest)} "
            f"+{len(self.added_files)} -{len(self.removed_files)} {self.message!r})"
        )
