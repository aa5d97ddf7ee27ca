"""Configuration model for Gitlet.

GitletConfig holds per-repository settings: where state lives relative
to the working root, and the names used at initialization and merge time.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class GitletConfig(BaseModel):
    """Per-repository configuration."""

    repo_dir: str = ".gitlet"
    db_name: str = "gitlet.db"
    snapshot_dir: str = "snapshots"
    default_branch: str = "master"
    initial_message: str = "initial commit"
    conflict_suffix: str = ".conflicted"

    def repo_path(self, root: str | Path) -> Path:
        return Path(root) / self.repo_dir

    def db_path(self, root: str | Path) -> Path:
        return self.repo_path(root) / self.db_name

    def snapshot_root(self, root: str | Path) -> Path:
        return self.repo_path(root) / self.snapshot_dir
