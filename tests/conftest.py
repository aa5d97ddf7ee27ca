"""Shared test fixtures for Gitlet.

Provides a deterministic clock, a working directory under tmp_path, an
initialized Gitlet facade, and the raw repository/storage collaborators
for operation-level tests.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from gitlet.gitlet import Gitlet
from gitlet.models.config import GitletConfig
from gitlet.models.repository import Repository
from gitlet.storage.snapshots import SnapshotStore
from gitlet.storage.workdir import WorkingDirectory


class TickingClock:
    """Clock advancing one second per call, starting at a fixed instant."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


def write(root: Path, name: str, text: str) -> Path:
    """Write *text* to root/name, creating parents."""
    path = root / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


def read(root: Path, name: str) -> str:
    return (root / name).read_text()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Empty working directory."""
    work = tmp_path / "work"
    work.mkdir()
    return work


@pytest.fixture
def g(root: Path, clock: TickingClock):
    """Freshly initialized Gitlet with only the initial commit."""
    gitlet = Gitlet.init(root, clock=clock)
    yield gitlet
    gitlet.close()


# ---------------------------------------------------------------------------
# Operation-level collaborators (no persistence)
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> GitletConfig:
    return GitletConfig()


@pytest.fixture
def repo(config: GitletConfig, clock: TickingClock) -> Repository:
    return Repository.initialize(config, clock())


@pytest.fixture
def workdir(root: Path) -> WorkingDirectory:
    return WorkingDirectory(root)


@pytest.fixture
def snapshots(root: Path, config: GitletConfig) -> SnapshotStore:
    return SnapshotStore(config.snapshot_root(root))


def make_commit(
    repo: Repository,
    snapshots: SnapshotStore,
    workdir: WorkingDirectory,
    clock: TickingClock,
    message: str,
    files: dict[str, str] | None = None,
    removed: tuple[str, ...] = (),
):
    """Write *files*, stage them, mark *removed*, and commit."""
    from gitlet.operations.commit import create_commit
    from gitlet.operations.staging import remove_file, stage_file

    for name, text in (files or {}).items():
        write(workdir.root, name, text)
        stage_file(repo, name, snapshots, workdir)
    for name in removed:
        remove_file(repo, name)
    return create_commit(repo, message, snapshots, workdir, timestamp=clock())
