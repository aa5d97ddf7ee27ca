"""Content snapshot store for Gitlet.

Each commit that adds or modifies files gets its own directory, keyed by
commit id, holding copies of exactly those files. Files inherited
unchanged are never copied again: the manifest keeps pointing at the
ancestor commit that introduced them. There is no deduplication by
content hash across unrelated commits.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from gitlet.exceptions import SnapshotMissingError, StorageError

if TYPE_CHECKING:
    from gitlet.storage.workdir import WorkingDirectory

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Per-commit directories of stored file versions."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def commit_dir(self, commit_id: str) -> Path:
        return self._root / commit_id

    def path_for(self, commit_id: str, filename: str) -> Path:
        return self.commit_dir(commit_id) / filename

    def has(self, commit_id: str, filename: str) -> bool:
        return self.path_for(commit_id, filename).is_file()

    def materialize(
        self,
        commit_id: str,
        changed_files: Iterable[str],
        workdir: WorkingDirectory,
    ) -> None:
        """Copy the current working content of *changed_files* under *commit_id*.

        Does nothing when *changed_files* is empty.
        """
        names = sorted(changed_files)
        if not names:
            return
        try:
            for name in names:
                target = self.path_for(commit_id, name)
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(workdir.path(name), target)
        except OSError as exc:
            raise StorageError(
                f"Cannot store files for commit {commit_id[:12]}: {exc}"
            ) from exc
        logger.debug("Materialized %d file(s) for %s", len(names), commit_id[:12])

    def retrieve(self, commit_id: str, filename: str) -> bytes:
        """Read back a stored file version.

        Raises:
            SnapshotMissingError: If the pair was never materialized.
        """
        path = self.path_for(commit_id, filename)
        if not path.is_file():
            raise SnapshotMissingError(commit_id, filename)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Cannot read stored {filename}: {exc}") from exc
