"""Working-directory accessor for Gitlet.

Thin wrapper over the file tree being versioned. Filenames are
repository-relative POSIX-style paths; parents are created on write.
"""

from __future__ import annotations

import logging
from itertools import zip_longest
from pathlib import Path

from gitlet.exceptions import StorageError

logger = logging.getLogger(__name__)


class WorkingDirectory:
    """Read/write access to files under a working root."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def path(self, filename: str) -> Path:
        return self._root / filename

    def exists(self, filename: str) -> bool:
        return self.path(filename).is_file()

    def read(self, filename: str) -> bytes:
        try:
            return self.path(filename).read_bytes()
        except OSError as exc:
            raise StorageError(f"Cannot read {filename}: {exc}") from exc

    def write(self, filename: str, data: bytes) -> None:
        target = self.path(filename)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Cannot write {filename}: {exc}") from exc
        logger.debug("Wrote %s (%d bytes)", filename, len(data))

    @staticmethod
    def lines_differ(path_a: str | Path, path_b: str | Path) -> bool:
        """Compare two files line by line.

        A file present on one side and absent on the other counts as
        differing, and so does a missing pair. Line terminators are ignored.
        """
        a, b = Path(path_a), Path(path_b)
        if not (a.is_file() and b.is_file()):
            return True
        try:
            with a.open("rb") as fa, b.open("rb") as fb:
                for line_a, line_b in zip_longest(fa, fb):
                    if line_a is None or line_b is None:
                        return True
                    if line_a.rstrip(b"\r\n") != line_b.rstrip(b"\r\n"):
                        return True
        except OSError as exc:
            raise StorageError(f"Cannot compare {a} and {b}: {exc}") from exc
        return False
