"""SQLite persistence for Gitlet repository state.

SqlitePersistence round-trips a whole Repository through the ORM schema
in schema.py. ``save`` runs inside a single transaction: either the new
state is fully written or the previously saved state stays authoritative.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import Engine, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from gitlet.exceptions import PersistenceError
from gitlet.models.branch import Branch
from gitlet.models.commit import Commit
from gitlet.models.repository import Repository
from gitlet.models.staging import StagingArea
from gitlet.storage.engine import create_gitlet_engine, create_session_factory, init_db
from gitlet.storage.schema import (
    BranchRow,
    CommitChangeRow,
    CommitFileRow,
    CommitRow,
    GitletMetaRow,
    StagingRow,
)

logger = logging.getLogger(__name__)

_ADDED = "added"
_REMOVED = "removed"
_STAGED = "staged"


def _to_db_time(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _from_db_time(value: datetime) -> datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def commit_to_row(commit: Commit) -> CommitRow:
    """Convert a Commit to its ORM row (with manifest and change rows)."""
    row = CommitRow(
        commit_id=commit.commit_id,
        parent_id=commit.parent_id,
        message=commit.message,
        created_at=_to_db_time(commit.timestamp),
    )
    row.files = [
        CommitFileRow(commit_id=commit.commit_id, filename=name, source_commit_id=source)
        for name, source in sorted(commit.manifest.items())
    ]
    row.changes = [
        CommitChangeRow(commit_id=commit.commit_id, filename=name, kind=_ADDED)
        for name in sorted(commit.added_files)
    ] + [
        CommitChangeRow(commit_id=commit.commit_id, filename=name, kind=_REMOVED)
        for name in sorted(commit.removed_files)
    ]
    return row


def row_to_commit(row: CommitRow) -> Commit:
    """Convert a CommitRow back to a Commit."""
    return Commit(
        commit_id=row.commit_id,
        message=row.message,
        timestamp=_from_db_time(row.created_at),
        parent_id=row.parent_id,
        manifest={f.filename: f.source_commit_id for f in row.files},
        added_files=frozenset(c.filename for c in row.changes if c.kind == _ADDED),
        removed_files=frozenset(c.filename for c in row.changes if c.kind == _REMOVED),
    )


class SqlitePersistence:
    """Load and save a Repository in a SQLite database file."""

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def db_path(self) -> Path:
        return self._db_path

    def exists(self) -> bool:
        return self._db_path.is_file()

    def _sessions(self) -> sessionmaker[Session]:
        if self._session_factory is None:
            try:
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
                self._engine = create_gitlet_engine(str(self._db_path))
                init_db(self._engine)
            except (SQLAlchemyError, OSError) as exc:
                raise PersistenceError(f"Cannot open {self._db_path}: {exc}") from exc
            self._session_factory = create_session_factory(self._engine)
        return self._session_factory

    def load(self) -> Repository | None:
        """Load the saved Repository, or None if nothing was saved yet."""
        if not self.exists():
            return None
        try:
            with self._sessions()() as session:
                current = session.execute(
                    select(GitletMetaRow).where(GitletMetaRow.key == "current_branch")
                ).scalar_one_or_none()
                if current is None:
                    return None

                commit_rows = session.execute(
                    select(CommitRow).order_by(CommitRow.created_at)
                ).scalars().all()
                branch_rows = session.execute(select(BranchRow)).scalars().all()
                staging_rows = session.execute(select(StagingRow)).scalars().all()

                repo = Repository(
                    current_branch=current.value,
                    commits={r.commit_id: row_to_commit(r) for r in commit_rows},
                    branches={
                        r.name: Branch(name=r.name, head=r.head) for r in branch_rows
                    },
                    staging=StagingArea(
                        staged={r.filename for r in staging_rows if r.state == _STAGED},
                        removed={r.filename for r in staging_rows if r.state == _REMOVED},
                    ),
                )
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Cannot load repository state: {exc}") from exc

        repo.rebuild_message_index()
        logger.debug(
            "Loaded %d commit(s), %d branch(es) from %s",
            len(repo.commits), len(repo.branches), self._db_path,
        )
        return repo

    def save(self, repo: Repository) -> None:
        """Persist *repo* atomically.

        Commits are append-only: rows already present are left untouched.
        Branches, staging entries and the current branch are rewritten.
        """
        session_factory = self._sessions()
        with session_factory() as session:
            try:
                existing = set(session.execute(select(CommitRow.commit_id)).scalars())
                new_rows = [
                    commit_to_row(c)
                    for c in repo.commits.values()
                    if c.commit_id not in existing
                ]
                for row in new_rows:
                    session.add(row)
                    # Parents must exist before children reference them
                    session.flush()

                session.execute(delete(BranchRow))
                session.add_all(
                    BranchRow(name=b.name, head=b.head) for b in repo.branches.values()
                )

                session.execute(delete(StagingRow))
                session.add_all(
                    [StagingRow(filename=n, state=_STAGED) for n in sorted(repo.staging.staged)]
                    + [StagingRow(filename=n, state=_REMOVED) for n in sorted(repo.staging.removed)]
                )

                session.merge(GitletMetaRow(key="current_branch", value=repo.current_branch))
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                raise PersistenceError(f"Cannot save repository state: {exc}") from exc

        logger.debug("Saved %d new commit(s) to %s", len(new_rows), self._db_path)

    def close(self) -> None:
        """Dispose the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
