"""Engine and session factory for Gitlet storage.

Provides SQLite engine creation with pragmas, session factory creation,
and database initialization with schema version checking.
"""

from __future__ import annotations

from sqlalchemy import Engine, create_engine, event, select
from sqlalchemy.orm import Session, sessionmaker

from gitlet.exceptions import PersistenceError
from gitlet.storage.schema import SCHEMA_VERSION, Base, GitletMetaRow


def create_gitlet_engine(db_path: str = ":memory:") -> Engine:
    """Create a SQLAlchemy engine for Gitlet storage.

    Args:
        db_path: Path to SQLite database file, or ``":memory:"`` for
            in-memory.

    Returns:
        Configured SQLAlchemy Engine.
    """
    if db_path == ":memory:":
        engine = create_engine("sqlite://", echo=False)
    else:
        engine = create_engine(f"sqlite:///{db_path}", echo=False)

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):  # type: ignore[no-untyped-def]
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA busy_timeout=5000")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to the given engine.

    Uses expire_on_commit=False to prevent lazy-load issues
    when accessing attributes after commit.
    """
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create all tables and record the schema version.

    Raises:
        PersistenceError: If the database was written by an unknown
            schema version.
    """
    Base.metadata.create_all(engine)

    SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)
    with SessionLocal() as session:
        existing = session.execute(
            select(GitletMetaRow).where(GitletMetaRow.key == "schema_version")
        ).scalar_one_or_none()

        if existing is None:
            session.add(GitletMetaRow(key="schema_version", value=SCHEMA_VERSION))
            session.commit()
        elif existing.value != SCHEMA_VERSION:
            raise PersistenceError(
                f"Unsupported repository schema version {existing.value!r} "
                f"(expected {SCHEMA_VERSION!r})"
            )
