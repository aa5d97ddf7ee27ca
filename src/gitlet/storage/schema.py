"""SQLAlchemy ORM schema for Gitlet.

Defines the persisted snapshot of a Repository: commits, their manifests
and change sets, branches, the staging area, and _gitlet_meta (schema
version and current branch). The message index is derived and not stored.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

SCHEMA_VERSION = "1"


class Base(DeclarativeBase):
    """Base class for all Gitlet ORM models."""

    pass


class CommitRow(Base):
    """A commit in the history graph. Append-only."""

    __tablename__ = "commits"

    commit_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    parent_id: Mapped[Optional[str]] = mapped_column(
        String(64),
        ForeignKey("commits.commit_id"),
        nullable=True,
    )
    message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    files: Mapped[list["CommitFileRow"]] = relationship(
        "CommitFileRow",
        foreign_keys="CommitFileRow.commit_id",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    changes: Mapped[list["CommitChangeRow"]] = relationship(
        "CommitChangeRow", cascade="all, delete-orphan", lazy="selectin"
    )

    __table_args__ = (Index("ix_commits_created", "created_at"),)


class CommitFileRow(Base):
    """One manifest entry: filename -> commit holding its stored version."""

    __tablename__ = "commit_files"

    commit_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("commits.commit_id"), primary_key=True
    )
    filename: Mapped[str] = mapped_column(String(1024), primary_key=True)
    source_commit_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("commits.commit_id"), nullable=False
    )


class CommitChangeRow(Base):
    """A file added ("added") or removed ("removed") by a commit."""

    __tablename__ = "commit_changes"

    commit_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("commits.commit_id"), primary_key=True
    )
    filename: Mapped[str] = mapped_column(String(1024), primary_key=True)
    kind: Mapped[str] = mapped_column(String(10), primary_key=True)


class BranchRow(Base):
    """Mutable named pointer to a commit."""

    __tablename__ = "branches"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    head: Mapped[Optional[str]] = mapped_column(
        String(64), ForeignKey("commits.commit_id"), nullable=True
    )


class StagingRow(Base):
    """A pending staging entry; state is "staged" or "removed"."""

    __tablename__ = "staging"

    filename: Mapped[str] = mapped_column(String(1024), primary_key=True)
    state: Mapped[str] = mapped_column(String(10), nullable=False)


class GitletMetaRow(Base):
    """Key-value metadata (schema_version, current_branch)."""

    __tablename__ = "_gitlet_meta"

    key: Mapped[str] = mapped_column(String(50), primary_key=True)
    value: Mapped[str] = mapped_column(String(255), nullable=False)
