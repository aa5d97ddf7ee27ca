"""Gitlet -- the public entry point for the version-control engine.

Ties together the repository model, the operations, snapshot storage and
SQLite persistence. Users interact with ``Gitlet.init()``,
``Gitlet.open()``, ``g.add()``, ``g.commit()``, etc.

A ``Gitlet`` holds one loaded Repository. Each mutating method runs its
operation and saves only after it returned; when an operation raises,
nothing is written and the saved state stays authoritative.

Not thread-safe. One command, one ``Gitlet``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from gitlet.exceptions import NotARepositoryError, RepositoryExistsError
from gitlet.models.config import GitletConfig
from gitlet.models.repository import Repository
from gitlet.operations import branch as branch_ops
from gitlet.operations import history, navigation, staging
from gitlet.operations.commit import create_commit
from gitlet.operations.merge import merge as _merge
from gitlet.operations.rebase import interactive_decider
from gitlet.operations.rebase import rebase as _rebase
from gitlet.protocols import utc_now
from gitlet.storage.persistence import SqlitePersistence
from gitlet.storage.snapshots import SnapshotStore
from gitlet.storage.workdir import WorkingDirectory

if TYPE_CHECKING:
    from gitlet.models.branch import Branch, BranchInfo
    from gitlet.models.commit import Commit
    from gitlet.models.merge import MergeResult, RebaseResult
    from gitlet.operations.history import StatusInfo
    from gitlet.protocols import Clock, Decider, RebasePrompter

logger = logging.getLogger(__name__)


class Gitlet:
    """A single-user snapshot version-control repository.

    Create one via :meth:`Gitlet.init` or :meth:`Gitlet.open`.

    Example::

        with Gitlet.open(".") as g:
            g.add("notes.txt")
            g.commit("add notes")
            for c in g.log():
                print(c.commit_id, c.message)
    """

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def __init__(
        self,
        *,
        root: Path,
        repo: Repository,
        persistence: SqlitePersistence,
        config: GitletConfig,
        clock: Clock,
    ) -> None:
        self._root = root
        self._repo = repo
        self._persistence = persistence
        self._config = config
        self._clock = clock
        self._snapshots = SnapshotStore(config.snapshot_root(root))
        self._workdir = WorkingDirectory(root)
        self._closed = False

    @classmethod
    def init(
        cls,
        root: str | Path = ".",
        *,
        config: GitletConfig | None = None,
        clock: Clock | None = None,
    ) -> Gitlet:
        """Create a new repository under *root* with an initial commit.

        Raises:
            RepositoryExistsError: If *root* already holds a repository.
        """
        root = Path(root)
        config = config or GitletConfig()
        clock = clock or utc_now
        if config.repo_path(root).exists():
            raise RepositoryExistsError(str(root))

        config.snapshot_root(root).mkdir(parents=True, exist_ok=True)
        persistence = SqlitePersistence(config.db_path(root))
        repo = Repository.initialize(config, clock())
        persistence.save(repo)
        logger.info("Initialized empty repository in %s", config.repo_path(root))
        return cls(root=root, repo=repo, persistence=persistence, config=config, clock=clock)

    @classmethod
    def open(
        cls,
        root: str | Path = ".",
        *,
        config: GitletConfig | None = None,
        clock: Clock | None = None,
    ) -> Gitlet:
        """Load the repository saved under *root*.

        Raises:
            NotARepositoryError: If *root* holds no saved repository.
        """
        root = Path(root)
        config = config or GitletConfig()
        persistence = SqlitePersistence(config.db_path(root))
        repo = persistence.load()
        if repo is None:
            persistence.close()
            raise NotARepositoryError(str(root))
        return cls(
            root=root,
            repo=repo,
            persistence=persistence,
            config=config,
            clock=clock or utc_now,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def root(self) -> Path:
        return self._root

    @property
    def config(self) -> GitletConfig:
        return self._config

    @property
    def repository(self) -> Repository:
        """The loaded repository state (live; mutate through methods only)."""
        return self._repo

    @property
    def current_branch(self) -> str:
        return self._repo.current_branch

    @property
    def head(self) -> str | None:
        return self._repo.current.head

    def _save(self) -> None:
        self._persistence.save(self._repo)

    # ------------------------------------------------------------------
    # Staging and commits
    # ------------------------------------------------------------------

    def add(self, filename: str) -> None:
        """Stage *filename* for the next commit."""
        staging.stage_file(self._repo, filename, self._snapshots, self._workdir)
        self._save()

    def rm(self, filename: str) -> None:
        """Mark *filename* for removal in the next commit."""
        staging.remove_file(self._repo, filename)
        self._save()

    def commit(self, message: str) -> Commit:
        """Commit the staging area to the current branch."""
        commit = create_commit(
            self._repo,
            message,
            self._snapshots,
            self._workdir,
            timestamp=self._clock(),
        )
        self._save()
        return commit

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def log(self, branch_name: str | None = None) -> list[Commit]:
        return history.log(self._repo, branch_name)

    def global_log(self) -> list[Commit]:
        return history.global_log(self._repo)

    def find(self, message: str) -> list[str]:
        return history.find(self._repo, message)

    def status(self) -> StatusInfo:
        return history.status(self._repo)

    def resolve(self, ref: str) -> Commit:
        """Resolve a full commit id or unique prefix."""
        return navigation.resolve_commit(self._repo, ref)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def checkout(self, target: str, filename: str | None = None) -> Commit | None:
        """Checkout a branch, a file from the head, or a file from a commit.

        ``checkout(name)`` switches branches when *name* is a branch,
        otherwise restores file *name* from the head.
        ``checkout(commit_id, filename)`` restores *filename* from a commit.
        """
        if filename is not None:
            commit = navigation.checkout_file(
                self._repo, filename, self._snapshots, self._workdir, commit_id=target
            )
            return commit
        if target in self._repo.branches:
            head = navigation.checkout_branch(
                self._repo, target, self._snapshots, self._workdir
            )
            self._save()
            return head
        return navigation.checkout_file(self._repo, target, self._snapshots, self._workdir)

    def reset(self, ref: str) -> Commit:
        """Move the current branch to a commit (id or prefix) and restore its files."""
        commit = navigation.resolve_commit(self._repo, ref)
        commit = navigation.reset(self._repo, commit.commit_id, self._snapshots, self._workdir)
        self._save()
        return commit

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def branch(self, name: str) -> Branch:
        """Create a branch at the current head."""
        created = branch_ops.create_branch(self._repo, name)
        self._save()
        return created

    def rm_branch(self, name: str) -> None:
        branch_ops.delete_branch(self._repo, name)
        self._save()

    def list_branches(self) -> list[BranchInfo]:
        return branch_ops.list_branches(self._repo)

    # ------------------------------------------------------------------
    # Merge and rebase
    # ------------------------------------------------------------------

    def merge(self, other_branch: str) -> MergeResult:
        """Merge *other_branch* into the working directory.

        Only working files change; no commit is made and nothing is saved.
        """
        return _merge(
            self._repo,
            other_branch,
            self._snapshots,
            self._workdir,
            conflict_suffix=self._config.conflict_suffix,
        )

    def rebase(
        self,
        target_branch: str,
        *,
        prompter: RebasePrompter | None = None,
        decide: Decider | None = None,
    ) -> RebaseResult:
        """Rebase the current branch onto *target_branch*.

        Args:
            target_branch: Branch to replay onto.
            prompter: When given, each commit is confirmed interactively.
            decide: Explicit per-commit decision callback. Ignored when
                *prompter* is given.
        """
        if prompter is not None:
            decide = interactive_decider(prompter)
        result = _rebase(
            self._repo,
            target_branch,
            self._snapshots,
            self._workdir,
            decide=decide,
            clock=self._clock,
        )
        self._save()
        return result

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Dispose the database engine."""
        if self._closed:
            return
        self._closed = True
        self._persistence.close()

    def __enter__(self) -> Gitlet:
        return self

    def __exit__(self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._closed:
            return f"Gitlet(root='{self._root}', closed=True)"
        head = self.head[:8] if self.head else None
        return f"Gitlet(root='{self._root}', branch='{self.current_branch}', head='{head}')"
