"""Gitlet: a local, single-user snapshot version-control engine.

Tracks whole files in a working directory through commits, branches,
a staging area, merges and (interactive) rebases.
"""

__version__ = "0.1.0"

# Core entry point
from gitlet.gitlet import Gitlet

# Domain models
from gitlet.models.branch import Branch, BranchInfo
from gitlet.models.commit import Commit
from gitlet.models.config import GitletConfig
from gitlet.models.merge import (
    FileAction,
    MergeAction,
    MergeResult,
    RebaseAction,
    RebaseDecision,
    RebaseResult,
)
from gitlet.models.repository import Repository
from gitlet.models.staging import StagingArea
from gitlet.operations.history import StatusInfo

# Protocols
from gitlet.protocols import Clock, Decider, RebasePrompter

# Exceptions
from gitlet.exceptions import (
    AlreadyUpToDateError,
    AmbiguousPrefixError,
    BranchExistsError,
    BranchNotFoundError,
    CannotRemoveCurrentBranchError,
    CommitIdCollisionError,
    CommitNotFoundError,
    CurrentBranchError,
    EmptyMessageError,
    EnvironmentFailure,
    FileNotFoundInWorkdirError,
    FileNotInCommitError,
    FileNotModifiedError,
    GitletError,
    InvalidBranchNameError,
    InvariantViolation,
    MessageNotFoundError,
    NotARepositoryError,
    NothingToCommitError,
    NothingToRemoveError,
    OperationAbortedError,
    PersistenceError,
    RepositoryExistsError,
    SelfMergeError,
    SelfRebaseError,
    SnapshotMissingError,
    SplitPointNotFoundError,
    StorageError,
    UserError,
)

__all__ = [
    "__version__",
    "Gitlet",
    "Branch",
    "BranchInfo",
    "Commit",
    "GitletConfig",
    "FileAction",
    "MergeAction",
    "MergeResult",
    "RebaseAction",
    "RebaseDecision",
    "RebaseResult",
    "Repository",
    "StagingArea",
    "StatusInfo",
    "Clock",
    "Decider",
    "RebasePrompter",
    "AlreadyUpToDateError",
    "AmbiguousPrefixError",
    "BranchExistsError",
    "BranchNotFoundError",
    "CannotRemoveCurrentBranchError",
    "CommitIdCollisionError",
    "CommitNotFoundError",
    "CurrentBranchError",
    "EmptyMessageError",
    "EnvironmentFailure",
    "FileNotFoundInWorkdirError",
    "FileNotInCommitError",
    "FileNotModifiedError",
    "GitletError",
    "InvalidBranchNameError",
    "InvariantViolation",
    "MessageNotFoundError",
    "NotARepositoryError",
    "NothingToCommitError",
    "NothingToRemoveError",
    "OperationAbortedError",
    "PersistenceError",
    "RepositoryExistsError",
    "SelfMergeError",
    "SelfRebaseError",
    "SnapshotMissingError",
    "SplitPointNotFoundError",
    "StorageError",
    "UserError",
]
