"""Gitlet exception hierarchy.

All Gitlet-specific exceptions inherit from GitletError, split into three
families that the CLI reports differently:

- UserError: recoverable, the operation aborted without touching state.
- InvariantViolation: the repository is corrupted or a bug was hit.
- EnvironmentFailure: persistence or storage could not be accessed.
"""


class GitletError(Exception):
    """Base exception for all Gitlet errors."""


class UserError(GitletError):
    """Base exception for recoverable errors caused by the request."""


class InvariantViolation(GitletError):
    """Base exception for internal consistency failures."""


class EnvironmentFailure(GitletError):
    """Base exception for I/O failures outside the engine's control."""


# ---------------------------------------------------------------------------
# User errors
# ---------------------------------------------------------------------------


class RepositoryExistsError(UserError):
    """Raised when initializing inside an existing repository."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            "A gitlet version control system already exists in the current directory."
        )


class NotARepositoryError(UserError):
    """Raised when no repository state can be found."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Not a gitlet repository: {path}")


class NothingToCommitError(UserError):
    """Raised when committing with an empty staging area."""

    def __init__(self) -> None:
        super().__init__("No changes added to the commit.")


class EmptyMessageError(UserError):
    """Raised when a commit message is blank."""

    def __init__(self) -> None:
        super().__init__("Please enter a commit message.")


class FileNotFoundInWorkdirError(UserError):
    """Raised when a named file is missing from the working directory."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__("File does not exist.")


class FileNotModifiedError(UserError):
    """Raised when staging a file identical to the head's version."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__("File has not been modified since the last commit.")


class NothingToRemoveError(UserError):
    """Raised when removing a file that is neither tracked nor staged."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__("No reason to remove the file.")


class FileNotInCommitError(UserError):
    """Raised when a commit's manifest has no entry for a file."""

    def __init__(self, filename: str, message: str | None = None) -> None:
        self.filename = filename
        super().__init__(message or "File does not exist in that commit.")


class CommitNotFoundError(UserError):
    """Raised when a commit id lookup fails."""

    def __init__(self, commit_id: str) -> None:
        self.commit_id = commit_id
        super().__init__("No commit with that id exists.")


class AmbiguousPrefixError(UserError):
    """Raised when a commit id prefix matches multiple commits."""

    def __init__(self, prefix: str, candidates: list[str]) -> None:
        self.prefix = prefix
        self.candidates = candidates
        candidate_str = ", ".join(c[:12] + "..." for c in candidates[:5])
        super().__init__(f"Ambiguous prefix '{prefix}'. Matches: {candidate_str}")


class MessageNotFoundError(UserError):
    """Raised when no commit carries the requested message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__("Found no commit with that message.")


class BranchNotFoundError(UserError):
    """Raised when a branch lookup fails."""

    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        super().__init__("A branch with that name does not exist.")


class BranchExistsError(UserError):
    """Raised when trying to create a branch that already exists."""

    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        super().__init__("A branch with that name already exists.")


class InvalidBranchNameError(UserError):
    """Raised when a branch name violates naming rules."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid branch name '{name}': {reason}")


class CurrentBranchError(UserError):
    """Raised when checking out the branch that is already current."""

    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        super().__init__("No need to checkout the current branch.")


class CannotRemoveCurrentBranchError(UserError):
    """Raised when deleting the branch that is currently checked out."""

    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        super().__init__("Cannot remove the current branch.")


class SelfMergeError(UserError):
    """Raised when merging a branch into itself."""

    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        super().__init__("Cannot merge a branch with itself.")


class SelfRebaseError(UserError):
    """Raised when rebasing a branch onto itself."""

    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        super().__init__("Cannot rebase a branch onto itself.")


class AlreadyUpToDateError(UserError):
    """Raised when the target branch is already in the current history."""

    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        super().__init__("Already up-to-date.")


class OperationAbortedError(UserError):
    """Raised when the operator declines a dangerous operation."""

    def __init__(self) -> None:
        super().__init__("Did not type 'yes', so aborting")


# ---------------------------------------------------------------------------
# Invariant violations
# ---------------------------------------------------------------------------


class SnapshotMissingError(InvariantViolation):
    """Raised when a stored file version was never materialized."""

    def __init__(self, commit_id: str, filename: str) -> None:
        self.commit_id = commit_id
        self.filename = filename
        super().__init__(
            f"Stored version of '{filename}' missing for commit {commit_id[:12]}"
        )


class CommitIdCollisionError(InvariantViolation):
    """Raised when a new commit would reuse the id of a different stored commit."""

    def __init__(self, commit_id: str) -> None:
        self.commit_id = commit_id
        super().__init__(f"Commit id {commit_id[:12]} is already taken by another commit")


class SplitPointNotFoundError(InvariantViolation):
    """Raised when two histories share no common ancestor."""

    def __init__(self, head_a: str, head_b: str) -> None:
        self.head_a = head_a
        self.head_b = head_b
        super().__init__(
            f"No common ancestor between {head_a[:12]} and {head_b[:12]}"
        )


# ---------------------------------------------------------------------------
# Environment failures
# ---------------------------------------------------------------------------


class PersistenceError(EnvironmentFailure):
    """Raised when repository state cannot be loaded or saved."""


class StorageError(EnvironmentFailure):
    """Raised when the snapshot store or working directory is inaccessible."""
