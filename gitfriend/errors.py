# Git-Friend Errors
# Exception hierarchy shared by the adapter, the engine and the session

from typing import Optional


class GitFriendError(Exception):
    """Base class for all Git-Friend errors."""


class RepositoryError(GitFriendError):
    """Exception raised when a git operation fails."""

    def __init__(
        self,
        message: str,
        returncode: int = 1,
        stderr: str = "",
        operation: Optional[str] = None,
    ):
        self.message = message
        self.returncode = returncode
        self.stderr = stderr
        self.operation = operation
        super().__init__(message)

    @property
    def detail(self) -> str:
        """Underlying git message, falling back to our own."""
        return self.stderr or self.message


class InputError(GitFriendError):
    """Exception raised when a required answer is blank."""


class UnrecoverableError(GitFriendError):
    """Exception that ends the interactive session."""
