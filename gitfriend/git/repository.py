"""Repository adapter bound to a single working directory.

The workflow engine talks to git only through an object satisfying
:class:`RepositoryAdapter`. :class:`GitRepository` is the real one; tests
inject an in-memory fake.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from gitfriend.git import operations
from gitfriend.git.models import BranchList, CommitLogEntry, Remote, RepositoryStatus


class RepositoryAdapter(Protocol):
    """Capabilities the workflow engine needs from a repository."""

    def get_status(self) -> RepositoryStatus: ...

    def list_branches(self) -> BranchList: ...

    def checkout(self, name: str) -> None: ...

    def create_branch(self, name: str) -> None: ...

    def pull(self) -> None: ...

    def push(self) -> None: ...

    def stage_all(self) -> None: ...

    def commit(self, message: str) -> str: ...

    def unstage_all(self) -> None: ...

    def discard_untracked(self) -> None: ...

    def reset_hard(self, ref: str) -> None: ...

    def list_remotes(self) -> list[Remote]: ...

    def add_remote(self, name: str, url: str) -> None: ...

    def log(self, limit: int) -> list[CommitLogEntry]: ...


class GitRepository:
    """Runs git in ``path`` (or the current directory)."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path

    def __repr__(self) -> str:
        return f"GitRepository(path={self.path!r})"

    def get_status(self) -> RepositoryStatus:
        return operations.get_status(self.path)

    def list_branches(self) -> BranchList:
        return operations.list_branches(self.path)

    def checkout(self, name: str) -> None:
        operations.checkout(name, self.path)

    def create_branch(self, name: str) -> None:
        operations.create_branch(name, self.path)

    def pull(self) -> None:
        operations.pull(self.path)

    def push(self) -> None:
        operations.push(self.path)

    def stage_all(self) -> None:
        operations.stage_all(self.path)

    def commit(self, message: str) -> str:
        return operations.commit(message, self.path)

    def unstage_all(self) -> None:
        operations.unstage_all(self.path)

    def discard_untracked(self) -> None:
        operations.discard_untracked(self.path)

    def reset_hard(self, ref: str) -> None:
        operations.reset_hard(ref, self.path)

    def list_remotes(self) -> list[Remote]:
        return operations.list_remotes(self.path)

    def add_remote(self, name: str, url: str) -> None:
        operations.add_remote(name, url, self.path)

    def log(self, limit: int) -> list[CommitLogEntry]:
        return operations.log(limit, self.path)
