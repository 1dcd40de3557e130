# Git-Friend Repository Models
# Snapshots of repository state returned by the adapter

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

SHORT_HASH_LENGTH = 7

# Number of commits fetched per log query.
LOG_LIMIT = 5


@dataclass(frozen=True)
class RepositoryStatus:
    """Working tree and index state at the moment it was read."""

    branch: Optional[str] = None
    staged: tuple[str, ...] = ()
    modified: tuple[str, ...] = ()
    untracked: tuple[str, ...] = ()

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.modified or self.untracked)

    @property
    def has_staged(self) -> bool:
        return bool(self.staged)


@dataclass(frozen=True)
class BranchList:
    """Local branches plus the one currently checked out."""

    branches: tuple[str, ...] = ()
    current: Optional[str] = None

    def __post_init__(self) -> None:
        if self.current is not None and self.current not in self.branches:
            raise ValueError(f"Current branch {self.current!r} is not among the listed branches")


@dataclass(frozen=True)
class Remote:
    """A configured remote and its fetch URL."""

    name: str
    fetch_url: str


@dataclass(frozen=True)
class CommitLogEntry:
    """A single commit from the log."""

    hash: str
    message: str
    timestamp: datetime

    @property
    def short_hash(self) -> str:
        return self.hash[:SHORT_HASH_LENGTH]
