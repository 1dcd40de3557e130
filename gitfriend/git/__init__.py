# Git-Friend Git Module
# Repository adapter over the git executable

from gitfriend.git.models import (
    LOG_LIMIT,
    BranchList,
    CommitLogEntry,
    Remote,
    RepositoryStatus,
)
from gitfriend.git.operations import get_repo_root, is_git_repo
from gitfriend.git.repository import GitRepository, RepositoryAdapter

__all__ = [
    "LOG_LIMIT",
    "RepositoryStatus",
    "BranchList",
    "Remote",
    "CommitLogEntry",
    "GitRepository",
    "RepositoryAdapter",
    "get_repo_root",
    "is_git_repo",
]
