# Git-Friend Git Operations
# Git command execution and output parsing

import subprocess
from datetime import datetime
from pathlib import Path
from typing import Optional

from gitfriend.errors import RepositoryError
from gitfriend.git.models import BranchList, CommitLogEntry, Remote, RepositoryStatus

_FIELD_SEP = "\x1f"
_RECORD_SEP = "\x1e"
_LOG_FORMAT = f"%H{_FIELD_SEP}%s{_FIELD_SEP}%aI{_RECORD_SEP}"


def _run_git(
    *args: str,
    cwd: Optional[Path] = None,
    check: bool = True,
    operation: Optional[str] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Run a git command.

    Args:
        *args: Git command arguments.
        cwd: Working directory.
        check: Whether to raise on non-zero exit.
        operation: Name reported in errors (defaults to the git subcommand).

    Returns:
        CompletedProcess with result.

    Raises:
        RepositoryError: If command fails and check is True.
    """
    cmd = ["git", *args]
    operation = operation or (args[0] if args else "git")
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        raise RepositoryError("git command not found. Is git installed?", operation=operation)

    if check and result.returncode != 0:
        raise RepositoryError(
            f"Git command failed: {' '.join(cmd)}",
            returncode=result.returncode,
            stderr=(result.stderr or result.stdout or "").strip(),
            operation=operation,
        )
    return result


def _require(value: str, what: str, operation: str) -> str:
    """Validate a user-supplied name or ref before it reaches git as an argument."""
    if not value or not value.strip():
        raise RepositoryError(f"{what} must not be empty", operation=operation)
    value = value.strip()
    # git would parse it as an option
    if value.startswith("-"):
        raise RepositoryError(f"{what} must not start with '-'", operation=operation)
    return value


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _parse_branch_header(header: str) -> Optional[str]:
    """Extract the branch name from a porcelain ``## ...`` header."""
    header = header[3:]
    for prefix in ("No commits yet on ", "Initial commit on "):
        if header.startswith(prefix):
            return header[len(prefix) :].strip()
    if header.startswith("HEAD (no branch)"):
        return None
    name = header.split("...", 1)[0]
    return name.split(" [", 1)[0].strip()


def parse_status(output: str) -> RepositoryStatus:
    """
    Parse ``git status --porcelain=v1 --branch -z`` output.

    Args:
        output: Raw NUL-separated status output.

    Returns:
        RepositoryStatus snapshot.
    """
    branch: Optional[str] = None
    staged: list[str] = []
    modified: list[str] = []
    untracked: list[str] = []

    entries = output.split("\0")
    i = 0
    while i < len(entries):
        entry = entries[i]
        i += 1
        if not entry:
            continue
        if entry.startswith("## "):
            branch = _parse_branch_header(entry)
            continue

        # Format: XY filename
        # X = index status, Y = worktree status
        status_code = entry[:2]
        filename = entry[3:]
        index_status, worktree_status = status_code[0], status_code[1]

        # Renames and copies are followed by the original path
        if index_status in ("R", "C"):
            i += 1

        if status_code == "??":
            untracked.append(filename)
            continue
        if status_code == "!!":
            continue
        if index_status not in (" ", "?"):
            staged.append(filename)
        if worktree_status not in (" ", "?"):
            modified.append(filename)

    return RepositoryStatus(
        branch=branch,
        staged=tuple(staged),
        modified=tuple(modified),
        untracked=tuple(untracked),
    )


def parse_branches(output: str) -> tuple[list[str], Optional[str]]:
    """
    Parse ``git branch --list`` output.

    Returns:
        Tuple of (branch names in listed order, current branch or None).
    """
    branches: list[str] = []
    current: Optional[str] = None

    for line in output.splitlines():
        if not line.strip():
            continue
        marker, name = line[:2], line[2:].strip()
        branches.append(name)
        if marker.startswith("*"):
            current = name

    return branches, current


def parse_remotes(output: str) -> list[Remote]:
    """Parse ``git remote -v`` output, keeping fetch URLs only."""
    remotes: list[Remote] = []
    seen: set[str] = set()

    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 2:
            continue
        name, url = parts[0], parts[1]
        kind = parts[2] if len(parts) > 2 else "(fetch)"
        if kind != "(fetch)" or name in seen:
            continue
        seen.add(name)
        remotes.append(Remote(name=name, fetch_url=url))

    return remotes


def parse_log(output: str) -> list[CommitLogEntry]:
    """Parse log output produced with the record/field separators above."""
    entries: list[CommitLogEntry] = []

    for record in output.split(_RECORD_SEP):
        record = record.strip("\n")
        if not record:
            continue
        fields = record.split(_FIELD_SEP)
        if len(fields) != 3:
            continue
        commit_hash, message, date = fields
        entries.append(
            CommitLogEntry(
                hash=commit_hash.strip(),
                message=message,
                timestamp=datetime.fromisoformat(date.strip()),
            )
        )

    return entries


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def get_repo_root(path: Optional[Path] = None) -> Optional[Path]:
    """
    Get the root directory of a git repository.

    Args:
        path: Starting path (defaults to current directory).

    Returns:
        Path to repo root, or None if not in a repo.
    """
    try:
        result = _run_git("rev-parse", "--show-toplevel", cwd=path)
        return Path(result.stdout.strip())
    except RepositoryError:
        return None


def is_git_repo(path: Optional[Path] = None) -> bool:
    """
    Check if path is within a git repository.

    Args:
        path: Path to check (defaults to current directory).

    Returns:
        True if in a git repo.
    """
    return get_repo_root(path) is not None


def get_status(path: Optional[Path] = None) -> RepositoryStatus:
    """Read the current branch and the staged, modified and untracked paths."""
    result = _run_git("status", "--porcelain=v1", "--branch", "-z", cwd=path)
    return parse_status(result.stdout)


def list_branches(path: Optional[Path] = None) -> BranchList:
    """
    List local branches.

    On an unborn branch ``git branch`` prints nothing, so the symbolic
    HEAD is used to report the current branch.
    """
    result = _run_git("branch", "--list", "--no-color", cwd=path, operation="list branches")
    branches, current = parse_branches(result.stdout)

    if current is None:
        head = _run_git("symbolic-ref", "--short", "HEAD", cwd=path, check=False)
        name = head.stdout.strip()
        if head.returncode == 0 and name:
            current = name
            if name not in branches:
                branches.append(name)

    return BranchList(branches=tuple(branches), current=current)


def list_remotes(path: Optional[Path] = None) -> list[Remote]:
    """List configured remotes in the order git reports them."""
    result = _run_git("remote", "-v", cwd=path, operation="list remotes")
    return parse_remotes(result.stdout)


def log(limit: int, path: Optional[Path] = None) -> list[CommitLogEntry]:
    """
    Get the most recent commits, newest first.

    An unborn branch has no history and yields an empty list.

    Args:
        limit: Maximum number of commits.
        path: Repository path.
    """
    head = _run_git("rev-parse", "--verify", "-q", "HEAD", cwd=path, check=False)
    if head.returncode != 0:
        # No commits yet
        return []

    result = _run_git("log", "-n", str(limit), f"--pretty=format:{_LOG_FORMAT}", cwd=path)
    return parse_log(result.stdout)


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------


def checkout(name: str, path: Optional[Path] = None) -> None:
    """Switch to an existing branch or commit-like reference."""
    name = _require(name, "Branch name", "checkout")
    _run_git("checkout", name, cwd=path)


def create_branch(name: str, path: Optional[Path] = None) -> None:
    """Create a new branch and switch to it."""
    name = _require(name, "Branch name", "create branch")
    _run_git("checkout", "-b", name, cwd=path, operation="create branch")


def pull(path: Optional[Path] = None) -> None:
    """Pull changes from the tracked remote branch."""
    _run_git("pull", cwd=path)


def push(path: Optional[Path] = None) -> None:
    """Push commits to the tracked remote branch."""
    _run_git("push", cwd=path)


def stage_all(path: Optional[Path] = None) -> None:
    """Stage every modified, deleted and untracked path."""
    _run_git("add", "-A", cwd=path, operation="stage")


def commit(message: str, path: Optional[Path] = None) -> str:
    """
    Create a commit from the index.

    Args:
        message: Commit message, passed to git unchanged.
        path: Repository path.

    Returns:
        Hash of the new commit.
    """
    _run_git("commit", "-m", message, cwd=path)
    result = _run_git("rev-parse", "HEAD", cwd=path, operation="commit")
    return result.stdout.strip()


def unstage_all(path: Optional[Path] = None) -> None:
    """Reset the index to HEAD, keeping working tree changes."""
    _run_git("reset", "--quiet", "HEAD", cwd=path, operation="unstage")


def discard_untracked(path: Optional[Path] = None) -> None:
    """Remove untracked files and directories. Irreversible."""
    _run_git("clean", "-f", "-d", cwd=path, operation="discard")


def reset_hard(ref: str, path: Optional[Path] = None) -> None:
    """Move the branch and working tree to ``ref``. Irreversible."""
    ref = _require(ref, "Commit reference", "reset")
    _run_git("reset", "--hard", ref, cwd=path, operation="reset")


def add_remote(name: str, url: str, path: Optional[Path] = None) -> None:
    """Add a remote."""
    name = _require(name, "Remote name", "add remote")
    url = _require(url, "Remote URL", "add remote")
    _run_git("remote", "add", name, url, cwd=path, operation="add remote")
