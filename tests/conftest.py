# Git-Friend Test Fixtures
# Pytest fixtures: in-memory repository, scripted prompter, captured console

import tempfile
from collections.abc import Generator
from datetime import datetime, timezone
from io import StringIO
from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest
from rich.console import Console as RichConsole

from gitfriend.config.schema import WorkflowConfig
from gitfriend.errors import RepositoryError
from gitfriend.git.models import BranchList, CommitLogEntry, Remote, RepositoryStatus
from gitfriend.output.console import Console
from gitfriend.output.prompts import InteractionProvider
from gitfriend.workflow.engine import WorkflowEngine

MUTATING_CALLS = {
    "checkout",
    "create_branch",
    "pull",
    "push",
    "stage_all",
    "commit",
    "unstage_all",
    "discard_untracked",
    "reset_hard",
    "add_remote",
}


class FakeRepository:
    """In-memory repository that records every adapter call."""

    def __init__(
        self,
        *,
        branch: Optional[str] = "main",
        branches: Sequence[str] = ("main",),
        staged: Sequence[str] = (),
        modified: Sequence[str] = (),
        untracked: Sequence[str] = (),
        remotes: Sequence[Remote] = (),
        commits: Sequence[CommitLogEntry] = (),
    ):
        self.branch = branch
        self.branches = list(branches)
        self.staged = list(staged)
        self.modified = list(modified)
        self.untracked = list(untracked)
        self.remotes = list(remotes)
        self.commits = list(commits)
        self.calls: list[tuple] = []
        self.failures: dict[str, RepositoryError] = {}

    def fail(self, name: str, detail: str) -> None:
        """Make the next calls to ``name`` raise like git would."""
        self.failures[name] = RepositoryError(
            f"Git command failed: git {name}", returncode=1, stderr=detail, operation=name
        )

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if name in self.failures:
            raise self.failures[name]

    @property
    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

    @property
    def mutations(self) -> list[tuple]:
        return [call for call in self.calls if call[0] in MUTATING_CALLS]

    def get_status(self) -> RepositoryStatus:
        self._record("get_status")
        return RepositoryStatus(
            branch=self.branch,
            staged=tuple(self.staged),
            modified=tuple(self.modified),
            untracked=tuple(self.untracked),
        )

    def list_branches(self) -> BranchList:
        self._record("list_branches")
        return BranchList(branches=tuple(self.branches), current=self.branch)

    def checkout(self, name: str) -> None:
        self._record("checkout", name)
        if name not in self.branches:
            raise RepositoryError(
                f"Git command failed: git checkout {name}",
                stderr=f"error: pathspec '{name}' did not match any file(s) known to git",
                operation="checkout",
            )
        self.branch = name

    def create_branch(self, name: str) -> None:
        self._record("create_branch", name)
        if name in self.branches:
            raise RepositoryError(
                f"Git command failed: git checkout -b {name}",
                stderr=f"fatal: a branch named '{name}' already exists",
                operation="create branch",
            )
        self.branches.append(name)
        self.branch = name

    def pull(self) -> None:
        self._record("pull")

    def push(self) -> None:
        self._record("push")

    def stage_all(self) -> None:
        self._record("stage_all")
        for path in self.modified + self.untracked:
            if path not in self.staged:
                self.staged.append(path)
        self.modified = []
        self.untracked = []

    def commit(self, message: str) -> str:
        self._record("commit", message)
        if not self.staged:
            raise RepositoryError("Git command failed: git commit", stderr="nothing to commit", operation="commit")
        if not message:
            raise RepositoryError(
                "Git command failed: git commit",
                stderr="Aborting commit due to empty commit message.",
                operation="commit",
            )
        commit_hash = f"{len(self.commits) + 1:040x}"
        self.commits.insert(0, CommitLogEntry(commit_hash, message, datetime.now(timezone.utc)))
        self.staged = []
        return commit_hash

    def unstage_all(self) -> None:
        self._record("unstage_all")
        self.modified = self.staged + self.modified
        self.staged = []

    def discard_untracked(self) -> None:
        self._record("discard_untracked")
        self.untracked = []

    def reset_hard(self, ref: str) -> None:
        self._record("reset_hard", ref)
        self.staged = []
        self.modified = []

    def list_remotes(self) -> list[Remote]:
        self._record("list_remotes")
        return list(self.remotes)

    def add_remote(self, name: str, url: str) -> None:
        self._record("add_remote", name, url)
        self.remotes.append(Remote(name=name, fetch_url=url))

    def log(self, limit: int) -> list[CommitLogEntry]:
        self._record("log", limit)
        return self.commits[:limit]


class ScriptedPrompter(InteractionProvider):
    """Answers prompts from a fixed script and records what was asked.

    A scripted answer that is an exception (instance or class) is raised
    instead of returned. Running out of answers raises EOFError.
    """

    def __init__(self, console: Console, answers: Sequence = ()):
        super().__init__(console)
        self.answers = list(answers)
        self.asked: list[tuple[str, str]] = []

    def _next(self, kind: str, prompt: str):
        if self.closed:
            raise RuntimeError("Prompter is closed")
        self.asked.append((kind, prompt))
        if not self.answers:
            raise EOFError("no scripted answer left")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException) or (isinstance(answer, type) and issubclass(answer, BaseException)):
            raise answer
        return answer

    def ask_text(self, prompt: str) -> str:
        return self._next("text", prompt)

    def ask_confirm(self, prompt: str, default: bool = True) -> bool:
        return self._next("confirm", prompt)

    def ask_choice(self, prompt: str, options: Sequence[str]) -> str:
        return self._next("choice", prompt)

    def prompts_of(self, kind: str) -> list[str]:
        return [prompt for asked_kind, prompt in self.asked if asked_kind == kind]


class CapturedConsole(Console):
    """Console whose output is kept in memory."""

    def __init__(self, *, verbose: bool = False):
        super().__init__(verbose=verbose, colored=False)
        self._console = RichConsole(file=StringIO(), no_color=True, width=120, highlight=False)

    @property
    def output(self) -> str:
        self._console.file.seek(0)
        return self._console.file.read()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("GITFRIEND_CONFIG", raising=False)
    return home


@pytest.fixture
def console() -> CapturedConsole:
    return CapturedConsole()


@pytest.fixture
def fake_repo() -> FakeRepository:
    return FakeRepository()


@pytest.fixture
def make_repo() -> Callable[..., FakeRepository]:
    """Build a repository in a given state."""
    return FakeRepository


@pytest.fixture
def make_prompter(console: CapturedConsole) -> Callable[..., ScriptedPrompter]:
    """Build a prompter answering with the given answers in order."""

    def factory(*answers) -> ScriptedPrompter:
        return ScriptedPrompter(console, answers)

    return factory


@pytest.fixture
def make_engine(console: CapturedConsole) -> Callable[..., WorkflowEngine]:
    """Build an engine over a repository and a scripted prompter."""

    def factory(
        repository: FakeRepository,
        prompter: ScriptedPrompter,
        settings: Optional[WorkflowConfig] = None,
    ) -> WorkflowEngine:
        return WorkflowEngine(repository, prompter, console, settings)

    return factory
