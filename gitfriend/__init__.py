"""Git-Friend - an interactive menu for everyday git operations.

Guides the user through staging, committing, pushing, branch switching,
resetting, log viewing, remote management and status checks, delegating the
actual work to the git executable.
"""

__version__ = "1.0.0"
__author__ = "Git-Friend Contributors"

__all__ = [
    "__version__",
    "GitRepository",
    "RepositoryError",
    "Session",
    "WorkflowEngine",
    "MenuAction",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name == "GitRepository":
        from gitfriend.git.repository import GitRepository

        return GitRepository
    if name == "RepositoryError":
        from gitfriend.errors import RepositoryError

        return RepositoryError
    if name == "Session":
        from gitfriend.workflow.session import Session

        return Session
    if name in ("WorkflowEngine", "MenuAction"):
        from gitfriend import workflow

        return getattr(workflow, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
