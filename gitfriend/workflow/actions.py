# Git-Friend Workflow Actions
# Menu enumerations and workflow outcomes

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class _LabelledChoice(str, Enum):
    """Menu entry whose value is the label shown to the user."""

    @classmethod
    def labels(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def from_label(cls, label: str) -> Optional["_LabelledChoice"]:
        """Return the entry for ``label``, or None when it is not recognized."""
        for member in cls:
            if member.value == label:
                return member
        return None


class MenuAction(_LabelledChoice):
    """Entries of the main menu."""

    STAGE_COMMIT_PUSH = "Stage, Commit, and Push Changes"
    MANAGE_BRANCHES = "Manage Branches"
    PULL = "Pull Latest Changes"
    RESET = "Reset/Undo Changes"
    VIEW_LOGS = "View Git Logs"
    MANAGE_REMOTES = "Check or Configure Remote"
    CHECK_STATUS = "Check Status"
    EXIT = "Exit"


class BranchAction(_LabelledChoice):
    """Entries of the branch sub-menu."""

    SWITCH = "Switch Branch"
    CREATE = "Create Branch"
    BACK = "Back"


class ResetAction(_LabelledChoice):
    """Entries of the reset/undo sub-menu."""

    UNSTAGE_ALL = "Unstage all changes"
    DISCARD_UNSTAGED = "Discard all unstaged changes"
    RESET_TO_COMMIT = "Reset to a previous commit"
    BACK = "Back"


class Outcome(str, Enum):
    """How a workflow ended."""

    COMPLETED = "completed"
    SKIPPED = "skipped"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one workflow plus the reason when it did not complete."""

    outcome: Outcome
    reason: str = ""

    @classmethod
    def completed(cls, reason: str = "") -> "StepResult":
        return cls(Outcome.COMPLETED, reason)

    @classmethod
    def skipped(cls, reason: str) -> "StepResult":
        return cls(Outcome.SKIPPED, reason)

    @classmethod
    def cancelled(cls, reason: str) -> "StepResult":
        return cls(Outcome.CANCELLED, reason)

    @classmethod
    def failed(cls, reason: str) -> "StepResult":
        return cls(Outcome.FAILED, reason)
