# Git-Friend Workflow Module
# Menu state machine: actions, procedures and the session loop

from gitfriend.workflow.actions import (
    BranchAction,
    MenuAction,
    Outcome,
    ResetAction,
    StepResult,
)
from gitfriend.workflow.engine import WorkflowEngine
from gitfriend.workflow.session import Session

__all__ = [
    "MenuAction",
    "BranchAction",
    "ResetAction",
    "Outcome",
    "StepResult",
    "WorkflowEngine",
    "Session",
]
