"""Menu-driven workflow engine.

Each main menu entry maps to one procedure. Every procedure reads fresh
repository state, short-circuits when there is nothing to do, prompts,
acts through the repository adapter and reports what happened. Failures
of a single procedure are reported and end that procedure only.
"""

from __future__ import annotations

from typing import Callable, Optional

from gitfriend.config.schema import WorkflowConfig
from gitfriend.errors import InputError, RepositoryError
from gitfriend.git.models import LOG_LIMIT
from gitfriend.git.repository import RepositoryAdapter
from gitfriend.output.console import Console
from gitfriend.output.prompts import InteractionProvider
from gitfriend.workflow.actions import BranchAction, MenuAction, ResetAction, StepResult


class WorkflowEngine:
    """Runs the procedure behind each main menu entry."""

    def __init__(
        self,
        repository: RepositoryAdapter,
        prompter: InteractionProvider,
        console: Console,
        settings: Optional[WorkflowConfig] = None,
    ):
        self.repository = repository
        self.prompter = prompter
        self.console = console
        self.settings = settings or WorkflowConfig()
        self._handlers: dict[MenuAction, Callable[[], StepResult]] = {
            MenuAction.STAGE_COMMIT_PUSH: self.stage_commit_push,
            MenuAction.MANAGE_BRANCHES: self.manage_branches,
            MenuAction.PULL: self.pull_changes,
            MenuAction.RESET: self.reset_changes,
            MenuAction.VIEW_LOGS: self.view_logs,
            MenuAction.MANAGE_REMOTES: self.manage_remotes,
            MenuAction.CHECK_STATUS: self.check_status,
        }

    def run(self, action: MenuAction) -> StepResult:
        """
        Run the procedure for ``action``.

        Repository and input errors are reported and turned into a failed
        result; an interrupt cancels the procedure. Nothing escapes except
        errors the session cannot recover from.

        Args:
            action: Main menu entry chosen by the user.

        Returns:
            StepResult describing how the procedure ended.
        """
        handler = self._handlers.get(action)
        if handler is None:
            self.console.print_error(f"Unrecognized menu action: {action}")
            return StepResult.failed(f"unrecognized action {action!r}")

        try:
            return handler()
        except RepositoryError as e:
            operation = e.operation or "git"
            self.console.print_error(f"{operation} failed: {e.detail}")
            return StepResult.failed(f"{operation}: {e.detail}")
        except InputError as e:
            self.console.print_error(str(e))
            return StepResult.failed(str(e))
        except KeyboardInterrupt:
            self.console.print_warning("Cancelled. Returning to main menu.")
            return StepResult.cancelled("interrupted")

    def _ask_required(self, prompt: str, what: str) -> str:
        answer = self.prompter.ask_text(prompt)
        if not answer:
            raise InputError(f"{what} cannot be empty")
        return answer

    def _confirm_destructive(self, prompt: str) -> bool:
        if not self.settings.confirm_destructive:
            return True
        return self.prompter.ask_confirm(prompt, default=False)

    # ------------------------------------------------------------------
    # Procedures
    # ------------------------------------------------------------------

    def stage_commit_push(self) -> StepResult:
        """Stage, commit and optionally push the pending changes."""
        status = self.repository.get_status()
        if status.is_clean:
            self.console.print_warning("No changes detected. Returning to main menu.")
            return StepResult.skipped("no changes")

        self.console.print_changes(status)

        if self.prompter.ask_confirm("Stage all changes?"):
            self.repository.stage_all()
            self.console.print_success("All changes staged.")

        # Fresh read: never commit against an empty index
        status = self.repository.get_status()
        if not status.has_staged:
            self.console.print_warning("No changes staged. Returning to main menu.")
            return StepResult.skipped("nothing staged")

        message = self.prompter.ask_text("Enter a commit message:")
        if self.settings.require_commit_message and not message:
            raise InputError("Commit message cannot be empty")

        commit_hash = self.repository.commit(message)
        short = f" ({commit_hash[:7]})" if commit_hash else ""
        self.console.print_success(f'Committed with message: "{message}"{short}')

        if self.prompter.ask_confirm("Do you want to push these changes to the remote repository?"):
            self.repository.push()
            self.console.print_success("Pushed changes to remote.")
            return StepResult.completed()

        self.console.print_warning("Changes were not pushed to the remote.")
        return StepResult.completed("not pushed")

    def manage_branches(self) -> StepResult:
        """Show branches, then switch to or create one."""
        branches = self.repository.list_branches()
        self.console.print_branches(branches)

        choice = BranchAction.from_label(
            self.prompter.ask_choice("What do you want to do?", BranchAction.labels())
        )

        if choice == BranchAction.SWITCH:
            target = self._ask_required("Enter the branch name to switch to:", "Branch name")
            self.repository.checkout(target)
            self.console.print_success(f"Switched to branch: {target}")
            return StepResult.completed()

        if choice == BranchAction.CREATE:
            name = self._ask_required("Enter the new branch name:", "Branch name")
            self.repository.create_branch(name)
            self.console.print_success(f"Created and switched to branch: {name}")
            return StepResult.completed()

        return StepResult.skipped("back")

    def pull_changes(self) -> StepResult:
        """Pull the latest changes for the current branch."""
        status = self.repository.get_status()
        target = f" into {status.branch}" if status.branch else ""
        self.console.print_info(f"\nPulling latest changes from remote{target}...")
        self.repository.pull()
        self.console.print_success("Pulled latest changes successfully.")
        return StepResult.completed()

    def reset_changes(self) -> StepResult:
        """Undo options: unstage, discard untracked files, hard reset."""
        status = self.repository.get_status()
        self.console.print_status(status)

        choice = ResetAction.from_label(self.prompter.ask_choice("Undo options:", ResetAction.labels()))

        if choice == ResetAction.UNSTAGE_ALL:
            self.repository.unstage_all()
            self.console.print_success("All changes unstaged.")
            return StepResult.completed()

        if choice == ResetAction.DISCARD_UNSTAGED:
            if not self._confirm_destructive("Permanently delete all untracked files and directories?"):
                self.console.print_warning("Discard cancelled.")
                return StepResult.cancelled("declined discard")
            self.repository.discard_untracked()
            self.console.print_success("All unstaged changes discarded.")
            return StepResult.completed()

        if choice == ResetAction.RESET_TO_COMMIT:
            ref = self._ask_required("Enter the commit hash to reset to:", "Commit hash")
            if not self._confirm_destructive(f"Hard reset to {ref}? Uncommitted work will be lost."):
                self.console.print_warning("Reset cancelled.")
                return StepResult.cancelled("declined reset")
            self.repository.reset_hard(ref)
            self.console.print_success(f"Reset to commit: {ref}")
            return StepResult.completed()

        return StepResult.skipped("back")

    def view_logs(self) -> StepResult:
        """Show the most recent commits."""
        entries = self.repository.log(LOG_LIMIT)
        if not entries:
            self.console.print_warning("No commits yet.")
            return StepResult.skipped("no commits")

        self.console.print_log(entries)
        return StepResult.completed()

    def manage_remotes(self) -> StepResult:
        """List remotes, or add the first one when none is configured."""
        remotes = self.repository.list_remotes()
        if remotes:
            self.console.print_remotes(remotes)
            return StepResult.completed()

        self.console.print_warning("No remotes configured.")
        url = self._ask_required("Enter the remote URL to add:", "Remote URL")
        self.repository.add_remote(self.settings.default_remote, url)
        self.console.print_success(f"Remote '{self.settings.default_remote}' added successfully.")
        return StepResult.completed()

    def check_status(self) -> StepResult:
        """Show branch and change counts."""
        status = self.repository.get_status()
        self.console.print_status(status)
        return StepResult.completed()
