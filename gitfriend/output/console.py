# Git-Friend Console Output
# Rich-based console output for user-friendly display

from typing import IO, TYPE_CHECKING, Iterable, Optional

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from gitfriend.git.models import BranchList, CommitLogEntry, Remote, RepositoryStatus

if TYPE_CHECKING:
    from gitfriend.workflow.actions import MenuAction, StepResult


class Console:
    """
    Console output manager using Rich.

    Every message shown to the user goes through here.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(no_color=not colored, highlight=False)

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def input(self, prompt: str = "", *, stream: Optional[IO[str]] = None) -> str:
        """
        Read a line of input.

        Args:
            prompt: Prompt markup shown before reading.
            stream: Read from this stream instead of stdin.

        Returns:
            The line without its trailing newline.

        Raises:
            EOFError: If the input is exhausted.
        """
        line = self._console.input(prompt, stream=stream)
        if stream is not None:
            if line == "":
                raise EOFError("input stream exhausted")
            line = line.rstrip("\r\n")
        return line

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]✗ Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]⚠ {escape(message)}[/yellow]")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]✓ {escape(message)}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{escape(message)}[/blue]")

    def print_welcome(self) -> None:
        self._console.print("\n[bold bright_green]Welcome to Git-Friend![/bold bright_green]")

    def print_changes(self, status: RepositoryStatus) -> None:
        """
        Print the paths a commit would pick up.

        Args:
            status: Fresh repository status.
        """
        self._console.print("\n[yellow]Changes detected:[/yellow]")
        self._print_paths("Staged files", status.staged, "green")
        self._print_paths("Modified files", status.modified, "yellow")
        self._print_paths("Untracked files", status.untracked, "red")

    def _print_paths(self, title: str, paths: Iterable[str], color: str) -> None:
        paths = list(paths)
        if not paths:
            return
        self._console.print(f"[bold]{title}:[/bold]")
        for path in paths:
            self._console.print(f"  [{color}]{escape(path)}[/{color}]")

    def print_branches(self, branches: BranchList) -> None:
        """Print local branches, marking the current one."""
        self._console.print("\n[yellow]Branches:[/yellow]")
        if not branches.branches:
            self._console.print("  [dim]No branches yet[/dim]")
            return
        for name in branches.branches:
            if name == branches.current:
                self._console.print(f"  [bright_green]*[/bright_green] [bold]{escape(name)}[/bold]")
            else:
                self._console.print(f"    {escape(name)}")

    def print_log(self, entries: list[CommitLogEntry]) -> None:
        """Print recent commits as ``hash - message (date)``."""
        self._console.print("\n[blue]Recent commits:[/blue]")
        for entry in entries:
            date = entry.timestamp.strftime("%Y-%m-%d %H:%M:%S %z")
            self._console.print(f"[green]{entry.short_hash}[/green] - {escape(entry.message)} [dim]({date})[/dim]")

    def print_remotes(self, remotes: list[Remote]) -> None:
        """Print configured remotes."""
        table = Table(title="Current remotes", show_header=True, header_style="bold")
        table.add_column("Name", style="cyan")
        table.add_column("Fetch URL")

        for remote in remotes:
            table.add_row(escape(remote.name), escape(remote.fetch_url))

        self._console.print()
        self._console.print(table)

    def print_status(self, status: RepositoryStatus) -> None:
        """Print branch and change counts."""
        branch = status.branch or "(detached HEAD)"
        self._console.print(
            Panel(
                f"On branch: [green]{escape(branch)}[/green]\n"
                f"Changes to be committed: {len(status.staged)}\n"
                f"Changes not staged for commit: {len(status.modified)}\n"
                f"Untracked files: {len(status.untracked)}",
                title="Git Status",
                border_style="blue",
            )
        )

    def print_outcome(self, action: "MenuAction", result: "StepResult") -> None:
        """Print a workflow outcome (verbose mode only)."""
        if not self.verbose:
            return
        reason = f": {result.reason}" if result.reason else ""
        self._console.print(f"[dim]{action.value} → {result.outcome.value}{escape(reason)}[/dim]")


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
