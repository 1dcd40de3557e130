# Git-Friend Prompts
# Interaction providers: how questions are put to the user

from abc import ABC, abstractmethod
from typing import IO, Optional, Sequence

from rich.markup import escape

from gitfriend.config.schema import PromptStyle
from gitfriend.output.console import Console

_YES = ("y", "yes")


class InteractionProvider(ABC):
    """
    Asks the user questions and blocks until they answer.

    Text and confirmation prompts are shared; subclasses decide how a
    choice between options is presented. Use as a context manager so the
    input stream is released however the session ends.
    """

    def __init__(
        self,
        console: Console,
        *,
        stream: Optional[IO[str]] = None,
        owns_stream: bool = False,
    ):
        """
        Initialize provider.

        Args:
            console: Console used for prompts and warnings.
            stream: Read answers from this stream instead of stdin.
            owns_stream: Close the stream when the provider is closed.
        """
        self.console = console
        self._stream = stream
        self._owns_stream = owns_stream
        self._closed = False

    def __enter__(self) -> "InteractionProvider":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release the input stream. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._owns_stream and self._stream is not None:
            self._stream.close()

    def _read(self, prompt: str) -> str:
        if self._closed:
            raise RuntimeError("Prompter is closed")
        return self.console.input(prompt, stream=self._stream)

    def ask_text(self, prompt: str) -> str:
        """
        Ask for a line of text.

        An empty answer is returned as-is; callers decide whether it is
        acceptable.
        """
        return self._read(f"[bold cyan]?[/bold cyan] {escape(prompt)} ").strip()

    def ask_confirm(self, prompt: str, default: bool = True) -> bool:
        """
        Ask a yes/no question.

        Args:
            prompt: Question text.
            default: Value if user just presses enter.

        Returns:
            True if confirmed.
        """
        suffix = " [Y/n]" if default else " [y/N]"
        response = self._read(f"[bold cyan]?[/bold cyan] {escape(prompt + suffix)} ").strip().lower()

        if not response:
            return default

        return response in _YES

    @abstractmethod
    def ask_choice(self, prompt: str, options: Sequence[str]) -> str:
        """Ask the user to pick one of ``options`` and return it."""


class ListPrompter(InteractionProvider):
    """Numbered list; the user answers with the number of an option."""

    def ask_choice(self, prompt: str, options: Sequence[str]) -> str:
        if not options:
            raise ValueError("ask_choice needs at least one option")

        self.console.print(f"\n[bold]{escape(prompt)}[/bold]")
        for number, option in enumerate(options, start=1):
            self.console.print(f"  [cyan]{number}[/cyan] - {escape(option)}")

        while True:
            answer = self._read(escape(f"Your choice [1-{len(options)}]: ")).strip()
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1]
            self.console.print_warning(f"Please enter a number between 1 and {len(options)}")


class TextPrompter(InteractionProvider):
    """Free text; the user types an option name or an unambiguous prefix."""

    def ask_choice(self, prompt: str, options: Sequence[str]) -> str:
        if not options:
            raise ValueError("ask_choice needs at least one option")

        self.console.print(f"\n[bold]{escape(prompt)}[/bold]")
        for option in options:
            self.console.print(f"  • {escape(option)}")

        while True:
            answer = self._read("[bold cyan]>[/bold cyan] ")
            match = match_option(answer, options)
            if match is not None:
                return match
            self.console.print_warning("Please type one of the options above (a unique prefix is enough)")


def match_option(answer: str, options: Sequence[str]) -> Optional[str]:
    """
    Resolve free-text input to an option.

    An exact (case-insensitive) match wins; otherwise the answer must be
    the prefix of exactly one option.
    """
    wanted = answer.strip().lower()
    if not wanted:
        return None

    for option in options:
        if option.lower() == wanted:
            return option

    candidates = [option for option in options if option.lower().startswith(wanted)]
    if len(candidates) == 1:
        return candidates[0]
    return None


def create_prompter(
    style: PromptStyle,
    console: Console,
    *,
    stream: Optional[IO[str]] = None,
) -> InteractionProvider:
    """
    Create the interaction provider for a prompt style.

    Args:
        style: List or text prompts.
        console: Console used for prompts and warnings.
        stream: Optional input stream (stdin when omitted).

    Returns:
        InteractionProvider instance.
    """
    if style == PromptStyle.TEXT:
        return TextPrompter(console, stream=stream)
    return ListPrompter(console, stream=stream)
