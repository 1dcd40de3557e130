# Git-Friend Session
# Top-level menu loop

from gitfriend.errors import UnrecoverableError
from gitfriend.output.console import Console
from gitfriend.output.prompts import InteractionProvider
from gitfriend.workflow.actions import MenuAction
from gitfriend.workflow.engine import WorkflowEngine

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


class Session:
    """
    Read a main menu choice, dispatch it, repeat until the user exits.

    The prompter is held for the whole session and released on every exit
    path.
    """

    def __init__(self, engine: WorkflowEngine, prompter: InteractionProvider, console: Console):
        self.engine = engine
        self.prompter = prompter
        self.console = console

    def run(self) -> int:
        """
        Run the session.

        Returns:
            Process exit code: 0 on Exit, 130 when interrupted at the main
            menu, 1 on an unrecoverable error.
        """
        with self.prompter:
            try:
                self._loop()
            except KeyboardInterrupt:
                self.console.print_warning("Interrupted. Goodbye!")
                return EXIT_INTERRUPTED
            except Exception as e:
                error = e if isinstance(e, UnrecoverableError) else _unrecoverable(e)
                self.console.print_error(f"An error occurred: {error}")
                return EXIT_ERROR
        return EXIT_OK

    def _loop(self) -> None:
        self.console.print_welcome()

        while True:
            label = self.prompter.ask_choice("Main Menu:", MenuAction.labels())

            action = MenuAction.from_label(label)
            if action is None:
                self.console.print_error(f"Unrecognized menu choice: {label!r}")
                continue
            if action == MenuAction.EXIT:
                self.console.print_success("Goodbye!")
                return

            result = self.engine.run(action)
            self.console.print_outcome(action, result)


def _unrecoverable(error: Exception) -> UnrecoverableError:
    if isinstance(error, EOFError):
        message = "input stream closed"
    else:
        message = str(error) or type(error).__name__
    wrapped = UnrecoverableError(message)
    wrapped.__cause__ = error
    return wrapped
