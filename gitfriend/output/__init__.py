# Git-Friend Output Module
# Rich console output and interactive prompts

from gitfriend.output.console import Console, create_console
from gitfriend.output.prompts import (
    InteractionProvider,
    ListPrompter,
    TextPrompter,
    create_prompter,
    match_option,
)

__all__ = [
    "Console",
    "create_console",
    "InteractionProvider",
    "ListPrompter",
    "TextPrompter",
    "create_prompter",
    "match_option",
]
