"""Click-based CLI for Git-Friend - an interactive menu for everyday git work."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError

from gitfriend.config import PromptStyle, UpdateConfig, load_config, write_default_config
from gitfriend.git import GitRepository, get_repo_root
from gitfriend.output import create_console, create_prompter
from gitfriend.version import show_version
from gitfriend.workflow import Session, WorkflowEngine


@click.command()
@click.option("--version", "show_version_flag", is_flag=True, help="Show the version, check for updates and exit")
@click.option(
    "--repo",
    "-C",
    "repo_path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Run in this repository instead of the current directory",
)
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="Path to configuration file")
@click.option(
    "--prompt-style",
    type=click.Choice([style.value for style in PromptStyle]),
    default=None,
    help="Pick menu entries by number (list) or by typing their name (text)",
)
@click.option("--init-config", is_flag=True, help="Write the default configuration file and exit")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--verbose", "-v", is_flag=True, help="Show the outcome of every workflow")
def cli(
    show_version_flag: bool,
    repo_path: Optional[Path],
    config_path: Optional[Path],
    prompt_style: Optional[str],
    init_config: bool,
    no_color: bool,
    verbose: bool,
) -> None:
    """Git-Friend - stage, commit, push, branch and undo from one menu.

    \b
    Menu:
      Stage, Commit, and Push Changes
      Manage Branches
      Pull Latest Changes
      Reset/Undo Changes
      View Git Logs
      Check or Configure Remote
      Check Status
    """
    console = create_console(verbose=verbose, colored=not no_color)

    if init_config:
        path, created = write_default_config(config_path)
        if created:
            console.print_success(f"Created configuration: {path}")
        else:
            console.print_info(f"Configuration already exists: {path}")
        return

    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError, ValidationError, yaml.YAMLError) as e:
        if show_version_flag:
            show_version(console, UpdateConfig())
            return
        console.print_error(f"Invalid configuration: {e}")
        sys.exit(1)

    console.verbose = verbose or config.output.verbose
    if no_color or not config.output.colored:
        console = create_console(verbose=console.verbose, colored=False)

    if show_version_flag:
        show_version(console, config.updates)
        return

    root = get_repo_root(repo_path)
    if root is None:
        where = repo_path or Path.cwd()
        console.print_error(f"Not a git repository: {where}")
        sys.exit(1)

    style = PromptStyle(prompt_style) if prompt_style else config.prompts.style
    prompter = create_prompter(style, console)
    engine = WorkflowEngine(GitRepository(root), prompter, console, config.workflow)

    sys.exit(Session(engine, prompter, console).run())


if __name__ == "__main__":
    cli()
