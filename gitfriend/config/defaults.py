# Git-Friend Default Configuration
# Default configuration as Python dict and YAML generator

import copy
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "prompts": {
        "style": "list",
    },
    "workflow": {
        "confirm_destructive": True,
        "require_commit_message": True,
        "default_remote": "origin",
    },
    "output": {
        "verbose": False,
        "colored": True,
    },
    "updates": {
        "package_name": "git-friend",
        "registry_url": "https://pypi.org/pypi/{package}/json",
        "timeout": 5.0,
    },
}


def get_default_config() -> dict[str, Any]:
    """Return a fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def generate_default_config() -> str:
    """Generate default configuration as YAML string with comments."""
    header = """# Git-Friend Configuration
#
# prompts.style:
#   - list: pick menu entries by number
#   - text: type the entry name (or an unambiguous prefix)
#
# workflow.confirm_destructive asks once more before
# "Discard all unstaged changes" and "Reset to a previous commit".

"""
    return header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)
