# Git-Friend Configuration Module
# Handles YAML-based configuration loading, validation, and defaults

from gitfriend.config.defaults import DEFAULT_CONFIG, generate_default_config
from gitfriend.config.loader import (
    get_config_path,
    load_config,
    save_config,
    write_default_config,
)
from gitfriend.config.schema import (
    GitFriendConfig,
    OutputConfig,
    PromptConfig,
    PromptStyle,
    UpdateConfig,
    WorkflowConfig,
)

__all__ = [
    # Schema
    "GitFriendConfig",
    "PromptConfig",
    "PromptStyle",
    "WorkflowConfig",
    "OutputConfig",
    "UpdateConfig",
    # Loader
    "load_config",
    "save_config",
    "get_config_path",
    "write_default_config",
    # Defaults
    "DEFAULT_CONFIG",
    "generate_default_config",
]
