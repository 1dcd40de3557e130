# Git-Friend Configuration Loader
# Load and save YAML configuration files

import os
from pathlib import Path
from typing import Optional

import yaml

from gitfriend.config.defaults import generate_default_config, get_default_config
from gitfriend.config.schema import GitFriendConfig


def get_config_dir() -> Path:
    """Get the Git-Friend configuration directory."""
    return Path.home() / ".config" / "gitfriend"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    # Allow override via environment variable
    env_path = os.environ.get("GITFRIEND_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> GitFriendConfig:
    """
    Load configuration from YAML file.

    The default location is optional: when nothing is there the built-in
    defaults are used. A path given explicitly must exist.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        GitFriendConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist.
        yaml.YAMLError: If the file is not valid YAML.
        pydantic.ValidationError: If config file is invalid.
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        return GitFriendConfig.model_validate(get_default_config())

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {config_path}")

    return GitFriendConfig.model_validate(_merge_with_defaults(data))


def save_config(config: GitFriendConfig, config_path: Optional[Path] = None) -> Path:
    """
    Save configuration to YAML file.

    Args:
        config: Configuration object to save.
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Path: Path where config was saved.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    # Use mode='json' to serialize Enums as their string values
    data = config.model_dump(mode="json")

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    return config_path


def write_default_config(config_path: Optional[Path] = None) -> tuple[Path, bool]:
    """
    Write the commented default configuration unless a file already exists.

    Returns:
        Tuple of (config_path, was_created).
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        return config_path, False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_default_config(), encoding="utf-8")
    return config_path, True


def _merge_with_defaults(data: dict) -> dict:
    """Merge loaded data with default values for missing keys."""
    result = get_default_config()

    for section, values in data.items():
        if section in result and isinstance(values, dict):
            result[section] = {**result[section], **values}
        else:
            result[section] = values

    return result
