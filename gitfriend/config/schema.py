# Git-Friend Configuration Schema
# Pydantic models for YAML configuration validation

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class PromptStyle(str, Enum):
    """How choices are presented to the user."""

    LIST = "list"
    TEXT = "text"


class PromptConfig(BaseModel):
    """Prompt presentation settings."""

    style: PromptStyle = Field(default=PromptStyle.LIST, description="Choice prompt strategy: list or text")


class WorkflowConfig(BaseModel):
    """Behaviour of the interactive workflows."""

    confirm_destructive: bool = Field(
        default=True,
        description="Ask again before discarding untracked files or hard-resetting",
    )
    require_commit_message: bool = Field(
        default=True,
        description="Reject blank commit messages before calling git",
    )
    default_remote: str = Field(default="origin", description="Name used when adding the first remote")

    @field_validator("default_remote")
    @classmethod
    def remote_not_blank(cls, v: str) -> str:
        """Remote names must not be blank."""
        if not v.strip():
            raise ValueError("default_remote must not be blank")
        return v.strip()


class OutputConfig(BaseModel):
    """Output settings."""

    verbose: bool = Field(default=False, description="Echo the outcome of every workflow")
    colored: bool = Field(default=True, description="Enable colored output")


class UpdateConfig(BaseModel):
    """Where to look for newer releases."""

    package_name: str = Field(default="git-friend", description="Package name on the registry")
    registry_url: str = Field(
        default="https://pypi.org/pypi/{package}/json",
        description="Registry JSON endpoint, {package} is substituted",
    )
    timeout: float = Field(default=5.0, gt=0, description="Request timeout in seconds")


class GitFriendConfig(BaseModel):
    """Root configuration model for Git-Friend."""

    prompts: PromptConfig = Field(default_factory=PromptConfig, description="Prompt settings")
    workflow: WorkflowConfig = Field(default_factory=WorkflowConfig, description="Workflow settings")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output settings")
    updates: UpdateConfig = Field(default_factory=UpdateConfig, description="Update check settings")
