"""Hook configuration for task_id_hook.

Handles reading the optional .task-id-hook/config.yaml file in a repository
and merging it with the values given on the command line.

Example config.yaml:
    task_regex: "feature/(?P<task_template>ABC-\\d+).*"
    template: "{subject}\\n\\n{body}\\n\\n{task_id}"
    on_no_match: skip
    skip_if_present: true
"""

from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from task_id_hook.exceptions import ConfigError, ConfigFileError

CONFIG_DIR_NAME = ".task-id-hook"
CONFIG_FILE_NAME = "config.yaml"


class NoMatchPolicy(str, Enum):
    """What to do when the branch name does not contain a task id."""

    SKIP = "skip"  # leave the commit message untouched
    RENDER = "render"  # render the template with an empty task id


class HookConfig(BaseModel):
    """Options of a single hook run.

    Attributes:
        task_regex: Regex with a `task_template` named group.
        template: Message template with `{subject}`, `{body}`, `{task_id}`.
        on_no_match: Policy when the branch holds no task id.
        skip_if_present: Leave the message alone if it already mentions the task id.
        strip_comments: Drop git's comment section before splitting the message.
        collapse_blank_lines: Collapse the blank lines left by an empty body.
    """

    model_config = ConfigDict(extra="forbid")

    task_regex: Optional[str] = None
    template: Optional[str] = None
    on_no_match: NoMatchPolicy = NoMatchPolicy.SKIP
    skip_if_present: bool = True
    strip_comments: bool = True
    collapse_blank_lines: bool = True

    @field_validator("task_regex", "template")
    @classmethod
    def must_not_be_blank(cls, v: Optional[str]) -> Optional[str]:
        """Ensure regex and template are not blank when given."""
        if v is not None and not v.strip():
            raise ValueError("must not be empty")
        return v

    def require_pattern_and_template(self) -> tuple[str, str]:
        """Return (task_regex, template), failing if either is missing.

        Raises:
            ConfigError: If the regex or the template is not configured.
        """
        if not self.task_regex:
            raise ConfigError("No task regex given on the command line or in the config file.")
        if not self.template:
            raise ConfigError("No message template given on the command line or in the config file.")
        return self.task_regex, self.template


def get_config_file(repo_root: Path) -> Path:
    """Return path to the repository config file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .task-id-hook/config.yaml.
    """
    return repo_root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config_file(repo_root: Path) -> dict:
    """Load the raw repository configuration.

    Unlike editor settings the file is optional and never created here.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary, empty if the file does not exist.

    Raises:
        ConfigFileError: If the file is not valid YAML or not a mapping.
    """
    config_file = get_config_file(repo_root)
    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigFileError(f"Could not read {config_file}: {e}")

    if not isinstance(config, dict):
        raise ConfigFileError(f"{config_file} must contain a mapping of options.")
    return config


def build_config(file_values: dict, overrides: dict[str, Any]) -> HookConfig:
    """Merge file values with command line overrides into a HookConfig.

    Args:
        file_values: Values loaded from the config file.
        overrides: Values given on the command line; None entries are ignored.

    Returns:
        The validated HookConfig.

    Raises:
        ConfigFileError: If the merged values are invalid.
    """
    merged = dict(file_values)
    merged.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return HookConfig(**merged)
    except ValidationError as e:
        raise ConfigFileError(f"Invalid hook configuration:\n{e}")


def load_hook_config(repo_root: Optional[Path], **overrides: Any) -> HookConfig:
    """Load the hook configuration for a repository.

    Args:
        repo_root: Repository root, or None to skip the config file.
        **overrides: Command line values taking precedence over the file.

    Returns:
        The validated HookConfig.
    """
    file_values = load_config_file(repo_root) if repo_root is not None else {}
    return build_config(file_values, overrides)
