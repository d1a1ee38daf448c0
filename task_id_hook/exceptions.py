"""Exception classes for task_id_hook.

Contains:
- ConfigError: Base exception for invalid hook configuration
- InvalidPatternError: The task regex does not compile
- MissingCaptureGroupError: The task regex has no `task_template` group
- DuplicateCaptureGroupError: The task regex names `task_template` twice
- ConfigFileError: The repository config file is unreadable or invalid
- MessageFileError: The commit message file cannot be decoded
"""


class ConfigError(Exception):
    """Base exception for invalid hook configuration."""

    pass


class InvalidPatternError(ConfigError):
    """Raised when the task regex is not a valid regular expression."""

    pass


class MissingCaptureGroupError(ConfigError):
    """Raised when the task regex lacks the `task_template` named group."""

    pass


class DuplicateCaptureGroupError(MissingCaptureGroupError):
    """Raised when the task regex defines the `task_template` group more than once."""

    pass


class ConfigFileError(ConfigError):
    """Raised when the repository config file cannot be loaded."""

    pass


class MessageFileError(Exception):
    """Raised when the commit message file is not valid UTF-8."""

    pass
