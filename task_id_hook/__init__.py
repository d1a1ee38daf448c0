"""Insert the task id found in the branch name into commit messages."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("task-id-hook")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
