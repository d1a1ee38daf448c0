"""Git helpers for task_id_hook.

This package provides:
- exceptions: GitError
- runner: _run_git_command, get_repo_root
- branch: get_branch
"""

from task_id_hook.git.exceptions import GitError
from task_id_hook.git.runner import (
    _run_git_command,
    get_repo_root,
)
from task_id_hook.git.branch import get_branch


__all__ = [
    "GitError",
    "_run_git_command",
    "get_repo_root",
    "get_branch",
]
