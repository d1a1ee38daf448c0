"""Running git for the hook.

The hook only asks git two things: where the repository root is (to find
.task-id-hook/config.yaml) and which branch is checked out.

Contains:
- _run_git_command: Run a git query and return its stripped output
- get_repo_root: Locate the repository holding the hook config
"""

import subprocess
from pathlib import Path

from task_id_hook.git.exceptions import GitError


def _run_git_command(args: list[str]) -> str:
    """Run a read-only git query and return its output.

    Branch names are decoded as UTF-8 text; anything else is reported as a
    GitError so the hook can abort the commit with a readable message.

    Args:
        args: Arguments after `git`, e.g. ["branch", "--show-current"].

    Returns:
        The stdout of git without surrounding whitespace.

    Raises:
        GitError: If git fails, is not installed, or prints non UTF-8 output.
    """
    command = " ".join(["git"] + args)
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: {command}\n{(e.stderr or '').strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    except UnicodeDecodeError:
        raise GitError(f"Got non UTF-8 output from: {command}")
    return result.stdout.strip()


def get_repo_root() -> Path:
    """Return the top-level directory of the repository being committed to.

    Raises:
        GitError: If the hook does not run inside a git repository.
    """
    try:
        return Path(_run_git_command(["rev-parse", "--show-toplevel"]))
    except GitError:
        raise GitError("Not in a git repository. The hook must run from within a git repo.")
