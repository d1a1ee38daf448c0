"""Current branch lookup."""

from task_id_hook.git.runner import _run_git_command


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or an empty string in detached HEAD state.

    Raises:
        GitError: If git is missing or the command fails.
    """
    return _run_git_command(["branch", "--show-current"])
