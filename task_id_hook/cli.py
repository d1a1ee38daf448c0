"""CLI entry point for task-id-hook.

Usage as a commit-msg hook:
    task-id-hook TASK_REGEX TEMPLATE COMMIT_MSG_FILE
    task-id-hook COMMIT_MSG_FILE   # regex and template from .task-id-hook/config.yaml
"""

from pathlib import Path
from typing import Optional

import typer

from task_id_hook import __version__
from task_id_hook.config import NoMatchPolicy, load_hook_config
from task_id_hook.exceptions import ConfigError, MessageFileError
from task_id_hook.git import GitError, get_repo_root
from task_id_hook.hook import run_hook

app = typer.Typer(
    name="task-id-hook",
    help="Insert the task id from the current branch name into the commit message",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"task-id-hook {__version__}")
        raise typer.Exit()


def _parse_positional(args: list[str]) -> tuple[Optional[str], Optional[str], Path]:
    """Split positional values into (task_regex, template, message_file).

    Raises:
        typer.BadParameter: If the number of values is not 1 or 3.
    """
    if len(args) == 3:
        return args[0], args[1], Path(args[2])
    if len(args) == 1:
        return None, None, Path(args[0])
    raise typer.BadParameter(
        "expected TASK_REGEX TEMPLATE COMMIT_MSG_FILE, or only COMMIT_MSG_FILE "
        "when the regex and template are configured in .task-id-hook/config.yaml",
        param_hint="ARGS",
    )


def _find_repo_root() -> Optional[Path]:
    # Outside a repository there is simply no config file to read
    try:
        return get_repo_root()
    except GitError:
        return None


@app.command()
def hook_command(
    args: list[str] = typer.Argument(
        ...,
        metavar="[TASK_REGEX TEMPLATE] COMMIT_MSG_FILE",
        help="Task regex with a `task_template` group, message template, and commit message file",
        show_default=False,
    ),
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Use this branch name instead of asking git for the current branch",
    ),
    on_no_match: Optional[NoMatchPolicy] = typer.Option(
        None,
        "--on-no-match",
        case_sensitive=False,
        help="What to do when the branch has no task id: skip (default) or render with an empty id",
    ),
    always_insert: bool = typer.Option(
        False,
        "--always-insert",
        help="Insert the task id even if the message already mentions it",
    ),
    keep_comments: bool = typer.Option(
        False,
        "--keep-comments",
        help="Keep git's `#` comment section instead of dropping it",
    ),
    no_collapse: bool = typer.Option(
        False,
        "--no-collapse",
        help="Keep the blank lines left by an empty body",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Report the branch and the extracted task id",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Insert the task id found in the branch name into the commit message file."""
    task_regex, template, message_file = _parse_positional(args)

    try:
        config = load_hook_config(
            _find_repo_root(),
            task_regex=task_regex,
            template=template,
            on_no_match=on_no_match,
            # Flags only override the config file when given
            skip_if_present=False if always_insert else None,
            strip_comments=False if keep_comments else None,
            collapse_blank_lines=False if no_collapse else None,
        )
        result = run_hook(config, message_file, branch=branch)
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        typer.echo("Make sure git is installed, the repo exists and the hook stage is `commit-msg`.", err=True)
        raise typer.Exit(1)
    except (MessageFileError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if verbose:
        typer.echo(f"Branch: {result.branch or '(detached HEAD)'}", err=True)
        if result.task_id:
            typer.echo(f"Task id: {result.task_id}", err=True)
        else:
            typer.echo("Task id: not found in branch name", err=True)
        if result.updated:
            typer.echo(f"Updated {message_file}", err=True)
        else:
            typer.echo("Commit message left unchanged.", err=True)


def main() -> None:
    """Console script entry point."""
    app()
