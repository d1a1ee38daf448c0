"""Commit message hook pipeline.

Contains:
- provide_task_id: Rewrite a commit message with a task id
- run_hook: Apply provide_task_id to a commit message file
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from task_id_hook.config import HookConfig, NoMatchPolicy
from task_id_hook.exceptions import MessageFileError
from task_id_hook.formatter import (
    collapse_blank_lines,
    render_commit_message,
    split_commit_message,
    strip_comment_section,
)
from task_id_hook.git import get_branch
from task_id_hook.matcher import compile_task_regex, extract_task_id


@dataclass
class HookResult:
    """Outcome of a hook run."""

    branch: str
    task_id: Optional[str]
    updated: bool
    message: str


def mentions_task_id(text: str, task_id: str) -> bool:
    """Check whether text mentions the task id as a whole token.

    `TASK-1` is not mentioned by `TASK-12` or `XTASK-1`.
    """
    return re.search(rf"(?<!\w){re.escape(task_id)}(?!\w)", text) is not None


def provide_task_id(
    message: str,
    task_id: Optional[str],
    template: str,
    config: HookConfig,
) -> Optional[str]:
    """Rewrite a commit message with the task id found in the branch name.

    Args:
        message: Raw commit message text.
        task_id: Task id extracted from the branch, or None if there is none.
        template: Message template.
        config: Hook options.

    Returns:
        The new commit message, or None if the message should stay as is
        (no task id in the branch, or the message already mentions it).
    """
    if config.strip_comments:
        message = strip_comment_section(message)
    subject, body = split_commit_message(message.strip())
    if not subject and not body:
        # Leave empty messages alone so git still aborts the commit
        return None

    if task_id is None:
        # Branches like `main` or `develop` carry no task id
        if config.on_no_match == NoMatchPolicy.SKIP:
            return None
        task_id = ""

    if task_id and config.skip_if_present and (
        mentions_task_id(subject, task_id) or mentions_task_id(body, task_id)
    ):
        return None

    updated = render_commit_message(template, subject, body, task_id)
    if config.collapse_blank_lines:
        updated = collapse_blank_lines(updated)
    return updated


def read_commit_message(message_file: Path) -> str:
    """Read the commit message file; a missing file reads as empty.

    Raises:
        MessageFileError: If the file is not valid UTF-8.
    """
    try:
        with open(message_file, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return ""
    except UnicodeDecodeError as e:
        raise MessageFileError(f"Commit message file {message_file} is not valid UTF-8: {e}")


def write_commit_message(message_file: Path, message: str) -> None:
    """Overwrite the commit message file."""
    with open(message_file, "w", encoding="utf-8") as f:
        f.write(message)


def run_hook(config: HookConfig, message_file: Path, branch: Optional[str] = None) -> HookResult:
    """Insert the branch task id into a commit message file.

    The task regex is compiled before anything else is read, so bad
    configuration fails the hook without touching the file.

    Args:
        config: Hook options, with task_regex and template set.
        message_file: Path of the commit message file (COMMIT_EDITMSG).
        branch: Branch name; detected with git when None.

    Returns:
        HookResult describing what was done.

    Raises:
        ConfigError: If the regex or template is missing or invalid.
        GitError: If the branch cannot be determined.
        MessageFileError: If the message file is not valid UTF-8.
        OSError: If the message file cannot be read or written.
    """
    task_regex, template = config.require_pattern_and_template()
    regex = compile_task_regex(task_regex)

    if branch is None:
        branch = get_branch()

    task_id = extract_task_id(regex, branch)
    original = read_commit_message(message_file)
    updated = provide_task_id(original, task_id, template, config)
    if updated is None:
        return HookResult(branch=branch, task_id=task_id, updated=False, message=original)

    write_commit_message(message_file, updated)
    return HookResult(
        branch=branch,
        task_id=task_id,
        updated=True,
        message=updated,
    )
