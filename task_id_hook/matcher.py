"""Task id extraction from branch names.

Contains:
- compile_task_regex: Compile and validate the configured task regex
- extract_task_id: Extract the task id from a branch name
"""

import re
from typing import Optional

from task_id_hook.exceptions import (
    DuplicateCaptureGroupError,
    InvalidPatternError,
    MissingCaptureGroupError,
)

TASK_GROUP_NAME = "task_template"

# `(?<name>...)` named groups, as accepted by the Rust and PCRE engines.
# Lookbehinds (`(?<=`, `(?<!`) and escaped parentheses do not match.
_ANGLE_NAMED_GROUP = re.compile(r"(?<!\\)\(\?<(?=[A-Za-z_])")


def normalize_named_groups(pattern: str) -> str:
    """Rewrite `(?<name>...)` groups to Python's `(?P<name>...)` syntax.

    Args:
        pattern: The raw regex pattern.

    Returns:
        The pattern with every angle-bracket named group rewritten.
    """
    return _ANGLE_NAMED_GROUP.sub("(?P<", pattern)


def compile_task_regex(pattern: str) -> re.Pattern[str]:
    """Compile the task regex and check it defines the task group.

    Args:
        pattern: Regex with a `task_template` named group, e.g.
            ``feature/(?P<task_template>ABC-\\d+).*``.

    Returns:
        The compiled pattern.

    Raises:
        InvalidPatternError: If the pattern does not compile.
        MissingCaptureGroupError: If the pattern has no `task_template` group.
        DuplicateCaptureGroupError: If `task_template` is defined twice.
    """
    try:
        regex = re.compile(normalize_named_groups(pattern))
    except re.error as e:
        if e.msg.startswith("redefinition of group name") and repr(TASK_GROUP_NAME) in e.msg:
            raise DuplicateCaptureGroupError(
                f"Task regex defines the `{TASK_GROUP_NAME}` group more than once: {pattern}"
            )
        raise InvalidPatternError(f"Make sure task regex is correct: {pattern} ({e})")

    if TASK_GROUP_NAME not in regex.groupindex:
        raise MissingCaptureGroupError(
            f"Make sure you included capturing group with name `{TASK_GROUP_NAME}`: {pattern}"
        )
    return regex


def extract_task_id(regex: re.Pattern[str], branch: str) -> Optional[str]:
    """Extract the task id from a branch name.

    The pattern is searched once in the branch name, so it does not have to
    cover the whole name.

    Args:
        regex: Pattern returned by compile_task_regex.
        branch: The branch name.

    Returns:
        The text captured by the `task_template` group, or None if the
        pattern does not match or the group captured nothing.
    """
    match = regex.search(branch)
    if not match:
        return None
    task_id = match.group(TASK_GROUP_NAME)
    if not task_id:
        return None
    return task_id
