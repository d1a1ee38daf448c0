"""Commit message splitting and template rendering."""

import re

ESCAPED_NEWLINE = "\\n"

PLACEHOLDERS = ("subject", "body", "task_id")

_PLACEHOLDER_RE = re.compile(r"\{(" + "|".join(PLACEHOLDERS) + r")\}")


def unescape_template(template: str) -> str:
    """Turn escaped newlines (backslash + n) into real newlines."""
    return template.replace(ESCAPED_NEWLINE, "\n")


def strip_comment_section(message: str) -> str:
    """Drop the comment section git appends to the commit message file.

    The first line starting with `#` starts the
    comment section; it and everything after it are removed.

    Args:
        message: Raw content of the commit message file.

    Returns:
        The message without its comment section.
    """
    if message.startswith("#"):
        return ""
    index = message.find("\n#")
    if index == -1:
        return message
    return message[:index]


def split_commit_message(message: str) -> tuple[str, str]:
    """Split a commit message into subject and body.

    Args:
        message: The commit message.

    Returns:
        Tuple of (subject, body). The subject is the first line; the body is
        everything after the first blank line, kept verbatim, or an empty
        string if the message has no blank line.

    Example:
        >>> split_commit_message("Fix bug\\n\\nDetails here")
        ('Fix bug', 'Details here')
    """
    subject = message.partition("\n")[0]
    _, _, body = message.partition("\n\n")
    return subject, body


def render_commit_message(template: str, subject: str, body: str, task_id: str) -> str:
    """Render the final commit message from a template.

    Every `{subject}`, `{body}` and `{task_id}` occurrence is replaced in a
    single pass; inserted values are never scanned for placeholders again.
    Escaped newlines in the template become real newlines. Anything else,
    including unknown `{names}`, is kept verbatim.

    Args:
        template: Message template.
        subject: Commit subject line.
        body: Commit body, possibly empty.
        task_id: Task id to insert, possibly empty.

    Returns:
        The rendered commit message.
    """
    values = {"subject": subject, "body": body, "task_id": task_id}
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], unescape_template(template))


def collapse_blank_lines(message: str) -> str:
    """Collapse the double blank line left behind by an empty `{body}`."""
    return message.replace("\n\n\n\n", "\n\n")
