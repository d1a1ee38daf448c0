"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from task_id_hook.config import HookConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def task_regex():
    """Task regex used by most tests."""
    return r"project_name/(?P<task_template>TASK-[0-9]{3})-.*"


@pytest.fixture
def default_template():
    """Template as it is written in a hook config (escaped newlines)."""
    return "{subject}\\n\\n{body}\\n\\n{task_id}"


@pytest.fixture
def hook_config(task_regex, default_template):
    """HookConfig with default options."""
    return HookConfig(task_regex=task_regex, template=default_template)


@pytest.fixture
def message_file(temp_dir):
    """Commit message file as git leaves it for the commit-msg hook."""
    path = temp_dir / "COMMIT_EDITMSG"
    path.write_text(
        "Commit subject\n\nCommit body\n"
        "# Please enter the commit message for your changes. Lines starting\n"
        "# with '#' will be ignored, and an empty message aborts the commit.\n"
    )
    return path
