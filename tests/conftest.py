import os

os.environ.setdefault("NO_COLOR", "1")

import pytest  # noqa: E402

from todo_cli.store import TodoManager  # noqa: E402


@pytest.fixture
def manager():
    return TodoManager()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for key in (
        "TODO_CLI_PROMPT",
        "TODO_CLI_ALLOW_DUPLICATE_TITLES",
        "TODO_CLI_JSON_INDENT",
        "TODO_CLI_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
