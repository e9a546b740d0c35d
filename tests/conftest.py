from datetime import date

import pytest

from todo_txt.config import get_settings
from todo_txt.store import TodoStore

TODAY = date(2024, 3, 9)


@pytest.fixture
def store(tmp_path):
    return TodoStore(tmp_path / "todo.txt", tmp_path / "done.txt", today=lambda: TODAY)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for var in ("TODO_TODO_FILE", "TODO_DONE_FILE", "TODO_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()
