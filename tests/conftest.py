"""Shared fixtures for Taskline tests."""

import logging
import pytest
from datetime import date

from taskline.models import Task
from taskline.session import TaskSession


@pytest.fixture
def make_task():
    """Factory building tasks with sensible defaults."""
    def _make(title, priority=3, due=date(2030, 1, 1), category="Work", subcategory="General", description=""):
        return Task(
            title=title,
            description=description,
            priority=priority,
            due_date=due,
            category=category,
            subcategory=subcategory,
        )
    return _make


@pytest.fixture
def session():
    return TaskSession()


@pytest.fixture(autouse=True)
def reset_taskline_logger():
    """Undo any handlers installed by setup_logging during a test."""
    logger = logging.getLogger("taskline")
    handlers, propagate, level = list(logger.handlers), logger.propagate, logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's real configuration and environment out of the way."""
    monkeypatch.setattr("taskline.config.DEFAULT_CONFIG_PATH", tmp_path / "absent.yml")
    for name in ("TASKLINE_CONFIG", "TASKLINE_LOG_LEVEL", "TASKLINE_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
