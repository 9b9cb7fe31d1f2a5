"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real config directory, log
directory and task tree.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from taskmd_cli.adapters.markdown import MarkdownTaskRepository, TaskStore
from taskmd_cli.services.config_service import ENV_LANGUAGE, ENV_ROOT
from taskmd_cli.services.task_service import TaskService
from taskmd_cli.utils.logger import ENV_LOG_DIR, ENV_LOG_LEVEL
from taskmd_cli.utils.messages import get_messages


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True, scope="session")
def isolate_logging(tmp_path_factory):
    """Send the application log to a temporary directory for the whole run."""
    import taskmd_cli.utils.logger as logger_mod

    log_dir = tmp_path_factory.mktemp("logs")
    with patch("taskmd_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        logger_mod.setup_logging()
        yield log_dir
    logger_mod._handler.close()


@pytest.fixture()
def task_root(tmp_path):
    """Root of the task tree used by the test."""
    return tmp_path / "tasks"


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, task_root, monkeypatch):
    """Point the config service at tmp_path and the task root at *task_root*.

    Clears the lru_cache so each test gets a fresh service instance.
    """
    from taskmd_cli.services.config_service import get_config_service

    monkeypatch.setenv(ENV_ROOT, str(task_root))
    monkeypatch.setenv(ENV_LANGUAGE, "en")
    monkeypatch.delenv(ENV_LOG_DIR, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    get_config_service.cache_clear()
    with patch(
        "taskmd_cli.services.config_service.user_config_dir",
        return_value=str(tmp_path / "config"),
    ):
        yield
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Task tree helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def store(task_root) -> TaskStore:
    return TaskStore(task_root)


@pytest.fixture()
def repository(store) -> MarkdownTaskRepository:
    return MarkdownTaskRepository(store, messages=get_messages("en"))


@pytest.fixture()
def task_service(repository) -> TaskService:
    """TaskService over the same tree the CLI and HTTP adapter see."""
    return TaskService(repository, get_messages("en"))


@pytest.fixture()
def make_task(task_service):
    """Factory creating tasks through the service."""

    def _make(title: str = "Buy milk", **kwargs):
        return task_service.create_task(title, **kwargs)

    return _make
