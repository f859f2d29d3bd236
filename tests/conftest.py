import logging
from typing import Generator

import pytest

from branch_updater.logging import get_logger
from branch_updater.testing.conftest import (  # noqa: F401
    action_context,
    eligible_snapshot,
    mock_client,
    mock_client_with_candidates,
    renovate_snapshot,
)


@pytest.fixture(autouse=True)
def restore_loggers() -> Generator[None, None, None]:
    """Undo configure_logging() calls made by a test."""
    loggers = [get_logger(), get_logger("http")]
    saved = [(lg, list(lg.handlers), lg.level) for lg in loggers]
    yield
    for lg, handlers, level in saved:
        lg.handlers = handlers
        lg.setLevel(level)


@pytest.fixture
def info_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.INFO, logger="branch_updater")
    return caplog
