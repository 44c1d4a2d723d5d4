"""Shared pytest fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def _isolated_logging(monkeypatch):
    """Keep structlog on its defaults so ``capture_logs`` sees every event."""
    monkeypatch.setattr("syncfolder.infrastructure.logging_setup._LOG_CONFIGURED", True)
    yield
    structlog.reset_defaults()


class RecordingLogger:
    """Stand-in diagnostic logger that remembers every event."""

    def __init__(self):
        self.events = []

    def info(self, event, **kw):
        self.events.append((event, kw))


@pytest.fixture
def recording_logger():
    return RecordingLogger()
