import io

import pytest

import clog.core
from clog import Level, Logger


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep the process-wide logger and CLOG_* variables from leaking between tests."""
    for name in ("CLOG_LEVEL", "CLOG_SHOW_TIME", "CLOG_SHOW_CALLER", "CLOG_SHOW_LEVEL_TEXT",
                 "CLOG_TIME_FORMAT", "CLOG_COLOR", "CLOG_STREAM", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(clog.core, "_default", None)
    yield


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def exits():
    """Exit codes passed to the FATAL hook instead of terminating pytest."""
    return []


@pytest.fixture
def logger(stream, exits):
    return Logger(stream, Level.TRACE, color=False, exit_func=exits.append)
