"""Shared test fixtures for the liblog test suite."""

import io

import pytest

from liblog import provider as _provider_mod
from liblog.provider import create_logger_provider


# ---------------------------------------------------------------------------
# Recording doubles
# ---------------------------------------------------------------------------
class RecordingConsole:
    """Console-like object that records (method, args) for every call."""

    def __init__(self):
        self.calls = []

    def error(self, *args):
        self.calls.append(('error', args))

    def warn(self, *args):
        self.calls.append(('warn', args))

    def info(self, *args):
        self.calls.append(('info', args))

    def debug(self, *args):
        self.calls.append(('debug', args))

    def methods(self):
        return [method for method, _ in self.calls]


class RecordingExternal:
    """External logger recording (channel, meta, message, args)."""

    def __init__(self, label=None):
        self.label = label
        self.calls = []

    def error(self, meta, message, args=None):
        self.calls.append(('error', meta, message, args))

    def warn(self, meta, message, args=None):
        self.calls.append(('warn', meta, message, args))

    def debug(self, meta, message, args=None):
        self.calls.append(('debug', meta, message, args))

    def trace(self, meta, message, args=None):
        self.calls.append(('trace', meta, message, args))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def console():
    """A recording console."""
    return RecordingConsole()


@pytest.fixture
def buf():
    """A StringIO buffer for capturing StreamConsole output."""
    return io.StringIO()


@pytest.fixture
def provider(console):
    """A fresh provider writing plain (unstyled) output to a recording console."""
    p = create_logger_provider(console)
    p.configure_console({'type': 'console', 'style': False})
    return p


@pytest.fixture(autouse=True)
def _reset_singleton():
    """Reset the module-level provider between tests."""
    old = _provider_mod._provider
    _provider_mod._provider = None
    yield
    _provider_mod._provider = old
