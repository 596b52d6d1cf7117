"""Pytest Configuration and Shared Fixtures

This file is automatically loaded by pytest and makes all fixtures available to all tests.
"""
import io
import pytest

from stock_tracker.cli.dispatch import dispatch
from stock_tracker.config import Configuration

ENV_VAR = "STOCK_TRACKER_CONFIGURATION_DIRECTORY"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests running handlers against JSON stores in a temp directory"
    )
    config.addinivalue_line(
        "markers",
        "unit: Unit tests without handler dispatch (fast)"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the configuration directory override at a fresh temp directory."""
    directory = tmp_path / "stock_tracker"
    monkeypatch.setenv(ENV_VAR, str(directory))
    return directory


@pytest.fixture
def bind(config_dir):
    """Bind a command line (without program name) in the temp directory."""
    def _bind(*tokens):
        return Configuration.bind(["stock-tracker", *tokens])
    return _bind


@pytest.fixture
def stdin(monkeypatch):
    """Replace stdin with the given text."""
    def _feed(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return _feed


@pytest.fixture
def run(bind):
    """Bind and dispatch a command line."""
    def _run(*tokens):
        config = bind(*tokens)
        dispatch(config)
        return config
    return _run


@pytest.fixture
def store(run, config_dir):
    """Initialized, empty stores."""
    run("init")
    return config_dir

