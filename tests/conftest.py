"""Pytest configuration and fixtures for envbind tests."""

import loguru
import pytest
from typer.testing import CliRunner

from envbind.app import create_app
from envbind.cli.app import create_cli_app
from envbind.config.settings import Environment, LogLevel, Settings
from envbind.infrastructure.logging import reset_logging
from tests.fixtures.templates import SimpleConfig


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def simple_config():
    """Provide a fresh SimpleConfig record."""
    return SimpleConfig()


@pytest.fixture
def env_file(tmp_path):
    """Provide a helper writing a source file under tmp_path."""

    def _write(content: str, name: str = ".env"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
