"""Shared fixtures for CLI tests."""

import pytest

from envbind.binding.binder import StructBinder
from envbind.cli.app import create_cli_app
from envbind.cli.state import CLIState
from envbind.config.settings import LogLevel, Settings


@pytest.fixture
def test_settings(tmp_path):
    """Provide test Settings with known values."""
    return Settings(
        log_level=LogLevel.CRITICAL,
        env_file=tmp_path / "default.env",
    )


@pytest.fixture
def test_app(test_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=test_settings)


@pytest.fixture
def mock_binder(mocker):
    """Provide a mocked StructBinder with spec for type safety."""
    return mocker.Mock(spec=StructBinder)


@pytest.fixture
def cli_state_with_mock_binder(test_settings, mock_binder):
    """CLIState whose binder factory returns the mocked binder."""

    def mock_binder_factory(**kwargs):
        return mock_binder

    return CLIState(test_settings, binder_factory=mock_binder_factory)


@pytest.fixture
def app_with_mock_binder(cli_state_with_mock_binder):
    """CLI app with mocked binder factory for testing."""
    return create_cli_app(state=cli_state_with_mock_binder)
