"""Runtime settings for the envbind CLI and logging."""

import enum
import typing as t
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Environment(enum.StrEnum):
    """Runtime environment for the application.

    Kept small and explicit to support simple environment-driven behaviour
    such as the log format.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(enum.StrEnum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseModel):
    """Settings container used to bootstrap the app.

    The binder itself takes no settings; these only shape the CLI and
    logging.
    """

    model_config = ConfigDict(frozen=True)

    environment: Environment = Field(
        default=Environment.PRODUCTION,
        description="Runtime environment, selects the log format",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Minimum level for emitted log records",
    )
    env_file: Path = Field(
        default=Path(".env"),
        description="Source file used when a command is given no path",
    )


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings from defaults, applying only non-None overrides.

    CLI options default to None so unset flags fall through to the
    Settings defaults.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)
