"""CLI application factory."""

from pathlib import Path
from typing import Optional

import typer

from ..config.settings import LogLevel, Settings, build_settings
from ..infrastructure.logging import setup_logging
from .commands import bind, parse
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None,
    state: CLIState | None = None,
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional fully built CLIState, takes precedence over settings

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="envbind",
        help="envbind - Inspect .env files and bind them onto typed records",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        env_file: Optional[Path] = typer.Option(
            None,
            "--env-file",
            "-e",
            help="Default source file for commands given no path",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            resolved_state = state
        elif settings is not None:
            resolved_state = CLIState(settings)
        else:
            resolved_state = CLIState(
                build_settings(
                    env_file=env_file,
                    log_level=LogLevel.DEBUG if verbose else None,
                )
            )

        setup_logging(resolved_state.settings)
        ctx.obj = resolved_state

    app.command()(parse)
    app.command()(bind)
    return app
