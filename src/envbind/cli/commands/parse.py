"""Parse command implementation."""

from pathlib import Path
from typing import Optional

import typer

from ...domain.exceptions import EnvBindError
from ...sources.loader import load_env_file
from ..output.display import display_error, display_values
from ..state import CLIState


def parse(
    ctx: typer.Context,
    path: Optional[Path] = typer.Argument(
        None, help="Source file to parse (defaults to --env-file)"
    ),
    show_values: bool = typer.Option(
        False, "--show-values", help="Print values instead of masking them"
    ),
) -> None:
    """Parse a .env file and list the keys it defines.

    Examples:
        envbind parse
        envbind parse config/prod.env --show-values
    """
    state: CLIState = ctx.obj
    source = path or state.settings.env_file

    try:
        # Parsed into a scratch store so the CLI process env is untouched
        values = load_env_file(source, environ={})
    except EnvBindError as e:
        display_error(e)
        raise typer.Exit(code=1)

    display_values(values, show_values)
