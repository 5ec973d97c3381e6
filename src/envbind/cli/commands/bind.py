"""Bind command implementation."""

import importlib
import os
from pathlib import Path
from typing import Any, Optional

import typer

from ...binding.providers import mapping_provider
from ...domain.declarations import declarations_for
from ...domain.exceptions import EnvBindError
from ...sources.loader import load_env_file
from ..output.display import display_error, display_record
from ..state import CLIState


def resolve_target(target: str) -> Any:
    """Import ``package.module:ClassName`` and instantiate it with no arguments.

    Raises:
        typer.Exit: If the target cannot be imported or instantiated
    """
    module_name, separator, class_name = target.partition(":")
    if not separator or not module_name or not class_name:
        typer.secho(
            f"✗ Invalid target: {target} (expected 'module:ClassName')",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        module = importlib.import_module(module_name)
        template = getattr(module, class_name)
        return template()
    except (ImportError, AttributeError, TypeError) as e:
        typer.secho(f"✗ Cannot load target {target}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def bind(
    ctx: typer.Context,
    target: str = typer.Argument(..., help="Record template as module:ClassName"),
    path: Optional[Path] = typer.Argument(
        None, help="Source file to load (defaults to --env-file)"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Reject unknown annotation modifiers"
    ),
    show_values: bool = typer.Option(
        False, "--show-values", help="Print values instead of masking them"
    ),
) -> None:
    """Load a .env file over the current environment and bind a record.

    Examples:
        envbind bind myapp.config:Config
        envbind bind myapp.config:Config deploy/.env --strict
    """
    state: CLIState = ctx.obj
    source = path or state.settings.env_file
    record = resolve_target(target)

    environ = dict(os.environ)
    binder = state.create_binder(strict_modifiers=strict)
    try:
        load_env_file(source, environ)
        binder.bind(record, mapping_provider(environ))
        declarations = declarations_for(record)
    except EnvBindError as e:
        display_error(e)
        raise typer.Exit(code=1)

    display_record(record, declarations, show_values)
