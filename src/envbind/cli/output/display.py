"""Output helpers for CLI commands."""

import typing as t

import typer

from ...domain.declarations import FieldDeclaration

_MASK = "****"


def _shown(value: t.Any, show_values: bool) -> str:
    return str(value) if show_values else _MASK


def display_values(values: t.Mapping[str, str], show_values: bool) -> None:
    """Print parsed source pairs, masking values unless asked not to."""
    if not values:
        typer.secho("No definitions found", fg=typer.colors.YELLOW)
        return
    for key, value in values.items():
        typer.echo(f"{key}={_shown(value, show_values)}")


def display_record(
    record: t.Any,
    declarations: t.Sequence[FieldDeclaration],
    show_values: bool,
) -> None:
    """Print each bound field as ``name (KEY) = value``."""
    typer.secho(f"✓ Bound {type(record).__name__}", fg=typer.colors.GREEN)
    for declaration in declarations:
        value = getattr(record, declaration.field_name)
        typer.echo(
            f"  {declaration.field_name} ({declaration.lookup_key}) = "
            f"{_shown(value, show_values)}"
        )


def display_error(error: Exception) -> None:
    typer.secho(f"✗ {error}", fg=typer.colors.RED, err=True)
