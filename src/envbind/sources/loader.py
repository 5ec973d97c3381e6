"""Loader for ``.env``-style ``KEY=VALUE`` sources.

Lines are trimmed; blank lines and lines starting with ``#`` are skipped.
Every other line must contain ``=`` and is split on the first one. The
whole source is parsed before anything is written, so a malformed line
leaves the store untouched. A failed write rolls back the keys already
written.
"""

import os
import typing as t
from pathlib import Path

from ..binding.binder import RecordT, StructBinder
from ..binding.providers import mapping_provider
from ..domain.exceptions import SourceFormatError, SourceIOError
from ..infrastructure.logging import get_logger


def parse_env_lines(lines: t.Iterable[str]) -> dict[str, str]:
    """Parse source lines into an ordered key/value mapping.

    Later definitions of a key replace earlier ones.

    Raises:
        SourceFormatError: If a non-comment, non-blank line has no ``=``,
            has an empty key, or contains a NUL character.

    Examples:
        >>> parse_env_lines(["# db", "", "  HOST = localhost  ", "URL=a=b"])
        {'HOST': 'localhost', 'URL': 'a=b'}
    """
    values: dict[str, str] = {}
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        key, separator, value = line.partition("=")
        key = key.strip()
        if not separator or not key or "\0" in line:
            raise SourceFormatError(line=line, line_number=line_number)
        values[key] = value.strip()
    return values


def _write_all(
    values: dict[str, str],
    environ: t.MutableMapping[str, str] | None,
    path: Path | None = None,
) -> None:
    """Write every pair into the store, or none of them."""
    target = os.environ if environ is None else environ
    previous = {key: target.get(key) for key in values}
    written: list[str] = []
    try:
        for key, value in values.items():
            target[key] = value
            written.append(key)
    except (OSError, ValueError) as exc:
        for key in reversed(written):
            if previous[key] is None:
                del target[key]
            else:
                target[key] = previous[key]
        raise SourceIOError(cause=exc, path=path) from exc


def load_env_stream(
    stream: t.TextIO,
    environ: t.MutableMapping[str, str] | None = None,
) -> dict[str, str]:
    """Parse ``stream`` and write every pair into ``environ``.

    Args:
        stream: Text stream yielding source lines
        environ: Target store, defaults to ``os.environ``; existing keys
            are overwritten

    Returns:
        The parsed key/value pairs

    Raises:
        SourceFormatError: On a malformed line (nothing is written).
        SourceIOError: If the stream cannot be read or decoded, or a pair
            cannot be written (earlier writes are rolled back).
    """
    try:
        values = parse_env_lines(stream)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceIOError(cause=exc) from exc

    _write_all(values, environ)
    get_logger(__name__).debug("Loaded env source", keys=len(values))
    return values


def load_env_file(
    path: str | Path,
    environ: t.MutableMapping[str, str] | None = None,
) -> dict[str, str]:
    """Load a ``.env`` file into ``environ`` (``os.environ`` by default).

    Raises:
        SourceFormatError: On a malformed line (nothing is written).
        SourceIOError: If the file cannot be opened, read or decoded, or a
            pair cannot be written (earlier writes are rolled back).
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as stream:
            values = parse_env_lines(stream)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceIOError(cause=exc, path=path) from exc

    _write_all(values, environ, path)
    get_logger(__name__).debug("Loaded env file", path=str(path), keys=len(values))
    return values


def _bind_from(
    record: RecordT,
    environ: t.MutableMapping[str, str] | None,
) -> RecordT:
    source = os.environ if environ is None else environ
    return StructBinder().bind(record, mapping_provider(source))


def load_and_bind_stream(
    stream: t.TextIO,
    record: RecordT,
    *,
    environ: t.MutableMapping[str, str] | None = None,
) -> RecordT:
    """Load ``stream`` into ``environ`` then bind ``record`` from it."""
    load_env_stream(stream, environ)
    return _bind_from(record, environ)


def load_and_bind_file(
    path: str | Path,
    record: RecordT,
    *,
    environ: t.MutableMapping[str, str] | None = None,
) -> RecordT:
    """Load the file at ``path`` into ``environ`` then bind ``record`` from it."""
    load_env_file(path, environ)
    return _bind_from(record, environ)
