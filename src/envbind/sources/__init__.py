"""Source loading - ``.env`` parsing into a lookup store."""

from .loader import (
    load_and_bind_file,
    load_and_bind_stream,
    load_env_file,
    load_env_stream,
    parse_env_lines,
)

__all__ = [
    "parse_env_lines",
    "load_env_stream",
    "load_env_file",
    "load_and_bind_stream",
    "load_and_bind_file",
]
