"""CLI commands."""

from .bind import bind
from .parse import parse

__all__ = ["bind", "parse"]
