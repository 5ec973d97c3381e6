"""CLI state container."""

import typing as t

from ..binding.binder import StructBinder
from ..config.settings import Settings

BinderFactory = t.Callable[..., StructBinder]


class CLIState:
    """Application state container for CLI commands.

    Holds Settings and the factory commands use to build a binder, so
    tests can inject a mocked one.
    """

    def __init__(
        self,
        settings: Settings,
        binder_factory: BinderFactory | None = None,
    ):
        self.settings = settings
        self._binder_factory = binder_factory or StructBinder

    def create_binder(self, **kwargs: t.Any) -> StructBinder:
        return self._binder_factory(**kwargs)
