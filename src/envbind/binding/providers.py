"""Value providers: callables mapping a lookup key to a raw string.

A provider returns None when the key is absent and ``""`` when it is
present but empty. Any exception it raises is treated as a provider
error by the binder.
"""

import os
import typing as t

ValueProvider = t.Callable[[str], str | None]


def mapping_provider(mapping: t.Mapping[str, str]) -> ValueProvider:
    """Provider reading from ``mapping`` at lookup time.

    Later changes to ``mapping`` are visible to the provider.
    """

    def lookup(key: str) -> str | None:
        return mapping.get(key)

    return lookup


def environ_provider() -> ValueProvider:
    """Provider backed by the process environment.

    Not safe against concurrent environment mutation by unrelated code.
    """
    return mapping_provider(os.environ)
