"""Structure binding - binder, coercion rules and value providers."""

from .binder import StructBinder, bind_struct
from .coercion import COERCERS, coerce
from .providers import ValueProvider, environ_provider, mapping_provider

__all__ = [
    "StructBinder",
    "bind_struct",
    "COERCERS",
    "coerce",
    "ValueProvider",
    "environ_provider",
    "mapping_provider",
]
