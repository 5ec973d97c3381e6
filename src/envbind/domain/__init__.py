"""Domain layer - type tags, field declarations and exceptions."""

from .declarations import (
    EnvTag,
    FieldDeclaration,
    declarations_for,
    env,
    env_field,
    parse_env_tag,
)
from .exceptions import (
    BindError,
    CoercionError,
    EnvBindError,
    InvalidTargetError,
    MissingRequiredError,
    ProviderError,
    SourceError,
    SourceFormatError,
    SourceIOError,
    UnknownModifierError,
    UnsupportedTypeError,
)
from .type_tags import (
    Complex64,
    Complex128,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    TypeKind,
    TypeTag,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    resolve_type_tag,
)

__all__ = [
    # Declarations
    "EnvTag",
    "FieldDeclaration",
    "declarations_for",
    "env",
    "env_field",
    "parse_env_tag",
    # Type tags
    "TypeKind",
    "TypeTag",
    "resolve_type_tag",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "Float32",
    "Float64",
    "Complex64",
    "Complex128",
    # Exceptions
    "EnvBindError",
    "BindError",
    "InvalidTargetError",
    "MissingRequiredError",
    "ProviderError",
    "CoercionError",
    "UnsupportedTypeError",
    "UnknownModifierError",
    "SourceError",
    "SourceFormatError",
    "SourceIOError",
]
