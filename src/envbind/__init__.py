"""envbind - bind ``.env`` files and environment variables onto typed records."""

from .binding import (
    StructBinder,
    ValueProvider,
    bind_struct,
    environ_provider,
    mapping_provider,
)
from .domain import (
    BindError,
    CoercionError,
    Complex64,
    Complex128,
    EnvBindError,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    InvalidTargetError,
    MissingRequiredError,
    ProviderError,
    SourceError,
    SourceFormatError,
    SourceIOError,
    TypeKind,
    TypeTag,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
    UnknownModifierError,
    UnsupportedTypeError,
    env,
    env_field,
)
from .sources import (
    load_and_bind_file,
    load_and_bind_stream,
    load_env_file,
    load_env_stream,
    parse_env_lines,
)

__all__ = [
    # Binding
    "StructBinder",
    "bind_struct",
    "ValueProvider",
    "environ_provider",
    "mapping_provider",
    # Templates
    "env",
    "env_field",
    "TypeKind",
    "TypeTag",
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
    # Sources
    "parse_env_lines",
    "load_env_stream",
    "load_env_file",
    "load_and_bind_stream",
    "load_and_bind_file",
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
