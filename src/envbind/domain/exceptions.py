"""Custom exceptions for envbind."""

import typing as t


class EnvBindError(Exception):
    """Base exception for envbind errors."""

    pass


class BindError(EnvBindError):
    """Base exception for structure binding errors."""

    pass


class InvalidTargetError(BindError):
    """Raised when the bind target is not a mutable structured record.

    Classes, scalars, collections and frozen records are all rejected
    before any field is looked up.
    """

    def __init__(self, target: t.Any, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(
            f"Bind target must be a mutable dataclass or pydantic model "
            f"instance, got {type(target).__name__}: {reason}"
        )


class MissingRequiredError(BindError):
    """Raised when a required field's value is absent or empty."""

    def __init__(self, *, field: str, key: str) -> None:
        self.field = field
        self.key = key
        super().__init__(
            f"Required environment variable {key} is missing (field {field})"
        )


class ProviderError(BindError):
    """Raised when the value provider fails while resolving a required field."""

    def __init__(self, *, field: str, key: str, cause: BaseException) -> None:
        self.field = field
        self.key = key
        self.cause = cause
        super().__init__(f"Failed to get value for field {field} ({key}): {cause}")


class CoercionError(BindError):
    """Raised when a value cannot be represented as the field's declared type."""

    def __init__(
        self,
        *,
        field: str,
        raw_value: str,
        target_type: str,
        cause: BaseException,
    ) -> None:
        self.field = field
        self.raw_value = raw_value
        self.target_type = target_type
        self.cause = cause
        super().__init__(
            f"Failed to parse {target_type} value for field {field}: {cause}"
        )


class UnsupportedTypeError(BindError):
    """Raised when a field's declared type has no coercion rule."""

    def __init__(self, *, field: str, kind: str) -> None:
        self.field = field
        self.kind = kind
        super().__init__(f"Unsupported field type for field {field}: {kind}")


class UnknownModifierError(BindError):
    """Raised in strict mode when a field annotation has an unknown modifier."""

    def __init__(self, *, field: str, modifier: str) -> None:
        self.field = field
        self.modifier = modifier
        super().__init__(f"Unknown modifier {modifier!r} on field {field}")


class SourceError(EnvBindError):
    """Base exception for source loading errors."""

    pass


class SourceFormatError(SourceError):
    """Raised when a source line is not a comment, blank, or KEY=VALUE."""

    def __init__(self, *, line: str, line_number: int) -> None:
        self.line = line
        self.line_number = line_number
        super().__init__(f"Invalid .env format on line {line_number}: {line}")


class SourceIOError(SourceError):
    """Raised when the source cannot be read or decoded, or its pairs written."""

    def __init__(self, *, cause: BaseException, path: t.Any = None) -> None:
        self.cause = cause
        self.path = path
        where = f" {path}" if path is not None else ""
        super().__init__(f"Failed to load .env source{where}: {cause}")
