"""Structure binder: populates record fields from a value provider."""

import typing as t

from ..domain.declarations import FieldDeclaration, declarations_for
from ..domain.exceptions import (
    CoercionError,
    MissingRequiredError,
    ProviderError,
    UnknownModifierError,
    UnsupportedTypeError,
)
from ..infrastructure.logging import get_logger
from .coercion import coerce
from .providers import ValueProvider

if t.TYPE_CHECKING:
    from loguru import Logger

RecordT = t.TypeVar("RecordT")


class StructBinder:
    """Walks a record's field declarations and writes coerced values.

    Binding is fail-fast: the first error is raised and fields processed
    before it stay written.
    """

    def __init__(
        self,
        *,
        strict_modifiers: bool = False,
        logger: t.Optional["Logger"] = None,
    ) -> None:
        """Initialize the binder.

        Args:
            strict_modifiers: Reject annotation modifiers other than
                ``required`` instead of ignoring them
            logger: Logger for debug output, defaults to the module logger
        """
        self._strict_modifiers = strict_modifiers
        self._logger = logger or get_logger(__name__)

    def bind(self, record: RecordT, provider: ValueProvider) -> RecordT:
        """Populate ``record`` in place from ``provider`` and return it.

        Raises:
            InvalidTargetError: If record is not a mutable dataclass or
                pydantic model instance.
            MissingRequiredError: If a required value is absent or empty.
            ProviderError: If the provider fails for a required field.
            UnsupportedTypeError: If a field's type has no coercion rule.
            CoercionError: If a value cannot be coerced to the field type.
            UnknownModifierError: In strict mode, for unknown modifiers.
        """
        declarations = declarations_for(record)
        for declaration in declarations:
            self._bind_field(record, declaration, provider)

        self._logger.debug(
            "Record bound",
            record=type(record).__name__,
            fields=len(declarations),
        )
        return record

    def _bind_field(
        self,
        record: t.Any,
        declaration: FieldDeclaration,
        provider: ValueProvider,
    ) -> None:
        if self._strict_modifiers and declaration.unknown_modifiers:
            raise UnknownModifierError(
                field=declaration.field_name,
                modifier=declaration.unknown_modifiers[0],
            )

        value = self._lookup(declaration, provider)
        if value is None:
            self._logger.debug(
                "No value found, keeping default",
                field=declaration.field_name,
                key=declaration.lookup_key,
            )
            return

        if declaration.declared_type is None:
            raise UnsupportedTypeError(
                field=declaration.field_name,
                kind=declaration.type_name,
            )

        try:
            coerced = coerce(value, declaration.declared_type)
        except (ValueError, OverflowError) as exc:
            raise CoercionError(
                field=declaration.field_name,
                raw_value=value,
                target_type=declaration.type_name,
                cause=exc,
            ) from exc

        setattr(record, declaration.field_name, coerced)
        self._logger.debug(
            "Field bound",
            field=declaration.field_name,
            key=declaration.lookup_key,
            type=declaration.type_name,
        )

    def _lookup(
        self,
        declaration: FieldDeclaration,
        provider: ValueProvider,
    ) -> str | None:
        """Fetch the raw value, applying required-field rules.

        Returns None when the field should be left at its default.
        """
        try:
            value = provider(declaration.lookup_key)
        except Exception as exc:
            if declaration.required:
                raise ProviderError(
                    field=declaration.field_name,
                    key=declaration.lookup_key,
                    cause=exc,
                ) from exc
            self._logger.debug(
                "Provider failed for optional field, skipping",
                field=declaration.field_name,
                key=declaration.lookup_key,
                error=str(exc),
            )
            return None

        if value is None or (value == "" and declaration.required):
            if declaration.required:
                raise MissingRequiredError(
                    field=declaration.field_name,
                    key=declaration.lookup_key,
                )
            return None
        return value


def bind_struct(
    record: RecordT,
    provider: ValueProvider,
    *,
    strict_modifiers: bool = False,
) -> RecordT:
    """Bind ``record`` with a default StructBinder.

    Examples:
        >>> from dataclasses import dataclass
        >>> from envbind.domain import env
        >>> @dataclass
        ... class Config:
        ...     port: int = env("PORT", default=0)
        >>> bind_struct(Config(), {"PORT": "8080"}.get)
        Config(port=8080)
    """
    return StructBinder(strict_modifiers=strict_modifiers).bind(record, provider)
