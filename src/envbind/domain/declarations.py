"""Field declarations derived from record templates.

A template is a dataclass or a pydantic model whose fields carry an
``env`` annotation of the form ``"<KEY>[,modifier...]"``::

    @dataclass
    class Config:
        port: Uint16 = env("PORT", default=8080)
        debug: bool = env("DEBUG", required=True, default=False)

    class ModelConfig(BaseModel):
        port: Uint16 = env_field("PORT", 8080)
"""

import dataclasses
import typing as t

from pydantic import BaseModel, Field

from .exceptions import InvalidTargetError
from .type_tags import TypeTag, describe_annotation, resolve_type_tag

ENV_TAG: t.Final = "env"
REQUIRED_MODIFIER: t.Final = "required"
KNOWN_MODIFIERS: t.Final = frozenset({REQUIRED_MODIFIER})


@dataclasses.dataclass(frozen=True)
class EnvTag:
    """Parsed form of an ``env`` annotation."""

    key: str
    modifiers: tuple[str, ...] = ()

    @property
    def required(self) -> bool:
        return REQUIRED_MODIFIER in self.modifiers


@dataclasses.dataclass(frozen=True)
class FieldDeclaration:
    """Binding rule for one template field.

    ``declared_type`` is None when the field's annotation has no coercion
    rule; ``annotation`` is kept so the error can name it.
    """

    field_name: str
    lookup_key: str
    required: bool
    declared_type: TypeTag | None
    annotation: t.Any = None
    modifiers: tuple[str, ...] = ()

    @property
    def type_name(self) -> str:
        if self.declared_type is not None:
            return str(self.declared_type)
        return describe_annotation(self.annotation)

    @property
    def unknown_modifiers(self) -> tuple[str, ...]:
        return tuple(m for m in self.modifiers if m not in KNOWN_MODIFIERS)


def parse_env_tag(tag: str) -> EnvTag:
    """Split ``"KEY,mod,..."`` into key and modifiers.

    Segments are trimmed and empty modifiers dropped.

    Examples:
        >>> parse_env_tag("PORT,required")
        EnvTag(key='PORT', modifiers=('required',))
        >>> parse_env_tag("HOST").required
        False
    """
    key, *modifiers = (part.strip() for part in tag.split(","))
    return EnvTag(key=key, modifiers=tuple(m for m in modifiers if m))


def _format_tag(key: str, required: bool) -> str:
    return f"{key},{REQUIRED_MODIFIER}" if required else key


def env(
    key: str,
    *,
    required: bool = False,
    default: t.Any = dataclasses.MISSING,
    default_factory: t.Any = dataclasses.MISSING,
    **field_kwargs: t.Any,
) -> t.Any:
    """Declare a dataclass field bound to lookup key ``key``.

    Thin wrapper over ``dataclasses.field`` that writes the ``env``
    metadata entry. Extra keyword arguments go to ``dataclasses.field``.
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[ENV_TAG] = _format_tag(key, required)
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata=metadata,
        **field_kwargs,
    )


def env_field(
    key: str,
    default: t.Any = ...,
    *,
    required: bool = False,
    **field_kwargs: t.Any,
) -> t.Any:
    """Declare a pydantic model field bound to lookup key ``key``."""
    extra = dict(field_kwargs.pop("json_schema_extra", None) or {})
    extra[ENV_TAG] = _format_tag(key, required)
    return Field(default, json_schema_extra=extra, **field_kwargs)


def _is_frozen_dataclass(record: t.Any) -> bool:
    params = getattr(type(record), "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


def check_target(record: t.Any) -> None:
    """Raise InvalidTargetError unless ``record`` is a mutable record instance."""
    if isinstance(record, type):
        raise InvalidTargetError(record, "expected an instance, not a class")

    if dataclasses.is_dataclass(record):
        if _is_frozen_dataclass(record):
            raise InvalidTargetError(record, "dataclass is frozen")
        return

    if isinstance(record, BaseModel):
        if type(record).model_config.get("frozen"):
            raise InvalidTargetError(record, "model is frozen")
        return

    raise InvalidTargetError(record, "not a dataclass or pydantic model")


def _dataclass_fields(record: t.Any) -> t.Iterator[tuple[str, t.Any, t.Any]]:
    hints = t.get_type_hints(type(record), include_extras=True)
    for field in dataclasses.fields(record):
        annotation = hints.get(field.name, field.type)
        yield field.name, field.metadata.get(ENV_TAG), annotation


def _model_fields(record: BaseModel) -> t.Iterator[tuple[str, t.Any, t.Any]]:
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra
        tag = extra.get(ENV_TAG) if isinstance(extra, dict) else None
        # pydantic moves Annotated extras into FieldInfo.metadata
        tags = [m for m in info.metadata if isinstance(m, TypeTag)]
        annotation = t.Annotated[info.annotation, tags[0]] if tags else info.annotation
        yield name, tag, annotation


def declarations_for(record: t.Any) -> list[FieldDeclaration]:
    """Derive declarations for the annotated public fields of ``record``.

    Declarations come back in template declaration order. Fields without an
    ``env`` annotation, or with an empty key, are skipped. Nothing is
    cached; declarations are derived fresh on every call.
    """
    check_target(record)
    if isinstance(record, BaseModel):
        fields = _model_fields(record)
    else:
        fields = _dataclass_fields(record)

    declarations = []
    for name, raw_tag, annotation in fields:
        if name.startswith("_") or not raw_tag:
            continue
        tag = parse_env_tag(str(raw_tag))
        if not tag.key:
            continue
        declarations.append(
            FieldDeclaration(
                field_name=name,
                lookup_key=tag.key,
                required=tag.required,
                declared_type=resolve_type_tag(annotation),
                annotation=annotation,
                modifiers=tag.modifiers,
            )
        )
    return declarations
