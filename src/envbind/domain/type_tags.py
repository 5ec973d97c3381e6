"""Closed set of coercion targets and their Python annotations."""

import enum
import types
import typing as t
from dataclasses import dataclass


class TypeKind(enum.StrEnum):
    """Kinds of value the binder knows how to coerce."""

    STRING = "string"
    SIGNED_INTEGER = "int"
    UNSIGNED_INTEGER = "uint"
    FLOAT = "float"
    BOOLEAN = "bool"
    COMPLEX = "complex"


# Width 0 marks kinds that have no width
_WIDTHS: t.Final[dict[TypeKind, frozenset[int]]] = {
    TypeKind.STRING: frozenset({0}),
    TypeKind.BOOLEAN: frozenset({0}),
    TypeKind.SIGNED_INTEGER: frozenset({8, 16, 32, 64}),
    TypeKind.UNSIGNED_INTEGER: frozenset({8, 16, 32, 64}),
    TypeKind.FLOAT: frozenset({32, 64}),
    TypeKind.COMPLEX: frozenset({64, 128}),
}


@dataclass(frozen=True)
class TypeTag:
    """A coercion target: a kind plus a bit width where the kind has one.

    Attach a tag to an annotation with ``Annotated[int, TypeTag(...)]`` to
    pick a width other than the builtin default.

    Examples:
        >>> str(TypeTag(TypeKind.SIGNED_INTEGER, 8))
        'int8'
        >>> str(TypeTag(TypeKind.STRING))
        'string'
    """

    kind: TypeKind
    bits: int = 0

    def __post_init__(self) -> None:
        allowed = _WIDTHS[self.kind]
        if self.bits not in allowed:
            raise ValueError(
                f"{self.kind} does not support a width of {self.bits} bits "
                f"(allowed: {sorted(allowed)})"
            )

    def __str__(self) -> str:
        if self.bits:
            return f"{self.kind}{self.bits}"
        return str(self.kind)


STRING = TypeTag(TypeKind.STRING)
BOOLEAN = TypeTag(TypeKind.BOOLEAN)

Int8 = t.Annotated[int, TypeTag(TypeKind.SIGNED_INTEGER, 8)]
Int16 = t.Annotated[int, TypeTag(TypeKind.SIGNED_INTEGER, 16)]
Int32 = t.Annotated[int, TypeTag(TypeKind.SIGNED_INTEGER, 32)]
Int64 = t.Annotated[int, TypeTag(TypeKind.SIGNED_INTEGER, 64)]
Uint = t.Annotated[int, TypeTag(TypeKind.UNSIGNED_INTEGER, 64)]
Uint8 = t.Annotated[int, TypeTag(TypeKind.UNSIGNED_INTEGER, 8)]
Uint16 = t.Annotated[int, TypeTag(TypeKind.UNSIGNED_INTEGER, 16)]
Uint32 = t.Annotated[int, TypeTag(TypeKind.UNSIGNED_INTEGER, 32)]
Uint64 = t.Annotated[int, TypeTag(TypeKind.UNSIGNED_INTEGER, 64)]
Float32 = t.Annotated[float, TypeTag(TypeKind.FLOAT, 32)]
Float64 = t.Annotated[float, TypeTag(TypeKind.FLOAT, 64)]
Complex64 = t.Annotated[complex, TypeTag(TypeKind.COMPLEX, 64)]
Complex128 = t.Annotated[complex, TypeTag(TypeKind.COMPLEX, 128)]

# Keyed by exact type, so bool never resolves to the int tag
_BUILTIN_TAGS: t.Final[dict[type, TypeTag]] = {
    str: STRING,
    bool: BOOLEAN,
    int: TypeTag(TypeKind.SIGNED_INTEGER, 64),
    float: TypeTag(TypeKind.FLOAT, 64),
    complex: TypeTag(TypeKind.COMPLEX, 128),
}


def resolve_type_tag(annotation: t.Any) -> TypeTag | None:
    """Map a field annotation onto its TypeTag.

    Returns None when the annotation is outside the supported set, so the
    caller can report it against the field it belongs to.

    Examples:
        >>> resolve_type_tag(Int8)
        TypeTag(kind=<TypeKind.SIGNED_INTEGER: 'int'>, bits=8)
        >>> resolve_type_tag(list[str]) is None
        True
    """
    if t.get_origin(annotation) is t.Annotated:
        for extra in annotation.__metadata__:
            if isinstance(extra, TypeTag):
                return extra
        return resolve_type_tag(annotation.__origin__)

    if t.get_origin(annotation) in (t.Union, types.UnionType):
        members = [arg for arg in t.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return resolve_type_tag(members[0])
        return None

    if isinstance(annotation, type):
        return _BUILTIN_TAGS.get(annotation)
    return None


def describe_annotation(annotation: t.Any) -> str:
    """Short human-readable name for an annotation, used in error messages."""
    if isinstance(annotation, type):
        return annotation.__name__
    return repr(annotation)
