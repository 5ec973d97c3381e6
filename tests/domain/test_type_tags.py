"""Tests for TypeTag and annotation resolution."""

import typing as t

import pytest

from envbind.domain.type_tags import (
    BOOLEAN,
    STRING,
    Complex64,
    Complex128,
    Float32,
    Int8,
    TypeKind,
    TypeTag,
    Uint,
    Uint16,
    resolve_type_tag,
)


class TestTypeTag:
    """Construction and display of tags."""

    @pytest.mark.parametrize("bits", [8, 16, 32, 64])
    def test_integer_widths_accepted(self, bits):
        """All standard integer widths are valid."""
        assert TypeTag(TypeKind.SIGNED_INTEGER, bits).bits == bits
        assert TypeTag(TypeKind.UNSIGNED_INTEGER, bits).bits == bits

    @pytest.mark.parametrize(
        "kind,bits",
        [
            (TypeKind.SIGNED_INTEGER, 12),
            (TypeKind.FLOAT, 16),
            (TypeKind.COMPLEX, 32),
            (TypeKind.STRING, 8),
            (TypeKind.BOOLEAN, 1),
        ],
    )
    def test_rejects_unknown_widths(self, kind, bits):
        """Widths outside the closed set raise ValueError."""
        with pytest.raises(ValueError, match="does not support"):
            TypeTag(kind, bits)

    def test_str_includes_width(self):
        """String form mirrors the familiar type names."""
        assert str(TypeTag(TypeKind.UNSIGNED_INTEGER, 16)) == "uint16"
        assert str(TypeTag(TypeKind.FLOAT, 32)) == "float32"
        assert str(STRING) == "string"
        assert str(BOOLEAN) == "bool"


class TestResolveTypeTag:
    """Mapping of Python annotations onto tags."""

    @pytest.mark.parametrize(
        "annotation,expected",
        [
            (str, STRING),
            (bool, BOOLEAN),
            (int, TypeTag(TypeKind.SIGNED_INTEGER, 64)),
            (float, TypeTag(TypeKind.FLOAT, 64)),
            (complex, TypeTag(TypeKind.COMPLEX, 128)),
        ],
    )
    def test_builtin_defaults(self, annotation, expected):
        """Builtins resolve to their widest tag."""
        assert resolve_type_tag(annotation) == expected

    def test_sized_aliases(self):
        """Annotated aliases carry their own width."""
        assert resolve_type_tag(Int8) == TypeTag(TypeKind.SIGNED_INTEGER, 8)
        assert resolve_type_tag(Uint16) == TypeTag(TypeKind.UNSIGNED_INTEGER, 16)
        assert resolve_type_tag(Uint) == TypeTag(TypeKind.UNSIGNED_INTEGER, 64)
        assert resolve_type_tag(Float32) == TypeTag(TypeKind.FLOAT, 32)
        assert resolve_type_tag(Complex64) == TypeTag(TypeKind.COMPLEX, 64)
        assert resolve_type_tag(Complex128) == TypeTag(TypeKind.COMPLEX, 128)

    def test_annotated_without_tag_uses_base_type(self):
        """Unrelated Annotated metadata is ignored."""
        assert resolve_type_tag(t.Annotated[str, "doc"]) == STRING

    def test_optional_unwraps(self):
        """Optional[T] and T | None resolve like T."""
        assert resolve_type_tag(t.Optional[int]) == TypeTag(
            TypeKind.SIGNED_INTEGER, 64
        )
        assert resolve_type_tag(t.Optional[Int8]) == TypeTag(
            TypeKind.SIGNED_INTEGER, 8
        )
        assert resolve_type_tag(float | None) == TypeTag(TypeKind.FLOAT, 64)

    @pytest.mark.parametrize(
        "annotation",
        [list[str], dict[str, str], bytes, t.Union[int, str], object],
    )
    def test_unsupported_annotations(self, annotation):
        """Anything outside the closed set resolves to None."""
        assert resolve_type_tag(annotation) is None
