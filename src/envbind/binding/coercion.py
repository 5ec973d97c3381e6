"""String to typed-value coercion, one rule per TypeKind.

Each coercer takes the raw string and the tag's bit width and raises
ValueError (invalid syntax) or OverflowError (out of range) on failure.
"""

import math
import re
import struct
import typing as t

from ..domain.type_tags import TypeKind, TypeTag

_SIGNED_PATTERN: t.Final = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_PATTERN: t.Final = re.compile(r"\+?[0-9]+")
_FLOAT_PATTERN: t.Final = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?"
    r"|\.[0-9]+(?:[eE][+-]?[0-9]+)?"
    r"|inf|infinity|nan)",
    re.IGNORECASE,
)

_TRUTHY: t.Final = frozenset({"Y", "y", "Yes", "YES", "yes", "on"})
_FALSY: t.Final = frozenset({"N", "n", "No", "NO", "no", "off"})
# Accepted after the extended vocabulary misses
_STRICT_TRUE: t.Final = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_STRICT_FALSE: t.Final = frozenset({"0", "f", "F", "FALSE", "false", "False"})

Coercer = t.Callable[[str, int], t.Any]


def _invalid(value: str) -> ValueError:
    return ValueError(f"invalid syntax: {value!r}")


def _to_float32(number: float) -> float:
    """Round to single precision; raises OverflowError if not representable."""
    try:
        rounded = struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError as exc:
        raise OverflowError(f"value out of range for float32: {number!r}") from exc
    # pack() rounds large finite values to inf instead of raising
    if math.isinf(rounded) and not math.isinf(number):
        raise OverflowError(f"value out of range for float32: {number!r}")
    return rounded


def _check_finite(number: float, value: str, bits: int) -> None:
    if math.isinf(number) and "inf" not in value.lower():
        raise OverflowError(f"value out of range for float{bits}: {value!r}")


def coerce_string(value: str, bits: int = 0) -> str:
    return value


def coerce_signed(value: str, bits: int = 64) -> int:
    """Parse a base-10 signed integer that fits in ``bits`` bits.

    Examples:
        >>> coerce_signed("-128", 8)
        -128
        >>> coerce_signed("128", 8)
        Traceback (most recent call last):
        ...
        OverflowError: value out of range for int8: '128'
    """
    if not _SIGNED_PATTERN.fullmatch(value):
        raise _invalid(value)
    number = int(value, 10)
    limit = 1 << (bits - 1)
    if not -limit <= number < limit:
        raise OverflowError(f"value out of range for int{bits}: {value!r}")
    return number


def coerce_unsigned(value: str, bits: int = 64) -> int:
    """Parse a base-10 unsigned integer that fits in ``bits`` bits."""
    if not _UNSIGNED_PATTERN.fullmatch(value):
        raise _invalid(value)
    number = int(value, 10)
    if number >= 1 << bits:
        raise OverflowError(f"value out of range for uint{bits}: {value!r}")
    return number


def coerce_float(value: str, bits: int = 64) -> float:
    """Parse a decimal floating point literal.

    ``inf``/``infinity``/``nan`` spellings are accepted in any case. A
    finite literal that overflows the target width is an error.
    """
    if not _FLOAT_PATTERN.fullmatch(value):
        raise _invalid(value)
    number = float(value)
    _check_finite(number, value, bits)
    if bits == 32:
        return _to_float32(number)
    return number


def coerce_complex(value: str, bits: int = 128) -> complex:
    """Parse ``a+bi`` / ``a-bi`` / ``bi`` / ``a``, optionally in parentheses.

    ``j`` is accepted in place of ``i``.

    Examples:
        >>> coerce_complex("1+2i")
        (1+2j)
        >>> coerce_complex("(3.5-1i)")
        (3.5-1j)
    """
    if value != value.strip() or "_" in value:
        raise _invalid(value)

    text = value
    if text.startswith("(") and text.endswith(")"):
        text = text[1:-1]
    # complex() would otherwise accept padding and a second pair of parens
    if text != text.strip() or "(" in text or ")" in text:
        raise _invalid(value)
    if text.endswith(("i", "I")):
        text = text[:-1] + "j"

    try:
        number = complex(text)
    except ValueError:
        raise _invalid(value) from None

    _check_finite(number.real, value, bits // 2)
    _check_finite(number.imag, value, bits // 2)
    if bits == 64:
        return complex(_to_float32(number.real), _to_float32(number.imag))
    return number


def coerce_bool(value: str, bits: int = 0) -> bool:
    """Parse the extended yes/no vocabulary, then strict true/false.

    Examples:
        >>> coerce_bool("Yes"), coerce_bool("off"), coerce_bool("true")
        (True, False, True)
    """
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    if value in _STRICT_TRUE:
        return True
    if value in _STRICT_FALSE:
        return False
    raise _invalid(value)


COERCERS: t.Final[dict[TypeKind, Coercer]] = {
    TypeKind.STRING: coerce_string,
    TypeKind.SIGNED_INTEGER: coerce_signed,
    TypeKind.UNSIGNED_INTEGER: coerce_unsigned,
    TypeKind.FLOAT: coerce_float,
    TypeKind.COMPLEX: coerce_complex,
    TypeKind.BOOLEAN: coerce_bool,
}


def coerce(value: str, tag: TypeTag) -> t.Any:
    """Coerce ``value`` to the Python type described by ``tag``.

    Raises:
        ValueError: If the value is not a valid literal for the tag.
        OverflowError: If the value does not fit the tag's width.
    """
    return COERCERS[tag.kind](value, tag.bits)
