# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Concrete element types a Value can hold and their built-in coercion.

Every Value is declared with exactly one `ValueType`. The built-in set covers
booleans, strings, unsigned and signed integers of several bit widths, and
floats. Projects add their own types with `custom_type()` and register them on
`ValueConfig.custom_types`; custom types must be given a parse function.

Contents:
- ValueKind: The family a type belongs to.
- ValueType: A named, hashable type tag with range-checked coercion.
- BUILTIN_TYPES: Name → ValueType mapping of the base types.
- custom_type(): Build a ValueType for a project-specific Python type.
- resolve_value_type(): Turn a ValueType, a type name, or a Python type into a ValueType.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from argtree.exceptions import CannotParseArgToValue, NumericParseError, SchemaError

TRUE_WORDS = frozenset({"true", "t", "yes", "y", "1"})


class ValueKind(Enum):
    """Family of a ValueType."""

    BOOL = "bool"
    STRING = "string"
    UINT = "uint"
    INT = "int"
    FLOAT = "float"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ValueType:
    """
    A concrete element type for a Value.

    Attributes:
        name (str): Type name shown in usage/help (e.g. "u8", "string").
        py_type (type): The Python type parsed instances have.
        kind (ValueKind): The family of the type.
        bits (int | None): Bit width for integer types.
    """

    name: str
    py_type: type
    kind: ValueKind
    bits: int | None = None

    @property
    def is_numeric(self) -> bool:
        return self.kind in (ValueKind.UINT, ValueKind.INT, ValueKind.FLOAT)

    @property
    def is_string(self) -> bool:
        return self.kind == ValueKind.STRING

    def int_bounds(self) -> tuple[int, int]:
        """Return the inclusive (min, max) range of an integer type."""
        assert self.bits is not None, "int_bounds() requires an integer type"
        if self.kind == ValueKind.UINT:
            return 0, (1 << self.bits) - 1
        return -(1 << (self.bits - 1)), (1 << (self.bits - 1)) - 1

    def coerce(self, token: str) -> Any:
        """
        Convert a raw token with the built-in rules for this type.

        Raises:
            NumericParseError: If an integer or float cannot be parsed or is out of range.
            CannotParseArgToValue: If the type has no built-in coercion.
        """
        if self.kind == ValueKind.BOOL:
            return token.lower() in TRUE_WORDS
        if self.kind == ValueKind.STRING:
            return token
        if self.kind in (ValueKind.UINT, ValueKind.INT):
            try:
                parsed = int(token, 0)
            except ValueError as error:
                raise NumericParseError(
                    f"'{token}' is not a valid {self.name}", token=token
                ) from error
            minimum, maximum = self.int_bounds()
            if not minimum <= parsed <= maximum:
                raise NumericParseError(
                    f"'{token}' is out of range for {self.name} ({minimum}..{maximum})",
                    token=token,
                )
            return parsed
        if self.kind == ValueKind.FLOAT:
            try:
                return float(token)
            except ValueError as error:
                raise NumericParseError(
                    f"'{token}' is not a valid {self.name}", token=token
                ) from error
        raise CannotParseArgToValue(
            f"Type '{self.name}' has no parse function for '{token}'", token=token
        )

    def __str__(self) -> str:
        return self.name


BOOL = ValueType("bool", bool, ValueKind.BOOL)
STRING = ValueType("string", str, ValueKind.STRING)

U1 = ValueType("u1", int, ValueKind.UINT, 1)
U2 = ValueType("u2", int, ValueKind.UINT, 2)
U3 = ValueType("u3", int, ValueKind.UINT, 3)
U4 = ValueType("u4", int, ValueKind.UINT, 4)
U8 = ValueType("u8", int, ValueKind.UINT, 8)
U16 = ValueType("u16", int, ValueKind.UINT, 16)
U32 = ValueType("u32", int, ValueKind.UINT, 32)
U64 = ValueType("u64", int, ValueKind.UINT, 64)

I1 = ValueType("i1", int, ValueKind.INT, 1)
I2 = ValueType("i2", int, ValueKind.INT, 2)
I3 = ValueType("i3", int, ValueKind.INT, 3)
I4 = ValueType("i4", int, ValueKind.INT, 4)
I8 = ValueType("i8", int, ValueKind.INT, 8)
I16 = ValueType("i16", int, ValueKind.INT, 16)
I32 = ValueType("i32", int, ValueKind.INT, 32)
I64 = ValueType("i64", int, ValueKind.INT, 64)

F16 = ValueType("f16", float, ValueKind.FLOAT)
F32 = ValueType("f32", float, ValueKind.FLOAT)
F64 = ValueType("f64", float, ValueKind.FLOAT)

BUILTIN_TYPES: dict[str, ValueType] = {
    value_type.name: value_type
    for value_type in (
        BOOL,
        STRING,
        U1,
        U2,
        U3,
        U4,
        U8,
        U16,
        U32,
        U64,
        I1,
        I2,
        I3,
        I4,
        I8,
        I16,
        I32,
        I64,
        F16,
        F32,
        F64,
    )
}

_PY_TYPE_DEFAULTS: dict[type, ValueType] = {
    bool: BOOL,
    str: STRING,
    int: I64,
    float: F64,
}

_NAME_ALIASES: dict[str, str] = {
    "str": "string",
    "int": "i64",
    "float": "f64",
    "boolean": "bool",
}


def custom_type(name: str, py_type: type) -> ValueType:
    """Create a ValueType for a project-specific Python type."""
    if not name:
        raise SchemaError("Custom value types need a name")
    if name in BUILTIN_TYPES or name in _NAME_ALIASES:
        raise SchemaError(f"Custom value type '{name}' shadows a built-in type")
    return ValueType(name, py_type, ValueKind.CUSTOM)


def resolve_value_type(
    declared: ValueType | str | type,
    custom_types: Mapping[str, ValueType] | None = None,
) -> ValueType:
    """
    Resolve a declared type into a ValueType.

    Args:
        declared: A ValueType, a type name ("u8", "string", "int"), or a Python type.
        custom_types: Registered custom types to search as well.

    Returns:
        ValueType: The matching type.

    Raises:
        SchemaError: If nothing matches.
    """
    custom_types = custom_types or {}
    if isinstance(declared, ValueType):
        return declared
    if isinstance(declared, str):
        name = _NAME_ALIASES.get(declared.strip().lower(), declared.strip())
        if name in custom_types:
            return custom_types[name]
        if name.lower() in BUILTIN_TYPES:
            return BUILTIN_TYPES[name.lower()]
        raise SchemaError(f"Unknown value type: '{declared}'")
    if isinstance(declared, type):
        if declared in _PY_TYPE_DEFAULTS:
            return _PY_TYPE_DEFAULTS[declared]
        for value_type in custom_types.values():
            if value_type.py_type is declared:
                return value_type
        raise SchemaError(
            f"Python type '{declared.__name__}' is not a registered value type"
        )
    raise SchemaError(f"Cannot resolve a value type from {declared!r}")
