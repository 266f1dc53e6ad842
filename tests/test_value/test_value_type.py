from enum import Enum

import pytest

from argtree.exceptions import CannotParseArgToValue, SchemaError, TypeMismatchError
from argtree.value import (
    BUILTIN_TYPES,
    Value,
    ValueConfig,
    ValueKind,
    custom_type,
    resolve_value_type,
)


class Color(Enum):
    RED = 1
    GREEN = 2


@pytest.mark.parametrize(
    "declared,expected",
    [
        ("u8", "u8"),
        ("I16", "i16"),
        ("str", "string"),
        ("int", "i64"),
        ("float", "f64"),
        (bool, "bool"),
        (str, "string"),
        (int, "i64"),
        (float, "f64"),
    ],
)
def test_resolve_value_type(declared, expected):
    assert resolve_value_type(declared).name == expected


def test_resolve_unknown_type():
    with pytest.raises(SchemaError):
        resolve_value_type("u128")
    with pytest.raises(SchemaError):
        resolve_value_type(complex)


@pytest.mark.parametrize(
    "name,bounds",
    [
        ("u1", (0, 1)),
        ("u4", (0, 15)),
        ("u8", (0, 255)),
        ("i1", (-1, 0)),
        ("i4", (-8, 7)),
        ("i8", (-128, 127)),
    ],
)
def test_int_bounds(name, bounds):
    assert BUILTIN_TYPES[name].int_bounds() == bounds


def test_builtin_kinds():
    assert BUILTIN_TYPES["bool"].kind == ValueKind.BOOL
    assert BUILTIN_TYPES["string"].is_string
    assert BUILTIN_TYPES["f32"].is_numeric
    assert not BUILTIN_TYPES["bool"].is_numeric


def test_custom_type_cannot_shadow_builtin():
    with pytest.raises(SchemaError):
        custom_type("u8", int)
    with pytest.raises(SchemaError):
        custom_type("", int)


def test_custom_type_requires_parse_fn():
    config = ValueConfig()
    config.register_type(custom_type("point", tuple))
    val = Value.of_type("point", name="origin", config=config).init(config)
    with pytest.raises(CannotParseArgToValue):
        val.set("1:2")


def test_custom_type_with_type_parse_fn():
    config = ValueConfig()
    config.register_type(
        custom_type("point", tuple),
        parse_fn=lambda arg: tuple(int(part) for part in arg.split(":")),
    )
    val = Value.of_type(tuple, name="origin", config=config).init(config)
    val.set("1:2")
    assert val.get() == (1, 2)
    assert val.child_type == "point"


def test_type_alias_changes_child_type():
    val = Value.of_type(str, name="path", type_alias="filepath")
    assert val.child_type == "filepath"
    assert val.value_type.name == "string"


def test_get_as_enum_from_int():
    val = Value.of_type("u8", name="color")
    val.set("2")
    assert val.get_as(Color) is Color.GREEN
    assert val.get_as(int) == 2


def test_get_as_mismatch():
    val = Value.of_type("u8", name="color")
    val.set("3")
    with pytest.raises(TypeMismatchError):
        val.get_as(Color)
    with pytest.raises(TypeMismatchError):
        val.get_as(str)
