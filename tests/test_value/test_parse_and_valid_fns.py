from enum import Enum

import pytest

from argtree.exceptions import CannotParseArgToValue
from argtree.value import Value
from argtree.value.parsing import (
    BoolNoMatch,
    alt_bool,
    as_base,
    as_enum_type,
    to_lower,
    to_upper,
    trim_whitespace,
)
from argtree.value.validation import in_range, ordinal_num, valid_filepath


class Level(Enum):
    LOW = 1
    HIGH = 2


def test_string_normalizers():
    assert trim_whitespace("  a b  ") == "a b"
    assert to_upper("abc") == "ABC"
    assert to_lower("ABC") == "abc"


def test_alt_bool_no_match_modes():
    assert alt_bool(["on"])("on") is True
    assert alt_bool(["on"])("true") is False
    assert alt_bool(["on"], ["off"], BoolNoMatch.TRUE)("maybe") is True
    assert alt_bool(["on"], ["off"], BoolNoMatch.TRUE)("off") is False
    with pytest.raises(ValueError):
        alt_bool(["on"], ["off"], BoolNoMatch.ERROR)("maybe")


def test_alt_bool_as_value_parse_fn():
    val = Value.of_type(
        bool, name="power", parse_fn=alt_bool(["on"], ["off"], BoolNoMatch.ERROR)
    )
    val.set("on")
    assert val.get() is True
    with pytest.raises(CannotParseArgToValue):
        val.set("dim")


def test_as_base():
    assert as_base(16)("ff") == 255
    assert as_base(2)("1010") == 10
    with pytest.raises(ValueError):
        as_base(1)
    with pytest.raises(ValueError):
        as_base(37)


def test_as_enum_type():
    parse_level = as_enum_type(Level)
    assert parse_level(" HIGH ") == 2
    with pytest.raises(ValueError) as exc_info:
        parse_level("MEDIUM")
    assert "LOW, HIGH" in str(exc_info.value)


def test_in_range():
    check = in_range(1, 5)
    assert check(1) and check(5)
    assert not check(6)
    exclusive = in_range(1, 5, inclusive=False)
    assert not exclusive(1)
    assert exclusive(3)
    with pytest.raises(ValueError):
        in_range(5, 1)


def test_in_range_as_value_valid_fn():
    val = Value.of_type("u8", name="level", valid_fn=in_range(1, 3))
    val.set("2")
    assert val.get() == 2


def test_ordinal_num():
    assert ordinal_num("Third")
    assert not ordinal_num("eleventh")


def test_valid_filepath(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("data", encoding="UTF-8")
    assert valid_filepath(str(path))
    assert not valid_filepath(str(tmp_path / "missing.txt"))
    assert not valid_filepath(str(tmp_path))
