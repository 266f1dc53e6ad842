# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Ready-made parse functions for `Value.parse_fn` and `ValueConfig.type_parse_fns`.

Functions:
- trim_whitespace / to_upper / to_lower: String normalizers.
- alt_bool: Build a bool parser with its own true/false word lists.
- as_base: Build an integer parser for a fixed base.
- as_enum_type: Build a parser that maps an Enum member name to its value.
"""
from __future__ import annotations

from enum import Enum, EnumMeta
from typing import Callable, Iterable


class BoolNoMatch(Enum):
    """What `alt_bool` parsers return for a word in neither list."""

    TRUE = "true"
    FALSE = "false"
    ERROR = "error"


def trim_whitespace(arg: str) -> str:
    return arg.strip()


def to_upper(arg: str) -> str:
    return arg.upper()


def to_lower(arg: str) -> str:
    return arg.lower()


def alt_bool(
    true_words: Iterable[str],
    false_words: Iterable[str] = (),
    no_match: BoolNoMatch = BoolNoMatch.FALSE,
) -> Callable[[str], bool]:
    """
    Build a bool parser that matches words exactly.

    Args:
        true_words: Words that parse to True.
        false_words: Words that parse to False.
        no_match: Result, or error, for any other word.
    """
    true_set = frozenset(true_words)
    false_set = frozenset(false_words)

    def parse_bool(arg: str) -> bool:
        if arg in true_set:
            return True
        if arg in false_set:
            return False
        if no_match is BoolNoMatch.TRUE:
            return True
        if no_match is BoolNoMatch.FALSE:
            return False
        raise ValueError(f"Unrecognized boolean value: '{arg}'")

    return parse_bool


def as_base(base: int) -> Callable[[str], int]:
    """Build an integer parser for `base` (2-36)."""
    if not 2 <= base <= 36:
        raise ValueError(f"Invalid base: {base}")

    def parse_base(arg: str) -> int:
        return int(arg, base)

    return parse_base


def as_enum_type(enum_type: EnumMeta) -> Callable[[str], object]:
    """
    Build a parser that turns an Enum member name into the member's value.

    Surrounding whitespace is ignored.
    """

    def parse_enum(arg: str) -> object:
        try:
            return enum_type[arg.strip()].value
        except KeyError:
            names = ", ".join(member.name for member in enum_type)
            raise ValueError(f"'{arg}' should be one of {{{names}}}") from None

    return parse_enum
