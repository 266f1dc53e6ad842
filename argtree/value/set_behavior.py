# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `SetBehavior`, the policy a Value follows when it is `set()` more than once.

Schema files may spell members in any case or use the aliases "keep_first",
"overwrite" and "append".
"""
from __future__ import annotations

from enum import Enum

_ALIASES = {"keep_first": "first", "overwrite": "last", "append": "multi"}


class SetBehavior(Enum):
    """
    FIRST keeps the first argument, LAST keeps the latest one, and MULTI keeps
    every argument up to the Value's `max_args`.
    """

    FIRST = "first"
    LAST = "last"
    MULTI = "multi"

    @classmethod
    def _missing_(cls, value: object) -> SetBehavior | None:
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        return cls._value2member_map_.get(_ALIASES.get(key, key))
