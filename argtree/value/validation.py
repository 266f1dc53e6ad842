# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Ready-made validation predicates for `Value.valid_fn`.

Functions:
- in_range: Build a numeric range check.
- valid_filepath: Accept paths to existing, readable files.
- ordinal_num: Accept ordinal words from "first" to "tenth".
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable

from argtree.logger import logger

ORDINALS = frozenset(
    {
        "first",
        "second",
        "third",
        "fourth",
        "fifth",
        "sixth",
        "seventh",
        "eighth",
        "ninth",
        "tenth",
    }
)


def in_range(
    start: float, end: float, inclusive: bool = True
) -> Callable[[float], bool]:
    """Build a predicate that accepts numbers between `start` and `end`."""
    if start > end:
        raise ValueError(f"Invalid range: {start} > {end}")

    if inclusive:

        def check_inclusive(num: float) -> bool:
            return start <= num <= end

        return check_inclusive

    def check_exclusive(num: float) -> bool:
        return start < num < end

    return check_exclusive


def valid_filepath(filepath: str) -> bool:
    path = Path(filepath)
    if not path.is_file():
        logger.error("The file '%s' could not be found.", filepath)
        return False
    try:
        with path.open("rb"):
            return True
    except OSError as error:
        logger.error("The file '%s' could not be opened: %s", filepath, error)
        return False


def ordinal_num(num_str: str) -> bool:
    return num_str.lower() in ORDINALS
