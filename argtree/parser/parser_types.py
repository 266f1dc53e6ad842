# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Configuration and token-stream models used by the argtree parsing engine.

Contents:
- `ParseConfig`: Per-call switches for `parse_args()`.
- `TokenStream`: A forward-only token iterator with one token of lookahead.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class ParseConfig:
    """
    Per-call switches for `parse_args()`.

    Attributes:
        skip_exe_name_arg (bool): Drop the first token (the program name, as in `sys.argv`).
        vals_mandatory (bool): Enforce mandatory Values. When False no Command
            raises `MissingValueError`, whatever its own setting.
        allow_opt_val_no_space (bool | None): Override `OptionConfig.allow_opt_val_no_space`.
        auto_handle_usage_help (bool): Render requested usage/help after a successful parse.
    """

    skip_exe_name_arg: bool = False
    vals_mandatory: bool = True
    allow_opt_val_no_space: bool | None = None
    auto_handle_usage_help: bool = False


class TokenStream:
    """Forward-only iterator over raw tokens that can peek one token ahead."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: Iterator[str] = iter(tokens)
        self._peeked: list[str] = []
        self.consumed = 0

    def peek(self) -> str | None:
        if not self._peeked:
            token = next(self._tokens, None)
            if token is None:
                return None
            self._peeked.append(token)
        return self._peeked[0]

    def next(self) -> str | None:
        if self._peeked:
            token: str | None = self._peeked.pop()
        else:
            token = next(self._tokens, None)
        if token is not None:
            self.consumed += 1
        return token

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        token = self.next()
        if token is None:
            raise StopIteration
        return token
