# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `TypedValue`, the storage and coercion machinery behind every Value.

A `TypedValue` holds up to `max_args` parsed-and-validated instances of a single
`ValueType` in a fixed list of `max_children` slots. Tokens flow through
`set()`, which optionally splits them on delimiter characters, parses each piece,
validates it, and stores it according to the Value's `SetBehavior`.

Parse priority:
1. The instance `parse_fn`.
2. The type-level parse function registered on the bound `ValueConfig`.
3. The built-in coercion of the `ValueType`.

Errors raised by custom parse functions are normalized to `CannotParseArgToValue`.
Built-in numeric failures surface as `NumericParseError`.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable

from argtree.exceptions import (
    CannotParseArgToValue,
    InvalidValueError,
    ParseError,
    SchemaError,
    ValueNotSetError,
)
from argtree.logger import logger
from argtree.value.set_behavior import SetBehavior
from argtree.value.value_config import DEFAULT_VALUE_CONFIG, ValueConfig
from argtree.value.value_type import ValueKind, ValueType


@dataclass
class TypedValue:
    """
    Storage for 0..N parsed instances of one concrete type.

    Attributes:
        value_type (ValueType): The concrete element type.
        name (str): Name used for lookup and error reporting.
        description (str): Help text.
        group (str | None): Optional group tag.
        type_alias (str | None): Type name to show in usage/help instead of the real one.
        max_args (int): Arity cap, between 1 and the config's `max_children`.
        set_behavior (SetBehavior | None): Repeat policy; None uses the config default.
        arg_delims (str | None): Split characters for MULTI; None uses the config default.
        default_val (Any): Value returned by `get()` before anything was set.
        parse_fn (Callable | None): Instance-level parse override.
        valid_fn (Callable | None): Predicate a parsed instance must satisfy.
    """

    value_type: ValueType
    name: str = ""
    description: str = ""
    group: str | None = None
    type_alias: str | None = None
    max_args: int = 1
    set_behavior: SetBehavior | str | None = None
    arg_delims: str | None = None
    default_val: Any = None
    parse_fn: Callable[[str], Any] | None = None
    valid_fn: Callable[[Any], bool] | None = None

    _config: ValueConfig | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _set_args: list[Any] = field(init=False, repr=False, compare=False)
    _arg_idx: int = field(default=0, init=False, repr=False, compare=False)
    is_maxed: bool = field(default=False, init=False, compare=False)
    is_set: bool = field(default=False, init=False, compare=False)

    def __post_init__(self) -> None:
        if self.set_behavior is not None and not isinstance(
            self.set_behavior, SetBehavior
        ):
            try:
                self.set_behavior = SetBehavior(self.set_behavior)
            except ValueError as error:
                raise SchemaError(str(error)) from error
        if not isinstance(self.max_args, int) or self.max_args < 1:
            raise SchemaError(
                f"max_args for Value '{self.name}' must be a positive integer"
            )
        self._reset_storage()

    @property
    def config(self) -> ValueConfig:
        return self._config or DEFAULT_VALUE_CONFIG

    @property
    def behavior(self) -> SetBehavior:
        """The effective set behavior."""
        if self.set_behavior is None:
            return SetBehavior(self.config.global_set_behavior)
        return SetBehavior(self.set_behavior)

    @property
    def delims(self) -> str:
        """The effective delimiter characters."""
        if self.arg_delims is None:
            return self.config.global_arg_delims
        return self.arg_delims

    @property
    def arg_idx(self) -> int:
        return self._arg_idx

    @property
    def child_type(self) -> str:
        return self.type_alias or self.value_type.name

    def _reset_storage(self) -> None:
        # unbound Values only know an explicitly declared behavior
        behavior = self.behavior if self._config is not None else self.set_behavior
        if self.max_args > 1 and behavior not in (None, SetBehavior.MULTI):
            raise SchemaError(
                f"Value '{self.name}' uses '{behavior.value}' and can only hold one "
                f"argument; max_args {self.max_args} needs 'multi'"
            )
        capacity = self.config.max_children
        if self._config is None:
            # unbound declarations are checked against their config at init()
            capacity = max(capacity, self.max_args)
        elif self.max_args > capacity:
            raise SchemaError(
                f"max_args ({self.max_args}) for Value '{self.name}' exceeds "
                f"max_children ({capacity})"
            )
        self._set_args = [None] * capacity
        self._arg_idx = 0
        self.is_maxed = False
        self.is_set = False

    def init(self, config: ValueConfig) -> TypedValue:
        """Return an unset copy of this Value bound to `config`."""
        value = copy.copy(self)
        value._config = config
        value._reset_storage()
        return value

    def reset(self) -> None:
        """Clear all parsed arguments."""
        self._reset_storage()

    def has_custom_parse_fn(self) -> bool:
        return (
            self.parse_fn is not None
            or self.config.type_parse_fn(self.value_type) is not None
        )

    def has_custom_valid_fn(self) -> bool:
        return self.valid_fn is not None

    def _run_parse_fn(self, parse_fn: Callable[[str], Any], token: str) -> Any:
        try:
            return parse_fn(token)
        except Exception as error:
            raise CannotParseArgToValue(
                f"Cannot parse '{token}' for '{self.name}': {error}",
                token=token,
                argument=self.name,
            ) from error

    def parse(self, token: str) -> Any:
        """
        Convert a raw token into an instance of this Value's type.

        Raises:
            CannotParseArgToValue: If a custom parse function fails.
            NumericParseError: If built-in numeric coercion fails.
        """
        if self.parse_fn is not None:
            return self._run_parse_fn(self.parse_fn, token)
        type_parse_fn = self.config.type_parse_fn(self.value_type)
        if type_parse_fn is not None:
            return self._run_parse_fn(type_parse_fn, token)
        try:
            return self.value_type.coerce(token)
        except ParseError as error:
            error.argument = error.argument or self.name
            raise

    def validate(self, parsed: Any) -> bool:
        if self.valid_fn is None:
            return True
        try:
            return bool(self.valid_fn(parsed))
        except Exception as error:
            raise InvalidValueError(
                f"Validation of {parsed!r} for '{self.name}' failed: {error}",
                argument=self.name,
            ) from error

    def set(self, token: str) -> None:
        """
        Parse, validate, and store a raw token.

        Under MULTI, a non-string token containing one of `arg_delims` is split on
        the first delimiter character (in `arg_delims` order) that it contains and
        each piece is set on its own.

        Raises:
            ParseError: If the token cannot be parsed.
            InvalidValueError: If the parsed value is rejected by `valid_fn`.
        """
        behavior = self.behavior
        if behavior is SetBehavior.MULTI and not self.value_type.is_string:
            delim = next((char for char in self.delims if char in token), None)
            if delim is not None:
                for piece in token.split(delim):
                    self.set(piece)
                return

        parsed = self.parse(token)
        if not self.validate(parsed):
            raise InvalidValueError(
                f"Invalid value '{token}' for '{self.name}'",
                token=token,
                argument=self.name,
            )

        if behavior is SetBehavior.FIRST:
            if self._arg_idx == 0:
                self._set_args[0] = parsed
                self._arg_idx = 1
        elif behavior is SetBehavior.LAST:
            self._set_args[0] = parsed
            if self._arg_idx < 1:
                self._arg_idx = 1
        elif self._arg_idx < self.max_args:
            self._set_args[self._arg_idx] = parsed
            self._arg_idx += 1
        else:
            logger.warning(
                "[%s] Ignoring '%s': already holds %d of %d arguments.",
                self.name,
                token,
                self._arg_idx,
                self.max_args,
            )
        self.is_set = True
        self.is_maxed = self._arg_idx == self.max_args

    def get(self) -> Any:
        """
        Return the first stored instance, the default, or False for bool Values.

        Raises:
            ValueNotSetError: If none of those is available.
        """
        if self.is_set:
            return self._set_args[0]
        if self.default_val is not None:
            return self.default_val
        if self.value_type.kind == ValueKind.BOOL:
            return False
        raise ValueNotSetError(f"Value '{self.name}' has not been set")

    def get_all(self) -> list[Any]:
        """
        Return every stored instance, or the default as a single-item list.

        Raises:
            ValueNotSetError: If nothing was set and there is no default.
        """
        if not self.is_set:
            if self.default_val is not None:
                return [self.default_val]
            raise ValueNotSetError(f"Value '{self.name}' has not been set")
        return list(self._set_args[: self._arg_idx])

    def __str__(self) -> str:
        return f"{self.name}: Type: {self.child_type}, Set: {self.is_set}"
