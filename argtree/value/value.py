# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Value`, the type-erased face of a `TypedValue`.

A Value is declared with exactly one concrete type and keeps it for its whole
lifetime. Options and Commands only ever talk to Values through this class, so
a bool Value, a u8 Value, and a project-specific custom Value all share the
same get/set/describe contract.

Example:
    port = Value.of_type("u16", name="port", default_val=8080)
    port.set("0x1F90")
    port.get()  # 8080
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from rich.console import Console

from argtree.exceptions import TypeMismatchError
from argtree.help import render_value_help, render_value_usage
from argtree.value.set_behavior import SetBehavior
from argtree.value.typed_value import TypedValue
from argtree.value.value_config import DEFAULT_VALUE_CONFIG, ValueConfig
from argtree.value.value_type import ValueType


class Value:
    """
    A positional, typed, arity-bounded argument.

    Wraps exactly one `TypedValue`. Use `Value.of_type()` to declare one.
    """

    def __init__(self, typed: TypedValue) -> None:
        if not isinstance(typed, TypedValue):
            raise TypeError(f"Value wraps a TypedValue, got {type(typed).__name__}")
        self.typed: TypedValue = typed

    @classmethod
    def of_type(
        cls,
        value_type: ValueType | str | type = "bool",
        *,
        name: str = "",
        description: str = "",
        group: str | None = None,
        type_alias: str | None = None,
        max_args: int = 1,
        set_behavior: SetBehavior | str | None = None,
        arg_delims: str | None = None,
        default_val: Any = None,
        parse_fn: Callable[[str], Any] | None = None,
        valid_fn: Callable[[Any], bool] | None = None,
        config: ValueConfig | None = None,
    ) -> Value:
        """
        Declare a Value of the given type.

        Args:
            value_type: A ValueType, a type name ("u8", "string", "f32"), or a
                Python type (bool, str, int, float, or a registered custom type).
            config: Config used to resolve custom type names. Binding happens
                later, at Command initialization.
        """
        resolved = (config or DEFAULT_VALUE_CONFIG).resolve_type(value_type)
        return cls(
            TypedValue(
                resolved,
                name=name,
                description=description,
                group=group,
                type_alias=type_alias,
                max_args=max_args,
                set_behavior=set_behavior,
                arg_delims=arg_delims,
                default_val=default_val,
                parse_fn=parse_fn,
                valid_fn=valid_fn,
            )
        )

    @property
    def value_type(self) -> ValueType:
        return self.typed.value_type

    @property
    def name(self) -> str:
        return self.typed.name

    @property
    def description(self) -> str:
        return self.typed.description

    @property
    def group(self) -> str | None:
        return self.typed.group

    @property
    def child_type(self) -> str:
        return self.typed.child_type

    @property
    def is_set(self) -> bool:
        return self.typed.is_set

    @property
    def is_maxed(self) -> bool:
        return self.typed.is_maxed

    @property
    def has_default(self) -> bool:
        return self.typed.default_val is not None

    @property
    def arg_idx(self) -> int:
        return self.typed.arg_idx

    @property
    def max_args(self) -> int:
        return self.typed.max_args

    @property
    def set_behavior(self) -> SetBehavior:
        return self.typed.behavior

    @property
    def config(self) -> ValueConfig:
        return self.typed.config

    def is_bool(self) -> bool:
        return self.value_type.py_type is bool

    def has_custom_parse_fn(self) -> bool:
        return self.typed.has_custom_parse_fn()

    def has_custom_valid_fn(self) -> bool:
        return self.typed.has_custom_valid_fn()

    def has_custom_fn(self) -> bool:
        return self.has_custom_parse_fn() or self.has_custom_valid_fn()

    def parse(self, token: str) -> Any:
        return self.typed.parse(token)

    def set(self, token: str) -> None:
        self.typed.set(token)

    def get(self) -> Any:
        return self.typed.get()

    def get_all(self) -> list[Any]:
        return self.typed.get_all()

    def get_as(self, py_type: type) -> Any:
        """
        Return `get()` as `py_type`.

        Integer Values can be read as an `Enum` whose members have integer values.

        Raises:
            TypeMismatchError: If the Value's type does not match `py_type`.
        """
        value = self.typed.get()
        if self.value_type.py_type is py_type:
            return value
        if (
            isinstance(py_type, type)
            and issubclass(py_type, Enum)
            and self.value_type.py_type is int
        ):
            try:
                return py_type(value)
            except ValueError as error:
                raise TypeMismatchError(
                    f"{value!r} is not a member of {py_type.__name__}"
                ) from error
        raise TypeMismatchError(
            f"Value '{self.name}' holds '{self.child_type}', not '{py_type.__name__}'"
        )

    def reset(self) -> None:
        self.typed.reset()

    def init(self, config: ValueConfig) -> Value:
        """Return an unset copy of this Value bound to `config`."""
        return Value(self.typed.init(config))

    def usage(self, console: Console) -> None:
        render_value_usage(self, console)

    def help(self, console: Console) -> None:
        render_value_help(self, console)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return False
        return self.typed == other.typed

    def __hash__(self) -> int:
        return hash((self.name, self.value_type))

    def __str__(self) -> str:
        return f"{self.value_type.name} {self.typed}"

    def __repr__(self) -> str:
        return (
            f"Value(name={self.name!r}, type={self.child_type!r}, "
            f"set={self.is_set}, args={self.arg_idx}/{self.max_args})"
        )
