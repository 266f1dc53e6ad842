# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
`ValueConfig`: defaults and the custom type registry shared by Values.

A Value reads its set behavior, delimiters, and slot capacity from the config it
is bound to whenever it does not declare them itself. Type-level parse functions
registered here override the built-in coercion for every Value of that type.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from argtree.exceptions import SchemaError
from argtree.value.set_behavior import SetBehavior
from argtree.value.value_type import ValueType, resolve_value_type


@dataclass
class ValueConfig:
    """
    Shared configuration for Values.

    Attributes:
        global_set_behavior (SetBehavior): Set behavior for Values that do not declare one.
        global_arg_delims (str): Delimiter characters for Values that do not declare them.
        max_children (int): Slot capacity of every Value.
        custom_types (dict[str, ValueType]): Project-registered types by name.
        type_parse_fns (dict[str, Callable]): Type-level parse overrides by type name.
        vals_usage_fmt (str): Usage format, fields `name` and `type`.
        vals_help_fmt (str): Help format, fields `name`, `type` and `description`.
    """

    global_set_behavior: SetBehavior | str = SetBehavior.LAST
    global_arg_delims: str = ",;"
    max_children: int = 10
    custom_types: dict[str, ValueType] = field(default_factory=dict)
    type_parse_fns: dict[str, Callable[[str], Any]] = field(default_factory=dict)
    vals_usage_fmt: str = '"{name} ({type})"'
    vals_help_fmt: str = "{name} ({type}): {description}"

    def __post_init__(self) -> None:
        if not isinstance(self.global_set_behavior, SetBehavior):
            try:
                self.global_set_behavior = SetBehavior(self.global_set_behavior)
            except ValueError as error:
                raise SchemaError(str(error)) from error
        if not isinstance(self.max_children, int) or self.max_children < 1:
            raise SchemaError("max_children must be a positive integer")
        for name, value_type in self.custom_types.items():
            if name != value_type.name:
                raise SchemaError(
                    f"Custom type registered as '{name}' is named '{value_type.name}'"
                )

    def register_type(
        self,
        value_type: ValueType,
        parse_fn: Callable[[str], Any] | None = None,
    ) -> ValueType:
        """Register a custom type and, optionally, its type-level parse function."""
        self.custom_types[value_type.name] = value_type
        if parse_fn is not None:
            self.type_parse_fns[value_type.name] = parse_fn
        return value_type

    def register_parse_fn(
        self, value_type: ValueType | str | type, parse_fn: Callable[[str], Any]
    ) -> None:
        """Override parsing for every Value of an existing type."""
        resolved = resolve_value_type(value_type, self.custom_types)
        self.type_parse_fns[resolved.name] = parse_fn

    def type_parse_fn(self, value_type: ValueType) -> Callable[[str], Any] | None:
        return self.type_parse_fns.get(value_type.name)

    def resolve_type(self, declared: ValueType | str | type) -> ValueType:
        return resolve_value_type(declared, self.custom_types)


DEFAULT_VALUE_CONFIG = ValueConfig()
