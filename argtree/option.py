# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Option`, a named wrapper around exactly one `Value`.

Options are always optional on the command line and are identified by a short
name (`-v`), a long name (`--verbose`), or both. Everything else (type,
arity, set behavior, defaults) comes from the wrapped Value, which the Option
forwards to.

Example:
    Option(
        name="target",
        short_name="t",
        long_name="target",
        val=Value.of_type(str, name="target_val"),
        description="Build target triple.",
    )
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from rich.console import Console

from argtree.exceptions import SchemaError
from argtree.help import render_option_help, render_option_usage
from argtree.value import Value, ValueConfig

if TYPE_CHECKING:
    from argtree.settings import OptionConfig


def _bool_value() -> Value:
    return Value.of_type(bool)


@dataclass
class Option:
    """
    Represents a command-line Option.

    Attributes:
        name (str): Identifier for programmatic lookup.
        short_name (str | None): Single-character short name.
        long_name (str | None): Long name.
        val (Value): The wrapped Value. Defaults to a bool Value.
        group (str | None): Optional group tag.
        description (str): Help text.
    """

    name: str
    short_name: str | None = None
    long_name: str | None = None
    val: Value = field(default_factory=_bool_value)
    group: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise SchemaError("Options need a name")
        if not self.short_name and not self.long_name:
            raise SchemaError(
                f"Option '{self.name}' needs a short name, a long name, or both"
            )
        if self.short_name is not None and len(self.short_name) != 1:
            raise SchemaError(
                f"Short name '{self.short_name}' of Option '{self.name}' "
                "must be a single character"
            )
        if self.long_name is not None and not self.long_name:
            raise SchemaError(f"Long name of Option '{self.name}' cannot be empty")
        if not isinstance(self.val, Value):
            raise SchemaError(f"Option '{self.name}' must wrap a Value")

    def is_bool(self) -> bool:
        return self.val.is_bool()

    @property
    def is_set(self) -> bool:
        return self.val.is_set

    def set(self, token: str) -> None:
        self.val.set(token)

    def get(self) -> Any:
        return self.val.get()

    def get_all(self) -> list[Any]:
        return self.val.get_all()

    def get_as(self, py_type: type) -> Any:
        return self.val.get_as(py_type)

    def init(self, config: ValueConfig) -> Option:
        """Return a copy of this Option whose Value is bound to `config`."""
        return Option(
            name=self.name,
            short_name=self.short_name,
            long_name=self.long_name,
            val=self.val.init(config),
            group=self.group,
            description=self.description,
        )

    def usage(self, console: Console, config: OptionConfig | None = None) -> None:
        render_option_usage(self, console, config)

    def help(self, console: Console, config: OptionConfig | None = None) -> None:
        render_option_help(self, console, config)

    def __str__(self) -> str:
        names = ", ".join(
            name for name in (self.short_name, self.long_name) if name is not None
        )
        return f"Option(name={self.name!r}, names=[{names}], val={self.val!r})"
