# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Configuration objects shared by Values, Options, and Commands.

A `CommandConfig` is bound to every node of a Command tree when the tree is
initialized. It carries the `OptionConfig` (prefixes, separators, abbreviation)
and the `ValueConfig` (default set behavior, delimiters, slot capacity, custom
types) that Options and Values consult while parsing.

Contents:
- ValueConfig: Re-exported from `argtree.value.value_config`.
- OptionConfig: Name-matching rules for Options.
- CommandConfig: Tree-wide defaults for Commands.
- InitConfig: Switches for `Command.init()`.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from argtree.exceptions import SchemaError
from argtree.value.value_config import DEFAULT_VALUE_CONFIG, ValueConfig


@dataclass
class OptionConfig:
    """
    Name-matching rules for Options.

    Attributes:
        short_prefix (str | None): Single prefix character for short Options, or None to disable.
        long_prefix (str | None): Prefix string for long Options, or None to disable.
        opt_val_seps (str): Characters accepted between an Option name and an inline value.
        allow_opt_val_no_space (bool): Allow `-nValue` style inline values on short Options.
        allow_abbreviated_long_opts (bool): Allow `--verb` to select `--verbose`.
        usage_fmt (str): Usage format, fields `short_prefix`, `short_name`,
            `long_prefix`, `long_name`, `val_name` and `val_type`.
        help_fmt (str | None): Help format, fields `name` and `description`.
    """

    short_prefix: str | None = "-"
    long_prefix: str | None = "--"
    opt_val_seps: str = "="
    allow_opt_val_no_space: bool = True
    allow_abbreviated_long_opts: bool = True
    usage_fmt: str = (
        '[{short_prefix}{short_name},{long_prefix}{long_name} "{val_name} ({val_type})"]'
    )
    help_fmt: str | None = None

    def __post_init__(self) -> None:
        if not self.short_prefix and not self.long_prefix:
            raise SchemaError("Either a short or long prefix must be set for Options")
        if self.short_prefix is not None and len(self.short_prefix) != 1:
            raise SchemaError("short_prefix must be a single character")
        if self.long_prefix == "":
            raise SchemaError("long_prefix cannot be empty; use None to disable it")


@dataclass
class CommandConfig:
    """
    Tree-wide defaults for Commands.

    Attributes:
        value_config (ValueConfig): Configuration for every Value in the tree.
        option_config (OptionConfig): Configuration for every Option in the tree.
        sub_cmds_mandatory (bool): Default for `Command.sub_cmds_mandatory`.
        vals_mandatory (bool): Default for `Command.vals_mandatory`.
        max_args (int): Maximum number of sub Commands, Options, or Values per Command.
        global_help_prefix (str): Default `Command.help_prefix`.
        subcmds_help_fmt (str): Help format for sub Commands, fields `name` and `description`.
        subcmds_usage_fmt (str): Usage format for sub Commands, field `name`.
        indent_fmt (str): Indentation used by help rendering.
    """

    value_config: ValueConfig = field(default_factory=ValueConfig)
    option_config: OptionConfig = field(default_factory=OptionConfig)
    sub_cmds_mandatory: bool = True
    vals_mandatory: bool = True
    max_args: int = 25
    global_help_prefix: str = ""
    subcmds_help_fmt: str = "{name}: {description}"
    subcmds_usage_fmt: str = "'{name}'"
    indent_fmt: str = "    "

    def __post_init__(self) -> None:
        if not isinstance(self.max_args, int) or self.max_args < 1:
            raise SchemaError("max_args must be a positive integer")


@dataclass(frozen=True)
class InitConfig:
    """Switches for `Command.init()`."""

    validate_cmd: bool = True
    add_help_cmds: bool = True
    add_help_opts: bool = True
    init_subcmds: bool = True


DEFAULT_COMMAND_CONFIG = CommandConfig(value_config=DEFAULT_VALUE_CONFIG)

__all__ = [
    "ValueConfig",
    "OptionConfig",
    "CommandConfig",
    "InitConfig",
    "DEFAULT_VALUE_CONFIG",
    "DEFAULT_COMMAND_CONFIG",
]
