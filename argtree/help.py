# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Usage and help rendering for Values, Options, and Commands.

Text is built from the format strings on the bound configs
(`ValueConfig.vals_usage_fmt`, `OptionConfig.usage_fmt`,
`CommandConfig.subcmds_help_fmt`, ...) and printed through a Rich `Console`.
User supplied names and descriptions are escaped so brackets in them are never
read as Rich markup.

The `*_text()` helpers return plain strings and are what the renderers print;
they are also handy for embedding usage lines in other output.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from argtree.command import Command
    from argtree.option import Option
    from argtree.settings import OptionConfig
    from argtree.value import Value

RESERVED_NAMES = ("usage", "help")


def _option_config(config: OptionConfig | None) -> OptionConfig:
    if config is not None:
        return config
    from argtree.settings import OptionConfig

    return OptionConfig()


def value_usage_text(value: Value) -> str:
    return value.config.vals_usage_fmt.format(name=value.name, type=value.child_type)


def value_help_text(value: Value) -> str:
    return value.config.vals_help_fmt.format(
        name=value.name, type=value.child_type, description=value.description
    )


def option_usage_text(option: Option, config: OptionConfig | None = None) -> str:
    config = _option_config(config)
    has_short = option.short_name is not None and config.short_prefix is not None
    has_long = option.long_name is not None and config.long_prefix is not None
    text = config.usage_fmt.format(
        short_prefix=config.short_prefix if has_short else "",
        short_name=option.short_name if has_short else "",
        long_prefix=config.long_prefix if has_long else "",
        long_name=option.long_name if has_long else "",
        val_name=option.val.name,
        val_type=option.val.child_type,
    )
    # drop the separator left behind by a missing name
    if not has_short:
        text = text.replace("[,", "[", 1)
    if not has_long:
        text = text.replace(", ", " ", 1)
    return text


def option_help_lines(
    option: Option, config: OptionConfig | None = None, indent: str = "    "
) -> list[str]:
    config = _option_config(config)
    if config.help_fmt is not None:
        return [config.help_fmt.format(name=option.name, description=option.description)]
    lines = [option.name[:1].upper() + option.name[1:] + ":"]
    lines.append(f"{indent}{option_usage_text(option, config)}")
    if option.description:
        lines.append(f"{indent}{option.description}")
    return lines


def command_usage_text(cmd: Command) -> str:
    """Return the one-line usage for `cmd`: name, sub Commands, Options, then Values."""
    config = cmd.config
    parts = [f"{cmd.prefix} {cmd.name}".strip()]
    sub_cmds = [
        config.subcmds_usage_fmt.format(name=sub_cmd.name)
        for sub_cmd in cmd.sub_cmds or []
        if sub_cmd.name not in RESERVED_NAMES
    ]
    if sub_cmds:
        parts.append(" | ".join(sub_cmds))
    parts.extend(
        option_usage_text(opt, config.option_config) for opt in cmd.opts or []
    )
    parts.extend(value_usage_text(val) for val in cmd.vals or [])
    return " ".join(parts)


def command_help_lines(cmd: Command) -> list[str]:
    """Return the help body for `cmd`, one entry per printed line."""
    config = cmd.config
    indent = config.indent_fmt
    lines = [f"{indent}COMMAND: {cmd.name}"]
    if cmd.description:
        lines.append(f"{indent}DESCRIPTION: {cmd.description}")

    sub_cmds = [
        sub_cmd for sub_cmd in cmd.sub_cmds or [] if sub_cmd.name not in RESERVED_NAMES
    ]
    if sub_cmds:
        lines.append("")
        lines.append(f"{indent}SUB COMMANDS:")
        for sub_cmd in sub_cmds:
            entry = config.subcmds_help_fmt.format(
                name=sub_cmd.name, description=sub_cmd.description
            )
            lines.append(f"{indent * 2}{entry}")

    if cmd.opts:
        lines.append("")
        lines.append(f"{indent}OPTIONS:")
        for opt in cmd.opts:
            lines.extend(
                f"{indent * 2}{line}"
                for line in option_help_lines(opt, config.option_config, indent)
            )

    if cmd.vals:
        lines.append("")
        lines.append(f"{indent}VALUES:")
        lines.extend(f"{indent * 2}{value_help_text(val)}" for val in cmd.vals)
    return lines


def render_value_usage(value: Value, console: Console) -> None:
    console.print(escape(value_usage_text(value)))


def render_value_help(value: Value, console: Console) -> None:
    console.print(escape(value_help_text(value)))


def render_option_usage(
    option: Option, console: Console, config: OptionConfig | None = None
) -> None:
    console.print(escape(option_usage_text(option, config)))


def render_option_help(
    option: Option, console: Console, config: OptionConfig | None = None
) -> None:
    for line in option_help_lines(option, config):
        console.print(escape(line))


def render_command_usage(cmd: Command, console: Console) -> None:
    console.print(f"[bold]USAGE:[/bold] {escape(command_usage_text(cmd))}")


def render_command_help(cmd: Command, console: Console) -> None:
    """
    Print the full help for `cmd`.

    Layout:
        <help prefix>
        HELP:
            COMMAND: <name>
            DESCRIPTION: <description>

            SUB COMMANDS:
            OPTIONS:
            VALUES:

        USAGE: <usage line>
    """
    if cmd.prefix:
        console.print(escape(cmd.prefix))
    console.print("[bold]HELP:[/bold]")
    for line in command_help_lines(cmd):
        console.print(escape(line))
    console.print()
    render_command_usage(cmd, console)
