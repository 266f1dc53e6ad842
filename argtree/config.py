# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Schema loader for argtree Command trees.

A schema file (YAML or TOML) declares one root Command and, optionally, a
`settings` table that becomes the `CommandConfig` used to initialize it:

    name: forge
    description: Build tool
    settings:
      max_args: 30
      option:
        long_prefix: "--"
    sub_cmds:
      - name: build
        opts:
          - name: target
            long_name: target
            val: {type: string}
        vals:
          - name: profile
            type: string
            valid_fn: mypkg.checks.valid_profile

`parse_fn` and `valid_fn` are dotted import paths resolved at load time.
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from argtree.command import Command
from argtree.exceptions import SchemaError
from argtree.logger import logger
from argtree.option import Option
from argtree.settings import CommandConfig, OptionConfig
from argtree.value import SetBehavior, Value, ValueConfig

MAX_DEPTH = 16


def import_callable(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise SchemaError(f"Invalid function path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise SchemaError(f"Could not import '{dotted_path}': {error}") from error
    try:
        function = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise SchemaError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(function):
        raise SchemaError(f"'{dotted_path}' is not callable")
    return function


class RawValue(BaseModel):
    """Raw Value model for argtree schema files."""

    name: str = ""
    type: str = "bool"
    description: str = ""
    group: str | None = None
    type_alias: str | None = None
    max_args: int = 1
    set_behavior: str | None = None
    arg_delims: str | None = None
    default: Any = None
    parse_fn: str | None = None
    valid_fn: str | None = None

    @field_validator("set_behavior")
    @classmethod
    def validate_set_behavior(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return SetBehavior(value).value

    @field_validator("max_args")
    @classmethod
    def validate_max_args(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_args must be at least 1")
        return value

    def to_value(self, config: ValueConfig | None = None) -> Value:
        return Value.of_type(
            self.type,
            name=self.name,
            description=self.description,
            group=self.group,
            type_alias=self.type_alias,
            max_args=self.max_args,
            set_behavior=self.set_behavior,
            arg_delims=self.arg_delims,
            default_val=self.default,
            parse_fn=import_callable(self.parse_fn) if self.parse_fn else None,
            valid_fn=import_callable(self.valid_fn) if self.valid_fn else None,
            config=config,
        )


class RawOption(BaseModel):
    """Raw Option model for argtree schema files."""

    name: str
    short_name: str | None = None
    long_name: str | None = None
    description: str = ""
    group: str | None = None
    val: RawValue = Field(default_factory=RawValue)

    def to_option(self, config: ValueConfig | None = None) -> Option:
        return Option(
            name=self.name,
            short_name=self.short_name,
            long_name=self.long_name,
            description=self.description,
            group=self.group,
            val=self.val.to_value(config),
        )


class RawCommand(BaseModel):
    """Raw Command model for argtree schema files."""

    name: str
    description: str = ""
    help_prefix: str | None = None
    sub_cmds_mandatory: bool | None = None
    vals_mandatory: bool | None = None
    sub_cmds: list[RawCommand] = Field(default_factory=list)
    opts: list[RawOption] = Field(default_factory=list)
    vals: list[RawValue] = Field(default_factory=list)

    def to_command(self, config: ValueConfig | None = None, _depth: int = 0) -> Command:
        if _depth > MAX_DEPTH:
            raise SchemaError(f"Maximum command depth exceeded ({MAX_DEPTH} levels deep)")
        return Command(
            name=self.name,
            description=self.description,
            help_prefix=self.help_prefix,
            sub_cmds_mandatory=self.sub_cmds_mandatory,
            vals_mandatory=self.vals_mandatory,
            sub_cmds=[cmd.to_command(config, _depth + 1) for cmd in self.sub_cmds]
            or None,
            opts=[opt.to_option(config) for opt in self.opts] or None,
            vals=[val.to_value(config) for val in self.vals] or None,
        )


RawCommand.model_rebuild()


class RawOptionSettings(BaseModel):
    """Raw `OptionConfig` model."""

    short_prefix: str | None = "-"
    long_prefix: str | None = "--"
    opt_val_seps: str = "="
    allow_opt_val_no_space: bool = True
    allow_abbreviated_long_opts: bool = True


class RawValueSettings(BaseModel):
    """Raw `ValueConfig` model."""

    global_set_behavior: str = SetBehavior.LAST.value
    global_arg_delims: str = ",;"
    max_children: int = 10

    @field_validator("global_set_behavior")
    @classmethod
    def validate_set_behavior(cls, value: str) -> str:
        return SetBehavior(value).value


class RawSettings(BaseModel):
    """Raw `CommandConfig` model."""

    sub_cmds_mandatory: bool = True
    vals_mandatory: bool = True
    max_args: int = 25
    global_help_prefix: str = ""
    option: RawOptionSettings = Field(default_factory=RawOptionSettings)
    value: RawValueSettings = Field(default_factory=RawValueSettings)

    def to_config(self) -> CommandConfig:
        return CommandConfig(
            value_config=ValueConfig(**self.value.model_dump()),
            option_config=OptionConfig(**self.option.model_dump()),
            sub_cmds_mandatory=self.sub_cmds_mandatory,
            vals_mandatory=self.vals_mandatory,
            max_args=self.max_args,
            global_help_prefix=self.global_help_prefix,
        )


def read_schema_file(file_path: Path | str) -> dict[str, Any]:
    """
    Read a YAML or TOML schema file into a dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or does not hold a mapping.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such schema file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as schema_file:
        if suffix in (".yaml", ".yml"):
            raw_schema = yaml.safe_load(schema_file)
        elif suffix == ".toml":
            raw_schema = toml.load(schema_file)
        else:
            raise ValueError(f"Unsupported schema format: {suffix}")

    if not isinstance(raw_schema, dict):
        raise ValueError(
            "Schema file must contain a dictionary describing the root command.\n"
            "Example:\n"
            "name: 'forge'\n"
            "sub_cmds:\n"
            "  - name: 'build'"
        )
    return raw_schema


def command_config_from_dict(raw_schema: dict[str, Any]) -> CommandConfig:
    try:
        settings = RawSettings(**raw_schema.get("settings") or {})
    except ValidationError as error:
        raise SchemaError(f"Invalid settings: {error}") from error
    return settings.to_config()


def command_from_dict(
    raw_schema: dict[str, Any], config: CommandConfig | None = None
) -> Command:
    """Build an uninitialized Command from a schema dictionary."""
    body = {key: value for key, value in raw_schema.items() if key != "settings"}
    try:
        raw_command = RawCommand(**body)
    except ValidationError as error:
        raise SchemaError(f"Invalid command schema: {error}") from error
    value_config = config.value_config if config else None
    return raw_command.to_command(value_config)


def load_schema(file_path: Path | str) -> tuple[Command, CommandConfig]:
    """
    Load a Command tree and its config from a YAML or TOML file.

    Returns:
        tuple[Command, CommandConfig]: The uninitialized root Command and the
        config to pass to `Command.init()`.

    Raises:
        SchemaError: If the schema is invalid.
    """
    raw_schema = read_schema_file(file_path)
    config = command_config_from_dict(raw_schema)
    command = command_from_dict(raw_schema, config)
    logger.debug("Loaded schema for '%s' from '%s'.", command.name, file_path)
    return command, config
