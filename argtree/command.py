# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Command`, the container argument of an argtree parse tree.

A Command groups sub Commands, Options, and Values. Trees are declared as plain
data, then initialized once with `Command.init()`, which validates the
declaration, adds the reserved `usage`/`help` sub Commands and Options, binds
the tree-wide `CommandConfig` to every node, and returns a fresh runtime copy.
The parsing engine (`argtree.parser.parse_args`) then fills the copy in place
and links each matched sub Command through `active_sub_cmd`.

Example:
    setup_cmd = Command(
        name="forge",
        sub_cmds=[
            Command(
                name="build",
                opts=[Option(name="target", long_name="target", val=Value.of_type(str))],
                vals=[Value.of_type(str, name="profile")],
            ),
        ],
    )
    forge = setup_cmd.init()
    forge.parse(["build", "--target", "arm64", "release"])
    forge.active_sub_cmd.get_opts()["target"].get()  # "arm64"
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from rich.console import Console

from argtree.console import console as default_console
from argtree.exceptions import CommandNotInitializedError, SchemaError
from argtree.help import render_command_help, render_command_usage
from argtree.logger import logger
from argtree.option import Option
from argtree.parser import ParseConfig, parse_args
from argtree.settings import DEFAULT_COMMAND_CONFIG, CommandConfig, InitConfig
from argtree.value import Value

USAGE = "usage"
HELP = "help"
RESERVED_NAMES = (USAGE, HELP)
RESERVED_SHORT_NAMES = ("u", "h")


@dataclass
class Command:
    """
    Container for sub Commands, Options, and Values.

    Attributes:
        name (str): Name of the Command, matched exactly when used as a sub Command.
        description (str): Help text.
        sub_cmds (list[Command] | None): Sub Commands owned by this Command.
        opts (list[Option] | None): Options owned by this Command.
        vals (list[Value] | None): Positional Values, in the order they are filled.
        sub_cmds_mandatory (bool | None): Require a sub Command; None uses the config default.
        vals_mandatory (bool | None): Require every Value; None uses the config default.
        help_prefix (str | None): Line printed before help; None uses the config default.
        active_sub_cmd (Command | None): The sub Command matched during parsing.
    """

    name: str
    description: str = ""
    sub_cmds: list[Command] | None = None
    opts: list[Option] | None = None
    vals: list[Value] | None = None
    sub_cmds_mandatory: bool | None = None
    vals_mandatory: bool | None = None
    help_prefix: str | None = None
    active_sub_cmd: Command | None = field(default=None, compare=False, repr=False)

    _is_init: bool = field(default=False, init=False, compare=False, repr=False)
    _config: CommandConfig | None = field(
        default=None, init=False, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        if not self.name:
            raise SchemaError("Commands need a name")
        for attr, kind in (("sub_cmds", Command), ("opts", Option), ("vals", Value)):
            items = getattr(self, attr)
            if items is None:
                continue
            items = list(items)
            for item in items:
                if not isinstance(item, kind):
                    raise SchemaError(
                        f"Command '{self.name}' {attr} must contain {kind.__name__} "
                        f"instances, got {type(item).__name__}"
                    )
            setattr(self, attr, items or None)

    @property
    def config(self) -> CommandConfig:
        return self._config or DEFAULT_COMMAND_CONFIG

    @property
    def is_init(self) -> bool:
        return self._is_init

    @property
    def prefix(self) -> str:
        if self.help_prefix is None:
            return self.config.global_help_prefix
        return self.help_prefix

    def is_sub_cmds_mandatory(self) -> bool:
        if self.sub_cmds_mandatory is None:
            return self.config.sub_cmds_mandatory
        return self.sub_cmds_mandatory

    def is_vals_mandatory(self) -> bool:
        if self.vals_mandatory is None:
            return self.config.vals_mandatory
        return self.vals_mandatory

    def set_sub_cmd(self, sub_cmd: Command) -> None:
        self.active_sub_cmd = sub_cmd

    def get_sub_cmd(self, cmd_name: str) -> Command | None:
        """Return the declared sub Command named `cmd_name`, if any."""
        return next((cmd for cmd in self.sub_cmds or [] if cmd.name == cmd_name), None)

    def check_sub_cmd(self, cmd_name: str) -> bool:
        """Return True if the active sub Command is named `cmd_name`."""
        return self.active_sub_cmd is not None and self.active_sub_cmd.name == cmd_name

    def match_sub_cmd(self, cmd_name: str) -> Command | None:
        """Return the active sub Command if it is named `cmd_name`."""
        return self.active_sub_cmd if self.check_sub_cmd(cmd_name) else None

    def active_chain(self) -> Iterator[Command]:
        """Yield this Command followed by each active sub Command, outermost first."""
        cmd: Command | None = self
        while cmd is not None:
            yield cmd
            cmd = cmd.active_sub_cmd

    def _require_init(self) -> None:
        if not self._is_init:
            raise CommandNotInitializedError(
                f"Command '{self.name}' must be initialized with init() first"
            )

    def get_opts(self) -> dict[str, Option]:
        """Return this Command's Options keyed by name."""
        self._require_init()
        return {opt.name: opt for opt in self.opts or []}

    def get_vals(self) -> dict[str, Value]:
        """Return this Command's Values keyed by name."""
        self._require_init()
        return {val.name: val for val in self.vals or []}

    def check_flag(self, flag_name: str) -> bool:
        """
        Return True if `flag_name` was given as a sub Command, a true bool Option,
        or a true bool Value of this Command.
        """
        if self.check_sub_cmd(flag_name):
            return True
        for opt in self.opts or []:
            if opt.name == flag_name and opt.is_bool() and opt.get():
                return True
        for val in self.vals or []:
            if val.name == flag_name and val.is_bool() and val.get():
                return True
        return False

    def check_usage_help(self, console: Console | None = None) -> bool:
        """Render usage or help if it was requested. Returns True if anything was rendered."""
        console = console or default_console
        if self.check_flag(USAGE):
            self.usage(console)
            return True
        if self.check_flag(HELP):
            self.help(console)
            return True
        return False

    def usage(self, console: Console | None = None) -> None:
        render_command_usage(self, console or default_console)

    def help(self, console: Console | None = None) -> None:
        render_command_help(self, console or default_console)

    def validate(
        self,
        config: CommandConfig | None = None,
        check_help_cmds: bool = False,
        check_help_opts: bool = False,
    ) -> None:
        """
        Check that sibling names are distinct and child counts fit `max_args`.

        Args:
            check_help_cmds: Also reserve the `usage`/`help` sub Command names.
            check_help_opts: Also reserve the `usage`/`help` Option names and `u`/`h`.

        Raises:
            SchemaError: On the first violation found.
        """
        config = config or self.config
        for attr in ("sub_cmds", "opts", "vals"):
            items = getattr(self, attr) or []
            if len(items) > config.max_args:
                raise SchemaError(
                    f"Command '{self.name}' has {len(items)} {attr}; "
                    f"the maximum is {config.max_args}"
                )

        cmd_names: set[str] = set(RESERVED_NAMES) if check_help_cmds else set()
        for cmd in self.sub_cmds or []:
            if cmd.name in cmd_names:
                raise SchemaError(f"The Sub Command '{cmd.name}' is set more than once.")
            cmd_names.add(cmd.name)

        opt_names: set[str] = set(RESERVED_NAMES) if check_help_opts else set()
        short_names: set[str] = set(RESERVED_SHORT_NAMES) if check_help_opts else set()
        long_names: set[str] = set(RESERVED_NAMES) if check_help_opts else set()
        for opt in self.opts or []:
            if opt.name in opt_names:
                raise SchemaError(f"The Option '{opt.name}' is set more than once.")
            opt_names.add(opt.name)
            if opt.short_name is not None:
                if opt.short_name in short_names:
                    raise SchemaError(
                        f"The Option Short Name '{opt.short_name}' is set more than once."
                    )
                short_names.add(opt.short_name)
            if opt.long_name is not None:
                if opt.long_name in long_names:
                    raise SchemaError(
                        f"The Option Long Name '{opt.long_name}' is set more than once."
                    )
                long_names.add(opt.long_name)

        val_names: set[str] = set()
        for val in self.vals or []:
            if val.name in val_names:
                raise SchemaError(f"The Value '{val.name}' is set more than once.")
            val_names.add(val.name)

    def _reserved_cmds(self, config: CommandConfig) -> list[Command]:
        reserved = []
        for name in RESERVED_NAMES:
            cmd = Command(
                name=name,
                description=f"Show the '{self.name}' {name} display.",
                help_prefix=self.name,
            )
            cmd._config = config
            cmd._is_init = True
            reserved.append(cmd)
        return reserved

    def _reserved_opts(self, config: CommandConfig) -> list[Option]:
        return [
            Option(
                name=name,
                short_name=short_name,
                long_name=name,
                description=f"Show the '{self.name}' {name} display.",
                val=Value.of_type(bool, name=f"{name}_flag"),
            ).init(config.value_config)
            for name, short_name in zip(RESERVED_NAMES, RESERVED_SHORT_NAMES)
        ]

    def init(
        self,
        config: CommandConfig | None = None,
        init_config: InitConfig | None = None,
        _ancestors: frozenset[int] = frozenset(),
    ) -> Command:
        """
        Validate this declaration and return a runtime-ready copy.

        The copy, and every sub Command when `init_subcmds` is set, has the config
        bound to it and to all of its Options and Values. The declaration itself is
        left untouched.

        Raises:
            SchemaError: If the tree violates its invariants.
        """
        config = config or DEFAULT_COMMAND_CONFIG
        init_config = init_config or InitConfig()
        if id(self) in _ancestors:
            raise SchemaError(f"Command '{self.name}' contains itself")
        ancestors = _ancestors | {id(self)}

        if init_config.validate_cmd:
            self.validate(
                config,
                check_help_cmds=init_config.add_help_cmds,
                check_help_opts=init_config.add_help_opts,
            )

        is_reserved = self.name in RESERVED_NAMES
        sub_cmds: list[Command] = []
        for cmd in self.sub_cmds or []:
            if init_config.init_subcmds:
                sub_cmds.append(cmd.init(config, init_config, ancestors))
            else:
                sub_cmds.append(cmd)
        if init_config.add_help_cmds and not is_reserved:
            sub_cmds.extend(self._reserved_cmds(config))

        opts = [opt.init(config.value_config) for opt in self.opts or []]
        if init_config.add_help_opts:
            opts.extend(self._reserved_opts(config))

        vals = [val.init(config.value_config) for val in self.vals or []]

        init_cmd = Command(
            name=self.name,
            description=self.description,
            sub_cmds=sub_cmds or None,
            opts=opts or None,
            vals=vals or None,
            sub_cmds_mandatory=self.sub_cmds_mandatory,
            vals_mandatory=self.vals_mandatory,
            help_prefix=self.help_prefix,
        )
        init_cmd._config = config
        init_cmd._is_init = True
        logger.debug(
            "[%s] Initialized with %d sub commands, %d options, %d values.",
            self.name,
            len(sub_cmds),
            len(opts),
            len(vals),
        )
        return init_cmd

    def reset(self) -> None:
        """Clear parsed state in this Command and every sub Command."""
        self.active_sub_cmd = None
        for opt in self.opts or []:
            opt.val.reset()
        for val in self.vals or []:
            val.reset()
        for cmd in self.sub_cmds or []:
            cmd.reset()

    def parse(
        self,
        tokens: Iterable[str],
        parse_config: ParseConfig | None = None,
        console: Console | None = None,
    ) -> Command:
        """Parse `tokens` into this initialized Command. See `argtree.parser.parse_args`."""
        return parse_args(tokens, self, parse_config, console)

    def sub_cmd_names(self, include_reserved: bool = False) -> list[str]:
        return [
            cmd.name
            for cmd in self.sub_cmds or []
            if include_reserved or cmd.name not in RESERVED_NAMES
        ]

    def __str__(self) -> str:
        return (
            f"Command(name={self.name!r}, sub_cmds={len(self.sub_cmds or [])}, "
            f"opts={len(self.opts or [])}, vals={len(self.vals or [])}, "
            f"init={self._is_init})"
        )
