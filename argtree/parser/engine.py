# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The argtree parsing engine.

`parse_args()` walks the token stream once, left to right, filling an
initialized Command tree in place. Within each Command context every token is
classified in priority order:

1. Option: a prefixed token naming one of the Command's Options, by short name
   (`-t`, `-tVALUE`, `-t=VALUE`, chained bools `-abc`) or long name
   (`--target`, `--target=VALUE`, abbreviated `--tar`).
2. Sub Command: an exact sub Command name. The sub Command becomes the
   parent's `active_sub_cmd` and consumes every remaining token.
3. Value: the next Value, in declaration order, that is not yet maxed.

Mandatory sub Commands and Values are enforced when a context runs out of
tokens, innermost Command first. Requests for usage/help, by flag or by the
reserved sub Commands, suspend those checks so they can be served after an
otherwise incomplete command line.

Failures raise a `CommandArgumentError` subclass carrying the failing token and
argument name. Nothing is rolled back: Options and Values filled before the
failure keep their state.
"""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable

from rich.console import Console

from argtree.console import console as default_console
from argtree.exceptions import (
    ClassificationError,
    CommandArgumentError,
    CommandNotInitializedError,
    MissingOptionValueError,
    MissingSubCommandError,
    MissingValueError,
    TooManyValuesError,
    UnexpectedArgumentError,
    UnrecognizedOptionError,
)
from argtree.logger import logger
from argtree.parser.parser_types import ParseConfig, TokenStream

if TYPE_CHECKING:
    from argtree.command import Command
    from argtree.option import Option
    from argtree.settings import OptionConfig
    from argtree.value import Value

NEGATIVE_NUMBER = re.compile(r"^-(\d|\.\d)")
USAGE_HELP = ("usage", "help")


def parse_args(
    tokens: Iterable[str],
    cmd: Command,
    parse_config: ParseConfig | None = None,
    console: Console | None = None,
) -> Command:
    """
    Parse `tokens` into the initialized Command `cmd`.

    Args:
        tokens: Raw argument tokens, already split by the shell.
        cmd: A Command returned by `Command.init()`.
        parse_config: Per-call switches. Defaults to `ParseConfig()`.
        console: Sink for automatic usage/help output.

    Returns:
        Command: `cmd`, now holding the parsed state.

    Raises:
        CommandNotInitializedError: If `cmd` was not initialized.
        CommandArgumentError: On the first token or constraint that fails.
    """
    if not cmd.is_init:
        raise CommandNotInitializedError(
            f"Command '{cmd.name}' must be initialized with init() before parsing"
        )
    parse_config = parse_config or ParseConfig()
    stream = TokenStream(tokens)
    if parse_config.skip_exe_name_arg:
        exe_name = stream.next()
        logger.debug("[%s] Skipping executable name '%s'.", cmd.name, exe_name)

    try:
        _parse_command(stream, cmd, cmd, parse_config)
    except CommandArgumentError as error:
        logger.debug(
            "[%s] Parsing failed at token %d (%s): %s",
            cmd.name,
            stream.consumed,
            error.token,
            error,
        )
        raise

    if parse_config.auto_handle_usage_help:
        for active in reversed(list(cmd.active_chain())):
            if active.check_usage_help(console or default_console):
                break
    return cmd


def _parse_command(
    stream: TokenStream, cmd: Command, root: Command, parse_config: ParseConfig
) -> None:
    opt_config = cmd.config.option_config
    no_space = parse_config.allow_opt_val_no_space
    if no_space is None:
        no_space = opt_config.allow_opt_val_no_space

    for token in stream:
        logger.debug("[%s] Token '%s'.", cmd.name, token)
        if _is_option_token(token, opt_config):
            if _parse_option(token, stream, cmd, opt_config, no_space):
                continue
            if not NEGATIVE_NUMBER.match(token) or _next_open_value(cmd) is None:
                raise UnrecognizedOptionError(
                    f"Unrecognized option '{token}' for command '{cmd.name}'",
                    token=token,
                    argument=cmd.name,
                )
        else:
            sub_cmd = cmd.get_sub_cmd(token)
            if sub_cmd is not None:
                logger.debug("[%s] Entering sub command '%s'.", cmd.name, sub_cmd.name)
                cmd.set_sub_cmd(sub_cmd)
                _parse_command(stream, sub_cmd, root, parse_config)
                break

        val = _next_open_value(cmd)
        if val is not None:
            logger.debug("[%s] Setting value '%s' to '%s'.", cmd.name, val.name, token)
            val.set(token)
            continue
        if cmd.vals:
            raise TooManyValuesError(
                f"Too many values for command '{cmd.name}': unexpected '{token}'",
                token=token,
                argument=cmd.name,
            )
        raise UnexpectedArgumentError(
            f"Unexpected argument '{token}' for command '{cmd.name}'",
            token=token,
            argument=cmd.name,
        )

    _check_mandatory(cmd, root, parse_config)


def _next_open_value(cmd: Command) -> Value | None:
    return next((val for val in cmd.vals or [] if not val.is_maxed), None)


def _is_option_token(token: str, opt_config: OptionConfig) -> bool:
    long_prefix = opt_config.long_prefix
    if long_prefix and token.startswith(long_prefix) and len(token) > len(long_prefix):
        return True
    short_prefix = opt_config.short_prefix
    return bool(short_prefix) and token.startswith(short_prefix) and len(token) > 1


def _is_long_token(token: str, opt_config: OptionConfig) -> bool:
    long_prefix = opt_config.long_prefix
    return (
        bool(long_prefix)
        and token.startswith(long_prefix)
        and len(token) > len(long_prefix)
    )


def _split_inline(text: str, seps: str) -> tuple[str, str | None]:
    idx = next((i for i, char in enumerate(text) if char in seps), None)
    if idx is None:
        return text, None
    return text[:idx], text[idx + 1 :]


def _find_short(cmd: Command, char: str) -> Option | None:
    return next((opt for opt in cmd.opts or [] if opt.short_name == char), None)


def _find_long(cmd: Command, name: str, opt_config: OptionConfig) -> Option | None:
    opts = [opt for opt in cmd.opts or [] if opt.long_name is not None]
    exact = next((opt for opt in opts if opt.long_name == name), None)
    if exact is not None or not opt_config.allow_abbreviated_long_opts or not name:
        return exact
    return next((opt for opt in opts if opt.long_name.startswith(name)), None)


def _names_option(token: str, cmd: Command, opt_config: OptionConfig) -> bool:
    """Return True if `token` would be consumed as one of `cmd`'s Options."""
    if not _is_option_token(token, opt_config):
        return False
    if _is_long_token(token, opt_config):
        prefix_len = len(opt_config.long_prefix)
        name, _ = _split_inline(token[prefix_len:], opt_config.opt_val_seps)
        if _find_long(cmd, name, opt_config) is not None:
            return True
    if opt_config.short_prefix and token.startswith(opt_config.short_prefix):
        return _find_short(cmd, token[1]) is not None
    return False


def _set_inline(opt: Option, token: str, value: str) -> None:
    logger.debug("[%s] Inline value '%s' from '%s'.", opt.name, value, token)
    opt.set(value)


def _set_from_next(
    opt: Option, token: str, stream: TokenStream, cmd: Command, opt_config: OptionConfig
) -> None:
    if opt.is_bool():
        opt.set("true")
        return
    next_token = stream.peek()
    if next_token is None or _names_option(next_token, cmd, opt_config):
        raise MissingOptionValueError(
            f"Option '{opt.name}' expects a value of type '{opt.val.child_type}'",
            token=token,
            argument=opt.name,
        )
    opt.set(stream.next())


def _parse_option(
    token: str,
    stream: TokenStream,
    cmd: Command,
    opt_config: OptionConfig,
    no_space: bool,
) -> bool:
    """
    Apply an Option token to `cmd`.

    Returns:
        bool: False if the token names none of `cmd`'s Options.
    """
    seps = opt_config.opt_val_seps
    if _is_long_token(token, opt_config):
        name, inline = _split_inline(token[len(opt_config.long_prefix) :], seps)
        opt = _find_long(cmd, name, opt_config)
        if opt is not None:
            logger.debug("[%s] Long option '%s' -> '%s'.", cmd.name, name, opt.name)
            if inline is not None:
                _set_inline(opt, token, inline)
            else:
                _set_from_next(opt, token, stream, cmd, opt_config)
            return True
        if opt_config.long_prefix != opt_config.short_prefix:
            return False

    if not opt_config.short_prefix or not token.startswith(opt_config.short_prefix):
        return False
    chain = token[len(opt_config.short_prefix) :]
    for idx, char in enumerate(chain):
        opt = _find_short(cmd, char)
        if opt is None:
            if idx == 0:
                return False
            raise UnrecognizedOptionError(
                f"Unrecognized short option '{char}' in '{token}'",
                token=token,
                argument=cmd.name,
            )
        logger.debug("[%s] Short option '%s' -> '%s'.", cmd.name, char, opt.name)
        rest = chain[idx + 1 :]
        if rest and rest[0] in seps:
            _set_inline(opt, token, rest[1:])
            return True
        if opt.is_bool():
            opt.set("true")
            continue
        if not rest:
            _set_from_next(opt, token, stream, cmd, opt_config)
            return True
        if no_space:
            opt.set(rest)
            return True
        raise ClassificationError(
            f"Option '{opt.name}' needs a value and cannot be chained in '{token}'",
            token=token,
            argument=opt.name,
        )
    return True


def _usage_help_requested(root: Command) -> bool:
    return any(
        active.check_flag(flag) for active in root.active_chain() for flag in USAGE_HELP
    )


def _check_mandatory(cmd: Command, root: Command, parse_config: ParseConfig) -> None:
    if _usage_help_requested(root):
        logger.debug("[%s] Usage/help requested; skipping mandatory checks.", cmd.name)
        return
    sub_cmd_names = cmd.sub_cmd_names()
    if cmd.is_sub_cmds_mandatory() and sub_cmd_names and cmd.active_sub_cmd is None:
        raise MissingSubCommandError(
            f"Command '{cmd.name}' requires a sub command: {', '.join(sub_cmd_names)}",
            argument=cmd.name,
        )
    if parse_config.vals_mandatory and cmd.is_vals_mandatory():
        for val in cmd.vals or []:
            if not val.is_set and not val.has_default:
                raise MissingValueError(
                    f"Command '{cmd.name}' requires the value '{val.name}' "
                    f"({val.child_type})",
                    argument=val.name,
                )
