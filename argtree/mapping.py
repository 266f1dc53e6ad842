# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Derive Command trees from Python callables and dataclasses, and project parsed
Commands back into plain Python data.

Declaration:
- command_from_func: Required parameters become Values, defaulted parameters
  become Options, `list[...]` annotations become multi-argument arguments.
- command_from_dataclass: Nested dataclass fields become sub Commands,
  `X | None` fields become Options, and every other supported field becomes a
  Value.

Extraction:
- command_to_dict: Nested dictionary of the active Command chain.
- command_to_dataclass: Populate a dataclass from a parsed Command.
- call_as: Call a function with a parsed Command's Values and Options.

Names are converted between Python (`dry_run`) and command-line (`dry-run`)
syntax unless `convert_syntax=False`.
"""
from __future__ import annotations

import dataclasses
import inspect
import types
from typing import Any, Callable, Union, get_args, get_origin, get_type_hints

from argtree.command import RESERVED_NAMES, RESERVED_SHORT_NAMES, Command
from argtree.exceptions import SchemaError, ValueNotSetError
from argtree.logger import logger
from argtree.option import Option
from argtree.value import DEFAULT_VALUE_CONFIG, SetBehavior, Value

SUPPORTED_TYPES = (bool, int, float, str)


def to_arg_name(name: str, convert_syntax: bool = True) -> str:
    if not convert_syntax:
        return name
    return name[:1] + name[1:].replace("_", "-")


def to_attr_name(name: str, convert_syntax: bool = True) -> str:
    if not convert_syntax:
        return name
    return name.replace("-", "_")


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1 and len(get_args(annotation)) == 2:
            return args[0], True
    return annotation, False


def _unwrap_list(annotation: Any) -> tuple[Any, bool]:
    if get_origin(annotation) in (list, tuple):
        args = [arg for arg in get_args(annotation) if arg is not Ellipsis]
        return (args[0] if args else str), True
    if annotation in (list, tuple):
        return str, True
    return annotation, False


class _ShortNames:
    """Hands out single-character short names from argument names."""

    def __init__(self) -> None:
        self.used: set[str] = set(RESERVED_SHORT_NAMES)

    def take(self, name: str) -> str | None:
        for char in name:
            if not char.isalnum():
                continue
            for candidate in (char.lower(), char.upper()):
                if candidate not in self.used:
                    self.used.add(candidate)
                    return candidate
        return None


def _build_value(
    annotation: Any,
    name: str,
    description: str,
    default: Any,
    max_args: int,
) -> Value | None:
    element_type, is_list = _unwrap_list(annotation)
    if element_type not in SUPPORTED_TYPES:
        return None
    if is_list:
        return Value.of_type(
            element_type,
            name=name,
            description=description,
            max_args=max_args,
            set_behavior=SetBehavior.MULTI,
        )
    return Value.of_type(
        element_type, name=name, description=description, default_val=default
    )


def _first_doc_line(obj: Any) -> str:
    doc = inspect.getdoc(obj) or ""
    return doc.strip().splitlines()[0] if doc.strip() else ""


def command_from_dataclass(
    cls: type,
    *,
    name: str | None = None,
    description: str | None = None,
    descriptions: dict[str, str] | None = None,
    convert_syntax: bool = True,
    attempt_short_opts: bool = True,
    ignore_incompatible: bool = False,
    sub_cmds_mandatory: bool | None = None,
    vals_mandatory: bool | None = None,
    max_args: int | None = None,
) -> Command:
    """
    Create an uninitialized Command from a dataclass.

    Field types are converted as follows:
    - dataclass: sub Command
    - bool, int, float, str: Value
    - `X | None`: Option wrapping a Value of X
    - `list[X]` (optionally `| None`): multi-argument Value or Option

    Args:
        cls: The dataclass to convert.
        name: Command name. Defaults to the class name in lowercase.
        descriptions: Argument descriptions by field name, shared with sub Commands.
        attempt_short_opts: Derive short names from field names.
        ignore_incompatible: Skip unsupported fields instead of raising `SchemaError`.
        max_args: Arity of list fields. Defaults to `max_children`.

    Raises:
        SchemaError: If `cls` is not a dataclass or a field cannot be converted.
    """
    if not dataclasses.is_dataclass(cls) or not isinstance(cls, type):
        raise SchemaError(f"{cls!r} is not a dataclass type")
    descriptions = descriptions or {}
    max_args = max_args or DEFAULT_VALUE_CONFIG.max_children
    hints = get_type_hints(cls)
    short_names = _ShortNames()
    sub_cmds: list[Command] = []
    opts: list[Option] = []
    vals: list[Value] = []

    for data_field in dataclasses.fields(cls):
        if data_field.name.startswith("_"):
            continue
        arg_name = to_arg_name(data_field.name, convert_syntax)
        arg_description = data_field.metadata.get(
            "description", descriptions.get(data_field.name, "")
        )
        if data_field.default is not dataclasses.MISSING:
            default = data_field.default
        elif data_field.default_factory is not dataclasses.MISSING:
            default = data_field.default_factory()
        else:
            default = None
        annotation, is_optional = _unwrap_optional(hints[data_field.name])

        if dataclasses.is_dataclass(annotation):
            sub_cmds.append(
                command_from_dataclass(
                    annotation,
                    name=arg_name,
                    description=arg_description or None,
                    descriptions=descriptions,
                    convert_syntax=convert_syntax,
                    attempt_short_opts=attempt_short_opts,
                    ignore_incompatible=ignore_incompatible,
                    sub_cmds_mandatory=sub_cmds_mandatory,
                    vals_mandatory=vals_mandatory,
                    max_args=max_args,
                )
            )
            continue

        field_max_args = data_field.metadata.get("max_args", max_args)
        value = _build_value(
            annotation,
            f"{arg_name}_val" if is_optional else arg_name,
            arg_description,
            default,
            field_max_args,
        )
        if value is None:
            if ignore_incompatible:
                logger.debug("Skipping incompatible field '%s'.", data_field.name)
                continue
            raise SchemaError(
                f"Field '{data_field.name}' of type {hints[data_field.name]!r} "
                "cannot be converted to an argument"
            )
        if is_optional:
            opts.append(
                Option(
                    name=arg_name,
                    short_name=short_names.take(arg_name) if attempt_short_opts else None,
                    long_name=arg_name,
                    description=arg_description,
                    val=value,
                )
            )
        else:
            vals.append(value)

    return Command(
        name=name or cls.__name__.lower(),
        description=description if description is not None else _first_doc_line(cls),
        sub_cmds=sub_cmds or None,
        opts=opts or None,
        vals=vals or None,
        sub_cmds_mandatory=sub_cmds_mandatory,
        vals_mandatory=vals_mandatory,
    )


def command_from_func(
    func: Callable[..., Any],
    *,
    name: str | None = None,
    description: str | None = None,
    descriptions: dict[str, str] | None = None,
    convert_syntax: bool = True,
    attempt_short_opts: bool = True,
    ignore_incompatible: bool = False,
    max_args: int | None = None,
) -> Command:
    """
    Create an uninitialized Command from a function signature.

    Parameters without a default become Values in signature order. Parameters
    with a default become Options; a bool parameter defaulting to False becomes a
    flag. Unannotated parameters are treated as `str`.

    Raises:
        SchemaError: If `func` is not callable or a parameter cannot be converted.
    """
    if not callable(func):
        raise SchemaError(f"{func!r} is not callable")
    descriptions = descriptions or {}
    max_args = max_args or DEFAULT_VALUE_CONFIG.max_children
    signature = inspect.signature(func)
    try:
        hints = get_type_hints(func)
    except (NameError, TypeError):
        hints = {}
    short_names = _ShortNames()
    opts: list[Option] = []
    vals: list[Value] = []

    for param_name, param in signature.parameters.items():
        if param.kind not in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.KEYWORD_ONLY,
        ):
            continue
        annotation = hints.get(param_name, str)
        annotation, _ = _unwrap_optional(annotation)
        arg_name = to_arg_name(param_name, convert_syntax)
        arg_description = descriptions.get(param_name, "")
        is_required = param.default is inspect.Parameter.empty
        default = None if is_required else param.default
        if annotation is bool and default is False:
            default = None

        value = _build_value(
            annotation,
            arg_name if is_required else f"{arg_name}_val",
            arg_description,
            default,
            max_args,
        )
        if value is None:
            if ignore_incompatible:
                logger.debug("Skipping incompatible parameter '%s'.", param_name)
                continue
            raise SchemaError(
                f"Parameter '{param_name}' of type {annotation!r} "
                "cannot be converted to an argument"
            )
        if is_required:
            vals.append(value)
        else:
            opts.append(
                Option(
                    name=arg_name,
                    short_name=short_names.take(arg_name) if attempt_short_opts else None,
                    long_name=arg_name,
                    description=arg_description,
                    val=value,
                )
            )

    return Command(
        name=name or to_arg_name(func.__name__, convert_syntax),
        description=description if description is not None else _first_doc_line(func),
        opts=opts or None,
        vals=vals or None,
    )


def _read(value: Value) -> Any:
    if value.max_args > 1:
        return value.get_all()
    return value.get()


def _read_or_none(value: Value) -> Any:
    try:
        return _read(value)
    except ValueNotSetError:
        return None


def command_to_dict(cmd: Command, convert_syntax: bool = True) -> dict[str, Any]:
    """
    Project a parsed Command into a nested dictionary.

    Options and Values map to their parsed value (a list for multi-argument
    ones), or None when unset without a default. The active sub Command, if
    any, maps to its own dictionary. The reserved usage/help arguments are left
    out.
    """
    result: dict[str, Any] = {}
    for opt in cmd.opts or []:
        if opt.name in RESERVED_NAMES:
            continue
        result[to_attr_name(opt.name, convert_syntax)] = _read_or_none(opt.val)
    for val in cmd.vals or []:
        result[to_attr_name(val.name, convert_syntax)] = _read_or_none(val)
    sub_cmd = cmd.active_sub_cmd
    if sub_cmd is not None and sub_cmd.name not in RESERVED_NAMES:
        result[to_attr_name(sub_cmd.name, convert_syntax)] = command_to_dict(
            sub_cmd, convert_syntax
        )
    return result


def command_to_dataclass(
    cmd: Command,
    cls: type,
    *,
    convert_syntax: bool = True,
    allow_unset: bool = True,
) -> Any:
    """
    Populate an instance of the dataclass `cls` from a parsed Command.

    Nested dataclass fields are filled from the active sub Command when its name
    matches, and set to None otherwise. Unset arguments fall back to the field
    default, then to None.

    Raises:
        ValueNotSetError: If an argument is unset and `allow_unset` is False.
    """
    if not dataclasses.is_dataclass(cls) or not isinstance(cls, type):
        raise SchemaError(f"{cls!r} is not a dataclass type")
    hints = get_type_hints(cls)
    arguments: dict[str, Value] = {
        to_attr_name(opt.name, convert_syntax): opt.val for opt in cmd.opts or []
    }
    arguments.update(
        (to_attr_name(val.name, convert_syntax), val) for val in cmd.vals or []
    )
    kwargs: dict[str, Any] = {}
    for data_field in dataclasses.fields(cls):
        if not data_field.init:
            continue
        annotation, _ = _unwrap_optional(hints[data_field.name])
        if dataclasses.is_dataclass(annotation):
            sub_cmd = cmd.match_sub_cmd(to_arg_name(data_field.name, convert_syntax))
            kwargs[data_field.name] = (
                command_to_dataclass(
                    sub_cmd,
                    annotation,
                    convert_syntax=convert_syntax,
                    allow_unset=allow_unset,
                )
                if sub_cmd is not None
                else None
            )
            continue
        value = arguments.get(data_field.name)
        if value is None:
            continue
        if value.is_set or value.has_default or value.is_bool():
            kwargs[data_field.name] = _read(value)
        elif not allow_unset:
            raise ValueNotSetError(f"'{value.name}' has not been set")
        elif (
            data_field.default is dataclasses.MISSING
            and data_field.default_factory is dataclasses.MISSING
        ):
            kwargs[data_field.name] = None
    return cls(**kwargs)


def call_as(cmd: Command, func: Callable[..., Any], *args: Any) -> Any:
    """
    Call `func` with the parsed arguments of `cmd`.

    `args` are passed first, followed by every Value of `cmd` in declaration
    order. Set Options whose names match keyword parameters of `func` are
    passed as keywords.
    """
    positional = list(args)
    positional.extend(_read(val) for val in cmd.vals or [])
    parameters = inspect.signature(func).parameters
    kwargs = {
        to_attr_name(opt.name): _read(opt.val)
        for opt in cmd.opts or []
        if opt.name not in RESERVED_NAMES
        and to_attr_name(opt.name) in parameters
        and (opt.is_set or opt.val.has_default)
    }
    logger.debug(
        "Calling '%s' with %d positional and %d keyword arguments.",
        getattr(func, "__name__", func),
        len(positional),
        len(kwargs),
    )
    return func(*positional, **kwargs)
