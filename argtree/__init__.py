"""
argtree CLI Parsing Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import Command
from .exceptions import ArgTreeError, CommandArgumentError, SchemaError
from .option import Option
from .parser import ParseConfig, parse_args
from .settings import CommandConfig, InitConfig, OptionConfig
from .value import SetBehavior, Value, ValueConfig, ValueType

logger = logging.getLogger("argtree")


__all__ = [
    "Command",
    "Option",
    "Value",
    "ValueType",
    "SetBehavior",
    "CommandConfig",
    "OptionConfig",
    "ValueConfig",
    "InitConfig",
    "ParseConfig",
    "parse_args",
    "ArgTreeError",
    "CommandArgumentError",
    "SchemaError",
]
