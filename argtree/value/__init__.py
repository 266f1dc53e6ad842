"""
argtree CLI Parsing Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .set_behavior import SetBehavior
from .value_type import (
    BUILTIN_TYPES,
    ValueKind,
    ValueType,
    custom_type,
    resolve_value_type,
)
from .value_config import DEFAULT_VALUE_CONFIG, ValueConfig
from .typed_value import TypedValue
from .value import Value

__all__ = [
    "SetBehavior",
    "ValueKind",
    "ValueType",
    "BUILTIN_TYPES",
    "custom_type",
    "resolve_value_type",
    "ValueConfig",
    "DEFAULT_VALUE_CONFIG",
    "TypedValue",
    "Value",
]
