"""
argtree CLI Parsing Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .engine import parse_args
from .parser_types import ParseConfig, TokenStream

__all__ = [
    "parse_args",
    "ParseConfig",
    "TokenStream",
]
