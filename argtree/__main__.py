"""
argtree CLI Parsing Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from typing import Any

from rich.markup import escape
from rich.tree import Tree

from argtree.command import RESERVED_NAMES, Command
from argtree.config import load_schema
from argtree.console import console
from argtree.exceptions import ArgTreeError, CommandArgumentError
from argtree.parser import ParseConfig
from argtree.utils import setup_logging


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="argtree",
        description="Parse tokens against an argtree schema and print the parse tree.",
    )
    parser.add_argument("schema", help="Path to a YAML or TOML schema file.")
    parser.add_argument(
        "tokens", nargs=REMAINDER, help="Tokens to parse against the schema."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log parsing decisions."
    )
    return parser


def _describe(value: Any) -> str:
    if not value.is_set:
        if value.has_default:
            return f"{escape(repr(value.get()))} (default)"
        return "[dim]unset[/dim]"
    if value.max_args > 1:
        return escape(repr(value.get_all()))
    return escape(repr(value.get()))


def build_tree(cmd: Command, tree: Tree | None = None) -> Tree:
    """Build a Rich tree of the active Command chain and its parsed arguments."""
    branch = Tree(f"[bold]{escape(cmd.name)}[/bold]") if tree is None else tree
    for opt in cmd.opts or []:
        if opt.name in RESERVED_NAMES and not opt.is_set:
            continue
        branch.add(f"--{escape(opt.name)}: {_describe(opt.val)}")
    for val in cmd.vals or []:
        branch.add(f"{escape(val.name)}: {_describe(val)}")
    if cmd.active_sub_cmd is not None:
        sub_branch = branch.add(f"[bold]{escape(cmd.active_sub_cmd.name)}[/bold]")
        build_tree(cmd.active_sub_cmd, sub_branch)
    return branch


def run(args: Namespace) -> int:
    if args.verbose:
        setup_logging(mode="cli", console_log_level=logging.DEBUG)
    try:
        setup_cmd, config = load_schema(args.schema)
        cmd = setup_cmd.init(config)
    except (ArgTreeError, OSError, ValueError) as error:
        console.print(f"[bold red]Schema error:[/bold red] {escape(str(error))}")
        return 1
    try:
        cmd.parse(args.tokens, ParseConfig(auto_handle_usage_help=True), console)
    except CommandArgumentError as error:
        console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
        cmd.usage(console)
        return 2
    console.print(build_tree(cmd))
    return 0


def main() -> int:
    return run(get_parser().parse_args())


if __name__ == "__main__":
    sys.exit(main())
