# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used for usage/help output."""
from rich.console import Console

console = Console(color_system="truecolor")
