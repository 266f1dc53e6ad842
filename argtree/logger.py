# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for argtree."""
import logging

logger: logging.Logger = logging.getLogger("argtree")
