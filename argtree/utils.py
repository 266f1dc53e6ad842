# argtree CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route argtree's parse decisions to the console and, optionally, a file.

    Args:
        mode: "cli" for Rich console logs or "json" for JSON lines. Defaults to
            the `ARGTREE_LOG_MODE` environment variable, then "cli".
        log_filename: Log file path. No file handler is added when None.
        json_log_to_file: Write the file log as JSON instead of plain text.
        file_log_level: Level for the file handler.
        console_log_level: Level for the console handler.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or os.getenv("ARGTREE_LOG_MODE") or "cli"
    if mode == "cli":
        console_handler: logging.Handler = RichHandler(
            show_path=False, markup=False, log_time_format="[%X]"
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)
            if json_log_to_file
            else logging.Formatter("%(asctime)s [%(name)s] [%(levelname)s] %(message)s")
        )
        root.addHandler(file_handler)

    logging.getLogger("argtree").debug("Logging initialized in '%s' mode.", mode)
