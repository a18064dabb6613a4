#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the pandoc-filter command.

A filter's stdout carries the JSON document back to pandoc, so a single log
line written there corrupts the output. ``configure_logging`` therefore only
ever installs handlers on stderr (or a file) and detaches any root handler
already pointed at stdout, e.g. one left behind by
``logging.basicConfig(stream=sys.stdout)`` in an imported filter module.

Handlers installed here are named ``pandoc_filter.*`` so that calling
``configure_logging`` again replaces them without touching handlers that
other code (test harnesses, embedding applications) attached to the root
logger.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

from pandoc_filter.exceptions import ValidationError

HANDLER_PREFIX = "pandoc_filter."

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "pandoc-filter: %(levelname)s: %(message)s"


def resolve_level(log_level: int | str) -> int:
    """Turn a level name such as ``"info"`` or a numeric level into an int.

    Raises
    ------
    ValidationError
        If ``log_level`` names no logging level

    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValidationError(
            f"Unknown log level: {log_level!r}", parameter_name="log_level", parameter_value=log_level
        )
    return level


def _writes_to_stdout(handler: logging.Handler) -> bool:
    stream = getattr(handler, "stream", None)
    return stream is not None and stream in (sys.stdout, sys.__stdout__)


def _console_stream(stream: Optional[IO[str]]) -> IO[str]:
    if stream is None or stream in (sys.stdout, sys.__stdout__):
        return sys.stderr
    return stream


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Route log output away from the document stream.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name
    log_file : str, optional
        Also append log records to this file
    trace_mode : bool, default False
        Use the timestamped format with logger names
    stream : text stream, optional
        Console stream, defaults to stderr. stdout is never used; passing it
        falls back to stderr.

    Returns
    -------
    logging.Logger
        The root logger

    Raises
    ------
    ValidationError
        If ``log_level`` is not a known level

    """
    level = resolve_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX) or _writes_to_stdout(handler):
            root_logger.removeHandler(handler)
            if handler.get_name():
                handler.close()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    console_handler = logging.StreamHandler(_console_stream(stream))
    console_handler.set_name(f"{HANDLER_PREFIX}console")
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.set_name(f"{HANDLER_PREFIX}file")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    return root_logger


__all__ = ["configure_logging", "resolve_level"]
