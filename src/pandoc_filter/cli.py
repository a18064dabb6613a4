#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line driver running filter actions as a pandoc JSON filter.

The ``pandoc-filter`` command reads a JSON-formatted pandoc document from
stdin, applies one or more actions to it, and writes the result to stdout.
pandoc passes the target format as the first argument, so the command can be
handed to pandoc directly once its actions are configured.

Examples
--------
Name actions on the command line::

    $ pandoc doc.md -t json | pandoc-filter html -a myfilters.caps:action | pandoc -f json -t html

Or configure them (``.pandoc-filter.toml``, ``PANDOC_FILTER_ACTIONS``) and
let pandoc call the command::

    $ export PANDOC_FILTER_ACTIONS="myfilters.caps:action,filters/links.py:rewrite"
    $ pandoc doc.md --filter pandoc-filter -o doc.html

When any action is a coroutine function the whole chain runs under the
asynchronous walker.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import IO, Any, Callable, Optional

from pandoc_filter import __version__
from pandoc_filter.config import FilterConfig, load_filter_config
from pandoc_filter.constants import (
    EXIT_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)
from pandoc_filter.exceptions import ParsingError, RenderingError, ValidationError
from pandoc_filter.filter import apply_filters, apply_filters_async
from pandoc_filter.logging_utils import configure_logging
from pandoc_filter.registry import is_async_action, load_action
from pandoc_filter.serialization import read_document, write_document

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``pandoc-filter`` command."""
    parser = argparse.ArgumentParser(
        prog="pandoc-filter",
        description="Apply filter actions to a JSON-formatted pandoc document read from stdin.",
    )
    parser.add_argument(
        "format",
        nargs="?",
        default="",
        help="Target output format, passed to every action (pandoc supplies this)",
    )
    parser.add_argument(
        "-a",
        "--action",
        dest="actions",
        action="append",
        metavar="SPEC",
        help="Filter action as module:attr, file.py:attr or an entry point name (repeatable, applied in order)",
    )
    parser.add_argument("--config", help="Configuration file (TOML, YAML or JSON)")
    parser.add_argument("--no-config", action="store_true", help="Do not discover a configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _setup_logging(parsed_args: argparse.Namespace, config: FilterConfig) -> None:
    trace = parsed_args.trace or config.trace
    if trace:
        log_level: int | str = logging.DEBUG
    else:
        log_level = parsed_args.log_level or config.log_level
    configure_logging(log_level, log_file=parsed_args.log_file or config.log_file, trace_mode=trace)


def run_actions(
    actions: list[Callable[..., Any]],
    format: str,
    stdin: IO[str],
    stdout: IO[str],
) -> int:
    """Read a document, apply ``actions`` in order, and write the result.

    The asynchronous walker is used when any action is asynchronous.
    Whatever an action raises, including a malformed element it tried to
    build, is an action failure: it is logged, nothing is written, and
    ``EXIT_ERROR`` is returned. Input and output errors propagate.

    Returns
    -------
    int
        Process exit code

    """
    doc = read_document(stdin)
    try:
        if any(is_async_action(action) for action in actions):
            logger.debug("Running %d action(s) with the async walker", len(actions))
            output = asyncio.run(apply_filters_async(doc, actions, format))
        else:
            logger.debug("Running %d action(s)", len(actions))
            output = apply_filters(doc, actions, format)
    except Exception as e:
        logger.error("Filter action failed: %s", e)
        logger.debug("Filter action failed", exc_info=True)
        return EXIT_ERROR
    write_document(output, stdout)
    return EXIT_SUCCESS


def main(args: list[str] | None = None, stdin: Optional[IO[str]] = None, stdout: Optional[IO[str]] = None) -> int:
    """Execute the ``pandoc-filter`` command.

    Parameters
    ----------
    args : list of str, optional
        Command line arguments, defaults to ``sys.argv[1:]``
    stdin, stdout : text streams, optional
        Defaults to ``sys.stdin`` / ``sys.stdout``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        config = load_filter_config(parsed_args.config, no_config=parsed_args.no_config)
        _setup_logging(parsed_args, config)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    specs = parsed_args.actions or config.actions
    if not specs:
        logger.error("No filter actions given; use --action or configure 'actions'")
        return EXIT_VALIDATION_ERROR

    try:
        actions = [load_action(spec) for spec in specs]
        return run_actions(actions, parsed_args.format, stdin or sys.stdin, stdout or sys.stdout)
    except Exception as e:
        logger.error("%s", e)
        logger.debug("Filter failed", exc_info=True)
        return get_exit_code_for_exception(e)


__all__ = ["create_parser", "get_exit_code_for_exception", "run_actions", "main"]
