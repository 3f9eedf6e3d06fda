#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/cli/commands/diff.py
"""Diff command for the linediff CLI.

This module parses the command line, layers configuration-file defaults under
the flags that were actually given, configures logging, and hands the
operands to :func:`linediff.command.run_diff`.
"""

from __future__ import annotations

import argparse
import logging
import sys

from linediff.cancellation import CancellationToken
from linediff.cli.builder import (
    EXIT_VALIDATION_ERROR,
    create_parser,
    get_exit_code_for_exception,
    option_overrides,
)
from linediff.cli.config import extract_diff_options, load_config_with_priority
from linediff.command import PROGRAM_NAME, run_diff
from linediff.exceptions import DiffCancelledError, ValidationError
from linediff.logging_utils import configure_logging
from linediff.options import DiffOptions

logger = logging.getLogger(__name__)

MAX_LABELS = 2


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    ``--trace`` forces DEBUG with the timestamped format; otherwise
    ``--log-level`` applies.
    """
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace) -> DiffOptions:
    """Combine configuration-file values and command-line flags.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    DiffOptions
        Options with flags given on the command line taking precedence

    Raises
    ------
    argparse.ArgumentTypeError
        If a configuration file cannot be loaded
    ValidationError
        If a configuration key is unknown or a value is invalid

    """
    config: dict = {}
    if not parsed_args.no_config:
        config = load_config_with_priority(explicit_path=parsed_args.config)

    options = DiffOptions.from_mapping(extract_diff_options(config))
    return DiffOptions.from_mapping(option_overrides(parsed_args), base=options)


def handle_diff_command(args: list[str] | None = None) -> int:
    """Handle the diff command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code (0 when the files were compared, whether or not they differ)

    """
    parser = create_parser()
    try:
        # Options may appear anywhere among the operands, as with GNU diff
        parsed = parser.parse_intermixed_args(args)
    except SystemExit as e:
        # argparse exits 0 for --help/--version and 2 for usage errors
        if e.code in (0, None):
            return 0
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed)

    try:
        options = build_options(parsed)
    except (argparse.ArgumentTypeError, ValidationError) as e:
        print(f"{PROGRAM_NAME}: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    labels = parsed.label or []
    if len(labels) > MAX_LABELS:
        print(f"{PROGRAM_NAME}: too many file label options", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    token = CancellationToken.with_timeout(parsed.timeout) if parsed.timeout else CancellationToken()

    try:
        return run_diff(parsed.operands, options, labels=labels, token=token)
    except (DiffCancelledError, KeyboardInterrupt) as e:
        logger.info("Comparison cancelled: %s", e)
        return get_exit_code_for_exception(e)
