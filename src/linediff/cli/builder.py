#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser and exit codes for the linediff CLI.

The comparison flags are generated from :class:`linediff.options.DiffOptions`
field metadata so that help text lives next to the option it describes. Every
option flag defaults to ``None`` so that only flags actually given on the
command line override values from a configuration file.
"""

from __future__ import annotations

import argparse
from dataclasses import fields

from linediff.exceptions import DiffCancelledError, FileError, ValidationError
from linediff.options import DiffOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_CANCELLED = 130

# (field name, flags, argparse kwargs). Flags follow GNU diff.
_OPTION_FLAGS: tuple[tuple[str, tuple[str, ...], dict], ...] = (
    ("unified", ("-u", "--unified"), {"action": "store_true"}),
    ("unified_context", ("-U", "--unified-context"), {"metavar": "NUM"}),
    ("context_diff", ("-c", "--context-format"), {"action": "store_true"}),
    ("context_lines", ("-C", "--context"), {"metavar": "NUM"}),
    ("brief", ("-q", "--brief"), {"action": "store_true"}),
    ("ignore_case", ("-i", "--ignore-case"), {"action": "store_true"}),
    ("ignore_whitespace", ("-w", "--ignore-all-space"), {"action": "store_true"}),
    ("side_by_side", ("-y", "--side-by-side"), {"action": "store_true"}),
    ("width", ("-W", "--width"), {"metavar": "NUM"}),
    ("recursive", ("-r", "--recursive"), {"action": "store_true"}),
    ("algorithm", ("--algorithm",), {}),
    ("encoding", ("--encoding",), {}),
)


def non_negative_int(value: str) -> int:
    """Parse a context width.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a non-negative integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {ivalue}")

    return ivalue


def positive_int(value: str) -> int:
    """Parse a strictly positive integer."""
    ivalue = non_negative_int(value)
    if ivalue == 0:
        raise argparse.ArgumentTypeError("must be positive, got 0")
    return ivalue


def positive_float(value: str) -> float:
    """Parse a strictly positive number of seconds."""
    try:
        fvalue = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected a number, got '{value}'") from e

    if fvalue <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")

    return fvalue


_ARG_TYPES = {
    "unified_context": non_negative_int,
    "context_lines": non_negative_int,
    "width": positive_int,
}


def get_version() -> str:
    """Get the version of the linediff package."""
    try:
        from importlib.metadata import version

        return version("linediff")
    except Exception:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``linediff`` command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="linediff",
        description="Compare two files line by line (use '-' to read one of them from stdin).",
    )
    parser.add_argument("operands", nargs="*", metavar="FILE", help="Files to compare")

    option_fields = {f.name: f for f in fields(DiffOptions)}
    comparison = parser.add_argument_group("comparison and output options")
    for name, flags, extra in _OPTION_FLAGS:
        metadata = option_fields[name].metadata
        kwargs = dict(extra)
        kwargs.setdefault("help", metadata.get("help"))
        if "choices" in metadata:
            kwargs["choices"] = metadata["choices"]
        if name in _ARG_TYPES:
            kwargs["type"] = _ARG_TYPES[name]
        comparison.add_argument(*flags, dest=name, default=None, **kwargs)

    comparison.add_argument(
        "--label",
        action="append",
        metavar="LABEL",
        help="Use LABEL instead of the file name (may be given twice)",
    )
    comparison.add_argument(
        "--timeout",
        type=positive_float,
        metavar="SECONDS",
        help="Abort the comparison after SECONDS",
    )

    parser.add_argument(
        "--config",
        help="Path to configuration file (TOML, YAML or JSON). "
        "If not specified, searches for .linediff.toml (or .yaml/.yml/.json) or a pyproject.toml "
        "with a [tool.linediff] table from the current directory upwards, then in the home directory.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Disable loading of configuration files, including LINEDIFF_CONFIG and --config.",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamped debug logging",
    )
    parser.add_argument("--version", "-V", action="version", version=f"linediff {get_version()}")

    return parser


def option_overrides(parsed: argparse.Namespace) -> dict:
    """Collect the comparison options that were given on the command line."""
    overrides = {}
    for name, _flags, _extra in _OPTION_FLAGS:
        value = getattr(parsed, name, None)
        if value is not None:
            overrides[name] = value
    return overrides


def get_exit_code_for_exception(exception: BaseException) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : BaseException
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DiffCancelledError, KeyboardInterrupt)):
        return EXIT_CANCELLED

    # Usage errors are validation errors
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    # All other errors (unexpected errors)
    return EXIT_ERROR
