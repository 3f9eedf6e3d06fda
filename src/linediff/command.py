#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/command.py
"""Toolkit-facing executor for one diff invocation.

:func:`run_diff` is what a shell toolkit calls with its own operands and
streams. It validates the operand list, runs the comparison, writes the report
to ``stdout`` and diagnostics in the form ``diff: <path>: <reason>`` to
``stderr``, and returns a process exit code.
"""

from __future__ import annotations

import logging
import sys
from typing import Sequence, TextIO

from linediff.cancellation import CancellationToken
from linediff.cli.builder import EXIT_SUCCESS, get_exit_code_for_exception
from linediff.constants import PROGRAM_NAME
from linediff.exceptions import FileError, UsageError
from linediff.loader import is_stdin
from linediff.options import DiffOptions
from linediff.text_diff import compare_files, write_diff

logger = logging.getLogger(__name__)


def validate_operands(operands: Sequence[str]) -> tuple[str, str]:
    """Check that exactly two operands were given and at most one reads stdin.

    Parameters
    ----------
    operands : Sequence[str]
        Operands in command-line order

    Returns
    -------
    tuple[str, str]
        The two operands

    Raises
    ------
    UsageError
        If an operand is missing, an extra operand is present, or both
        operands are ``-``

    """
    operands = [str(operand) for operand in operands]
    if not operands:
        raise UsageError("missing operand", operands=operands)
    if len(operands) == 1:
        raise UsageError(f"missing operand after '{operands[0]}'", operands=operands)
    if len(operands) > 2:
        raise UsageError(f"extra operand '{operands[2]}'", operands=operands)
    if is_stdin(operands[0]) and is_stdin(operands[1]):
        raise UsageError("standard input cannot be used for both operands", operands=operands)
    return operands[0], operands[1]


def format_diagnostic(error: Exception) -> str:
    """Format an error for the diagnostic stream."""
    if isinstance(error, FileError) and error.file_path:
        return f"{PROGRAM_NAME}: {error.file_path}: {error.reason}"
    return f"{PROGRAM_NAME}: {error}"


def run_diff(
    operands: Sequence[str],
    options: DiffOptions | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    labels: Sequence[str | None] | None = None,
    token: CancellationToken | None = None,
) -> int:
    """Compare two operands and write the report.

    Parameters
    ----------
    operands : Sequence[str]
        Exactly two file paths; ``-`` reads ``stdin`` for one of them
    options : DiffOptions, optional
        Comparison and output options
    stdin, stdout, stderr : TextIO, optional
        Streams; default to the process streams
    labels : Sequence[str or None], optional
        Up to two names replacing the operands in headers and brief output
    token : CancellationToken, optional
        Cooperative cancellation signal

    Returns
    -------
    int
        ``EXIT_SUCCESS`` when the inputs were compared (whether or not they
        differ), otherwise the exit code of the failure

    Raises
    ------
    DiffCancelledError
        If the token trips; output already written is left in place

    """
    options = options or DiffOptions()
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    try:
        old_operand, new_operand = validate_operands(operands)
    except UsageError as e:
        print(format_diagnostic(e), file=stderr)
        return get_exit_code_for_exception(e)

    if options.recursive:
        logger.warning("Recursive comparison is not supported; comparing %s and %s as files", old_operand, new_operand)

    given = list(labels or [])
    old_label = given[0] if len(given) > 0 and given[0] is not None else old_operand
    new_label = given[1] if len(given) > 1 and given[1] is not None else new_operand

    logger.debug("Comparing %s and %s (format=%s)", old_operand, new_operand, options.output_format)
    try:
        result = compare_files(
            old_operand,
            new_operand,
            options,
            stdin=stdin,
            old_label=old_label,
            new_label=new_label,
            token=token,
        )
        write_diff(result, stdout, token)
    except FileError as e:
        print(format_diagnostic(e), file=stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS
