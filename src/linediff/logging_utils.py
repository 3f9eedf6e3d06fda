#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/logging_utils.py
"""Logging setup for the linediff entry points.

Console log records share the diagnostic stream with error messages, so they
use the same ``diff: ...`` prefix:

    diff: warning: Recursive comparison is not supported; comparing a and b as files

Trace mode and log files use a timestamped format with the logger name.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from linediff.constants import PROGRAM_NAME

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class DiagnosticFormatter(logging.Formatter):
    """Format records as ``<program>: <level>: <message>`` with a lowercase level."""

    def __init__(self, program_name: str = PROGRAM_NAME):
        super().__init__("%(message)s")
        self.program_name = program_name

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        return f"{self.program_name}: {record.levelname.lower()}: {message}"


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    *,
    stream: Optional[TextIO] = None,
    program_name: str = PROGRAM_NAME,
) -> logging.Logger:
    """Configure root logging handlers for the CLI.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "WARNING").
    log_file : str, optional
        Path of a file that receives a timestamped copy of every record.
    trace_mode : bool, default False
        When true, console records also carry timestamps and logger names.
    stream : TextIO, optional
        Diagnostic stream for console records; defaults to ``sys.stderr``.
    program_name : str, default "diff"
        Prefix of console records outside trace mode.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = (
        log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.WARNING)
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    trace_formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(trace_formatter if trace_mode else DiagnosticFormatter(program_name))
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(trace_formatter)
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
