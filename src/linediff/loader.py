#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/loader.py
"""Load named inputs as sequences of text lines.

An input identifier is either a file path or the ``-`` sentinel, which reads
the supplied standard input stream. Lines are returned without their
terminators; a final line without a newline is kept as-is.
"""

from __future__ import annotations

import errno
import io
import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from linediff.cancellation import CancellationToken, checkpoint
from linediff.constants import DEFAULT_CHECK_INTERVAL, DEFAULT_ENCODING, STDIN_SENTINEL
from linediff.exceptions import FileAccessError, FileError, FileNotFoundError

logger = logging.getLogger(__name__)


def is_stdin(identifier: str) -> bool:
    """Return True when ``identifier`` designates standard input."""
    return str(identifier) == STDIN_SENTINEL


def split_lines(
    chunks: Iterable[str],
    *,
    token: CancellationToken | None = None,
    check_interval: int = DEFAULT_CHECK_INTERVAL,
) -> list[str]:
    """Collect newline-terminated chunks into a list of bare lines.

    Each chunk is expected to end at most with one ``\\n`` (the shape produced
    by iterating a text stream opened with ``newline="\\n"``). The terminator
    and one preceding ``\\r`` are removed.

    Parameters
    ----------
    chunks : Iterable[str]
        Lines as produced by iterating a text stream
    token : CancellationToken, optional
        Polled every ``check_interval`` lines
    check_interval : int, default 1000
        Cancellation polling granularity

    Returns
    -------
    list[str]
        Lines without terminators

    Raises
    ------
    DiffCancelledError
        If the token trips; ``partial`` holds the lines read so far

    """
    lines: list[str] = []
    for index, chunk in enumerate(chunks):
        checkpoint(token, index, check_interval, partial=lines, stage="reading")
        if chunk.endswith("\n"):
            chunk = chunk[:-1]
            if chunk.endswith("\r"):
                chunk = chunk[:-1]
        lines.append(chunk)
    return lines


def _file_error(identifier: str, exc: OSError) -> FileError:
    """Translate an ``OSError`` into the matching library error."""
    reason = exc.strerror or str(exc)
    if isinstance(exc, PermissionError) or exc.errno == errno.EACCES:
        return FileAccessError(identifier, reason=reason, original_error=exc)
    if exc.errno == errno.ENOENT:
        return FileNotFoundError(identifier, reason=reason, original_error=exc)
    return FileError(f"{identifier}: {reason}", file_path=identifier, reason=reason, original_error=exc)


def _decode_error(identifier: str, encoding: str, exc: UnicodeDecodeError) -> FileError:
    reason = f"cannot decode as {encoding}"
    return FileError(f"{identifier}: {reason}", file_path=identifier, reason=reason, original_error=exc)


def _read_process_stdin(
    encoding: str,
    token: CancellationToken | None,
    check_interval: int,
) -> list[str]:
    """Read ``sys.stdin`` decoded with ``encoding`` rather than the locale encoding.

    The binary buffer is wrapped for the duration of the read and detached
    afterwards so ``sys.stdin`` stays open. A replacement ``sys.stdin`` with no
    ``buffer`` attribute is read as text unchanged.
    """
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return split_lines(sys.stdin, token=token, check_interval=check_interval)

    wrapper = io.TextIOWrapper(buffer, encoding=encoding, newline="\n")
    try:
        return split_lines(wrapper, token=token, check_interval=check_interval)
    except UnicodeDecodeError as e:
        raise _decode_error(STDIN_SENTINEL, encoding, e) from e
    finally:
        wrapper.detach()


def load_lines(
    identifier: str | Path,
    *,
    stdin: TextIO | None = None,
    encoding: str = DEFAULT_ENCODING,
    token: CancellationToken | None = None,
    check_interval: int = DEFAULT_CHECK_INTERVAL,
) -> list[str]:
    """Read an input into a list of lines.

    Parameters
    ----------
    identifier : str or Path
        File path, or ``-`` for standard input
    stdin : TextIO, optional
        Already-decoded stream used for ``-``. When omitted, the bytes of
        ``sys.stdin`` are decoded with ``encoding``
    encoding : str, default "utf-8"
        Encoding used to decode files and the process standard input
    token : CancellationToken, optional
        Cooperative cancellation signal
    check_interval : int, default 1000
        Lines read between cancellation checks

    Returns
    -------
    list[str]
        The input's lines in order, without terminators

    Raises
    ------
    FileNotFoundError
        If the path does not exist
    FileAccessError
        If the path cannot be read due to permissions
    FileError
        For any other read or decode failure
    DiffCancelledError
        If the token trips while reading

    """
    name = str(identifier)

    if is_stdin(name):
        logger.debug("Reading lines from standard input")
        if stdin is not None:
            return split_lines(stdin, token=token, check_interval=check_interval)
        return _read_process_stdin(encoding, token, check_interval)

    logger.debug("Reading lines from %s", name)
    try:
        with open(name, "r", encoding=encoding, newline="\n") as handle:
            lines = split_lines(handle, token=token, check_interval=check_interval)
    except OSError as e:
        raise _file_error(name, e) from e
    except UnicodeDecodeError as e:
        raise _decode_error(name, encoding, e) from e

    logger.debug("Read %d lines from %s", len(lines), name)
    return lines
