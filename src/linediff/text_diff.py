#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/text_diff.py
"""Line-based comparison engine.

This module ties the pipeline together: loading (for files), comparison-only
normalization, equality testing, alignment and rendering. The central object
is :class:`DiffResult`, which holds both inputs and lazily computes everything
a renderer needs.

Examples
--------
Compare two files and print a unified diff:

    >>> from linediff import DiffOptions, compare_files
    >>> result = compare_files("old.txt", "new.txt", DiffOptions(unified=True))
    >>> for line in result:
    ...     print(line)

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Sequence, TextIO

from linediff.align import EditOp, Hunk, align, group_hunks
from linediff.cancellation import CancellationToken, checkpoint
from linediff.constants import DEFAULT_CHECK_INTERVAL
from linediff.loader import load_lines
from linediff.normalize import normalize_lines
from linediff.options import DiffOptions

logger = logging.getLogger(__name__)


def lines_equal(
    a: Sequence[str],
    b: Sequence[str],
    token: CancellationToken | None = None,
    check_interval: int = DEFAULT_CHECK_INTERVAL,
) -> bool:
    """Return True when both sequences have the same length and equal lines.

    Stops at the first mismatch. No normalization is applied here; pass
    normalized views to compare under normalization rules.

    Raises
    ------
    DiffCancelledError
        If the token trips during the scan

    """
    if len(a) != len(b):
        return False
    for index, (left, right) in enumerate(zip(a, b)):
        checkpoint(token, index, check_interval, stage="comparison")
        if left != right:
            return False
    return True


class DiffResult:
    """Both sides of a comparison plus lazily computed structure.

    Iterating a result yields the rendered diff lines (without terminators) in
    the format selected by ``options``.
    """

    def __init__(
        self,
        old_lines: list[str],
        new_lines: list[str],
        *,
        old_label: str,
        new_label: str,
        options: DiffOptions | None = None,
        old_keys: list[str] | None = None,
        new_keys: list[str] | None = None,
        token: CancellationToken | None = None,
    ) -> None:
        """Store the inputs and metadata.

        Parameters
        ----------
        old_lines : list of str
            Original lines of the first input.
        new_lines : list of str
            Original lines of the second input.
        old_label : str
            Name shown for the first input in headers and brief output.
        new_label : str
            Name shown for the second input in headers and brief output.
        options : DiffOptions, optional
            Comparison and rendering options.
        old_keys, new_keys : list of str, optional
            Normalized views used for equality and alignment. Default to the
            original lines.
        token : CancellationToken, optional
            Cancellation signal polled by every lazily computed stage.

        """
        self.old_lines = old_lines
        self.new_lines = new_lines
        self.old_label = old_label
        self.new_label = new_label
        self.options = options or DiffOptions()
        self.old_keys = old_lines if old_keys is None else old_keys
        self.new_keys = new_lines if new_keys is None else new_keys
        self.token = token
        self._identical: bool | None = None
        self._ops: list[EditOp] | None = None

    def __iter__(self) -> Iterator[str]:
        """Iterate over the rendered diff output."""
        yield from self.iter_lines()

    @property
    def is_identical(self) -> bool:
        """Whether the inputs compare equal under the configured normalization."""
        if self._identical is None:
            self._identical = lines_equal(self.old_keys, self.new_keys, self.token, self.options.check_interval)
        return self._identical

    def iter_operations(self) -> Iterator[EditOp]:
        """Yield the edit script, computing and caching it on first use."""
        if self._ops is None:
            logger.debug(
                "Aligning %d and %d lines with %s",
                len(self.old_keys),
                len(self.new_keys),
                self.options.algorithm,
            )
            self._ops = align(
                self.old_keys,
                self.new_keys,
                algorithm=self.options.algorithm,
                old_lines=self.old_lines,
                new_lines=self.new_lines,
                token=self.token,
            )
        yield from self._ops

    def hunks(self, context: int) -> list[Hunk]:
        """Group the edit script into hunks with ``context`` lines of context."""
        return group_hunks(list(self.iter_operations()), context, self.token)

    def iter_lines(self) -> Iterator[str]:
        """Yield diff lines from the renderer selected by the options."""
        from linediff.renderers import get_renderer

        renderer = get_renderer(self.options.output_format, self.options)
        yield from renderer.render(self)


def compare_lines(
    old_lines: Sequence[str],
    new_lines: Sequence[str],
    options: DiffOptions | None = None,
    *,
    old_label: str = "a",
    new_label: str = "b",
    token: CancellationToken | None = None,
) -> DiffResult:
    """Compare two in-memory line sequences.

    Parameters
    ----------
    old_lines, new_lines : Sequence[str]
        Lines without terminators
    options : DiffOptions, optional
        Comparison options
    old_label, new_label : str
        Names used in headers and brief output
    token : CancellationToken, optional
        Cooperative cancellation signal

    Returns
    -------
    DiffResult
        Result whose iteration yields the rendered diff

    """
    options = options or DiffOptions()
    old = list(old_lines)
    new = list(new_lines)
    old_keys = new_keys = None
    if options.ignore_case or options.ignore_whitespace:
        logger.debug("Normalizing inputs (ignore_case=%s, ignore_whitespace=%s)", options.ignore_case, options.ignore_whitespace)
        old_keys = normalize_lines(
            old,
            ignore_case=options.ignore_case,
            ignore_whitespace=options.ignore_whitespace,
            token=token,
            check_interval=options.check_interval,
        )
        new_keys = normalize_lines(
            new,
            ignore_case=options.ignore_case,
            ignore_whitespace=options.ignore_whitespace,
            token=token,
            check_interval=options.check_interval,
        )
    return DiffResult(
        old,
        new,
        old_label=old_label,
        new_label=new_label,
        options=options,
        old_keys=old_keys,
        new_keys=new_keys,
        token=token,
    )


def compare_files(
    old_path: str | Path,
    new_path: str | Path,
    options: DiffOptions | None = None,
    *,
    stdin: TextIO | None = None,
    old_label: str | None = None,
    new_label: str | None = None,
    token: CancellationToken | None = None,
) -> DiffResult:
    """Load two inputs and compare them.

    Parameters
    ----------
    old_path, new_path : str or Path
        File paths, or ``-`` for standard input
    options : DiffOptions, optional
        Comparison options
    stdin : TextIO, optional
        Stream read for a ``-`` operand
    old_label, new_label : str, optional
        Names used in output; default to the identifiers
    token : CancellationToken, optional
        Cooperative cancellation signal

    Returns
    -------
    DiffResult
        Result whose iteration yields the rendered diff

    Raises
    ------
    FileError
        If either input cannot be read
    DiffCancelledError
        If the token trips while loading

    """
    options = options or DiffOptions()
    old = load_lines(
        old_path,
        stdin=stdin,
        encoding=options.encoding,
        token=token,
        check_interval=options.check_interval,
    )
    new = load_lines(
        new_path,
        stdin=stdin,
        encoding=options.encoding,
        token=token,
        check_interval=options.check_interval,
    )
    return compare_lines(
        old,
        new,
        options,
        old_label=str(old_path) if old_label is None else old_label,
        new_label=str(new_path) if new_label is None else new_label,
        token=token,
    )


def write_diff(result: DiffResult, stream: TextIO, token: CancellationToken | None = None) -> int:
    """Stream the rendered diff to ``stream`` one line at a time.

    The token is polled every ``check_interval`` lines before writing, so no
    further output appears once cancellation has been observed. Lines already
    written stay written.

    Parameters
    ----------
    result : DiffResult
        Comparison to render
    stream : TextIO
        Output sink
    token : CancellationToken, optional
        Defaults to the result's own token

    Returns
    -------
    int
        Number of lines written

    """
    token = result.token if token is None else token
    interval = result.options.check_interval
    written = 0
    for line in result.iter_lines():
        checkpoint(token, written, interval, stage="rendering")
        stream.write(line)
        stream.write("\n")
        written += 1
    logger.debug("Wrote %d diff lines", written)
    return written
