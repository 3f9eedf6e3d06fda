"""linediff - compare two sequences of text lines and report their differences.

linediff is the ``diff`` command of a shell utility toolkit, usable as a
library, as a console script, or through :func:`run_diff` with caller-supplied
streams. Inputs are loaded as lines, optionally normalized for comparison
(case folding, whitespace collapsing), aligned with a longest-common-
subsequence algorithm, and rendered in normal, unified, context, side-by-side
or brief format.

Requirements
------------
- Python 3.10+
- PyYAML (configuration files)

Examples
--------
Compare in-memory lines:

    >>> from linediff import compare_lines
    >>> print("\\n".join(compare_lines(["a", "b", "c"], ["a", "x", "c"])))
    2c2
    < b
    ---
    > x

Run the command with explicit streams:

    >>> import io
    >>> from linediff import DiffOptions, run_diff
    >>> out = io.StringIO()
    >>> run_diff(["old.txt", "new.txt"], DiffOptions(unified=True), stdout=out)  # doctest: +SKIP
    0

See Also
--------
linediff.align : Edit script computation
linediff.renderers : Output formats

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from linediff.align import EditOp, Hunk, align, group_hunks
from linediff.cancellation import CancellationToken, checkpoint
from linediff.command import run_diff
from linediff.exceptions import (
    DiffCancelledError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    LineDiffError,
    UsageError,
    ValidationError,
)
from linediff.loader import load_lines
from linediff.normalize import collapse_whitespace, fold_case, normalize_lines
from linediff.options import DiffOptions
from linediff.text_diff import DiffResult, compare_files, compare_lines, lines_equal, write_diff

__version__ = "1.0.0"

__all__ = [
    "CancellationToken",
    "DiffCancelledError",
    "DiffOptions",
    "DiffResult",
    "EditOp",
    "FileAccessError",
    "FileError",
    "FileNotFoundError",
    "Hunk",
    "LineDiffError",
    "UsageError",
    "ValidationError",
    "__version__",
    "align",
    "checkpoint",
    "collapse_whitespace",
    "compare_files",
    "compare_lines",
    "fold_case",
    "group_hunks",
    "lines_equal",
    "load_lines",
    "normalize_lines",
    "run_diff",
    "write_diff",
]
