#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/renderers/context.py
"""Context diff renderer.

Each hunk shows the affected region of the first input, then of the second,
with unchanged lines prefixed by two spaces, deletions by ``- ``, insertions
by ``+ `` and changed lines by ``! ``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from linediff.constants import CONTEXT_HUNK_SEPARATOR, DEFAULT_CONTEXT_LINES
from linediff.renderers.base import DiffRenderer

if TYPE_CHECKING:
    from linediff.text_diff import DiffResult

_PREFIX = {"insert": "+ ", "delete": "- ", "replace": "! ", "equal": "  "}


def format_range_context(start: int, stop: int) -> str:
    """Convert a half-open range to the ``first,last`` form of context hunks."""
    beginning = start + 1
    length = stop - start
    if not length:
        beginning -= 1
    if length <= 1:
        return str(beginning)
    return f"{beginning},{beginning + length - 1}"


class ContextDiffRenderer(DiffRenderer):
    """Render a context diff.

    Parameters
    ----------
    context_lines : int, default = 3
        Number of unchanged lines shown around each change

    """

    def __init__(self, context_lines: int = DEFAULT_CONTEXT_LINES):
        """Initialize the context diff renderer."""
        self.context_lines = context_lines

    def render_changes(self, result: DiffResult) -> Iterator[str]:
        yield f"*** {result.old_label}"
        yield f"--- {result.new_label}"

        for hunk in result.hunks(self.context_lines):
            yield CONTEXT_HUNK_SEPARATOR

            yield f"*** {format_range_context(*hunk.old_range)} ****"
            if any(op.tag in ("replace", "delete") for op in hunk.ops):
                for op in hunk.ops:
                    if op.tag != "insert":
                        for line in op.old_lines:
                            yield _PREFIX[op.tag] + line

            yield f"--- {format_range_context(*hunk.new_range)} ----"
            if any(op.tag in ("replace", "insert") for op in hunk.ops):
                for op in hunk.ops:
                    if op.tag != "delete":
                        for line in op.new_lines:
                            yield _PREFIX[op.tag] + line
