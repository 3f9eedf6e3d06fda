#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/renderers/unified.py
"""Unified diff renderer.

Output follows the conventional layout::

    --- old.txt
    +++ new.txt
    @@ -1,3 +1,3 @@
     a
    -b
    +x
     c

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from linediff.constants import DEFAULT_CONTEXT_LINES
from linediff.renderers.base import DiffRenderer

if TYPE_CHECKING:
    from linediff.text_diff import DiffResult


def format_range_unified(start: int, stop: int) -> str:
    """Convert a half-open range to the ``start,length`` form of hunk headers.

    A one-line range is written as its start only; an empty range starts at the
    line before it.
    """
    beginning = start + 1
    length = stop - start
    if length == 1:
        return str(beginning)
    if not length:
        beginning -= 1
    return f"{beginning},{length}"


class UnifiedDiffRenderer(DiffRenderer):
    """Render a unified diff.

    Parameters
    ----------
    context_lines : int, default = 3
        Number of unchanged lines shown around each change

    Examples
    --------
    Render to a string:
        >>> from linediff import compare_lines
        >>> from linediff.renderers import UnifiedDiffRenderer
        >>> result = compare_lines(["a", "b"], ["a", "c"])
        >>> text = UnifiedDiffRenderer().render_to_string(result)

    """

    def __init__(self, context_lines: int = DEFAULT_CONTEXT_LINES):
        """Initialize the unified diff renderer."""
        self.context_lines = context_lines

    def render_changes(self, result: DiffResult) -> Iterator[str]:
        yield f"--- {result.old_label}"
        yield f"+++ {result.new_label}"

        for hunk in result.hunks(self.context_lines):
            old_range = format_range_unified(*hunk.old_range)
            new_range = format_range_unified(*hunk.new_range)
            yield f"@@ -{old_range} +{new_range} @@"

            for op in hunk.ops:
                if op.tag == "equal":
                    for line in op.old_lines:
                        yield f" {line}"
                    continue
                for line in op.old_lines:
                    yield f"-{line}"
                for line in op.new_lines:
                    yield f"+{line}"
