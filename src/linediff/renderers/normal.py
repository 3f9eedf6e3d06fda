#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/renderers/normal.py
"""Normal (ed-style) renderer.

Each change is introduced by a command line such as ``2c2``, ``5a6,7`` or
``3,4d2``, followed by the removed lines prefixed with ``< `` and the added
lines prefixed with ``> ``, separated by ``---`` for changes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from linediff.renderers.base import DiffRenderer

if TYPE_CHECKING:
    from linediff.align import EditOp
    from linediff.text_diff import DiffResult


def format_range_normal(start: int, stop: int) -> str:
    """Format a non-empty half-open range as ``l`` or ``l,r`` (1-indexed)."""
    if stop - start == 1:
        return str(start + 1)
    return f"{start + 1},{stop}"


class NormalDiffRenderer(DiffRenderer):
    """Render the classic ``diff`` output format."""

    def render_changes(self, result: DiffResult) -> Iterator[str]:
        for op in result.iter_operations():
            if op.tag != "equal":
                yield from self._render_op(op)

    def _render_op(self, op: EditOp) -> Iterator[str]:
        old_start, old_stop = op.old_range
        new_start, new_stop = op.new_range

        if op.tag == "insert":
            yield f"{old_start}a{format_range_normal(new_start, new_stop)}"
        elif op.tag == "delete":
            yield f"{format_range_normal(old_start, old_stop)}d{new_start}"
        else:
            yield f"{format_range_normal(old_start, old_stop)}c{format_range_normal(new_start, new_stop)}"

        for line in op.old_lines:
            yield f"< {line}"
        if op.tag == "replace":
            yield "---"
        for line in op.new_lines:
            yield f"> {line}"
