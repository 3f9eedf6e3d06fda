#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/renderers/side_by_side.py
"""Two-column renderer.

Every aligned pair becomes one row: the left text padded to a fixed width, a
three-character gutter, then the right text. The gutter is blank for equal
pairs and `` | `` for any difference.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import TYPE_CHECKING, Iterator

from linediff.constants import (
    DEFAULT_SIDE_BY_SIDE_WIDTH,
    SIDE_BY_SIDE_GUTTER_DIFFERENT,
    SIDE_BY_SIDE_GUTTER_EQUAL,
)
from linediff.renderers.base import DiffRenderer

if TYPE_CHECKING:
    from linediff.text_diff import DiffResult


class SideBySideDiffRenderer(DiffRenderer):
    """Render both inputs in parallel columns.

    Parameters
    ----------
    width : int, default = 40
        Width the left column is padded to. Longer lines are not truncated.

    """

    def __init__(self, width: int = DEFAULT_SIDE_BY_SIDE_WIDTH):
        """Initialize the side-by-side renderer."""
        self.width = width

    def format_row(self, left: str, right: str, gutter: str) -> str:
        return f"{left:<{self.width}}{gutter}{right}"

    def render_changes(self, result: DiffResult) -> Iterator[str]:
        for op in result.iter_operations():
            if op.tag == "equal":
                for left, right in zip(op.old_lines, op.new_lines):
                    yield self.format_row(left, right, SIDE_BY_SIDE_GUTTER_EQUAL)
            else:
                for left, right in zip_longest(op.old_lines, op.new_lines, fillvalue=""):
                    yield self.format_row(left, right, SIDE_BY_SIDE_GUTTER_DIFFERENT)
