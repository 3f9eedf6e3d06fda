#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/renderers/brief.py
"""Brief renderer: report only whether the inputs differ."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from linediff.renderers.base import DiffRenderer

if TYPE_CHECKING:
    from linediff.text_diff import DiffResult


class BriefDiffRenderer(DiffRenderer):
    """Emit ``Files <A> and <B> differ`` when the inputs differ.

    The edit script is never computed.
    """

    def render_changes(self, result: DiffResult) -> Iterator[str]:
        yield f"Files {result.old_label} and {result.new_label} differ"
