#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/renderers/base.py
"""Common base class for diff renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from linediff.text_diff import DiffResult


class DiffRenderer:
    """Base class for renderers that turn a :class:`DiffResult` into text lines.

    Subclasses implement :meth:`render_changes`; :meth:`render` takes care of
    producing no output at all when the inputs are identical.
    """

    def render(self, result: DiffResult) -> Iterator[str]:
        """Render a comparison.

        Parameters
        ----------
        result : DiffResult
            Comparison to render

        Yields
        ------
        str
            Output lines without terminators

        """
        if result.is_identical:
            return
        yield from self.render_changes(result)

    def render_changes(self, result: DiffResult) -> Iterator[str]:
        """Yield output lines for inputs known to differ."""
        raise NotImplementedError

    def render_to_string(self, result: DiffResult) -> str:
        """Render a comparison into a single newline-terminated string."""
        return "".join(f"{line}\n" for line in self.render(result))
