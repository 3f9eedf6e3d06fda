#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/renderers/__init__.py
"""Diff renderers for the supported output formats.

Available Renderers
-------------------
- BriefDiffRenderer: one line stating that the inputs differ
- NormalDiffRenderer: classic ed-style change commands
- UnifiedDiffRenderer: unified hunks with ``@@`` headers
- ContextDiffRenderer: context hunks with ``***``/``---`` sections
- SideBySideDiffRenderer: two aligned columns

Examples
--------
Render with the renderer chosen by the options:
    >>> from linediff import DiffOptions, compare_lines
    >>> from linediff.renderers import get_renderer
    >>> options = DiffOptions(side_by_side=True)
    >>> result = compare_lines(["a"], ["b"], options)
    >>> for line in get_renderer(options.output_format, options).render(result):
    ...     print(line)

"""

from __future__ import annotations

from linediff.constants import OutputFormat
from linediff.options import DiffOptions
from linediff.renderers.base import DiffRenderer
from linediff.renderers.brief import BriefDiffRenderer
from linediff.renderers.context import ContextDiffRenderer
from linediff.renderers.normal import NormalDiffRenderer
from linediff.renderers.side_by_side import SideBySideDiffRenderer
from linediff.renderers.unified import UnifiedDiffRenderer


def get_renderer(output_format: OutputFormat, options: DiffOptions | None = None) -> DiffRenderer:
    """Create the renderer for ``output_format`` configured from ``options``.

    Raises
    ------
    ValueError
        If the format is unknown

    """
    options = options or DiffOptions()
    if output_format == "brief":
        return BriefDiffRenderer()
    if output_format == "normal":
        return NormalDiffRenderer()
    if output_format == "unified":
        return UnifiedDiffRenderer(context_lines=options.resolved_unified_context)
    if output_format == "context":
        return ContextDiffRenderer(context_lines=options.resolved_context_lines)
    if output_format == "side_by_side":
        return SideBySideDiffRenderer(width=options.width)
    raise ValueError(f"Unsupported output format: {output_format}")


__all__ = [
    "BriefDiffRenderer",
    "ContextDiffRenderer",
    "DiffRenderer",
    "NormalDiffRenderer",
    "SideBySideDiffRenderer",
    "UnifiedDiffRenderer",
    "get_renderer",
]
