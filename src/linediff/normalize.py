#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/normalize.py
"""Comparison-only normalization of line sequences.

The functions here never modify their input. They build a new list of the
same length that is used for equality testing and alignment; renderers keep
showing the original text.
"""

from __future__ import annotations

from typing import Callable, Sequence

from linediff.cancellation import CancellationToken, checkpoint
from linediff.constants import DEFAULT_CHECK_INTERVAL


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and strip both ends.

    Parameters
    ----------
    text : str
        Text to normalize

    Returns
    -------
    str
        Normalized text with consistent whitespace

    """
    return " ".join(text.split())


def _map_lines(
    lines: Sequence[str],
    transform: Callable[[str], str],
    token: CancellationToken | None,
    check_interval: int,
    stage: str,
) -> list[str]:
    result: list[str] = []
    for index, line in enumerate(lines):
        checkpoint(token, index, check_interval, partial=result, stage=stage)
        result.append(transform(line))
    return result


def fold_case(
    lines: Sequence[str],
    token: CancellationToken | None = None,
    check_interval: int = DEFAULT_CHECK_INTERVAL,
) -> list[str]:
    """Return the lines case-folded for caseless comparison."""
    return _map_lines(lines, str.casefold, token, check_interval, "case folding")


def collapse_whitespace(
    lines: Sequence[str],
    token: CancellationToken | None = None,
    check_interval: int = DEFAULT_CHECK_INTERVAL,
) -> list[str]:
    """Return the lines with whitespace collapsed by :func:`normalize_whitespace`."""
    return _map_lines(lines, normalize_whitespace, token, check_interval, "whitespace normalization")


def normalize_lines(
    lines: Sequence[str],
    *,
    ignore_case: bool = False,
    ignore_whitespace: bool = False,
    token: CancellationToken | None = None,
    check_interval: int = DEFAULT_CHECK_INTERVAL,
) -> list[str]:
    """Apply the enabled normalization rules in order.

    Case folding runs first, then whitespace collapsing. With no rule enabled
    a shallow copy is returned.

    Parameters
    ----------
    lines : Sequence[str]
        Original lines
    ignore_case : bool, default False
        Apply case folding
    ignore_whitespace : bool, default False
        Apply whitespace collapsing
    token : CancellationToken, optional
        Cooperative cancellation signal
    check_interval : int, default 1000
        Lines processed between cancellation checks

    Returns
    -------
    list[str]
        Normalized view of ``lines``

    Raises
    ------
    DiffCancelledError
        If the token trips; ``partial`` holds the prefix already normalized

    """
    view = list(lines)
    if ignore_case:
        view = fold_case(view, token, check_interval)
    if ignore_whitespace:
        view = collapse_whitespace(view, token, check_interval)
    return view
