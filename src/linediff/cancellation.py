#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/cancellation.py
"""Cooperative cancellation for the diff engine.

A :class:`CancellationToken` is created by the caller and passed explicitly into
every stage (loading, normalization, equality, alignment, rendering). Stages
poll it through :func:`checkpoint` at a bounded interval, so the latency of an
abort is proportional to the interval rather than to the input size.

Examples
--------
Abort after half a second:

    >>> token = CancellationToken.with_timeout(0.5)
    >>> result = compare_files("big_a.log", "big_b.log", token=token)  # doctest: +SKIP

Abort from another callback:

    >>> token = CancellationToken()
    >>> token.cancel()
    >>> token.cancelled
    True

"""

from __future__ import annotations

import time
from typing import Any

from linediff.exceptions import DiffCancelledError


class CancellationToken:
    """Advisory cancellation signal with an optional deadline.

    Parameters
    ----------
    deadline : float, optional
        Absolute ``time.monotonic()`` value after which the token counts as
        cancelled.

    """

    def __init__(self, deadline: float | None = None) -> None:
        """Create an untripped token."""
        self._cancelled = False
        self.deadline = deadline

    @classmethod
    def with_timeout(cls, seconds: float) -> CancellationToken:
        """Create a token that trips ``seconds`` from now."""
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        """Trip the token."""
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        """Whether cancellation has been requested or the deadline has passed."""
        if self._cancelled:
            return True
        if self.deadline is not None and time.monotonic() >= self.deadline:
            self._cancelled = True
        return self._cancelled

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self._cancelled}, deadline={self.deadline})"


def checkpoint(
    token: CancellationToken | None,
    index: int = 0,
    interval: int = 1,
    partial: list[Any] | None = None,
    stage: str = "operation",
) -> None:
    """Raise :class:`DiffCancelledError` if ``token`` has tripped.

    The token is only consulted when ``index`` is a multiple of ``interval``,
    which keeps the check off the hot path of tight loops.

    Parameters
    ----------
    token : CancellationToken or None
        Token to poll. ``None`` disables cancellation.
    index : int, default 0
        Current loop position
    interval : int, default 1
        Poll every ``interval`` positions
    partial : list, optional
        Partial result attached to the raised error
    stage : str, default "operation"
        Stage name used in the error message

    Raises
    ------
    DiffCancelledError
        If the token has been cancelled

    """
    if token is None or index % interval:
        return
    if token.cancelled:
        raise DiffCancelledError(f"{stage} cancelled", partial=list(partial) if partial is not None else None)
