#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/align.py
"""Sequence alignment: turn two line sequences into an edit script.

Two strategies are available:

``lcs`` (default)
    Longest-common-subsequence alignment. The common prefix and suffix are
    matched directly; the remaining middle is solved with a dynamic-programming
    table, or with Hirschberg's linear-space recursion when the table would be
    too large. The result is a minimal edit script that re-synchronizes after
    insertions and deletions, as conventional diff tools do.

``positional``
    Legacy index-by-index comparison. Position ``k`` of A is only ever compared
    with position ``k`` of B, so a single inserted line makes every following
    line a replacement. Kept for parity with older output.

Both strategies return a list of :class:`EditOp` that covers every position of
both inputs exactly once, in order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from linediff.cancellation import CancellationToken, checkpoint
from linediff.constants import (
    ALIGN_CHECK_INTERVAL,
    DEFAULT_CHECK_INTERVAL,
    MAX_TABLE_CELLS,
    AlignmentAlgorithm,
    EditTag,
)

logger = logging.getLogger(__name__)

# (tag, i1, i2, j1, j2) with half-open ranges, as used internally
_Opcode = tuple[str, int, int, int, int]


@dataclass(frozen=True, slots=True)
class EditOp:
    """One aligned region of the two inputs.

    Attributes
    ----------
    tag : {"equal", "delete", "insert", "replace"}
        Kind of region
    old_range : tuple[int, int]
        Half-open, 0-indexed range of A covered by the region
    new_range : tuple[int, int]
        Half-open, 0-indexed range of B covered by the region
    old_lines : tuple[str, ...]
        Text of A in ``old_range``
    new_lines : tuple[str, ...]
        Text of B in ``new_range``

    """

    tag: EditTag
    old_range: tuple[int, int]
    new_range: tuple[int, int]
    old_lines: tuple[str, ...] = ()
    new_lines: tuple[str, ...] = ()

    @property
    def old_len(self) -> int:
        return self.old_range[1] - self.old_range[0]

    @property
    def new_len(self) -> int:
        return self.new_range[1] - self.new_range[0]

    def trimmed(self, old_start: int, old_stop: int) -> EditOp:
        """Return the part of an equal region between two A positions."""
        offset = old_start - self.old_range[0]
        length = old_stop - old_start
        new_start = self.new_range[0] + offset
        return EditOp(
            self.tag,
            (old_start, old_stop),
            (new_start, new_start + length),
            self.old_lines[offset : offset + length],
            self.new_lines[offset : offset + length],
        )


EditScript = list[EditOp]


@dataclass(frozen=True)
class Hunk:
    """A run of edit operations with bounded surrounding context."""

    ops: tuple[EditOp, ...]

    @property
    def old_range(self) -> tuple[int, int]:
        return self.ops[0].old_range[0], self.ops[-1].old_range[1]

    @property
    def new_range(self) -> tuple[int, int]:
        return self.ops[0].new_range[0], self.ops[-1].new_range[1]


def _change_opcode(i1: int, i2: int, j1: int, j2: int) -> _Opcode:
    if i1 < i2 and j1 < j2:
        return ("replace", i1, i2, j1, j2)
    if i1 < i2:
        return ("delete", i1, i2, j1, j2)
    return ("insert", i1, i2, j1, j2)


def _common_prefix(a: Sequence[str], b: Sequence[str]) -> int:
    limit = min(len(a), len(b))
    k = 0
    while k < limit and a[k] == b[k]:
        k += 1
    return k


def _common_suffix(a: Sequence[str], b: Sequence[str], prefix: int) -> int:
    limit = min(len(a), len(b)) - prefix
    k = 0
    while k < limit and a[len(a) - 1 - k] == b[len(b) - 1 - k]:
        k += 1
    return k


def _table_matches(
    a: Sequence[str],
    b: Sequence[str],
    a_offset: int,
    b_offset: int,
    token: CancellationToken | None,
) -> list[tuple[int, int]]:
    """Solve LCS with a full suffix table and return matched index pairs.

    ``table[i][j]`` is the LCS length of ``a[i:]`` and ``b[j:]``. Walking it
    forward and preferring to skip A on ties puts deletions before insertions.
    """
    n, m = len(a), len(b)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        checkpoint(token, n - 1 - i, ALIGN_CHECK_INTERVAL, stage="alignment")
        row, below = table[i], table[i + 1]
        item = a[i]
        for j in range(m - 1, -1, -1):
            if item == b[j]:
                row[j] = below[j + 1] + 1
            else:
                down, right = below[j], row[j + 1]
                row[j] = down if down >= right else right

    matches: list[tuple[int, int]] = []
    i = j = 0
    while i < n and j < m:
        if a[i] == b[j]:
            matches.append((a_offset + i, b_offset + j))
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            i += 1
        else:
            j += 1
    return matches


def _lcs_lengths(a: Sequence[str], b: Sequence[str], token: CancellationToken | None) -> list[int]:
    """Return LCS lengths of ``a`` against every prefix of ``b`` in O(len(b)) space."""
    previous = [0] * (len(b) + 1)
    for index, item in enumerate(a):
        checkpoint(token, index, ALIGN_CHECK_INTERVAL, stage="alignment")
        current = [0] * (len(b) + 1)
        for j, other in enumerate(b):
            if item == other:
                current[j + 1] = previous[j] + 1
            else:
                current[j + 1] = previous[j + 1] if previous[j + 1] >= current[j] else current[j]
        previous = current
    return previous


def _hirschberg_matches(
    a: Sequence[str],
    b: Sequence[str],
    a_offset: int,
    b_offset: int,
    token: CancellationToken | None,
    max_table_cells: int,
    matches: list[tuple[int, int]],
) -> None:
    """Append LCS index pairs for ``a``/``b`` to ``matches`` in linear space."""
    n, m = len(a), len(b)
    if n == 0 or m == 0:
        return
    if n * m <= max_table_cells:
        matches.extend(_table_matches(a, b, a_offset, b_offset, token))
        return
    if n == 1:
        for j, other in enumerate(b):
            if a[0] == other:
                matches.append((a_offset, b_offset + j))
                return
        return

    mid = n // 2
    forward = _lcs_lengths(a[:mid], b, token)
    backward = _lcs_lengths(a[mid:][::-1], b[::-1], token)
    split = max(range(m + 1), key=lambda s: forward[s] + backward[m - s])

    _hirschberg_matches(a[:mid], b[:split], a_offset, b_offset, token, max_table_cells, matches)
    _hirschberg_matches(a[mid:], b[split:], a_offset + mid, b_offset + split, token, max_table_cells, matches)


def _opcodes_from_matches(
    matches: Sequence[tuple[int, int]],
    n: int,
    m: int,
    token: CancellationToken | None,
) -> list[_Opcode]:
    opcodes: list[_Opcode] = []
    i = j = 0
    for count, (mi, mj) in enumerate(matches):
        checkpoint(token, count, DEFAULT_CHECK_INTERVAL, stage="alignment")
        if i < mi or j < mj:
            opcodes.append(_change_opcode(i, mi, j, mj))
        last = opcodes[-1] if opcodes else None
        if last is not None and last[0] == "equal" and last[2] == mi and last[4] == mj:
            opcodes[-1] = ("equal", last[1], mi + 1, last[3], mj + 1)
        else:
            opcodes.append(("equal", mi, mi + 1, mj, mj + 1))
        i, j = mi + 1, mj + 1
    if i < n or j < m:
        opcodes.append(_change_opcode(i, n, j, m))
    return opcodes


def _lcs_opcodes(
    a: Sequence[str],
    b: Sequence[str],
    token: CancellationToken | None,
    max_table_cells: int,
) -> list[_Opcode]:
    n, m = len(a), len(b)
    prefix = _common_prefix(a, b)
    suffix = _common_suffix(a, b, prefix)

    matches: list[tuple[int, int]] = [(k, k) for k in range(prefix)]
    middle_a = a[prefix : n - suffix]
    middle_b = b[prefix : m - suffix]
    logger.debug(
        "LCS alignment: prefix=%d suffix=%d middle=%dx%d",
        prefix,
        suffix,
        len(middle_a),
        len(middle_b),
    )
    _hirschberg_matches(middle_a, middle_b, prefix, prefix, token, max_table_cells, matches)
    matches.extend((n - suffix + k, m - suffix + k) for k in range(suffix))
    return _opcodes_from_matches(matches, n, m, token)


def _positional_opcodes(a: Sequence[str], b: Sequence[str], token: CancellationToken | None) -> list[_Opcode]:
    n, m = len(a), len(b)
    common = min(n, m)
    opcodes: list[_Opcode] = []
    for k in range(common):
        checkpoint(token, k, DEFAULT_CHECK_INTERVAL, stage="alignment")
        tag = "equal" if a[k] == b[k] else "replace"
        if opcodes and opcodes[-1][0] == tag:
            opcodes[-1] = (tag, opcodes[-1][1], k + 1, opcodes[-1][3], k + 1)
        else:
            opcodes.append((tag, k, k + 1, k, k + 1))
    if n > common:
        opcodes.append(("delete", common, n, m, m))
    elif m > common:
        opcodes.append(("insert", n, n, common, m))
    return opcodes


def align(
    old: Sequence[str],
    new: Sequence[str],
    *,
    algorithm: AlignmentAlgorithm = "lcs",
    old_lines: Sequence[str] | None = None,
    new_lines: Sequence[str] | None = None,
    token: CancellationToken | None = None,
    max_table_cells: int = MAX_TABLE_CELLS,
) -> EditScript:
    """Compute the edit script that turns ``old`` into ``new``.

    Parameters
    ----------
    old, new : Sequence[str]
        Sequences compared element-wise (normalized views when normalization
        is enabled)
    algorithm : {"lcs", "positional"}, default "lcs"
        Alignment strategy
    old_lines, new_lines : Sequence[str], optional
        Text carried by the resulting ops, typically the un-normalized
        originals. Default to ``old`` and ``new``.
    token : CancellationToken, optional
        Cooperative cancellation signal
    max_table_cells : int, optional
        Largest DP table solved in one piece before splitting

    Returns
    -------
    list[EditOp]
        Ordered, gap-free edit script

    Raises
    ------
    DiffCancelledError
        If the token trips during alignment
    ValueError
        If ``algorithm`` is unknown or display lines do not match in length

    """
    old_text = old if old_lines is None else old_lines
    new_text = new if new_lines is None else new_lines
    if len(old_text) != len(old) or len(new_text) != len(new):
        raise ValueError("display lines must have the same length as the compared sequences")

    if algorithm == "lcs":
        opcodes = _lcs_opcodes(old, new, token, max_table_cells)
    elif algorithm == "positional":
        opcodes = _positional_opcodes(old, new, token)
    else:
        raise ValueError(f"Unsupported alignment algorithm: {algorithm}")

    return [
        EditOp(tag, (i1, i2), (j1, j2), tuple(old_text[i1:i2]), tuple(new_text[j1:j2]))  # type: ignore[arg-type]
        for tag, i1, i2, j1, j2 in opcodes
    ]


def group_hunks(
    ops: Sequence[EditOp],
    context: int,
    token: CancellationToken | None = None,
) -> list[Hunk]:
    """Split an edit script into hunks with up to ``context`` equal lines around changes.

    Changes separated by no more than ``2 * context`` equal lines share a
    hunk, so context windows never overlap. A script without changes yields
    no hunks.

    Parameters
    ----------
    ops : Sequence[EditOp]
        Edit script from :func:`align`
    context : int
        Number of equal lines to keep before and after each change
    token : CancellationToken, optional
        Cooperative cancellation signal

    Returns
    -------
    list[Hunk]
        Hunks in order

    """
    if not any(op.tag != "equal" for op in ops):
        return []

    working = list(ops)
    first, last = working[0], working[-1]
    if first.tag == "equal":
        working[0] = first.trimmed(max(first.old_range[0], first.old_range[1] - context), first.old_range[1])
    if last.tag == "equal":
        last = working[-1]
        working[-1] = last.trimmed(last.old_range[0], min(last.old_range[1], last.old_range[0] + context))

    hunks: list[Hunk] = []
    group: list[EditOp] = []
    for count, op in enumerate(working):
        checkpoint(token, count, DEFAULT_CHECK_INTERVAL, stage="hunk grouping")
        if op.tag == "equal" and op.old_len > 2 * context:
            start, stop = op.old_range
            group.append(op.trimmed(start, start + context))
            hunks.append(Hunk(tuple(group)))
            group = []
            op = op.trimmed(stop - context, stop)
        group.append(op)
    if group:
        hunks.append(Hunk(tuple(group)))

    # Zero-width context leaves empty equal regions behind; they carry nothing.
    result = []
    for hunk in hunks:
        kept = tuple(op for op in hunk.ops if op.old_len or op.new_len)
        if any(op.tag != "equal" for op in kept):
            result.append(Hunk(kept))
    return result
