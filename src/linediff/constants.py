#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for linediff.

This module centralizes the hardcoded values, magic numbers, and default
configuration constants used across the diff engine.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Input Handling - Sentinels and decoding defaults
3. Output Formatting - Context widths and column layout
4. Cancellation - Polling granularity for cooperative aborts
5. Alignment - Limits for the LCS table
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

EditTag = Literal["equal", "delete", "insert", "replace"]
OutputFormat = Literal["brief", "unified", "side_by_side", "context", "normal"]
AlignmentAlgorithm = Literal["lcs", "positional"]

ALIGNMENT_ALGORITHMS: tuple[str, ...] = ("lcs", "positional")

# =============================================================================
# Input Handling
# =============================================================================

# Prefix of every line written to the diagnostic stream
PROGRAM_NAME = "diff"

# Operand that reads from standard input instead of a file
STDIN_SENTINEL = "-"
DEFAULT_ENCODING = "utf-8"

# =============================================================================
# Output Formatting
# =============================================================================

DEFAULT_CONTEXT_LINES = 3
DEFAULT_SIDE_BY_SIDE_WIDTH = 40

SIDE_BY_SIDE_GUTTER_EQUAL = "   "
SIDE_BY_SIDE_GUTTER_DIFFERENT = " | "

CONTEXT_HUNK_SEPARATOR = "***************"

# =============================================================================
# Cancellation
# =============================================================================

# Lines scanned, normalized, compared or emitted between cancellation checks
DEFAULT_CHECK_INTERVAL = 1000

# DP table rows computed between cancellation checks
ALIGN_CHECK_INTERVAL = 16

# =============================================================================
# Alignment
# =============================================================================

# Largest DP table (rows * columns) built in one piece; bigger problems are
# split with Hirschberg's linear-space recursion
MAX_TABLE_CELLS = 4_000_000
