#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/linediff/options.py
"""Immutable configuration for a single diff invocation.

:class:`DiffOptions` is a frozen dataclass built once per invocation (from CLI
flags, a config file, or directly by an embedding toolkit) and passed by value
into the engine. Output format selection is a single priority table over the
boolean mode flags rather than conditionals spread across call sites.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from linediff.constants import (
    ALIGNMENT_ALGORITHMS,
    DEFAULT_CHECK_INTERVAL,
    DEFAULT_CONTEXT_LINES,
    DEFAULT_ENCODING,
    DEFAULT_SIDE_BY_SIDE_WIDTH,
    AlignmentAlgorithm,
    OutputFormat,
)
from linediff.exceptions import ValidationError

# Highest priority first. Brief is checked separately because it bypasses
# alignment altogether.
FORMAT_PRECEDENCE: tuple[tuple[str, OutputFormat], ...] = (
    ("unified", "unified"),
    ("side_by_side", "side_by_side"),
    ("context_diff", "context"),
)

BOOLEAN_FIELDS: tuple[str, ...] = (
    "unified",
    "context_diff",
    "brief",
    "ignore_case",
    "ignore_whitespace",
    "side_by_side",
    "recursive",
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Configuration options for comparing two line sequences.

    Parameters
    ----------
    unified : bool, default False
        Render a unified diff.
    unified_context : int, optional
        Context width for unified output. Setting it implies ``unified``.
        Defaults to 3 when unified output is selected.
    context_diff : bool, default False
        Render a context diff.
    context_lines : int, optional
        Context width for context output. Setting it implies ``context_diff``.
        Defaults to 3 when context output is selected.
    brief : bool, default False
        Only report whether the inputs differ.
    ignore_case : bool, default False
        Compare lines after case folding.
    ignore_whitespace : bool, default False
        Compare lines after collapsing whitespace runs and trimming.
    side_by_side : bool, default False
        Render both inputs in two columns.
    recursive : bool, default False
        Reserved for directory comparison, which linediff does not perform.
    algorithm : {"lcs", "positional"}, default "lcs"
        Alignment strategy. ``positional`` reproduces the legacy index-by-index
        comparison and never re-synchronizes after an insertion or deletion.
    width : int, default 40
        Column width of the left side in side-by-side output.
    encoding : str, default "utf-8"
        Text encoding used when reading files.
    check_interval : int, default 1000
        Number of lines processed between cancellation checks.

    """

    unified: bool = field(default=False, metadata={"help": "Output a unified diff"})
    unified_context: int | None = field(
        default=None,
        metadata={"help": "Lines of unified context (implies unified output)"},
    )
    context_diff: bool = field(default=False, metadata={"help": "Output a context diff"})
    context_lines: int | None = field(
        default=None,
        metadata={"help": "Lines of copied context (implies context output)"},
    )
    brief: bool = field(default=False, metadata={"help": "Report only when files differ"})
    ignore_case: bool = field(default=False, metadata={"help": "Ignore case differences in file contents"})
    ignore_whitespace: bool = field(default=False, metadata={"help": "Ignore all white space"})
    side_by_side: bool = field(default=False, metadata={"help": "Output in two columns"})
    recursive: bool = field(default=False, metadata={"help": "Reserved: directories are not traversed"})
    algorithm: AlignmentAlgorithm = field(
        default="lcs",
        metadata={"help": "Alignment algorithm", "choices": list(ALIGNMENT_ALGORITHMS)},
    )
    width: int = field(
        default=DEFAULT_SIDE_BY_SIDE_WIDTH,
        metadata={"help": "Column width for side-by-side output"},
    )
    encoding: str = field(default=DEFAULT_ENCODING, metadata={"help": "Text encoding of the inputs"})
    check_interval: int = field(
        default=DEFAULT_CHECK_INTERVAL,
        metadata={"help": "Lines processed between cancellation checks"},
    )

    def __post_init__(self) -> None:
        """Validate flag types, numeric ranges and enumerated values.

        Raises
        ------
        ValidationError
            If any field value is outside its valid range.

        """
        for name in BOOLEAN_FIELDS:
            value = getattr(self, name)
            # No coercion: a "false" string from a config file is an error
            if not isinstance(value, bool):
                raise ValidationError(
                    f"{name} must be true or false, got {value!r}",
                    parameter_name=name,
                    parameter_value=value,
                )
        for name in ("unified_context", "context_lines"):
            value = getattr(self, name)
            if value is not None and (not isinstance(value, int) or isinstance(value, bool) or value < 0):
                raise ValidationError(
                    f"{name} must be a non-negative integer, got {value!r}",
                    parameter_name=name,
                    parameter_value=value,
                )
        if self.algorithm not in ALIGNMENT_ALGORITHMS:
            raise ValidationError(
                f"algorithm must be one of {', '.join(ALIGNMENT_ALGORITHMS)}, got {self.algorithm!r}",
                parameter_name="algorithm",
                parameter_value=self.algorithm,
            )
        if not isinstance(self.width, int) or isinstance(self.width, bool) or self.width < 1:
            raise ValidationError(f"width must be positive, got {self.width!r}", "width", self.width)
        if (
            not isinstance(self.check_interval, int)
            or isinstance(self.check_interval, bool)
            or self.check_interval < 1
        ):
            raise ValidationError(
                f"check_interval must be positive, got {self.check_interval!r}",
                "check_interval",
                self.check_interval,
            )

    @property
    def is_unified(self) -> bool:
        """Whether unified output was requested, explicitly or through a width."""
        return self.unified or self.unified_context is not None

    @property
    def is_context(self) -> bool:
        """Whether context output was requested, explicitly or through a width."""
        return self.context_diff or self.context_lines is not None

    @property
    def resolved_unified_context(self) -> int:
        """Unified context width, defaulting to 3."""
        return DEFAULT_CONTEXT_LINES if self.unified_context is None else self.unified_context

    @property
    def resolved_context_lines(self) -> int:
        """Context-format width, defaulting to 3."""
        return DEFAULT_CONTEXT_LINES if self.context_lines is None else self.context_lines

    @property
    def output_format(self) -> OutputFormat:
        """Select the renderer from the mode flags.

        Brief wins outright; after that the first enabled entry of
        ``FORMAT_PRECEDENCE`` (unified, side-by-side, context) is used, and
        normal ed-style output is the fallback.
        """
        if self.brief:
            return "brief"
        enabled = {
            "unified": self.is_unified,
            "side_by_side": self.side_by_side,
            "context_diff": self.is_context,
        }
        for flag, output_format in FORMAT_PRECEDENCE:
            if enabled[flag]:
                return output_format
        return "normal"

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any], base: DiffOptions | None = None) -> DiffOptions:
        """Build options from a configuration mapping.

        Keys may use underscores or dashes. Unknown keys are rejected so that
        typos in config files do not pass silently.

        Parameters
        ----------
        config : Mapping
            Option names mapped to values
        base : DiffOptions, optional
            Options to update; defaults to a fresh instance

        Returns
        -------
        DiffOptions
            New options instance

        Raises
        ------
        ValidationError
            If a key is unknown or a value fails validation

        """
        known = {f.name for f in fields(cls)}
        updates: dict[str, Any] = {}
        for raw_key, value in config.items():
            key = str(raw_key).replace("-", "_")
            if key not in known:
                raise ValidationError(f"unknown option: {raw_key!r}", parameter_name=str(raw_key), parameter_value=value)
            updates[key] = value
        try:
            return (base or cls()).create_updated(**updates)
        except TypeError as e:
            raise ValidationError(f"invalid options: {e}", original_error=e) from e
