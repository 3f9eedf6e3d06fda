#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command handlers for the linediff CLI."""

from linediff.cli.commands.diff import handle_diff_command

__all__ = ["handle_diff_command"]
