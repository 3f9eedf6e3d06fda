#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for linediff.

Examples
--------
Normal output::

    $ linediff old.txt new.txt

Unified diff with one line of context::

    $ linediff -U 1 old.txt new.txt

Compare standard input against a file, ignoring case::

    $ generate-report | linediff -i - expected.txt

Defaults can be kept in ``.linediff.toml``, ``.linediff.yaml``,
``.linediff.json`` or a ``[tool.linediff]`` table of ``pyproject.toml``::

    [diff]
    unified = true
    ignore_whitespace = true

"""

from __future__ import annotations


def main(args: list[str] | None = None) -> int:
    """Execute the CLI entry point."""
    # Lazy import keeps the engine out of `import linediff.cli.builder`
    from linediff.cli.commands.diff import handle_diff_command

    return handle_diff_command(args)
