"""Test utilities for the linediff test suite."""

import tempfile
from pathlib import Path


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    import shutil

    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_lines(path: Path, lines: list[str], trailing_newline: bool = True) -> Path:
    """Write ``lines`` joined by newlines, optionally without the final terminator."""
    text = "\n".join(lines)
    if lines and trailing_newline:
        text += "\n"
    path.write_text(text, encoding="utf-8", newline="")
    return path


def apply_edit_script(ops) -> tuple[list[str], list[str]]:
    """Rebuild both sides from an edit script."""
    old: list[str] = []
    new: list[str] = []
    for op in ops:
        old.extend(op.old_lines)
        new.extend(op.new_lines)
    return old, new


def lcs_length(a: list[str], b: list[str]) -> int:
    """Reference LCS length by the textbook quadratic recurrence."""
    previous = [0] * (len(b) + 1)
    for x in a:
        current = [0]
        for j, y in enumerate(b):
            current.append(previous[j] + 1 if x == y else max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]
