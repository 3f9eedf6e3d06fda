"""Pytest configuration and shared fixtures for the linediff test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir, write_lines

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Provide a factory writing newline-terminated lines to a file under tmp_path.

    Returns
    -------
    Callable
        ``make_file(name, lines, trailing_newline=True) -> Path``

    """

    def _make(name: str, lines: list[str], trailing_newline: bool = True) -> Path:
        return write_lines(tmp_path / name, lines, trailing_newline=trailing_newline)

    return _make


@pytest.fixture
def abc_files(make_file) -> tuple[Path, Path]:
    """Provide A.txt = a,b,c and B.txt = a,x,c."""
    return make_file("A.txt", ["a", "b", "c"]), make_file("B.txt", ["a", "x", "c"])


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Restore root logger handlers replaced by CLI logging setup."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    try:
        yield
    finally:
        root_logger.handlers[:] = handlers
        root_logger.setLevel(level)


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run with an empty working directory and home so no config file is discovered.

    Returns
    -------
    Path
        The working directory

    """
    workdir = tmp_path / "work"
    home = tmp_path / "home"
    workdir.mkdir()
    home.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("LINEDIFF_CONFIG", raising=False)
    return workdir
