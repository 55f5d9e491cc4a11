from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared style configurations and temporary project layouts.
3. Isolation of the process-wide output handler between tests.
"""

import io
import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from palantir.core.output.registry import reset_global_output_handler  # noqa: E402
from palantir.domain.output_models import OutputConfig  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin a capable terminal and reset the global handler around each test."""
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.delenv("NO_COLOR", raising=False)
    reset_global_output_handler()
    yield
    reset_global_output_handler()


@pytest.fixture
def plain_config() -> OutputConfig:
    """Configuration with every styling feature off."""
    return OutputConfig(use_colors=False, use_emojis=False, use_formatting=False)


@pytest.fixture
def color_config() -> OutputConfig:
    """Configuration with every styling feature on."""
    return OutputConfig(use_colors=True, use_emojis=True, use_formatting=True)


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Creates a small directory layout.

    Structure:
    /project
      /dirA
        file1.txt
        file2.txt
      file3.txt
    """
    root = tmp_path / "project"
    (root / "dirA").mkdir(parents=True)
    (root / "dirA" / "file1.txt").write_text("one", encoding="utf-8")
    (root / "dirA" / "file2.txt").write_text("two", encoding="utf-8")
    (root / "file3.txt").write_text("three", encoding="utf-8")
    return root
