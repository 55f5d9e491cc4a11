from __future__ import annotations

"""
Unit tests for the demonstration entry point.

The demo prompts for confirmation and renders the working directory,
so stdin is replaced and the working directory points at a temp tree.
"""

import io

import pytest

from palantir.core.output.handler import OutputHandler
from palantir.core.output.registry import get_global_output_handler, set_global_output_handler
from palantir.interface import demo
from palantir.domain.errors import FilesystemError, FilesystemErrorKind
from palantir.infra.logging import shutdown_logging


@pytest.fixture(autouse=True)
def _teardown_logging():
    yield
    shutdown_logging()


def test_showcase_levels_declined(plain_config):
    out = io.StringIO()
    handler = OutputHandler(plain_config, stream=out, input_stream=io.StringIO("n\n"))

    demo.showcase_levels("Plain", handler)
    text = out.getvalue()

    assert "=== Palantir Demo(Plain) ===" in text
    assert "[SUCCESS] Operation completed successfully!\n" in text
    assert "[AVAILABLE] Feature is already available\n" in text
    assert "\r[3/10] 30% - Processing items\n" in text
    assert text.endswith("User declined\n")


def test_showcase_levels_confirmed(plain_config):
    out = io.StringIO()
    handler = OutputHandler(plain_config, stream=out, input_stream=io.StringIO("yes\n"))

    demo.showcase_levels("Plain", handler)
    assert out.getvalue().endswith("[SUCCESS] User confirmed!\n")


def test_main_runs_end_to_end(sample_project, monkeypatch, capsys):
    monkeypatch.chdir(sample_project)
    monkeypatch.setattr("sys.stdin", io.StringIO("y\nn\ny\nn\n"))

    assert demo.main() == 0

    out = capsys.readouterr().out
    assert "file3.txt" in out
    assert "Tree system demonstration completed!" in out
    # scalar values follow the coloured key
    assert ": 5432" in out


def test_main_reports_tree_failure(sample_project, monkeypatch, capsys):
    monkeypatch.chdir(sample_project)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    def failing(*args, **kwargs):
        raise FilesystemError(FilesystemErrorKind.PERMISSION_DENIED, ".")

    monkeypatch.setattr(demo, "show_hierarchy", failing)

    assert demo.main() == 1
    assert "Failed to display tree" in capsys.readouterr().out


def test_main_restores_global_handler(sample_project, monkeypatch):
    monkeypatch.chdir(sample_project)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    monkeypatch.setattr("sys.stdout", io.StringIO())

    mine = OutputHandler()
    set_global_output_handler(mine)

    demo.main()
    assert get_global_output_handler() is mine
