from __future__ import annotations

"""
Integration tests for the hierarchy display services.

Runs the full build, sort and render pipeline against temporary
directories and YAML documents, including global-config resolution.
"""

from pathlib import Path

import pytest

from palantir.core.output.handler import OutputHandler
from palantir.core.output.registry import set_global_output_handler
from palantir.core.tree.service import (
    show_document_hierarchy,
    show_document_hierarchy_from_file,
    show_hierarchy,
)
from palantir.domain.constants import COLOR_RESET
from palantir.domain.errors import FilesystemError, FilesystemErrorKind, ParseError
from palantir.domain.tree_models import RenderResult

CONFIG_YAML = b"""
server:
  port: 8080
  host: 0.0.0.0
name: demo
features:
  - logging
  - auth
"""


def test_show_hierarchy_plain(sample_project, plain_config, buffer):
    result = show_hierarchy(str(sample_project), config=plain_config, writer=buffer)

    assert result is RenderResult.RENDERED
    assert buffer.getvalue() == (
        "├── dirA\n"
        "│   ├── file1.txt\n"
        "│   └── file2.txt\n"
        "└── file3.txt\n"
    )


def test_show_hierarchy_uses_global_config(sample_project, plain_config, buffer):
    set_global_output_handler(OutputHandler(plain_config))
    show_hierarchy(str(sample_project), writer=buffer)
    assert COLOR_RESET not in buffer.getvalue()


def test_show_hierarchy_default_global_config_is_coloured(sample_project, buffer):
    show_hierarchy(str(sample_project), writer=buffer)
    assert COLOR_RESET in buffer.getvalue()


def test_show_hierarchy_respects_no_color(sample_project, buffer, monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    show_hierarchy(str(sample_project), writer=buffer)
    assert COLOR_RESET not in buffer.getvalue()


def test_show_hierarchy_single_file_suppressed(tmp_path, plain_config, buffer):
    root = tmp_path / "one"
    root.mkdir()
    (root / "main.go").write_text("package main", encoding="utf-8")

    result = show_hierarchy(str(root), config=plain_config, writer=buffer)

    assert result is RenderResult.SUPPRESSED_SINGLE_FILE
    assert buffer.getvalue() == ""


def test_show_hierarchy_missing_path(tmp_path, plain_config, buffer):
    with pytest.raises(FilesystemError) as excinfo:
        show_hierarchy(str(tmp_path / "ghost"), config=plain_config, writer=buffer)
    assert excinfo.value.kind is FilesystemErrorKind.NOT_FOUND
    assert buffer.getvalue() == ""


def test_show_document_hierarchy_sorted(plain_config, buffer):
    result = show_document_hierarchy(CONFIG_YAML, config=plain_config, writer=buffer, show_values=True)

    assert result is RenderResult.RENDERED
    assert buffer.getvalue().splitlines() == [
        "├── features",
        "│   ├── auth",
        "│   └── logging",
        "├── server",
        "│   ├── host: 0.0.0.0",
        "│   └── port: 8080",
        "└── name: demo",
    ]


def test_show_document_hierarchy_plain_names_by_default(plain_config, buffer):
    show_document_hierarchy(CONFIG_YAML, config=plain_config, writer=buffer)
    assert buffer.getvalue().splitlines() == [
        "├── features",
        "│   ├── auth",
        "│   └── logging",
        "├── server",
        "│   ├── host",
        "│   └── port",
        "└── name",
    ]


def test_block_scalar_stays_on_one_row(plain_config, buffer):
    show_document_hierarchy(b"a: |\n  line1\n  line2\nb: 1\n", config=plain_config, writer=buffer, show_values=True)
    assert buffer.getvalue() == "├── a: line1\\nline2\\n\n└── b: 1\n"


def test_recursive_alias_is_rejected(plain_config, buffer):
    with pytest.raises(ParseError):
        show_document_hierarchy(b"a: &x [1, *x]\nb: 2\n", config=plain_config, writer=buffer)
    assert buffer.getvalue() == ""


def test_malformed_document_writes_nothing(plain_config, buffer):
    with pytest.raises(ParseError):
        show_document_hierarchy(b"key: [unclosed\n", config=plain_config, writer=buffer)
    assert buffer.getvalue() == ""


def test_single_scalar_document_is_suppressed(plain_config, buffer):
    result = show_document_hierarchy(b"only: 1\n", config=plain_config, writer=buffer)
    assert result is RenderResult.SUPPRESSED_SINGLE_FILE


def test_show_document_hierarchy_from_file(tmp_path: Path, plain_config, buffer):
    path = tmp_path / "config.yml"
    path.write_bytes(CONFIG_YAML)

    result = show_document_hierarchy_from_file(str(path), config=plain_config, writer=buffer)

    assert result is RenderResult.RENDERED
    assert buffer.getvalue().startswith("├── features\n")


def test_show_document_hierarchy_from_missing_file(tmp_path, plain_config, buffer):
    with pytest.raises(FilesystemError) as excinfo:
        show_document_hierarchy_from_file(str(tmp_path / "absent.yml"), config=plain_config, writer=buffer)
    assert excinfo.value.kind is FilesystemErrorKind.NOT_FOUND
