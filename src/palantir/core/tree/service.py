from __future__ import annotations

"""
Hierarchy Display Services.

One-call pipelines (build, sort, render) for filesystem paths and
structured documents. Configuration defaults to the globally registered
output handler's config.
"""

import logging
from typing import Optional, TextIO

from palantir.core.output.registry import get_global_output_handler
from palantir.core.tree.document_builder import DocumentTreeBuilder, RawDocument
from palantir.core.tree.fs_builder import FileSystemTreeBuilder
from palantir.core.tree.renderer import TreeRenderer
from palantir.core.tree.sorting import sort_tree
from palantir.core.tree.styler import DocumentStyler, FileSystemStyler
from palantir.domain.output_models import OutputConfig
from palantir.domain.tree_models import RenderResult

logger = logging.getLogger(__name__)


def show_hierarchy(
        base_path: str,
        config: Optional[OutputConfig] = None,
        writer: Optional[TextIO] = None,
) -> RenderResult:
    """
    Display the filesystem tree under `base_path`.

    Args:
        base_path: Directory (or file) to display.
        config: Style configuration; the global handler's when omitted.
        writer: Text sink; stdout when omitted.

    Returns:
        RenderResult: SUPPRESSED_SINGLE_FILE when the path holds a single file.

    Raises:
        FilesystemError: If the path cannot be walked.
        RenderError: If the writer fails.
    """
    logger.info(f"Displaying hierarchy for: {base_path}")
    tree = FileSystemTreeBuilder().build(base_path)
    styler = FileSystemStyler(_resolve_config(config))
    return TreeRenderer(styler).render(tree, writer)


def show_document_hierarchy(
        raw: RawDocument,
        config: Optional[OutputConfig] = None,
        writer: Optional[TextIO] = None,
        show_values: bool = False,
) -> RenderResult:
    """
    Parse a YAML/JSON document and display its structure.

    Raises:
        ParseError: If the document is malformed; nothing is written.
        RenderError: If the writer fails.
    """
    tree = DocumentTreeBuilder().build_from_bytes(raw)
    sort_tree(tree)
    styler = DocumentStyler(_resolve_config(config), show_values=show_values)
    return TreeRenderer(styler).render(tree, writer)


def show_document_hierarchy_from_file(
        path: str,
        config: Optional[OutputConfig] = None,
        writer: Optional[TextIO] = None,
        show_values: bool = False,
) -> RenderResult:
    """
    Read a YAML/JSON file and display its structure.

    Raises:
        FilesystemError: If the file cannot be read.
        ParseError: If its content is malformed.
    """
    logger.info(f"Displaying document hierarchy for: {path}")
    tree = DocumentTreeBuilder().build_from_file(path)
    sort_tree(tree)
    styler = DocumentStyler(_resolve_config(config), show_values=show_values)
    return TreeRenderer(styler).render(tree, writer)


def _resolve_config(config: Optional[OutputConfig]) -> OutputConfig:
    if config is not None:
        return config
    return get_global_output_handler().config
