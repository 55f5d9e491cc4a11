from __future__ import annotations

"""
palantir: terminal presentation library.

Leveled messages, progress lines and confirmations, plus a generic tree
engine that renders filesystem and structured-document hierarchies.
"""

from palantir.core.output.handler import OutputHandler
from palantir.core.output.registry import (
    get_global_output_handler,
    reset_global_output_handler,
    set_global_output_handler,
)
from palantir.core.tree.container import Tree
from palantir.core.tree.document_builder import (
    DocumentTreeBuilder,
    build_document_tree,
    build_document_tree_from_bytes,
)
from palantir.core.tree.fs_builder import FileSystemTreeBuilder, build_filesystem_tree
from palantir.core.tree.renderer import TreeRenderer, render_tree
from palantir.core.tree.service import (
    show_document_hierarchy,
    show_document_hierarchy_from_file,
    show_hierarchy,
)
from palantir.core.tree.sorting import containers_first, sort_tree
from palantir.core.tree.styler import (
    DocumentPalette,
    DocumentStyler,
    FileSystemPalette,
    FileSystemStyler,
    NodeStyler,
)
from palantir.domain.errors import (
    FilesystemError,
    FilesystemErrorKind,
    InvalidPathError,
    PalantirError,
    ParseError,
    RenderError,
)
from palantir.domain.output_models import OutputConfig, OutputLevel, get_default_output_config
from palantir.domain.tree_models import DocumentNode, FileNode, Node, NodeKind, RenderResult

__version__ = "0.1.0"

__all__ = [
    "Tree",
    "Node",
    "FileNode",
    "DocumentNode",
    "NodeKind",
    "RenderResult",
    "FileSystemTreeBuilder",
    "DocumentTreeBuilder",
    "build_filesystem_tree",
    "build_document_tree",
    "build_document_tree_from_bytes",
    "containers_first",
    "sort_tree",
    "NodeStyler",
    "FileSystemStyler",
    "DocumentStyler",
    "FileSystemPalette",
    "DocumentPalette",
    "TreeRenderer",
    "render_tree",
    "show_hierarchy",
    "show_document_hierarchy",
    "show_document_hierarchy_from_file",
    "OutputHandler",
    "OutputConfig",
    "OutputLevel",
    "get_default_output_config",
    "get_global_output_handler",
    "set_global_output_handler",
    "reset_global_output_handler",
    "PalantirError",
    "FilesystemError",
    "FilesystemErrorKind",
    "ParseError",
    "InvalidPathError",
    "RenderError",
]
