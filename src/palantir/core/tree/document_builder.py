from __future__ import annotations

"""
Structured-Document Tree Builder.

Decomposes an already-parsed document (mappings, sequences, scalars) into
a Tree[DocumentNode]. Raw YAML or JSON text is deserialised with PyYAML
first; malformed input raises ParseError before any node is created.
The builder keeps source order and does not sort.
"""

import logging
from typing import Any, Mapping, Set, Union

import yaml

from palantir.core.tree.container import Tree
from palantir.domain.errors import FilesystemError, ParseError
from palantir.domain.tree_models import DocumentNode, Node, NodeKind

logger = logging.getLogger(__name__)

ROOT_NAME = "root"
SCALAR_DOCUMENT_LABEL = "value"

RawDocument = Union[bytes, str, None]


class DocumentTreeBuilder:
    """Builds trees from structured documents."""

    def build(self, document: Any) -> Tree[DocumentNode]:
        """
        Build a tree from a deserialised value.

        Args:
            document: Mapping, sequence, scalar or None.

        Returns:
            Tree[DocumentNode]: Tree under a synthetic root named "root".

        Raises:
            ParseError: If a container holds an alias to one of its ancestors.
        """
        if _is_sequence(document):
            root_data = DocumentNode(ROOT_NAME, document, NodeKind.ARRAY, is_dir=True)
        else:
            root_data = DocumentNode(ROOT_NAME, document, NodeKind.OBJECT, is_dir=True)

        tree: Tree[DocumentNode] = Tree(root_data, ROOT_NAME)
        root = tree.root
        active: Set[int] = set()

        if isinstance(document, Mapping):
            self._add_mapping(root, document, active)
        elif _is_sequence(document):
            self._add_sequence(root, document, active)
        elif document is not None:
            self._add_value(root, SCALAR_DOCUMENT_LABEL, document, active)

        logger.debug(f"Document tree built: {tree.size()} nodes")
        return tree

    def build_from_bytes(self, raw: RawDocument) -> Tree[DocumentNode]:
        """
        Parse YAML/JSON source and build its tree.

        Raises:
            ParseError: If the source is not a valid document.
        """
        return self.build(parse_document(raw))

    def build_from_file(self, path: str) -> Tree[DocumentNode]:
        """
        Read, parse and build a document file.

        Raises:
            FilesystemError: If the file cannot be read.
            ParseError: If its content is not a valid document.
        """
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise FilesystemError.from_os_error(e, path) from e
        return self.build_from_bytes(raw)

    # -------------------------------------------------------------------------
    # RECURSIVE DECOMPOSITION
    # -------------------------------------------------------------------------

    def _add_value(self, parent: Node[DocumentNode], name: str, value: Any, active: Set[int]) -> None:
        if isinstance(value, Mapping):
            child = parent.add_child(Node(name, DocumentNode(name, value, NodeKind.OBJECT, is_dir=True)))
            self._add_mapping(child, value, active)
        elif _is_sequence(value):
            child = parent.add_child(Node(name, DocumentNode(name, value, NodeKind.ARRAY, is_dir=True)))
            self._add_sequence(child, value, active)
        else:
            parent.add_child(Node(name, DocumentNode(name, value, NodeKind.SCALAR)))

    def _add_mapping(self, node: Node[DocumentNode], mapping: Mapping[Any, Any], active: Set[int]) -> None:
        _enter(mapping, node, active)
        for key, value in mapping.items():
            self._add_value(node, format_scalar(key), value, active)
        active.discard(id(mapping))

    def _add_sequence(self, node: Node[DocumentNode], items: Any, active: Set[int]) -> None:
        _enter(items, node, active)
        for index, item in enumerate(items):
            if isinstance(item, Mapping) or _is_sequence(item):
                self._add_value(node, f"[{index}]", item, active)
                continue
            # Scalar items are labelled by their own text and keep the array kind.
            label = format_scalar(item)
            node.add_child(Node(label, DocumentNode(label, item, NodeKind.ARRAY)))
        active.discard(id(items))


def parse_document(raw: RawDocument) -> Any:
    """
    Deserialise YAML (or JSON, a YAML subset) into plain Python values.

    Returns:
        Any: Parsed value; None for empty input.

    Raises:
        ParseError: If the source is malformed.
    """
    if raw is None:
        return None
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ParseError(f"failed to parse document: {e}") from e


def format_scalar(value: Any) -> str:
    """Natural textual form of a scalar value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_document_tree(document: Any) -> Tree[DocumentNode]:
    """Build a document tree from an already-parsed value."""
    return DocumentTreeBuilder().build(document)


def build_document_tree_from_bytes(raw: RawDocument) -> Tree[DocumentNode]:
    """Parse YAML/JSON source and build its tree; raises ParseError when malformed."""
    return DocumentTreeBuilder().build_from_bytes(raw)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _enter(container: Any, node: Node[DocumentNode], active: Set[int]) -> None:
    """Mark `container` as being decomposed; an alias back into it cannot be expanded."""
    if id(container) in active:
        path = "/".join(node.path())
        raise ParseError(f"recursive alias at {path}: document refers to one of its own ancestors")
    active.add(id(container))
