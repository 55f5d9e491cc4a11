from __future__ import annotations

"""
Filesystem Tree Builder.

Walks a directory with os.walk and populates a Tree[FileNode]. Hidden
entries (leading dot) are skipped, hidden directories are not descended,
and intermediate directories are found-or-created among directory
siblings only. Symlinks are described with lstat and never followed.
"""

import logging
import os
import stat
from typing import List

from palantir.core.tree.container import Tree
from palantir.core.tree.sorting import sort_tree
from palantir.domain.errors import FilesystemError
from palantir.domain.tree_models import FileNode, Node

logger = logging.getLogger(__name__)

HIDDEN_MARKER = "."

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class FileSystemTreeBuilder:
    """Builds sorted filesystem trees. Stateless; safe to reuse."""

    def build(self, source: str) -> Tree[FileNode]:
        """
        Build and sort the tree rooted at `source`.

        Args:
            source: File or directory path.

        Returns:
            Tree[FileNode]: Sorted tree; a file path yields a childless root.

        Raises:
            FilesystemError: Missing path, denied access or mid-walk I/O failure.
        """
        abs_path = os.path.abspath(source)
        logger.debug(f"Building filesystem tree for: {abs_path}")

        try:
            info = os.stat(abs_path)
        except OSError as e:
            raise FilesystemError.from_os_error(e, abs_path) from e

        root_name = os.path.basename(abs_path.rstrip(os.sep)) or abs_path
        tree: Tree[FileNode] = Tree(_describe(root_name, abs_path, info), root_name)

        if stat.S_ISDIR(info.st_mode):
            self._walk(tree, abs_path)

        sort_tree(tree)
        logger.debug(f"Filesystem tree built: {tree.size()} nodes")
        return tree

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    def _walk(self, tree: Tree[FileNode], base_path: str) -> None:
        """Populate `tree` from a top-down walk of `base_path`."""
        for root, dirs, files in os.walk(base_path, onerror=_raise_walk_error):
            dirs[:] = sorted(d for d in dirs if not _is_hidden(d))
            rel_root = os.path.relpath(root, base_path)
            parent_parts: List[str] = [] if rel_root == "." else rel_root.split(os.sep)

            for name in dirs + sorted(f for f in files if not _is_hidden(f)):
                full_path = os.path.join(root, name)
                try:
                    info = os.lstat(full_path)
                except OSError as e:
                    raise FilesystemError.from_os_error(e, full_path) from e
                self._insert(tree, base_path, parent_parts, _describe(name, full_path, info))

    def _insert(
            self,
            tree: Tree[FileNode],
            base_path: str,
            parent_parts: List[str],
            entry: FileNode,
    ) -> Node[FileNode]:
        """Find-or-create directory ancestors, then append `entry` as a new node."""
        current = tree.root
        for depth, part in enumerate(parent_parts, start=1):
            child = current.find_child(part, _is_dir_node)
            if child is None:
                dir_path = os.path.join(base_path, *parent_parts[:depth])
                child = current.add_child(Node(part, FileNode(part, dir_path, is_dir=True)))
            current = child
        return current.add_child(Node(entry.name, entry))


def build_filesystem_tree(path: str) -> Tree[FileNode]:
    """Build a sorted filesystem tree with the default builder."""
    return FileSystemTreeBuilder().build(path)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _describe(name: str, path: str, info: os.stat_result) -> FileNode:
    return FileNode(
        name=name,
        path=path,
        is_dir=stat.S_ISDIR(info.st_mode),
        size=int(info.st_size),
        mod_time=int(info.st_mtime),
    )


def _is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_MARKER)


def _is_dir_node(node: Node[FileNode]) -> bool:
    return node.data is not None and node.data.is_dir


def _raise_walk_error(exc: OSError) -> None:
    """os.walk swallows errors unless told otherwise."""
    raise FilesystemError.from_os_error(exc) from exc
