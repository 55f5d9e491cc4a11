from __future__ import annotations

"""
Tree Structure Data Models.

Provides the generic node type shared by every tree, the payload
descriptors for filesystem and structured-document sources, and the
render outcome marker.
"""

import weakref
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")

# -----------------------------------------------------------------------------
# GENERIC NODE
# -----------------------------------------------------------------------------

class Node(Generic[T]):
    """
    A named node in an ordered n-ary tree.

    Children are owned by their parent. The parent link is a weak
    reference used only to rebuild the root-to-node path.

    Attributes:
        name: Segment label for this node.
        data: Payload carried by the node.
        children: Ordered child nodes.
    """

    def __init__(self, name: str, data: T) -> None:
        self.name = name
        self.data = data
        self.children: List[Node[T]] = []
        self._parent: Optional[weakref.ReferenceType[Node[T]]] = None

    def __repr__(self) -> str:
        return f"Node(name={self.name!r}, children={len(self.children)})"

    @property
    def parent(self) -> Optional[Node[T]]:
        if self._parent is None:
            return None
        return self._parent()

    def add_child(self, child: Node[T]) -> Node[T]:
        """Append a child and point its back-reference at this node."""
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    def find_child(
            self,
            name: str,
            predicate: Optional[Callable[[Node[T]], bool]] = None,
    ) -> Optional[Node[T]]:
        """
        Return the first child called `name`, optionally filtered by `predicate`.

        Args:
            name: Child name to look up.
            predicate: Extra condition the child must satisfy.

        Returns:
            Optional[Node[T]]: Matching child or None.
        """
        for child in self.children:
            if child.name != name:
                continue
            if predicate is None or predicate(child):
                return child
        return None

    def is_leaf(self) -> bool:
        return not self.children

    def depth(self) -> int:
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    def path(self) -> List[str]:
        """Names from the root down to this node, root included."""
        names: List[str] = []
        current: Optional[Node[T]] = self
        while current is not None:
            names.append(current.name)
            current = current.parent
        names.reverse()
        return names

# -----------------------------------------------------------------------------
# PAYLOAD DESCRIPTORS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Metadata for a filesystem entry.

    Attributes:
        name: Base name of the entry.
        path: Absolute filesystem path.
        is_dir: Whether the entry is a directory.
        size: Size in bytes.
        mod_time: Last modification time (Unix seconds).
    """
    name: str
    path: str
    is_dir: bool = False
    size: int = 0
    mod_time: int = 0

    @property
    def is_container(self) -> bool:
        return self.is_dir


class NodeKind(Enum):
    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"


@dataclass(frozen=True)
class DocumentNode:
    """
    Descriptor for one value of a parsed structured document.

    Attributes:
        name: Field key or array-derived label.
        value: Raw value as deserialised.
        kind: Structural kind of the node.
        is_dir: Whether the node may hold children.
    """
    name: str
    value: Any
    kind: NodeKind
    is_dir: bool = False

    @property
    def is_container(self) -> bool:
        return self.is_dir

# -----------------------------------------------------------------------------
# RENDER OUTCOME
# -----------------------------------------------------------------------------

class RenderResult(Enum):
    RENDERED = "rendered"
    SUPPRESSED_SINGLE_FILE = "suppressed_single_file"
