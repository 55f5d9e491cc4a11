from __future__ import annotations

"""
Generic Tree Container.

Holds a single-rooted, ordered n-ary tree of named nodes. The container
is deliberately dumb: insertion never deduplicates the final segment,
so builders that need find-or-create semantics implement them on top.
"""

from functools import cmp_to_key
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from palantir.domain.errors import InvalidPathError
from palantir.domain.tree_models import Node

T = TypeVar("T")

Comparator = Callable[[Node[T], Node[T]], bool]
Visitor = Callable[[Node[T]], bool]
PlaceholderFactory = Callable[[List[str]], T]


class Tree(Generic[T]):
    """
    Ordered tree with exactly one root.

    Not thread-safe: concurrent writers must serialise calls to insert().
    """

    def __init__(self, root_data: T, root_name: str = "root") -> None:
        self._root: Node[T] = Node(root_name, root_data)

    @property
    def root(self) -> Node[T]:
        return self._root

    def insert(
            self,
            path: Sequence[str],
            data: T,
            placeholder: Optional[PlaceholderFactory] = None,
    ) -> Node[T]:
        """
        Insert a node at the given path below the root.

        Intermediate segments reuse the first child with a matching name or
        create a node whose payload comes from `placeholder` (None when no
        factory is given). The final segment always creates a new node.

        Args:
            path: Ordered segment names, root excluded.
            data: Payload for the final node.
            placeholder: Factory receiving the segments consumed so far.

        Returns:
            Node[T]: The newly created final node.

        Raises:
            InvalidPathError: If `path` is empty.
        """
        if not path:
            raise InvalidPathError("path cannot be empty")

        current = self._root
        for depth, name in enumerate(path[:-1], start=1):
            child = current.find_child(name)
            if child is None:
                payload = placeholder(list(path[:depth])) if placeholder else None
                child = current.add_child(Node(name, payload))
            current = child

        return current.add_child(Node(path[-1], data))

    def find(self, path: Sequence[str]) -> Optional[Node[T]]:
        """Walk name-matched children from the root; None when a segment is missing."""
        current = self._root
        for name in path:
            child = current.find_child(name)
            if child is None:
                return None
            current = child
        return current

    def traverse(self, visitor: Visitor) -> None:
        """
        Pre-order depth-first walk.

        A visitor returning False prunes the subtree below that node;
        siblings are still visited.
        """
        stack: List[Node[T]] = [self._root]
        while stack:
            node = stack.pop()
            if not visitor(node):
                continue
            stack.extend(reversed(node.children))

    def sort(self, comparator: Comparator) -> None:
        """
        Reorder every sibling list in place.

        Args:
            comparator: Returns True when the first node sorts before the second.
        """
        key = cmp_to_key(_as_cmp(comparator))
        stack: List[Node[T]] = [self._root]
        while stack:
            node = stack.pop()
            if node.children:
                node.children.sort(key=key)
                stack.extend(node.children)

    def size(self) -> int:
        count = 0

        def _count(_: Node[T]) -> bool:
            nonlocal count
            count += 1
            return True

        self.traverse(_count)
        return count


def _as_cmp(comparator: Comparator) -> Callable[[Node[T], Node[T]], int]:
    """Adapt a less-than predicate to a three-way comparison."""
    def _cmp(a: Node[T], b: Node[T]) -> int:
        if comparator(a, b):
            return -1
        if comparator(b, a):
            return 1
        return 0

    return _cmp
