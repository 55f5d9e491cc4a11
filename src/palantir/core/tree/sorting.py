from __future__ import annotations

"""
Sibling Sort Policy.

Containers (directories, document objects and arrays) come first, then
names in ascending codepoint order. Python's sort is stable, so ties
keep their insertion order.
"""

from typing import Any

from palantir.core.tree.container import Tree
from palantir.domain.tree_models import Node


def is_container(node: Node[Any]) -> bool:
    """Container flag of a node's payload; placeholder payloads count as containers."""
    if node.data is None:
        return bool(node.children)
    return bool(getattr(node.data, "is_container", False))


def containers_first(a: Node[Any], b: Node[Any]) -> bool:
    """True when `a` sorts before `b`."""
    a_container = is_container(a)
    b_container = is_container(b)
    if a_container != b_container:
        return a_container
    return a.name < b.name


def sort_tree(tree: Tree[Any]) -> None:
    """Apply the default policy to every sibling list of `tree`, in place."""
    tree.sort(containers_first)
