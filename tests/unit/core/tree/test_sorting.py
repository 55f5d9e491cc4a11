from __future__ import annotations

"""
Unit tests for the sibling sort policy.

Covers the containers-first ordering, codepoint name ordering,
idempotence and the invariant holding at every depth.
"""

from typing import List

from palantir.core.tree.container import Tree
from palantir.core.tree.sorting import containers_first, is_container, sort_tree
from palantir.domain.tree_models import FileNode, Node


def _fs_tree() -> Tree[FileNode]:
    tree: Tree[FileNode] = Tree(FileNode("root", "/root", is_dir=True), "root")
    entries = [
        (["zeta.txt"], False),
        (["beta"], True),
        (["Alpha.md"], False),
        (["alpha"], True),
        (["beta", "b.txt"], False),
        (["beta", "a"], True),
        (["beta", "C.txt"], False),
    ]
    for path, is_dir in entries:
        tree.insert(path, FileNode(path[-1], "/root/" + "/".join(path), is_dir=is_dir))
    return tree


def _snapshot(tree: Tree[FileNode]) -> List[List[str]]:
    lines: List[List[str]] = []
    tree.traverse(lambda n: lines.append(n.path()) or True)
    return lines


def test_containers_first_comparator():
    folder = Node("z", FileNode("z", "/z", is_dir=True))
    leaf = Node("a", FileNode("a", "/a"))

    assert containers_first(folder, leaf)
    assert not containers_first(leaf, folder)


def test_names_compare_by_codepoint():
    upper = Node("B", FileNode("B", "/B"))
    lower = Node("a", FileNode("a", "/a"))
    assert containers_first(upper, lower)


def test_sort_tree_orders_every_level():
    tree = _fs_tree()
    sort_tree(tree)

    assert [c.name for c in tree.root.children] == ["alpha", "beta", "Alpha.md", "zeta.txt"]
    beta = tree.find(["beta"])
    assert [c.name for c in beta.children] == ["a", "C.txt", "b.txt"]


def test_sort_is_idempotent():
    tree = _fs_tree()
    sort_tree(tree)
    first = _snapshot(tree)
    sort_tree(tree)
    assert _snapshot(tree) == first


def test_sort_invariant_holds_for_all_sibling_lists():
    tree = _fs_tree()
    sort_tree(tree)

    def check(node: Node[FileNode]) -> bool:
        flags = [is_container(c) for c in node.children]
        assert flags == sorted(flags, reverse=True)
        for group in (True, False):
            names = [c.name for c in node.children if is_container(c) is group]
            assert names == sorted(names)
        return True

    tree.traverse(check)


def test_placeholder_payload_counts_as_container():
    tree: Tree[FileNode] = Tree(FileNode("root", "/root", is_dir=True), "root")
    tree.insert(["b.txt"], FileNode("b.txt", "/root/b.txt"))
    tree.insert(["z", "inner.txt"], FileNode("inner.txt", "/root/z/inner.txt"))

    sort_tree(tree)
    assert [c.name for c in tree.root.children] == ["z", "b.txt"]
