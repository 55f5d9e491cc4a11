from __future__ import annotations

"""
Tree Renderer.

Converts a sorted Tree into ASCII-art lines. The root is never printed;
each descendant line is `<prefix><branch glyph><styled name>`, where the
prefix accumulates the continuation fragments of every ancestor.
"""

import logging
import sys
from typing import Any, Generic, Iterator, List, Optional, TextIO, TypeVar

from palantir.core.tree.container import Tree
from palantir.core.tree.styler import NodeStyler, styler_for
from palantir.domain.errors import RenderError
from palantir.domain.output_models import OutputConfig
from palantir.domain.tree_models import Node, RenderResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class TreeRenderer(Generic[T]):
    """
    Renders trees with a styling strategy.

    Args:
        styler: Strategy deciding glyphs and display text.
    """

    def __init__(self, styler: NodeStyler[T]) -> None:
        self.styler = styler

    def has_hierarchy(self, tree: Tree[T]) -> bool:
        """False when the root holds exactly one non-container child."""
        children = tree.root.children
        return not (len(children) == 1 and not self.styler.is_container(children[0]))

    def render_lines(self, tree: Tree[T]) -> List[str]:
        """Return the rendered lines without a trailing newline, ignoring suppression."""
        return list(self._iter_lines(tree))

    def render(self, tree: Tree[T], writer: Optional[TextIO] = None) -> RenderResult:
        """
        Write the tree to `writer` (stdout by default).

        Returns:
            RenderResult: SUPPRESSED_SINGLE_FILE when there is no hierarchy
            to show, RENDERED otherwise.

        Raises:
            RenderError: If the writer fails. Lines already written stay written.
        """
        if not self.has_hierarchy(tree):
            logger.debug("Single leaf under root; tree render suppressed")
            return RenderResult.SUPPRESSED_SINGLE_FILE

        out = writer if writer is not None else sys.stdout
        try:
            for line in self._iter_lines(tree):
                out.write(line + "\n")
            out.flush()
        except (OSError, ValueError) as e:
            raise RenderError(f"failed to write tree: {e}") from e

        return RenderResult.RENDERED

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    def _iter_lines(self, tree: Tree[T]) -> Iterator[str]:
        yield from self._walk(tree.root, prefix="", is_last=True, is_root=True)

    def _walk(self, node: Node[T], prefix: str, is_last: bool, is_root: bool) -> Iterator[str]:
        if not is_root:
            yield f"{prefix}{self.styler.tree_char(node, is_last)}{self.styler.style(node)}"

        child_prefix = prefix + self.styler.continuation(node, is_last, is_root)
        total = len(node.children)
        for i, child in enumerate(node.children):
            yield from self._walk(child, child_prefix, is_last=(i == total - 1), is_root=False)


def render_tree(
        tree: Tree[Any],
        styler: Optional[NodeStyler[Any]] = None,
        writer: Optional[TextIO] = None,
        config: Optional[OutputConfig] = None,
) -> RenderResult:
    """
    Render `tree` with `styler`, or with the styler matching its root payload.

    Args:
        tree: Already-sorted tree.
        styler: Styling strategy; inferred from the root payload when omitted.
        writer: Text sink; stdout when omitted.
        config: Used only when the styler is inferred.
    """
    if styler is None:
        styler = styler_for(tree.root.data, config)
    return TreeRenderer(styler).render(tree, writer)
