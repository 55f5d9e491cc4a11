from __future__ import annotations

"""
Node Styling Strategies.

A styler decides how one node looks on screen: the branch glyph, the
continuation fragment handed down to its descendants, and the display
text. Colour tables are injectable palettes; glyphs are fixed.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar

from palantir.core.tree.document_builder import format_scalar
from palantir.core.tree.sorting import is_container
from palantir.domain.constants import (
    COLOR_BLUE,
    COLOR_BOLD,
    COLOR_CYAN,
    COLOR_GREEN,
    COLOR_PURPLE,
    COLOR_RESET,
    COLOR_YELLOW,
)
from palantir.domain.output_models import OutputConfig
from palantir.domain.tree_models import DocumentNode, FileNode, Node, NodeKind

T = TypeVar("T")


@dataclass(frozen=True)
class TreeSymbols:
    """Box-drawing glyphs used to connect tree lines."""
    TEE: str = "├── "
    LAST: str = "└── "
    PIPE: str = "│   "
    SPACE: str = "    "


SYMBOLS = TreeSymbols()

# -----------------------------------------------------------------------------
# PALETTES
# -----------------------------------------------------------------------------

def _default_extension_colors() -> Dict[str, str]:
    colors: Dict[str, str] = {}
    for ext in (".json", ".yaml", ".yml", ".toml"):
        colors[ext] = COLOR_GREEN
    for ext in (".md", ".txt", ".log"):
        colors[ext] = COLOR_CYAN
    for ext in (".sh", ".zsh", ".bash"):
        colors[ext] = COLOR_YELLOW
    colors[".go"] = COLOR_PURPLE
    return colors


@dataclass(frozen=True)
class FileSystemPalette:
    """
    Colours for filesystem trees.

    Attributes:
        directory: Colour applied (with bold) to directories.
        extensions: Lower-case extension to colour lookup for files.
    """
    directory: str = COLOR_BLUE
    extensions: Dict[str, str] = field(default_factory=_default_extension_colors)


@dataclass(frozen=True)
class DocumentPalette:
    """Colours for structured-document trees, keyed by node kind."""
    object_color: str = COLOR_BLUE
    array_color: str = COLOR_PURPLE
    scalar_color: str = COLOR_GREEN

    def for_kind(self, kind: NodeKind) -> str:
        return {
            NodeKind.OBJECT: self.object_color,
            NodeKind.ARRAY: self.array_color,
            NodeKind.SCALAR: self.scalar_color,
        }[kind]

# -----------------------------------------------------------------------------
# STYLER STRATEGIES
# -----------------------------------------------------------------------------

class NodeStyler(Generic[T]):
    """
    Base styling strategy. Glyph selection ignores colour settings.

    Subclasses override style() to colour names for their payload type.
    """

    def __init__(self, config: Optional[OutputConfig] = None) -> None:
        self.config = config or OutputConfig()

    @property
    def colors_enabled(self) -> bool:
        return self.config.use_colors

    def style(self, node: Node[T]) -> str:
        return node.name

    def tree_char(self, node: Node[T], is_last: bool) -> str:
        return SYMBOLS.LAST if is_last else SYMBOLS.TEE

    def continuation(self, node: Node[T], is_last: bool, is_root: bool) -> str:
        """Fragment prepended to every descendant line of `node`."""
        if is_root:
            return ""
        return SYMBOLS.SPACE if is_last else SYMBOLS.PIPE

    def is_container(self, node: Node[T]) -> bool:
        return is_container(node)


class FileSystemStyler(NodeStyler[FileNode]):
    """Bold directories; files coloured by extension."""

    def __init__(
            self,
            config: Optional[OutputConfig] = None,
            palette: Optional[FileSystemPalette] = None,
    ) -> None:
        super().__init__(config)
        self.palette = palette or FileSystemPalette()

    def style(self, node: Node[FileNode]) -> str:
        name = node.data.name if node.data is not None else node.name
        if not self.colors_enabled:
            return name

        if self.is_container(node):
            return f"{COLOR_BOLD}{self.palette.directory}{name}{COLOR_RESET}"

        ext = os.path.splitext(name)[1].lower()
        color = self.palette.extensions.get(ext)
        if not color:
            return name
        return f"{color}{name}{COLOR_RESET}"


class DocumentStyler(NodeStyler[DocumentNode]):
    """
    Colours document nodes by kind.

    With `show_values` on (opt-in), scalar fields render as "key: value".
    Display text is kept on one line so every rendered row carries its prefix.
    """

    def __init__(
            self,
            config: Optional[OutputConfig] = None,
            palette: Optional[DocumentPalette] = None,
            show_values: bool = False,
    ) -> None:
        super().__init__(config)
        self.palette = palette or DocumentPalette()
        self.show_values = show_values

    def style(self, node: Node[DocumentNode]) -> str:
        data = node.data
        name = single_line(node.name)
        if data is None:
            return name

        value_suffix = ""
        if self.show_values and data.kind is NodeKind.SCALAR:
            value_suffix = f": {single_line(format_scalar(data.value))}"

        if not self.colors_enabled:
            return f"{name}{value_suffix}"

        color = self.palette.for_kind(data.kind)
        bold = COLOR_BOLD if data.is_container else ""
        return f"{bold}{color}{name}{COLOR_RESET}{value_suffix}"


def single_line(text: str) -> str:
    """Escape line breaks so `text` occupies exactly one terminal row."""
    return text.replace("\r", "\\r").replace("\n", "\\n")


def styler_for(sample: Any, config: Optional[OutputConfig] = None) -> NodeStyler[Any]:
    """Pick the styler matching a payload instance."""
    if isinstance(sample, FileNode):
        return FileSystemStyler(config)
    if isinstance(sample, DocumentNode):
        return DocumentStyler(config)
    return NodeStyler(config)
