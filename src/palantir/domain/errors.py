from __future__ import annotations

"""
Error Taxonomy.

Every failure raised by the tree engine derives from PalantirError so
callers can catch the whole family at a single seam.
"""

from enum import Enum
from typing import Optional


class PalantirError(Exception):
    """Base class for all library errors."""


class FilesystemErrorKind(Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IO = "io"


class FilesystemError(PalantirError):
    """
    Raised when a path cannot be resolved or walked.

    Attributes:
        kind: Failure category.
        path: Path that triggered the failure.
    """

    def __init__(self, kind: FilesystemErrorKind, path: str, message: str = "") -> None:
        self.kind = kind
        self.path = path
        super().__init__(message or f"{kind.value}: {path}")

    @classmethod
    def from_os_error(cls, exc: OSError, path: Optional[str] = None) -> "FilesystemError":
        """Classify an OSError into the matching kind."""
        target = path or exc.filename or ""
        if isinstance(exc, FileNotFoundError):
            kind = FilesystemErrorKind.NOT_FOUND
        elif isinstance(exc, PermissionError):
            kind = FilesystemErrorKind.PERMISSION_DENIED
        else:
            kind = FilesystemErrorKind.IO
        return cls(kind, str(target), f"{kind.value}: {target}: {exc.strerror or exc}")


class ParseError(PalantirError):
    """Raised when structured-document input cannot be deserialised."""


class InvalidPathError(PalantirError, ValueError):
    """Raised when an empty path is passed to Tree.insert."""


class RenderError(PalantirError):
    """Raised when the output writer fails mid-render."""
