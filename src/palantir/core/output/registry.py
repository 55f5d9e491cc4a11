from __future__ import annotations

"""
Process-Wide Output Handler Registry.

Holds the handler used when callers do not inject one explicitly.
The default handler is created lazily on first access.
"""

import threading
from typing import Optional

from palantir.core.output.handler import OutputHandler

_LOCK = threading.Lock()
_GLOBAL_HANDLER: Optional[OutputHandler] = None


def get_global_output_handler() -> OutputHandler:
    global _GLOBAL_HANDLER
    with _LOCK:
        if _GLOBAL_HANDLER is None:
            _GLOBAL_HANDLER = OutputHandler()
        return _GLOBAL_HANDLER


def set_global_output_handler(handler: OutputHandler) -> None:
    global _GLOBAL_HANDLER
    with _LOCK:
        _GLOBAL_HANDLER = handler


def reset_global_output_handler() -> None:
    """Drop the registered handler; the next access recreates the default."""
    global _GLOBAL_HANDLER
    with _LOCK:
        _GLOBAL_HANDLER = None
