from __future__ import annotations

"""
Output Formatting Models.

Defines the message severity levels and the immutable configuration
that drives colourisation, iconography and formatting decisions.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class OutputLevel(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"
    STAGE = "stage"
    HEADER = "header"


@dataclass(frozen=True)
class OutputConfig:
    """
    Formatting policy shared by the output handler and the tree stylers.

    Attributes:
        use_colors: Emit ANSI colour sequences.
        use_emojis: Use emoji level markers instead of textual prefixes.
        use_formatting: Apply bold/colour wrapping to whole lines.
        disable_output: Suppress every print operation.
        verbose_mode: Allow debug messages through.
        colorize_level_only: Colour only the level marker, not the message.
    """
    use_colors: bool = True
    use_emojis: bool = True
    use_formatting: bool = True
    disable_output: bool = False
    verbose_mode: bool = False
    colorize_level_only: bool = False


def get_default_output_config(environ: Optional[Mapping[str, str]] = None) -> OutputConfig:
    """
    Build the default configuration, honouring the NO_COLOR convention.

    Args:
        environ: Environment mapping to inspect. Defaults to os.environ.

    Returns:
        OutputConfig: All features on, colours off when NO_COLOR is set.
    """
    env = os.environ if environ is None else environ
    if env.get("NO_COLOR"):
        return OutputConfig(use_colors=False)
    return OutputConfig()
