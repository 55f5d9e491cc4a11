from __future__ import annotations

"""
Terminal Presentation Constants.

Provides the ANSI escape sequences, the per-level colour/emoji/prefix
tables used by the output handler, and the header banner formats.
"""

from typing import Dict

from palantir.domain.output_models import OutputLevel

# -----------------------------------------------------------------------------
# ANSI ESCAPE SEQUENCES
# -----------------------------------------------------------------------------

COLOR_RESET = "\033[0m"
COLOR_RED = "\033[31m"
COLOR_GREEN = "\033[32m"
COLOR_YELLOW = "\033[33m"
COLOR_BLUE = "\033[34m"
COLOR_PURPLE = "\033[35m"
COLOR_CYAN = "\033[36m"
COLOR_WHITE = "\033[37m"
COLOR_BOLD = "\033[1m"

# -----------------------------------------------------------------------------
# LEVEL STYLE TABLES
# -----------------------------------------------------------------------------

HEADER_FORMAT = "\n=== {message} ===\n"
COLORED_HEADER_FORMAT = "\n{bold}{color}=== {message} ==={reset}\n"

OUTPUT_COLORS: Dict[OutputLevel, str] = {
    OutputLevel.HEADER: COLOR_CYAN,
    OutputLevel.STAGE: COLOR_BLUE,
    OutputLevel.SUCCESS: COLOR_GREEN,
    OutputLevel.ERROR: COLOR_RED,
    OutputLevel.WARNING: COLOR_YELLOW,
    OutputLevel.INFO: "",
}

OUTPUT_EMOJIS: Dict[OutputLevel, str] = {
    OutputLevel.HEADER: "",
    OutputLevel.STAGE: "🔧 ",
    OutputLevel.SUCCESS: "✅ ",
    OutputLevel.ERROR: "❌ ",
    OutputLevel.WARNING: "⚠️  ",
    OutputLevel.INFO: "",
}

OUTPUT_PREFIXES: Dict[OutputLevel, str] = {
    OutputLevel.HEADER: "",
    OutputLevel.STAGE: "[STAGE] ",
    OutputLevel.SUCCESS: "[SUCCESS] ",
    OutputLevel.ERROR: "[ERROR] ",
    OutputLevel.WARNING: "[WARNING] ",
    OutputLevel.INFO: "",
}

AVAILABLE_PREFIX = "[AVAILABLE] "
AVAILABLE_EMOJI = "💙 "

CONFIRM_ANSWERS = frozenset({"y", "Y", "yes", "Yes"})
PLAIN_TERMINAL = "dumb"
