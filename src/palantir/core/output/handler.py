from __future__ import annotations

"""
Leveled Terminal Output.

Formats and prints headers, stage/success/error/warning/info messages,
progress lines and yes/no confirmations according to an OutputConfig.
Streams are injectable so output can be captured without touching
sys.stdout.
"""

import logging
import os
import sys
from dataclasses import replace
from typing import Any, Optional, TextIO

from palantir.domain.constants import (
    AVAILABLE_EMOJI,
    AVAILABLE_PREFIX,
    COLOR_BLUE,
    COLOR_BOLD,
    COLOR_CYAN,
    COLOR_RESET,
    COLOR_YELLOW,
    COLORED_HEADER_FORMAT,
    CONFIRM_ANSWERS,
    HEADER_FORMAT,
    OUTPUT_COLORS,
    OUTPUT_EMOJIS,
    OUTPUT_PREFIXES,
    PLAIN_TERMINAL,
)
from palantir.domain.output_models import OutputConfig, OutputLevel, get_default_output_config

logger = logging.getLogger(__name__)


class OutputHandler:
    """
    Terminal message formatter and printer.

    Args:
        config: Formatting policy. Defaults to get_default_output_config().
        stream: Output sink. Defaults to the current sys.stdout at write time.
        input_stream: Source for confirm() answers. Defaults to sys.stdin.
    """

    def __init__(
            self,
            config: Optional[OutputConfig] = None,
            stream: Optional[TextIO] = None,
            input_stream: Optional[TextIO] = None,
    ) -> None:
        self.config = config or get_default_output_config()
        self._stream = stream
        self._input_stream = input_stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def input_stream(self) -> TextIO:
        return self._input_stream if self._input_stream is not None else sys.stdin

    # -------------------------------------------------------------------------
    # FORMATTING
    # -------------------------------------------------------------------------

    def format_message(self, level: OutputLevel, message: str) -> str:
        """
        Build the printable form of `message` for `level`.

        Returns an empty string when output is disabled and the bare
        message (no newline) on a plain terminal.
        """
        cfg = self.config
        if cfg.disable_output:
            return ""

        if not self.is_supported():
            return message

        # The header banner is its own level marker.
        if level is OutputLevel.HEADER:
            if cfg.use_colors:
                return COLORED_HEADER_FORMAT.format(
                    bold=COLOR_BOLD, color=OUTPUT_COLORS[level], message=message, reset=COLOR_RESET
                )
            return HEADER_FORMAT.format(message=message)

        color = ""
        if cfg.use_colors and cfg.use_emojis and cfg.use_formatting:
            prefix = OUTPUT_EMOJIS[level]
            color = OUTPUT_COLORS[level]
        else:
            prefix = OUTPUT_PREFIXES[level]
            if cfg.use_colors:
                color = OUTPUT_COLORS[level]

        if cfg.use_colors and cfg.use_formatting:
            if cfg.colorize_level_only and color and prefix:
                return f"{COLOR_BOLD}{color}{prefix}{COLOR_RESET}{message}\n"
            return f"{COLOR_BOLD}{color}{prefix}{message}{COLOR_RESET}\n"

        return f"{prefix}{message}\n"

    # -------------------------------------------------------------------------
    # PRINTING
    # -------------------------------------------------------------------------

    def print_with_level(self, level: OutputLevel, fmt: str, *args: Any) -> None:
        if self.config.disable_output:
            return
        message = fmt % args if args else fmt
        self._write(self.format_message(level, message))

    def print_header(self, message: str) -> None:
        self.print_with_level(OutputLevel.HEADER, message)

    def print_stage(self, message: str) -> None:
        self.print_with_level(OutputLevel.STAGE, message)

    def print_success(self, message: str) -> None:
        self.print_with_level(OutputLevel.SUCCESS, message)

    def print_error(self, fmt: str, *args: Any) -> None:
        self.print_with_level(OutputLevel.ERROR, fmt, *args)

    def print_warning(self, fmt: str, *args: Any) -> None:
        self.print_with_level(OutputLevel.WARNING, fmt, *args)

    def print_info(self, fmt: str, *args: Any) -> None:
        self.print_with_level(OutputLevel.INFO, fmt, *args)

    def debug(self, fmt: str, *args: Any) -> None:
        """Print an info-level line only in verbose mode."""
        if self.config.verbose_mode:
            self.print_with_level(OutputLevel.INFO, fmt, *args)

    def print_already_available(self, fmt: str, *args: Any) -> None:
        """Report that something is already present (blue, heart marker)."""
        cfg = self.config
        if cfg.disable_output:
            return

        message = fmt % args if args else fmt
        if not cfg.use_colors:
            self._write(f"{AVAILABLE_PREFIX}{message}\n")
            return

        prefix = AVAILABLE_EMOJI if cfg.use_emojis and cfg.use_formatting else AVAILABLE_PREFIX
        if cfg.colorize_level_only:
            self._write(f"{COLOR_BOLD}{COLOR_BLUE}{prefix}{COLOR_RESET}{message}\n")
        else:
            self._write(f"{COLOR_BOLD}{COLOR_BLUE}{prefix}{message}{COLOR_RESET}\n")

    def print_progress(self, current: int, total: int, message: str) -> None:
        """
        Print a "[current/total] P% - message" line.

        The percentage is rounded to an integer; a zero total reads as 0%.
        """
        cfg = self.config
        if cfg.disable_output:
            return

        percentage = (current / total * 100) if total else 0.0
        progress = f"[{current}/{total}] {percentage:.0f}% - "

        if cfg.use_colors and cfg.use_formatting:
            if cfg.colorize_level_only:
                self._write(f"\r{COLOR_BOLD}{COLOR_CYAN}{progress}{COLOR_RESET}{message}\n")
            else:
                self._write(f"\r{COLOR_BOLD}{COLOR_CYAN}{progress}{message}{COLOR_RESET}\n")
            return

        self._write(f"\r{progress}{message}\n")

    def confirm(self, message: str) -> bool:
        """
        Ask a yes/no question; only y, Y, yes and Yes count as yes.

        Returns False without prompting when output is disabled or input
        is exhausted.
        """
        cfg = self.config
        if cfg.disable_output:
            return False

        if cfg.use_colors and cfg.use_formatting:
            if cfg.colorize_level_only:
                prompt = f"{COLOR_BOLD}{COLOR_YELLOW}?{COLOR_RESET} {message} (y/N): "
            else:
                prompt = f"{COLOR_BOLD}{COLOR_YELLOW}? {message} (y/N): {COLOR_RESET}"
        else:
            prompt = f"? {message} (y/N): "

        self._write(prompt)
        try:
            response = self.input_stream.readline()
        except (OSError, ValueError) as e:
            logger.debug(f"Confirmation input unavailable: {e}")
            return False

        return response.strip() in CONFIRM_ANSWERS

    # -------------------------------------------------------------------------
    # CAPABILITIES
    # -------------------------------------------------------------------------

    def is_supported(self) -> bool:
        """False on a plain ("dumb") terminal."""
        return os.environ.get("TERM") != PLAIN_TERMINAL

    def disable(self) -> None:
        self.config = replace(self.config, disable_output=True)

    def _write(self, text: str) -> None:
        if not text:
            return
        out = self.stream
        out.write(text)
        out.flush()
