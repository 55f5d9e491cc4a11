from __future__ import annotations

"""
Demonstration Entry Point.

Walks through every message level under several formatting configs,
then renders the current directory and a sample YAML document as trees.
Takes no command-line arguments.
"""

import sys

from palantir.core.output.handler import OutputHandler
from palantir.core.output.registry import get_global_output_handler, set_global_output_handler
from palantir.core.tree.service import show_document_hierarchy, show_hierarchy
from palantir.domain.errors import PalantirError
from palantir.domain.output_models import OutputConfig
from palantir.domain.tree_models import RenderResult
from palantir.infra.logging import LoggingConfig, configure_logging, get_logger

logger = get_logger(__name__)

SAMPLE_YAML = b"""
database:
  host: localhost
  port: 5432
  credentials:
    username: admin
    password: secret
  tables:
    - users
    - posts
    - comments
server:
  host: 0.0.0.0
  port: 8080
  debug: true
  features:
    - authentication
    - logging
    - monitoring
redis:
  host: redis-server
  port: 6379
  database: 0
"""

DEMO_CONFIGS = [
    ("Default", OutputConfig()),
    ("Level Colours Only", OutputConfig(use_emojis=False, colorize_level_only=True)),
    ("Colours Only", OutputConfig(use_emojis=False)),
    ("Without Colours", OutputConfig(use_colors=False, use_emojis=False, use_formatting=False)),
]


def showcase_levels(title: str, handler: OutputHandler) -> None:
    handler.print_header(f"Palantir Demo({title})")
    handler.print_info("This is an info message")
    handler.print_success("Operation completed successfully!")
    handler.print_warning("This is a warning message")
    handler.print_error("This is an error message")
    handler.print_stage("Processing stage 1")
    handler.print_already_available("Feature is already available")
    handler.print_progress(3, 10, "Processing items")

    if handler.confirm("Do you want to continue?"):
        handler.print_success("User confirmed!")
    else:
        handler.print_info("User declined")


def main() -> int:
    """
    Run the demonstration.

    Returns:
        int: 0 on success, 1 when a tree could not be displayed.
    """
    configure_logging(LoggingConfig())

    handlers = [(title, OutputHandler(cfg)) for title, cfg in DEMO_CONFIGS]
    for title, handler in handlers:
        showcase_levels(title, handler)

    handler = handlers[0][1]
    exit_code = 0

    handler.print_header("File/Directory Tree Visualization")
    handler.print_info("Displaying tree structure of current directory:")
    try:
        result = show_hierarchy(".", config=handler.config)
        if result is RenderResult.RENDERED:
            handler.print_success("Tree displayed successfully!")
        else:
            handler.print_info("No hierarchy to display (single file)")

        handler.print_info("Tree with colours disabled:")
        previous = get_global_output_handler()
        set_global_output_handler(handlers[-1][1])
        try:
            show_hierarchy(".")
        finally:
            set_global_output_handler(previous)
    except PalantirError as e:
        logger.debug("Filesystem tree failed", exc_info=True)
        handler.print_error("Failed to display tree: %s", e)
        exit_code = 1

    handler.print_header("YAML Tree Visualization")
    try:
        show_document_hierarchy(SAMPLE_YAML, config=handler.config, show_values=True)
        handler.print_success("YAML tree displayed successfully!")
    except PalantirError as e:
        handler.print_error("Failed to display YAML tree: %s", e)
        exit_code = 1

    handler.print_success("Tree system demonstration completed!")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
