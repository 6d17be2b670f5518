from __future__ import annotations
import json
import sys
from typing import Any
from rich.console import Console

from .codegen.cli_integration import handle_codegen_command
from .utils import format_json, minify_json
from .logging_config import get_logger

logger = get_logger(__name__)


class CLIHandler:
    """Handle command-line interface (CLI) operations for JSON conversion."""

    def __init__(self) -> None:
        """Initialize CLI handler."""
        self.text: str | None = None
        self.source: str | None = None
        self.console = Console(stderr=True)
        logger.debug("CLIHandler initialized")

    def set_text(self, text: str, source: str) -> None:
        """Set the JSON text and its source for processing.

        Args:
            text: The raw JSON text to process.
            source: The source name or identifier.
        """
        self.text = text
        self.source = source
        logger.info("Text set for source: %s", source)

    def run(self, args: Any) -> int:
        """Run CLI operations based on parsed arguments.

        Args:
            args: Parsed CLI arguments.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        if self.text is None or not self.text.strip():
            self.console.print("❌ [red]No JSON input provided[/red]")
            logger.warning("No input loaded; aborting CLI run")
            return 1

        logger.info("Starting CLI operations for source: %s", self.source)

        if getattr(args, "format", False) or getattr(args, "minify", False):
            return self._handle_echo(args)

        return handle_codegen_command(args, self.text)

    def _handle_echo(self, args: Any) -> int:
        """Echo the input back, pretty-printed or minified.

        Args:
            args: Parsed CLI arguments.
        """
        try:
            if getattr(args, "minify", False):
                output = minify_json(self.text)
            else:
                output = format_json(self.text)
        except (json.JSONDecodeError, RecursionError) as e:
            logger.warning("Cannot reformat invalid JSON: %s", e)
            self.console.print(f"❌ [red]Invalid JSON:[/red] {e}")
            return 1

        sys.stdout.write(output + "\n")
        return 0
