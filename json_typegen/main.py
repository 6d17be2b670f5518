"""Command-line entry point for json-typegen."""

import argparse
import logging
import sys

from . import __version__
from .cli import CLIHandler
from .codegen.cli_integration import add_codegen_args, handle_info_command
from .logging_config import configure_logging, get_logger
from .utils import JSONLoaderError, load_json

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the json-typegen command."""
    parser = argparse.ArgumentParser(
        prog="json-typegen",
        description="Generate type declarations from a sample JSON document.",
    )

    source_group = parser.add_argument_group("input")
    source_group.add_argument(
        "file",
        nargs="?",
        help="JSON file to read (default: standard input)",
    )
    source_group.add_argument("--url", help="URL to fetch JSON from")
    source_group.add_argument("--text", metavar="JSON", help="JSON document given inline")
    source_group.add_argument(
        "--timeout",
        type=int,
        default=30,
        help="Request timeout in seconds for --url (default: 30)",
    )

    echo_group = parser.add_mutually_exclusive_group()
    echo_group.add_argument(
        "--format",
        action="store_true",
        help="Pretty-print the input JSON instead of generating code",
    )
    echo_group.add_argument(
        "--minify",
        action="store_true",
        help="Minify the input JSON instead of generating code",
    )

    add_codegen_args(parser)

    parser.add_argument(
        "--no-color", action="store_true", help="Print generated code without highlighting"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logs and generation metadata"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def _read_input(args: argparse.Namespace) -> tuple[str, str]:
    """Read the JSON text selected by the input arguments."""
    given = [name for name in ("file", "url", "text") if getattr(args, name)]
    if len(given) > 1:
        raise JSONLoaderError("Give only one of a file, --url or --text")

    if args.text is not None:
        return "inline text", args.text

    if args.file or args.url:
        return load_json(file_path=args.file, url=args.url, timeout=args.timeout)

    return "standard input", sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``).

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    info_exit_code = handle_info_command(args)
    if info_exit_code is not None:
        return info_exit_code

    handler = CLIHandler()

    try:
        source, text = _read_input(args)
    except (FileNotFoundError, JSONLoaderError) as e:
        handler.console.print(f"❌ [red]{e}[/red]")
        return 1

    handler.set_text(text, source)
    return handler.run(args)


if __name__ == "__main__":
    sys.exit(main())
