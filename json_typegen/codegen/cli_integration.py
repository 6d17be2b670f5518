"""
Command-line options and output for type generation.

Generated code goes to stdout (highlighted on a terminal, verbatim when
piped) or to an ``--output`` file; status messages, warnings and the
metadata table go to stderr.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich import box

from . import (
    GenerationResult,
    convert,
    get_language_info,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    RegistryError,
)
from .core.config import ConfigError, GeneratorConfig, load_config
from ..logging_config import get_logger

logger = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)

SYNTAX_THEME = "monokai"


class CLIError(Exception):
    """Exception raised for invalid command-line settings."""

    pass


def add_codegen_args(parser: argparse.ArgumentParser):
    """Add the type generation options to a parser."""
    codegen_group = parser.add_argument_group("type generation")
    codegen_group.add_argument(
        "-l",
        "--language",
        metavar="LANGUAGE",
        default="typescript",
        help="Target language or alias (default: typescript)",
    )
    codegen_group.add_argument(
        "-o", "--output", metavar="FILE", help="Write the declarations to FILE instead of stdout"
    )
    codegen_group.add_argument(
        "--config", metavar="FILE", help="JSON file with generator settings"
    )
    codegen_group.add_argument(
        "--root-name", metavar="NAME", help="Name of the root declaration"
    )
    codegen_group.add_argument(
        "--package-name",
        metavar="NAME",
        help="Package (Go, Java) or namespace (C#) of the generated code",
    )
    codegen_group.add_argument(
        "--indent-size", type=int, metavar="N", help="Indent with N spaces"
    )
    codegen_group.add_argument(
        "--max-depth", type=int, metavar="N", help="Reject documents nested deeper than N"
    )
    codegen_group.add_argument(
        "--add-comments",
        action="store_true",
        help="Start the output with a 'generated code' comment",
    )

    go_group = parser.add_argument_group("Go options")
    go_group.add_argument(
        "--go-int-type",
        choices=["int", "int32", "int64"],
        help="Go type for integer values (default: int)",
    )
    go_group.add_argument(
        "--go-any",
        action="store_true",
        help="Use 'any' instead of 'interface{}' for null values",
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages", action="store_true", help="Show the supported targets and exit"
    )
    info_group.add_argument(
        "--language-info", metavar="LANGUAGE", help="Describe one target and exit"
    )


def handle_info_command(args: argparse.Namespace) -> Optional[int]:
    """
    Handle ``--list-languages`` and ``--language-info``.

    Returns:
        Exit code if an information option was given, None otherwise
    """
    if getattr(args, "list_languages", False):
        return _list_languages()
    if getattr(args, "language_info", None):
        return _show_language_info(args.language_info)
    return None


def handle_codegen_command(args: argparse.Namespace, text: str) -> int:
    """
    Convert JSON text according to the command-line options.

    Args:
        args: Parsed command line arguments
        text: Raw JSON input

    Returns:
        Exit code (0 for success, 1 for any error)
    """
    if not _validate_language(args.language):
        return 1

    try:
        language = get_registry().resolve_language(args.language)
        config = _build_config(args, language)
        result = convert(text, language, config, root_name=getattr(args, "root_name", None))
    except (CLIError, RegistryError) as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    if not result.success:
        err_console.print(f"[red]✗ Error:[/red] {result.error_message}")
        return 1

    if not _write_output(result, args):
        return 1

    _print_report(result, args)
    logger.info("Generated %s declarations", language)
    return 0


def _list_languages() -> int:
    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Root", style="magenta")
    table.add_column("Aliases", style="blue")

    for name, info in list_all_language_info().items():
        table.add_row(
            name,
            info["file_extension"],
            info["root_name"],
            ", ".join(info["aliases"]) or "[dim]none[/dim]",
        )

    console.print(table)
    console.print(
        Panel(
            "json-typegen [dim]data.json[/dim] --language [cyan]LANGUAGE[/cyan]\n"
            "json-typegen --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Usage",
            border_style="blue",
        )
    )
    return 0


def _show_language_info(language: str) -> int:
    if not _validate_language(language):
        return 1

    info = get_language_info(language)
    lines = [
        f"[bold]Language:[/bold] {info['name']}",
        f"[bold]Extension:[/bold] {info['file_extension']}",
        f"[bold]Generator:[/bold] {info['class']}",
        f"[bold]Root declaration:[/bold] {info['root_name']}",
    ]
    if info["aliases"]:
        lines.append(f"[bold]Aliases:[/bold] {', '.join(info['aliases'])}")

    console.print(
        Panel("\n".join(lines), title=f"🔧 {info['name']}", border_style="green")
    )
    console.print(
        Panel(
            f"[cyan]json-typegen -l {info['name']} data.json[/cyan]\n"
            f"[cyan]json-typegen -l {info['name']} -o types{info['file_extension']} data.json[/cyan]\n"
            f"[cyan]json-typegen -l {info['name']} --root-name Payload data.json[/cyan]",
            title="💡 Examples",
            border_style="blue",
        )
    )
    return 0


def _validate_language(language: str) -> bool:
    if is_language_supported(language):
        return True

    err_console.print(f"[red]✗ Unsupported language '{language}'[/red]")
    err_console.print(f"[dim]Supported languages: {', '.join(list_supported_languages())}[/dim]")
    return False


def _build_config(args: argparse.Namespace, language: str) -> GeneratorConfig:
    """Merge language defaults, ``--config`` and the command-line overrides."""
    overrides = {}

    if getattr(args, "package_name", None):
        overrides["package_name"] = args.package_name
    if getattr(args, "indent_size", None) is not None:
        overrides["indent_size"] = args.indent_size
        overrides["use_tabs"] = False
    if getattr(args, "max_depth", None) is not None:
        overrides["max_depth"] = args.max_depth
    if getattr(args, "add_comments", False):
        overrides["add_comments"] = True
    if getattr(args, "go_int_type", None):
        overrides["int_type"] = args.go_int_type
    if getattr(args, "go_any", False):
        overrides["unknown_type"] = "any"

    try:
        return load_config(
            language, custom_config=overrides, config_file=getattr(args, "config", None)
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _write_output(result: GenerationResult, args: argparse.Namespace) -> bool:
    """Write code to the output file or stdout; False if the file cannot be written."""
    output_file = getattr(args, "output", None)
    language = result.metadata["language"]

    if output_file:
        output_path = Path(output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]✗ Failed to write {output_path}:[/red] {e}")
            return False
        err_console.print(f"[green]✓[/green] Wrote {language} code to [cyan]{output_path}[/cyan]")
    elif console.is_terminal and not getattr(args, "no_color", False):
        console.print(Syntax(result.code, language, theme=SYNTAX_THEME))
    else:
        sys.stdout.write(result.code)

    return True


def _print_report(result: GenerationResult, args: argparse.Namespace):
    """Print the metadata table (verbose only) and any warnings to stderr."""
    if getattr(args, "verbose", False):
        table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Property", style="bold")
        table.add_column("Value", style="green")
        for key, value in result.metadata.items():
            table.add_row(key.replace("_", " ").title(), str(value))
        err_console.print(table)

    if result.warnings:
        err_console.print("[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            err_console.print(f"  [yellow]•[/yellow] {warning}")
