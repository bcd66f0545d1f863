"""
Command-line interface for proxygen.

Loads a schema description, generates one accessor interface per class and
reports every failure before exiting.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    BatchResult,
    ConfigError,
    DirectorySink,
    MemorySink,
    RegistryError,
    SchemaError,
    generate_interfaces,
    get_generator,
    get_language_info,
    get_naming_convention,
    get_registry,
    list_supported_languages,
    load_config,
    load_schemas,
)
from .codegen.core.config import get_config_manager
from .codegen.core.naming import NAMING_CONVENTIONS
from .logging_config import get_logger, setup_logging
from .machine_id import identify
from .utils import JSONLoaderError, load_json

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="proxygen",
        description="Generate proxy accessor interfaces from model class schemas.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (default: WARNING)",
    )
    parser.add_argument("--log-file", metavar="FILE", help="Write a detailed log to FILE")

    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate", help="Generate accessor interfaces from a schema description"
    )
    source = generate.add_mutually_exclusive_group(required=True)
    source.add_argument("schema", nargs="?", help="Path to a JSON schema description")
    source.add_argument("--url", help="URL of a JSON schema description")
    generate.add_argument(
        "--language",
        "-l",
        default="java",
        help="Target language (use 'proxygen languages' to see options)",
    )
    generate.add_argument(
        "--output",
        "-o",
        metavar="DIR",
        help="Source root to write generated files to (default: stdout)",
    )
    generate.add_argument(
        "--package", metavar="NAME", help="Package/namespace of the generated interfaces"
    )
    generate.add_argument(
        "--naming",
        choices=sorted(NAMING_CONVENTIONS),
        help="Accessor naming convention (default depends on language)",
    )
    generate.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )
    generate.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't generate comments in output code",
    )
    generate.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )

    subparsers.add_parser("languages", help="List supported target languages")
    subparsers.add_parser("machine-id", help="Print this machine's identifier")

    return parser


class CLIHandler:
    """Handle command-line operations."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def run(self, args: Any) -> int:
        """Dispatch a parsed command.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        if args.command == "generate":
            return self.handle_generate(args)
        if args.command == "languages":
            return self.handle_languages()
        if args.command == "machine-id":
            self.console.print(identify())
            return 0

        self.console.print("❌ [red]No command given[/red] (try --help)")
        return 1

    def handle_generate(self, args: Any) -> int:
        try:
            source, description = load_json(file_path=args.schema, url=args.url)
            schemas = load_schemas(description)
            generator = self._create_generator(args)
        except (
            FileNotFoundError,
            JSONLoaderError,
            SchemaError,
            ConfigError,
            RegistryError,
            CLIError,
        ) as e:
            self.console.print(f"❌ [red]{escape(str(e))}[/red]")
            logger.error("%s", e)
            return 1

        for warning in self._config_warnings(generator):
            self.console.print(f"⚠️  [yellow]{escape(warning)}[/yellow]")

        self.console.print(f"📄 Loaded: {source} ({len(schemas)} classes)")

        sink = DirectorySink(args.output) if args.output else MemorySink()
        batch = generate_interfaces(generator, schemas, sink=sink)

        if not args.output:
            self._print_sources(batch, generator.language_name)

        self._print_summary(batch, verbose=args.verbose)
        return 0 if batch.success else 1

    def _create_generator(self, args: Any):
        language = get_registry().resolve(args.language)
        overrides = {
            "package_name": args.package,
            "naming": args.naming,
            "output_dir": args.output,
            "add_comments": False if args.no_comments else None,
        }
        config = load_config(language, custom_config=overrides, config_file=args.config)
        if config.naming:
            try:
                get_naming_convention(config.naming)
            except ValueError as e:
                raise CLIError(str(e)) from e
        return get_generator(language, config)

    @staticmethod
    def _config_warnings(generator) -> list[str]:
        return get_config_manager().validate_config(
            generator.config, generator.language_name
        )

    def _print_sources(self, batch: BatchResult, language: str) -> None:
        for class_name, result in batch.results.items():
            if not result.success:
                continue
            self.console.print(
                Panel(
                    Syntax(result.code, language, theme="monokai", line_numbers=False),
                    title=result.metadata.get("qualified_name", class_name),
                    box=box.ROUNDED,
                )
            )

    def _print_summary(self, batch: BatchResult, verbose: bool = False) -> None:
        table = Table(title="Generation Summary", box=box.SIMPLE)
        table.add_column("Class", style="cyan")
        table.add_column("Status")
        table.add_column("Details")

        for class_name, result in batch.results.items():
            if result.success:
                details = result.metadata["destination"]
                if verbose:
                    details = (
                        f"{details} ({result.metadata['accessor_pairs']} pairs, "
                        f"naming={result.metadata['naming']})"
                    )
                table.add_row(class_name, "[green]ok[/green]", escape(details))
            else:
                table.add_row(class_name, "[red]failed[/red]", escape(result.error_message))

            for warning in result.warnings:
                table.add_row("", "[yellow]warning[/yellow]", escape(warning))

        self.console.print(table)

        failures = len(batch.failures)
        if failures:
            self.console.print(
                f"❌ [red]{failures} of {len(batch.results)} classes failed[/red]"
            )
        else:
            self.console.print(
                f"✅ [green]Generated {len(batch.results)} interfaces[/green]"
            )

    def handle_languages(self) -> int:
        table = Table(title="Supported Languages", box=box.SIMPLE)
        table.add_column("Language", style="cyan")
        table.add_column("Aliases")
        table.add_column("Extension")
        table.add_column("Naming")
        table.add_column("Package")

        for language in list_supported_languages():
            info = get_language_info(language)
            table.add_row(
                info["name"],
                ", ".join(info["aliases"]) or "-",
                info["file_extension"],
                info["default_naming"],
                info["package_name"],
            )

        self.console.print(table)
        return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``proxygen`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    if not args.command:
        parser.print_help()
        return 1

    return CLIHandler().run(args)


if __name__ == "__main__":
    sys.exit(main())
