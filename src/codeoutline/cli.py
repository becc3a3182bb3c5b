"""Typer-based command-line interface for codeoutline."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import typer

from . import __version__
from .config import OutlineConfig, validate_depth_value
from .formatter import Formatter, OutputFormat, validate_format
from .tools.file_processor import FileProcessor, FileProcessorError

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Code Outline CLI - print the structure of JavaScript and TypeScript files.",
    add_completion=False,
)


class CLIArgumentError(Exception):
    """Raised for invalid command-line arguments."""


@dataclass
class CLIOptions:
    format: OutputFormat
    depth: Optional[int]
    named_only: bool
    llmtext: bool


def parse_options(
    fmt: str,
    depth: str,
    named_only: bool = True,
    llmtext: bool = False,
) -> CLIOptions:
    """Validate raw option values; --llmtext overrides --format."""
    try:
        output_format = validate_format(fmt)
    except ValueError as e:
        raise CLIArgumentError(str(e)) from None

    try:
        max_depth = validate_depth_value(depth)
    except ValueError as e:
        raise CLIArgumentError(f"Invalid depth: {e}") from None

    if llmtext:
        output_format = OutputFormat.LLMTEXT

    return CLIOptions(
        format=output_format,
        depth=max_depth,
        named_only=named_only,
        llmtext=llmtext,
    )


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"codeoutline v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool, config: OutlineConfig) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def main(
    ctx: typer.Context,
    pattern: Optional[str] = typer.Argument(
        None, help="Glob pattern of files to outline, e.g. 'src/**/*.{js,ts}'."
    ),
    fmt: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: ascii, json, yaml or llmtext."
    ),
    depth: str = typer.Option(
        "Infinity", "--depth", "-d", help="Maximum outline depth (>= 1) or Infinity."
    ),
    named_only: bool = typer.Option(
        True, "--named-only/--all", help="Only show named constructs (--all shows everything)."
    ),
    llmtext: bool = typer.Option(
        False, "--llmtext", help="LLM-oriented text output; overrides --format."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
):
    """Outline the functions, classes and declarations in matching files."""
    config = OutlineConfig.from_env()
    _configure_logging(verbose, config)

    try:
        if not pattern:
            raise CLIArgumentError("No file pattern provided")
        options = parse_options(fmt or config.default_format, depth, named_only, llmtext)
    except CLIArgumentError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(code=1)

    processor = FileProcessor(concurrency=config.concurrency)
    try:
        files = processor.find_files(pattern)
        results = asyncio.run(
            processor.process_files(files, options.depth, options.named_only)
        )
    except FileProcessorError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    failed = sum(1 for r in results if r.outline is None)
    logger.debug("Outlined %d files (%d failed)", len(results), failed)

    typer.echo(Formatter(options.format).format(results))


def run():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
