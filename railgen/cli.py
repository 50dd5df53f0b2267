"""railgen CLI - generate Go test rails from an OpenAPI specification."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Callable

import click

from . import __version__
from .codegen import render
from .config import DEFAULT_OUTPUT_DIR, DEFAULT_SPEC_FILE, RunConfig
from .context_builder import build_context, load_custom_comments
from .errors import RailgenError
from .files import delete_test_file, target_path, write_test_file
from .inventory import build_inventory, format_all_report, format_unimplemented_report
from .loader import load_document
from .logging import configure_logging
from .resolver import find_operation

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def generate_test(config: RunConfig) -> Path:
    """Resolve, render and write the test file for config.operation_id."""
    document = load_document(config.spec_file)
    operation = find_operation(document, config.operation_id)
    click.echo(
        f"Found operation {operation.method} {operation.path} "
        f"with operationId: {operation.operation_id}"
    )

    comments = load_custom_comments(config.comments_file)
    content = render(build_context(operation, comments))

    path = target_path(config.output_dir, operation.tag, operation.operation_id)
    backup = write_test_file(path, content, overwrite=config.overwrite)
    if backup is not None:
        click.echo(f"Created backup: {backup}")
    click.echo(f"Generated test file: {path}")
    return path


def delete_test(config: RunConfig) -> Path:
    """Delete the generated test file for config.operation_id."""
    document = load_document(config.spec_file)
    operation = find_operation(document, config.operation_id)

    path = target_path(config.output_dir, operation.tag, operation.operation_id)
    removed_dir = delete_test_file(path)
    click.echo(f"Deleted test file: {path}")
    if removed_dir:
        click.echo(f"Removed empty directory: {path.parent}")
    return path


def list_operations(config: RunConfig) -> None:
    """Print the implementation status of every identified operation."""
    document = load_document(config.spec_file)
    items = build_inventory(document, config.output_dir)
    if config.unimplemented_only:
        lines = format_unimplemented_report(items)
    else:
        lines = format_all_report(items)
    for line in lines:
        click.echo(line)


def _run(action: str, func: Callable[[RunConfig], Any], config: RunConfig) -> None:
    logger.debug("Running %s with %s", action, config)
    try:
        func(config)
    except RailgenError as exc:
        click.echo(f"Error: failed to {action}: {exc}", err=True)
        sys.exit(1)


def _require(value: str, message: str) -> str:
    if not value:
        raise click.UsageError(message)
    return value


def _common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option(
        "-d",
        "--output",
        "output_dir",
        default=DEFAULT_OUTPUT_DIR,
        show_default=True,
        envvar="RAILGEN_OUTPUT_DIR",
        help="Output directory for generated tests.",
    )(func)
    func = click.option(
        "-f",
        "--file",
        "spec_file",
        default=DEFAULT_SPEC_FILE,
        show_default=True,
        envvar="RAILGEN_SPEC_FILE",
        help="OpenAPI specification file.",
    )(func)
    return func


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(
    __version__,
    "-v",
    "--version",
    prog_name="railgen",
    message="%(prog)s version %(version)s",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="RAILGEN_LOG_LEVEL",
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """railgen - Generate test rails from OpenAPI specification.

    A CLI tool to generate Go test files from OpenAPI operation IDs.
    """
    configure_logging(log_level)


@cli.command("generate")
@_common_options
@click.option("-o", "--operation", "operation_id", required=True, help="Operation ID to generate test for.")
@click.option(
    "-c",
    "--comments",
    "comments_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Comments file to include custom TODO comments.",
)
@click.option("--overwrite", is_flag=True, help="Overwrite existing test file (creates backup).")
def generate(
    spec_file: str,
    output_dir: str,
    operation_id: str,
    comments_file: Path | None,
    overwrite: bool,
) -> None:
    """Generate test files from operation ID."""
    config = RunConfig(
        spec_file=Path(_require(spec_file, "OpenAPI file is required")),
        output_dir=Path(output_dir),
        operation_id=_require(operation_id, "operation ID is required"),
        comments_file=comments_file,
        overwrite=overwrite,
    )
    _run("generate test", generate_test, config)


@cli.command("delete")
@_common_options
@click.option("-o", "--operation", "operation_id", required=True, help="Operation ID to delete test for.")
def delete(spec_file: str, output_dir: str, operation_id: str) -> None:
    """Delete test files for operation ID."""
    config = RunConfig(
        spec_file=Path(_require(spec_file, "OpenAPI file is required")),
        output_dir=Path(output_dir),
        operation_id=_require(operation_id, "operation ID is required"),
    )
    _run("delete test", delete_test, config)


@cli.command("list")
@_common_options
@click.option("--unimplemented", "unimplemented_only", is_flag=True, help="Show only unimplemented operation IDs.")
def list_command(spec_file: str, output_dir: str, unimplemented_only: bool) -> None:
    """List operation IDs and their implementation status."""
    config = RunConfig(
        spec_file=Path(_require(spec_file, "OpenAPI file is required")),
        output_dir=Path(output_dir),
        unimplemented_only=unimplemented_only,
    )
    _run("list operations", list_operations, config)


@cli.command("help")
@click.argument("command", required=False)
@click.pass_context
def help_command(ctx: click.Context, command: str | None) -> None:
    """Show help for commands."""
    parent = ctx.find_root()
    if command is None:
        click.echo(parent.get_help())
        return

    cmd = cli.get_command(parent, command)
    if cmd is None:
        raise click.UsageError(f"unknown command '{command}'", ctx=parent)
    with click.Context(cmd, info_name=command, parent=parent) as sub_ctx:
        click.echo(cmd.get_help(sub_ctx))


def main() -> None:
    cli(prog_name="railgen")
