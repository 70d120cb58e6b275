"""Main CLI entry point for protoschema.

Generates Hive, Avro and Iceberg schemas from a compiled protobuf descriptor
set (``protoc --descriptor_set_out=... --include_imports``).
"""

from enum import IntEnum
from pathlib import Path
import logging
import sys
import traceback
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from protoschema import __version__
from protoschema.config import ConfigLoader, GeneratorConfig, load_config
from protoschema.engine.generator import SchemaGenerator
from protoschema.errors import (
    ConfigError,
    DescriptorLoadError,
    MessageNotFoundError,
    UnknownDialectError,
)
from protoschema.schemas.types import Dialect, NestingPolicy

console = Console(stderr=True)
stdout_console = Console()


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    FILE_ERROR = 1
    # click reports usage errors (missing arguments, unknown options) with 2
    USAGE_ERROR = 2
    MESSAGE_NOT_FOUND = 3
    UNKNOWN_FORMAT = 4


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


def _fail(message: str, code: ExitCode, verbose: bool = False) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]")
    if verbose:
        console.print(escape(traceback.format_exc()))
    sys.exit(int(code))


@click.group()
@click.version_option(version=__version__, prog_name="protoschema")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """protoschema - Generate table schemas from protobuf descriptor sets.

    Converts a protobuf message into a Hive REPLACE COLUMNS statement, an Avro
    record schema, or an Iceberg CREATE TABLE statement.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@cli.command()
@click.argument("desc_file", type=click.Path())
@click.argument("message_name")
@click.argument("output_format", metavar="FORMAT")
@click.option("--nested-struct", "policy", flag_value=NestingPolicy.NEST_AS_STRUCT.value,
              help="Represent message fields as nested struct/record types")
@click.option("--nested", "policy", flag_value=NestingPolicy.FLATTEN_INTO_PARENT.value,
              help="Flatten message fields into the parent (default)")
@click.option("--no-nested", "policy", flag_value=NestingPolicy.FLATTEN_DISABLED.value,
              help="Represent message fields as a single string column")
@click.option("--table-name", "-t", help="Table name used in Hive/Iceberg DDL")
@click.option("--max-depth", type=click.IntRange(min=0), help="Maximum nested message depth to expand")
@click.option("--config", "-c", "config_path", type=click.Path(), help="YAML config file")
@click.option("--output", "-o", type=click.Path(), help="Output file (stdout if not specified)")
@click.pass_context
def generate(
    ctx: click.Context,
    desc_file: str,
    message_name: str,
    output_format: str,
    policy: str | None,
    table_name: str | None,
    max_depth: int | None,
    config_path: str | None,
    output: str | None,
) -> None:
    """Generate a schema for one message.

    DESC_FILE is a descriptor set produced by protoc, MESSAGE_NAME the
    fully-qualified message name (e.g. analytics.UserEvent) and FORMAT one of
    hive, avro or iceberg.

    \b
    Examples:
      protoschema generate example.desc analytics.UserEvent hive --nested-struct
      protoschema generate example.desc analytics.UserEvent avro
      protoschema generate example.desc analytics.UserEvent iceberg --no-nested
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        config = load_config(config_path) if config_path else GeneratorConfig()
        config = config.merged(policy=policy, table_name=table_name, max_depth=max_depth)
    except ConfigError as e:
        _fail(f"Error: {e}", ExitCode.USAGE_ERROR, verbose)

    try:
        generator = SchemaGenerator.from_file(desc_file, config)
    except DescriptorLoadError as e:
        _fail(f"Error: {e}", ExitCode.FILE_ERROR, verbose)

    try:
        generator.get_message(message_name)
    except MessageNotFoundError as e:
        _fail(f"Message not found: {e.message_name}", ExitCode.MESSAGE_NOT_FOUND, verbose)

    try:
        dialect = Dialect.parse(output_format)
    except UnknownDialectError as e:
        _fail(f"Unknown format: {e.name}", ExitCode.UNKNOWN_FORMAT, verbose)

    result = generator.generate(message_name, dialect)

    if output:
        try:
            Path(output).write_text(result.text + "\n")
        except OSError as e:
            _fail(f"Error: cannot write {output}: {e}", ExitCode.FILE_ERROR, verbose)
        console.print(f"[green]Wrote {result.dialect.value} schema to {escape(output)}[/green]")
    else:
        click.echo(result.text)

    if verbose:
        console.print(
            f"[cyan]{result.field_count} column(s), policy {result.policy.value}, "
            f"{len(result.issues)} degraded field(s)[/cyan]"
        )
        for issue in result.issues:
            console.print(f"  [yellow]{issue.kind.value}[/yellow]: {escape(issue.path)} ({escape(issue.type_name)})")


@cli.command()
@click.argument("desc_file", type=click.Path())
@click.pass_context
def list_messages(ctx: click.Context, desc_file: str) -> None:
    """List the messages of a descriptor set.

    DESC_FILE is a descriptor set produced by protoc.
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        generator = SchemaGenerator.from_file(desc_file)
    except DescriptorLoadError as e:
        _fail(f"Error: {e}", ExitCode.FILE_ERROR, verbose)

    names = generator.list_messages()
    if not names:
        console.print("[yellow]No messages found[/yellow]")
        return

    table = Table(title="Messages")
    table.add_column("Name", style="cyan")
    table.add_column("Fields", justify="right")
    table.add_column("Nested", justify="right")

    for name in names:
        message = generator.get_message(name)
        table.add_row(name, str(len(message.fields)), str(len(message.nested_types)))

    stdout_console.print(table)


@cli.command()
@click.option("--output", "-o", type=click.Path(), default="protoschema.yaml", help="Output file path")
@click.pass_context
def init_config(ctx: click.Context, output: str) -> None:
    """Initialize a config file with the default settings."""
    loader = ConfigLoader()
    try:
        loader.save_file(GeneratorConfig(), output)
    except OSError as e:
        _fail(f"Error: cannot write {output}: {e}", ExitCode.FILE_ERROR, ctx.obj.get("verbose", False))

    console.print(f"[green]Created config: {escape(output)}[/green]")


if __name__ == "__main__":
    cli()
