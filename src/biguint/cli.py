"""CLI interface for the BigUint engine."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from biguint import __version__
from biguint.core.errors import BigUintError
from biguint.core.number import BigUint, compare, format_decimal, parse, subtract
from biguint.schemas.config import DEFAULT_CONFIG_PATH, EngineConfig

console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]✗[/red] {escape(message)}")
    sys.exit(1)


def _parse_pair(config: EngineConfig, a: str, b: str) -> tuple[BigUint, BigUint]:
    try:
        return parse(a, config), parse(b, config)
    except BigUintError as e:
        _fail(str(e))


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to engine config file",
)
@click.pass_context
def main(ctx: click.Context, config: str) -> None:
    """Arbitrary-precision unsigned integer arithmetic."""
    try:
        ctx.obj = EngineConfig.load(Path(config))
    except (ValidationError, yaml.YAMLError) as e:
        _fail(f"Invalid config {config}: {e}")


@main.command()
@click.pass_obj
def run(config: EngineConfig) -> None:
    """Read two numbers from stdin; print their sum, then their difference."""
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        _fail(f"expected two numbers on stdin, got {len(tokens)}")

    a, b = _parse_pair(config, tokens[0], tokens[1])
    try:
        click.echo(format_decimal(a + b))
        click.echo(format_decimal(subtract(a, b)))
    except BigUintError as e:
        _fail(str(e))


@main.command()
@click.argument("a")
@click.argument("b")
@click.pass_obj
def add(config: EngineConfig, a: str, b: str) -> None:
    """Print A + B."""
    left, right = _parse_pair(config, a, b)
    try:
        click.echo(format_decimal(left + right))
    except BigUintError as e:
        _fail(str(e))


@main.command()
@click.argument("a")
@click.argument("b")
@click.pass_obj
def sub(config: EngineConfig, a: str, b: str) -> None:
    """Print the difference of A and B (larger minus smaller)."""
    left, right = _parse_pair(config, a, b)
    try:
        click.echo(format_decimal(left - right))
    except BigUintError as e:
        _fail(str(e))


@main.command(name="compare")
@click.argument("a")
@click.argument("b")
@click.pass_obj
def compare_cmd(config: EngineConfig, a: str, b: str) -> None:
    """Print whether A is less than, equal to or greater than B."""
    left, right = _parse_pair(config, a, b)
    click.echo(compare(left, right).value)


@main.command()
@click.argument("number")
@click.pass_obj
def inspect(config: EngineConfig, number: str) -> None:
    """Show the limbs and arena window of NUMBER."""
    try:
        value = parse(number, config)
    except BigUintError as e:
        _fail(str(e))

    offset, length = value.window
    console.print(f"[bold]Value:[/bold] {value}")
    console.print(f"Base: {value.base}")
    console.print(f"Window: offset {offset}, length {length} (capacity {value.capacity})")

    table = Table(title="\nLimbs")
    table.add_column("#", style="dim")
    table.add_column("Slot", style="cyan")
    table.add_column("Limb", style="green")

    for index, limb in enumerate(value.limbs):
        table.add_row(str(index), str(offset + index), str(limb))

    console.print(table)


@main.command()
@click.argument("output", type=click.Path(), default=DEFAULT_CONFIG_PATH)
def init(output: str) -> None:
    """Initialize a new configuration file."""
    output_path = Path(output)

    if output_path.exists():
        if not click.confirm(f"{output} already exists. Overwrite?"):
            return

    config = EngineConfig()
    config.save(output_path)
    console.print(f"[green]Created:[/green] {output}")


@main.command()
def version() -> None:
    """Show version information."""
    console.print(f"biguint v{__version__}")


if __name__ == "__main__":
    main()
