"""Command-line interface for clreport."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax

from clreport import __version__
from clreport.core.config import Settings, get_settings, load_settings
from clreport.core.exceptions import ClreportError, InventoryValidationError
from clreport.core.logging import configure_logging
from clreport.core.models import (
    Attribute,
    ClassloaderHandle,
    ClassloaderInventory,
    ClassloaderNode,
    Entry,
    ParentDefinition,
    ParentLink,
)
from clreport.output.writer import format_json, format_xml

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool, settings: Settings) -> None:
    """Configure logging with rich handler, or JSON records when enabled."""
    level = "DEBUG" if verbose else settings.log_level
    if settings.json_logs:
        configure_logging(level)
        return
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )


def load_inventory(data: Any, source: str) -> ClassloaderInventory:
    """
    Validate raw JSON data as an inventory.

    Raises:
        InventoryValidationError: If the data does not describe an inventory
    """
    try:
        return ClassloaderInventory.model_validate(data)
    except PydanticValidationError as e:
        raise InventoryValidationError(source, f"Invalid inventory format: {e}") from e


@click.group()
@click.version_option(version=__version__, prog_name="clreport")
def main():
    """Classloader inventory reports."""
    pass


@main.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option(
    "--stdin",
    is_flag=True,
    help="Read the inventory from stdin as JSON",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["xml", "json"]),
    default=None,
    help="Output format (default: configured format)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file (default: stdout)",
)
@click.option(
    "--include-empty",
    is_flag=True,
    help="Render empty sections with count=\"0\"",
)
@click.option(
    "--xml-declaration",
    is_flag=True,
    help="Prepend an XML declaration",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def render(
    input_file: str | None,
    stdin: bool,
    output_format: str | None,
    output: str | None,
    include_empty: bool,
    xml_declaration: bool,
    verbose: bool,
):
    """
    Render a classloader inventory as a report.

    INPUT_FILE: Path to a JSON file containing the inventory.
    Use --stdin to read from standard input instead.

    Example JSON format:
    {
        "classloaders": [
            {
                "handle": {"type": "system"},
                "attributes": [{"name": "foo", "value": "bar"}]
            }
        ]
    }
    """
    overrides: dict[str, Any] = {}
    if include_empty:
        overrides["include_empty_sections"] = True
    if xml_declaration:
        overrides["xml_declaration"] = True

    try:
        settings = load_settings(**overrides)
    except ClreportError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    setup_logging(verbose, settings)

    # Read input
    if stdin:
        source = "<stdin>"
        try:
            data = json.load(sys.stdin)
        except json.JSONDecodeError as e:
            err_console.print(f"[red]Error: Invalid JSON input: {e}[/red]")
            sys.exit(1)
    elif input_file:
        source = input_file
        try:
            data = json.loads(Path(input_file).read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            err_console.print(f"[red]Error: Invalid JSON in {input_file}: {e}[/red]")
            sys.exit(1)
        except UnicodeDecodeError as e:
            err_console.print(f"[red]Error: {input_file} is not UTF-8 text: {e}[/red]")
            sys.exit(1)
        except OSError as e:
            err_console.print(f"[red]Error: Cannot read {input_file}: {e}[/red]")
            sys.exit(1)
    else:
        err_console.print("[red]Error: Provide INPUT_FILE or use --stdin[/red]")
        sys.exit(1)

    try:
        inventory = load_inventory(data, source)
        output_format = output_format or settings.default_output_format
        if output_format == "json":
            result = format_json(inventory, settings.json_indent)
        else:
            result = format_xml(inventory, settings)
    except ClreportError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    # Write output
    if output:
        Path(output).write_text(result + "\n", encoding="utf-8")
        err_console.print(f"[green]Report written to {output}[/green]")
    else:
        click.echo(result)


@main.command()
def config():
    """Show current configuration."""
    settings = get_settings()

    console.print(Panel.fit("[bold]clreport Configuration[/bold]"))
    console.print()

    console.print(f"Default Output Format: {settings.default_output_format}")
    console.print(f"Include Empty Sections: {'Yes' if settings.include_empty_sections else 'No'}")
    console.print(f"XML Declaration: {'Yes' if settings.xml_declaration else 'No'}")
    console.print(f"JSON Indent: {settings.json_indent}")
    console.print()

    console.print(f"Log Level: {settings.log_level}")
    console.print(f"JSON Logs: {'Enabled' if settings.json_logs else 'Disabled'}")


def demo_inventory() -> ClassloaderInventory:
    """A small inventory resembling a build tool's loader hierarchy."""
    bootstrap = ClassloaderHandle(type="bootstrap")
    system = ClassloaderHandle(type="system")
    core = ClassloaderHandle(type="core", name="ant")
    project = ClassloaderHandle(type="project", name="build")

    return ClassloaderInventory(
        classloaders=[
            ClassloaderNode(
                handle=system,
                class_name="sun.misc.Launcher$AppClassLoader",
                parent=ParentLink(handle=bootstrap),
                roles=[ClassloaderHandle(type="role", name="system")],
                attributes=[Attribute(name="java.class.path", value="lib/launcher.jar")],
                urls=["file:/opt/tool/lib/launcher.jar"],
                children=[core],
            ),
            ClassloaderNode(
                handle=core,
                class_name="org.example.loader.CoreLoader",
                parent=ParentLink(handle=system, definition=ParentDefinition.EXPLICIT),
                roles=[ClassloaderHandle(type="role", name="core")],
                urls=["file:/opt/tool/lib/tool.jar"],
                entries=[Entry(type="file", value="/opt/tool/etc")],
                packages=["org.example.tool", "org.example.tool.tasks"],
                children=[project],
            ),
            ClassloaderNode(
                handle=project,
                parent=ParentLink(handle=core),
                errors=["Cannot read manifest of lib/missing.jar"],
            ),
        ],
        unassigned_roles=[ClassloaderHandle(type="role", name="thread-context")],
    )


@main.command()
def demo():
    """Render a demo inventory."""
    console.print(Panel.fit("[bold]Demo: Rendering a sample classloader inventory[/bold]"))
    console.print()

    settings = get_settings()
    result = format_xml(demo_inventory(), settings)

    console.print(Syntax(result, "xml", theme="ansi_dark"))


if __name__ == "__main__":
    main()
