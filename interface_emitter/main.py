"""CLI entry point for Interface Emitter."""

import logging
import os
import sys

import click

from .config import RenderOptions
from .exceptions import InterfaceEmitterError
from .fetcher import load_model_source
from .interface_builder import render_interface
from .model import parse_model


@click.command()
@click.argument("source")
@click.option(
    "-o",
    "--output",
    default=None,
    help="Output file path (default: stdout)",
)
@click.option(
    "--indent-width",
    default=4,
    show_default=True,
    type=int,
    help="Spaces per indent level",
)
@click.option(
    "--generator-name",
    default="AutomaticInterface",
    show_default=True,
    help="Tool name written into the GeneratedCode marker",
)
@click.option(
    "--generator-version",
    default="",
    help="Tool version written into the GeneratedCode marker",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(
    source: str,
    output: str | None,
    indent_width: int,
    generator_name: str,
    generator_version: str,
    verbose: bool,
) -> None:
    """Render a C# interface declaration from a JSON model description.

    SOURCE is a path or URL to the JSON description (namespace, name,
    usings, properties, methods, events).
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        options = RenderOptions(
            indent_width=indent_width,
            generator_name=generator_name,
            generator_version=generator_version,
        )
    except InterfaceEmitterError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        data = load_model_source(source)
    except Exception as e:
        click.echo(f"Error loading model description: {e}", err=True)
        sys.exit(1)

    try:
        model = parse_model(data)
    except InterfaceEmitterError as e:
        click.echo(f"Error parsing model description: {e}", err=True)
        sys.exit(1)

    content = render_interface(model, options)

    if output is None:
        click.echo(content, nl=False)
        return

    parent = os.path.dirname(output)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(output, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    click.echo(f"Created: {output}")


if __name__ == "__main__":
    main()
