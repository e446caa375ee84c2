"""Command line interface entry point."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click

from oas_components.component_registry import ComponentObject
from oas_components.document_loading import (
    SUPPORTED_FORMATS,
    dump_components,
    load_components,
    render_json,
)
from oas_components.reference_resolution import resolve_reference
from oas_components.reference_union import ComponentsError


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="oas-components")
def cli() -> None:
    """Inspect the components registry of an OpenAPI document."""


@cli.command(name="check")
@click.argument("document_path", type=click.Path(path_type=str))
def check(document_path: str) -> None:
    """Parse the components section and summarize each present category."""
    try:
        registry = load_components(document_path)
    except ComponentsError as exc:
        raise CliError(str(exc)) from exc
    for category in registry.present_categories():
        entries = registry.entries(category) or {}
        click.echo(f"{category.value}: {len(entries)}")
    click.echo(f"extensions: {len(registry.extensions)}")


@cli.command(name="resolve")
@click.argument("document_path", type=click.Path(path_type=str))
@click.argument("reference")
def resolve(document_path: str, reference: str) -> None:
    """Follow REFERENCE (for example #/components/schemas/Pet) and print its value."""
    try:
        registry = load_components(document_path)
        value = resolve_reference(registry, reference)
        text = render_json(_to_wire(value))
    except ComponentsError as exc:
        raise CliError(str(exc)) from exc
    click.echo(text)


@cli.command(name="normalize")
@click.argument("document_path", type=click.Path(path_type=str))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(SUPPORTED_FORMATS),
    default="yaml",
    show_default=True,
    help="Output document format",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to write the normalized document to",
)
def normalize(document_path: str, output_format: str, output_path: str | None) -> None:
    """Re-serialize the components section of a document."""
    try:
        registry = load_components(document_path)
        text = dump_components(registry, output_format=output_format)
    except ComponentsError as exc:
        raise CliError(str(exc)) from exc
    if output_path is None:
        click.echo(text, nl=False)
        return
    try:
        Path(output_path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


def _to_wire(value: Any) -> Any:
    if isinstance(value, ComponentObject):
        return value.to_wire()
    return value


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
