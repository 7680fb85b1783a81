"""CLI entry point for swagger-doc."""

import json
import logging
from pathlib import Path

import click
import yaml

from swagger_doc.config import BuildOptions
from swagger_doc.errors import SwaggerDocError
from swagger_doc.generator.document import build_document
from swagger_doc.parser.loader import load_routes


def _build(routes_path: Path, options: BuildOptions) -> dict:
    """Load a route description and build its Swagger document."""
    try:
        return build_document(load_routes(routes_path), options)
    except SwaggerDocError as e:
        raise click.ClickException(str(e)) from e


def _render(document: dict, fmt: str, indent: int) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log pipeline progress to stderr.")
def main(verbose: bool):
    """Build Swagger 2.0 documents from route descriptions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("routes_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file (default: stdout).")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--indent", default=2, show_default=True, help="JSON indentation.")
@click.option("--spec-version", default="2.0", type=click.Choice(["2.0", "1.2"]), help="Reference style for definitions.")
@click.option("--strict-names", is_flag=True, help="Fail when different schemas share a definition name.")
def build(routes_path: Path, output: Path | None, fmt: str, indent: int, spec_version: str, strict_names: bool):
    """Build a Swagger document from a YAML/JSON route description."""
    options = BuildOptions(
        spec_version=spec_version,
        on_name_collision="error" if strict_names else "overwrite",
    )
    text = _render(_build(routes_path, options), fmt, indent)

    if output is None:
        click.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Swagger document saved to {output}", err=True)


@main.command()
@click.argument("routes_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def definitions(routes_path: Path):
    """List the definition names a route description produces."""
    document = _build(routes_path, BuildOptions())
    for name in document["definitions"]:
        click.echo(name)
