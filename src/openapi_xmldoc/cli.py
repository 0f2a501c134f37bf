"""CLI entry point for openapi-xmldoc."""

import json
import sys
from pathlib import Path

import click
import yaml
from loguru import logger
from pydantic import ValidationError

from openapi_xmldoc.docs.index import DocIndex
from openapi_xmldoc.errors import XmlDocError
from openapi_xmldoc.pipeline import enrich_document, parse_symbol
from openapi_xmldoc.symbols.catalog import TypeCatalog
from openapi_xmldoc.symbols.resolver import NameResolver

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> {name}: {message}")


def _load_catalog(types_path: Path | None) -> TypeCatalog | None:
    return TypeCatalog.load(types_path) if types_path else None


def _write_document(document: dict, output: Path) -> None:
    if output.suffix.lower() == ".json":
        text = json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    else:
        text = yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    envvar="OPENAPI_XMLDOC_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Minimum level of log records written to stderr.",
)
def main(log_level: str):
    """openapi-xmldoc: copy XML doc comments into OpenAPI documents."""
    _configure_logging(log_level.upper())


@main.command()
@click.argument("openapi_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--xml",
    "xml_paths",
    required=True,
    multiple=True,
    envvar="OPENAPI_XMLDOC_XML",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="XML documentation file. Repeat for several; later files win on duplicate members.",
)
@click.option(
    "--types",
    "types_path",
    default=None,
    envvar="OPENAPI_XMLDOC_TYPES",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Catalog of open generic types, used for methods of generic controllers.",
)
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file path (.json or .yaml).")
@click.option("--keep-symbols", is_flag=True, help="Keep x-symbol extensions in the output.")
def enrich(openapi_path: Path, xml_paths: tuple[Path, ...], types_path: Path | None, output: Path, keep_symbols: bool):
    """Apply XML documentation to an OpenAPI document."""
    click.echo(f"Loading {openapi_path}...")
    document = yaml.safe_load(openapi_path.read_text(encoding="utf-8"))

    try:
        index = DocIndex.load(*xml_paths)
        click.echo(f"Indexed {len(index)} documented members.")
        enriched = enrich_document(document, index, _load_catalog(types_path), keep_symbols=keep_symbols)
    except (XmlDocError, ValidationError) as e:
        raise click.ClickException(str(e)) from e

    _write_document(enriched, output)
    click.echo(f"Enriched document saved to {output}")


@main.command()
@click.argument("symbol_json")
@click.option(
    "--types",
    "types_path",
    default=None,
    envvar="OPENAPI_XMLDOC_TYPES",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Catalog of open generic types.",
)
def resolve(symbol_json: str, types_path: Path | None):
    """Print the member name of a symbol descriptor given as JSON."""
    try:
        symbol = parse_symbol(json.loads(symbol_json))
    except (json.JSONDecodeError, ValidationError) as e:
        raise click.ClickException(f"Invalid symbol descriptor: {e}") from e

    member_name = NameResolver(_load_catalog(types_path)).resolve(symbol)
    if member_name is None:
        raise click.ClickException("Symbol could not be resolved to a documented member.")
    click.echo(member_name)


@main.command()
@click.argument("xml_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def members(xml_path: Path):
    """List the member names found in an XML documentation file."""
    try:
        index = DocIndex.load(xml_path)
    except XmlDocError as e:
        raise click.ClickException(str(e)) from e
    for member_name in index:
        click.echo(member_name)
