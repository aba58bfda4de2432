"""CLI for graphql-openapi."""

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import config, schema_loader, utils
from .converter import ConversionResult, GraphQLToOpenAPIConverter
from .report import emit, print_kv
from .scalars import fixed_type_fallback

app = typer.Typer(help="Describe GraphQL queries as OpenAPI GET endpoints")
config_app = typer.Typer(help="Configuration operations")
schema_app = typer.Typer(help="Schema operations")
app.add_typer(config_app, name="config")
app.add_typer(schema_app, name="schema")

console = Console()


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_converter(schema_file: str, cfg: config.Config) -> GraphQLToOpenAPIConverter:
    """
    Create a converter for a schema file using configured scalars and info.

    Args:
        schema_file: SDL or introspection JSON file
        cfg: Configuration

    Returns:
        Converter ready for to_openapi calls
    """
    source = schema_loader.load_schema_file(schema_file)
    fallback = fixed_type_fallback(cfg.unknown_scalar_type) if cfg.unknown_scalar_type else None
    return GraphQLToOpenAPIConverter(
        schema=source.sdl,
        introspection_schema=source.introspection,
        on_unknown_scalar=fallback,
        scalar_config=dict(cfg.scalars),
        info=cfg.info(),
        servers=cfg.servers,
    )


def run_convert(query_file: str, schema_file: str, cfg: config.Config) -> ConversionResult:
    """Convert one query file against one schema file."""
    converter = build_converter(schema_file, cfg)
    return converter.to_openapi(utils.read_text(query_file))


@app.command("convert")
def convert_cmd(
    query_file: str = typer.Argument(..., help="GraphQL query file"),
    schema: str = typer.Option(..., help="Schema file (SDL, or introspection .json)"),
    out: Optional[str] = typer.Option(None, help="Write the OpenAPI document to this path"),
    output: str = typer.Option("console", help="Output format (console|json)"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Config file path"),
    verbose: bool = typer.Option(False, help="Enable debug logging"),
):
    """Translate a GraphQL query document into an OpenAPI document."""
    setup_logging(verbose)
    try:
        cfg = config.load(config_file)
        result = run_convert(query_file, schema, cfg)

        if result.ok and out:
            utils.write_json(out, result.openapi_schema)

        emit(result, output)

        if result.ok and out and output == "console":
            console.print(f"[green]✓ Written to {out}[/green]")

        if not result.ok:
            raise typer.Exit(2)

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if "--debug" in sys.argv:
            raise
        raise typer.Exit(1)


@config_app.command("init")
def config_init(
    path: Optional[str] = typer.Option(None, help="Config file path"),
):
    """Write an example configuration file."""
    try:
        written = config.create_example_config(path)
        print_kv("Config created", {"path": written})
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@schema_app.command("info")
def schema_info(
    schema_file: str = typer.Argument(..., help="Schema file (SDL, or introspection .json)"),
):
    """Show what kind of schema a file holds and its content hash."""
    try:
        source = schema_loader.load_schema_file(schema_file)
        print_kv("Schema", {"path": source.path, "kind": source.kind, "hash": source.hash})
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
