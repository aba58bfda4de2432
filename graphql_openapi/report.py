"""Output formatting and reporting."""

from rich.console import Console
from rich.table import Table

from . import utils
from .converter import ConversionResult
from .nodes import properties_target, variants_target

console = Console()


def error_messages(result: ConversionResult) -> list[str]:
    """Flatten whichever error a failed result carries into display lines."""
    if result.schema_error is not None:
        return [f"Schema error: {result.schema_error}"]
    if result.query_errors:
        messages = []
        for err in result.query_errors:
            msg = f"Query error: {err.message}"
            if err.locations:
                loc_str = ", ".join([f"line {l.line}:{l.column}" for l in err.locations])
                msg += f" ({loc_str})"
            messages.append(msg)
        return messages
    if result.error is not None:
        return [f"Error: {result.error}"]
    return []


def summarize_paths(document: dict) -> list[dict]:
    """One row per GET path: parameter names and top-level response fields."""
    rows = []
    for path, item in document["paths"].items():
        operation = item["get"]
        schema = operation["responses"]["200"]["content"]["application/json"]["schema"]
        target = properties_target(schema)
        union = variants_target(schema)
        if target is not None:
            fields = list(target["properties"])
        elif union is not None:
            fields = [f"<{len(union['anyOf'])} variants>"]
        else:
            fields = []
        rows.append({
            "path": path,
            "parameters": [p["name"] for p in operation["parameters"]],
            "fields": fields,
        })
    return rows


def emit(result: ConversionResult, fmt: str) -> None:
    """
    Output a conversion result.

    Args:
        result: Conversion result
        fmt: Output format ("json" or "console")
    """
    if fmt == "json":
        if result.ok:
            print(utils.to_json(result.openapi_schema))
        else:
            print(utils.to_json({"errors": error_messages(result)}))
        return

    if not result.ok:
        console.print()
        for msg in error_messages(result):
            console.print(f"  [red]✖[/red] {msg}")
        console.print()
        return

    console.print("\n[bold cyan]OpenAPI Paths[/bold cyan]\n")

    table = Table(box=None)
    table.add_column("Path", style="cyan")
    table.add_column("Parameters", style="yellow")
    table.add_column("Response fields")

    for row in summarize_paths(result.openapi_schema):
        table.add_row(
            f"GET {row['path']}",
            ", ".join(row["parameters"]) or "[dim]-[/dim]",
            ", ".join(row["fields"]) or "[dim]-[/dim]",
        )

    console.print(table)
    console.print()


def print_kv(title: str, data: dict) -> None:
    """
    Print key-value pairs (for schema info, config init).

    Args:
        title: Section title
        data: Key-value data
    """
    console.print(f"\n[bold cyan]{title}[/bold cyan]\n")

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="yellow")

    for k, v in data.items():
        table.add_row(k, str(v))

    console.print(table)
    console.print()
