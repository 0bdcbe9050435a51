"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    elif output_format == "quiet":
        format_quiet(data)
    else:
        # Default to pretty
        format_pretty(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())

    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        table.add_row(*(_format_value(item.get(col, "")) for col in columns))

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _format_value(value))

    console.print(table)


def format_pretty(data: Any) -> None:
    """Human-friendly output; occurrence lists get one numbered line each."""
    if isinstance(data, list) and data and isinstance(data[0], dict) and "due" in data[0]:
        format_occurrences_pretty(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        format_table(data)


def format_occurrences_pretty(occurrences: list[dict]) -> None:
    """Print occurrences as ``1. 2025-03-03 (Monday)`` lines."""
    for number, item in enumerate(occurrences, start=1):
        line = f"[bold]{number:>3}.[/bold] [cyan]{item['due']}[/cyan] ({item['weekday']})"
        if item.get("anchor") and item["anchor"] != item["due"]:
            line += f" [dim]moved from {item['anchor']}[/dim]"
        console.print(line)


def format_quiet(data: Any) -> None:
    """Print only the essential value of each item, one per line."""
    if isinstance(data, list):
        for item in data:
            print(item.get("due", item) if isinstance(item, dict) else item)
    elif isinstance(data, dict):
        print(data.get("summary", data))
    else:
        print(data)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if value is None:
        return "-"
    return str(value)
