"""
Token source commands: detect, import, validate, stats.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from tokenbridge.core.collection import get_token_stats
from tokenbridge.core.detect import UNKNOWN_FORMAT, detect_format
from tokenbridge.core.errors import TokenBridgeError
from tokenbridge.core.ir import (
    ImportMode,
    ImportOptions,
    ValidationResult,
    ValidationSeverity,
)
from tokenbridge.core.validator import get_validation_summary, validate_tokens

from .common import console, fail, get_config, load_store, read_source, resolve_collection

SEVERITY_STYLES = {
    ValidationSeverity.ERROR: "red",
    ValidationSeverity.WARNING: "yellow",
    ValidationSeverity.INFO: "cyan",
}


def print_validation(result: ValidationResult) -> None:
    if result.issues:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Severity")
        table.add_column("Code", no_wrap=True)
        table.add_column("Message")
        table.add_column("Suggestion", style="dim")
        for issue in result.issues:
            style = SEVERITY_STYLES[issue.severity]
            table.add_row(
                f"[{style}]{issue.severity.value}[/{style}]",
                issue.code,
                issue.message,
                issue.suggestion or "",
            )
        console.print(table)

    style = "green" if result.valid else "red"
    console.print(f"[{style}]{get_validation_summary(result)}[/{style}] ({result.token_count} tokens)")


def detect_command(
    file: Path = typer.Argument(..., help="Token file to inspect"),
) -> None:
    """Print the detected format of a token file."""
    detected = detect_format(read_source(file), file.name)
    if detected == UNKNOWN_FORMAT:
        fail(f"Unrecognized token format: {file}")
    console.print(detected)


def import_command(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="Token file to import"),
    mode: ImportMode = typer.Option(
        ImportMode.REPLACE, "--mode", "-m", help="replace the session or merge into it"
    ),
    name: str | None = typer.Option(None, "--name", "-n", help="Collection name"),
) -> None:
    """Import a token file into the current session."""
    config = get_config(ctx)
    store = load_store(config)

    try:
        report = store.import_content(
            read_source(file),
            ImportOptions(mode=mode, file_name=file.name, collection_name=name),
        )
    except TokenBridgeError as e:
        fail(e)

    store.save(config.store_path)

    collection = report.collection
    console.print(
        f"[green]✓[/green] Imported {len(collection.tokens)} tokens "
        f"from {file.name} ({report.source.value}) into '{collection.name}'"
    )
    for warning in report.warnings:
        console.print(f"[yellow]Row {warning.row}:[/yellow] {warning.message}")
    if store.validation is not None:
        console.print(get_validation_summary(store.validation))


def validate_command(
    ctx: typer.Context,
    file: Path | None = typer.Argument(None, help="Token file (default: current session)"),
) -> None:
    """Validate tokens and list issues. Exits 1 when errors are found."""
    config = get_config(ctx)
    result = validate_tokens(resolve_collection(config, file))
    print_validation(result)
    if not result.valid:
        raise typer.Exit(code=1)


def stats_command(
    ctx: typer.Context,
    file: Path | None = typer.Argument(None, help="Token file (default: current session)"),
) -> None:
    """Show token counts by type and category."""
    config = get_config(ctx)
    collection = resolve_collection(config, file)
    stats = get_token_stats(collection)

    console.print(f"[bold]{collection.name}[/bold] v{collection.version}: {stats.total} tokens")
    for title, counts in (("Type", stats.by_type), ("Category", stats.by_category)):
        table = Table(show_header=True, header_style="bold")
        table.add_column(title)
        table.add_column("Tokens", justify="right")
        for key, count in sorted(counts.items()):
            table.add_row(key, str(count))
        console.print(table)
