"""
Export commands: export, preview.
"""

from __future__ import annotations

from pathlib import Path

import typer

from tokenbridge.config import ProjectConfig, override_export
from tokenbridge.core.archive import build_export_archive
from tokenbridge.core.errors import TokenBridgeError
from tokenbridge.core.exporters import EXPORTERS, export_tokens, generate_preview
from tokenbridge.core.ir import ExportOptions

from .common import console, err_console, fail, get_config, resolve_collection


def _options(
    config: ProjectConfig,
    formats: list[str] | None,
    types: list[str] | None,
    css_prefix: str | None,
    ts_namespace: str | None,
    docs: bool | None,
    group: bool | None,
) -> ExportOptions:
    try:
        return override_export(
            config.export,
            formats=formats or None,
            include_types=types or None,
            css_prefix=css_prefix,
            ts_namespace=ts_namespace,
            generate_docs=docs,
            group_by_category=group,
        )
    except ValueError as e:
        fail(e)


def export_command(
    ctx: typer.Context,
    file: Path | None = typer.Argument(None, help="Token file (default: current session)"),
    formats: list[str] | None = typer.Option(
        None, "--format", "-f", help=f"Output format, repeatable: {', '.join(EXPORTERS)}"
    ),
    types: list[str] | None = typer.Option(
        None, "--type", "-t", help="Token type to include, repeatable"
    ),
    out: Path = typer.Option(Path("tokens"), "--out", "-o", help="Output directory"),
    archive: bool = typer.Option(False, "--zip", help="Write a single zip archive instead"),
    css_prefix: str | None = typer.Option(None, "--css-prefix", help="CSS variable prefix"),
    ts_namespace: str | None = typer.Option(None, "--ts-namespace", help="TypeScript namespace"),
    docs: bool | None = typer.Option(None, "--docs/--no-docs", help="Emit descriptions"),
    group: bool | None = typer.Option(
        None, "--group/--no-group", help="Group output by category"
    ),
) -> None:
    """Export tokens to one or more formats."""
    config = get_config(ctx)
    collection = resolve_collection(config, file)
    options = _options(config, formats, types, css_prefix, ts_namespace, docs, group)

    if archive:
        try:
            built = build_export_archive(collection, options)
        except TokenBridgeError as e:
            fail(e)
        out.mkdir(parents=True, exist_ok=True)
        target = out / built.file_name
        target.write_bytes(built.data)
        console.print(f"[green]✓[/green] Wrote {target} ({len(built.result.files)} files)")
        return

    for unknown in (f for f in options.formats if f not in EXPORTERS):
        err_console.print(f"[yellow]Skipping unknown format '{unknown}'[/yellow]")

    result = export_tokens(collection, options)
    if not result.files:
        fail("No files generated. Check if tokens match the selected types.")

    for generated in result.files:
        target = out / generated.format / generated.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(generated.content, encoding="utf-8")
        console.print(f"  {target}")
    console.print(
        f"[green]✓[/green] Exported {result.token_count} tokens to {len(result.files)} files"
    )


def preview_command(
    ctx: typer.Context,
    format: str = typer.Argument(..., help=f"One of: {', '.join(EXPORTERS)}"),
    file: Path | None = typer.Argument(None, help="Token file (default: current session)"),
) -> None:
    """Print the first file a format would generate."""
    config = get_config(ctx)
    if format not in EXPORTERS:
        fail(f"Unknown format '{format}'")
    collection = resolve_collection(config, file)
    tokens = [t for t in collection.tokens if t.type in config.export.include_types]
    console.print(
        generate_preview(tokens, format, config.export, collection.name),
        markup=False,
        highlight=False,
    )
