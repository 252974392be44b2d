"""
Value inspection commands: contrast, lookup.
"""

from __future__ import annotations

from enum import StrEnum

import typer
from rich.table import Table

from tokenbridge.core.color import check_contrast
from tokenbridge.core.mapping import (
    TokenMatch,
    get_border_radius_token,
    get_color_token,
    get_elevation_token,
    get_font_size_token,
    get_spacing_token,
    get_typography_token,
)

from .common import console, fail, get_config


class LookupKind(StrEnum):
    COLOR = "color"
    SPACING = "spacing"
    RADIUS = "radius"
    FONT_SIZE = "font-size"
    FONT_FAMILY = "font-family"
    SHADOW = "shadow"


def _check(passed: bool) -> str:
    return "[green]pass[/green]" if passed else "[red]fail[/red]"


def contrast_command(
    color1: str = typer.Argument(..., help="Foreground color"),
    color2: str = typer.Argument(..., help="Background color"),
) -> None:
    """WCAG contrast ratio between two colors."""
    result = check_contrast(color1, color2)
    if result is None:
        fail(f"Cannot parse colors '{color1}' and '{color2}'")

    console.print(f"Contrast ratio: [bold]{result.ratio:.2f}:1[/bold]")
    table = Table(show_header=True, header_style="bold")
    table.add_column("Level")
    table.add_column("Normal text")
    table.add_column("Large text")
    table.add_row("AA", _check(result.passes_aa), _check(result.passes_aa_large))
    table.add_row("AAA", _check(result.passes_aaa), _check(result.passes_aaa_large))
    console.print(table)


def _number(value: str) -> float:
    try:
        return float(value.removesuffix("px"))
    except ValueError:
        fail(f"Expected a pixel value, got '{value}'")


def lookup_command(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Raw design value, e.g. '#3b82f6' or 16"),
    kind: LookupKind = typer.Option(LookupKind.COLOR, "--kind", "-k", help="What the value is"),
) -> None:
    """Find the semantic token name for a raw design value."""
    get_config(ctx)

    match: TokenMatch | None
    if kind == LookupKind.COLOR:
        match = get_color_token(value)
    elif kind == LookupKind.SPACING:
        match = get_spacing_token(_number(value))
    elif kind == LookupKind.RADIUS:
        match = get_border_radius_token(_number(value))
    elif kind == LookupKind.FONT_SIZE:
        match = get_font_size_token(_number(value))
    elif kind == LookupKind.FONT_FAMILY:
        match = get_typography_token(value)
    else:
        match = get_elevation_token(value)

    if match is None:
        console.print(f"No token configured for {kind.value} '{value}'")
        raise typer.Exit(code=1)
    console.print(f"[bold]{match.name}[/bold] ({match.category}) = {match.raw_value}")
