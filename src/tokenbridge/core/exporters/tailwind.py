"""
Tailwind CSS theme export.

Emits ``tailwind.tokens.js`` (a CommonJS config extending the theme) and
``tailwind.tokens.mjs`` (the same theme object as an ES module).
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from typing import Any

from ..collection import group_tokens_by_type
from ..ir import DesignToken, ExportFormat, ExportOptions, GeneratedFile, TokenType
from .common import format_value, set_path, to_json, with_unit


def build_color_palette(tokens: list[DesignToken], group_by_category: bool) -> dict[str, Any]:
    """Nested ``colors.primary.500`` when grouping, else ``colors['primary-500']``."""
    colors: dict[str, Any] = {}
    for token in tokens:
        parts = token.path
        if group_by_category and len(parts) > 1:
            set_path(colors, parts, token.value)
        else:
            colors["-".join(parts)] = token.value
    return colors


def _by_leaf(tokens: list[DesignToken], convert: Callable[[DesignToken], Any]) -> dict[str, Any]:
    return {token.leaf_name: convert(token) for token in tokens}


def _px(token: DesignToken) -> str:
    if isinstance(token.value, int | float):
        return with_unit(token.value, TokenType.DIMENSION)
    return token.value


def _font_stack(token: DesignToken) -> list[str]:
    return [family.strip() for family in format_value(token.value).split(",")]


def build_theme(tokens: list[DesignToken], options: ExportOptions) -> dict[str, Any]:
    """Theme object with keys only for types that have tokens."""
    by_type = group_tokens_by_type(tokens)
    theme: dict[str, Any] = {}

    if by_type.get(TokenType.COLOR):
        theme["colors"] = build_color_palette(by_type[TokenType.COLOR], options.group_by_category)
    if by_type.get(TokenType.SPACING):
        theme["spacing"] = _by_leaf(by_type[TokenType.SPACING], _px)
    if by_type.get(TokenType.FONT_SIZE):
        theme["fontSize"] = _by_leaf(by_type[TokenType.FONT_SIZE], _px)
    if by_type.get(TokenType.FONT_FAMILY):
        theme["fontFamily"] = _by_leaf(by_type[TokenType.FONT_FAMILY], _font_stack)
    if by_type.get(TokenType.FONT_WEIGHT):
        theme["fontWeight"] = _by_leaf(by_type[TokenType.FONT_WEIGHT], lambda t: t.value)
    if by_type.get(TokenType.BORDER_RADIUS):
        theme["borderRadius"] = _by_leaf(by_type[TokenType.BORDER_RADIUS], _px)
    if by_type.get(TokenType.SHADOW):
        theme["boxShadow"] = _by_leaf(by_type[TokenType.SHADOW], lambda t: format_value(t.value))

    return theme


def generate_tailwind_config(
    tokens: list[DesignToken],
    options: ExportOptions,
    collection_name: str,
) -> list[GeneratedFile]:
    theme = build_theme(tokens, options)
    theme_json = to_json(theme)

    config = (
        "/** @type {import('tailwindcss').Config} */\n"
        "module.exports = {\n"
        "  theme: {\n"
        f"    extend: {textwrap.indent(theme_json, '    ').strip()},\n"
        "  },\n"
        "};\n"
    )
    module = (
        f"// {collection_name} - Tailwind Theme Tokens\n"
        "// Import and spread into your tailwind.config.js theme.extend\n"
        "\n"
        f"export const tokens = {theme_json};\n"
        "\n"
        "export default tokens;\n"
    )

    return [
        GeneratedFile(path="tailwind.tokens.js", content=config, format=ExportFormat.TAILWIND.value),
        GeneratedFile(path="tailwind.tokens.mjs", content=module, format=ExportFormat.TAILWIND.value),
    ]
