"""
Style Dictionary export: a nested ``tokens.json`` plus a build ``config.json``.
"""

from __future__ import annotations

from typing import Any

from ..ir import DesignToken, ExportFormat, ExportOptions, GeneratedFile, TokenType
from .common import set_path, to_json

STYLE_DICTIONARY_TYPES: dict[TokenType, str] = {
    TokenType.COLOR: "color",
    TokenType.SPACING: "size",
    TokenType.FONT_SIZE: "size",
    TokenType.FONT_FAMILY: "fontFamily",
    TokenType.FONT_WEIGHT: "fontWeight",
    TokenType.LINE_HEIGHT: "lineHeight",
    TokenType.LETTER_SPACING: "letterSpacing",
    TokenType.BORDER_RADIUS: "size",
    TokenType.BORDER_WIDTH: "size",
    TokenType.SHADOW: "shadow",
    TokenType.OPACITY: "opacity",
    TokenType.DURATION: "time",
    TokenType.CUBIC_BEZIER: "cubicBezier",
    TokenType.DIMENSION: "size",
    TokenType.OTHER: "other",
}

# Static build configuration targeting CSS variables and an ES6 module.
BUILD_CONFIG: dict[str, Any] = {
    "source": ["tokens.json"],
    "platforms": {
        "css": {
            "transformGroup": "css",
            "buildPath": "build/css/",
            "files": [{"destination": "variables.css", "format": "css/variables"}],
        },
        "js": {
            "transformGroup": "js",
            "buildPath": "build/js/",
            "files": [{"destination": "tokens.js", "format": "javascript/es6"}],
        },
    },
}


def _leaf(token: DesignToken, options: ExportOptions) -> dict[str, Any]:
    leaf: dict[str, Any] = {"value": token.value, "type": STYLE_DICTIONARY_TYPES[token.type]}
    if options.generate_docs and token.description:
        leaf["comment"] = token.description
    return leaf


def is_token_node(node: Any) -> bool:
    return not isinstance(node, dict) or "value" in node


def generate_style_dictionary(
    tokens: list[DesignToken],
    options: ExportOptions,
    collection_name: str,
) -> list[GeneratedFile]:
    tree: dict[str, Any] = {}
    for token in tokens:
        set_path(tree, token.path, _leaf(token, options), is_token_node)

    return [
        GeneratedFile(
            path="tokens.json",
            content=to_json(tree),
            format=ExportFormat.STYLE_DICTIONARY.value,
        ),
        GeneratedFile(
            path="config.json",
            content=to_json(BUILD_CONFIG),
            format=ExportFormat.STYLE_DICTIONARY.value,
        ),
    ]
