"""
W3C DTCG export: one nested ``tokens.json`` with ``$value``/``$type`` leaves.
"""

from __future__ import annotations

from typing import Any

from ..ir import DesignToken, ExportFormat, ExportOptions, GeneratedFile, TokenType
from .common import set_path, to_json

W3C_SCHEMA_URL = "https://design-tokens.github.io/community-group/format/"

W3C_TYPES: dict[TokenType, str] = {
    TokenType.COLOR: "color",
    TokenType.SPACING: "dimension",
    TokenType.FONT_SIZE: "dimension",
    TokenType.FONT_FAMILY: "fontFamily",
    TokenType.FONT_WEIGHT: "fontWeight",
    TokenType.LINE_HEIGHT: "number",
    TokenType.LETTER_SPACING: "dimension",
    TokenType.BORDER_RADIUS: "dimension",
    TokenType.BORDER_WIDTH: "dimension",
    TokenType.SHADOW: "shadow",
    TokenType.OPACITY: "number",
    TokenType.DURATION: "duration",
    TokenType.CUBIC_BEZIER: "cubicBezier",
    TokenType.DIMENSION: "dimension",
    TokenType.OTHER: "string",
}


def _leaf(token: DesignToken, options: ExportOptions) -> dict[str, Any]:
    leaf: dict[str, Any] = {"$value": token.value, "$type": W3C_TYPES[token.type]}
    if options.generate_docs and token.description:
        leaf["$description"] = token.description
    if token.extensions:
        leaf["$extensions"] = token.extensions
    return leaf


def is_token_node(node: Any) -> bool:
    return not isinstance(node, dict) or "$value" in node


def generate_w3c_dtcg(
    tokens: list[DesignToken],
    options: ExportOptions,
    collection_name: str,
) -> list[GeneratedFile]:
    tree: dict[str, Any] = {"$schema": W3C_SCHEMA_URL}
    for token in tokens:
        set_path(tree, token.path, _leaf(token, options), is_token_node)

    return [
        GeneratedFile(path="tokens.json", content=to_json(tree), format=ExportFormat.W3C_DTCG.value)
    ]
