"""
W3C Design Token Community Group (DTCG) importer.

Leaves are ``{"$value": ..., "$type"?: ..., "$description"?: ...,
"$extensions"?: {...}}``. ``$type`` may also be declared on a group and is
inherited by the leaves below it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..inference import extract_category, infer_token_type, refine_type
from ..ir import DesignToken, TokenType
from .base import ParsedTokens, StrictTokenValue, join_path, narrow_leaf, require_object

W3C_TYPES: dict[str, TokenType] = {
    "color": TokenType.COLOR,
    "fontFamily": TokenType.FONT_FAMILY,
    "fontWeight": TokenType.FONT_WEIGHT,
    "duration": TokenType.DURATION,
    "cubicBezier": TokenType.CUBIC_BEZIER,
    "shadow": TokenType.SHADOW,
    "string": TokenType.OTHER,
}

DIMENSION_TYPES: tuple[TokenType, ...] = (
    TokenType.SPACING,
    TokenType.FONT_SIZE,
    TokenType.LETTER_SPACING,
    TokenType.BORDER_RADIUS,
    TokenType.BORDER_WIDTH,
)

NUMBER_TYPES: tuple[TokenType, ...] = (
    TokenType.LINE_HEIGHT,
    TokenType.OPACITY,
    TokenType.FONT_WEIGHT,
)


class W3CLeaf(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    value: StrictTokenValue = Field(alias="$value")
    type: str | None = Field(default=None, alias="$type")
    description: str | None = Field(default=None, alias="$description")
    extensions: dict[str, Any] | None = Field(default=None, alias="$extensions")


def map_w3c_type(name: str, value: Any, w3c_type: str | None) -> TokenType:
    """Map a DTCG ``$type`` to a TokenType, narrowing coarse types by name."""
    if w3c_type == "dimension":
        return refine_type(name, DIMENSION_TYPES, TokenType.DIMENSION)
    if w3c_type == "number":
        return refine_type(name, NUMBER_TYPES, TokenType.OTHER)
    if w3c_type in W3C_TYPES:
        return W3C_TYPES[w3c_type]
    return infer_token_type(name, value)


def parse_w3c_dtcg(data: Any) -> ParsedTokens:
    """Parse a DTCG token tree into canonical tokens."""
    tree = require_object(data, "W3C DTCG")
    tokens: list[DesignToken] = []

    def traverse(group: Mapping[str, Any], path: str, inherited_type: str | None) -> None:
        group_type = group.get("$type") if isinstance(group.get("$type"), str) else None
        current_type = group_type or inherited_type
        for key, value in group.items():
            if key.startswith("$") or not isinstance(value, Mapping):
                continue
            name = join_path(path, key)
            if "$value" not in value:
                traverse(value, name, current_type)
                continue

            leaf = narrow_leaf(W3CLeaf, value, name)
            tokens.append(
                DesignToken(
                    name=name,
                    value=leaf.value,
                    type=map_w3c_type(name, leaf.value, leaf.type or current_type),
                    category=extract_category(name),
                    description=leaf.description,
                    extensions=leaf.extensions,
                    original_value=leaf.value,
                )
            )

    traverse(tree, "", None)
    return ParsedTokens(tokens=tokens)
