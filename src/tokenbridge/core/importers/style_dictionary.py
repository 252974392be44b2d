"""
Style Dictionary importer.

Leaves are ``{"value": ..., "type"?: ..., "description"?: ..., "comment"?: ...}``
nested under arbitrary group keys.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..detect import is_style_dictionary_leaf
from ..inference import extract_category, infer_token_type, refine_type
from ..ir import DesignToken, TokenType
from .base import ParsedTokens, StrictTokenValue, narrow_leaf, require_object, walk_leaves

# Style Dictionary's own type vocabulary, mapped back to TokenType.
# "size" is ambiguous and is narrowed by the token name.
STYLE_DICTIONARY_TYPES: dict[str, TokenType] = {
    "color": TokenType.COLOR,
    "fontfamily": TokenType.FONT_FAMILY,
    "fontweight": TokenType.FONT_WEIGHT,
    "lineheight": TokenType.LINE_HEIGHT,
    "letterspacing": TokenType.LETTER_SPACING,
    "shadow": TokenType.SHADOW,
    "opacity": TokenType.OPACITY,
    "time": TokenType.DURATION,
    "cubicbezier": TokenType.CUBIC_BEZIER,
    "other": TokenType.OTHER,
}

SIZE_TYPES: tuple[TokenType, ...] = (
    TokenType.SPACING,
    TokenType.FONT_SIZE,
    TokenType.BORDER_RADIUS,
    TokenType.BORDER_WIDTH,
    TokenType.LETTER_SPACING,
)


class StyleDictionaryLeaf(BaseModel):
    model_config = ConfigDict(extra="allow")

    value: StrictTokenValue
    type: str | None = None
    description: str | None = None
    comment: str | None = None


def map_style_dictionary_type(name: str, value: Any, sd_type: str | None) -> TokenType:
    if sd_type is None:
        return infer_token_type(name, value)
    key = sd_type.lower()
    if key == "size":
        return refine_type(name, SIZE_TYPES, TokenType.DIMENSION)
    if key in STYLE_DICTIONARY_TYPES:
        return STYLE_DICTIONARY_TYPES[key]
    return infer_token_type(name, value, sd_type)


def parse_style_dictionary(data: Any) -> ParsedTokens:
    """Parse a Style Dictionary token tree into canonical tokens."""
    tree = require_object(data, "Style Dictionary")
    tokens: list[DesignToken] = []

    for name, raw in walk_leaves(tree, is_style_dictionary_leaf):
        leaf = narrow_leaf(StyleDictionaryLeaf, raw, name)
        tokens.append(
            DesignToken(
                name=name,
                value=leaf.value,
                type=map_style_dictionary_type(name, leaf.value, leaf.type),
                category=extract_category(name),
                description=leaf.description or leaf.comment,
                original_value=leaf.value,
            )
        )

    return ParsedTokens(tokens=tokens)
