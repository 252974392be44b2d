"""
Tokens Studio importer.

Leaves are ``{"value": ..., "type": ..., "description"?: ...}``, usually grouped
under theme sets (``global``, ``light``, ``dark``). Values wrapped in braces are
aliases: ``{colors.primary}`` sets ``reference`` to ``colors/primary``.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr

from ..detect import is_value_type_leaf
from ..inference import extract_category, infer_token_type
from ..ir import DesignToken, TokenType
from .base import ParsedTokens, StrictTokenValue, narrow_leaf, require_object, walk_leaves

TOKEN_STUDIO_TYPES: dict[str, TokenType] = {
    "color": TokenType.COLOR,
    "spacing": TokenType.SPACING,
    "sizing": TokenType.DIMENSION,
    "dimension": TokenType.DIMENSION,
    "borderradius": TokenType.BORDER_RADIUS,
    "borderwidth": TokenType.BORDER_WIDTH,
    "fontfamilies": TokenType.FONT_FAMILY,
    "fontweights": TokenType.FONT_WEIGHT,
    "fontsizes": TokenType.FONT_SIZE,
    "lineheights": TokenType.LINE_HEIGHT,
    "letterspacing": TokenType.LETTER_SPACING,
    "paragraphspacing": TokenType.SPACING,
    "boxshadow": TokenType.SHADOW,
    "opacity": TokenType.OPACITY,
}

_REFERENCE_RE = re.compile(r"^\{([^{}]+)\}$")


class TokenStudioLeaf(BaseModel):
    model_config = ConfigDict(extra="allow")

    value: StrictTokenValue
    type: StrictStr
    description: str | None = None


def map_token_studio_type(name: str, value: Any, ts_type: str) -> TokenType:
    mapped = TOKEN_STUDIO_TYPES.get(ts_type.lower())
    if mapped is not None:
        return mapped
    return infer_token_type(name, value, ts_type)


def parse_reference(value: Any) -> str | None:
    """``{colors.primary}`` -> ``colors/primary``."""
    if not isinstance(value, str):
        return None
    match = _REFERENCE_RE.match(value.strip())
    if match is None:
        return None
    return match.group(1).replace(".", "/")


def parse_token_studio(data: Any) -> ParsedTokens:
    """Parse a Tokens Studio export into canonical tokens."""
    tree = require_object(data, "Tokens Studio")
    tokens: list[DesignToken] = []

    for name, raw in walk_leaves(tree, is_value_type_leaf):
        leaf = narrow_leaf(TokenStudioLeaf, raw, name)
        tokens.append(
            DesignToken(
                name=name,
                value=leaf.value,
                type=map_token_studio_type(name, leaf.value, leaf.type),
                category=extract_category(name),
                description=leaf.description,
                reference=parse_reference(leaf.value),
                original_value=leaf.value,
            )
        )

    return ParsedTokens(tokens=tokens)
