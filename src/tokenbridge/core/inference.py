"""
Token type inference.

Type inference is a prioritized rule table rather than control flow: the
first matching rule wins, and supporting a new naming convention means
adding a row. Precedence is explicit format type, then name hints, then the
shape of the value, then ``other``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .ir import TokenType, TokenValue

# Ordered (type, name fragments). More specific fragments come first so that
# "stroke-width" is a border width rather than a color.
NAME_HINT_RULES: list[tuple[TokenType, tuple[str, ...]]] = [
    (TokenType.BORDER_WIDTH, ("border-width", "borderwidth", "stroke-width", "strokewidth")),
    (TokenType.LETTER_SPACING, ("letter-spacing", "letterspacing", "tracking")),
    (TokenType.LINE_HEIGHT, ("line-height", "lineheight", "leading")),
    (TokenType.FONT_SIZE, ("font-size", "fontsize", "text-size", "font/size")),
    (TokenType.FONT_FAMILY, ("font-family", "fontfamil", "typeface", "font/family")),
    (TokenType.FONT_WEIGHT, ("font-weight", "fontweight", "weight")),
    (TokenType.COLOR, ("color", "colour", "fill", "stroke")),
    (TokenType.SPACING, ("spacing", "space", "gap", "margin", "padding")),
    (TokenType.BORDER_RADIUS, ("radius", "radii", "corner", "rounded")),
    (TokenType.SHADOW, ("shadow", "elevation")),
    (TokenType.OPACITY, ("opacity", "alpha")),
    (TokenType.DURATION, ("duration", "delay")),
]

# Ordered (type, value pattern) for string values.
VALUE_SHAPE_RULES: list[tuple[TokenType, re.Pattern[str]]] = [
    (TokenType.COLOR, re.compile(r"^(#|rgba?\(|hsla?\()", re.IGNORECASE)),
    (TokenType.CUBIC_BEZIER, re.compile(r"^cubic-bezier\(", re.IGNORECASE)),
    (TokenType.DIMENSION, re.compile(r"^-?\d*\.?\d+(px|rem|em)$", re.IGNORECASE)),
    (TokenType.DURATION, re.compile(r"^-?\d*\.?\d+m?s$", re.IGNORECASE)),
]

# Free-text hints (a format's own type words) by fragment.
TYPE_HINT_RULES: list[tuple[TokenType, tuple[str, ...]]] = [
    (TokenType.COLOR, ("color",)),
    (TokenType.LETTER_SPACING, ("letterspacing", "letter-spacing")),
    (TokenType.SPACING, ("spacing", "space")),
    (TokenType.FONT_SIZE, ("fontsize", "font-size")),
    (TokenType.FONT_FAMILY, ("fontfamil", "font-family")),
    (TokenType.FONT_WEIGHT, ("weight",)),
    (TokenType.LINE_HEIGHT, ("lineheight", "line-height")),
    (TokenType.BORDER_RADIUS, ("radius",)),
    (TokenType.BORDER_WIDTH, ("borderwidth", "border-width")),
    (TokenType.SHADOW, ("shadow", "elevation")),
    (TokenType.OPACITY, ("opacity",)),
    (TokenType.DURATION, ("duration", "time")),
    (TokenType.CUBIC_BEZIER, ("cubicbezier", "easing")),
    (TokenType.DIMENSION, ("dimension", "sizing", "size")),
]

_TYPES_BY_LOWER: dict[str, TokenType] = {t.value.lower(): t for t in TokenType}


def parse_token_type(value: str) -> TokenType | None:
    """Match a TokenType by its value, case-insensitively."""
    return _TYPES_BY_LOWER.get(value.strip().lower())


def type_from_name(name: str) -> TokenType | None:
    """First name-hint rule that matches ``name``."""
    name_lower = name.lower()
    for token_type, fragments in NAME_HINT_RULES:
        if any(fragment in name_lower for fragment in fragments):
            return token_type
    return None


def type_from_value(value: TokenValue) -> TokenType | None:
    """Type implied by the shape of the value alone."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return TokenType.DIMENSION
    for token_type, pattern in VALUE_SHAPE_RULES:
        if pattern.match(value.strip()):
            return token_type
    return None


def type_from_hint(hint: str) -> TokenType | None:
    """Map a free-text type word (``"fontSizes"``, ``"boxShadow"``) to a TokenType."""
    exact = parse_token_type(hint)
    if exact is not None:
        return exact
    hint_lower = hint.lower()
    for token_type, fragments in TYPE_HINT_RULES:
        if any(fragment in hint_lower for fragment in fragments):
            return token_type
    return None


def infer_token_type(name: str, value: TokenValue, hint: str | None = None) -> TokenType:
    """Infer a token's type.

    Precedence: explicit ``hint`` > name hints > value shape > ``other``.
    """
    if hint:
        hinted = type_from_hint(hint)
        if hinted is not None:
            return hinted
    return type_from_name(name) or type_from_value(value) or TokenType.OTHER


def refine_type(
    name: str,
    allowed: Iterable[TokenType],
    default: TokenType,
) -> TokenType:
    """Narrow a coarse format type (``size``, ``dimension``) using the name.

    Returns the name-hinted type when it is one of ``allowed``, else ``default``.
    """
    hinted = type_from_name(name)
    if hinted is not None and hinted in set(allowed):
        return hinted
    return default


def extract_category(name: str) -> str | None:
    """First path segment of a multi-segment name."""
    parts = name.split("/")
    if len(parts) > 1:
        return parts[0]
    return None
