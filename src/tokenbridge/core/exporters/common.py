"""
Helpers shared by the exporters: path nesting, number formatting, units.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from ..ir import TokenType, TokenValue

# Unit appended to numeric values, by token type. Types not listed are emitted bare.
NUMERIC_UNITS: dict[TokenType, str] = {
    TokenType.SPACING: "px",
    TokenType.FONT_SIZE: "px",
    TokenType.BORDER_RADIUS: "px",
    TokenType.BORDER_WIDTH: "px",
    TokenType.DIMENSION: "px",
    TokenType.DURATION: "ms",
}

DEFAULT_KEY = "DEFAULT"


def format_number(value: int | float) -> str:
    """Format a number without a trailing ``.0`` (``8.0`` -> ``"8"``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_value(value: TokenValue) -> str:
    if isinstance(value, int | float):
        return format_number(value)
    return value


def with_unit(value: TokenValue, token_type: TokenType) -> str:
    """Numeric values get their type's unit; strings pass through."""
    if isinstance(value, int | float):
        return f"{format_number(value)}{NUMERIC_UNITS.get(token_type, '')}"
    return value


def _is_scalar(node: Any) -> bool:
    return not isinstance(node, dict)


def set_path(
    tree: dict[str, Any],
    parts: list[str],
    leaf: Any,
    is_leaf: Callable[[Any], bool] = _is_scalar,
) -> None:
    """Place ``leaf`` at ``parts`` inside ``tree``, creating groups as needed.

    When one token path is a prefix of another, the shorter token moves under
    ``DEFAULT`` inside the group, whichever order they arrive in. ``is_leaf``
    tells a token node from a group for exporters whose leaves are objects.
    """
    current = tree
    for key in parts[:-1]:
        node = current.get(key)
        if node is None:
            node = current[key] = {}
        elif is_leaf(node):
            node = current[key] = {DEFAULT_KEY: node}
        current = node

    key = parts[-1]
    existing = current.get(key)
    if existing is not None and not is_leaf(existing):
        existing[DEFAULT_KEY] = leaf
    else:
        current[key] = leaf


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)
