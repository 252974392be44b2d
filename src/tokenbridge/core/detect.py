"""
Token file format detection.

Detection is a prioritized rule table over the parsed JSON shape; adding a
format means adding a row to ``JSON_FORMAT_RULES``. CSV is recognized before
any JSON parsing, from the file extension or the shape of the first line.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any, Literal

from .ir import TokenSource

logger = logging.getLogger(__name__)

UNKNOWN_FORMAT: Literal["unknown"] = "unknown"

DetectedFormat = TokenSource | Literal["unknown"]

# Top-level keys a token-studio export groups its theme sets under
THEME_SET_KEYS: frozenset[str] = frozenset({"global", "light", "dark", "core", "semantic"})

# Keys only present in token-studio multi-set exports
TOKEN_STUDIO_META_KEYS: frozenset[str] = frozenset({"$themes", "$metadata"})

_MAX_DEPTH = 10


# =============================================================================
# Tree helpers
# =============================================================================


def iter_objects(data: Mapping[str, Any], depth: int = 0) -> Iterator[Mapping[str, Any]]:
    """Yield every nested object below ``data`` (depth-first, bounded)."""
    if depth > _MAX_DEPTH:
        return
    for value in data.values():
        if isinstance(value, Mapping):
            yield value
            yield from iter_objects(value, depth + 1)


def is_scalar(value: Any) -> bool:
    return isinstance(value, str | int | float) and not isinstance(value, bool)


def is_w3c_leaf(obj: Mapping[str, Any]) -> bool:
    return "$value" in obj


def is_figma_variable_leaf(obj: Mapping[str, Any]) -> bool:
    """Figma Variables leaves carry a color object or Figma extensions."""
    value = obj.get("$value")
    if isinstance(value, Mapping) and ("hex" in value or "components" in value):
        return True
    extensions = obj.get("$extensions")
    return isinstance(extensions, Mapping) and "com.figma.variableId" in extensions


def is_value_type_leaf(obj: Mapping[str, Any]) -> bool:
    """``{value, type}`` leaf used by token-studio."""
    return "value" in obj and isinstance(obj.get("type"), str)


def is_style_dictionary_leaf(obj: Mapping[str, Any]) -> bool:
    """``{value, type?}`` leaf used by style-dictionary."""
    if "value" not in obj or "$value" in obj:
        return False
    token_type = obj.get("type")
    return token_type is None or isinstance(token_type, str)


# =============================================================================
# Shape rules
# =============================================================================


def _is_figma_variables(data: Mapping[str, Any]) -> bool:
    return any(is_figma_variable_leaf(obj) for obj in iter_objects(data))


def _is_w3c_dtcg(data: Mapping[str, Any]) -> bool:
    schema = data.get("$schema")
    if isinstance(schema, str) and "design-tokens" in schema:
        return True
    return any(is_w3c_leaf(obj) for obj in iter_objects(data))


def _is_token_studio(data: Mapping[str, Any]) -> bool:
    if any(key in data for key in TOKEN_STUDIO_META_KEYS):
        return True
    for key, value in data.items():
        if key.lower() not in THEME_SET_KEYS or not isinstance(value, Mapping):
            continue
        if any(is_value_type_leaf(obj) for obj in iter_objects(value)):
            return True
    return False


def _is_style_dictionary(data: Mapping[str, Any]) -> bool:
    return any(is_style_dictionary_leaf(obj) for obj in iter_objects(data))


def _is_manual(data: Mapping[str, Any]) -> bool:
    return True


# Checked in order; first match wins.
JSON_FORMAT_RULES: list[tuple[TokenSource, Callable[[Mapping[str, Any]], bool]]] = [
    (TokenSource.FIGMA_VARIABLES, _is_figma_variables),
    (TokenSource.W3C_DTCG, _is_w3c_dtcg),
    (TokenSource.TOKEN_STUDIO, _is_token_studio),
    (TokenSource.STYLE_DICTIONARY, _is_style_dictionary),
    (TokenSource.MANUAL, _is_manual),
]


# =============================================================================
# Detection
# =============================================================================


def looks_like_csv(content: str, file_name: str | None = None) -> bool:
    """CSV by extension, or a first non-blank line shaped like a header row."""
    if file_name and file_name.lower().endswith(".csv"):
        return True
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        if stripped[0] in "{[":
            return False
        fields = [f for f in stripped.split(",") if f.strip()]
        return len(fields) >= 2
    return False


def detect_json_format(data: Any) -> DetectedFormat:
    """Classify already-parsed JSON by shape."""
    if not isinstance(data, Mapping):
        return UNKNOWN_FORMAT
    for source, matches in JSON_FORMAT_RULES:
        if matches(data):
            return source
    return UNKNOWN_FORMAT


def detect_format(content: str, file_name: str | None = None) -> DetectedFormat:
    """Decide which token source format ``content`` is in.

    Args:
        content: Raw file content.
        file_name: Original file name, if known.

    Returns:
        The detected TokenSource, or ``"unknown"``.
    """
    if looks_like_csv(content, file_name):
        logger.debug("Detected csv for %s", file_name or "<content>")
        return TokenSource.CSV

    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        logger.debug("Content for %s is neither CSV nor JSON", file_name or "<content>")
        return UNKNOWN_FORMAT

    detected = detect_json_format(data)
    logger.debug("Detected %s for %s", detected, file_name or "<content>")
    return detected
