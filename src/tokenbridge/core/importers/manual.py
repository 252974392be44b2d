"""
Manual (generic JSON) importer.

Two shapes are accepted: the canonical collection document
``{"name"?, "version"?, "tokens": [DesignToken, ...]}`` that TokenBridge
itself writes, or a plain key -> value map (nested objects are flattened into
``/`` paths).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import TokenFormatError
from ..inference import extract_category, infer_token_type
from ..ir import DesignToken
from .base import ParsedTokens, StrictTokenValue, join_path, narrow_leaf, require_object


class ManualTokenLeaf(BaseModel):
    """Strict view of a listed token's values; the rest is checked by ``DesignToken``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    value: StrictTokenValue
    original_value: StrictTokenValue | None = Field(default=None, alias="originalValue")


def _parse_token_list(entries: list[Any]) -> list[DesignToken]:
    tokens: list[DesignToken] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise TokenFormatError(f"tokens[{index}] must be an object")
        narrow_leaf(ManualTokenLeaf, entry, f"tokens[{index}]")
        try:
            token = DesignToken.model_validate(dict(entry))
        except ValidationError as e:
            first = e.errors()[0]
            raise TokenFormatError(f"tokens[{index}]: {first['msg']}") from e
        if token.category is None:
            token = token.model_copy(update={"category": extract_category(token.name)})
        tokens.append(token)
    return tokens


def _flatten_map(data: Mapping[str, Any], path: str = "") -> list[DesignToken]:
    tokens: list[DesignToken] = []
    for key, value in data.items():
        name = join_path(path, key)
        if isinstance(value, Mapping):
            tokens.extend(_flatten_map(value, name))
        elif isinstance(value, str | int | float) and not isinstance(value, bool):
            tokens.append(
                DesignToken(
                    name=name,
                    value=value,
                    type=infer_token_type(name, value),
                    category=extract_category(name),
                    original_value=value,
                )
            )
        else:
            raise TokenFormatError(
                f"Unsupported value for '{name}': expected a string or number"
            )
    return tokens


def parse_manual(data: Any) -> ParsedTokens:
    """Parse a canonical collection document or a flat key/value map."""
    doc = require_object(data, "Token")

    entries = doc.get("tokens")
    if isinstance(entries, list):
        name = doc.get("name")
        version = doc.get("version")
        return ParsedTokens(
            tokens=_parse_token_list(entries),
            detected_name=name if isinstance(name, str) else None,
            detected_version=version if isinstance(version, str) else None,
        )

    return ParsedTokens(tokens=_flatten_map(doc))
