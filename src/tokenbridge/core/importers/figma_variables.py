"""
Figma Variables importer.

Handles the JSON produced by Figma's Variables export: names may contain
spaces, color ``$value``s are objects (``hex`` / ``components`` / ``alpha``) and
``$extensions`` carries ``com.figma.*`` metadata.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..color import parse_color
from ..errors import TokenFormatError
from ..inference import extract_category, infer_token_type
from ..ir import DesignToken, TokenType
from .base import ParsedTokens, StrictTokenValue, join_path, narrow_leaf, require_object

DEFAULT_FIGMA_COLLECTION_NAME = "Figma Variables"

_FILE_SUFFIX_RE = re.compile(r"(\.tokens)?\.json$", re.IGNORECASE)


class FigmaColorValue(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    color_space: str | None = Field(default=None, alias="colorSpace")
    components: list[float] | None = None
    alpha: float | None = None
    hex: str | None = None


class FigmaVariableLeaf(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    value: FigmaColorValue | StrictTokenValue = Field(alias="$value")
    type: str | None = Field(default=None, alias="$type")
    description: str | None = Field(default=None, alias="$description")
    extensions: dict[str, Any] | None = Field(default=None, alias="$extensions")


def sanitize_token_name(name: str) -> str:
    """``"Brand Colors/Primary 500"`` -> ``"brand-colors/primary-500"``."""
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"[^a-zA-Z0-9\-/]", "", name)
    name = re.sub(r"-{2,}", "-", name)
    name = name.strip("-")
    return name.lower()


def figma_color_to_css(color: FigmaColorValue) -> str:
    """Convert a Figma color object to a CSS color string."""
    alpha = 1.0 if color.alpha is None else color.alpha

    if color.hex:
        if alpha < 1:
            rgb = parse_color("#" + color.hex.strip().lstrip("#"))
            if rgb is None:
                raise TokenFormatError(f"Invalid Figma color hex: {color.hex!r}")
            r, g, b = rgb
            return f"rgba({r}, {g}, {b}, {alpha:.2f})"
        return color.hex

    if color.components and len(color.components) >= 3:
        r, g, b = (round(c * 255) for c in color.components[:3])
        if alpha < 1:
            return f"rgba({r}, {g}, {b}, {alpha:.2f})"
        return f"rgb({r}, {g}, {b})"

    return "#000000"


def _convert_leaf(name: str, leaf: FigmaVariableLeaf) -> tuple[str | int | float, TokenType]:
    figma_type = (leaf.type or "").lower()
    value = leaf.value
    if isinstance(value, FigmaColorValue):
        if figma_type in ("", "color"):
            return figma_color_to_css(value), TokenType.COLOR
        return json.dumps(value.model_dump(by_alias=True, exclude_none=True)), TokenType.OTHER
    return value, infer_token_type(name, value)


def collection_name_from_file(file_name: str | None) -> str:
    if file_name:
        stripped = _FILE_SUFFIX_RE.sub("", file_name)
        if stripped:
            return stripped
    return DEFAULT_FIGMA_COLLECTION_NAME


def parse_figma_variables(data: Any, file_name: str | None = None) -> ParsedTokens:
    """Parse a Figma Variables export into canonical tokens."""
    tree = require_object(data, "Figma Variables")
    tokens: list[DesignToken] = []

    def traverse(group: Mapping[str, Any], path: str) -> None:
        for key, value in group.items():
            if key.startswith("$") or not isinstance(value, Mapping):
                continue
            raw_path = join_path(path, key)
            if "$value" not in value:
                traverse(value, raw_path)
                continue

            name = sanitize_token_name(raw_path)
            leaf = narrow_leaf(FigmaVariableLeaf, value, raw_path)
            token_value, token_type = _convert_leaf(name, leaf)
            original = value["$value"]
            tokens.append(
                DesignToken(
                    name=name,
                    value=token_value,
                    type=token_type,
                    category=extract_category(name),
                    description=leaf.description,
                    extensions=leaf.extensions,
                    original_value=original if not isinstance(original, Mapping) else None,
                )
            )

    traverse(tree, "")
    return ParsedTokens(tokens=tokens, detected_name=collection_name_from_file(file_name))
