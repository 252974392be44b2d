"""
Token mapping lookup.

Maps raw design values (hex colors, pixel numbers, font families, shadow
strings) to the semantic token names configured in a YAML table. Used to
label raw values for display; lookups return ``None`` on a miss and never
raise.

The bundled table lives in ``data/token_map.yaml``. ``use_token_map`` swaps
in a project's own file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, NamedTuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .color import normalize_hex
from .errors import MappingConfigError
from .exporters.common import format_number

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_MAP_PATH = Path(__file__).parent / "data" / "token_map.yaml"


class TokenMatch(NamedTuple):
    name: str
    category: str
    raw_value: str


class TokenMapEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    category: str


def _string_keys(value: Any) -> Any:
    # YAML loads bare numbers as int/float keys
    if isinstance(value, dict):
        return {
            format_number(k) if isinstance(k, int | float) else str(k): v for k, v in value.items()
        }
    return value


class TokenMap(BaseModel):
    """Lookup tables keyed by normalized raw value."""

    model_config = ConfigDict(frozen=True)

    colors: dict[str, TokenMapEntry] = Field(default_factory=dict)
    spacing: dict[str, TokenMapEntry] = Field(default_factory=dict)
    border_radius: dict[str, TokenMapEntry] = Field(default_factory=dict)
    typography: dict[str, TokenMapEntry] = Field(default_factory=dict)
    font_sizes: dict[str, TokenMapEntry] = Field(default_factory=dict)
    elevation: dict[str, TokenMapEntry] = Field(default_factory=dict)

    @field_validator(
        "colors",
        "spacing",
        "border_radius",
        "typography",
        "font_sizes",
        "elevation",
        mode="before",
    )
    @classmethod
    def _coerce_keys(cls, value: Any) -> Any:
        return _string_keys(value) if value is not None else {}

    @field_validator("spacing", "border_radius", "font_sizes")
    @classmethod
    def _numeric_keys(cls, value: dict[str, TokenMapEntry]) -> dict[str, TokenMapEntry]:
        for key in value:
            try:
                float(key)
            except ValueError:
                raise ValueError(f"expected a pixel number, got {key!r}") from None
        return value

    @field_validator("colors")
    @classmethod
    def _normalize_colors(cls, value: dict[str, TokenMapEntry]) -> dict[str, TokenMapEntry]:
        return {normalize_hex(k): v for k, v in value.items()}


def load_token_map(path: Path | None = None) -> TokenMap:
    """Load a token map from YAML (the bundled table by default).

    Raises:
        MappingConfigError: If the file is missing, not YAML, or has the wrong shape.
    """
    path = path or DEFAULT_TOKEN_MAP_PATH
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise MappingConfigError(f"Cannot read token map: {e}", file_name=str(path)) from e
    except yaml.YAMLError as e:
        raise MappingConfigError(f"Invalid YAML: {e}", file_name=str(path)) from e

    if data is None:
        logger.warning(f"Empty token map at {path}")
        return TokenMap()
    if not isinstance(data, dict):
        raise MappingConfigError("Token map must be a mapping of sections", file_name=str(path))

    try:
        return TokenMap.model_validate(data)
    except ValidationError as e:
        raise MappingConfigError(f"Invalid token map: {e}", file_name=str(path)) from e


_active_map: TokenMap | None = None


def get_token_map() -> TokenMap:
    global _active_map
    if _active_map is None:
        _active_map = load_token_map()
    return _active_map


def use_token_map(path: Path | None) -> TokenMap:
    """Make ``path`` the active table; ``None`` restores the bundled one."""
    global _active_map
    _active_map = load_token_map(path)
    logger.debug("Using token map %s", path or DEFAULT_TOKEN_MAP_PATH)
    return _active_map


# =============================================================================
# Lookups
# =============================================================================


def _match(entry: TokenMapEntry | None, raw_value: str) -> TokenMatch | None:
    if entry is None:
        return None
    return TokenMatch(name=entry.name, category=entry.category, raw_value=raw_value)


def get_color_token(hex_value: str, table: TokenMap | None = None) -> TokenMatch | None:
    table = table or get_token_map()
    normalized = normalize_hex(hex_value)
    return _match(table.colors.get(normalized), normalized)


def get_spacing_token(value: int | float, table: TokenMap | None = None) -> TokenMatch | None:
    table = table or get_token_map()
    key = format_number(value)
    return _match(table.spacing.get(key), f"{key}px")


def get_border_radius_token(value: int | float, table: TokenMap | None = None) -> TokenMatch | None:
    table = table or get_token_map()
    key = format_number(value)
    return _match(table.border_radius.get(key), f"{key}px")


def get_font_size_token(value: int | float, table: TokenMap | None = None) -> TokenMatch | None:
    table = table or get_token_map()
    key = format_number(value)
    return _match(table.font_sizes.get(key), f"{key}px")


def get_typography_token(font_family: str, table: TokenMap | None = None) -> TokenMatch | None:
    """Exact font-family match."""
    table = table or get_token_map()
    return _match(table.typography.get(font_family), font_family)


def get_elevation_token(shadow_value: str, table: TokenMap | None = None) -> TokenMatch | None:
    """First configured pattern contained in ``shadow_value``."""
    table = table or get_token_map()
    for pattern, entry in table.elevation.items():
        if pattern in shadow_value:
            return _match(entry, shadow_value)
    return None


def get_all_color_tokens(table: TokenMap | None = None) -> list[dict[str, str]]:
    table = table or get_token_map()
    return [
        {"hex": hex_value, "name": entry.name, "category": entry.category}
        for hex_value, entry in table.colors.items()
    ]


def get_all_spacing_tokens(table: TokenMap | None = None) -> list[dict[str, Any]]:
    table = table or get_token_map()
    return [
        {
            "value": float(value) if "." in value else int(value),
            "name": entry.name,
            "category": entry.category,
        }
        for value, entry in table.spacing.items()
    ]


def has_configured_tokens(table: TokenMap | None = None) -> bool:
    table = table or get_token_map()
    return bool(table.colors or table.spacing or table.border_radius)
