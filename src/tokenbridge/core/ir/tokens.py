"""
Design token IR types.

The canonical in-memory representation every importer produces and every
exporter consumes. Field names are snake_case; the JSON form uses the
camelCase / ``$``-prefixed aliases so collections serialize the same way the
browser application stores them.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enums
# =============================================================================


class TokenType(StrEnum):
    """Closed set of design token types."""

    COLOR = "color"
    SPACING = "spacing"
    FONT_SIZE = "fontSize"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    LINE_HEIGHT = "lineHeight"
    LETTER_SPACING = "letterSpacing"
    BORDER_RADIUS = "borderRadius"
    BORDER_WIDTH = "borderWidth"
    SHADOW = "shadow"
    OPACITY = "opacity"
    DURATION = "duration"
    CUBIC_BEZIER = "cubicBezier"
    DIMENSION = "dimension"
    OTHER = "other"


class TokenSource(StrEnum):
    """Source format a collection was imported from."""

    MANUAL = "manual"
    STYLE_DICTIONARY = "style-dictionary"
    TOKEN_STUDIO = "token-studio"
    W3C_DTCG = "w3c-dtcg"
    CSV = "csv"
    FIGMA = "figma"
    FIGMA_VARIABLES = "figma-variables"


class ImportMode(StrEnum):
    """How an import combines with an existing collection."""

    REPLACE = "replace"
    MERGE = "merge"


TokenValue = str | int | float

DEFAULT_COLLECTION_NAME = "Imported Tokens"
DEFAULT_COLLECTION_VERSION = "1.0.0"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp used for ``imported_at``."""
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


# =============================================================================
# Tokens
# =============================================================================


class DesignToken(BaseModel):
    """A single named design value (``colors/primary/500`` -> ``#3B82F6``)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(description="Slash-separated path, unique within a collection")
    value: TokenValue
    type: TokenType = TokenType.OTHER
    category: str | None = None
    description: str | None = None
    reference: str | None = Field(
        default=None,
        alias="$reference",
        description="Name of the token this one aliases (never resolved)",
    )
    extensions: dict[str, Any] | None = Field(
        default=None,
        alias="$extensions",
        description="Format-specific metadata preserved by the W3C format",
    )
    original_value: TokenValue | None = Field(default=None, alias="originalValue")

    @property
    def path(self) -> list[str]:
        """Name split into its ``/`` segments."""
        return self.name.split("/")

    @property
    def leaf_name(self) -> str:
        """Last path segment of the name."""
        return self.name.split("/")[-1] or self.name

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TokenCollectionMetadata(BaseModel):
    """Provenance of a collection."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: TokenSource
    imported_at: str = Field(default_factory=utc_timestamp, alias="importedAt")
    file_name: str | None = Field(default=None, alias="fileName")
    extra: dict[str, Any] | None = None


class TokenCollection(BaseModel):
    """A named, versioned set of design tokens."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = DEFAULT_COLLECTION_NAME
    version: str = DEFAULT_COLLECTION_VERSION
    tokens: list[DesignToken] = Field(default_factory=list)
    metadata: TokenCollectionMetadata | None = None

    def get(self, name: str) -> DesignToken | None:
        """Return the first token with ``name``, or None."""
        for token in self.tokens:
            if token.name == name:
                return token
        return None

    def names(self) -> list[str]:
        return [t.name for t in self.tokens]

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ImportOptions(BaseModel):
    """Options for ``import_tokens``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mode: ImportMode = ImportMode.REPLACE
    file_name: str | None = Field(default=None, alias="fileName")
    collection_name: str | None = Field(default=None, alias="collectionName")
