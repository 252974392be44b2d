"""
Export IR types: options, generated files and the export result.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .tokens import TokenType


class ExportFormat(StrEnum):
    """Supported output formats."""

    STYLE_DICTIONARY = "style-dictionary"
    W3C_DTCG = "w3c-dtcg"
    CSS = "css"
    TAILWIND = "tailwind"
    TYPESCRIPT = "typescript"


class ExportOptions(BaseModel):
    """Export configuration.

    ``formats`` holds plain strings; an unrecognized format produces no
    files rather than failing the whole export.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    formats: list[str] = Field(default_factory=lambda: [ExportFormat.TYPESCRIPT.value])
    include_types: list[TokenType] = Field(
        default_factory=lambda: [
            TokenType.COLOR,
            TokenType.SPACING,
            TokenType.FONT_SIZE,
            TokenType.FONT_FAMILY,
            TokenType.BORDER_RADIUS,
            TokenType.SHADOW,
        ],
        alias="includeTypes",
    )
    group_by_category: bool = Field(default=True, alias="groupByCategory")
    include_type_definitions: bool = Field(default=True, alias="includeTypeDefinitions")
    generate_docs: bool = Field(default=False, alias="generateDocs")
    css_prefix: str | None = Field(default=None, alias="cssPrefix")
    ts_namespace: str | None = Field(default=None, alias="tsNamespace")


DEFAULT_EXPORT_CONFIG = ExportOptions()


class GeneratedFile(BaseModel):
    """One file produced by an exporter."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str
    format: str


class ExportResult(BaseModel):
    """Files produced by ``export_tokens`` across all requested formats."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    files: list[GeneratedFile] = Field(default_factory=list)
    token_count: int = Field(default=0, alias="tokenCount")
    formats: list[str] = Field(default_factory=list)

    def files_for(self, format: str) -> list[GeneratedFile]:
        return [f for f in self.files if f.format == format]

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
