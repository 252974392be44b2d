"""
TokenBridge Intermediate Representation (IR) types.

All token, validation and export models are re-exported from this package.
"""

from .export import (
    DEFAULT_EXPORT_CONFIG,
    ExportFormat,
    ExportOptions,
    ExportResult,
    GeneratedFile,
)
from .tokens import (
    DEFAULT_COLLECTION_NAME,
    DEFAULT_COLLECTION_VERSION,
    DesignToken,
    ImportMode,
    ImportOptions,
    TokenCollection,
    TokenCollectionMetadata,
    TokenSource,
    TokenType,
    TokenValue,
    utc_timestamp,
)
from .validation import (
    ContrastResult,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
)

__all__ = [
    # Tokens
    "DEFAULT_COLLECTION_NAME",
    "DEFAULT_COLLECTION_VERSION",
    "DesignToken",
    "ImportMode",
    "ImportOptions",
    "TokenCollection",
    "TokenCollectionMetadata",
    "TokenSource",
    "TokenType",
    "TokenValue",
    "utc_timestamp",
    # Validation
    "ContrastResult",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    # Export
    "DEFAULT_EXPORT_CONFIG",
    "ExportFormat",
    "ExportOptions",
    "ExportResult",
    "GeneratedFile",
]
