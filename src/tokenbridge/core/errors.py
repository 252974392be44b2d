"""
Error types for TokenBridge import, mapping and configuration.

Validation findings are never raised; they are returned as
``ValidationIssue`` records on a ``ValidationResult``.
"""

from __future__ import annotations


class TokenBridgeError(Exception):
    """Base exception for all TokenBridge errors."""

    def __init__(self, message: str, *, file_name: str | None = None):
        self.message = message
        self.file_name = file_name
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.file_name:
            return f"{self.file_name}: {self.message}"
        return self.message


class TokenFormatError(TokenBridgeError):
    """
    Raised when a token source cannot be detected or parsed.

    Examples:
    - Content that matches no known token format
    - Invalid JSON where JSON was expected
    - CSV without a name/value header, or with zero usable rows
    - A leaf whose value is neither a string nor a number
    """

    pass


class MappingConfigError(TokenBridgeError):
    """Raised when the token mapping table cannot be loaded."""

    pass


class ConfigError(TokenBridgeError):
    """Raised when tokenbridge.toml is malformed."""

    pass


class ExportError(TokenBridgeError):
    """Raised when an export request cannot produce any output."""

    pass
