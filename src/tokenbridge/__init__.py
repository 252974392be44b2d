"""
TokenBridge - design token import, validation and export.

Reads token files from design tools (Style Dictionary, W3C DTCG, Token
Studio, Figma Variables, CSV), checks them, and writes them back out as
Style Dictionary, W3C DTCG, CSS custom properties, Tailwind theme or
TypeScript.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import MappingConfigError, TokenBridgeError, TokenFormatError
from .core.exporters import export_tokens, generate_preview
from .core.importers import import_tokens
from .core.validator import validate_tokens

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "TokenBridgeError",
    "TokenFormatError",
    "MappingConfigError",
    "import_tokens",
    "validate_tokens",
    "export_tokens",
    "generate_preview",
]
