"""
Token exporters.

Each exporter is a pure function ``(tokens, options, collection_name)`` that
returns the files for one format. ``export_tokens`` filters the collection by
``include_types`` and runs every requested exporter in order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..collection import filter_tokens_by_type
from ..ir import (
    DEFAULT_EXPORT_CONFIG,
    DesignToken,
    ExportFormat,
    ExportOptions,
    ExportResult,
    GeneratedFile,
    TokenCollection,
)
from .css import format_css_value, generate_css_variables, token_name_to_css_var
from .style_dictionary import generate_style_dictionary
from .tailwind import generate_tailwind_config
from .typescript import generate_typescript
from .w3c import generate_w3c_dtcg

logger = logging.getLogger(__name__)

Exporter = Callable[[list[DesignToken], ExportOptions, str], list[GeneratedFile]]

EXPORTERS: dict[str, Exporter] = {
    ExportFormat.STYLE_DICTIONARY.value: generate_style_dictionary,
    ExportFormat.W3C_DTCG.value: generate_w3c_dtcg,
    ExportFormat.CSS.value: generate_css_variables,
    ExportFormat.TAILWIND.value: generate_tailwind_config,
    ExportFormat.TYPESCRIPT.value: generate_typescript,
}


def get_exporter(format: str) -> Exporter | None:
    return EXPORTERS.get(format)


def export_tokens(
    collection: TokenCollection,
    options: ExportOptions | None = None,
) -> ExportResult:
    """Generate the files for every format in ``options.formats``.

    Unknown formats contribute no files. ``token_count`` counts the tokens
    that survived the ``include_types`` filter.
    """
    options = options or DEFAULT_EXPORT_CONFIG
    tokens = filter_tokens_by_type(collection, options.include_types)

    files: list[GeneratedFile] = []
    for format in options.formats:
        exporter = get_exporter(format)
        if exporter is None:
            logger.warning("Unknown export format %r, skipping", format)
            continue
        generated = exporter(tokens, options, collection.name)
        logger.debug("Exported %d tokens as %s (%d files)", len(tokens), format, len(generated))
        files.extend(generated)

    return ExportResult(files=files, token_count=len(tokens), formats=list(options.formats))


def generate_preview(
    tokens: list[DesignToken],
    format: str,
    options: ExportOptions | None = None,
    collection_name: str = "Preview",
) -> str:
    """Content of the first file ``format`` produces, or ``""``."""
    exporter = get_exporter(format)
    if exporter is None:
        return ""
    files = exporter(tokens, options or DEFAULT_EXPORT_CONFIG, collection_name)
    return files[0].content if files else ""


__all__ = [
    "EXPORTERS",
    "Exporter",
    "export_tokens",
    "format_css_value",
    "generate_css_variables",
    "generate_preview",
    "generate_style_dictionary",
    "generate_tailwind_config",
    "generate_typescript",
    "generate_w3c_dtcg",
    "get_exporter",
    "token_name_to_css_var",
]
