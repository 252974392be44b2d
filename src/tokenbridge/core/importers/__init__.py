"""
Token importers.

``import_tokens`` detects the source format, dispatches to the matching
parser, names the resulting collection and installs it with replace or
merge semantics. Any failure raises ``TokenFormatError`` before a collection
is produced; partial collections are never returned.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ..collection import apply_import
from ..detect import UNKNOWN_FORMAT, DetectedFormat, detect_format
from ..errors import TokenFormatError
from ..ir import (
    DEFAULT_COLLECTION_NAME,
    DEFAULT_COLLECTION_VERSION,
    ImportOptions,
    TokenCollection,
    TokenCollectionMetadata,
    TokenSource,
    utc_timestamp,
)
from .base import ParsedTokens, RowWarning
from .csv_import import parse_csv
from .figma_variables import parse_figma_variables
from .manual import parse_manual
from .style_dictionary import parse_style_dictionary
from .token_studio import parse_token_studio
from .w3c import parse_w3c_dtcg

logger = logging.getLogger(__name__)

JsonParser = Callable[[Any, str | None], ParsedTokens]

# JSON-based formats: source -> parser(data, file_name)
JSON_IMPORTERS: dict[TokenSource, JsonParser] = {
    TokenSource.FIGMA_VARIABLES: parse_figma_variables,
    TokenSource.W3C_DTCG: lambda data, _file_name: parse_w3c_dtcg(data),
    TokenSource.TOKEN_STUDIO: lambda data, _file_name: parse_token_studio(data),
    TokenSource.STYLE_DICTIONARY: lambda data, _file_name: parse_style_dictionary(data),
    TokenSource.MANUAL: lambda data, _file_name: parse_manual(data),
}

UNKNOWN_FORMAT_MESSAGE = (
    "Unknown token format. Please use Style Dictionary, Token Studio, W3C DTCG, or CSV format."
)

_FILE_SUFFIX_RE = re.compile(r"(\.tokens)?\.(json|csv)$", re.IGNORECASE)


@dataclass
class ImportReport:
    """A successful import plus the row-level warnings it produced."""

    collection: TokenCollection
    source: TokenSource
    warnings: list[RowWarning] = field(default_factory=list)


def parse_content(content: str, file_name: str | None = None) -> tuple[TokenSource, ParsedTokens]:
    """Detect the format of ``content`` and parse it.

    Raises:
        TokenFormatError: If the format is unknown or the content is malformed.
    """
    detected: DetectedFormat = detect_format(content, file_name)
    if detected == UNKNOWN_FORMAT:
        raise TokenFormatError(UNKNOWN_FORMAT_MESSAGE, file_name=file_name)
    source = TokenSource(detected)

    try:
        if source == TokenSource.CSV:
            return source, parse_csv(content)

        parser = JSON_IMPORTERS.get(source)
        if parser is None:
            raise TokenFormatError(f"No importer for format '{source}'")
        data = json.loads(content)
        return source, parser(data, file_name)
    except json.JSONDecodeError as e:
        raise TokenFormatError(f"Invalid JSON: {e}", file_name=file_name) from e
    except TokenFormatError as e:
        if e.file_name or not file_name:
            raise
        raise TokenFormatError(e.message, file_name=file_name) from e


def name_from_file(file_name: str | None) -> str | None:
    if not file_name:
        return None
    stem = _FILE_SUFFIX_RE.sub("", file_name.rsplit("/", 1)[-1])
    return stem or None


def import_tokens_with_report(
    content: str,
    options: ImportOptions | None = None,
    *,
    existing: TokenCollection | None = None,
    clock: Callable[[], str] = utc_timestamp,
) -> ImportReport:
    """Import ``content`` and report row-level warnings alongside the result.

    Args:
        content: Raw file content.
        options: Mode, original file name and collection name override.
        existing: The collection currently held by the caller (used by merge).
        clock: Source of the ``imported_at`` timestamp.

    Returns:
        ImportReport with the installed collection.

    Raises:
        TokenFormatError: If the content cannot be imported.
    """
    options = options or ImportOptions()
    source, parsed = parse_content(content, options.file_name)

    name = (
        options.collection_name
        or parsed.detected_name
        or name_from_file(options.file_name)
        or DEFAULT_COLLECTION_NAME
    )
    incoming = TokenCollection(
        name=name,
        version=parsed.detected_version or DEFAULT_COLLECTION_VERSION,
        tokens=parsed.tokens,
        metadata=TokenCollectionMetadata(
            source=source,
            imported_at=clock(),
            file_name=options.file_name,
        ),
    )
    collection = apply_import(
        existing, incoming, options.mode, collection_name=options.collection_name
    )

    logger.debug(
        "Imported %d tokens from %s (%s, mode=%s)",
        len(parsed.tokens),
        options.file_name or "<content>",
        source,
        options.mode,
    )
    return ImportReport(collection=collection, source=source, warnings=parsed.warnings)


def import_tokens(
    content: str,
    options: ImportOptions | None = None,
    *,
    existing: TokenCollection | None = None,
) -> TokenCollection:
    """Import tokens from any supported format.

    See ``import_tokens_with_report`` for arguments.
    """
    return import_tokens_with_report(content, options, existing=existing).collection


__all__ = [
    "ImportReport",
    "JSON_IMPORTERS",
    "ParsedTokens",
    "RowWarning",
    "import_tokens",
    "import_tokens_with_report",
    "name_from_file",
    "parse_content",
    "parse_csv",
    "parse_figma_variables",
    "parse_manual",
    "parse_style_dictionary",
    "parse_token_studio",
    "parse_w3c_dtcg",
]
