"""
CSV importer.

The first row is a header. ``name`` and ``value`` columns are required;
``type``, ``category`` and ``description`` are optional. Rows that cannot be
turned into a token are skipped and reported as ``RowWarning``s; a file with
no usable rows is a format error.
"""

from __future__ import annotations

import csv
import io
import logging
import re

from ..errors import TokenFormatError
from ..inference import extract_category, infer_token_type, parse_token_type
from ..ir import DesignToken, TokenValue
from .base import ParsedTokens, RowWarning

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: tuple[str, ...] = ("name", "value")
OPTIONAL_COLUMNS: tuple[str, ...] = ("type", "category", "description")

_NUMERIC_RE = re.compile(r"^-?\d+(\.\d+)?$")


def coerce_value(raw: str) -> TokenValue:
    """``"8"`` -> 8, ``"1.5"`` -> 1.5, anything else unchanged."""
    if _NUMERIC_RE.match(raw):
        return float(raw) if "." in raw else int(raw)
    return raw


def _cell(row: list[str], index: int | None) -> str:
    if index is None or index >= len(row):
        return ""
    return row[index].strip()


def parse_csv(content: str) -> ParsedTokens:
    """Parse CSV token rows into canonical tokens."""
    try:
        rows = list(csv.reader(io.StringIO(content.strip())))
    except csv.Error as e:
        raise TokenFormatError(f"Invalid CSV: {e}") from e

    if not rows:
        raise TokenFormatError("CSV is empty")

    header = [h.strip().lower() for h in rows[0]]
    missing = [col for col in REQUIRED_COLUMNS if col not in header]
    if missing:
        raise TokenFormatError('CSV must have "name" and "value" columns')

    columns: dict[str, int | None] = {
        col: header.index(col) if col in header else None
        for col in (*REQUIRED_COLUMNS, *OPTIONAL_COLUMNS)
    }

    tokens: list[DesignToken] = []
    warnings: list[RowWarning] = []

    for line_number, row in enumerate(rows[1:], start=2):
        if not any(cell.strip() for cell in row):
            continue

        name = _cell(row, columns["name"])
        raw_value = _cell(row, columns["value"])
        if not name or not raw_value:
            warnings.append(RowWarning(row=line_number, message="Missing name or value"))
            continue

        value = coerce_value(raw_value)
        type_cell = _cell(row, columns["type"])
        if type_cell:
            token_type = parse_token_type(type_cell)
            if token_type is None:
                warnings.append(
                    RowWarning(row=line_number, message=f"Unknown token type '{type_cell}'")
                )
                continue
        else:
            token_type = infer_token_type(name, value)

        category = _cell(row, columns["category"]) or extract_category(name)
        description = _cell(row, columns["description"]) or None

        tokens.append(
            DesignToken(
                name=name,
                value=value,
                type=token_type,
                category=category,
                description=description,
                original_value=value,
            )
        )

    for warning in warnings:
        logger.debug("Skipped CSV row %d: %s", warning.row, warning.message)

    if not tokens:
        raise TokenFormatError("CSV contains no valid token rows")

    return ParsedTokens(tokens=tokens, warnings=warnings)
