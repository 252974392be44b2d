"""
TypeScript theme module export (``theme.ts``).

One ``as const`` object per populated token bucket, a combined ``theme``
object and, optionally, a ``keyof`` helper type per bucket.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from ..collection import group_tokens_by_type
from ..ir import DesignToken, ExportFormat, ExportOptions, GeneratedFile, TokenType
from .common import NUMERIC_UNITS, format_number, set_path

_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")

INDENT = "  "


@dataclass(frozen=True)
class Bucket:
    """How one token type is rendered as an exported constant."""

    export_name: str
    token_type: TokenType
    nest_multi_segment: bool = False
    nest_when_grouped: bool = False


BUCKETS: list[Bucket] = [
    Bucket("colors", TokenType.COLOR, nest_when_grouped=True),
    Bucket("spacing", TokenType.SPACING, nest_multi_segment=True),
    Bucket("fontSize", TokenType.FONT_SIZE, nest_multi_segment=True),
    Bucket("fontFamily", TokenType.FONT_FAMILY),
    Bucket("fontWeight", TokenType.FONT_WEIGHT),
    Bucket("lineHeight", TokenType.LINE_HEIGHT),
    Bucket("letterSpacing", TokenType.LETTER_SPACING),
    Bucket("borderRadius", TokenType.BORDER_RADIUS, nest_multi_segment=True),
    Bucket("borderWidth", TokenType.BORDER_WIDTH),
    Bucket("shadows", TokenType.SHADOW),
    Bucket("opacity", TokenType.OPACITY),
    Bucket("durations", TokenType.DURATION),
    Bucket("easings", TokenType.CUBIC_BEZIER),
    Bucket("dimensions", TokenType.DIMENSION),
    Bucket("other", TokenType.OTHER),
]


class TSLiteral(str):
    """Already-rendered TypeScript expression."""


def sanitize_key(key: str) -> str:
    """Quote object keys that are not valid identifiers."""
    if _IDENTIFIER_RE.match(key):
        return key
    return quote(key)


def quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def format_ts_value(token: DesignToken) -> TSLiteral:
    value = token.value
    if isinstance(value, int | float):
        unit = NUMERIC_UNITS.get(token.type)
        if unit:
            return TSLiteral(quote(f"{format_number(value)}{unit}"))
        return TSLiteral(format_number(value))
    return TSLiteral(quote(value))


def serialize_object(obj: dict[str, Any], depth: int) -> list[str]:
    lines: list[str] = []
    pad = INDENT * depth
    for key, value in obj.items():
        if isinstance(value, dict):
            lines.append(f"{pad}{sanitize_key(key)}: {{")
            lines.extend(serialize_object(value, depth + 1))
            lines.append(f"{pad}}},")
        else:
            lines.append(f"{pad}{sanitize_key(key)}: {value},")
    return lines


def _flat_entries(tokens: list[DesignToken]) -> dict[str, Any]:
    entries: dict[str, Any] = {}
    for token in tokens:
        key = token.leaf_name
        if key in entries:
            key = "-".join(token.path)
        entries[key] = format_ts_value(token)
    return entries


def build_bucket(bucket: Bucket, tokens: list[DesignToken], options: ExportOptions) -> list[str]:
    nested = (bucket.nest_when_grouped and options.group_by_category) or (
        bucket.nest_multi_segment and any(len(t.path) > 1 for t in tokens)
    )
    if nested:
        body: dict[str, Any] = {}
        for token in tokens:
            set_path(body, token.path, format_ts_value(token))
    else:
        body = _flat_entries(tokens)

    return [
        f"export const {bucket.export_name} = {{",
        *serialize_object(body, 1),
        "} as const;",
        "",
    ]


def _type_name(export_name: str) -> str:
    return f"{export_name[0].upper()}{export_name[1:]}Token"


def generate_typescript(
    tokens: list[DesignToken],
    options: ExportOptions,
    collection_name: str,
) -> list[GeneratedFile]:
    by_type = group_tokens_by_type(tokens)
    body: list[str] = []
    exported: list[str] = []

    for bucket in BUCKETS:
        bucket_tokens = by_type.get(bucket.token_type)
        if not bucket_tokens:
            continue
        body.extend(build_bucket(bucket, bucket_tokens, options))
        exported.append(bucket.export_name)

    body.append("export const theme = {")
    body.extend(f"{INDENT}{name}," for name in exported)
    body.append("} as const;")
    body.append("")
    body.append("export type Theme = typeof theme;")

    if options.include_type_definitions and exported:
        body.append("")
        body.append("// Token type helpers")
        body.extend(f"export type {_type_name(name)} = keyof typeof {name};" for name in exported)

    if options.ts_namespace:
        body = [
            f"export namespace {options.ts_namespace} {{",
            *[f"{INDENT}{line}" if line else "" for line in body],
            "}",
        ]

    header = [
        "/**",
        f" * {collection_name} - Design Tokens",
        " *",
        " * This file is auto-generated. Do not edit manually.",
        " */",
        "",
    ]
    content = "\n".join([*header, *body, ""])

    return [GeneratedFile(path="theme.ts", content=content, format=ExportFormat.TYPESCRIPT.value)]
