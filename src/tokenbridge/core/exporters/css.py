"""
CSS custom properties export: a single ``:root { ... }`` block in ``tokens.css``.
"""

from __future__ import annotations

import re

from ..collection import group_tokens_by_category
from ..ir import DesignToken, ExportFormat, ExportOptions, GeneratedFile
from .common import with_unit

_UPPER_RE = re.compile(r"[A-Z]")
_SEPARATOR_RE = re.compile(r"[/\s]+")
_HYPHENS_RE = re.compile(r"-{2,}")


def token_name_to_css_var(name: str, prefix: str | None = None) -> str:
    """``colors/primaryDark`` -> ``--colors-primary-dark`` (``--ds-...`` with a prefix)."""
    body = _SEPARATOR_RE.sub("-", name)
    body = _UPPER_RE.sub(lambda m: f"-{m.group(0).lower()}", body)
    body = _HYPHENS_RE.sub("-", body).strip("-")
    if prefix:
        return f"--{prefix}-{body}"
    return f"--{body}"


def format_css_value(token: DesignToken, prefix: str | None = None) -> str:
    """CSS value for a token; aliases become ``var()`` references."""
    if token.reference:
        return f"var({token_name_to_css_var(token.reference, prefix)})"
    return with_unit(token.value, token.type)


def _declaration(token: DesignToken, prefix: str | None) -> str:
    return f"  {token_name_to_css_var(token.name, prefix)}: {format_css_value(token, prefix)};"


def generate_css_variables(
    tokens: list[DesignToken],
    options: ExportOptions,
    collection_name: str,
) -> list[GeneratedFile]:
    prefix = options.css_prefix or None
    lines: list[str] = []

    if options.generate_docs:
        lines.extend(
            [
                "/**",
                f" * {collection_name} - CSS Custom Properties",
                f" * Total tokens: {len(tokens)}",
                " */",
                "",
            ]
        )

    lines.append(":root {")
    if options.group_by_category:
        grouped = group_tokens_by_category(tokens)
        for index, category in enumerate(sorted(grouped)):
            if index:
                lines.append("")
            if options.generate_docs:
                lines.append(f"  /* {category} */")
            for token in grouped[category]:
                if options.generate_docs and token.description:
                    lines.append(f"  /* {token.description} */")
                lines.append(_declaration(token, prefix))
    else:
        for token in tokens:
            lines.append(_declaration(token, prefix))
    lines.append("}")

    return [
        GeneratedFile(path="tokens.css", content="\n".join(lines) + "\n", format=ExportFormat.CSS.value)
    ]
