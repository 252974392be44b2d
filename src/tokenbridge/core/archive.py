"""
Zip packaging for exported token files.

Each generated file is placed under a folder named after its format, and a
``README.md`` describes formats, files, usage, included types and the
collection's provenance.
"""

from __future__ import annotations

import io
import logging
import re
import zipfile
from collections.abc import Callable
from dataclasses import dataclass

from .errors import ExportError
from .exporters import export_tokens
from .ir import ExportOptions, ExportResult, TokenCollection, utc_timestamp

logger = logging.getLogger(__name__)

_UNSAFE_NAME_RE = re.compile(r"[^a-zA-Z0-9\-_]")

FORMAT_DISPLAY_NAMES: dict[str, str] = {
    "style-dictionary": "Style Dictionary",
    "w3c-dtcg": "W3C Design Token Community Group (DTCG)",
    "css": "CSS Custom Properties",
    "tailwind": "Tailwind CSS",
    "typescript": "TypeScript",
}

FORMAT_USAGE: dict[str, str] = {
    "style-dictionary": (
        "Usage:\n"
        "```bash\n"
        "npm install style-dictionary\n"
        "npx style-dictionary build --config config.json\n"
        "```"
    ),
    "w3c-dtcg": "Usage:\nImport the tokens.json file into any tool that supports W3C DTCG format.",
    "css": (
        "Usage:\n"
        "```html\n"
        '<link rel="stylesheet" href="tokens.css">\n'
        "```\n"
        "Or import in your CSS/SCSS:\n"
        "```css\n"
        "@import './tokens.css';\n"
        "```"
    ),
    "tailwind": (
        "Usage:\n"
        "```javascript\n"
        "// tailwind.config.js\n"
        "const tokens = require('./tailwind.tokens.js');\n"
        "module.exports = {\n"
        "  theme: {\n"
        "    extend: tokens.theme.extend,\n"
        "  },\n"
        "};\n"
        "```"
    ),
    "typescript": (
        "Usage:\n"
        "```typescript\n"
        "import { theme, colors, spacing } from './theme';\n"
        "\n"
        "const myTheme = theme;\n"
        "```"
    ),
}


@dataclass(frozen=True)
class ExportArchive:
    """A built zip archive and the name it should be downloaded as."""

    file_name: str
    data: bytes
    result: ExportResult


def archive_file_name(collection_name: str) -> str:
    """``"My Tokens!"`` -> ``"my-tokens--tokens.zip"``."""
    return f"{_UNSAFE_NAME_RE.sub('-', collection_name).lower()}-tokens.zip"


def generate_readme(
    collection: TokenCollection,
    options: ExportOptions,
    result: ExportResult,
    generated_at: str,
) -> str:
    lines = [
        f"# {collection.name} - Design Tokens",
        "",
        f"Generated: {generated_at}",
        f"Total tokens: {result.token_count}",
        "",
        "## Included Formats",
        "",
    ]

    for format in result.formats:
        lines.append(f"### {FORMAT_DISPLAY_NAMES.get(format, format)}")
        lines.append("")
        for file in result.files_for(format):
            lines.append(f"- `{format}/{file.path}`")
        lines.append("")
        lines.append(FORMAT_USAGE.get(format, ""))
        lines.append("")

    lines.append("## Token Types Included")
    lines.append("")
    lines.extend(f"- {token_type.value}" for token_type in options.include_types)
    lines.append("")

    metadata = collection.metadata
    if metadata is not None:
        lines.append("## Source Information")
        lines.append("")
        lines.append(f"- Source: {metadata.source.value}")
        if metadata.file_name:
            lines.append(f"- Original file: {metadata.file_name}")
        lines.append(f"- Imported: {metadata.imported_at}")

    return "\n".join(lines)


def build_export_archive(
    collection: TokenCollection,
    options: ExportOptions,
    *,
    clock: Callable[[], str] = utc_timestamp,
) -> ExportArchive:
    """Export ``collection`` and package the files into a zip archive.

    Raises:
        ExportError: no tokens, no formats, or nothing was generated.
    """
    if not collection.tokens:
        raise ExportError("Invalid token collection")
    if not options.formats:
        raise ExportError("At least one export format is required")

    result = export_tokens(collection, options)
    if not result.files:
        raise ExportError("No files generated. Check if tokens match the selected types.")

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
        for file in result.files:
            zf.writestr(f"{file.format}/{file.path}", file.content)
        zf.writestr("README.md", generate_readme(collection, options, result, clock()))

    data = buffer.getvalue()
    file_name = archive_file_name(collection.name)
    logger.debug("Created %s (%.1f KB)", file_name, len(data) / 1024)
    return ExportArchive(file_name=file_name, data=data, result=result)
