"""Core TokenBridge functionality: IR, detection, import, validation, export, mapping."""

from . import ir
from .archive import ExportArchive, archive_file_name, build_export_archive
from .collection import (
    TokenStats,
    apply_import,
    filter_tokens_by_type,
    get_token_stats,
    group_tokens_by_category,
    group_tokens_by_type,
    merge_collections,
)
from .color import check_contrast, contrast_ratio, normalize_hex, parse_color, relative_luminance
from .detect import UNKNOWN_FORMAT, detect_format
from .errors import (
    ConfigError,
    ExportError,
    MappingConfigError,
    TokenBridgeError,
    TokenFormatError,
)
from .exporters import EXPORTERS, export_tokens, generate_preview
from .importers import ImportReport, import_tokens, import_tokens_with_report
from .inference import infer_token_type
from .mapping import TokenMatch, load_token_map, use_token_map
from .validator import get_validation_summary, is_valid, validate_tokens

__all__ = [
    "ir",
    # Errors
    "TokenBridgeError",
    "TokenFormatError",
    "MappingConfigError",
    "ConfigError",
    "ExportError",
    # Import
    "UNKNOWN_FORMAT",
    "detect_format",
    "infer_token_type",
    "ImportReport",
    "import_tokens",
    "import_tokens_with_report",
    # Collections
    "TokenStats",
    "apply_import",
    "merge_collections",
    "filter_tokens_by_type",
    "group_tokens_by_category",
    "group_tokens_by_type",
    "get_token_stats",
    # Validation
    "validate_tokens",
    "is_valid",
    "get_validation_summary",
    "check_contrast",
    "contrast_ratio",
    "relative_luminance",
    "parse_color",
    "normalize_hex",
    # Export
    "EXPORTERS",
    "export_tokens",
    "generate_preview",
    "ExportArchive",
    "archive_file_name",
    "build_export_archive",
    # Mapping
    "TokenMatch",
    "load_token_map",
    "use_token_map",
]
