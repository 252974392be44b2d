"""
Project configuration loaded from ``tokenbridge.toml``.

Example::

    [export]
    formats = ["css", "typescript"]
    include_types = ["color", "spacing"]
    css_prefix = "ds"

    [mapping]
    path = "design/token_map.yaml"

    [store]
    path = ".tokenbridge/session.json"

A missing file yields the defaults.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .core.errors import ConfigError
from .core.ir import DEFAULT_EXPORT_CONFIG, ExportOptions

CONFIG_FILE = "tokenbridge.toml"
DEFAULT_STORE_PATH = Path(".tokenbridge") / "session.json"


@dataclass
class MappingConfig:
    """Replacement token map; ``None`` uses the bundled table."""

    path: Path | None = None


@dataclass
class StoreConfig:
    path: Path = DEFAULT_STORE_PATH


@dataclass
class ProjectConfig:
    root: Path = field(default_factory=Path.cwd)
    export: ExportOptions = DEFAULT_EXPORT_CONFIG
    mapping: MappingConfig = field(default_factory=MappingConfig)
    store: StoreConfig = field(default_factory=StoreConfig)

    def resolve(self, path: Path) -> Path:
        """Resolve a config-relative path against the project root."""
        return path if path.is_absolute() else self.root / path

    @property
    def store_path(self) -> Path:
        return self.resolve(self.store.path)

    @property
    def mapping_path(self) -> Path | None:
        return self.resolve(self.mapping.path) if self.mapping.path else None


def _section(data: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table", file_name=str(path))
    return section


def load_config(path: Path | None = None) -> ProjectConfig:
    """Load ``tokenbridge.toml`` (from the current directory by default).

    Raises:
        ConfigError: If the file is not valid TOML or a section is malformed.
    """
    path = path or Path(CONFIG_FILE)
    root = path.resolve().parent
    if not path.exists():
        return ProjectConfig(root=root)

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", file_name=str(path)) from e

    export_data = _section(data, "export", path)
    mapping_data = _section(data, "mapping", path)
    store_data = _section(data, "store", path)

    try:
        export = ExportOptions.model_validate(export_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid [export] section: {e}", file_name=str(path)) from e

    mapping_path = mapping_data.get("path")
    return ProjectConfig(
        root=root,
        export=export,
        mapping=MappingConfig(path=Path(mapping_path) if mapping_path else None),
        store=StoreConfig(path=Path(store_data.get("path", DEFAULT_STORE_PATH))),
    )


def override_export(options: ExportOptions, **overrides: Any) -> ExportOptions:
    """Apply command-line overrides; ``None`` values leave the file's setting."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    if not changes:
        return options
    return ExportOptions.model_validate({**options.model_dump(), **changes})
