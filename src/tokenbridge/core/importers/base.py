"""
Shared importer plumbing: leaf narrowing, tree walking and the parse result.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr, ValidationError

from ..errors import TokenFormatError
from ..exporters.common import DEFAULT_KEY
from ..ir import DesignToken

# Leaf values must be a string or a real number; booleans, nulls and lists are rejected.
StrictTokenValue = StrictStr | StrictInt | StrictFloat

LeafT = TypeVar("LeafT", bound=BaseModel)


@dataclass
class RowWarning:
    """A skipped input row (CSV only)."""

    row: int
    message: str


@dataclass
class ParsedTokens:
    """Output of a single format parser."""

    tokens: list[DesignToken] = field(default_factory=list)
    detected_name: str | None = None
    detected_version: str | None = None
    warnings: list[RowWarning] = field(default_factory=list)


def join_path(path: str, key: str) -> str:
    """Append ``key`` to a token path; a ``DEFAULT`` key names the group itself."""
    if key == DEFAULT_KEY and path:
        return path
    return f"{path}/{key}" if path else key


def narrow_leaf(model: type[LeafT], obj: Mapping[str, Any], path: str) -> LeafT:
    """Validate a raw JSON leaf into its format's leaf model.

    Raises:
        TokenFormatError: If the leaf does not have the expected shape.
    """
    try:
        return model.model_validate(dict(obj))
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise TokenFormatError(
            f"Malformed token at '{path}': {location}: {first['msg']}"
        ) from e


def walk_leaves(
    data: Mapping[str, Any],
    is_leaf: Callable[[Mapping[str, Any]], bool],
    path: str = "",
) -> Iterator[tuple[str, Mapping[str, Any]]]:
    """Yield ``(name, leaf)`` for every leaf object, in document order.

    Keys starting with ``$`` are format metadata and are skipped. Scalar
    values outside a leaf object are ignored.
    """
    for key, value in data.items():
        if key.startswith("$"):
            continue
        if not isinstance(value, Mapping):
            continue
        name = join_path(path, key)
        if is_leaf(value):
            yield name, value
        else:
            yield from walk_leaves(value, is_leaf, name)


def require_object(data: Any, format_label: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TokenFormatError(f"{format_label} content must be a JSON object")
    return data
