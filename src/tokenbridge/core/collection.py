"""
Token collection operations: replace/merge installation, filtering,
grouping and statistics.

Every function returns a new collection; inputs are never mutated.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .ir import (
    DesignToken,
    ImportMode,
    TokenCollection,
    TokenType,
)

UNCATEGORIZED = "uncategorized"


def merge_collections(
    existing: TokenCollection,
    incoming: TokenCollection,
    *,
    collection_name: str | None = None,
    version: str | None = None,
) -> TokenCollection:
    """Union two collections; on a name collision the incoming token wins.

    The existing collection's name and version are kept unless overridden.
    Colliding tokens are replaced in place, new tokens are appended, and the
    metadata describes the incoming import. Duplicate names that the incoming
    side does not override are kept so the validator still reports them.
    """
    incoming_by_name: dict[str, list[DesignToken]] = {}
    for token in incoming.tokens:
        incoming_by_name.setdefault(token.name, []).append(token)

    merged: list[DesignToken] = []
    placed: set[str] = set()
    for token in existing.tokens:
        replacements = incoming_by_name.get(token.name)
        if replacements is None:
            merged.append(token)
        elif token.name not in placed:
            placed.add(token.name)
            merged.extend(replacements)
    merged.extend(t for t in incoming.tokens if t.name not in placed)

    return TokenCollection(
        name=collection_name or existing.name,
        version=version or existing.version,
        tokens=merged,
        metadata=incoming.metadata,
    )


def apply_import(
    existing: TokenCollection | None,
    incoming: TokenCollection,
    mode: ImportMode,
    *,
    collection_name: str | None = None,
) -> TokenCollection:
    """Install an imported collection according to ``mode``."""
    if mode == ImportMode.MERGE and existing is not None:
        return merge_collections(existing, incoming, collection_name=collection_name)
    return incoming


def filter_tokens_by_type(
    collection: TokenCollection | Iterable[DesignToken],
    types: Iterable[TokenType | str],
) -> list[DesignToken]:
    """Tokens whose type is in ``types``, in collection order."""
    tokens = collection.tokens if isinstance(collection, TokenCollection) else collection
    wanted = {str(t) for t in types}
    return [t for t in tokens if t.type.value in wanted]


def group_tokens_by_category(tokens: Iterable[DesignToken]) -> dict[str, list[DesignToken]]:
    """Group by category (``uncategorized`` when missing), preserving order."""
    groups: dict[str, list[DesignToken]] = {}
    for token in tokens:
        groups.setdefault(token.category or UNCATEGORIZED, []).append(token)
    return groups


def group_tokens_by_type(tokens: Iterable[DesignToken]) -> dict[TokenType, list[DesignToken]]:
    groups: dict[TokenType, list[DesignToken]] = {}
    for token in tokens:
        groups.setdefault(token.type, []).append(token)
    return groups


@dataclass
class TokenStats:
    """Counts for a collection."""

    total: int = 0
    by_type: dict[str, int] = field(default_factory=dict)
    by_category: dict[str, int] = field(default_factory=dict)


def get_token_stats(collection: TokenCollection) -> TokenStats:
    stats = TokenStats(total=len(collection.tokens))
    for token in collection.tokens:
        stats.by_type[token.type.value] = stats.by_type.get(token.type.value, 0) + 1
        category = token.category or UNCATEGORIZED
        stats.by_category[category] = stats.by_category.get(category, 0) + 1
    return stats

