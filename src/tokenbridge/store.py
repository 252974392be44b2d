"""
Session store for the current token collection.

Holds one ``TokenCollection`` and its latest ``ValidationResult``. Imports
are applied as a single assignment after the incoming content has parsed,
so a failed import leaves the store untouched. The session can be
persisted to a JSON file between CLI invocations.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .core.errors import TokenBridgeError
from .core.importers import ImportReport, import_tokens_with_report
from .core.ir import ImportOptions, TokenCollection, ValidationResult
from .core.validator import validate_tokens

logger = logging.getLogger(__name__)


class StoreError(TokenBridgeError):
    """Raised when a persisted session cannot be read."""

    pass


class TokenStore:
    """Current collection plus its validation result."""

    def __init__(self, collection: TokenCollection | None = None):
        self._collection = collection
        self._validation: ValidationResult | None = None

    @property
    def collection(self) -> TokenCollection | None:
        return self._collection

    @property
    def validation(self) -> ValidationResult | None:
        return self._validation

    def import_content(self, content: str, options: ImportOptions | None = None) -> ImportReport:
        """Import ``content`` in replace or merge mode and revalidate.

        Raises:
            TokenFormatError: The content could not be parsed; the store is unchanged.
        """
        report = import_tokens_with_report(content, options, existing=self._collection)
        self._collection = report.collection
        self.validate()
        return report

    def validate(self) -> ValidationResult | None:
        if self._collection is None:
            self._validation = None
        else:
            self._validation = validate_tokens(self._collection)
        return self._validation

    def clear(self) -> None:
        self._collection = None
        self._validation = None

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self._collection.to_json() if self._collection is not None else None
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.debug("Saved session to %s", path)

    @classmethod
    def load(cls, path: Path) -> TokenStore:
        """Load a saved session; a missing file gives an empty store."""
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise StoreError(f"Corrupt session file: {e}", file_name=str(path)) from e
        if data is None:
            return cls()
        try:
            collection = TokenCollection.model_validate(data)
        except ValidationError as e:
            raise StoreError(f"Invalid session data: {e}", file_name=str(path)) from e
        store = cls(collection)
        store.validate()
        return store
