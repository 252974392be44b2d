"""
HTTP API for token import, validation and export.

``create_app`` builds a FastAPI application around a ``TokenStore``. Engine
errors (``TokenBridgeError``) are returned as HTTP 400 ``{"error": ...}``.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from ._version import get_version
from .core.archive import build_export_archive
from .core.errors import TokenBridgeError
from .core.exporters import export_tokens, generate_preview
from .core.ir import (
    DEFAULT_EXPORT_CONFIG,
    DesignToken,
    ExportOptions,
    ImportMode,
    ImportOptions,
    TokenCollection,
)
from .core.validator import get_validation_summary, validate_tokens
from .store import TokenStore

logger = logging.getLogger(__name__)


# =============================================================================
# Request bodies
# =============================================================================


class ImportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content: str
    mode: ImportMode = ImportMode.REPLACE
    file_name: str | None = Field(default=None, alias="fileName")
    collection_name: str | None = Field(default=None, alias="collectionName")


class ValidateRequest(BaseModel):
    """Collection to validate; omitted means the stored one."""

    tokens: TokenCollection | None = None


class ExportRequest(BaseModel):
    tokens: TokenCollection | None = None
    config: ExportOptions = DEFAULT_EXPORT_CONFIG


class PreviewRequest(BaseModel):
    tokens: list[DesignToken]
    format: str
    config: ExportOptions = DEFAULT_EXPORT_CONFIG


# =============================================================================
# Application
# =============================================================================


def create_app(store: TokenStore | None = None) -> FastAPI:
    """Create the API application.

    Args:
        store: Session store shared by all requests; a fresh one by default.
    """
    app = FastAPI(
        title="TokenBridge",
        description="Design token import, validation and export",
        version=get_version(),
    )
    app.state.store = store or TokenStore()

    @app.exception_handler(TokenBridgeError)
    async def _token_error(request: Request, exc: TokenBridgeError) -> JSONResponse:
        logger.debug("Request to %s failed: %s", request.url.path, exc)
        return JSONResponse({"error": str(exc)}, status_code=400)

    def _collection(requested: TokenCollection | None) -> TokenCollection:
        collection = requested or app.state.store.collection
        if collection is None:
            raise TokenBridgeError("Invalid token collection")
        return collection

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/tokens")
    async def current_tokens() -> dict[str, Any]:
        current: TokenStore = app.state.store
        return {
            "collection": current.collection.to_json() if current.collection else None,
            "validation": current.validation.to_json() if current.validation else None,
        }

    @app.post("/tokens/import")
    async def import_route(body: ImportRequest) -> dict[str, Any]:
        current: TokenStore = app.state.store
        report = current.import_content(
            body.content,
            ImportOptions(
                mode=body.mode,
                file_name=body.file_name,
                collection_name=body.collection_name,
            ),
        )
        validation = current.validation
        return {
            "collection": report.collection.to_json(),
            "source": report.source.value,
            "warnings": [{"row": w.row, "message": w.message} for w in report.warnings],
            "validation": validation.to_json() if validation else None,
        }

    @app.post("/tokens/validate")
    async def validate_route(body: ValidateRequest) -> dict[str, Any]:
        result = validate_tokens(_collection(body.tokens))
        return {**result.to_json(), "summary": get_validation_summary(result)}

    @app.post("/tokens/export")
    async def export_route(body: ExportRequest) -> dict[str, Any]:
        return export_tokens(_collection(body.tokens), body.config).to_json()

    @app.post("/tokens/preview")
    async def preview_route(body: PreviewRequest) -> dict[str, str]:
        return {"content": generate_preview(body.tokens, body.format, body.config)}

    @app.post("/tokens/export/archive")
    async def archive_route(body: ExportRequest) -> Response:
        archive = build_export_archive(_collection(body.tokens), body.config)
        logger.info(
            "Exported %d files as %s", len(archive.result.files), archive.file_name
        )
        return Response(
            content=archive.data,
            media_type="application/zip",
            headers={"Content-Disposition": f'attachment; filename="{archive.file_name}"'},
        )

    return app
