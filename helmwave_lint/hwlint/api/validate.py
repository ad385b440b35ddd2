"""Validation API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from hwlint.config import ValidatorOptions
from hwlint.deps import get_options
from hwlint.validator import Diagnostic, validate
from hwlint.validator.schema import (
    DIAGNOSTIC_SOURCE,
    VALID_DELETION_PROPAGATIONS,
    VALID_HTTP_METHODS,
    VALID_LIFECYCLE_HOOKS,
    VALID_MONITOR_TYPES,
    VALID_PENDING_RELEASE_STRATEGIES,
    VALID_TOP_LEVEL_KEYS,
    VERSION_PATTERN,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["validate"])


class ValidateRequest(BaseModel):
    """Request body for POST /api/validate."""

    content: str = Field(..., description="Raw helmwave.yml text")


class ValidateResponse(BaseModel):
    """Response body for POST /api/validate."""

    valid: bool
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    error_count: int = 0
    warning_count: int = 0


class SchemaResponse(BaseModel):
    source: str = DIAGNOSTIC_SOURCE
    top_level_keys: list[str]
    lifecycle_hooks: list[str]
    monitor_types: list[str]
    http_methods: list[str]
    pending_release_strategies: list[str]
    deletion_propagations: list[str]
    version_pattern: str


@router.post("/validate", response_model=ValidateResponse)
async def validate_content(
    body: ValidateRequest,
    options: ValidatorOptions = Depends(get_options),
) -> ValidateResponse:
    """Validate a helmwave.yml document and return its diagnostics in source order."""
    size = len(body.content.encode("utf-8"))
    if size > options.max_document_bytes:
        logger.warning(
            "Rejected document of %d bytes (limit %d)", size, options.max_document_bytes,
        )
        raise HTTPException(
            status_code=413,
            detail=f"Document exceeds {options.max_document_bytes} bytes",
        )

    result = validate(body.content, allow_duplicate_keys=options.allow_duplicate_keys)
    return ValidateResponse(
        valid=result.valid,
        diagnostics=result.diagnostics,
        error_count=len(result.errors),
        warning_count=len(result.warnings),
    )


@router.get("/schema", response_model=SchemaResponse)
async def get_schema() -> SchemaResponse:
    """Return the recognised keys and enumerations."""
    return SchemaResponse(
        top_level_keys=list(VALID_TOP_LEVEL_KEYS),
        lifecycle_hooks=list(VALID_LIFECYCLE_HOOKS),
        monitor_types=list(VALID_MONITOR_TYPES),
        http_methods=list(VALID_HTTP_METHODS),
        pending_release_strategies=list(VALID_PENDING_RELEASE_STRATEGIES),
        deletion_propagations=list(VALID_DELETION_PROPAGATIONS),
        version_pattern=VERSION_PATTERN.pattern,
    )


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}
