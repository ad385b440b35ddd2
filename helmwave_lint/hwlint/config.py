"""Validator options loaded from an options file or the environment."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS_PATH = "/data/options.json"


class ValidatorOptions(BaseModel):
    """Runtime options for the validation service."""

    allow_duplicate_keys: bool = False
    max_document_bytes: int = Field(1_000_000, gt=0)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def load_options() -> ValidatorOptions:
    """Load options from $HWLINT_OPTIONS_PATH, falling back to env vars."""
    opts_path = Path(os.environ.get("HWLINT_OPTIONS_PATH", DEFAULT_OPTIONS_PATH))
    if opts_path.exists():
        logger.debug("Loading options from %s", opts_path)
        return ValidatorOptions.model_validate(json.loads(opts_path.read_text()))

    return ValidatorOptions.model_validate(
        {
            "allow_duplicate_keys": _env_flag("HWLINT_ALLOW_DUPLICATE_KEYS"),
            "max_document_bytes": os.environ.get("HWLINT_MAX_DOCUMENT_BYTES", "1000000"),
        }
    )
