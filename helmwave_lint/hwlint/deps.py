"""Shared FastAPI dependencies."""

from __future__ import annotations

from hwlint.config import ValidatorOptions

_options: ValidatorOptions | None = None


def get_options() -> ValidatorOptions:
    """FastAPI dependency: return the active ValidatorOptions (defaults before startup)."""
    if _options is None:
        return ValidatorOptions()
    return _options
