"""Top-level document checks: project, version, unknown keys."""

from __future__ import annotations

from collections.abc import Sequence

from hwlint.validator.common import error, format_choices, is_missing, warning
from hwlint.validator.models import Diagnostic
from hwlint.validator.positions import (
    document_start_range,
    key_range,
    locate_key,
    value_range,
)
from hwlint.validator.schema import VALID_TOP_LEVEL_KEYS, VERSION_PATTERN


def check_project(document: dict, lines: Sequence[str]) -> list[Diagnostic]:
    """The ``project`` field is required and must not be blank."""
    if not is_missing(document.get("project")):
        return []

    pos = locate_key(lines, "project")
    if pos is None:
        range_ = document_start_range(lines)
    elif pos.value_end > pos.value_start:
        range_ = value_range(pos)
    else:
        range_ = key_range(pos)
    return [error(range_, "Missing required field: project")]


def check_version(document: dict, lines: Sequence[str]) -> list[Diagnostic]:
    version = document.get("version")
    if version is None or VERSION_PATTERN.match(str(version)):
        return []

    pos = locate_key(lines, "version")
    range_ = value_range(pos) if pos is not None else document_start_range(lines)
    return [
        warning(
            range_,
            'Invalid version format. Expected semver with optional operator (e.g., ">=0.30.0")',
        )
    ]


def check_unknown_keys(document: dict, lines: Sequence[str]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    valid = format_choices(VALID_TOP_LEVEL_KEYS)

    for key in document:
        name = str(key)
        if name in VALID_TOP_LEVEL_KEYS:
            continue
        pos = locate_key(lines, name)
        range_ = key_range(pos) if pos is not None else document_start_range(lines)
        diagnostics.append(
            warning(range_, f"Unknown top-level key: '{name}'. Valid keys are: {valid}")
        )

    return diagnostics
