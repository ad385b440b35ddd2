"""Validation pipeline -- parses, then runs every structural check in order."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from hwlint.validator.lifecycle import check_lifecycle
from hwlint.validator.models import Diagnostic, DiagnosticSeverity, ValidationResult
from hwlint.validator.monitors import check_monitors
from hwlint.validator.releases import check_releases
from hwlint.validator.repositories import check_registries, check_repositories
from hwlint.validator.top_level import check_project, check_unknown_keys, check_version
from hwlint.validator.yaml_syntax import parse_yaml

logger = logging.getLogger(__name__)

Check = Callable[[dict, Sequence[str]], list[Diagnostic]]

# Order determines diagnostic order, not correctness
CHECKS: tuple[Check, ...] = (
    check_project,
    check_version,
    check_repositories,
    check_releases,
    check_registries,
    check_monitors,
    check_lifecycle,
    check_unknown_keys,
)


def split_lines(text: str) -> list[str]:
    """Split on newlines, dropping the carriage return of CRLF endings."""
    return [line.rstrip("\r") for line in text.split("\n")]


def validate_document(document: dict, lines: Sequence[str]) -> list[Diagnostic]:
    """Run every structural check against an already parsed document."""
    diagnostics: list[Diagnostic] = []
    for check in CHECKS:
        diagnostics.extend(check(document, lines))
    return diagnostics


def validate(text: str, allow_duplicate_keys: bool = False) -> ValidationResult:
    """Run the full validation pipeline on a helmwave.yml document.

    Order: 1. YAML syntax -> 2. structural checks (see ``CHECKS``).
    If parsing fails, only the syntax diagnostic is returned.
    """
    lines = split_lines(text)

    outcome = parse_yaml(text, lines, allow_duplicate_keys=allow_duplicate_keys)
    if not outcome.ok:
        logger.debug("Parse failed: %s", outcome.diagnostics[0].message)
        return ValidationResult(valid=False, diagnostics=outcome.diagnostics)

    diagnostics = validate_document(outcome.document, lines)
    logger.debug(
        "Validated %d lines: %d diagnostics", len(lines), len(diagnostics),
    )
    return ValidationResult(
        valid=not any(d.severity == DiagnosticSeverity.error for d in diagnostics),
        diagnostics=diagnostics,
        document=outcome.document,
    )
