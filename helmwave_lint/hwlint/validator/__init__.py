"""Validation pipeline for helmwave.yml documents."""

from hwlint.validator.models import (
    Diagnostic,
    DiagnosticSeverity,
    KeyPosition,
    LineSpan,
    Position,
    TextRange,
    ValidationResult,
)
from hwlint.validator.pipeline import CHECKS, split_lines, validate, validate_document
from hwlint.validator.positions import item_spans, locate_array_item, locate_key

__all__ = [
    "CHECKS",
    "Diagnostic",
    "DiagnosticSeverity",
    "KeyPosition",
    "LineSpan",
    "Position",
    "TextRange",
    "ValidationResult",
    "item_spans",
    "locate_array_item",
    "locate_key",
    "split_lines",
    "validate",
    "validate_document",
]
