"""Helpers shared by the rule modules."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from hwlint.validator.models import Diagnostic, DiagnosticSeverity, LineSpan, TextRange
from hwlint.validator.positions import (
    document_start_range,
    line_range,
    locate_key,
    locate_key_in_span,
    span_range,
    value_range,
)

_URL_ADAPTER = TypeAdapter(AnyUrl)


def error(range_: TextRange, message: str) -> Diagnostic:
    return Diagnostic(range=range_, message=message, severity=DiagnosticSeverity.error)


def warning(range_: TextRange, message: str) -> Diagnostic:
    return Diagnostic(range=range_, message=message, severity=DiagnosticSeverity.warning)


def is_missing(value: Any) -> bool:
    """A field counts as missing when absent, null, or a blank string."""
    return value is None or (isinstance(value, str) and not value.strip())


def is_valid_url(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        _URL_ADAPTER.validate_python(value.strip())
    except ValidationError:
        return False
    return True


def has_partial_auth(item: dict) -> bool:
    """True when exactly one of username/password is set."""
    return is_missing(item.get("username")) != is_missing(item.get("password"))


def section_fallback(lines: Sequence[str], key: str) -> TextRange:
    """The section header's whole line, or the document start."""
    header = locate_key(lines, key)
    if header is None:
        return document_start_range(lines)
    return line_range(lines, header.line)


def section_value_range(lines: Sequence[str], key: str) -> TextRange:
    header = locate_key(lines, key)
    if header is None:
        return document_start_range(lines)
    return value_range(header)


def span_at(spans: Sequence[LineSpan], index: int) -> LineSpan | None:
    return spans[index] if index < len(spans) else None


def item_range(lines: Sequence[str], span: LineSpan | None, section: str) -> TextRange:
    if span is None:
        return section_fallback(lines, section)
    return span_range(lines, span)


def field_value_range(
    lines: Sequence[str],
    span: LineSpan | None,
    key: str,
    fallback: TextRange,
    parent_key: str | None = None,
) -> TextRange:
    """Value span of *key* inside an item, or *fallback* when not found."""
    if span is None:
        return fallback
    pos = locate_key_in_span(lines, key, span, parent_key)
    if pos is None:
        return fallback
    return value_range(pos)


def sequence_section(
    document: dict, lines: Sequence[str], key: str,
) -> tuple[list | None, list[Diagnostic]]:
    """Return the section's items, or a container error when it is not a list.

    A null or absent section yields ``(None, [])``.
    """
    value = document.get(key)
    if value is None:
        return None, []
    if not isinstance(value, list):
        return None, [error(section_value_range(lines, key), f"{key} must be an array")]
    return value, []


def missing_fields(
    item: dict, fields: Sequence[str], label: str, anchor: TextRange,
) -> list[Diagnostic]:
    return [
        error(anchor, f"{label} missing required field: {field}")
        for field in fields
        if is_missing(item.get(field))
    ]


def format_choices(choices: Sequence[str]) -> str:
    return ", ".join(choices)
