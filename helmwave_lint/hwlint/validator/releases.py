"""Release checks."""

from __future__ import annotations

from collections.abc import Sequence

from hwlint.validator.common import (
    error,
    field_value_range,
    format_choices,
    is_missing,
    item_range,
    missing_fields,
    sequence_section,
    span_at,
    warning,
)
from hwlint.validator.models import Diagnostic, LineSpan, TextRange
from hwlint.validator.positions import item_spans, key_range, locate_key_in_span
from hwlint.validator.schema import (
    RELEASE_ARRAY_FIELDS,
    RELEASE_REQUIRED_FIELDS,
    VALID_DELETION_PROPAGATIONS,
    VALID_PENDING_RELEASE_STRATEGIES,
)

# field name -> allowed values
RELEASE_ENUM_FIELDS: dict[str, tuple[str, ...]] = {
    "pending_release_strategy": VALID_PENDING_RELEASE_STRATEGIES,
    "deletion_propagation": VALID_DELETION_PROPAGATIONS,
}


def _check_chart(
    release: dict, lines: Sequence[str], span: LineSpan | None, anchor: TextRange,
) -> list[Diagnostic]:
    chart = release.get("chart")
    if is_missing(chart) or isinstance(chart, str):
        return []

    if not isinstance(chart, dict):
        return [
            error(
                field_value_range(lines, span, "chart", anchor),
                "Release chart must be a string or an object",
            )
        ]

    if is_missing(chart.get("name")):
        pos = locate_key_in_span(lines, "chart", span) if span is not None else None
        return [
            error(
                key_range(pos) if pos is not None else anchor,
                "Release chart missing required field: name",
            )
        ]
    return []


def check_releases(document: dict, lines: Sequence[str]) -> list[Diagnostic]:
    """Validate every entry of ``releases``.

    Missing required fields are errors over the item span; enumeration
    violations are warnings on the offending field's value.
    """
    releases, diagnostics = sequence_section(document, lines, "releases")
    if releases is None:
        return diagnostics

    spans = item_spans(lines, "releases")
    for i, release in enumerate(releases):
        span = span_at(spans, i)
        anchor = item_range(lines, span, "releases")

        if not isinstance(release, dict):
            diagnostics.append(error(anchor, f"Release {i} must be an object"))
            continue

        diagnostics.extend(missing_fields(release, RELEASE_REQUIRED_FIELDS, "Release", anchor))
        diagnostics.extend(_check_chart(release, lines, span, anchor))

        for field in RELEASE_ARRAY_FIELDS:
            value = release.get(field)
            if value is not None and not isinstance(value, list):
                diagnostics.append(
                    error(
                        field_value_range(lines, span, field, anchor),
                        f"Release {field} must be an array",
                    )
                )

        for field, allowed in RELEASE_ENUM_FIELDS.items():
            value = release.get(field)
            if value is None or value in allowed:
                continue
            diagnostics.append(
                warning(
                    field_value_range(lines, span, field, anchor),
                    f"Invalid {field} '{value}'. Valid values are: {format_choices(allowed)}",
                )
            )

    return diagnostics
