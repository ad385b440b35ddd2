"""Monitor checks, including the nested http/prometheus blocks."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

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
from hwlint.validator.positions import (
    block_item_anchor,
    item_spans,
    locate_key_in_span,
    value_range,
)
from hwlint.validator.schema import (
    HTTP_MONITOR_REQUIRED_FIELDS,
    HTTP_STATUS_MAX,
    HTTP_STATUS_MIN,
    MONITOR_REQUIRED_FIELDS,
    PROMETHEUS_MONITOR_REQUIRED_FIELDS,
    VALID_HTTP_METHODS,
    VALID_MONITOR_TYPES,
)


def _is_status_code(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return HTTP_STATUS_MIN <= value <= HTTP_STATUS_MAX


def _check_expected_codes(
    codes: list, lines: Sequence[str], span: LineSpan | None, fallback: TextRange,
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    header = locate_key_in_span(lines, "expected_codes", span, "http") if span is not None else None

    for j, code in enumerate(codes):
        if _is_status_code(code):
            continue
        # Block lists anchor on the element's own line; flow lists on the whole value
        element = block_item_anchor(lines, header, j) if header is not None else None
        if element is not None:
            range_ = value_range(element)
        elif header is not None:
            range_ = value_range(header)
        else:
            range_ = fallback
        diagnostics.append(
            warning(
                range_,
                f"Invalid HTTP status code '{code}' in expected_codes. "
                f"Expected an integer between {HTTP_STATUS_MIN} and {HTTP_STATUS_MAX}",
            )
        )
    return diagnostics


def _check_http(
    monitor: dict, lines: Sequence[str], span: LineSpan | None, anchor: TextRange,
) -> list[Diagnostic]:
    http = monitor.get("http")
    if http is None:
        http = {}
    if not isinstance(http, dict):
        return [error(field_value_range(lines, span, "http", anchor), "Monitor http must be an object")]

    diagnostics = missing_fields(http, HTTP_MONITOR_REQUIRED_FIELDS, "HTTP monitor", anchor)

    method = http.get("method")
    if method is not None and method not in VALID_HTTP_METHODS:
        diagnostics.append(
            warning(
                field_value_range(lines, span, "method", anchor, parent_key="http"),
                f"Invalid HTTP method '{method}'. Valid methods are: {format_choices(VALID_HTTP_METHODS)}",
            )
        )

    codes = http.get("expected_codes")
    if codes is not None:
        codes_range = field_value_range(lines, span, "expected_codes", anchor, parent_key="http")
        if not isinstance(codes, list):
            diagnostics.append(error(codes_range, "expected_codes must be an array"))
        else:
            diagnostics.extend(_check_expected_codes(codes, lines, span, codes_range))

    return diagnostics


def _check_prometheus(
    monitor: dict, lines: Sequence[str], span: LineSpan | None, anchor: TextRange,
) -> list[Diagnostic]:
    prometheus = monitor.get("prometheus")
    if prometheus is None:
        prometheus = {}
    if not isinstance(prometheus, dict):
        return [
            error(
                field_value_range(lines, span, "prometheus", anchor),
                "Monitor prometheus must be an object",
            )
        ]
    return missing_fields(prometheus, PROMETHEUS_MONITOR_REQUIRED_FIELDS, "Prometheus monitor", anchor)


def check_monitors(document: dict, lines: Sequence[str]) -> list[Diagnostic]:
    """Validate every entry of ``monitors``.

    ``name`` and ``type`` are required. The http and prometheus blocks are
    only checked when ``type`` selects them.
    """
    monitors, diagnostics = sequence_section(document, lines, "monitors")
    if monitors is None:
        return diagnostics

    spans = item_spans(lines, "monitors")
    for i, monitor in enumerate(monitors):
        span = span_at(spans, i)
        anchor = item_range(lines, span, "monitors")

        if not isinstance(monitor, dict):
            diagnostics.append(error(anchor, f"Monitor {i} must be an object"))
            continue

        diagnostics.extend(missing_fields(monitor, MONITOR_REQUIRED_FIELDS, "Monitor", anchor))

        monitor_type = monitor.get("type")
        if is_missing(monitor_type):
            continue
        if monitor_type not in VALID_MONITOR_TYPES:
            diagnostics.append(
                warning(
                    field_value_range(lines, span, "type", anchor),
                    f"Invalid monitor type '{monitor_type}'. "
                    f"Valid types are: {format_choices(VALID_MONITOR_TYPES)}",
                )
            )
        elif monitor_type == "http":
            diagnostics.extend(_check_http(monitor, lines, span, anchor))
        else:
            diagnostics.extend(_check_prometheus(monitor, lines, span, anchor))

    return diagnostics
