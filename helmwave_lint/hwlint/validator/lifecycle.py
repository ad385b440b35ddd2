"""Lifecycle hook checks."""

from __future__ import annotations

from collections.abc import Sequence

from hwlint.validator.common import (
    error,
    format_choices,
    is_missing,
    section_fallback,
    section_value_range,
    span_at,
    warning,
)
from hwlint.validator.models import Diagnostic, KeyPosition, TextRange
from hwlint.validator.positions import (
    block_item_spans,
    key_range,
    line_range,
    locate_child_key,
    locate_key,
    span_range,
    value_range,
)
from hwlint.validator.schema import VALID_LIFECYCLE_HOOKS


def _check_commands(
    hook: str,
    commands: list,
    lines: Sequence[str],
    header: KeyPosition | None,
    fallback: TextRange,
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    spans = block_item_spans(lines, header) if header is not None else []

    for j, entry in enumerate(commands):
        if isinstance(entry, str):
            continue

        span = span_at(spans, j)
        if span is not None:
            anchor = span_range(lines, span)
        elif header is not None:
            anchor = line_range(lines, header.line)
        else:
            anchor = fallback

        if not isinstance(entry, dict):
            diagnostics.append(
                error(anchor, f"Lifecycle command in '{hook}' must be a string or an object")
            )
        elif is_missing(entry.get("cmd")):
            diagnostics.append(
                error(anchor, f"Lifecycle command in '{hook}' missing required field: cmd")
            )
        elif entry.get("args") is not None and not isinstance(entry["args"], list):
            diagnostics.append(
                warning(anchor, f"Lifecycle command 'args' in '{hook}' must be an array")
            )

    return diagnostics


def check_lifecycle(document: dict, lines: Sequence[str]) -> list[Diagnostic]:
    """Validate the ``lifecycle`` mapping.

    Only the eight known hook names are accepted; each hook holds a list of
    commands given either as a plain string or as ``{cmd, args?, show?}``.
    """
    lifecycle = document.get("lifecycle")
    if lifecycle is None:
        return []
    if not isinstance(lifecycle, dict):
        return [error(section_value_range(lines, "lifecycle"), "lifecycle must be an object")]

    diagnostics: list[Diagnostic] = []
    header = locate_key(lines, "lifecycle")
    fallback = section_fallback(lines, "lifecycle")
    valid = format_choices(VALID_LIFECYCLE_HOOKS)

    for key, commands in lifecycle.items():
        hook = str(key)
        pos = locate_child_key(lines, hook, header) if header is not None else None

        if hook not in VALID_LIFECYCLE_HOOKS:
            diagnostics.append(
                warning(
                    key_range(pos) if pos is not None else fallback,
                    f"Unknown lifecycle hook: '{hook}'. Valid hooks are: {valid}",
                )
            )
            continue

        if commands is None:
            continue
        if not isinstance(commands, list):
            diagnostics.append(
                error(
                    value_range(pos) if pos is not None else fallback,
                    f"Lifecycle hook '{hook}' must be an array",
                )
            )
            continue

        diagnostics.extend(_check_commands(hook, commands, lines, pos, fallback))

    return diagnostics
