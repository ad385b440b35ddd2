"""Chart repository and OCI registry checks."""

from __future__ import annotations

from collections.abc import Sequence

from hwlint.validator.common import (
    error,
    has_partial_auth,
    is_missing,
    is_valid_url,
    item_range,
    missing_fields,
    sequence_section,
    span_at,
    warning,
)
from hwlint.validator.models import Diagnostic
from hwlint.validator.positions import item_spans, line_remainder_range, locate_key_in_span
from hwlint.validator.schema import REGISTRY_REQUIRED_FIELDS, REPOSITORY_REQUIRED_FIELDS


def check_repositories(document: dict, lines: Sequence[str]) -> list[Diagnostic]:
    """Validate every entry of ``repositories``.

    Presence errors cover the whole item span; a malformed URL is flagged on
    the remainder of its ``url:`` line.
    """
    repositories, diagnostics = sequence_section(document, lines, "repositories")
    if repositories is None:
        return diagnostics

    spans = item_spans(lines, "repositories")
    for i, repo in enumerate(repositories):
        span = span_at(spans, i)
        anchor = item_range(lines, span, "repositories")

        if not isinstance(repo, dict):
            diagnostics.append(error(anchor, f"Repository {i} must be an object"))
            continue

        diagnostics.extend(missing_fields(repo, REPOSITORY_REQUIRED_FIELDS, "Repository", anchor))

        url = repo.get("url")
        if not is_missing(url) and not is_valid_url(url):
            pos = locate_key_in_span(lines, "url", span) if span is not None else None
            url_range = line_remainder_range(lines, pos) if pos is not None else anchor
            diagnostics.append(warning(url_range, "Invalid repository URL format"))

        if has_partial_auth(repo):
            diagnostics.append(
                warning(anchor, "Repository authentication requires both username and password")
            )

    return diagnostics


def check_registries(document: dict, lines: Sequence[str]) -> list[Diagnostic]:
    registries, diagnostics = sequence_section(document, lines, "registries")
    if registries is None:
        return diagnostics

    spans = item_spans(lines, "registries")
    for i, registry in enumerate(registries):
        anchor = item_range(lines, span_at(spans, i), "registries")

        if not isinstance(registry, dict):
            diagnostics.append(error(anchor, f"Registry {i} must be an object"))
            continue

        diagnostics.extend(missing_fields(registry, REGISTRY_REQUIRED_FIELDS, "Registry", anchor))

        if has_partial_auth(registry):
            diagnostics.append(
                warning(anchor, "Registry authentication requires both username and password")
            )

    return diagnostics
