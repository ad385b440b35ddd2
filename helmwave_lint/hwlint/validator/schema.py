"""Static schema tables for helmwave.yml documents."""

from __future__ import annotations

import re

DIAGNOSTIC_SOURCE = "helmwave"

VALID_TOP_LEVEL_KEYS: tuple[str, ...] = (
    "project",
    "version",
    "repositories",
    "registries",
    "releases",
    "monitors",
    "lifecycle",
)

VALID_LIFECYCLE_HOOKS: tuple[str, ...] = (
    "pre_up",
    "post_up",
    "pre_down",
    "post_down",
    "pre_build",
    "post_build",
    "pre_rollback",
    "post_rollback",
)

VALID_MONITOR_TYPES: tuple[str, ...] = ("http", "prometheus")

VALID_HTTP_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE")

VALID_PENDING_RELEASE_STRATEGIES: tuple[str, ...] = ("rollback", "uninstall")

VALID_DELETION_PROPAGATIONS: tuple[str, ...] = ("background", "foreground", "orphan")

# Optional comparator followed by major.minor(.patch)
VERSION_PATTERN = re.compile(r"^(>=|>|<=|<|=)?\s*\d+\.\d+(\.\d+)?")

HTTP_STATUS_MIN = 100
HTTP_STATUS_MAX = 599

REPOSITORY_REQUIRED_FIELDS: tuple[str, ...] = ("name", "url")
REGISTRY_REQUIRED_FIELDS: tuple[str, ...] = ("host",)
RELEASE_REQUIRED_FIELDS: tuple[str, ...] = ("name", "chart", "namespace")
MONITOR_REQUIRED_FIELDS: tuple[str, ...] = ("name", "type")
HTTP_MONITOR_REQUIRED_FIELDS: tuple[str, ...] = ("url", "expected_codes")
PROMETHEUS_MONITOR_REQUIRED_FIELDS: tuple[str, ...] = ("url", "expr")

# Optional release fields that must be sequences when present
RELEASE_ARRAY_FIELDS: tuple[str, ...] = ("values", "depends_on", "tags", "monitors")
