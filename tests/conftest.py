"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

# Add helmwave_lint/ to Python path so `from hwlint.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "helmwave_lint"))

import pytest

VALID_DOCUMENT = """\
project: my-project
version: ">=0.36.0"

repositories:
  - name: bitnami
    url: https://charts.bitnami.com/bitnami

registries:
  - host: ghcr.io
    username: bot
    password: secret

releases:
  - name: nginx
    chart: bitnami/nginx
    namespace: web
    pending_release_strategy: rollback
    tags:
      - frontend

monitors:
  - name: health
    type: http
    http:
      url: https://example.com/health
      method: GET
      expected_codes:
        - 200
        - 204

lifecycle:
  pre_up:
    - echo starting
    - cmd: kubectl
      args: ["get", "pods"]
"""


@pytest.fixture
def valid_document() -> str:
    return VALID_DOCUMENT
