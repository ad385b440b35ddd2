"""Tests for option loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

import hwlint.deps as deps
from hwlint.config import ValidatorOptions, load_options


def test_defaults_from_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HWLINT_OPTIONS_PATH", str(tmp_path / "missing.json"))
    monkeypatch.delenv("HWLINT_ALLOW_DUPLICATE_KEYS", raising=False)
    monkeypatch.delenv("HWLINT_MAX_DOCUMENT_BYTES", raising=False)
    opts = load_options()
    assert opts == ValidatorOptions()
    assert opts.allow_duplicate_keys is False
    assert opts.max_document_bytes == 1_000_000


def test_env_overrides(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HWLINT_OPTIONS_PATH", str(tmp_path / "missing.json"))
    monkeypatch.setenv("HWLINT_ALLOW_DUPLICATE_KEYS", "true")
    monkeypatch.setenv("HWLINT_MAX_DOCUMENT_BYTES", "2048")
    opts = load_options()
    assert opts.allow_duplicate_keys is True
    assert opts.max_document_bytes == 2048


def test_invalid_env_size(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HWLINT_OPTIONS_PATH", str(tmp_path / "missing.json"))
    monkeypatch.setenv("HWLINT_MAX_DOCUMENT_BYTES", "lots")
    with pytest.raises(ValidationError):
        load_options()


def test_options_file_wins(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "options.json"
    path.write_text(json.dumps({"allow_duplicate_keys": True, "max_document_bytes": 10}))
    monkeypatch.setenv("HWLINT_OPTIONS_PATH", str(path))
    monkeypatch.setenv("HWLINT_ALLOW_DUPLICATE_KEYS", "false")
    opts = load_options()
    assert opts.allow_duplicate_keys is True
    assert opts.max_document_bytes == 10


def test_invalid_options_file(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "options.json"
    path.write_text(json.dumps({"max_document_bytes": 0}))
    monkeypatch.setenv("HWLINT_OPTIONS_PATH", str(path))
    with pytest.raises(ValidationError):
        load_options()


def test_get_options_before_startup(monkeypatch) -> None:
    monkeypatch.setattr(deps, "_options", None)
    assert deps.get_options() == ValidatorOptions()
