"""Validation data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from hwlint.validator.schema import DIAGNOSTIC_SOURCE


class DiagnosticSeverity(str, Enum):
    """Severity level for diagnostics."""

    error = "error"
    warning = "warning"


class Position(BaseModel):
    """Zero-based line/character coordinate in the source text."""

    line: int
    character: int


class TextRange(BaseModel):
    start: Position
    end: Position

    @classmethod
    def of(cls, start_line: int, start_col: int, end_line: int, end_col: int) -> TextRange:
        return cls(
            start=Position(line=start_line, character=start_col),
            end=Position(line=end_line, character=end_col),
        )


class Diagnostic(BaseModel):
    """A single validation finding anchored to a source range."""

    range: TextRange
    message: str
    severity: DiagnosticSeverity
    source: str = DIAGNOSTIC_SOURCE


class ValidationResult(BaseModel):
    """Aggregated result of one validation pass."""

    valid: bool = True
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    document: dict[Any, Any] | None = None

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == DiagnosticSeverity.error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == DiagnosticSeverity.warning]


@dataclass(frozen=True)
class KeyPosition:
    """Where a key and its inline value sit on one source line."""

    line: int
    key_start: int
    key_end: int
    value_start: int
    value_end: int


@dataclass(frozen=True)
class LineSpan:
    """Inclusive line range of one sequence item."""

    start: int
    end: int
