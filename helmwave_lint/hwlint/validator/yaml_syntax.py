"""YAML parsing using ruamel.yaml."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from io import StringIO
from typing import Any

from ruamel.yaml import YAML, YAMLError

from hwlint.validator.models import Diagnostic, DiagnosticSeverity, TextRange
from hwlint.validator.positions import document_start_range

# Width of the highlight placed at the parser's error mark
_SYNTAX_HIGHLIGHT_WIDTH = 10


@dataclass
class ParseOutcome:
    """Either a mapping document or exactly one error diagnostic."""

    document: dict[Any, Any] | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.document is not None


def _invalid_document(lines: Sequence[str]) -> ParseOutcome:
    return ParseOutcome(
        diagnostics=[
            Diagnostic(
                range=document_start_range(lines),
                message="Invalid YAML document",
                severity=DiagnosticSeverity.error,
            )
        ],
    )


def _error_mark(error: Exception) -> tuple[int, int]:
    mark = getattr(error, "problem_mark", None) or getattr(error, "context_mark", None)
    if mark is None:
        return 0, 0
    return mark.line, mark.column


def _syntax_error(error: Exception, lines: Sequence[str]) -> ParseOutcome:
    line, column = _error_mark(error)
    if lines:
        line = min(max(line, 0), len(lines) - 1)
        line_text = lines[line]
    else:
        line, line_text = 0, ""
    column = max(column, 0)
    end_column = max(min(column + _SYNTAX_HIGHLIGHT_WIDTH, len(line_text)), column)
    return ParseOutcome(
        diagnostics=[
            Diagnostic(
                range=TextRange.of(line, column, line, end_column),
                message=f"YAML syntax error: {error}",
                severity=DiagnosticSeverity.error,
            )
        ],
    )


def parse_yaml(
    text: str, lines: Sequence[str], allow_duplicate_keys: bool = False,
) -> ParseOutcome:
    """Parse *text* into a mapping document.

    A parser failure yields a single error diagnostic at the parser's mark.
    Empty input or a root that is not a mapping yields "Invalid YAML document".
    """
    if not text or not text.strip():
        return _invalid_document(lines)

    yaml = YAML()
    yaml.preserve_quotes = True
    yaml.allow_duplicate_keys = allow_duplicate_keys

    try:
        parsed = yaml.load(StringIO(text))
    except YAMLError as e:
        return _syntax_error(e, lines)
    except (ValueError, RecursionError) as e:
        # Invalid timestamps and runaway nesting carry no mark
        return _syntax_error(e, lines)

    if not isinstance(parsed, dict):
        return _invalid_document(lines)

    return ParseOutcome(document=parsed)
