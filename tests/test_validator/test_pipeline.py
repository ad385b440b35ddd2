"""Tests for the validation pipeline and syntax handling."""

from __future__ import annotations

from hwlint.validator import (
    CHECKS,
    DiagnosticSeverity,
    TextRange,
    split_lines,
    validate,
    validate_document,
)


class TestValidate:
    def test_valid_document(self, valid_document: str) -> None:
        result = validate(valid_document)
        assert result.valid is True
        assert result.diagnostics == []
        assert result.document is not None
        assert result.document["project"] == "my-project"

    def test_diagnostics_follow_check_order(self) -> None:
        text = (
            "foo: 1\n"
            "lifecycle: nope\n"
            "repositories: nope\n"
            "version: bad\n"
        )
        result = validate(text)
        assert [d.message.split(".")[0] for d in result.diagnostics] == [
            "Missing required field: project",
            "Invalid version format",
            "repositories must be an array",
            "lifecycle must be an object",
            "Unknown top-level key: 'foo'",
        ]

    def test_idempotent(self, valid_document: str) -> None:
        text = valid_document + "extra: true\nversion_typo: 1\n"
        first = validate(text)
        second = validate(text)
        assert first.model_dump_json(exclude={"document"}) == second.model_dump_json(
            exclude={"document"}
        )
        assert len(first.diagnostics) == 2

    def test_source_tag(self) -> None:
        result = validate("foo: 1\n")
        assert {d.source for d in result.diagnostics} == {"helmwave"}

    def test_validate_document_without_parsing(self) -> None:
        document = {"project": "p", "repositories": "nope"}
        lines = ["project: p", "repositories: nope"]
        diagnostics = validate_document(document, lines)
        assert [d.message for d in diagnostics] == ["repositories must be an array"]

    def test_check_sequence(self) -> None:
        assert [c.__name__ for c in CHECKS] == [
            "check_project",
            "check_version",
            "check_repositories",
            "check_releases",
            "check_registries",
            "check_monitors",
            "check_lifecycle",
            "check_unknown_keys",
        ]


class TestSyntaxErrors:
    def test_unterminated_quoted_scalar(self) -> None:
        text = 'project: "unterminated\nversion: 1.0\nfoo: 1\n'
        result = validate(text)
        assert result.valid is False
        assert result.document is None
        assert len(result.diagnostics) == 1
        diag = result.diagnostics[0]
        assert diag.severity == DiagnosticSeverity.error
        assert diag.message.startswith("YAML syntax error: ")
        assert 0 <= diag.range.start.line < len(split_lines(text))
        assert diag.range.end.character >= diag.range.start.character

    def test_tab_indentation_uses_parser_mark(self) -> None:
        result = validate("project: p\n\tversion: 1.0\n")
        assert len(result.diagnostics) == 1
        diag = result.diagnostics[0]
        assert diag.message.startswith("YAML syntax error: ")
        assert diag.range == TextRange.of(1, 0, 1, 10)

    def test_duplicate_keys_rejected_by_default(self) -> None:
        result = validate("project: a\nproject: b\n")
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].message.startswith("YAML syntax error: ")

    def test_duplicate_keys_allowed(self) -> None:
        result = validate("project: a\nproject: b\n", allow_duplicate_keys=True)
        assert result.diagnostics == []

    def test_impossible_date_is_a_syntax_error(self) -> None:
        result = validate("project: p\nversion: 2020-13-45\n")
        assert result.valid is False
        assert result.document is None
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].message.startswith("YAML syntax error: ")

    def test_impossible_date_in_release(self) -> None:
        text = "project: p\nreleases:\n  - name: a\n    chart: c\n    namespace: 2021-02-30\n"
        result = validate(text)
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].severity == DiagnosticSeverity.error

    def test_deep_flow_nesting_is_a_syntax_error(self) -> None:
        result = validate("foo: " + "[" * 2000 + "]" * 2000 + "\n")
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].message.startswith("YAML syntax error: ")

    def test_empty_text(self) -> None:
        result = validate("")
        assert [d.message for d in result.diagnostics] == ["Invalid YAML document"]
        assert result.diagnostics[0].range == TextRange.of(0, 0, 0, 0)

    def test_non_mapping_root(self) -> None:
        result = validate("- a\n- b\n")
        assert [d.message for d in result.diagnostics] == ["Invalid YAML document"]
        assert result.diagnostics[0].range == TextRange.of(0, 0, 0, 3)

    def test_scalar_root(self) -> None:
        assert [d.message for d in validate("just text").diagnostics] == ["Invalid YAML document"]


def test_split_lines_strips_carriage_returns() -> None:
    assert split_lines("a: 1\r\nb: 2\r\n") == ["a: 1", "b: 2", ""]
