"""Source-position recovery for parsed YAML values.

The parsed tree carries no spans, so positions are recovered by scanning the
raw lines: a key is found by its ``key:`` prefix, a section by the block of
deeper-indented lines under its header, and sequence items by their ``- ``
markers at the sequence's own indentation. Every lookup is recomputed from
the lines it is given; nothing is cached between calls.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from hwlint.validator.models import KeyPosition, LineSpan, TextRange


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _is_blank(line: str) -> bool:
    """Blank and comment-only lines never open or close a block."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def _is_item(line: str) -> bool:
    stripped = line.lstrip()
    return stripped.startswith("- ") or stripped == "-"


def _strip_markers(line: str) -> tuple[int, str]:
    """Return the column and text that follow indentation and ``- `` markers."""
    col = _indent(line)
    content = line[col:]
    while content.startswith("- "):
        rest = content[1:]
        stripped = rest.lstrip()
        col += 1 + len(rest) - len(stripped)
        content = stripped
    return col, content


def _comment_start(line: str, start: int) -> int:
    search_from = start
    if start < len(line) and line[start] in "'\"":
        close = line.find(line[start], start + 1)
        if close != -1:
            search_from = close + 1
    idx = line.find("#", search_from)
    while idx != -1:
        if idx == start or line[idx - 1].isspace():
            return idx
        idx = line.find("#", idx + 1)
    return len(line)


def _value_bounds(line: str, after_colon: int) -> tuple[int, int]:
    start = after_colon
    while start < len(line) and line[start].isspace():
        start += 1
    end = _comment_start(line, start)
    while end > start and line[end - 1].isspace():
        end -= 1
    if end <= start:
        # No inline value: empty span right after the colon
        return after_colon, after_colon
    return start, end


def _match_key(line: str, key: str, line_no: int) -> KeyPosition | None:
    col, content = _strip_markers(line)
    prefix = f"{key}:"
    if not content.startswith(prefix):
        return None
    after = content[len(prefix):]
    if after and not after[0].isspace():
        return None
    key_end = col + len(key)
    value_start, value_end = _value_bounds(line, key_end + 1)
    return KeyPosition(
        line=line_no,
        key_start=col,
        key_end=key_end,
        value_start=value_start,
        value_end=value_end,
    )


def _top_indent(lines: Sequence[str]) -> int:
    return min((_indent(line) for line in lines if not _is_blank(line)), default=0)


def _block_end(lines: Sequence[str], header: KeyPosition) -> int:
    """Index one past the last non-blank line belonging to *header*'s block.

    A line deeper than the header key belongs to the block. So does a
    ``- `` line at exactly the header's column (compact sequence style).
    """
    depth = header.key_start
    end = header.line + 1
    for i in range(header.line + 1, len(lines)):
        line = lines[i]
        if _is_blank(line):
            continue
        indent = _indent(line)
        if indent > depth or (indent == depth and _is_item(line)):
            end = i + 1
            continue
        break
    return end


def _block_lines(lines: Sequence[str], header: KeyPosition) -> Iterator[int]:
    return iter(range(header.line + 1, _block_end(lines, header)))


def _item_starts(lines: Sequence[str], header: KeyPosition) -> list[int]:
    starts: list[int] = []
    item_indent: int | None = None
    for i in _block_lines(lines, header):
        line = lines[i]
        if _is_blank(line) or not _is_item(line):
            continue
        indent = _indent(line)
        if item_indent is None:
            item_indent = indent
        if indent == item_indent:
            starts.append(i)
    return starts


def locate_key(
    lines: Sequence[str], key: str, parent_key: str | None = None,
) -> KeyPosition | None:
    """Find the first occurrence of *key*, optionally inside *parent_key*'s block.

    Without a parent only lines at the document's minimal indentation are
    considered. With a parent, the scan is confined to the parent section and
    matches the first ``key:`` at any depth inside it. Later duplicates at the
    same scope are never reported.
    """
    if parent_key is not None:
        parent = locate_key(lines, parent_key)
        if parent is None:
            return None
        return locate_key_below(lines, key, parent)

    top = _top_indent(lines)
    for i, line in enumerate(lines):
        if _is_blank(line) or _indent(line) != top:
            continue
        pos = _match_key(line, key, i)
        if pos is not None and pos.key_start == top:
            return pos
    return None


def locate_key_below(
    lines: Sequence[str], key: str, header: KeyPosition,
) -> KeyPosition | None:
    """Find *key* within the block opened by an already located *header*."""
    for i in _block_lines(lines, header):
        pos = _match_key(lines[i], key, i)
        if pos is not None:
            return pos
    return None


def locate_child_key(
    lines: Sequence[str], key: str, header: KeyPosition,
) -> KeyPosition | None:
    """Find *key* as a direct child of the mapping opened by *header*.

    Children sit at the indentation of the block's first non-blank line;
    deeper keys of the same name are skipped.
    """
    child_indent: int | None = None
    for i in _block_lines(lines, header):
        line = lines[i]
        if _is_blank(line):
            continue
        indent = _indent(line)
        if child_indent is None:
            child_indent = indent
        if indent != child_indent:
            continue
        pos = _match_key(line, key, i)
        if pos is not None and pos.key_start == child_indent:
            return pos
    return None


def locate_key_in_span(
    lines: Sequence[str], key: str, span: LineSpan, parent_key: str | None = None,
) -> KeyPosition | None:
    """Find *key* inside one item span, optionally under a nested *parent_key*."""
    for i in range(span.start, min(span.end + 1, len(lines))):
        if parent_key is not None:
            parent = _match_key(lines[i], parent_key, i)
            if parent is not None:
                return locate_key_below(lines, key, parent)
            continue
        pos = _match_key(lines[i], key, i)
        if pos is not None:
            return pos
    return None


def locate_array_item(
    lines: Sequence[str], parent_key: str, index: int,
) -> KeyPosition | None:
    """Anchor of the *index*-th (0-based) item of the top-level sequence *parent_key*.

    The key columns cover the ``-`` marker; the value columns cover the rest
    of the item's first line.
    """
    parent = locate_key(lines, parent_key)
    if parent is None:
        return None
    return block_item_anchor(lines, parent, index)


def block_item_anchor(
    lines: Sequence[str], header: KeyPosition, index: int,
) -> KeyPosition | None:
    """Anchor of the *index*-th item of the block sequence opened by *header*."""
    starts = _item_starts(lines, header)
    if not 0 <= index < len(starts):
        return None
    line_no = starts[index]
    line = lines[line_no]
    dash = _indent(line)
    value_start, value_end = _value_bounds(line.rstrip(), dash + 1)
    return KeyPosition(
        line=line_no,
        key_start=dash,
        key_end=dash + 1,
        value_start=value_start,
        value_end=value_end,
    )


def block_item_spans(lines: Sequence[str], header: KeyPosition) -> list[LineSpan]:
    """Item spans of the block sequence opened by *header*.

    A span runs from the item's ``-`` line through its last non-blank line
    before the next item or the end of the block.
    """
    end = _block_end(lines, header)
    starts = _item_starts(lines, header)
    spans: list[LineSpan] = []
    for n, start in enumerate(starts):
        stop = starts[n + 1] if n + 1 < len(starts) else end
        last = start
        for i in range(start + 1, stop):
            if not _is_blank(lines[i]):
                last = i
        spans.append(LineSpan(start=start, end=last))
    return spans


def item_spans(lines: Sequence[str], parent_key: str) -> list[LineSpan]:
    """Item spans of the top-level sequence *parent_key* (empty when not found)."""
    parent = locate_key(lines, parent_key)
    if parent is None:
        return []
    return block_item_spans(lines, parent)


# -- Range helpers --


def document_start_range(lines: Sequence[str]) -> TextRange:
    first = lines[0] if lines else ""
    return TextRange.of(0, 0, 0, len(first))


def line_range(lines: Sequence[str], line_no: int) -> TextRange:
    if not 0 <= line_no < len(lines):
        return document_start_range(lines)
    return TextRange.of(line_no, 0, line_no, len(lines[line_no]))


def span_range(lines: Sequence[str], span: LineSpan) -> TextRange:
    end_text = lines[span.end] if span.end < len(lines) else ""
    return TextRange.of(span.start, 0, span.end, len(end_text))


def key_range(pos: KeyPosition) -> TextRange:
    return TextRange.of(pos.line, pos.key_start, pos.line, pos.key_end)


def value_range(pos: KeyPosition) -> TextRange:
    return TextRange.of(pos.line, pos.value_start, pos.line, pos.value_end)


def line_remainder_range(lines: Sequence[str], pos: KeyPosition) -> TextRange:
    """From the value start to the end of the key's line."""
    return TextRange.of(pos.line, pos.value_start, pos.line, len(lines[pos.line]))
