"""Conversion between 1-based line/column locations and UTF-8 byte offsets."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from yaml_error_context.models.errors import SourceOffset

# YAML line breaks plus the NEL/LS/PS breaks libyaml, PyYAML and ruamel.yaml
# count. "\r\n" must come first so it is consumed as a single terminator.
_LINE_BREAK_RE = re.compile(r"\r\n|[\r\n\x85\u2028\u2029]")

# A leading byte order mark is skipped by YAML readers and never counted as a column.
_BOM = "\ufeff"


class OffsetOutOfRangeError(ValueError):
    """Raised when a location or offset does not address a character of the text."""


def _utf8_len(value: str) -> int:
    return len(value.encode("utf-8"))


@dataclass(frozen=True, slots=True)
class Line:
    """One line of a document, without and with its terminator."""

    number: int
    byte_offset: int
    content: str
    terminator: str

    @property
    def byte_length(self) -> int:
        return _utf8_len(self.content) + _utf8_len(self.terminator)

    @property
    def has_bom(self) -> bool:
        return self.number == 1 and self.content.startswith(_BOM)

    @property
    def columns(self) -> str:
        """The characters that column numbers count, i.e. without a leading BOM."""
        return self.content[1:] if self.has_bom else self.content

    @property
    def columns_offset(self) -> int:
        """Byte offset of column 1."""
        return self.byte_offset + (_utf8_len(_BOM) if self.has_bom else 0)


def iter_lines(text: str) -> Iterator[Line]:
    """Yield the lines of ``text`` with their starting byte offsets.

    A trailing terminator does not open another line, so ``"a\\n"`` has one
    line and ``""`` has none.
    """
    start = 0
    byte_offset = 0
    number = 1
    while start < len(text):
        match = _LINE_BREAK_RE.search(text, start)
        if match is None:
            line = Line(number, byte_offset, text[start:], "")
            start = len(text)
        else:
            line = Line(number, byte_offset, text[start : match.start()], match.group())
            start = match.end()
        yield line
        byte_offset += line.byte_length
        number += 1


def source_offset_from_location(text: str, line: int, column: int) -> SourceOffset:
    """Return the byte offset of the character at 1-based ``line`` / ``column``.

    ``column`` counts characters, not bytes, and skips a leading byte order
    mark. Column 1 of an empty line is the position of that line's terminator.

    Raises ``OffsetOutOfRangeError`` instead of clamping when the location is
    not inside the text.
    """
    if line < 1 or column < 1:
        raise OffsetOutOfRangeError(
            f"Line and column are 1-based, got line {line} column {column}"
        )
    for current in iter_lines(text):
        if current.number < line:
            continue
        columns = current.columns
        if column <= len(columns):
            return SourceOffset(offset=current.columns_offset + _utf8_len(columns[: column - 1]))
        if column == 1 and not columns and current.terminator:
            return SourceOffset(offset=current.columns_offset)
        raise OffsetOutOfRangeError(
            f"Column {column} is past the end of line {line} ({len(columns)} characters)"
        )
    raise OffsetOutOfRangeError(f"Line {line} is past the end of the document")


def location_from_source_offset(text: str, offset: int | SourceOffset) -> tuple[int, int]:
    """Return the 1-based ``(line, column)`` of the character starting at ``offset``.

    Terminator characters are numbered as columns after the line's content.
    """
    if isinstance(offset, SourceOffset):
        offset = offset.offset
    if offset < 0:
        raise OffsetOutOfRangeError(f"Offset {offset} is negative")
    for current in iter_lines(text):
        if offset >= current.byte_offset + current.byte_length:
            continue
        if offset < current.columns_offset:
            raise OffsetOutOfRangeError(f"Offset {offset} is inside the byte order mark")
        position = current.columns_offset
        for column, char in enumerate(current.columns + current.terminator, start=1):
            if position == offset:
                return current.number, column
            if position > offset:
                break
            position += _utf8_len(char)
        raise OffsetOutOfRangeError(f"Offset {offset} is not on a character boundary")
    raise OffsetOutOfRangeError(f"Offset {offset} is past the end of the document")
