"""Source positions and mapping of byte offsets to line and column."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import NamedTuple


class _Mark(NamedTuple):
    offset: int
    line: int
    column: int
    char_index: int


class SourceWithLineStarts:
    """Holds source text and computes ``(line, column)`` from UTF-8 byte offsets."""

    def __init__(self, src: str) -> None:
        self.src = src
        starts: list[int] = []
        offset = 0
        for ch in src:
            starts.append(offset)
            offset += len(ch.encode("utf-8"))
        self._char_starts = starts

        line = 1
        column = 0
        marks = [_Mark(0, line, column, 0)]
        for index, ch in enumerate(src):
            start = starts[index]
            if ch == "\r" and src[index + 1 : index + 2] == "\n":
                column += 1
            elif ch in "\r\n":
                line += 1
                column = 0
                marks.append(_Mark(start + 1, line, column, index + 1))
            else:
                if column > 0 and column % 16 == 0:
                    marks.append(_Mark(start, line, column, index))
                column += 1
        self._marks = marks
        self._mark_offsets = [m.offset for m in marks]

    def get_position(self, byte_offset: int) -> tuple[int, int]:
        """Return ``(line, column)`` of the character at ``byte_offset``."""
        target = byte_offset + 1  # include current char
        mark = self._marks[bisect_right(self._mark_offsets, target) - 1]
        counted = bisect_left(self._char_starts, target, lo=mark.char_index)
        return mark.line, mark.column + (counted - mark.char_index)

    def __repr__(self) -> str:
        return f"SourceWithLineStarts(src={self.src!r})"


@dataclass(frozen=True)
class SourcePos:
    """Byte offsets of the start and the end (exclusive) of a node."""

    start: int = 0
    end: int = 0

    def get_byte_offsets(self) -> tuple[int, int]:
        return self.start, self.end

    def get_positions(
        self, source_map: SourceWithLineStarts
    ) -> tuple[tuple[int, int], tuple[int, int]]:
        """Return ``((line_start, column_start), (line_end, column_end))``."""
        start = source_map.get_position(self.start)
        end_offset = self.end - 1 if self.end > 0 else self.end
        end = source_map.get_position(end_offset)
        return start, end

    def __repr__(self) -> str:
        return f"({self.start}, {self.end})"