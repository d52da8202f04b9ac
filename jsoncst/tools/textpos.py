"""Offset -> line/column conversion for error reporting.

Lex and parse errors carry an absolute string index. For humans we print
``file:line:col`` with both numbers 1-based and columns counted in
codepoints.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import List, Tuple, Union

from jsoncst.tools.cst import ParseError
from jsoncst.tools.tokenizer import LexError


class TextIndex:
    """Precomputed line starts for cheap offset lookups."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.starts: List[int] = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self.starts.append(i + 1)

    def position(self, index: int) -> Tuple[int, int]:
        """Return (line, column), both 1-based, clamping out-of-range input."""
        index = max(0, min(index, len(self.text)))
        line = bisect_right(self.starts, index) - 1
        return line + 1, index - self.starts[line] + 1


def describe_error(label: str, text: str, err: Union[LexError, ParseError]) -> str:
    line, col = TextIndex(text).position(err.index)
    return f"{label}:{line}:{col}: {err.message}"
