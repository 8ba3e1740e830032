"""Source positions for error attribution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Marker:
    """A range in a GIB document.

    Lines and columns are 1-based. ``end_column`` points just past the
    last character of the range.
    """

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    @classmethod
    def from_token(cls, token: Any) -> "Marker":
        """Marker covering a lark token."""
        end_line = getattr(token, "end_line", None) or token.line
        end_column = getattr(token, "end_column", None) or token.column + len(token)
        return cls(token.line, token.column, end_line, end_column)

    @classmethod
    def at(cls, line: int, column: int) -> "Marker":
        """Marker covering a single character."""
        return cls(line, column, line, column + 1)
