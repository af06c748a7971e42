"""Where a matched call sits in the scanned source."""

from __future__ import annotations

import ast
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """Source span of a call, taken from the node's `ast` positions.

    Lines are 1-based, columns are 0-based UTF-8 byte offsets (as `ast`
    reports them). The end is optional: calls built by hand carry no
    positions at all, and callers may record only the start.

    Attributes:
        line: First line of the call (> 0)
        column: Offset of the callee's first character (>= 0)
        end_line: Line of the closing parenthesis
        end_column: Offset just past the closing parenthesis
    """

    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")
        if self.end_line is not None and self.end_line < self.line:
            raise ValueError(f"end_line ({self.end_line}) must be >= line ({self.line})")

    @classmethod
    def of(cls, node: ast.AST) -> Location:
        """Span of node; a node without positions maps to 1:0."""
        lineno = getattr(node, "lineno", None)
        if lineno is None:
            return cls(line=1, column=0)
        return cls(
            line=lineno,
            column=getattr(node, "col_offset", 0),
            end_line=getattr(node, "end_lineno", None),
            end_column=getattr(node, "end_col_offset", None),
        )

    def __str__(self) -> str:
        """Start as "line:column", or "line:column-end_line:end_column" with a known end."""
        start = f"{self.line}:{self.column}"
        if self.end_line is None or self.end_column is None:
            return start
        return f"{start}-{self.end_line}:{self.end_column}"
