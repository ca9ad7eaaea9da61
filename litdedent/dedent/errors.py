"""Errors raised by the dedent pass."""

from __future__ import annotations


class IndentationViolation(ValueError):
    """Continuation-line content starts left of the literal's boundary column.

    All positions are 1-based, matching editor numbering.
    """

    def __init__(self, *, line: int, column: int, min_column: int) -> None:
        self.line = line
        self.column = column
        self.min_column = min_column
        super().__init__(
            f"LINE: {line}, COLUMN: {column}. "
            f"Line must start at least at column {min_column}."
        )

    @property
    def message(self) -> str:
        return str(self)

    def to_dict(self) -> dict:
        return {
            "line": self.line,
            "column": self.column,
            "min_column": self.min_column,
            "message": self.message,
        }
