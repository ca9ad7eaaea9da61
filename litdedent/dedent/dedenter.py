"""Dedenter: remove the source-level left margin from template literal segments.

The margin is everything left of the boundary column, one column right of
where the literal itself opens. The first line of every segment continues
the opening delimiter or a placeholder and is kept as-is. Every later line
must either be whitespace-only or have its content start at or beyond the
boundary; the first line breaking that rule raises IndentationViolation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from litdedent.dedent.errors import IndentationViolation
from litdedent.ir.models import TemplateLiteralNode

# ECMAScript WhiteSpace and LineTerminator; Python's \s also matches \x1c-\x1f
# and misses \ufeff.
_NON_WHITESPACE = re.compile("[^\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]")


def boundary_column(literal: TemplateLiteralNode) -> int:
    """Return the 0-based column continuation-line content must start at."""
    if literal.start.column < 0:
        raise ValueError(f"Literal start column must be non-negative, got {literal.start.column}")
    return literal.start.column + 1


def first_non_whitespace(line: str) -> int | None:
    match = _NON_WHITESPACE.search(line)
    return match.start() if match else None


def dedent_lines(lines: list[str], boundary: int, first_line: int) -> list[str]:
    """Dedent one segment's lines and return them as a new list.

    Args:
        lines: The segment's raw text split on newlines.
        boundary: 0-based boundary column of the owning literal.
        first_line: Source line number of ``lines[0]``.

    Raises:
        IndentationViolation: on the first continuation line with content
            left of ``boundary``.
    """
    result = [lines[0]]
    for i, line in enumerate(lines[1:], start=1):
        column = first_non_whitespace(line)
        if column is not None and column < boundary:
            raise IndentationViolation(
                line=first_line + i,
                column=column + 1,
                min_column=boundary + 1,
            )
        # Whitespace-only lines shorter than the boundary slice to "".
        result.append(line[boundary:])
    return result


def dedent(literal: TemplateLiteralNode, *, atomic: bool = False) -> None:
    """Rewrite every segment of ``literal`` in place.

    Segments rewritten before a violation stay rewritten unless ``atomic``
    is set, in which case all segments are restored before the error
    propagates. The violating segment itself is never modified.
    """
    boundary = boundary_column(literal)
    originals = literal.raw_texts if atomic else None

    try:
        for segment in literal.segments:
            lines = dedent_lines(segment.lines, boundary, segment.start.line)
            segment.raw_text = "\n".join(lines)
    except IndentationViolation:
        if originals is not None:
            for segment, raw_text in zip(literal.segments, originals):
                segment.raw_text = raw_text
        raise


@dataclass
class DedentResult:
    """Outcome of try_dedent."""

    violation: IndentationViolation | None = None

    @property
    def ok(self) -> bool:
        return self.violation is None

    def summary(self) -> str:
        if self.ok:
            return "[OK] literal dedented"
        return f"[FAIL] {self.violation}"


def try_dedent(literal: TemplateLiteralNode, *, atomic: bool = False) -> DedentResult:
    """Like dedent, but report a violation as a result instead of raising."""
    try:
        dedent(literal, atomic=atomic)
    except IndentationViolation as e:
        return DedentResult(violation=e)
    return DedentResult()
