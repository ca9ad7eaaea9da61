"""IR data models for template literals.

These models are what the Babel adapter builds from host tree nodes and
what the dedenter rewrites in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourceLocation:
    """A position in source text."""

    line: int  # 1-based
    column: int  # 0-based

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass
class LiteralSegment:
    """One run of literal text between placeholders (or a delimiter)."""

    raw_text: str
    start: SourceLocation
    tail: bool = False  # True for the segment before the closing delimiter

    @property
    def lines(self) -> list[str]:
        return self.raw_text.split("\n")


@dataclass
class TemplateLiteralNode:
    """A template literal: segments interleaved with implied placeholders."""

    start: SourceLocation
    segments: list[LiteralSegment] = field(default_factory=list)

    @property
    def raw_texts(self) -> list[str]:
        return [s.raw_text for s in self.segments]
