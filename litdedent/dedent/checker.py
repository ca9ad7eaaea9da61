"""Checker for template literal indentation.

Reports the same violations the dedenter raises on, without rewriting
anything, so editors and CI can list every offending line at once:
- Content left of the boundary column (error)
- Tabs inside the stripped margin (warning: a tab counts as one column)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from litdedent.dedent.dedenter import boundary_column, first_non_whitespace
from litdedent.dedent.errors import IndentationViolation
from litdedent.ir.models import TemplateLiteralNode


class Severity(Enum):
    ERROR = "error"  # The dedenter would reject the literal
    WARNING = "warning"  # Dedents, but probably not as intended


@dataclass
class LintIssue:
    """A single issue found in a literal."""

    severity: Severity
    code: str  # Machine-readable issue code
    message: str
    line: int  # 1-based
    column: int  # 1-based
    min_column: int = 0  # 1-based; 0 when not applicable

    @classmethod
    def from_violation(cls, violation: IndentationViolation) -> LintIssue:
        return cls(
            severity=Severity.ERROR,
            code="INDENTATION_VIOLATION",
            message=violation.message,
            line=violation.line,
            column=violation.column,
            min_column=violation.min_column,
        )


@dataclass
class LintResult:
    """Result of checking one or more literals."""

    issues: list[LintIssue] = field(default_factory=list)
    literals_checked: int = 0

    @property
    def passed(self) -> bool:
        return not any(i.severity == Severity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    def extend(self, other: LintResult) -> None:
        self.issues.extend(other.issues)
        self.literals_checked += other.literals_checked

    def sort(self) -> None:
        self.issues.sort(key=lambda i: (i.line, i.column))

    def summary(self) -> str:
        e = len(self.errors)
        w = len(self.warnings)
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.literals_checked} literal(s), {e} error(s), {w} warning(s)"


def check_literal(literal: TemplateLiteralNode, *, fail_fast: bool = False) -> LintResult:
    """Check every continuation line of every segment in ``literal``.

    Args:
        literal: The literal to inspect. It is not modified.
        fail_fast: Stop at the first error, mirroring what dedent raises.
    """
    result = LintResult(literals_checked=1)
    boundary = boundary_column(literal)

    for segment in literal.segments:
        for i, line in enumerate(segment.lines[1:], start=1):
            column = first_non_whitespace(line)
            if column is None:
                continue
            line_number = segment.start.line + i
            if column < boundary:
                violation = IndentationViolation(
                    line=line_number, column=column + 1, min_column=boundary + 1
                )
                result.issues.append(LintIssue.from_violation(violation))
                if fail_fast:
                    return result
            elif "\t" in line[:boundary]:
                result.issues.append(
                    LintIssue(
                        severity=Severity.WARNING,
                        code="TAB_IN_MARGIN",
                        message=(
                            f"LINE: {line_number}. Margin contains a tab; "
                            f"columns are counted per character, not per tab stop."
                        ),
                        line=line_number,
                        column=line.index("\t") + 1,
                    )
                )

    return result
