"""Dedent pass for template literals.

Two entry points share one algorithm:
1. dedent / try_dedent rewrite segment text in place
2. check_literal reports violations without touching the literal
"""

from litdedent.dedent.dedenter import DedentResult, boundary_column, dedent, try_dedent
from litdedent.dedent.errors import IndentationViolation

__all__ = ["DedentResult", "IndentationViolation", "boundary_column", "dedent", "try_dedent"]
