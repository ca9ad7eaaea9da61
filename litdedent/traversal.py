"""Traversal: run the dedenter over a host tree.

The dedenter is a plain function over TemplateLiteralNode. This module is
the integration boundary that plugs it into a visitor-style walk of a
Babel JSON AST, the same shape a Babel plugin exposes::

    plugin() == {"visitor": {"TemplateLiteral": <handler>}}
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from litdedent.dedent.checker import LintResult, check_literal
from litdedent.dedent.dedenter import dedent
from litdedent.ir.babel import TEMPLATE_LITERAL, from_babel, write_back

Visitor = dict[str, Callable[[dict], None]]

# Metadata keys that never hold child nodes
SKIP_KEYS = {
    "loc", "start", "end", "range", "extra", "tokens",
    "comments", "leadingComments", "trailingComments", "innerComments",
}


def iter_nodes(tree: object) -> Iterator[dict]:
    """Yield every node (dict with a ``type``) in depth-first pre-order."""
    stack = [tree]
    while stack:
        current = stack.pop()
        if isinstance(current, list):
            stack.extend(reversed(current))
        elif isinstance(current, dict):
            if "type" in current:
                yield current
            children = [v for k, v in current.items() if k not in SKIP_KEYS]
            stack.extend(reversed(children))


def traverse(tree: object, visitor: Visitor) -> int:
    """Call the matching visitor handler on every node. Returns the call count."""
    calls = 0
    for node in iter_nodes(tree):
        handler = visitor.get(node["type"])
        if handler is not None:
            handler(node)
            calls += 1
    return calls


def dedent_template_literal(node: dict, *, atomic: bool = False) -> None:
    """Dedent one Babel TemplateLiteral node in place."""
    literal = from_babel(node)
    try:
        dedent(literal, atomic=atomic)
    finally:
        # Segments rewritten before a violation are visible on the host node too.
        write_back(literal, node)


def plugin(atomic: bool = False) -> dict:
    """Return a Babel-style plugin object wrapping the dedenter."""

    def handler(node: dict) -> None:
        dedent_template_literal(node, atomic=atomic)

    return {"visitor": {TEMPLATE_LITERAL: handler}}


def dedent_tree(tree: object, *, atomic: bool = False) -> int:
    """Dedent every template literal in ``tree``. Returns how many were processed.

    The first IndentationViolation propagates; literals visited before it
    stay rewritten.
    """
    return traverse(tree, plugin(atomic=atomic)["visitor"])


def check_tree(tree: object, *, fail_fast: bool = False) -> LintResult:
    """Check every template literal in ``tree`` without modifying it."""
    result = LintResult()
    for node in iter_nodes(tree):
        if node["type"] != TEMPLATE_LITERAL:
            continue
        result.extend(check_literal(from_babel(node), fail_fast=fail_fast))
        if fail_fast and not result.passed:
            break
    result.sort()
    return result
