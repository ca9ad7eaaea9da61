"""Babel IR adapter: build template literal IR from Babel/ESTree JSON nodes.

The host tree is whatever ``@babel/parser`` emits, serialized to JSON and
loaded as plain dicts. A TemplateLiteral node looks like::

    {"type": "TemplateLiteral",
     "loc": {"start": {"line": 3, "column": 12}, ...},
     "quasis": [{"type": "TemplateElement",
                 "value": {"raw": "...", "cooked": "..."},
                 "tail": false,
                 "loc": {"start": {...}}}, ...],
     "expressions": [...]}
"""

from __future__ import annotations

from litdedent.ir.models import LiteralSegment, SourceLocation, TemplateLiteralNode

TEMPLATE_LITERAL = "TemplateLiteral"


class MalformedNodeError(ValueError):
    """A host node is missing fields the adapter needs."""


def is_template_literal(node: object) -> bool:
    return isinstance(node, dict) and node.get("type") == TEMPLATE_LITERAL


def from_babel(node: dict) -> TemplateLiteralNode:
    """Convert a Babel TemplateLiteral dict into a TemplateLiteralNode."""
    if not is_template_literal(node):
        raise MalformedNodeError(f"Expected a {TEMPLATE_LITERAL} node, got {node.get('type')!r}")

    quasis = node.get("quasis")
    if not isinstance(quasis, list):
        raise MalformedNodeError("TemplateLiteral node has no 'quasis' list")

    segments = []
    for i, element in enumerate(quasis):
        try:
            raw_text = element["value"]["raw"]
        except (KeyError, TypeError):
            raise MalformedNodeError(f"quasis[{i}] has no 'value.raw'") from None
        segments.append(
            LiteralSegment(
                raw_text=raw_text,
                start=_start_location(element, f"quasis[{i}]"),
                tail=bool(element.get("tail", False)),
            )
        )

    return TemplateLiteralNode(start=_start_location(node, TEMPLATE_LITERAL), segments=segments)


def write_back(literal: TemplateLiteralNode, node: dict) -> None:
    """Copy each segment's raw text into the matching quasi of ``node``.

    ``value.cooked`` is left as-is; escape processing happens downstream.
    """
    quasis = node["quasis"]
    if len(quasis) != len(literal.segments):
        raise MalformedNodeError(
            f"Segment count mismatch: literal has {len(literal.segments)}, node has {len(quasis)}"
        )
    for segment, element in zip(literal.segments, quasis):
        element["value"]["raw"] = segment.raw_text


def _start_location(node: dict, label: str) -> SourceLocation:
    try:
        start = node["loc"]["start"]
        return SourceLocation(line=int(start["line"]), column=int(start["column"]))
    except (KeyError, TypeError, ValueError):
        raise MalformedNodeError(f"{label} has no usable 'loc.start'") from None
