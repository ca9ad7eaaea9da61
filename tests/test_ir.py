"""Tests for the template literal IR and the Babel adapter."""

import pytest

from litdedent.ir.babel import MalformedNodeError, from_babel, is_template_literal, write_back
from litdedent.ir.models import LiteralSegment, SourceLocation, TemplateLiteralNode


# --- IR Model Tests ---


def test_literal_segment_lines():
    seg = LiteralSegment(raw_text="a\n  b\n", start=SourceLocation(line=4, column=9))
    assert seg.lines == ["a", "  b", ""]
    assert not seg.tail


def test_template_literal_properties():
    literal = TemplateLiteralNode(
        start=SourceLocation(line=2, column=6),
        segments=[
            LiteralSegment(raw_text="one ", start=SourceLocation(line=2, column=7)),
            LiteralSegment(raw_text=" two", start=SourceLocation(line=2, column=15), tail=True),
        ],
    )
    assert literal.raw_texts == ["one ", " two"]


def test_empty_literal():
    literal = TemplateLiteralNode(start=SourceLocation(line=1, column=0))
    assert literal.segments == []


def test_source_location_str():
    assert str(SourceLocation(line=3, column=0)) == "3:0"


# --- Babel Adapter Tests ---


def test_from_babel(template):
    node = template(["head\n      a ", "\n      b"], line=5, column=5)
    literal = from_babel(node)
    assert literal.start == SourceLocation(line=5, column=5)
    assert [s.start.line for s in literal.segments] == [5, 6]
    assert literal.segments[0].start.column == 6
    assert literal.raw_texts == ["head\n      a ", "\n      b"]
    assert [s.tail for s in literal.segments] == [False, True]


def test_write_back_touches_raw_only(template):
    node = template(["head\n    x"], line=1, column=3)
    literal = from_babel(node)
    literal.segments[0].raw_text = "head\nx"
    write_back(literal, node)
    assert node["quasis"][0]["value"]["raw"] == "head\nx"
    assert node["quasis"][0]["value"]["cooked"] == "head\n    x"


def test_write_back_segment_mismatch(template):
    node = template(["a", "b"], line=1, column=0)
    literal = from_babel(node)
    literal.segments.pop()
    with pytest.raises(MalformedNodeError):
        write_back(literal, node)


def test_is_template_literal(template):
    assert is_template_literal(template(["x"], line=1, column=0))
    assert not is_template_literal({"type": "StringLiteral"})
    assert not is_template_literal("TemplateLiteral")


def test_from_babel_rejects_other_nodes():
    with pytest.raises(MalformedNodeError):
        from_babel({"type": "StringLiteral", "value": "x"})


def test_from_babel_requires_loc(template):
    node = template(["x"], line=1, column=0)
    del node["loc"]
    with pytest.raises(MalformedNodeError):
        from_babel(node)


def test_from_babel_requires_quasi_raw(template):
    node = template(["x"], line=1, column=0)
    del node["quasis"][0]["value"]["raw"]
    with pytest.raises(MalformedNodeError, match="quasis\\[0\\]"):
        from_babel(node)


def test_from_babel_requires_quasis():
    node = {"type": "TemplateLiteral", "loc": {"start": {"line": 1, "column": 0}}}
    with pytest.raises(MalformedNodeError):
        from_babel(node)
