"""Shared fixtures: small Babel JSON trees."""

import pytest


def _loc(line: int, column: int) -> dict:
    return {"start": {"line": line, "column": column}, "end": {"line": line, "column": column}}


def make_template(raws: list[str], line: int, column: int) -> dict:
    """Build a Babel TemplateLiteral dict opening at (line, column).

    Quasi locations follow the raw text: the first starts right after the
    backtick, each later one on the line where the previous quasi ended
    (placeholders are written as single-line ``${x}``).
    """
    quasis = []
    current_line, current_column = line, column + 1
    for i, raw in enumerate(raws):
        quasis.append(
            {
                "type": "TemplateElement",
                "value": {"raw": raw, "cooked": raw},
                "tail": i == len(raws) - 1,
                "loc": _loc(current_line, current_column),
            }
        )
        newlines = raw.count("\n")
        if newlines:
            current_line += newlines
            current_column = len(raw.rsplit("\n", 1)[1]) + 4
        else:
            current_column += len(raw) + 4
    expressions = [{"type": "Identifier", "name": f"x{i}", "loc": _loc(line, 0)} for i in range(len(raws) - 1)]
    return {
        "type": "TemplateLiteral",
        "loc": _loc(line, column),
        "start": 0,
        "end": 0,
        "expressions": expressions,
        "quasis": quasis,
    }


def make_program(*statements: dict) -> dict:
    """Wrap expressions in a Babel File/Program tree."""
    body = [{"type": "ExpressionStatement", "expression": s} for s in statements]
    return {"type": "File", "program": {"type": "Program", "sourceType": "module", "body": body}, "comments": []}


@pytest.fixture
def template():
    return make_template


@pytest.fixture
def program():
    return make_program
