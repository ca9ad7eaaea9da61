"""Intermediate representation for template literals.

The IR is the shape the dedenter operates on. It sits between a host
parser's tree (e.g., a Babel JSON AST) and the dedent pass:

- A literal knows where it opens in the source
- Each literal-text segment knows its raw text and where it begins
- Placeholders between segments are implied, never owned
"""
