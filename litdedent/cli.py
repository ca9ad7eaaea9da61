"""litdedent CLI: dedent or check template literals in a Babel JSON AST."""

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from litdedent import __version__

# Trees go to stdout; everything human-readable goes to stderr.
console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main():
    """litdedent: strip source indentation from template literals.

    Works on the JSON AST produced by @babel/parser. Continuation lines of
    every template literal lose the margin left of the column one past the
    literal's opening backtick.
    """


def _load_tree(ast_json: str):
    try:
        with open(ast_json, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        console.print(f"  [red]Failed to read AST:[/] {escape(str(e))}")
        sys.exit(1)


def _load_settings(config_path: str | None):
    from litdedent.config import ConfigError, resolve_config

    try:
        return resolve_config(config_path)
    except (OSError, ConfigError) as e:
        console.print(f"  [red]Bad config:[/] {escape(str(e))}")
        sys.exit(1)


# ── Apply ────────────────────────────────────────────────────────────


@main.command()
@click.argument("ast_json")
@click.option("--output", "-o", default=None, help="Write the rewritten tree here (default: stdout)")
@click.option("--atomic", is_flag=True, help="Roll back a literal on violation")
@click.option("--config", "config_path", default=None, help="Path to a .litdedent.yaml file")
def apply(ast_json: str, output: str | None, atomic: bool, config_path: str | None):
    """Dedent every template literal in AST_JSON.

    Stops at the first indentation violation and exits with status 1.
    """
    from litdedent.dedent.errors import IndentationViolation
    from litdedent.ir.babel import MalformedNodeError
    from litdedent.traversal import dedent_tree

    settings = _load_settings(config_path)
    atomic = atomic or settings.atomic

    tree = _load_tree(ast_json)
    try:
        count = dedent_tree(tree, atomic=atomic)
    except IndentationViolation as e:
        console.print(f"[red]x[/] {ast_json}: {escape(e.message)}")
        sys.exit(1)
    except MalformedNodeError as e:
        console.print(f"[red]x[/] {ast_json}: malformed node: {escape(str(e))}")
        sys.exit(1)

    text = json.dumps(tree, indent=settings.json_indent)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        console.print(f"[green]v[/] {count} template literal(s) dedented, written to {output}")
    else:
        click.echo(text)


# ── Check ────────────────────────────────────────────────────────────


@main.command()
@click.argument("ast_json")
@click.option("--fail-fast", is_flag=True, help="Stop at the first error")
@click.option("--config", "config_path", default=None, help="Path to a .litdedent.yaml file")
def check(ast_json: str, fail_fast: bool, config_path: str | None):
    """Report indentation problems in AST_JSON without rewriting it."""
    from litdedent.ir.babel import MalformedNodeError
    from litdedent.traversal import check_tree

    settings = _load_settings(config_path)
    fail_fast = fail_fast or settings.fail_fast

    tree = _load_tree(ast_json)
    try:
        result = check_tree(tree, fail_fast=fail_fast)
    except MalformedNodeError as e:
        console.print(f"[red]x[/] {ast_json}: malformed node: {escape(str(e))}")
        sys.exit(1)

    if result.issues:
        table = Table(title=f"Indentation Issues ({len(result.issues)} found)")
        table.add_column("Line", justify="right", no_wrap=True)
        table.add_column("Col", justify="right", no_wrap=True)
        table.add_column("Severity", no_wrap=True)
        table.add_column("Code", style="cyan", no_wrap=True)
        table.add_column("Message")
        for issue in result.issues:
            color = "red" if issue.severity.value == "error" else "yellow"
            table.add_row(
                str(issue.line),
                str(issue.column),
                f"[{color}]{issue.severity.value}[/]",
                issue.code,
                escape(issue.message),
            )
        console.print(table)

    console.print(escape(result.summary()))
    if not result.passed:
        sys.exit(1)


# ── Dedent text ──────────────────────────────────────────────────────


@main.command(name="dedent-text")
@click.argument("text")
@click.option("--column", "-c", required=True, type=int, help="0-based column of the opening backtick")
@click.option("--line", "-l", default=1, type=int, help="Source line the text starts on")
def dedent_text(text: str, column: int, line: int):
    """Dedent a single raw segment TEXT and print the result."""
    from litdedent.dedent.dedenter import try_dedent
    from litdedent.ir.models import LiteralSegment, SourceLocation, TemplateLiteralNode

    start = SourceLocation(line=line, column=column)
    literal = TemplateLiteralNode(start=start, segments=[LiteralSegment(raw_text=text, start=start)])
    try:
        result = try_dedent(literal)
    except ValueError as e:
        console.print(f"[red]x[/] {escape(str(e))}")
        sys.exit(1)

    if not result.ok:
        console.print(f"[red]x[/] {escape(result.violation.message)}")
        sys.exit(1)
    click.echo(literal.segments[0].raw_text)


if __name__ == "__main__":
    main()
