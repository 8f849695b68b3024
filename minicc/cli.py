"""Command line front end: show the token table of a source file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from minicc.parser import parse
from minicc.scanner import scan_tokens
from minicc.token import Token, token_type_name

HEADERS = ("Type (Int)", "Type (Name)", "Value", "Line")


def token_rows(tokens: Iterable[Token]) -> list[tuple[str, str, str, str]]:
    """Return one row of cell texts per token, in the table's column order."""
    return [
        (str(int(token.type)), token_type_name(token.type), token.value, str(token.line))
        for token in tokens
    ]


def render_table(tokens: Iterable[Token]) -> str:
    """Lay out the token table as centred text columns."""
    rows = [HEADERS, *token_rows(tokens)]
    widths = [max(len(row[col]) for row in rows) for col in range(len(HEADERS))]

    def line(cells: Sequence[str]) -> str:
        return " | ".join(cell.center(width) for cell, width in zip(cells, widths))

    separator = "-+-".join("-" * width for width in widths)
    return "\n".join([line(HEADERS), separator, *(line(row) for row in rows[1:])])


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Scan a source file (or standard input) and print its token table."""
    arg_parser = argparse.ArgumentParser(
        prog="minicc", description="Show the tokens of a C source file."
    )
    arg_parser.add_argument(
        "path", nargs="?", default="-", help="source file, '-' for standard input"
    )
    arg_parser.add_argument(
        "--parse", action="store_true", help="also check the syntax and report errors"
    )
    args = arg_parser.parse_args(argv)

    try:
        source = _read_source(args.path)
    except OSError as exc:
        print(f"minicc: {exc}", file=sys.stderr)
        return 1

    tokens = scan_tokens(source)
    print(render_table(tokens))

    if args.parse:
        issues = parse(tokens)
        for issue in issues:
            print(issue, file=sys.stderr)
        if issues:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())