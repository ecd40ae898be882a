"""Command line: print the syntax tree of an expression and its value."""

from __future__ import annotations

import argparse
import sys

from closion.evaluator import AstEvaluator
from closion.parser import ParseError, parse

DEFAULT_EXPRESSION = "7 - (30 + 7) * 8 / 2"


def main(argv: list[str] | None = None) -> int:
    arg_parser = argparse.ArgumentParser(
        prog="closion",
        description="Parse an arithmetic expression, show its tree and evaluate it.",
    )
    arg_parser.add_argument(
        "expression",
        nargs="?",
        default=DEFAULT_EXPRESSION,
        help="expression to evaluate (default: %(default)s)",
    )
    args = arg_parser.parse_args(argv)

    try:
        ast = parse(args.expression)
    except ParseError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    ast.visualize()
    evaluator = AstEvaluator()
    try:
        ast.visit(evaluator)
    except ZeroDivisionError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(f"Result: {evaluator.last_value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())