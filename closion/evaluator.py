"""Evaluates syntax trees of integer arithmetic."""

from __future__ import annotations

import operator
from typing import Callable

from closion.parser import parse
from closion.syntax import (
    AstVisitor,
    BinaryExpression,
    BinaryOperatorKind,
    NumberExpression,
)


def _divide(left: int, right: int) -> int:
    """Integer division truncating toward zero."""
    if right == 0:
        raise ZeroDivisionError("attempt to divide by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATIONS: dict[BinaryOperatorKind, Callable[[int, int], int]] = {
    BinaryOperatorKind.ADD: operator.add,
    BinaryOperatorKind.SUBTRACT: operator.sub,
    BinaryOperatorKind.MULTIPLY: operator.mul,
    BinaryOperatorKind.DIVIDE: _divide,
}


class AstEvaluator(AstVisitor):
    """Computes expression values; ``last_value`` holds the latest result."""

    def __init__(self) -> None:
        self.last_value: int | None = None

    def visit_number(self, number_expression: NumberExpression) -> None:
        self.last_value = number_expression.number

    def visit_binary_expression(self, binary_expression: BinaryExpression) -> None:
        self.visit_expression(binary_expression.left)
        left = self.last_value
        self.visit_expression(binary_expression.right)
        right = self.last_value
        self.last_value = _OPERATIONS[binary_expression.operator.kind](left, right)


def evaluate(text: str) -> int | None:
    """Parse and evaluate ``text``; return the last statement's value."""
    evaluator = AstEvaluator()
    parse(text).visit(evaluator)
    return evaluator.last_value