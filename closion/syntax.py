"""Syntax tree, visitor and tree printer."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import IO, Iterator, Union

from closion.lexer import Token

INDENT_LEVEL = 2


class BinaryOperatorKind(Enum):
    ADD = "Add"
    SUBTRACT = "Subtract"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"


_PRECEDENCE = {
    BinaryOperatorKind.ADD: 1,
    BinaryOperatorKind.SUBTRACT: 1,
    BinaryOperatorKind.MULTIPLY: 2,
    BinaryOperatorKind.DIVIDE: 2,
}


@dataclass(frozen=True)
class BinaryOperator:
    kind: BinaryOperatorKind
    token: Token

    def precedence(self) -> int:
        return _PRECEDENCE[self.kind]


@dataclass(frozen=True)
class NumberExpression:
    number: int


@dataclass(frozen=True)
class BinaryExpression:
    left: Expression
    operator: BinaryOperator
    right: Expression


@dataclass(frozen=True)
class ParenthesisExpression:
    expression: Expression


Expression = Union[NumberExpression, BinaryExpression, ParenthesisExpression]


@dataclass(frozen=True)
class Statement:
    """An expression statement."""

    expression: Expression


class AstVisitor(ABC):
    """Walks a syntax tree; subclasses override the nodes they care about."""

    def visit_statement(self, statement: Statement) -> None:
        self.visit_expression(statement.expression)

    def visit_expression(self, expression: Expression) -> None:
        if isinstance(expression, NumberExpression):
            self.visit_number(expression)
        elif isinstance(expression, BinaryExpression):
            self.visit_binary_expression(expression)
        elif isinstance(expression, ParenthesisExpression):
            self.visit_parenthesis_expression(expression)
        else:
            raise TypeError(f"not an expression: {expression!r}")

    @abstractmethod
    def visit_number(self, number_expression: NumberExpression) -> None:
        ...

    def visit_binary_expression(self, binary_expression: BinaryExpression) -> None:
        self.visit_expression(binary_expression.left)
        self.visit_expression(binary_expression.right)

    def visit_parenthesis_expression(
        self, parenthesis_expression: ParenthesisExpression
    ) -> None:
        self.visit_expression(parenthesis_expression.expression)


@dataclass
class Ast:
    statements: list[Statement] = field(default_factory=list)

    def add_statement(self, statement: Statement) -> None:
        self.statements.append(statement)

    def visit(self, visitor: AstVisitor) -> None:
        for statement in self.statements:
            visitor.visit_statement(statement)

    def visualize(self, file: IO[str] | None = None) -> None:
        """Print the tree as indented text."""
        self.visit(AstPrinter(1, file))


class AstPrinter(AstVisitor):
    """Prints each node on its own line, indented by depth."""

    def __init__(self, indent: int = 1, file: IO[str] | None = None) -> None:
        self.indent = indent
        self.file = file

    def _print(self, text: str) -> None:
        print(" " * self.indent + text, file=self.file if self.file else sys.stdout)

    @contextmanager
    def _nested(self) -> Iterator[None]:
        self.indent += INDENT_LEVEL
        try:
            yield
        finally:
            self.indent -= INDENT_LEVEL

    def visit_statement(self, statement: Statement) -> None:
        self._print("Statement")
        with self._nested():
            super().visit_statement(statement)

    def visit_expression(self, expression: Expression) -> None:
        self._print("Expression")
        with self._nested():
            super().visit_expression(expression)

    def visit_number(self, number_expression: NumberExpression) -> None:
        self._print(f"Number: {number_expression.number}")

    def visit_binary_expression(self, binary_expression: BinaryExpression) -> None:
        self._print("Binary Expression")
        with self._nested():
            self._print(f"Operator: {binary_expression.operator.kind.value}")
            self.visit_expression(binary_expression.left)
            self.visit_expression(binary_expression.right)

    def visit_parenthesis_expression(
        self, parenthesis_expression: ParenthesisExpression
    ) -> None:
        self._print("Parenthesis Expression")
        with self._nested():
            self.visit_expression(parenthesis_expression.expression)