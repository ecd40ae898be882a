"""Recursive-descent parser producing expression statements."""

from __future__ import annotations

from typing import Iterable, Iterator

from closion.diagnostics import DiagnosticsBag
from closion.lexer import Token, TokenKind, tokenize
from closion.lexer import TextSpan
from closion.syntax import (
    Ast,
    BinaryExpression,
    BinaryOperator,
    BinaryOperatorKind,
    Expression,
    NumberExpression,
    ParenthesisExpression,
    Statement,
)

_OPERATORS = {
    TokenKind.PLUS: BinaryOperatorKind.ADD,
    TokenKind.MINUS: BinaryOperatorKind.SUBTRACT,
    TokenKind.ASTERISK: BinaryOperatorKind.MULTIPLY,
    TokenKind.SLASH: BinaryOperatorKind.DIVIDE,
}


class ParseError(Exception):
    """Raised when the token stream does not form a valid expression."""

    def __init__(self, message: str, span: TextSpan) -> None:
        super().__init__(message)
        self.span = span


class Parser:
    """Parses a token stream into statements, one at a time."""

    def __init__(
        self, tokens: Iterable[Token], diagnostics: DiagnosticsBag | None = None
    ) -> None:
        self.tokens = [t for t in tokens if t.kind is not TokenKind.WHITESPACE]
        if not self.tokens:
            raise ValueError("parser needs at least one token")
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticsBag()
        self._position = 0

    @classmethod
    def from_input(
        cls, text: str, diagnostics: DiagnosticsBag | None = None
    ) -> Parser:
        return cls(tokenize(text), diagnostics)

    def next_statement(self) -> Statement | None:
        """Return the next statement, or None at end of input."""
        if self._current().kind is TokenKind.EOF:
            return None
        return Statement(self._parse_expression())

    def __iter__(self) -> Iterator[Statement]:
        while (statement := self.next_statement()) is not None:
            yield statement

    def _parse_expression(self) -> Expression:
        return self._parse_binary_expression(0)

    def _parse_binary_expression(self, precedence: int) -> Expression:
        left = self._parse_primary_expression()
        while (operator := self._parse_operator()) is not None:
            self._consume()
            operator_precedence = operator.precedence()
            if operator_precedence < precedence:
                break
            right = self._parse_binary_expression(operator_precedence)
            left = BinaryExpression(left, operator, right)
        return left

    def _parse_operator(self) -> BinaryOperator | None:
        token = self._current()
        kind = _OPERATORS.get(token.kind)
        return BinaryOperator(kind, token) if kind is not None else None

    def _parse_primary_expression(self) -> Expression:
        token = self._consume()
        if token.kind is TokenKind.NUMBER:
            return NumberExpression(token.value)
        if token.kind is TokenKind.LPAREN:
            expression = self._parse_expression()
            closing = self._consume()
            if closing.kind is not TokenKind.RPAREN:
                self._fail(TokenKind.RPAREN, closing)
            return ParenthesisExpression(expression)
        self._fail(TokenKind.NUMBER, token)

    def _fail(self, expected: TokenKind, found: Token) -> None:
        self.diagnostics.report_unexpected_token(expected, found.kind, found.span)
        raise ParseError(self.diagnostics.diagnostics[-1].message, found.span)

    def _peek(self, offset: int) -> Token:
        index = min(self._position + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def _current(self) -> Token:
        return self._peek(0)

    def _consume(self) -> Token:
        self._position += 1
        return self._peek(-1)


def parse(text: str, diagnostics: DiagnosticsBag | None = None) -> Ast:
    """Parse ``text`` into a syntax tree."""
    ast = Ast()
    for statement in Parser.from_input(text, diagnostics):
        ast.add_statement(statement)
    return ast