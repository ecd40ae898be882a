import pytest

from closion.diagnostics import DiagnosticsBag
from closion.lexer import tokenize
from closion.parser import ParseError, Parser, parse
from closion.syntax import (
    BinaryExpression,
    BinaryOperatorKind,
    NumberExpression,
    ParenthesisExpression,
    Statement,
)


def test_single_number():
    ast = parse("42")
    assert ast.statements == [Statement(NumberExpression(42))]


def test_empty_input_has_no_statements():
    assert parse("").statements == []


def test_whitespace_is_ignored():
    assert parse("  7  ").statements == parse("7").statements


def test_binary_addition():
    (statement,) = parse("1 + 2").statements
    expr = statement.expression
    assert isinstance(expr, BinaryExpression)
    assert expr.operator.kind is BinaryOperatorKind.ADD
    assert expr.left == NumberExpression(1)
    assert expr.right == NumberExpression(2)
    assert expr.operator.token.span.literal == "+"


def test_parenthesis():
    (statement,) = parse("(5)").statements
    assert statement.expression == ParenthesisExpression(NumberExpression(5))


def test_same_precedence_nests_to_the_right():
    (statement,) = parse("1 - 2 - 3").statements
    expr = statement.expression
    assert expr.left == NumberExpression(1)
    assert isinstance(expr.right, BinaryExpression)
    assert expr.right.left == NumberExpression(2)
    assert expr.right.right == NumberExpression(3)


def test_higher_precedence_binds_tighter():
    (statement,) = parse("1 + 2 * 3").statements
    expr = statement.expression
    assert expr.operator.kind is BinaryOperatorKind.ADD
    assert expr.right.operator.kind is BinaryOperatorKind.MULTIPLY


def test_lower_precedence_after_higher_starts_new_statement():
    statements = parse("2 * 3 + 4").statements
    assert len(statements) == 2
    assert statements[0].expression.operator.kind is BinaryOperatorKind.MULTIPLY
    assert statements[1] == Statement(NumberExpression(4))


def test_next_statement_returns_none_at_end_repeatedly():
    parser = Parser.from_input("9")
    assert parser.next_statement() == Statement(NumberExpression(9))
    assert parser.next_statement() is None
    assert parser.next_statement() is None


def test_parser_from_tokens_matches_from_input():
    from_tokens = list(Parser(tokenize("4 / 2")))
    from_input = list(Parser.from_input("4 / 2"))
    assert from_tokens == from_input


def test_empty_token_list_rejected():
    with pytest.raises(ValueError):
        Parser([])


def test_unexpected_token_reports_error():
    bag = DiagnosticsBag()
    with pytest.raises(ParseError):
        parse("+", bag)
    assert bag.has_errors()
    assert not bag.has_warnings()


def test_missing_closing_parenthesis():
    bag = DiagnosticsBag()
    with pytest.raises(ParseError) as info:
        parse("(1", bag)
    assert str(info.value) == "Expected <)>, but found <EOF>"
    assert bag.diagnostics[-1].message == str(info.value)


def test_trailing_operator_fails():
    with pytest.raises(ParseError):
        parse("1 +")


def test_bad_character_fails_on_next_statement():
    parser = Parser.from_input("7 $")
    assert parser.next_statement() == Statement(NumberExpression(7))
    with pytest.raises(ParseError) as info:
        parser.next_statement()
    assert info.value.span.literal == "$"