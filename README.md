# closion

A tiny compiler front end for integer arithmetic. It turns text such as
`7 - (30 + 7) * 8 / 2` into tokens, parses them into a syntax tree, can
print that tree as indented text, and evaluates it to an integer.

Supported syntax: non-negative integer literals made of ASCII digits,
`+`, `-`, `*`, `/` and parentheses. Whitespace is skipped. Any other
character becomes a `Bad` token, which the parser rejects.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
closion
closion "1 + 2 * 3"
```

The command takes one optional argument, the expression; without it,
`7 - (30 + 7) * 8 / 2` is used. It prints the syntax tree, then a line
`Result: <value>`. On a parse error or a division by zero it prints
`error: <message>` to standard error and exits with status 1.

## Library use

Evaluate an expression in one call:

```python
from closion.evaluator import evaluate

evaluate("1 + 2 * 3")   # 7
```

Work with the individual stages:

```python
from closion.lexer import tokenize
from closion.parser import parse
from closion.diagnostics import DiagnosticsBag
from closion.evaluator import AstEvaluator

tokens = tokenize("(1 + 2) * 3")      # list of Token, whitespace included, ending with EOF

diagnostics = DiagnosticsBag()
ast = parse("(1 + 2) * 3", diagnostics)
ast.visualize()                       # prints the tree to stdout, or pass file=...

evaluator = AstEvaluator()
ast.visit(evaluator)
print(evaluator.last_value)           # 9
```

`Lexer` yields tokens one at a time through `next_token()` or iteration.
`Parser` can be built from a token list or with `Parser.from_input(text)`,
and yields `Statement` objects through `next_statement()` or iteration.

Malformed input, such as a missing operand or a missing closing
parenthesis, raises `closion.parser.ParseError`, whose `span` attribute
locates the offending token. The same problem is also recorded in the
`DiagnosticsBag` given to the parser, as a message of the form
`Expected <)>, but found <EOF>`.

Division truncates toward zero; dividing by zero raises
`ZeroDivisionError`.

Custom tree walks subclass `closion.syntax.AstVisitor`, implement
`visit_number`, and override any other `visit_*` methods they need.

## Parsing rules to be aware of

- Operators of equal precedence group to the right: `8 - 2 - 1` is
  read as `8 - (2 - 1)`.
- When a lower-precedence operator follows a higher one inside a
  right-hand operand, as in `2 * 3 + 4`, that operator is consumed and
  dropped, and the rest of the input is parsed as a further statement.
  `evaluate` returns the value of the last statement, so `2 * 3 + 4`
  gives `4`.
- There are no unary operators, so `-3` is a parse error.

## Modules

- `closion.lexer`: `TokenKind`, `TextSpan`, `Token`, `Lexer`, `tokenize`
- `closion.diagnostics`: `DiagnosticKind`, `Diagnostic`, `DiagnosticsBag`
- `closion.syntax`: `BinaryOperatorKind`, `BinaryOperator`,
  `NumberExpression`, `BinaryExpression`, `ParenthesisExpression`,
  `Statement`, `Ast`, `AstVisitor`, `AstPrinter`
- `closion.parser`: `Parser`, `ParseError`, `parse`
- `closion.evaluator`: `AstEvaluator`, `evaluate`
- `closion.cli`: `main`, behind the `closion` command