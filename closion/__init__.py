"""Lexer, parser, syntax tree printer and evaluator for integer arithmetic."""

__version__ = "0.1.0"