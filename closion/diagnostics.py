"""Collection of errors and warnings found while compiling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from closion.lexer import TextSpan, TokenKind


class DiagnosticKind(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A message tied to a span of the input."""

    message: str
    span: TextSpan
    kind: DiagnosticKind

    @classmethod
    def error(cls, message: str, span: TextSpan) -> Diagnostic:
        return cls(message, span, DiagnosticKind.ERROR)

    @classmethod
    def warning(cls, message: str, span: TextSpan) -> Diagnostic:
        return cls(message, span, DiagnosticKind.WARNING)


@dataclass
class DiagnosticsBag:
    """Ordered collection of diagnostics."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def report_error(self, message: str, span: TextSpan) -> None:
        self.diagnostics.append(Diagnostic.error(message, span))

    def report_warning(self, message: str, span: TextSpan) -> None:
        self.diagnostics.append(Diagnostic.warning(message, span))

    def report_unexpected_token(
        self, expected: TokenKind, found: TokenKind, span: TextSpan
    ) -> None:
        self.report_error(f"Expected <{expected}>, but found <{found}>", span)

    def has_errors(self) -> bool:
        return any(d.kind is DiagnosticKind.ERROR for d in self.diagnostics)

    def has_warnings(self) -> bool:
        return any(d.kind is DiagnosticKind.WARNING for d in self.diagnostics)