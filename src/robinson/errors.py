"""Parser error types."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """What went wrong while parsing."""

    UNEXPECTED_END_OF_INPUT = "unexpected-end-of-input"
    UNEXPECTED_CHARACTER = "unexpected-character"
    UNRECOGNIZED_UNIT = "unrecognized-unit"
    INVALID_NUMERIC_LITERAL = "invalid-numeric-literal"
    MISMATCHED_TAG = "mismatched-tag"
    NESTING_TOO_DEEP = "nesting-too-deep"


class ParseError(Exception):
    """Raised when source text cannot be parsed.

    Attributes:
        kind: Which grammar violation aborted the parse.
        position: Character offset into the source where it happened.
        line: 1-based line number of ``position``.
        column: 1-based column number of ``position``.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        position: int = 0,
        line: int | None = None,
        column: int | None = None,
    ):
        self.message = message
        self.kind = kind
        self.position = position
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"


class MalformedMarkup(ParseError):
    """Raised when HTML source cannot be parsed."""


class MalformedStylesheet(ParseError):
    """Raised when CSS source cannot be parsed."""
