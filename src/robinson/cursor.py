"""Positional scanner shared by the HTML and CSS parsers."""

from __future__ import annotations

from typing import Callable, NoReturn

from robinson.errors import ErrorKind, ParseError

__all__ = ["Cursor"]


class Cursor:
    """Reads an immutable source string one character at a time.

    Offsets count characters, not bytes, so a multi-byte character is
    always consumed whole. Failures are raised as ``error`` so each parser
    surfaces its own ``ParseError`` subclass.
    """

    def __init__(self, source: str, error: type[ParseError] = ParseError) -> None:
        self.source = source
        self.position = 0
        self.error = error

    def at_end(self) -> bool:
        return self.position >= len(self.source)

    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.at_end():
            self.fail(ErrorKind.UNEXPECTED_END_OF_INPUT, "Unexpected end of input")
        return self.source[self.position]

    def starts_with(self, literal: str) -> bool:
        return self.source.startswith(literal, self.position)

    def advance(self) -> str:
        """Return the current character and move past it."""
        char = self.peek()
        self.position += 1
        return char

    def consume_while(self, test: Callable[[str], bool]) -> str:
        """Consume characters while ``test`` holds and return them."""
        start = self.position
        while not self.at_end() and test(self.source[self.position]):
            self.position += 1
        return self.source[start:self.position]

    def consume_whitespace(self) -> None:
        self.consume_while(str.isspace)

    def expect(self, char: str) -> None:
        """Consume ``char`` or fail."""
        position = self.position
        found = self.advance()
        if found != char:
            self.fail(
                ErrorKind.UNEXPECTED_CHARACTER,
                f"Expected {char!r} but found {found!r}",
                position,
            )

    def fail(
        self, kind: ErrorKind, message: str, position: int | None = None
    ) -> NoReturn:
        """Raise this cursor's error class at ``position`` (default: here)."""
        raise self.error_at(kind, message, position)

    def error_at(
        self, kind: ErrorKind, message: str, position: int | None = None
    ) -> ParseError:
        if position is None:
            position = self.position
        consumed = self.source[:position]
        line = consumed.count("\n") + 1
        column = position - (consumed.rfind("\n") + 1) + 1
        return self.error(message, kind, position=position, line=line, column=column)
