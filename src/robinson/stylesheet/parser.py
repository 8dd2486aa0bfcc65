"""Hand-written recursive-descent parser for a small subset of CSS.

Syntax example:
    h1, h2#title { margin: 10px; color: #cc0000; }
    div.note.wide { display: block; }

Grammar:
    Stylesheet  = Rule*
    Rule        = Selectors '{' Declaration* '}'
    Selectors   = Simple ( ',' Simple )*
    Simple      = ( Identifier | '#' Identifier | '.' Identifier | '*' )*
    Declaration = Identifier ':' Value ';'
    Value       = Length | Color | Identifier
    Length      = [0-9.]+ 'px'
    Color       = '#' Hex Hex Hex Hex Hex Hex

There are no at-rules, combinators, or pseudo-classes. The first grammar
violation aborts the parse with MalformedStylesheet.
"""

from __future__ import annotations

import logging
import string

from robinson.cursor import Cursor
from robinson.errors import ErrorKind, MalformedStylesheet
from robinson.stylesheet.model import (
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    Unit,
    Value,
    specificity,
)

__all__ = ["parse_css"]

logger = logging.getLogger(__name__)


def _is_identifier_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in "-_"


def _is_number_char(char: str) -> bool:
    return char in string.digits or char == "."


class _CSSParser:
    def __init__(self, source: str) -> None:
        self.cursor = Cursor(source, error=MalformedStylesheet)

    def parse_rules(self) -> list[Rule]:
        rules: list[Rule] = []
        while True:
            self.cursor.consume_whitespace()
            if self.cursor.at_end():
                break
            rules.append(self.parse_rule())
        return rules

    def parse_rule(self) -> Rule:
        selectors = self.parse_selectors()
        declarations = self.parse_declarations()
        return Rule(selectors=tuple(selectors), declarations=tuple(declarations))

    def parse_selectors(self) -> list[Selector]:
        """Parse a comma-separated selector list, most specific first."""
        cursor = self.cursor
        selectors: list[Selector] = []
        while True:
            selectors.append(self.parse_simple_selector())
            cursor.consume_whitespace()
            char = cursor.peek()
            if char == ",":
                cursor.advance()
                cursor.consume_whitespace()
            elif char == "{":
                break
            else:
                cursor.fail(
                    ErrorKind.UNEXPECTED_CHARACTER,
                    f"Unexpected character {char!r} in selector list",
                )
        # sorted() is stable, so equal specificities keep source order.
        return sorted(selectors, key=specificity, reverse=True)

    def parse_simple_selector(self) -> SimpleSelector:
        cursor = self.cursor
        tag_name: str | None = None
        id_: str | None = None
        classes: list[str] = []
        while not cursor.at_end():
            char = cursor.peek()
            if char == "#":
                cursor.advance()
                id_ = self.parse_identifier()
            elif char == ".":
                cursor.advance()
                classes.append(self.parse_identifier())
            elif char == "*":
                cursor.advance()
            elif _is_identifier_char(char):
                tag_name = self.parse_identifier()
            else:
                break
        return SimpleSelector(tag_name=tag_name, id=id_, classes=tuple(classes))

    def parse_declarations(self) -> list[Declaration]:
        cursor = self.cursor
        cursor.expect("{")
        declarations: list[Declaration] = []
        while True:
            cursor.consume_whitespace()
            if cursor.peek() == "}":
                cursor.advance()
                break
            declarations.append(self.parse_declaration())
        return declarations

    def parse_declaration(self) -> Declaration:
        """Parse one ``name: value;`` pair."""
        cursor = self.cursor
        name = self.parse_identifier()
        cursor.consume_whitespace()
        cursor.expect(":")
        cursor.consume_whitespace()
        value = self.parse_value()
        cursor.consume_whitespace()
        cursor.expect(";")
        return Declaration(name=name, value=value)

    def parse_value(self) -> Value:
        char = self.cursor.peek()
        if char in string.digits:
            return self.parse_length()
        if char == "#":
            return self.parse_color()
        return Keyword(self.parse_identifier())

    def parse_length(self) -> Length:
        cursor = self.cursor
        start = cursor.position
        literal = cursor.consume_while(_is_number_char)
        try:
            number = float(literal)
        except ValueError:
            cursor.fail(
                ErrorKind.INVALID_NUMERIC_LITERAL,
                f"Invalid number {literal!r}",
                start,
            )
        unit_start = cursor.position
        unit_name = self.parse_identifier()
        try:
            unit = Unit(unit_name.lower())
        except ValueError:
            cursor.fail(
                ErrorKind.UNRECOGNIZED_UNIT,
                f"Unrecognized unit {unit_name!r}",
                unit_start,
            )
        try:
            return Length(value=number, unit=unit)
        except ValueError:
            cursor.fail(
                ErrorKind.INVALID_NUMERIC_LITERAL,
                f"Number {literal!r} is out of range",
                start,
            )

    def parse_color(self) -> Color:
        self.cursor.expect("#")
        return Color(
            r=self.parse_hex_pair(),
            g=self.parse_hex_pair(),
            b=self.parse_hex_pair(),
            a=255,
        )

    def parse_hex_pair(self) -> int:
        cursor = self.cursor
        start = cursor.position
        pair = cursor.advance() + cursor.advance()
        if not all(c in string.hexdigits for c in pair):
            cursor.fail(
                ErrorKind.INVALID_NUMERIC_LITERAL,
                f"Invalid hex color component {pair!r}",
                start,
            )
        return int(pair, 16)

    def parse_identifier(self) -> str:
        return self.cursor.consume_while(_is_identifier_char)


def parse_css(source: str) -> Stylesheet:
    """Parse a CSS source string into a Stylesheet.

    Rules keep source order; each rule's selectors are sorted by
    descending specificity.

    Raises:
        MalformedStylesheet: On the first grammar violation.
    """
    parser = _CSSParser(source)
    try:
        rules = parser.parse_rules()
    except MalformedStylesheet as exc:
        logger.debug("CSS parse failed: %s at offset %d", exc.kind.value, exc.position)
        raise
    logger.debug("Parsed %d CSS rule(s)", len(rules))
    return Stylesheet(rules=tuple(rules))
