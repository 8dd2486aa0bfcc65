"""Hand-written recursive-descent parser for a small subset of HTML.

Grammar:
    Nodes     = ( Node )*            -- stops at end of input or '</'
    Node      = Element | Text
    Element   = '<' Name Attribute* '>' Nodes '</' Name '>'
    Attribute = Name '=' Quote Chars Quote
    Text      = any characters up to the next '<'
    Name      = [A-Za-z0-9]+

Every element must be closed explicitly by a matching tag. There are no
comments, entities, or void elements. The first grammar violation, or
nesting deeper than ParserConfig.max_depth, aborts the parse with
MalformedMarkup.
"""

from __future__ import annotations

import logging

from robinson.config import ParserConfig
from robinson.cursor import Cursor
from robinson.dom.model import Element, Node, elem, text
from robinson.errors import ErrorKind, MalformedMarkup

__all__ = ["parse_html"]

logger = logging.getLogger(__name__)


def _is_name_char(char: str) -> bool:
    return char.isascii() and char.isalnum()


class _HTMLParser:
    def __init__(self, source: str, config: ParserConfig) -> None:
        self.cursor = Cursor(source, error=MalformedMarkup)
        self.config = config
        self.depth = 0

    def parse_nodes(self) -> list[Node]:
        """Parse a sequence of sibling nodes."""
        nodes: list[Node] = []
        while True:
            self.cursor.consume_whitespace()
            if self.cursor.at_end() or self.cursor.starts_with("</"):
                break
            nodes.append(self.parse_node())
        return nodes

    def parse_node(self) -> Node:
        if self.cursor.peek() == "<":
            return self.parse_element()
        return text(self.cursor.consume_while(lambda c: c != "<"))

    def parse_element(self) -> Element:
        cursor = self.cursor
        if self.depth >= self.config.max_depth:
            cursor.fail(
                ErrorKind.NESTING_TOO_DEEP,
                f"Elements nested deeper than {self.config.max_depth} levels",
            )
        self.depth += 1
        cursor.expect("<")
        tag_name = self.parse_name()
        attributes = self.parse_attributes()
        cursor.expect(">")

        children = self.parse_nodes()

        cursor.expect("<")
        cursor.expect("/")
        close_position = cursor.position
        closing = self.parse_name()
        if closing != tag_name:
            cursor.fail(
                ErrorKind.MISMATCHED_TAG,
                f"Closing tag </{closing}> does not match <{tag_name}>",
                close_position,
            )
        cursor.expect(">")
        self.depth -= 1
        return elem(tag_name, attributes, children)

    def parse_name(self) -> str:
        """Parse a tag or attribute name."""
        return self.cursor.consume_while(_is_name_char)

    def parse_attributes(self) -> dict[str, str]:
        attributes: dict[str, str] = {}
        while True:
            self.cursor.consume_whitespace()
            if self.cursor.peek() == ">":
                break
            name, value = self.parse_attribute()
            attributes[name] = value
        return attributes

    def parse_attribute(self) -> tuple[str, str]:
        """Parse a single name="value" pair."""
        name = self.parse_name()
        self.cursor.expect("=")
        return name, self.parse_attribute_value()

    def parse_attribute_value(self) -> str:
        cursor = self.cursor
        position = cursor.position
        quote = cursor.advance()
        if quote not in self.config.attribute_quotes:
            cursor.fail(
                ErrorKind.UNEXPECTED_CHARACTER,
                f"Expected a quoted attribute value but found {quote!r}",
                position,
            )
        value = cursor.consume_while(lambda c: c != quote)
        cursor.expect(quote)
        return value


def parse_html(source: str, config: ParserConfig | None = None) -> Node:
    """Parse an HTML document and return its root node.

    A document with exactly one top-level node returns that node; anything
    else is wrapped in a synthetic ``config.root_tag`` element.

    Raises:
        MalformedMarkup: On the first grammar violation, or when elements
            nest deeper than ``config.max_depth``.
    """
    config = config or ParserConfig()
    parser = _HTMLParser(source, config)
    try:
        nodes = parser.parse_nodes()
        if not parser.cursor.at_end():
            parser.cursor.fail(
                ErrorKind.UNEXPECTED_CHARACTER, "Closing tag without a matching open tag"
            )
    except RecursionError as exc:
        # max_depth set beyond what the interpreter stack allows
        err = parser.cursor.error_at(
            ErrorKind.NESTING_TOO_DEEP, "Elements nested too deeply to parse"
        )
        logger.debug("HTML parse failed: %s at offset %d", err.kind.value, err.position)
        raise err from exc
    except MalformedMarkup as exc:
        logger.debug("HTML parse failed: %s at offset %d", exc.kind.value, exc.position)
        raise
    logger.debug("Parsed %d top-level HTML node(s)", len(nodes))
    if len(nodes) == 1:
        return nodes[0]
    return elem(config.root_tag, {}, nodes)
