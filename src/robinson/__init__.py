"""Robinson - recursive-descent parsers for a small subset of HTML and CSS."""

__version__ = "0.1.0"

from robinson.config import ParserConfig  # noqa: E402
from robinson.dom import Element, Node, Text, dump, parse_html  # noqa: E402
from robinson.errors import (  # noqa: E402
    ErrorKind,
    MalformedMarkup,
    MalformedStylesheet,
    ParseError,
)
from robinson.stylesheet import (  # noqa: E402
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Specificity,
    Stylesheet,
    Unit,
    Value,
    parse_css,
)

__all__ = [
    "__version__",
    # entry points
    "parse_html",
    "parse_css",
    "ParserConfig",
    # dom
    "Node",
    "Element",
    "Text",
    "dump",
    # stylesheet
    "Stylesheet",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Specificity",
    "Declaration",
    "Value",
    "Keyword",
    "Length",
    "Color",
    "Unit",
    # errors
    "ErrorKind",
    "ParseError",
    "MalformedMarkup",
    "MalformedStylesheet",
]
