from robinson.stylesheet.parser import parse_css
from robinson.stylesheet.model import (
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
    specificity,
)

__all__ = [
    "parse_css",
    "Stylesheet",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Specificity",
    "specificity",
    "Declaration",
    "Value",
    "Keyword",
    "Length",
    "Color",
    "Unit",
]
