from robinson.dom.model import Element, Node, Text, dump, elem, text
from robinson.dom.parser import parse_html

__all__ = ["parse_html", "Node", "Element", "Text", "elem", "text", "dump"]
