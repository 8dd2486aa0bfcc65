"""DOM model: Element and Text nodes produced by the HTML parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union


@dataclass(frozen=True)
class Text:
    """A run of character data."""

    data: str

    @property
    def children(self) -> tuple[Node, ...]:
        return ()


@dataclass(frozen=True)
class Element:
    """An element with a tag name, attributes, and owned children.

    Attributes:
        tag_name: Tag name exactly as written in the source.
        attributes: Attribute values by name, read-only.
        children: Child nodes in source order.
    """

    tag_name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))

    def __hash__(self) -> int:
        return hash((self.tag_name, frozenset(self.attributes.items()), self.children))

    @property
    def id(self) -> str | None:
        return self.attributes.get("id")

    def classes(self) -> set[str]:
        """Return the whitespace-separated names in the ``class`` attribute."""
        return set(self.attributes.get("class", "").split())


Node = Union[Element, Text]


def text(data: str) -> Text:
    return Text(data=data)


def elem(
    tag_name: str, attributes: Mapping[str, str], children: list[Node] | tuple[Node, ...]
) -> Element:
    return Element(tag_name=tag_name, attributes=attributes, children=tuple(children))


def dump(node: Node, indent: str = "  ") -> str:
    """Render a tree one node per line, children indented under their parent."""
    lines: list[str] = []
    _dump(node, 0, indent, lines)
    return "\n".join(lines)


def _dump(node: Node, depth: int, indent: str, lines: list[str]) -> None:
    prefix = indent * depth
    if isinstance(node, Text):
        lines.append(f"{prefix}{node.data!r}")
        return
    attrs = "".join(f' {k}="{v}"' for k, v in sorted(node.attributes.items()))
    lines.append(f"{prefix}<{node.tag_name}{attrs}>")
    for child in node.children:
        _dump(child, depth + 1, indent, lines)
