"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Options for the HTML parser.

    Attributes:
        root_tag: Tag of the element synthesized around several top-level nodes.
        attribute_quotes: Characters accepted as attribute value quotes.
        max_depth: Deepest element nesting accepted before the parse aborts.
    """

    root_tag: str = "html"
    attribute_quotes: str = "\"'"
    max_depth: int = 256

    def __post_init__(self) -> None:
        if not self.attribute_quotes:
            raise ValueError("attribute_quotes must name at least one character")
        if not self.root_tag:
            raise ValueError("root_tag must be a non-empty string")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    @classmethod
    def legacy(cls) -> ParserConfig:
        """Accept '/' as an attribute quote, as early versions of the parser did."""
        return cls(attribute_quotes="\"/")
