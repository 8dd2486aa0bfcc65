"""Stylesheet model: selectors, declarations, values, and rules."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Union


class Specificity(NamedTuple):
    """Selector weight, compared lexicographically: ids, then classes, then tags."""

    ids: int
    classes: int
    tags: int


@dataclass(frozen=True)
class SimpleSelector:
    """An optional tag name, an optional id, and any number of class names."""

    tag_name: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()

    def specificity(self) -> Specificity:
        return Specificity(
            ids=1 if self.id is not None else 0,
            classes=len(self.classes),
            tags=1 if self.tag_name is not None else 0,
        )

    def __str__(self) -> str:
        text = self.tag_name or ""
        if self.id is not None:
            text += f"#{self.id}"
        text += "".join(f".{name}" for name in self.classes)
        return text or "*"


# Only simple selectors exist; combinators would join this union.
Selector = Union[SimpleSelector]


def specificity(selector: Selector) -> Specificity:
    if isinstance(selector, SimpleSelector):
        return selector.specificity()
    raise TypeError(f"Unknown selector type: {type(selector).__name__}")


class Unit(Enum):
    PX = "px"


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        raise ValueError(f"Length out of 32-bit float range: {value}") from None


@dataclass(frozen=True)
class Keyword:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Length:
    """A number with a unit. The number is held at 32-bit float precision."""

    value: float
    unit: Unit

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_float32(self.value))

    def to_px(self) -> float:
        # px is the only unit
        return self.value

    def __str__(self) -> str:
        # Plain decimal notation; the grammar has no exponents.
        number = format(Decimal(repr(self.value)), "f")
        if "." in number:
            number = number.rstrip("0").rstrip(".")
        return f"{number}{self.unit.value}"


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def __str__(self) -> str:
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 255:
            text += f"{self.a:02x}"
        return text


Value = Union[Keyword, Length, Color]


@dataclass(frozen=True)
class Declaration:
    """A property name paired with its value."""

    name: str
    value: Value

    def __str__(self) -> str:
        return f"{self.name}: {self.value};"


@dataclass(frozen=True)
class Rule:
    """Selectors (highest specificity first) and their declarations in source order."""

    selectors: tuple[Selector, ...]
    declarations: tuple[Declaration, ...] = ()

    def __str__(self) -> str:
        selectors = ", ".join(str(s) for s in self.selectors)
        if not self.declarations:
            return f"{selectors} {{}}"
        body = " ".join(str(d) for d in self.declarations)
        return f"{selectors} {{ {body} }}"


@dataclass(frozen=True)
class Stylesheet:
    """Rules in source order."""

    rules: tuple[Rule, ...] = ()

    def __str__(self) -> str:
        return "\n".join(str(rule) for rule in self.rules)
