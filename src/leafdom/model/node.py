"""Node tree model: Element, Text and Comment nodes plus attribute values."""

from __future__ import annotations

from dataclasses import dataclass, field


class AttrValue:
    """Value of a single markup attribute. See ``TextValue`` and ``Implicit``."""


@dataclass(frozen=True)
class TextValue(AttrValue):
    """An attribute written with an explicit quoted value, e.g. ``href="/"``."""

    text: str


@dataclass(frozen=True)
class Implicit(AttrValue):
    """A bare attribute with no value, e.g. ``disabled``."""


class AttrMap(dict[str, AttrValue]):
    """Attribute name to value mapping. Later duplicates overwrite earlier ones."""

    def __str__(self) -> str:
        from leafdom.render import format_attributes

        return format_attributes(self)


class Node:
    """Base class of every node variant.

    Variants: ``Element``, ``Text``, ``Comment`` and
    ``leafdom.model.document.Document``.
    """

    def __str__(self) -> str:
        from leafdom.render import pretty

        return pretty(self)


@dataclass
class Element(Node):
    """A markup element with attributes and ordered children."""

    tag_name: str
    attributes: AttrMap = field(default_factory=AttrMap)
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.tag_name:
            raise ValueError("Element tag_name must be a non-empty string")


@dataclass
class Text(Node):
    """A run of character data."""

    text: str


@dataclass
class Comment(Node):
    """A ``<!-- ... -->`` comment; ``text`` excludes the delimiters."""

    text: str


def element(tag_name: str, attributes: AttrMap | None = None, children: list[Node] | None = None) -> Element:
    return Element(tag_name, attributes if attributes is not None else AttrMap(), children or [])


def text(data: str) -> Text:
    return Text(data)


def comment(data: str) -> Comment:
    return Comment(data)
