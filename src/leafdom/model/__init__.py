"""leafdom model layer -- public type re-exports."""

from leafdom.model.document import Document
from leafdom.model.node import (
    AttrMap,
    AttrValue,
    Comment,
    Element,
    Implicit,
    Node,
    Text,
    TextValue,
    comment,
    element,
    text,
)
from leafdom.model.stylesheet import (
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
)

__all__ = [
    # node
    "Node",
    "Element",
    "Text",
    "Comment",
    "Document",
    "AttrMap",
    "AttrValue",
    "TextValue",
    "Implicit",
    "element",
    "text",
    "comment",
    # stylesheet
    "Stylesheet",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Declaration",
    "Value",
    "Keyword",
    "Length",
    "Color",
    "Unit",
]
