"""Textual renderings of the node tree and the style-sheet model.

``pretty`` and ``format_style`` produce the indented human-readable forms
used by ``str()``; ``to_dict`` produces a raw field-by-field dump that the
CLI serialises as JSON.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from leafdom.model.document import Document
from leafdom.model.node import AttrMap, AttrValue, Comment, Element, Implicit, Node, Text, TextValue
from leafdom.model.stylesheet import (
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    SimpleSelector,
    Stylesheet,
    Value,
)

DEFAULT_INDENT = "  "


# ---------------------------------------------------------------------------
# Node tree
# ---------------------------------------------------------------------------


def format_attr(name: str, value: AttrValue) -> str:
    if isinstance(value, TextValue):
        return f'{name}="{value.text}"'
    if isinstance(value, Implicit):
        return name
    raise TypeError(f"Unknown attribute value type: {type(value).__name__}")


def format_attributes(attributes: AttrMap) -> str:
    return " ".join(format_attr(name, value) for name, value in attributes.items())


def pretty(node: Node, indent: str = DEFAULT_INDENT) -> str:
    """Render ``node`` and its descendants as indented markup-like text."""
    lines: list[str] = []
    _pretty_lines(node, 0, indent, lines)
    return "".join(lines)


def _pretty_lines(node: Node, depth: int, indent: str, out: list[str]) -> None:
    pad = indent * depth
    if isinstance(node, Element):
        opening = f"{pad}<{node.tag_name}"
        if node.attributes:
            opening += f" {format_attributes(node.attributes)}"
        if not node.children:
            out.append(f"{opening}></{node.tag_name}>\n")
            return
        out.append(f"{opening}>\n")
        for child in node.children:
            _pretty_lines(child, depth + 1, indent, out)
        out.append(f"{pad}</{node.tag_name}>\n")
    elif isinstance(node, Text):
        out.append(f"{pad}{node.text}\n")
    elif isinstance(node, Comment):
        out.append(f"{pad}<!-- {node.text} -->\n")
    elif isinstance(node, Document):
        # Tree-shape renderer only; documents are not serialised.
        return
    else:
        raise TypeError(f"Unknown node type: {type(node).__name__}")


# ---------------------------------------------------------------------------
# Style sheets
# ---------------------------------------------------------------------------


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    # Positional notation only; the style parser cannot read exponents.
    return format(Decimal(repr(float(value))), "f")


def format_value(value: Value) -> str:
    if isinstance(value, Keyword):
        return value.keyword
    if isinstance(value, Color):
        return f"rgba({value.r}, {value.g}, {value.b}, {value.a})"
    if isinstance(value, Length):
        return f"{format_number(value.value)}{value.unit.value}"
    raise TypeError(f"Unknown value type: {type(value).__name__}")


def format_selector(selector: SimpleSelector) -> str:
    if not isinstance(selector, SimpleSelector):
        raise TypeError(f"Unknown selector type: {type(selector).__name__}")
    if selector.is_universal:
        return "*"
    parts = [selector.tag_name or ""]
    parts.extend(f".{name}" for name in selector.classes)
    if selector.id is not None:
        parts.append(f"#{selector.id}")
    return "".join(parts)


def format_declaration(declaration: Declaration) -> str:
    return f"{declaration.name}: {format_value(declaration.value)};"


def format_rule(rule: Rule, indent: str = DEFAULT_INDENT) -> str:
    selectors = ", ".join(format_selector(s) for s in rule.selectors)
    declarations = "".join(format_declaration(d) for d in rule.declarations)
    return f"{selectors} {{\n{indent}{declarations}\n}}\n"


def pretty_stylesheet(stylesheet: Stylesheet, indent: str = DEFAULT_INDENT) -> str:
    if not stylesheet.rules:
        return ""
    return "\n".join(format_rule(rule, indent) for rule in stylesheet.rules) + "\n"


def format_style(obj: object) -> str:
    """``str()`` for any style-sheet model object."""
    if isinstance(obj, Stylesheet):
        return pretty_stylesheet(obj)
    if isinstance(obj, Rule):
        return format_rule(obj)
    if isinstance(obj, Declaration):
        return format_declaration(obj)
    if isinstance(obj, SimpleSelector):
        return format_selector(obj)
    if isinstance(obj, Value):
        return format_value(obj)
    raise TypeError(f"Unknown style-sheet object: {type(obj).__name__}")


# ---------------------------------------------------------------------------
# Raw structural dump
# ---------------------------------------------------------------------------


def to_dict(obj: Node | Stylesheet) -> dict[str, Any]:
    """Dump a node or stylesheet field by field into JSON-safe dicts."""
    if isinstance(obj, Stylesheet):
        return {"type": "stylesheet", "rules": [_rule_to_dict(r) for r in obj.rules]}
    if isinstance(obj, Element):
        return {
            "type": "element",
            "tag_name": obj.tag_name,
            "attributes": {name: _attr_to_dict(v) for name, v in obj.attributes.items()},
            "children": [to_dict(child) for child in obj.children],
        }
    if isinstance(obj, Text):
        return {"type": "text", "text": obj.text}
    if isinstance(obj, Comment):
        return {"type": "comment", "text": obj.text}
    if isinstance(obj, Document):
        return {
            "type": "document",
            "root": to_dict(obj.root) if obj.root is not None else None,
            "stylesheets": [to_dict(s) for s in obj.stylesheets],
        }
    raise TypeError(f"Unknown node type: {type(obj).__name__}")


def _attr_to_dict(value: AttrValue) -> dict[str, Any]:
    if isinstance(value, TextValue):
        return {"type": "text", "text": value.text}
    if isinstance(value, Implicit):
        return {"type": "implicit"}
    raise TypeError(f"Unknown attribute value type: {type(value).__name__}")


def _rule_to_dict(rule: Rule) -> dict[str, Any]:
    return {
        "selectors": [_selector_to_dict(s) for s in rule.selectors],
        "declarations": [
            {"name": d.name, "value": _value_to_dict(d.value)} for d in rule.declarations
        ],
    }


def _selector_to_dict(selector: SimpleSelector) -> dict[str, Any]:
    if not isinstance(selector, SimpleSelector):
        raise TypeError(f"Unknown selector type: {type(selector).__name__}")
    return {
        "type": "single",
        "tag_name": selector.tag_name,
        "id": selector.id,
        "classes": list(selector.classes),
    }


def _value_to_dict(value: Value) -> dict[str, Any]:
    if isinstance(value, Keyword):
        return {"type": "keyword", "keyword": value.keyword}
    if isinstance(value, Length):
        return {"type": "length", "value": value.value, "unit": value.unit.value}
    if isinstance(value, Color):
        return {"type": "color", "r": value.r, "g": value.g, "b": value.b, "a": value.a}
    raise TypeError(f"Unknown value type: {type(value).__name__}")
