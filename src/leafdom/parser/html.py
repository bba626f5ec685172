"""Hand-written recursive-descent parser for markup documents.

Supported syntax:
    <div id="main" hidden>text <b>bold</b></div>
    <img src='a.png'/>
    <!-- comment -->
    <style>h1 { color: #ff0000; }</style>
"""

from __future__ import annotations

import logging

from leafdom.model.document import Document
from leafdom.model.node import (
    AttrMap,
    Comment,
    Element,
    Implicit,
    Node,
    Text,
    TextValue,
)
from leafdom.parser.cursor import Cursor, is_ascii_alnum
from leafdom.parser.errors import ErrorKind, ParseError

__all__ = ["HtmlParser", "parse_html", "parse_nodes"]

logger = logging.getLogger(__name__)

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
CLOSING_TAG_OPEN = "</"
STYLE_TAG = "style"
WRAPPER_TAG = "html"


def _is_attr_name_char(c: str) -> bool:
    return is_ascii_alnum(c) or c in "-_"


class HtmlParser(Cursor):
    """Markup parser that forwards ``<style>`` contents to a ``Document``."""

    def __init__(self, source: str, context: Document):
        super().__init__(source)
        self.context = context

    def parse(self) -> Node:
        """Parse the whole input and return a single root node."""
        nodes = self.parse_nodes()
        if not self.eof():
            raise self.error("Unexpected closing tag at top level", ErrorKind.UNEXPECTED_CHARACTER)
        if len(nodes) == 1:
            return nodes[0]
        return Element(WRAPPER_TAG, AttrMap(), nodes)

    # ---- sequences ----

    def parse_nodes(self) -> list[Node]:
        nodes: list[Node] = []
        while True:
            self.consume_whitespace()
            if self.eof() or self.starts_with(CLOSING_TAG_OPEN):
                break
            nodes.append(self.parse_node())
        return nodes

    def parse_node(self) -> Node:
        if self.starts_with(COMMENT_OPEN):
            return self.parse_comment()
        if self.next_char() == "<":
            return self.parse_element()
        return self.parse_text()

    # ---- leaves ----

    def parse_text(self) -> Text:
        return Text(self.consume_while(lambda c: c != "<"))

    def parse_comment(self) -> Comment:
        self.expect(COMMENT_OPEN)
        end = self.source.find(COMMENT_CLOSE, self.pos)
        if end == -1:
            raise self.error(f"Expected {COMMENT_CLOSE!r} to close comment", ErrorKind.UNEXPECTED_EOF)
        data = self.source[self.pos : end]
        self.pos = end
        self.expect(COMMENT_CLOSE)
        return Comment(data.strip())

    # ---- elements ----

    def parse_tag_name(self) -> str:
        name = self.consume_while(is_ascii_alnum)
        if not name:
            raise self.error(
                f"Expected tag name but found {self.next_char('tag name')!r}",
                ErrorKind.UNEXPECTED_CHARACTER,
            )
        return name

    def parse_element(self) -> Element:
        # Opening tag.
        self.expect("<")
        tag_name = self.parse_tag_name()
        attributes = self.parse_attributes()

        if self.next_char() == "/":
            self.expect("/>")
            return Element(tag_name, attributes, [])
        self.expect(">")

        # Contents.
        contents_start = self.pos
        children = self.parse_nodes()

        if tag_name == STYLE_TAG and children and isinstance(children[0], Text):
            self._load_style(children[0].text, contents_start)

        # Closing tag.
        start = self.pos
        self.expect(CLOSING_TAG_OPEN)
        closing_name = self.consume_while(is_ascii_alnum)
        if closing_name != tag_name:
            raise self.error(
                f"Closing tag </{closing_name}> does not match <{tag_name}>",
                ErrorKind.MISMATCHED_CLOSING_TAG,
                position=start,
            )
        self.expect(">")

        return Element(tag_name, attributes, children)

    def _load_style(self, style_text: str, contents_start: int) -> None:
        """Hand a style block to the context, reporting errors in document coordinates."""
        # The text node starts after the whitespace that parse_nodes skipped.
        text_start = self.source.index(style_text, contents_start)
        logger.debug("Forwarding <style> block at position %d", text_start)
        try:
            self.context.load_css(style_text)
        except ParseError as exc:
            raise ParseError.at(self.source, text_start + exc.position, exc.message, exc.kind) from exc

    # ---- attributes ----

    def parse_attributes(self) -> AttrMap:
        attributes = AttrMap()
        while True:
            self.consume_whitespace()
            if self.next_char("'>' or '/'") in ">/":
                break
            name, value = self.parse_attr()
            attributes[name] = Implicit() if value is None else TextValue(value)
        return attributes

    def parse_attr(self) -> tuple[str, str | None]:
        """Parse ``name`` or ``name="value"``; the value is None when absent."""
        name = self.consume_while(_is_attr_name_char)
        if not name:
            raise self.error(
                f"Expected attribute name but found {self.next_char()!r}",
                ErrorKind.UNEXPECTED_CHARACTER,
            )
        if not self.eof() and self.next_char() == "=":
            self.consume_char()
            return name, self.parse_attr_value()
        return name, None

    def parse_attr_value(self) -> str:
        open_quote = self.next_char("quoted attribute value")
        if open_quote not in "\"'":
            raise self.error(
                f"Expected quoted attribute value but found {open_quote!r}",
                ErrorKind.UNEXPECTED_CHARACTER,
            )
        self.consume_char()
        value = self.consume_while(lambda c: c != open_quote)
        self.expect(open_quote)
        return value


def parse_nodes(source: str, context: Document) -> Node:
    """Parse markup into a single root node, loading styles into ``context``."""
    return HtmlParser(source, context).parse()


def parse_html(source: str) -> Document:
    """Parse a markup string into a Document holding the tree and its stylesheets."""
    document = Document()
    document.load_html(source)
    return document
