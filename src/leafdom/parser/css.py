"""Hand-written recursive-descent parser for style sheets.

Syntax example:
    h1, .title { font-size: 14px; }
    div.note#main { color: #336699; display: block; }
    * { margin: 0px; }
"""

from __future__ import annotations

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
from leafdom.parser.cursor import Cursor, is_ascii_alnum
from leafdom.parser.errors import ErrorKind

__all__ = ["CssParser", "parse_css"]

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _is_identifier_char(c: str) -> bool:
    return is_ascii_alnum(c) or c == "-"


def _is_number_char(c: str) -> bool:
    return c.isascii() and (c.isdigit() or c == ".")


class CssParser(Cursor):
    """Style-sheet parser. Holds nothing but its cursor."""

    def parse(self) -> Stylesheet:
        return Stylesheet(rules=self.parse_rules())

    def parse_rules(self) -> list[Rule]:
        rules: list[Rule] = []
        self.consume_whitespace()
        while not self.eof():
            rules.append(self.parse_rule())
            self.consume_whitespace()
        return rules

    def parse_rule(self) -> Rule:
        selectors = self.parse_selectors()
        declarations = self.parse_declarations()
        return Rule(selectors=selectors, declarations=declarations)

    # ---- selectors ----

    def parse_selectors(self) -> list[Selector]:
        selectors: list[Selector] = []
        while True:
            selectors.append(self.parse_simple_selector())
            self.consume_whitespace()
            c = self.next_char("',' or '{'")
            if c == ",":
                self.consume_char()
                self.consume_whitespace()
            elif c == "{":
                break
            else:
                raise self.error(f"Unexpected character {c!r} in selector list", ErrorKind.UNEXPECTED_CHARACTER)
        return selectors

    def parse_simple_selector(self) -> SimpleSelector:
        selector = SimpleSelector()
        while True:
            self.consume_whitespace()
            if self.eof():
                break
            c = self.next_char()
            if c == "#":
                self.consume_char()
                selector.id = self._parse_matcher_name("id")
            elif c == ".":
                self.consume_char()
                selector.classes.append(self._parse_matcher_name("class name"))
            elif c == "*":
                self.consume_char()
                if not self.next_char("whitespace after '*'").isspace():
                    raise self.error(
                        f"Expected whitespace after '*' but found {self.next_char()!r}",
                        ErrorKind.UNEXPECTED_CHARACTER,
                    )
            elif is_ascii_alnum(c):
                selector.tag_name = self.parse_identifier()
            else:
                break
        return selector

    def _parse_matcher_name(self, what: str) -> str:
        c = self.next_char(what)
        if not is_ascii_alnum(c):
            raise self.error(f"Expected {what} but found {c!r}", ErrorKind.UNEXPECTED_CHARACTER)
        return self.parse_identifier()

    def parse_identifier(self) -> str:
        return self.consume_while(_is_identifier_char)

    # ---- declarations ----

    def parse_declarations(self) -> list[Declaration]:
        self.expect("{")
        declarations: list[Declaration] = []
        while True:
            self.consume_whitespace()
            if self.next_char("'}'") == "}":
                self.consume_char()
                break
            name = self.parse_identifier()
            if not name:
                raise self.error(
                    f"Expected property name but found {self.next_char()!r}",
                    ErrorKind.UNEXPECTED_CHARACTER,
                )
            self.consume_whitespace()
            self.expect(":")
            self.consume_whitespace()
            value = self.parse_value()
            self.consume_whitespace()
            self.expect(";")
            declarations.append(Declaration(name=name, value=value))
        return declarations

    def parse_value(self) -> Value:
        c = self.next_char("declaration value")
        if c.isascii() and c.isdigit():
            return self.parse_length()
        if c == "#":
            return self.parse_color()
        keyword = self.parse_identifier()
        if not keyword:
            raise self.error(f"Expected declaration value but found {c!r}", ErrorKind.UNEXPECTED_CHARACTER)
        return Keyword(keyword)

    def parse_length(self) -> Length:
        return Length(self.parse_float(), self.parse_unit())

    def parse_float(self) -> float:
        start = self.pos
        literal = self.consume_while(_is_number_char)
        if literal.count(".") > 1:
            raise self.error(f"Malformed number {literal!r}", ErrorKind.UNEXPECTED_CHARACTER, position=start)
        return float(literal)

    def parse_unit(self) -> Unit:
        start = self.pos
        unit = self.parse_identifier()
        if unit.lower() == Unit.PX.value:
            return Unit.PX
        raise self.error(f"Unrecognized unit {unit!r}", ErrorKind.UNRECOGNIZED_UNIT, position=start)

    def parse_color(self) -> Color:
        self.expect("#")
        return Color(self.parse_hex_pair(), self.parse_hex_pair(), self.parse_hex_pair(), 255)

    def parse_hex_pair(self) -> int:
        start = self.pos
        for _ in range(2):
            c = self.next_char("hex digit")
            if c not in HEX_DIGITS:
                raise self.error(f"Expected hex digit but found {c!r}", ErrorKind.UNEXPECTED_CHARACTER)
            self.pos += 1
        return int(self.source[start : self.pos], 16)


def parse_css(source: str) -> Stylesheet:
    """Parse a style-sheet string into a Stylesheet with rules in source order."""
    return CssParser(source).parse()
