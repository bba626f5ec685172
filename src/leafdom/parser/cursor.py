"""Character cursor shared by the markup and style parsers."""

from __future__ import annotations

from typing import Callable

from leafdom.parser.errors import ErrorKind, ParseError


def is_ascii_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


class Cursor:
    """A read position over an immutable source string.

    All ``consume_*`` helpers advance the position. ``expect`` and
    ``next_char`` raise ``ParseError`` instead of returning a sentinel, so a
    parser built on top never sees a half-read construct.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    # ---- lookahead ----

    def eof(self) -> bool:
        return self.pos >= len(self.source)

    def next_char(self, expected: str = "a character") -> str:
        if self.eof():
            raise self.error(f"Expected {expected}", ErrorKind.UNEXPECTED_EOF)
        return self.source[self.pos]

    def starts_with(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.pos)

    # ---- consumption ----

    def consume_char(self) -> str:
        c = self.next_char()
        self.pos += 1
        return c

    def consume_while(self, test: Callable[[str], bool]) -> str:
        start = self.pos
        while not self.eof() and test(self.source[self.pos]):
            self.pos += 1
        return self.source[start : self.pos]

    def consume_whitespace(self) -> None:
        self.consume_while(str.isspace)

    def expect(self, literal: str) -> None:
        """Consume ``literal`` or fail at the first character that differs."""
        for expected in literal:
            found = self.next_char(repr(expected))
            if found != expected:
                raise self.error(
                    f"Expected {expected!r} but found {found!r}",
                    ErrorKind.UNEXPECTED_CHARACTER,
                )
            self.pos += 1

    # ---- errors ----

    def error(self, message: str, kind: ErrorKind, position: int | None = None) -> ParseError:
        return ParseError.at(self.source, self.pos if position is None else position, message, kind)
