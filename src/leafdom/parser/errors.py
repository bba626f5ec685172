"""Parser error types."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """What went wrong while parsing markup or style text."""

    UNEXPECTED_CHARACTER = "unexpected character"
    UNEXPECTED_EOF = "unexpected end of input"
    UNRECOGNIZED_UNIT = "unrecognized unit"
    MISMATCHED_CLOSING_TAG = "mismatched closing tag"


class ParseError(Exception):
    """Raised when markup or style source cannot be parsed.

    ``position`` is a character offset into the source. ``line`` and
    ``column`` are 1-based and derived from it when the source is known.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        position: int,
        line: int | None = None,
        column: int | None = None,
    ):
        self.message = message
        self.kind = kind
        self.position = position
        self.line = line
        self.column = column
        super().__init__(self._format())

    @classmethod
    def at(cls, source: str, position: int, message: str, kind: ErrorKind) -> ParseError:
        """Build an error for ``position`` in ``source``, filling in line and column."""
        consumed = source[:position]
        line = consumed.count("\n") + 1
        column = position - (consumed.rfind("\n") + 1) + 1
        return cls(message, kind, position, line=line, column=column)

    def _format(self) -> str:
        if self.line is None:
            return f"{self.message} at position {self.position}"
        return f"{self.message} at line {self.line}, column {self.column}"
