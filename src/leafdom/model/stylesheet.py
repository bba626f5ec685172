"""Style-sheet model: rules, selectors, declarations and values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class _Rendered:
    """Mixin giving model objects their textual style-sheet form as ``str()``."""

    def __str__(self) -> str:
        from leafdom.render import format_style

        return format_style(self)


# ---- selectors ----


class Selector(_Rendered):
    """A rule matcher. ``SimpleSelector`` is the only variant so far."""


@dataclass
class SimpleSelector(Selector):
    """Tag name, id and class matchers combined, e.g. ``div.note#main``.

    An instance with no parts is the universal selector.
    """

    tag_name: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)

    @property
    def is_universal(self) -> bool:
        return self.tag_name is None and self.id is None and not self.classes


# ---- values ----


class Unit(Enum):
    PX = "px"


class Value(_Rendered):
    """A declaration value: ``Keyword``, ``Length`` or ``Color``."""


@dataclass(frozen=True)
class Keyword(Value):
    keyword: str


@dataclass(frozen=True)
class Length(Value):
    value: float
    unit: Unit = Unit.PX


@dataclass(frozen=True)
class Color(Value):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Colour channel out of range: {channel}")


# ---- rules ----


@dataclass
class Declaration(_Rendered):
    """A ``name: value;`` pair inside a rule block."""

    name: str
    value: Value


@dataclass
class Rule(_Rendered):
    selectors: list[Selector]
    declarations: list[Declaration] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.selectors:
            raise ValueError("Rule must have at least one selector")


@dataclass
class Stylesheet(_Rendered):
    """Rules in source order."""

    rules: list[Rule] = field(default_factory=list)
