"""Value model: the closed set of typed property values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Unit(Enum):
    """Units of length understood by the parser."""

    PX = "px"


class Display(Enum):
    """Box generation mode read from the ``display`` property."""

    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


@dataclass(frozen=True)
class Keyword:
    """A bare identifier value such as ``auto`` or ``block``."""

    value: str

    def to_px(self) -> float:
        return 0.0

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Length:
    """A numeric magnitude with a unit, e.g. ``20px``."""

    magnitude: float
    unit: Unit = Unit.PX

    def to_px(self) -> float:
        """Return the length in pixels."""
        return self.magnitude

    def __str__(self) -> str:
        return f"{self.magnitude:g}{self.unit.value}"


@dataclass(frozen=True)
class Color:
    """An RGBA color with one byte per channel.

    Attributes:
        r: Red channel, 0-255.
        g: Green channel, 0-255.
        b: Blue channel, 0-255.
        a: Alpha channel, 0-255 (255 is fully opaque).
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def to_px(self) -> float:
        return 0.0

    def __str__(self) -> str:
        if self.a == 255:
            return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a})"


Value = Union[Keyword, Length, Color]

BLACK = Color(0, 0, 0)
