"""Basic graphics value types and their string forms."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Color:
    """RGBA color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    TRANSPARENT: ClassVar["Color"]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range: {channel}")

    def with_alpha(self, alpha: int) -> "Color":
        return Color(self.r, self.g, self.b, alpha)


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class Vector2:
    """Two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vector2":
        return Vector2(self.x / divisor, self.y / divisor)


@dataclass(frozen=True)
class IntRect:
    """Integer rectangle given by its top-left corner and size."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@singledispatch
def to_string(value: object) -> str:
    """Return the textual form of a graphics value."""
    raise TypeError(f"no string form for {type(value).__name__}")


@to_string.register
def _(value: Color) -> str:
    return f"({value.r},{value.g},{value.b},{value.a})"


@to_string.register
def _(value: Vector2) -> str:
    return f"({value.x:g},{value.y:g})"


@to_string.register
def _(value: IntRect) -> str:
    return f"({value.left},{value.top},{value.width},{value.height})"