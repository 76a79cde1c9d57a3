"""Simple geometry value types: colours, points, circles and cuboids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union

PI = 3.14


def _channel(value: int) -> int:
    """Keep a colour channel in 0..255, replacing anything else with 0."""
    return value if 0 <= value <= 255 else 0


class Color:
    """An RGB colour; a channel outside 0..255 is stored as 0."""

    __slots__ = ("_red", "_green", "_blue")

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0) -> None:
        self.red = red
        self.green = green
        self.blue = blue

    @property
    def red(self) -> int:
        return self._red

    @red.setter
    def red(self, value: int) -> None:
        self._red = _channel(value)

    @property
    def green(self) -> int:
        return self._green

    @green.setter
    def green(self, value: int) -> None:
        self._green = _channel(value)

    @property
    def blue(self) -> int:
        return self._blue

    @blue.setter
    def blue(self, value: int) -> None:
        self._blue = _channel(value)

    def __iter__(self) -> Iterator[int]:
        yield self._red
        yield self._green
        yield self._blue

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Color(red={self._red}, green={self._green}, blue={self._blue})"


@dataclass
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


class Circle:
    """A circle with an integer radius, a centre point and a colour."""

    def __init__(
        self,
        radius: int,
        center: Union[Point, Tuple[int, int]],
        color: Color | None = None,
    ) -> None:
        self.radius = radius
        self.center = center if isinstance(center, Point) else Point(*center)
        self.color = color if color is not None else Color(0, 0, 0)

    def area(self) -> float:
        """Area of the circle, using 3.14 for pi."""
        return PI * self.radius * self.radius

    def describe(self) -> str:
        """Multi-line summary of radius, centre and colour."""
        red, green, blue = self.color
        lines = [
            "Circle 信息",
            f"半径: {self.radius}",
            f"圆心坐标: ({self.center.x}, {self.center.y})",
            f"颜色: ({red}, {green}, {blue})",
        ]
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Circle(radius={self.radius}, center={self.center!r}, color={self.color!r})"


@dataclass
class Cube:
    """A rectangular box given by length, width and height."""

    length: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        self.length = float(self.length)
        self.width = float(self.width)
        self.height = float(self.height)

    def volume(self) -> float:
        """Product of the three dimensions."""
        return self.length * self.width * self.height