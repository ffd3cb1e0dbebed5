"""
2D value types used by the packing tree.

This module provides the small point, size and rectangle primitives the
packer consumes. All three are immutable and compare by value, so a
placement can be stored, hashed and compared freely.

Examples
--------
>>> from atlas_packer.geometry import Point, Rectangle, Size
>>> rect = Rectangle(Point(4, 0), Size(6, 10))
>>> rect.right, rect.bottom
(10, 10)
>>> Size(4, 10).fits_in(Size(10, 10))
True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Point:
    """A 2D position. ``y`` grows downwards, as in image space."""

    x: Number = 0
    y: Number = 0

    def __add__(self, other: Union["Point", "Size"]) -> "Point":
        if isinstance(other, Size):
            return Point(self.x + other.width, self.y + other.height)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        return NotImplemented

    def as_tuple(self) -> Tuple[Number, Number]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Size:
    """
    A width and a height.

    Parameters
    ----------
    width : int or float
        Extent along the x axis. Must be non-negative.
    height : int or float
        Extent along the y axis. Must be non-negative.

    Raises
    ------
    ValueError
        If either component is negative.
    """

    width: Number
    height: Number

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Size components must be non-negative, got ({self.width}, {self.height})"
            )

    @classmethod
    def of(cls, value: Union["Size", Tuple[Number, Number]]) -> "Size":
        """Coerce a ``Size`` or a ``(width, height)`` pair into a ``Size``."""
        if isinstance(value, Size):
            return value
        width, height = value
        return cls(width, height)

    @property
    def area(self) -> Number:
        return self.width * self.height

    def fits_in(self, other: "Size") -> bool:
        """True if this size is no larger than ``other`` along both axes."""
        return self.width <= other.width and self.height <= other.height

    def transposed(self) -> "Size":
        """Return the size rotated by 90 degrees."""
        return Size(self.height, self.width)

    def as_tuple(self) -> Tuple[Number, Number]:
        return (self.width, self.height)


@dataclass(frozen=True)
class Rectangle:
    """
    An axis-aligned rectangle given by its top-left origin and its size.

    Rectangles are half-open: a rectangle at ``(0, 0)`` of size ``(4, 10)``
    and one at ``(4, 0)`` share an edge but do not intersect.
    """

    origin: Point
    size: Size

    @classmethod
    def from_xywh(cls, x: Number, y: Number, width: Number, height: Number) -> "Rectangle":
        return cls(Point(x, y), Size(width, height))

    @property
    def x(self) -> Number:
        return self.origin.x

    @property
    def y(self) -> Number:
        return self.origin.y

    @property
    def width(self) -> Number:
        return self.size.width

    @property
    def height(self) -> Number:
        return self.size.height

    @property
    def right(self) -> Number:
        return self.origin.x + self.size.width

    @property
    def bottom(self) -> Number:
        return self.origin.y + self.size.height

    @property
    def area(self) -> Number:
        return self.size.area

    def contains(self, other: "Rectangle") -> bool:
        """True if ``other`` lies entirely inside this rectangle."""
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def intersects(self, other: "Rectangle") -> bool:
        """True if the two rectangles overlap with a positive area."""
        if self.area == 0 or other.area == 0:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def as_tuple(self) -> Tuple[Number, Number, Number, Number]:
        """Return ``(x, y, width, height)``."""
        return (self.x, self.y, self.width, self.height)
