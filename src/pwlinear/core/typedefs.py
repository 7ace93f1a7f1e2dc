"""
typedefs.py

This module defines the value types and type aliases used throughout the pwlinear package.
They are deliberately minimal: pwlinear only needs a coordinate type with public x/y accessors,
a line between two coordinates and an ordered sequence of coordinates.

Classes:
    Coord: An immutable (x, y) pair over any ordered numeric type supporting arithmetic.
    Line: An immutable segment between two coordinates.
    LineString: An immutable ordered sequence of coordinates.

Type Aliases:
    Numeric: Numeric values accepted for x and y (float, int, Fraction, Decimal, numpy scalars, ...).
    CoordLike: Anything convertible to a Coord: a Coord, a 2-element tuple/list/array or an
               object exposing x and y attributes.
    Domain: A (min_x, max_x) pair.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Tuple, Union

import numpy as np

Numeric = Any
Domain = Tuple[Numeric, Numeric]


@dataclass(frozen=True)
class Coord:
    """
    A point in the plane.

    Attributes:
        x: Abscissa.
        y: Ordinate.
    """
    x: Numeric
    y: Numeric

    def x_y(self) -> Tuple[Numeric, Numeric]:
        """Return the coordinate as an (x, y) tuple."""
        return self.x, self.y

    @classmethod
    def from_value(cls, value: "CoordLike") -> "Coord":
        """
        Convert a coordinate-like value to a Coord.

        Args:
            value: Coord, 2-element sequence/array, or object with x and y attributes
        Returns:
            Coord: The converted coordinate
        Raises:
            TypeError: If the value cannot be interpreted as an (x, y) pair
        """
        if isinstance(value, Coord):
            return value
        if isinstance(value, (tuple, list, np.ndarray)):
            if len(value) != 2:
                raise TypeError(f"Expected an (x, y) pair, got {len(value)} elements: {value!r}")
            return cls(value[0], value[1])
        if hasattr(value, 'x') and hasattr(value, 'y'):
            return cls(value.x, value.y)
        raise TypeError(f"Cannot interpret {type(value).__name__} as a coordinate: {value!r}")


CoordLike = Union[Coord, Tuple[Numeric, Numeric], Sequence[Numeric]]


@dataclass(frozen=True)
class Line:
    """A segment going from start to end."""
    start: Coord
    end: Coord

    def __post_init__(self):
        # Allow Line((0, 0), (1, 1))
        object.__setattr__(self, 'start', Coord.from_value(self.start))
        object.__setattr__(self, 'end', Coord.from_value(self.end))

    def dx(self) -> Numeric:
        return self.end.x - self.start.x

    def dy(self) -> Numeric:
        return self.end.y - self.start.y

    def slope(self) -> Numeric:
        """Slope dy/dx. Undefined (ZeroDivisionError) for vertical or degenerate lines."""
        return self.dy() / self.dx()

    def is_degenerate(self) -> bool:
        """True if start and end are the same point."""
        return self.start == self.end


@dataclass(frozen=True)
class LineString:
    """An ordered sequence of coordinates."""
    coords: Tuple[Coord, ...]

    def __post_init__(self):
        object.__setattr__(self, 'coords', tuple(Coord.from_value(c) for c in self.coords))

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.coords)

    def __len__(self) -> int:
        return len(self.coords)

    def __getitem__(self, index):
        return self.coords[index]

    def lines(self) -> Iterator[Line]:
        """Iterate over the lines joining consecutive coordinates."""
        for start, end in zip(self.coords, self.coords[1:]):
            yield Line(start, end)
