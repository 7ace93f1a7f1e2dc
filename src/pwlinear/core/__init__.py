"""
Core data structures.

This module contains the piecewise linear function value type, the
coordinate/line value types it is built from, conversions to other
representations and the exception raised on invalid use.
"""

from .typedefs import Coord, Line, LineString
from .exceptions import DomainError
from .function import PiecewiseLinearFunction

__all__ = [
    "Coord",
    "Line",
    "LineString",
    "DomainError",
    "PiecewiseLinearFunction"
]
