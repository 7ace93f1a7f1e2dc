"""
Conversions between piecewise linear functions and other representations.

Functions:
    coordinates_from_arrays: Pair up abscissa and ordinate arrays into coordinates.
    to_tuples: List of (x, y) tuples.
    to_arrays: numpy arrays of abscissas and ordinates.
    to_line_string: LineString through the points of inflection.
    to_piecewise: SymPy Piecewise expression, one linear piece per segment.
"""

import logging
from typing import List, Tuple

import numpy as np
import sympy as sp

from pwlinear.algorithms.segments import SegmentsIterator
from pwlinear.core.exceptions import DomainError
from pwlinear.core.typedefs import Coord, LineString, Numeric
from pwlinear.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


def coordinates_from_arrays(xs, ys) -> List[Coord]:
    """
    Build coordinates from two one-dimensional array-likes.

    Raises:
        DomainError: If the arrays are not one-dimensional or differ in length
    """
    xs = np.asarray(xs)
    ys = np.asarray(ys)
    if xs.ndim != 1 or ys.ndim != 1:
        raise DomainError(ErrorMessages.NOT_ONE_DIMENSIONAL.format(x_shape=xs.shape, y_shape=ys.shape))
    if len(xs) != len(ys):
        raise DomainError(ErrorMessages.ARRAY_LENGTH_MISMATCH.format(x_len=len(xs), y_len=len(ys)))
    # tolist() turns numpy scalars back into plain Python numbers
    return [Coord(x, y) for x, y in zip(xs.tolist(), ys.tolist())]


def to_tuples(f) -> List[Tuple[Numeric, Numeric]]:
    """Return the points of inflection as a list of (x, y) tuples."""
    return [point.x_y() for point in f.coordinates]


def to_arrays(f, dtype=float) -> Tuple[np.ndarray, np.ndarray]:
    """Return (xs, ys) as numpy arrays; pass dtype=object to keep exact numeric types."""
    return np.asarray(f.xs, dtype=dtype), np.asarray(f.ys, dtype=dtype)


def to_line_string(f) -> LineString:
    """Return the points of inflection as a LineString."""
    return LineString(f.coordinates)


def to_piecewise(f, symbol: sp.Symbol) -> sp.Piecewise:
    """
    Convert a function to a SymPy Piecewise expression in `symbol`.

    Each segment becomes a linear piece valid on its closed interval; shared
    endpoints resolve to the first matching piece, which has the same value.
    Outside the domain the expression evaluates to nan.
    Args:
        f: PiecewiseLinearFunction to convert
        symbol: Free variable of the expression
    Returns:
        sp.Piecewise: Symbolic representation of f
    Examples:
        >>> x = sp.Symbol('x')
        >>> to_piecewise(PiecewiseLinearFunction([(0, 0), (1, 1), (2, 0)]), x)
        Piecewise((x, (x >= 0) & (x <= 1)), (2 - x, (x >= 1) & (x <= 2)), (nan, True))
    """
    logger.debug("Converting function with %d segments to Piecewise in %s", len(f) - 1, symbol)
    pieces = []
    try:
        for segment in SegmentsIterator(f.coordinates):
            x0, y0 = (sp.sympify(v) for v in segment.start.x_y())
            x1, y1 = (sp.sympify(v) for v in segment.end.x_y())
            expr = sp.expand(y0 + (symbol - x0) * (y1 - y0) / (x1 - x0))
            pieces.append((expr, sp.And(symbol >= x0, symbol <= x1)))
    except (sp.SympifyError, TypeError) as e:
        logger.error("Failed to convert function to Piecewise: %s", e, exc_info=True)
        raise ValueError(f"Cannot convert function to a SymPy Piecewise: {str(e)}") from e
    pieces.append((sp.nan, True))
    return sp.Piecewise(*pieces)


def format_points(f) -> str:
    """Short textual form of the points of inflection, truncated for logging."""
    points = to_tuples(f)
    limit = ProcessingConstants.MAX_LOGGED_POINTS
    if len(points) <= limit:
        return str(points)
    return f"[{points[0]}, ..., {points[-1]}] ({len(points)} points)"
