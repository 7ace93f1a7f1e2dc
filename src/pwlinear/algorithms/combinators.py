"""
Combinators building new piecewise linear functions from existing ones.

Every combinator of several functions is driven by the inflection merge
(points_of_inflection_iter), so all of them require identical domains and
raise DomainError otherwise. Results are new instances of the class of the
first argument; inputs are never modified.
"""

import logging
from typing import Iterable, List, Sequence

from pwlinear.algorithms.inflection import points_of_inflection_iter
from pwlinear.algorithms.segments import SegmentsIterator
from pwlinear.core.typedefs import Coord, Numeric

logger = logging.getLogger(__name__)


def sum_functions(functions: Iterable):
    """
    Sum functions sharing the same domain.

    Faster than chaining add() since all points of inflection are merged in a single pass.
    Args:
        functions: Non-empty iterable of PiecewiseLinearFunction
    Returns:
        PiecewiseLinearFunction: The sum; the function itself if only one is given
    Raises:
        DomainError: If no function is given or the domains differ
    """
    functions = list(functions)
    merged = points_of_inflection_iter(functions)
    if len(functions) == 1:
        return functions[0]
    points = [Coord(x, sum(values)) for x, values in merged]
    logger.debug("Summed %d functions into %d inflection points", len(functions), len(points))
    return type(functions[0])(points)


def add(f, g):
    """Return f + g. Both functions must share the same domain."""
    return sum_functions([f, g])


def subtract(f, g):
    """Return f - g. Both functions must share the same domain."""
    return sum_functions([f, negate(g)])


def negate(f):
    """Return -f, keeping every abscissa unchanged."""
    return type(f)([Coord(point.x, -point.y) for point in f.coordinates])


def max_functions(functions: Iterable):
    """
    Pointwise maximum (upper envelope) of functions sharing the same domain.

    The result may have more points of inflection than all inputs together: wherever
    the largest function changes between two merged abscissas, the exact intersection
    of the two segments is inserted.
    Raises:
        DomainError: If no function is given or the domains differ
    """
    functions = list(functions)
    merged = points_of_inflection_iter(functions)
    if len(functions) == 1:
        return functions[0]
    points = []
    previous = None
    for x, values in merged:
        if previous is not None:
            points.extend(_upper_envelope_crossings(previous[0], previous[1], x, values))
        points.append(Coord(x, max(values)))
        previous = (x, values)
    logger.debug("Upper envelope of %d functions has %d inflection points", len(functions), len(points))
    return type(functions[0])(points)


def min_functions(functions: Iterable):
    """Pointwise minimum (lower envelope) of functions sharing the same domain."""
    functions = list(functions)
    if len(functions) == 1:
        return functions[0]
    return negate(max_functions([negate(f) for f in functions]))


def maximum(f, g):
    """Return max(f, g). Both functions must share the same domain."""
    return max_functions([f, g])


def minimum(f, g):
    """Return min(f, g). Both functions must share the same domain."""
    return min_functions([f, g])


def absolute(f):
    """
    Return |f|.

    A zero crossing is inserted inside every segment whose end values have strictly
    opposite signs, so the result stays exact instead of cutting the corner.
    """
    points = [f.coordinates[0]]
    for segment in SegmentsIterator(f.coordinates):
        (x0, y0), (x1, y1) = segment.start.x_y(), segment.end.x_y()
        zero = y0 - y0
        if (y0 < zero < y1) or (y1 < zero < y0):
            x_root = x0 - y0 * (x1 - x0) / (y1 - y0)
            if x0 < x_root < x1:
                points.append(Coord(x_root, zero))
        points.append(segment.end)
    logger.debug("Absolute value added %d zero crossings", len(points) - len(f.coordinates))
    return type(f)([Coord(point.x, abs(point.y)) for point in points])


def integrate(f) -> Numeric:
    """Integral of f over its whole domain (exact for piecewise linear functions)."""
    return sum(segment.dx() * (segment.start.y + segment.end.y) / 2
               for segment in SegmentsIterator(f.coordinates))


def _upper_envelope_crossings(x0: Numeric, values_0: Sequence[Numeric],
                              x1: Numeric, values_1: Sequence[Numeric]) -> List[Coord]:
    """
    Points strictly inside (x0, x1) where the largest of several linear pieces changes.

    Between two consecutive merged abscissas every function is linear. Starting from the
    largest value at x0 (ties broken by the steepest slope), repeatedly jump to the
    earliest point where a steeper line catches up with the current leader.
    """
    span = x1 - x0
    slopes = [(v1 - v0) / span for v0, v1 in zip(values_0, values_1)]
    leader = max(range(len(values_0)), key=lambda i: (values_0[i], slopes[i]))
    current_x = x0
    crossings = []
    while True:
        lead_value = values_0[leader] + (current_x - x0) * slopes[leader]
        best = None
        for i, slope in enumerate(slopes):
            if slope <= slopes[leader]:
                continue
            value = values_0[i] + (current_x - x0) * slope
            x_cross = current_x + (lead_value - value) / (slope - slopes[leader])
            if not current_x < x_cross < x1:
                continue
            if best is None or x_cross < best[0] or (x_cross == best[0] and slope > slopes[best[1]]):
                best = (x_cross, i)
        if best is None:
            return crossings
        x_cross, leader_next = best
        y_cross = values_0[leader] + (x_cross - x0) * slopes[leader]
        crossings.append(Coord(x_cross, y_cross))
        leader = leader_next
        current_x = x_cross
