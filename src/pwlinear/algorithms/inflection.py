import heapq
import logging
from typing import Iterable, List, Tuple

from pwlinear.algorithms.segments import line_y_at_x
from pwlinear.core.exceptions import DomainError
from pwlinear.core.typedefs import Line, Numeric
from pwlinear.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


class PointsOfInflectionIterator:
    """
    Lazy N-way merge of the points of inflection of functions sharing a domain.

    Yields (x, [v_1, ..., v_n]) where x runs through the sorted union of the inflection
    abscissas of all functions and v_i is the value of function i at x. Values at a
    function's own inflection points are the stored values, other values are interpolated
    on the segment the function's cursor currently sits on.

    Each function keeps a cursor on its next unvisited point. A heap holds the abscissa of
    every cursor; each step emits the smallest one and advances every cursor sitting on it,
    so an abscissa shared by several functions is emitted once. Cursors only move forward,
    hence the number of steps is bounded by the total number of points.

    Single pass: the iterator is exhausted once the last shared abscissa is emitted.
    Build instances with points_of_inflection_iter(), which checks the domains.
    """

    def __init__(self, functions):
        self._coordinates = [function.coordinates for function in functions]
        self._cursors = [0] * len(self._coordinates)
        self._heap = [(coordinates[0].x, index) for index, coordinates in enumerate(self._coordinates)]
        heapq.heapify(self._heap)

    def __iter__(self):
        return self

    def __next__(self) -> Tuple[Numeric, List[Numeric]]:
        if not self._heap:
            raise StopIteration
        x = self._heap[0][0]
        values = [self._value_at(index, x) for index in range(len(self._coordinates))]
        while self._heap and self._heap[0][0] == x:
            _, index = heapq.heappop(self._heap)
            cursor = self._cursors[index] + 1
            self._cursors[index] = cursor
            coordinates = self._coordinates[index]
            if cursor < len(coordinates):
                heapq.heappush(self._heap, (coordinates[cursor].x, index))
        return x, values

    def _value_at(self, index: int, x: Numeric) -> Numeric:
        """Value of function `index` at x, with x <= the abscissa under its cursor."""
        coordinates = self._coordinates[index]
        cursor = self._cursors[index]
        point = coordinates[cursor]
        if point.x == x:
            return point.y
        # x lies strictly inside the segment ending at the cursor
        return line_y_at_x(Line(coordinates[cursor - 1], point), x)

    def __repr__(self):
        return f"{self.__class__.__name__}(functions={len(self._coordinates)}, pending={len(self._heap)})"


def points_of_inflection_iter(functions: Iterable) -> PointsOfInflectionIterator:
    """
    Return an iterator over (x, values) for the joint points of inflection of functions.

    Args:
        functions: Non-empty iterable of PiecewiseLinearFunction sharing the same domain
    Returns:
        PointsOfInflectionIterator: Lazy merged sequence, strictly increasing in x
    Raises:
        DomainError: If no function is given or the domains differ
    Examples:
        >>> f = PiecewiseLinearFunction([(0, 0), (1, 1), (2, 0)])
        >>> g = PiecewiseLinearFunction([(0, 1), (2, 1)])
        >>> list(points_of_inflection_iter([f, g]))
        [(0, [0, 1]), (1, [1, 1]), (2, [0, 1])]
    """
    functions = list(functions)
    if not functions:
        raise DomainError(ErrorMessages.NO_FUNCTIONS)
    domain = functions[0].domain()
    if any(function.domain() != domain for function in functions[1:]):
        raise DomainError(ErrorMessages.DOMAIN_MISMATCH.format(
            domains=[function.domain() for function in functions]))
    logger.debug("Merging points of inflection of %d functions over domain %s (%d points in total)",
                 len(functions), domain, sum(len(function) for function in functions))
    return PointsOfInflectionIterator(functions)
