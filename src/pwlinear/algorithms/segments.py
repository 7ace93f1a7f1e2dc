import logging
from typing import Iterator, Optional, Sequence, Tuple

from pwlinear.core.typedefs import Coord, Domain, Line, Numeric

logger = logging.getLogger(__name__)


class SegmentsIterator:
    """
    Restartable iterable over the segments of a piecewise linear function.

    Each call to iter() starts again from the first inflection point and yields
    Line(p[i], p[i + 1]) for every pair of consecutive points.
    """

    def __init__(self, coordinates: Sequence[Coord]):
        self._coordinates = coordinates

    def __iter__(self) -> Iterator[Line]:
        coordinates = self._coordinates
        for i in range(len(coordinates) - 1):
            yield Line(coordinates[i], coordinates[i + 1])

    def __len__(self) -> int:
        return max(len(self._coordinates) - 1, 0)

    def __repr__(self):
        return f"{self.__class__.__name__}(segments={len(self)})"


def line_y_at_x(line: Line, x: Numeric) -> Numeric:
    """Value at x of the (infinite) line through line.start and line.end."""
    start, end = line.start, line.end
    return start.y + (x - start.x) * (end.y - start.y) / (end.x - start.x)


def line_intersect(l1: Line, l2: Line) -> Optional[Tuple[Numeric, Numeric]]:
    """
    Intersection of the infinite lines supporting l1 and l2.

    Args:
        l1: First line (must not be vertical)
        l2: Second line (must not be vertical)
    Returns:
        (x, y) of the intersection, or None if the lines are parallel
    """
    slope_1 = l1.slope()
    slope_2 = l2.slope()
    slope_diff = slope_1 - slope_2
    if slope_diff == 0:
        logger.debug("Lines %s and %s are parallel, no intersection", l1, l2)
        return None
    # Gap between the two lines at l1.start.x, closed at rate slope_diff
    gap = l1.start.y - line_y_at_x(l2, l1.start.x)
    x = l1.start.x - gap / slope_diff
    y = line_y_at_x(l1, x)
    return x, y


def line_in_domain(line: Line, domain: Domain) -> Optional[Line]:
    """
    Restrict a segment to the given domain.

    Returns:
        The restricted segment, or None if the intersection of the segment with the
        domain is empty or a single point.
    """
    lower, upper = domain
    if line.end.x <= lower or line.start.x >= upper:
        return None
    if line.start.x >= lower:
        left = line.start
    else:
        left = Coord(lower, line_y_at_x(line, lower))
    if line.end.x <= upper:
        right = line.end
    else:
        right = Coord(upper, line_y_at_x(line, upper))
    return Line(left, right)
