import logging
from bisect import bisect_left

import numpy as np

from pwlinear.algorithms.segments import line_y_at_x
from pwlinear.core.exceptions import DomainError
from pwlinear.core.typedefs import Line, Numeric
from pwlinear.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


def segment_at_x(function, x: Numeric) -> Line:
    """
    Return the segment of a function such that start.x <= x <= end.x.

    If x is exactly the x coordinate of an inflection point, that point is returned as
    both ends of a degenerate segment, so that evaluating it needs no interpolation.
    Args:
        function: PiecewiseLinearFunction to search
        x: Abscissa to look up
    Returns:
        Line: The bracketing segment
    Raises:
        DomainError: If x lies outside the domain of the function
    """
    xs = function.xs
    lower, upper = xs[0], xs[-1]
    try:
        inside = lower <= x <= upper
    except TypeError as e:
        raise DomainError(ErrorMessages.OUTSIDE_DOMAIN.format(x=x, lower=lower, upper=upper)) from e
    if not inside:
        raise DomainError(ErrorMessages.OUTSIDE_DOMAIN.format(x=x, lower=lower, upper=upper))
    coordinates = function.coordinates
    idx = bisect_left(xs, x)
    if xs[idx] == x:
        point = coordinates[idx]
        return Line(point, point)
    return Line(coordinates[idx - 1], coordinates[idx])


def y_at_x(function, x: Numeric) -> Numeric:
    """Compute f(x), raising DomainError outside the domain of f."""
    segment = segment_at_x(function, x)
    if segment.is_degenerate():
        return segment.start.y
    return line_y_at_x(segment, x)


def sample(function, xs) -> np.ndarray:
    """
    Evaluate a function at every abscissa of an array-like.

    Real-valued input is evaluated in one pass with numpy; other numeric types
    (Fraction, Decimal, ...) are evaluated point by point and returned as an object array.
    Args:
        function: PiecewiseLinearFunction to evaluate
        xs: Scalar or array-like of abscissas
    Returns:
        np.ndarray: Values with the same shape as xs
    Raises:
        DomainError: If any abscissa lies outside the domain of the function
    """
    xs = np.asarray(xs)
    lower, upper = function.domain()
    logger.debug("Sampling function on %d abscissas within domain [%s, %s]", xs.size, lower, upper)
    if xs.dtype.kind in 'iuf':
        inside = (xs >= lower) & (xs <= upper)
        if not np.all(inside):
            bad = xs[~inside].ravel()[0]
            raise DomainError(ErrorMessages.OUTSIDE_DOMAIN.format(x=bad, lower=lower, upper=upper))
        return np.interp(xs, np.asarray(function.xs, dtype=float), np.asarray(function.ys, dtype=float))
    values = [y_at_x(function, x) for x in xs.ravel()]
    return np.array(values, dtype=object).reshape(xs.shape)
