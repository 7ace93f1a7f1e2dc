import logging
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np
import sympy as sp

from pwlinear.algorithms import combinators, domain as domain_ops, evaluation
from pwlinear.algorithms.domain import ExpandDomainStrategy
from pwlinear.algorithms.inflection import PointsOfInflectionIterator, points_of_inflection_iter
from pwlinear.algorithms.segments import SegmentsIterator
from pwlinear.core import conversions
from pwlinear.core.exceptions import DomainError
from pwlinear.core.typedefs import Coord, CoordLike, Domain, Line, LineString, Numeric
from pwlinear.data.constants import ErrorMessages, ProcessingConstants

logger = logging.getLogger(__name__)


class PiecewiseLinearFunction:
    """
    A continuous piecewise linear function over a closed interval.

    The function is represented by its points of inflection: (x, y) pairs joined by
    straight segments. The domain is [first x, last x]; the function is undefined outside.

    Invariants (checked on construction):
      * at least two points,
      * x coordinates strictly increasing.

    Consecutive segments may have the same slope; such redundant points are kept as given.
    Instances are immutable: every operation returns a new function and instances are
    hashable, so they can be shared freely.

    Numeric values may be of any ordered type supporting + - * / (float, int, Fraction,
    Decimal, numpy scalars).

    Examples:
        >>> f = PiecewiseLinearFunction([(0., 0.), (1., 1.), (2., 1.5)])
        >>> f.y_at_x(1.25)
        1.125
        >>> f.domain()
        (0.0, 2.0)
    """

    __slots__ = ('_coordinates', '_xs')

    def __init__(self, coordinates: Union[Iterable[CoordLike], LineString]):
        """
        Args:
            coordinates: Points of inflection as Coord, (x, y) pairs or a LineString
        Raises:
            DomainError: If fewer than two points are given, a point is malformed or
                         x is not strictly increasing
        """
        self._coordinates = self._validate_coordinates(coordinates)
        self._xs = tuple(point.x for point in self._coordinates)
        logger.debug("Created piecewise linear function with %d points over domain %s",
                     len(self._coordinates), self.domain())

    @staticmethod
    def _validate_coordinates(coordinates) -> Tuple[Coord, ...]:
        if coordinates is None:
            raise DomainError(ErrorMessages.EMPTY_COORDINATES)
        try:
            raw = list(coordinates)
        except TypeError as e:
            raise DomainError(ErrorMessages.NON_ITERABLE_COORDINATES.format(
                type_name=type(coordinates).__name__)) from e
        points = []
        for index, value in enumerate(raw):
            try:
                points.append(Coord.from_value(value))
            except TypeError as e:
                raise DomainError(ErrorMessages.INVALID_COORDINATE.format(index=index, value=value)) from e
        if not points:
            raise DomainError(ErrorMessages.EMPTY_COORDINATES)
        min_points = ProcessingConstants.MIN_INFLECTION_POINTS
        if len(points) < min_points:
            raise DomainError(ErrorMessages.INSUFFICIENT_POINTS.format(count=len(points), min_points=min_points))
        for i, point in enumerate(points):
            try:
                # Ordinates must support arithmetic, abscissas must be ordered
                point.y - point.y
                increasing = i == 0 or points[i - 1].x < point.x
            except TypeError as e:
                raise DomainError(ErrorMessages.INVALID_COORDINATE.format(index=i, value=point.x_y())) from e
            # Also rejects NaN abscissas
            if not increasing:
                raise DomainError(ErrorMessages.NOT_STRICTLY_INCREASING.format(
                    index=i, current=point.x, prev_index=i - 1, previous=points[i - 1].x))
        return tuple(points)

    # --- Alternate constructors ---
    @classmethod
    def constant(cls, domain: Domain, value: Numeric) -> 'PiecewiseLinearFunction':
        """
        Constant function equal to `value` over `domain`.

        Raises:
            DomainError: If domain[1] <= domain[0]
        """
        lower, upper = domain
        if not lower < upper:
            raise DomainError(ErrorMessages.INVALID_DOMAIN.format(lower=lower, upper=upper))
        return cls([Coord(lower, value), Coord(upper, value)])

    @classmethod
    def from_arrays(cls, xs, ys) -> 'PiecewiseLinearFunction':
        """Build a function from separate abscissa and ordinate arrays."""
        return cls(conversions.coordinates_from_arrays(xs, ys))

    # --- Accessors ---
    @property
    def coordinates(self) -> Tuple[Coord, ...]:
        """Points of inflection, sorted by x."""
        return self._coordinates

    @property
    def xs(self) -> Tuple[Numeric, ...]:
        return self._xs

    @property
    def ys(self) -> Tuple[Numeric, ...]:
        return tuple(point.y for point in self._coordinates)

    def domain(self) -> Domain:
        """Return the domain as (min_x, max_x)."""
        return self._xs[0], self._xs[-1]

    def has_same_domain_as(self, other: 'PiecewiseLinearFunction') -> bool:
        return self.domain() == other.domain()

    def segments_iter(self) -> SegmentsIterator:
        """Restartable iterable over the segments; always holds at least one segment."""
        return SegmentsIterator(self._coordinates)

    def points_of_inflection_iter(self, other: 'PiecewiseLinearFunction') -> PointsOfInflectionIterator:
        """
        Iterate over the joint points of inflection of self and other.

        Raises:
            DomainError: If the domains differ
        """
        return points_of_inflection_iter([self, other])

    # --- Evaluation ---
    def segment_at_x(self, x: Numeric) -> Line:
        return evaluation.segment_at_x(self, x)

    def y_at_x(self, x: Numeric) -> Numeric:
        """
        Compute f(x).

        Raises:
            DomainError: If x is outside the domain
        """
        return evaluation.y_at_x(self, x)

    __call__ = y_at_x

    def sample(self, xs) -> np.ndarray:
        """Evaluate at every abscissa of an array-like."""
        return evaluation.sample(self, xs)

    def integrate(self) -> Numeric:
        """Integral over the whole domain."""
        return combinators.integrate(self)

    # --- Domain ---
    def shrink_domain(self, to_domain: Domain) -> 'PiecewiseLinearFunction':
        return domain_ops.shrink_domain(self, to_domain)

    def expand_domain(self, to_domain: Domain,
                      strategy: Union[ExpandDomainStrategy, str] = ExpandDomainStrategy.EXTEND_SEGMENT
                      ) -> 'PiecewiseLinearFunction':
        return domain_ops.expand_domain(self, to_domain, strategy)

    # --- Combinators ---
    def add(self, other: 'PiecewiseLinearFunction') -> 'PiecewiseLinearFunction':
        return combinators.add(self, other)

    def subtract(self, other: 'PiecewiseLinearFunction') -> 'PiecewiseLinearFunction':
        return combinators.subtract(self, other)

    def negate(self) -> 'PiecewiseLinearFunction':
        return combinators.negate(self)

    def max(self, other: 'PiecewiseLinearFunction') -> 'PiecewiseLinearFunction':
        """
        Pointwise maximum of self and other.

        Examples:
            >>> f = PiecewiseLinearFunction([(0., 1.), (1., 0.)])
            >>> g = PiecewiseLinearFunction([(0., 0.), (1., 1.)])
            >>> f.max(g).to_tuples()
            [(0.0, 1.0), (0.5, 0.5), (1.0, 1.0)]
        """
        return combinators.maximum(self, other)

    def min(self, other: 'PiecewiseLinearFunction') -> 'PiecewiseLinearFunction':
        return combinators.minimum(self, other)

    def abs(self) -> 'PiecewiseLinearFunction':
        return combinators.absolute(self)

    def __add__(self, other):
        if not isinstance(other, PiecewiseLinearFunction):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, PiecewiseLinearFunction):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    # --- Conversions ---
    def to_tuples(self) -> List[Tuple[Numeric, Numeric]]:
        return conversions.to_tuples(self)

    def to_arrays(self, dtype=float) -> Tuple[np.ndarray, np.ndarray]:
        return conversions.to_arrays(self, dtype=dtype)

    def to_line_string(self) -> LineString:
        return conversions.to_line_string(self)

    def to_piecewise(self, symbol: Optional[sp.Symbol] = None) -> sp.Piecewise:
        """SymPy Piecewise expression in `symbol` (default: Symbol('x'))."""
        return conversions.to_piecewise(self, symbol if symbol is not None else sp.Symbol('x'))

    def is_close(self, other: 'PiecewiseLinearFunction',
                 rtol: float = ProcessingConstants.DEFAULT_TOLERANCE,
                 atol: float = ProcessingConstants.DEFAULT_ABSOLUTE_TOLERANCE) -> bool:
        """True if both functions have the same number of points, all equal within tolerance."""
        if len(self) != len(other):
            return False
        self_xs, self_ys = self.to_arrays()
        other_xs, other_ys = other.to_arrays()
        return bool(np.allclose(self_xs, other_xs, rtol=rtol, atol=atol) and
                    np.allclose(self_ys, other_ys, rtol=rtol, atol=atol))

    # --- Python protocol ---
    def __len__(self) -> int:
        return len(self._coordinates)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._coordinates)

    def __eq__(self, other):
        if not isinstance(other, PiecewiseLinearFunction):
            return NotImplemented
        return self._coordinates == other._coordinates

    def __hash__(self):
        return hash(self._coordinates)

    def __repr__(self):
        return f"{self.__class__.__name__}({conversions.format_points(self)})"
