import logging
from enum import Enum
from typing import Optional, Union

from pwlinear.algorithms.segments import SegmentsIterator, line_in_domain, line_y_at_x
from pwlinear.core.exceptions import DomainError
from pwlinear.core.typedefs import Coord, Domain, Line
from pwlinear.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


class ExpandDomainStrategy(Enum):
    """How expand_domain() picks the values added outside the current domain."""
    EXTEND_SEGMENT = "extend_segment"  # continue the edge segment with the same slope
    EXTEND_VALUE = "extend_value"  # hold the edge value (flat segment)


class DomainRelation(Enum):
    """Relation between two domains, as returned by compare_domains()."""
    EQUAL = "equal"
    CONTAINS = "contains"
    WITHIN = "within"


def compare_domains(d1: Domain, d2: Domain) -> Optional[DomainRelation]:
    """
    Compare two domains by inclusion.

    Returns:
        EQUAL if identical, CONTAINS if d1 contains d2, WITHIN if d1 is contained
        in d2, None if neither contains the other.
    """
    if d1 == d2:
        return DomainRelation.EQUAL
    if d1[0] <= d2[0] and d1[1] >= d2[1]:
        return DomainRelation.CONTAINS
    if d2[0] <= d1[0] and d2[1] >= d1[1]:
        return DomainRelation.WITHIN
    return None


def _validate_domain(to_domain: Domain) -> Domain:
    lower, upper = to_domain
    if not lower < upper:
        raise DomainError(ErrorMessages.INVALID_DOMAIN.format(lower=lower, upper=upper))
    return lower, upper


def shrink_domain(f, to_domain: Domain):
    """
    Restrict a function to a sub-domain.

    New boundary points are interpolated wherever a bound of to_domain falls strictly
    inside a segment; points outside to_domain are dropped.
    Args:
        f: PiecewiseLinearFunction to restrict
        to_domain: (lower, upper) contained in the domain of f
    Returns:
        PiecewiseLinearFunction: The restriction (f itself if the domains are equal)
    Raises:
        DomainError: If to_domain is empty or not contained in the domain of f
    """
    to_domain = _validate_domain(to_domain)
    relation = compare_domains(f.domain(), to_domain)
    if relation == DomainRelation.EQUAL:
        return f
    if relation != DomainRelation.CONTAINS:
        raise DomainError(ErrorMessages.NOT_A_SUBDOMAIN.format(to_domain=to_domain, domain=f.domain()))
    new_points = []
    for segment in SegmentsIterator(f.coordinates):
        restricted = line_in_domain(segment, to_domain)
        if restricted is None:
            continue
        # Only the segment holding the lower bound contributes its start point
        if segment.start.x <= to_domain[0]:
            new_points.append(restricted.start)
        new_points.append(restricted.end)
    logger.debug("Shrunk domain %s -> %s: %d -> %d points",
                 f.domain(), to_domain, len(f), len(new_points))
    return type(f)(new_points)


def expand_domain(f, to_domain: Domain,
                  strategy: Union[ExpandDomainStrategy, str] = ExpandDomainStrategy.EXTEND_SEGMENT):
    """
    Expand a function to a larger domain.

    At most one point is added on either side; existing points are kept as they are.
    Args:
        f: PiecewiseLinearFunction to expand
        to_domain: (lower, upper) containing the domain of f
        strategy: ExpandDomainStrategy (or its string value) for the added points
    Returns:
        PiecewiseLinearFunction: The expansion (f itself if the domains are equal)
    Raises:
        DomainError: If to_domain is empty or does not contain the domain of f
        ValueError: If strategy is not a known ExpandDomainStrategy
    """
    strategy = ExpandDomainStrategy(strategy)
    to_domain = _validate_domain(to_domain)
    relation = compare_domains(f.domain(), to_domain)
    if relation == DomainRelation.EQUAL:
        return f
    if relation != DomainRelation.WITHIN:
        raise DomainError(ErrorMessages.NOT_A_SUPERDOMAIN.format(to_domain=to_domain, domain=f.domain()))
    coordinates = f.coordinates
    lower, upper = to_domain
    new_points = list(coordinates)
    if lower < coordinates[0].x:
        if strategy == ExpandDomainStrategy.EXTEND_SEGMENT:
            y = line_y_at_x(Line(coordinates[0], coordinates[1]), lower)
        else:
            y = coordinates[0].y
        new_points.insert(0, Coord(lower, y))
    if upper > coordinates[-1].x:
        if strategy == ExpandDomainStrategy.EXTEND_SEGMENT:
            y = line_y_at_x(Line(coordinates[-2], coordinates[-1]), upper)
        else:
            y = coordinates[-1].y
        new_points.append(Coord(upper, y))
    logger.debug("Expanded domain %s -> %s using %s", f.domain(), to_domain, strategy.name)
    return type(f)(new_points)
