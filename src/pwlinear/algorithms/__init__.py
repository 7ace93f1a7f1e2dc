"""
Core algorithms on piecewise linear functions.

This module provides segment iteration and evaluation, the inflection merge
shared by all combinators, the combinators themselves (sum, max, min, negation,
absolute value, integration) and domain restriction/expansion.
"""

from .segments import SegmentsIterator, line_y_at_x, line_intersect, line_in_domain
from .evaluation import segment_at_x, y_at_x, sample
from .inflection import PointsOfInflectionIterator, points_of_inflection_iter
from .combinators import (
    sum_functions, add, subtract, negate,
    max_functions, min_functions, maximum, minimum,
    absolute, integrate
)
from .domain import ExpandDomainStrategy, DomainRelation, compare_domains, shrink_domain, expand_domain

__all__ = [
    "SegmentsIterator",
    "line_y_at_x",
    "line_intersect",
    "line_in_domain",
    "segment_at_x",
    "y_at_x",
    "sample",
    "PointsOfInflectionIterator",
    "points_of_inflection_iter",
    "sum_functions",
    "add",
    "subtract",
    "negate",
    "max_functions",
    "min_functions",
    "maximum",
    "minimum",
    "absolute",
    "integrate",
    "ExpandDomainStrategy",
    "DomainRelation",
    "compare_domains",
    "shrink_domain",
    "expand_domain"
]
