"""
pwlinear - Continuous piecewise linear functions over closed intervals.

Functions are represented by their points of inflection only, and every
operation works directly on that sparse representation without sampling.

Key Features:
- Validated, immutable function values over any ordered numeric type
- Evaluation by binary search, vectorized sampling with NumPy
- N-way merge of points of inflection shared by all combinators
- Sum, difference, maximum, minimum, negation, absolute value, integral
- Domain restriction and expansion
- Conversion to NumPy arrays and SymPy Piecewise expressions

Main Components:
- Core: Function value type, coordinate types, exceptions and conversions
- Algorithms: Evaluation, inflection merge, combinators and domain operations
- Data: Processing constants and error messages
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pwlinear")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"  # Running from a source checkout

# Core definitions
from .core.typedefs import Coord, Line, LineString
from .core.exceptions import DomainError
from .core.function import PiecewiseLinearFunction

# Algorithms
from .algorithms.inflection import PointsOfInflectionIterator, points_of_inflection_iter
from .algorithms.segments import SegmentsIterator
from .algorithms.combinators import sum_functions, max_functions, min_functions
from .algorithms.domain import ExpandDomainStrategy

__all__ = [
    # Version
    '__version__',

    # Core classes
    'Coord',
    'Line',
    'LineString',
    'DomainError',
    'PiecewiseLinearFunction',

    # Algorithms
    'PointsOfInflectionIterator',
    'points_of_inflection_iter',
    'SegmentsIterator',
    'sum_functions',
    'max_functions',
    'min_functions',
    'ExpandDomainStrategy'
]

__description__ = "Continuous piecewise linear functions"
