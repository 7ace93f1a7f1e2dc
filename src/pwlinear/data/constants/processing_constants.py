from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used throughout pwlinear."""
    # Function definition
    MIN_INFLECTION_POINTS: Final[int] = 2
    # Tolerance and precision
    DEFAULT_TOLERANCE: Final[float] = 1e-9
    DEFAULT_ABSOLUTE_TOLERANCE: Final[float] = 1e-12
    # Logging
    MAX_LOGGED_POINTS: Final[int] = 10


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    EMPTY_COORDINATES: Final[str] = "Cannot build a piecewise linear function from an empty coordinate sequence"
    INSUFFICIENT_POINTS: Final[str] = "Insufficient inflection points ({count}), minimum required: {min_points}"
    INVALID_COORDINATE: Final[str] = "Invalid coordinate at index {index}: {value!r}. Expected (x, y)"
    NOT_STRICTLY_INCREASING: Final[str] = (
        "Inflection points must be strictly increasing in x: x[{index}]={current} follows x[{prev_index}]={previous}")
    INVALID_DOMAIN: Final[str] = "Invalid domain ({lower}, {upper}): lower bound must be strictly less than upper bound"
    OUTSIDE_DOMAIN: Final[str] = "x={x} is outside the function domain [{lower}, {upper}]"
    DOMAIN_MISMATCH: Final[str] = "Functions do not share the same domain: {domains}"
    NO_FUNCTIONS: Final[str] = "At least one function is required"
    NOT_A_SUBDOMAIN: Final[str] = "Domain {to_domain} is not contained in the function domain {domain}"
    NOT_A_SUPERDOMAIN: Final[str] = "Domain {to_domain} does not contain the function domain {domain}"
    ARRAY_LENGTH_MISMATCH: Final[str] = "Array length mismatch: xs({x_len}) != ys({y_len})"
    NON_ITERABLE_COORDINATES: Final[str] = "Coordinates must be iterable, got {type_name}"
    NOT_ONE_DIMENSIONAL: Final[str] = "Expected one-dimensional arrays, got shapes {x_shape} and {y_shape}"
