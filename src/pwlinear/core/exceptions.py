"""Custom exceptions for pwlinear."""
import logging

logger = logging.getLogger(__name__)


class DomainError(Exception):
    """
    Raised for every invalid use of a piecewise linear function.

    Covers invalid construction (fewer than two points, non strictly increasing x),
    evaluation outside the domain, combination of functions with different domains
    and shrinking/expanding to an incompatible domain.
    """

    def __init__(self, message):
        super().__init__(message)
        logger.error("DomainError raised: %s", message)
