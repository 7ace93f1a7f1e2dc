"""
Library-wide constants.

This package provides the processing constants and error message templates
used throughout pwlinear.
"""

from .constants.processing_constants import ProcessingConstants, ErrorMessages

__all__ = [
    "ProcessingConstants",
    "ErrorMessages"
]
