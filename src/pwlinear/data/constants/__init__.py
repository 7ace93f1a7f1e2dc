"""Processing constants and error message templates for pwlinear."""

from .processing_constants import ProcessingConstants, ErrorMessages

__all__ = [
    "ProcessingConstants",
    "ErrorMessages"
]
