"""Unit tests for processing constants and error messages."""
from dataclasses import FrozenInstanceError

import pytest

from pwlinear.data.constants import ErrorMessages, ProcessingConstants


class TestProcessingConstants:
    """Test cases for ProcessingConstants."""
    def test_values(self):
        """Test the constant values."""
        assert ProcessingConstants.MIN_INFLECTION_POINTS == 2
        assert 0 < ProcessingConstants.DEFAULT_ABSOLUTE_TOLERANCE < ProcessingConstants.DEFAULT_TOLERANCE

    def test_immutable(self):
        """Test that instances cannot be modified."""
        constants = ProcessingConstants()
        with pytest.raises(FrozenInstanceError):
            constants.MIN_INFLECTION_POINTS = 3


class TestErrorMessages:
    """Test cases for ErrorMessages templates."""
    def test_outside_domain(self):
        """Test formatting of the out of domain message."""
        message = ErrorMessages.OUTSIDE_DOMAIN.format(x=3, lower=0, upper=2)
        assert message == "x=3 is outside the function domain [0, 2]"

    def test_insufficient_points(self):
        """Test formatting of the insufficient points message."""
        message = ErrorMessages.INSUFFICIENT_POINTS.format(count=1, min_points=2)
        assert "(1)" in message and "2" in message

    def test_input_shape_messages(self):
        """Test formatting of the iterable and dimension messages."""
        assert ErrorMessages.NON_ITERABLE_COORDINATES.format(type_name="int") == "Coordinates must be iterable, got int"
        message = ErrorMessages.NOT_ONE_DIMENSIONAL.format(x_shape=(2, 2), y_shape=(2,))
        assert message == "Expected one-dimensional arrays, got shapes (2, 2) and (2,)"
