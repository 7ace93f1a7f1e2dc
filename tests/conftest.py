"""Shared pytest fixtures for pwlinear tests."""
import pytest

from pwlinear.core.function import PiecewiseLinearFunction


@pytest.fixture
def tent():
    """Tent function over [0, 2] peaking at (1, 1)."""
    return PiecewiseLinearFunction([(0, 0), (1, 1), (2, 0)])


@pytest.fixture
def flat_one():
    """Constant 1 over [0, 2]."""
    return PiecewiseLinearFunction([(0, 1), (2, 1)])


@pytest.fixture
def ramp():
    """Increasing function over [0., 2.] with a slope change at x=1."""
    return PiecewiseLinearFunction([(0., 0.), (1., 1.), (2., 1.5)])


@pytest.fixture
def steep():
    """Increasing function over [0., 2.] with a slope change at x=1.5."""
    return PiecewiseLinearFunction([(0., 0.), (1.5, 3.), (2., 10.)])


@pytest.fixture
def decreasing():
    """Line from (0, 1) to (1, 0)."""
    return PiecewiseLinearFunction([(0., 1.), (1., 0.)])


@pytest.fixture
def increasing():
    """Line from (0, 0) to (1, 1)."""
    return PiecewiseLinearFunction([(0., 0.), (1., 1.)])
