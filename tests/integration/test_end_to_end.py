"""End-to-end integration tests."""
import numpy as np
import pytest
import sympy as sp

from pwlinear import (
    DomainError, ExpandDomainStrategy, PiecewiseLinearFunction, max_functions, min_functions, sum_functions
)


class TestEndToEnd:
    """End-to-end integration tests."""
    def test_align_domains_then_combine(self):
        """Test combining functions defined over different domains after expanding them."""
        f = PiecewiseLinearFunction([(0, 0), (2, 2)])
        g = PiecewiseLinearFunction([(1, 3), (3, 1)])
        with pytest.raises(DomainError):
            f + g
        f = f.expand_domain((0, 3), ExpandDomainStrategy.EXTEND_VALUE)
        g = g.expand_domain((0, 3), ExpandDomainStrategy.EXTEND_VALUE)
        total = f + g
        assert total.to_tuples() == [(0, 3), (1, 4), (2, 4), (3, 3)]
        assert total.integrate() == f.integrate() + g.integrate() == 11
        upper = f.max(g)
        assert upper.to_tuples() == [(0, 3), (1, 3), (2, 2), (3, 2)]
        assert upper.integrate() == 7.5

    def test_envelopes_bracket_sum_average(self, ramp, steep, tent):
        """Test that the mean of several functions lies between their envelopes."""
        functions = [ramp, steep, tent]
        total = sum_functions(functions)
        lower = min_functions(functions)
        upper = max_functions(functions)
        xs = np.linspace(0, 2, 101)
        mean = total.sample(xs) / len(functions)
        assert np.all(lower.sample(xs) <= mean + 1e-12)
        assert np.all(mean <= upper.sample(xs) + 1e-12)

    def test_difference_abs_integral_is_l1_distance(self, decreasing, increasing):
        """Test the L1 distance between two crossing lines."""
        distance = abs(decreasing - increasing).integrate()
        assert distance == pytest.approx(0.5)

    def test_symbolic_and_numeric_agree(self, steep):
        """Test that the SymPy expression matches numeric sampling."""
        x = sp.Symbol('x')
        expression = steep.shrink_domain((0.5, 1.8)).to_piecewise(x)
        evaluate = sp.lambdify(x, expression, modules='numpy')
        xs = np.linspace(0.5, 1.8, 14)
        np.testing.assert_allclose([float(evaluate(value)) for value in xs], steep.sample(xs))
