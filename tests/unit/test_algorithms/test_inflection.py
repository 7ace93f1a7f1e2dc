"""Unit tests for the merge of points of inflection."""
import pytest

from pwlinear.algorithms.inflection import PointsOfInflectionIterator, points_of_inflection_iter
from pwlinear.core.exceptions import DomainError
from pwlinear.core.function import PiecewiseLinearFunction


class TestPointsOfInflectionIter:
    """Test cases for points_of_inflection_iter."""
    def test_tent_and_constant(self, tent, flat_one):
        """Test merging with a function without interior points."""
        assert list(points_of_inflection_iter([tent, flat_one])) == [
            (0, [0, 1]), (1, [1, 1]), (2, [0, 1])]

    def test_interleaved_points(self, ramp, steep):
        """Test that values are interpolated at the other function's points."""
        assert list(ramp.points_of_inflection_iter(steep)) == [
            (0., [0., 0.]), (1., [1., 2.]), (1.5, [1.25, 3.]), (2., [1.5, 10.])]

    def test_shared_abscissa_emitted_once(self, tent):
        """Test that an abscissa shared by several functions appears once."""
        g = PiecewiseLinearFunction([(0, 0), (1, 5), (2, 0)])
        assert [x for x, _ in points_of_inflection_iter([tent, g, tent])] == [0, 1, 2]

    def test_three_functions(self, tent, flat_one):
        """Test merging more than two functions."""
        h = PiecewiseLinearFunction([(0., 2.), (0.5, 0.), (2., 3.)])
        merged = list(points_of_inflection_iter([tent, flat_one, h]))
        assert [x for x, _ in merged] == [0, 0.5, 1, 2]
        assert merged[1] == (0.5, [0.5, 1., 0.])
        assert merged[2] == (1, [1, 1, 1.])

    def test_single_function(self, ramp):
        """Test that a single function yields its own points."""
        assert list(points_of_inflection_iter([ramp])) == [(p.x, [p.y]) for p in ramp.coordinates]

    def test_strictly_increasing_and_bounded(self, ramp, steep, tent):
        """Test ordering and the bound on the number of steps."""
        functions = [ramp, steep, tent]
        xs = [x for x, _ in points_of_inflection_iter(functions)]
        assert all(a < b for a, b in zip(xs, xs[1:]))
        assert len(xs) <= sum(len(f) for f in functions)
        assert xs[0] == 0 and xs[-1] == 2

    def test_iterator_protocol(self, tent, flat_one):
        """Test that the iterator is lazy and single pass."""
        merged = points_of_inflection_iter([tent, flat_one])
        assert isinstance(merged, PointsOfInflectionIterator)
        assert iter(merged) is merged
        assert next(merged) == (0, [0, 1])
        assert len(list(merged)) == 2
        with pytest.raises(StopIteration):
            next(merged)

    def test_accepts_generator(self, tent, flat_one):
        """Test that any iterable of functions is accepted."""
        merged = points_of_inflection_iter(f for f in (tent, flat_one))
        assert len(list(merged)) == 3

    def test_domain_mismatch(self, tent):
        """Test that functions over different domains are rejected."""
        other = PiecewiseLinearFunction([(0, 0), (3, 0)])
        with pytest.raises(DomainError, match="do not share the same domain"):
            points_of_inflection_iter([tent, other])

    def test_no_functions(self):
        """Test that an empty collection is rejected."""
        with pytest.raises(DomainError, match="At least one function"):
            points_of_inflection_iter([])
