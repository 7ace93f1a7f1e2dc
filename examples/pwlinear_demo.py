"""Demonstration script for piecewise linear function operations."""
import logging

import numpy as np
import sympy as sp

from pwlinear import DomainError, ExpandDomainStrategy, PiecewiseLinearFunction, max_functions, sum_functions


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )
    # Set to DEBUG to trace every construction and merge
    logging.getLogger('pwlinear').setLevel(logging.INFO)


def print_function(name, f):
    print(f"{name:<12}: {f.to_tuples()}")
    print(f"{' ' * 12}  domain={f.domain()}, integral={f.integrate()}")


def demonstrate_piecewise_linear_functions():
    """Demonstrate evaluation, combinators and domain operations."""
    setup_logging()
    tent = PiecewiseLinearFunction([(0., 0.), (1., 1.), (2., 0.)])
    ramp = PiecewiseLinearFunction([(0., 0.), (1.5, 3.), (2., 10.)])
    flat = PiecewiseLinearFunction.constant((0., 2.), 0.75)

    print(f"\n{'=' * 80}")
    print("FUNCTIONS")
    print(f"{'=' * 80}")
    for name, f in (("tent", tent), ("ramp", ramp), ("flat", flat)):
        print_function(name, f)

    print(f"\n{'=' * 80}")
    print("EVALUATION")
    print(f"{'=' * 80}")
    xs = np.linspace(0., 2., 5)
    print(f"xs          : {xs}")
    print(f"tent(xs)    : {tent.sample(xs)}")
    print(f"ramp(1.25)  : {ramp(1.25)}")
    try:
        tent(2.5)
    except DomainError as e:
        print(f"tent(2.5)   : DomainError: {e}")

    print(f"\n{'=' * 80}")
    print("JOINT POINTS OF INFLECTION")
    print(f"{'=' * 80}")
    for x, values in tent.points_of_inflection_iter(ramp):
        print(f"x={x:<6} values={values}")

    print(f"\n{'=' * 80}")
    print("COMBINATORS")
    print(f"{'=' * 80}")
    print_function("sum", sum_functions([tent, ramp, flat]))
    print_function("tent - flat", tent - flat)
    print_function("max", max_functions([tent, flat]))
    print_function("min", tent.min(flat))
    print_function("|tent-flat|", abs(tent - flat))

    print(f"\n{'=' * 80}")
    print("DOMAIN OPERATIONS")
    print(f"{'=' * 80}")
    print_function("shrunk", tent.shrink_domain((0.5, 1.5)))
    for strategy in ExpandDomainStrategy:
        print_function(strategy.value, ramp.expand_domain((-1., 3.), strategy))

    print(f"\n{'=' * 80}")
    print("SYMBOLIC FORM")
    print(f"{'=' * 80}")
    x = sp.Symbol('x')
    print(tent.to_piecewise(x))


if __name__ == "__main__":
    demonstrate_piecewise_linear_functions()
