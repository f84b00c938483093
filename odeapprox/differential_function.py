from __future__ import annotations

from typing import Callable

import numpy as np
import sympy as sp

ExactSolution = Callable[[float], float]
Derivative = Callable[[float, float], float]


class ArityError(TypeError):
    """
    Raised when a function of a differential function pair is invoked with
    the wrong number of arguments.
    """


class DifferentialFunction:
    """
    A pair of functions describing a first order ordinary differential
    equation y'(x) = f(x, y) along with its exact solution y(x).
    """

    def __init__(self, exact: ExactSolution, derivative: Derivative):
        """
        :param exact: the exact solution y(x) of the differential equation
        :param derivative: the right-hand side f(x, y) of the differential
            equation
        """
        if not callable(exact):
            raise TypeError("exact solution must be callable")
        if not callable(derivative):
            raise TypeError("derivative must be callable")

        self._exact = exact
        self._derivative = derivative

    @classmethod
    def from_expressions(
        cls, exact: str, derivative: str
    ) -> DifferentialFunction:
        """
        Creates a differential function from symbolic expressions of x (the
        exact solution) and of x and y (the derivative).

        :param exact: the expression of the exact solution in terms of x
        :param derivative: the expression of y' in terms of x and y
        :return: the differential function
        """
        x, y = sp.symbols("x y")
        exact_lambda = sp.lambdify([x], sp.sympify(exact), "numpy")
        derivative_lambda = sp.lambdify(
            [x, y], sp.sympify(derivative), "numpy"
        )

        def _exact(_x: float) -> float:
            return float(np.asarray(exact_lambda(_x)))

        def _derivative(_x: float, _y: float) -> float:
            return float(np.asarray(derivative_lambda(_x, _y)))

        return cls(_exact, _derivative)

    def exact(self, *args: float) -> float:
        """
        Returns the value of the exact solution y(x).

        :param args: the single argument x
        :return: y(x)
        """
        if len(args) != 1:
            raise ArityError(
                f"exact solution takes exactly 1 argument ({len(args)} given)"
            )
        return self._exact(*args)

    def derivative(self, *args: float) -> float:
        """
        Returns the value of y'(x) = f(x, y).

        :param args: the two arguments x and y
        :return: f(x, y)
        """
        if len(args) != 2:
            raise ArityError(
                f"derivative takes exactly 2 arguments ({len(args)} given)"
            )
        return self._derivative(*args)
