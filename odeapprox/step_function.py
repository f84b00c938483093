from enum import Enum
from typing import Callable, NamedTuple

from odeapprox.differential_function import Derivative


class Point(NamedTuple):
    """
    A single sample (x, y) of a solution.
    """

    x: float
    y: float


StepFunction = Callable[[Derivative, float, float, float], Point]


def euler_step(derivative: Derivative, x: float, y: float, h: float) -> Point:
    """
    Takes a step using the explicit Euler method, a first order method.

    :param derivative: the function returning y' given x and y
    :param x: the current value of x
    :param y: the value of y(x)
    :param h: the step size
    :return: the estimate of the point (x + h, y(x + h))
    """
    return Point(x + h, y + h * derivative(x, y))


def heun_step(derivative: Derivative, x: float, y: float, h: float) -> Point:
    """
    Takes a step using Heun's (improved Euler) method, a second order
    predictor-corrector method.

    :param derivative: the function returning y' given x and y
    :param x: the current value of x
    :param y: the value of y(x)
    :param h: the step size
    :return: the estimate of the point (x + h, y(x + h))
    """
    k1 = derivative(x, y)
    k2 = derivative(x + h, y + h * k1)
    return Point(x + h, y + h / 2.0 * (k1 + k2))


def rk4_step(derivative: Derivative, x: float, y: float, h: float) -> Point:
    """
    Takes a step using the classical fourth order Runge-Kutta method.

    :param derivative: the function returning y' given x and y
    :param x: the current value of x
    :param y: the value of y(x)
    :param h: the step size
    :return: the estimate of the point (x + h, y(x + h))
    """
    half_h = h / 2.0
    k1 = h * derivative(x, y)
    k2 = h * derivative(x + half_h, y + k1 / 2.0)
    k3 = h * derivative(x + half_h, y + k2 / 2.0)
    k4 = h * derivative(x + h, y + k3)
    return Point(x + h, y + (k1 + 2.0 * k2 + 2.0 * k3 + k4) / 6.0)


class Method(Enum):
    """
    An enumeration of the available single step methods.
    """

    EULER = "euler"
    HEUN = "heun"
    RK4 = "rk4"

    @property
    def step(self) -> StepFunction:
        """
        The step function implementing the method.
        """
        return _STEP_FUNCTIONS[self]

    @property
    def order(self) -> int:
        """
        The order of accuracy of the method.
        """
        return _ORDERS[self]

    @property
    def label(self) -> str:
        """
        The human readable name of the method.
        """
        return _LABELS[self]


_STEP_FUNCTIONS = {
    Method.EULER: euler_step,
    Method.HEUN: heun_step,
    Method.RK4: rk4_step,
}

_ORDERS = {
    Method.EULER: 1,
    Method.HEUN: 2,
    Method.RK4: 4,
}

_LABELS = {
    Method.EULER: "Euler",
    Method.HEUN: "Improved Euler",
    Method.RK4: "Runge-Kutta",
}
