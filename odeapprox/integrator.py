import numpy as np

from odeapprox.config import Config
from odeapprox.differential_function import Derivative, ExactSolution
from odeapprox.step_function import StepFunction
from odeapprox.trajectory import Trajectory

# Fraction of a step by which the domain length may exceed a whole number of
# steps without requiring an extra step.
DRIFT_TOLERANCE = 1e-9


def step_count(config: Config) -> int:
    """
    Returns the number of steps needed for x to reach the right endpoint of
    the domain.

    :param config: the domain and the step size
    :return: the number of steps; 0 if the step size is 0
    """
    if config.h == 0.0:
        return 0

    return int(
        np.ceil((config.x_end - config.x_0) / config.h - DRIFT_TOLERANCE)
    )


def discretize_domain(config: Config) -> np.ndarray:
    """
    Returns the x coordinates visited by the integrator.

    :param config: the domain and the step size
    :return: the array containing the discretized domain
    """
    if config.h == 0.0:
        return np.empty(0)

    return config.x_0 + config.h * np.arange(step_count(config) + 1)


def integrate(
    step_function: StepFunction, derivative: Derivative, config: Config
) -> Trajectory:
    """
    Approximates the solution of y' = f(x, y) over the domain of the config
    by repeatedly applying the step function starting from (x_0, y_0) until
    x reaches the right endpoint of the domain.

    The last point overshoots the right endpoint by less than the step size
    if the length of the domain is not a multiple of the step size. If the
    step size is 0, the trajectory is empty. Non-finite values returned by
    the derivative are propagated as they are.

    :param step_function: the single step method to use
    :param derivative: the function returning y' given x and y
    :param config: the initial point, the domain, and the step size
    :return: the approximate solution
    """
    x = discretize_domain(config)
    y = np.empty(len(x))
    if not len(x):
        return Trajectory(x, y)

    h = config.h
    y[0] = config.y_0
    for i in range(len(x) - 1):
        y[i + 1] = step_function(derivative, float(x[i]), float(y[i]), h).y

    return Trajectory(x, y)


def exact_trajectory(exact: ExactSolution, config: Config) -> Trajectory:
    """
    Evaluates the exact solution over the discretized domain.

    :param exact: the exact solution y(x)
    :param config: the domain and the step size
    :return: the exact solution at each point of the discretized domain
    """
    x = discretize_domain(config)
    return Trajectory(x, np.array([exact(float(x_i)) for x_i in x]))
